from .model import *
from .util import NucleobaseDtype, map_nucleobase_to_byte, map_byte_to_nucleobase
