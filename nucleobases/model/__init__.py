from .nucleobase import Nucleobase
from .errors import NucleobaseConversionError, InvalidCharacterError, StringLengthError
from .functions import *
