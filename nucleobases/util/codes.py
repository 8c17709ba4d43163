"""
    codes.py
    Integer (byte) encoding of individual nucleobases, indexed in enumeration order.
"""
from typing import List, Optional
import numpy as np

from nucleobases.model import Nucleobase

# ================================= Constants.
NucleobaseDtype = np.ubyte

_nucleobase_to_byte = {
    Nucleobase.ADENINE: 0,
    Nucleobase.CYTOSINE: 1,
    Nucleobase.GUANINE: 2,
    Nucleobase.THYMINE: 3,
    Nucleobase.URACIL: 4
}
_byte_to_nucleobase: List[Nucleobase] = [
    Nucleobase.ADENINE,
    Nucleobase.CYTOSINE,
    Nucleobase.GUANINE,
    Nucleobase.THYMINE,
    Nucleobase.URACIL
]


# ================================= Function definitions.
def map_nucleobase_to_byte(nucleobase: Nucleobase) -> np.ubyte:
    return NucleobaseDtype(_nucleobase_to_byte[nucleobase])


def map_byte_to_nucleobase(code: int) -> Optional[Nucleobase]:
    """
    Inverse of map_nucleobase_to_byte. Returns None for any code that is not an integer in 0..4.
    """
    if code != int(code) or not 0 <= code < len(_byte_to_nucleobase):
        return None
    return _byte_to_nucleobase[int(code)]
