"""
    nucleobase.py
    The five nucleobases (A/C/G/T/U), with structural classifications and letter-code conversions.
"""
from enum import Enum
from functools import total_ordering
from typing import Dict, Optional

from .errors import InvalidCharacterError, StringLengthError


@total_ordering
class Nucleobase(Enum):
    ADENINE = 0
    CYTOSINE = 1
    GUANINE = 2
    THYMINE = 3
    URACIL = 4

    def __lt__(self, other):
        if not isinstance(other, Nucleobase):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return self.letter_code()

    @property
    def full_name(self) -> str:
        return self.name.capitalize()

    # ================ Classification.
    def is_purine(self) -> bool:
        return _purines[self]

    def is_pyrimidine(self) -> bool:
        return not _purines[self]

    def is_amine(self) -> bool:
        return _amines[self]

    def is_ketone(self) -> bool:
        return not _amines[self]

    def is_ribonucleotide_base(self) -> bool:
        return _ribonucleotide_bases[self]

    def is_deoxyribonucleotide_base(self) -> bool:
        return _deoxyribonucleotide_bases[self]

    is_rna_base = is_ribonucleotide_base
    is_dna_base = is_deoxyribonucleotide_base

    def is_complementary_to(self, other: 'Nucleobase') -> bool:
        """
        Watson-Crick pairing, decided structurally: a purine pairs with a pyrimidine, and an amine with a ketone.
        Under this rule both THYMINE and URACIL pair with ADENINE, but not with each other.
        """
        return self.is_purine() != other.is_purine() and self.is_amine() != other.is_amine()

    # ================ Complements.
    def to_deoxyribonucleotide_complement(self) -> 'Nucleobase':
        return _complement_translation[self]

    def to_ribonucleotide_complement(self) -> 'Nucleobase':
        """
        Identical to the deoxyribonucleotide complement: ADENINE maps to THYMINE (not URACIL),
        and URACIL maps to ADENINE.
        """
        return _complement_translation[self]

    to_dna_complement = to_deoxyribonucleotide_complement
    to_rna_complement = to_ribonucleotide_complement

    # ================ Letter codes.
    def letter_code(self) -> str:
        return _nucleobase_to_letter[self]

    @staticmethod
    def from_letter_code(letter_code: str) -> Optional['Nucleobase']:
        return _letter_to_nucleobase.get(letter_code)

    @staticmethod
    def parse_from_str(token: str) -> 'Nucleobase':
        if len(token) != 1:
            raise StringLengthError(token)
        nucleobase = Nucleobase.from_letter_code(token)
        if nucleobase is None:
            raise InvalidCharacterError(token)
        return nucleobase


# ================================= Lookup tables (one entry per base).
_purines: Dict[Nucleobase, bool] = {
    Nucleobase.ADENINE: True,
    Nucleobase.CYTOSINE: False,
    Nucleobase.GUANINE: True,
    Nucleobase.THYMINE: False,
    Nucleobase.URACIL: False
}

_amines: Dict[Nucleobase, bool] = {
    Nucleobase.ADENINE: True,
    Nucleobase.CYTOSINE: True,
    Nucleobase.GUANINE: False,
    Nucleobase.THYMINE: False,
    Nucleobase.URACIL: False
}

_ribonucleotide_bases: Dict[Nucleobase, bool] = {
    Nucleobase.ADENINE: True,
    Nucleobase.CYTOSINE: True,
    Nucleobase.GUANINE: True,
    Nucleobase.THYMINE: False,
    Nucleobase.URACIL: True
}

_deoxyribonucleotide_bases: Dict[Nucleobase, bool] = {
    Nucleobase.ADENINE: True,
    Nucleobase.CYTOSINE: True,
    Nucleobase.GUANINE: True,
    Nucleobase.THYMINE: True,
    Nucleobase.URACIL: False
}

# URACIL has no DNA counterpart; it is routed to ADENINE by both complement operations.
_complement_translation: Dict[Nucleobase, Nucleobase] = {
    Nucleobase.ADENINE: Nucleobase.THYMINE,
    Nucleobase.THYMINE: Nucleobase.ADENINE,
    Nucleobase.GUANINE: Nucleobase.CYTOSINE,
    Nucleobase.CYTOSINE: Nucleobase.GUANINE,
    Nucleobase.URACIL: Nucleobase.ADENINE
}

_nucleobase_to_letter: Dict[Nucleobase, str] = {
    Nucleobase.ADENINE: "A",
    Nucleobase.CYTOSINE: "C",
    Nucleobase.GUANINE: "G",
    Nucleobase.THYMINE: "T",
    Nucleobase.URACIL: "U"
}

_letter_to_nucleobase: Dict[str, Nucleobase] = {
    "A": Nucleobase.ADENINE,
    "a": Nucleobase.ADENINE,
    "C": Nucleobase.CYTOSINE,
    "c": Nucleobase.CYTOSINE,
    "G": Nucleobase.GUANINE,
    "g": Nucleobase.GUANINE,
    "T": Nucleobase.THYMINE,
    "t": Nucleobase.THYMINE,
    "U": Nucleobase.URACIL,
    "u": Nucleobase.URACIL
}
