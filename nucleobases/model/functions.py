"""
    functions.py
    The Nucleobase operations as plain functions.
"""
from .nucleobase import Nucleobase


is_purine = Nucleobase.is_purine
is_pyrimidine = Nucleobase.is_pyrimidine
is_amine = Nucleobase.is_amine
is_ketone = Nucleobase.is_ketone
is_ribonucleotide_base = Nucleobase.is_ribonucleotide_base
is_deoxyribonucleotide_base = Nucleobase.is_deoxyribonucleotide_base
is_rna_base = Nucleobase.is_rna_base
is_dna_base = Nucleobase.is_dna_base

letter_code = Nucleobase.letter_code
from_letter_code = Nucleobase.from_letter_code
parse_nucleobase = Nucleobase.parse_from_str

to_deoxyribonucleotide_complement = Nucleobase.to_deoxyribonucleotide_complement
to_ribonucleotide_complement = Nucleobase.to_ribonucleotide_complement
to_dna_complement = Nucleobase.to_dna_complement
to_rna_complement = Nucleobase.to_rna_complement


def are_complementary(x: Nucleobase, y: Nucleobase) -> bool:
    return x.is_complementary_to(y)
