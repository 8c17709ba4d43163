import pytest

from nucleobases import *


def test_letter_codes():
    assert [letter_code(b) for b in Nucleobase] == ["A", "C", "G", "T", "U"]
    assert len({b.letter_code() for b in Nucleobase}) == 5


def test_letter_code_round_trip():
    for b in Nucleobase:
        assert from_letter_code(letter_code(b)) == b
        assert Nucleobase.from_letter_code(b.letter_code()) == b


def test_letter_code_case_insensitive():
    assert Nucleobase.from_letter_code('a') == Nucleobase.ADENINE
    assert Nucleobase.from_letter_code('A') == Nucleobase.ADENINE
    assert Nucleobase.from_letter_code('c') == Nucleobase.CYTOSINE
    assert Nucleobase.from_letter_code('C') == Nucleobase.CYTOSINE
    assert Nucleobase.from_letter_code('g') == Nucleobase.GUANINE
    assert Nucleobase.from_letter_code('G') == Nucleobase.GUANINE
    assert Nucleobase.from_letter_code('t') == Nucleobase.THYMINE
    assert Nucleobase.from_letter_code('T') == Nucleobase.THYMINE
    assert Nucleobase.from_letter_code('u') == Nucleobase.URACIL
    assert Nucleobase.from_letter_code('U') == Nucleobase.URACIL


def test_unknown_letter_codes():
    assert Nucleobase.from_letter_code('n') is None
    assert Nucleobase.from_letter_code('N') is None
    assert Nucleobase.from_letter_code('⻇') is None
    assert Nucleobase.from_letter_code('-') is None
    assert Nucleobase.from_letter_code('') is None
    assert Nucleobase.from_letter_code('AT') is None


def test_parse():
    assert parse_nucleobase("A") == Nucleobase.ADENINE
    assert parse_nucleobase("u") == Nucleobase.URACIL
    assert Nucleobase.parse_from_str("g") == Nucleobase.GUANINE


def test_parse_string_length():
    with pytest.raises(StringLengthError) as e:
        parse_nucleobase("")
    assert e.value.token == ""
    assert str(e.value) == "cannot convert string of length greater than 1 character into a single nucleobase"

    with pytest.raises(StringLengthError) as e:
        parse_nucleobase("AT")
    assert e.value.token == "AT"


def test_parse_invalid_character():
    with pytest.raises(InvalidCharacterError) as e:
        parse_nucleobase("N")
    assert e.value.character == "N"
    assert str(e.value) == "invalid character: cannot convert N into a nucleobase"


def test_conversion_errors_are_value_errors():
    for token in ["", "AT", "N", "x"]:
        with pytest.raises(NucleobaseConversionError):
            parse_nucleobase(token)
        with pytest.raises(ValueError):
            parse_nucleobase(token)


def test_deoxyribonucleotide_complement():
    assert to_deoxyribonucleotide_complement(Nucleobase.ADENINE) == Nucleobase.THYMINE
    assert to_deoxyribonucleotide_complement(Nucleobase.THYMINE) == Nucleobase.ADENINE
    assert to_deoxyribonucleotide_complement(Nucleobase.CYTOSINE) == Nucleobase.GUANINE
    assert to_deoxyribonucleotide_complement(Nucleobase.GUANINE) == Nucleobase.CYTOSINE
    assert to_deoxyribonucleotide_complement(Nucleobase.URACIL) == Nucleobase.ADENINE
    for b in Nucleobase:
        assert b.to_dna_complement() == to_deoxyribonucleotide_complement(b)


def test_ribonucleotide_complement_matches_dna():
    # Documented quirk: the RNA complement of ADENINE is THYMINE, not URACIL.
    assert to_ribonucleotide_complement(Nucleobase.ADENINE) == Nucleobase.THYMINE
    assert to_rna_complement(Nucleobase.URACIL) == Nucleobase.ADENINE
    for b in Nucleobase:
        assert to_ribonucleotide_complement(b) == to_deoxyribonucleotide_complement(b)
        assert b.to_rna_complement() == b.to_ribonucleotide_complement()


def test_complement_is_complementary():
    for b in Nucleobase:
        assert are_complementary(b, b.to_dna_complement())
