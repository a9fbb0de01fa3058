from __future__ import annotations
import pytest
from norwegian_tin import (
    DNumber,
    FNumber,
    InvalidChecksumError,
    InvalidDateError,
    InvalidLengthError,
    NonNumericValueError,
    NorwegianTin,
    OrgNumber,
    Organization,
    PersonCategory,
    PersonNumber,
    TinKind,
    parse,
)


def test_masked_ordinary() -> None:
    tin = parse("16057902284")
    assert str(tin) == "160579*****"
    assert tin.masked() == "160579*****"


def test_masked_with_category_label() -> None:
    assert str(parse("22517149261")) == " (H-Number) 225171*****"
    assert str(parse("08639815316")) == " (Anonymous) 086398*****"
    assert str(parse("70887100797")) == " (Synthetic) 708871*****"


def test_masked_org_number() -> None:
    assert str(parse("905661833")) == "905661*****"


def test_value_is_canonical_string() -> None:
    assert parse("16057902284").value == "16057902284"
    assert parse("003221571").value == "003221571"


def test_bytes_are_digit_values() -> None:
    assert bytes(parse("905661833")) == bytes([9, 0, 5, 6, 6, 1, 8, 3, 3])


def test_digits() -> None:
    tin = parse("16057902284")
    assert tin.digits == (1, 6, 0, 5, 7, 9, 0, 2, 2, 8, 4)


def test_kind() -> None:
    assert parse("16057902284").kind == TinKind.F_NUMBER
    assert parse("70887100797").kind == TinKind.D_NUMBER
    assert parse("905661833").kind == TinKind.ORG_NUMBER


def test_org_number_is_not_a_test_id() -> None:
    tin = parse("905661833")
    assert tin.category == PersonCategory.NORMAL
    assert tin.is_test_id is False


def test_variants_are_distinct() -> None:
    d_number = parse("41010000023")
    assert isinstance(d_number, DNumber)
    assert d_number != parse("11010000000")
    assert parse("16057902284") != parse("905661833")


def test_immutable() -> None:
    tin = parse("905661833")
    assert isinstance(tin, Organization)
    with pytest.raises(AttributeError):
        tin.org = OrgNumber(digits=(0,) * 9)  # type: ignore[misc]


def test_hashable() -> None:
    assert len({parse("16057902284"), parse("16057902284")}) == 1


def test_category_properties() -> None:
    assert PersonCategory.NORMAL.month_offset == 0
    assert PersonCategory.H_NUMBER.month_offset == 40
    assert PersonCategory.ANONYMOUS.month_offset == 60
    assert PersonCategory.SYNTHETIC.month_offset == 80
    assert PersonCategory.SYNTHETIC.base_month(88) == 8
    assert PersonCategory.NORMAL.label == ""
    assert PersonCategory.NORMAL.is_test_id is False
    assert PersonCategory.H_NUMBER.is_test_id is True


def _digits(value: str) -> tuple[int, ...]:
    return tuple(int(ch) for ch in value)


def test_direct_construction_is_validated() -> None:
    person = PersonNumber(digits=_digits("22517149261"))
    assert person.category == PersonCategory.H_NUMBER
    assert FNumber(person) == parse("22517149261")
    assert Organization(OrgNumber(digits=_digits("905661833"))) == parse("905661833")


def test_direct_construction_with_invalid_date() -> None:
    # Day 0 / month 0 passes both checksums but is not a date
    with pytest.raises(InvalidDateError):
        PersonNumber(digits=(0,) * 11)


def test_direct_construction_with_bad_checksum() -> None:
    with pytest.raises(InvalidChecksumError):
        PersonNumber(digits=_digits("16057902285"))
    with pytest.raises(InvalidChecksumError):
        OrgNumber(digits=_digits("905661834"))


def test_direct_construction_with_bad_digits() -> None:
    with pytest.raises(InvalidLengthError):
        PersonNumber(digits=_digits("905661833"))
    with pytest.raises(InvalidLengthError):
        OrgNumber(digits=_digits("16057902284"))
    with pytest.raises(NonNumericValueError):
        OrgNumber(digits=(9, 0, 5, 6, 6, 1, 8, 3, 13))


def test_variant_must_match_day_band() -> None:
    with pytest.raises(InvalidDateError):
        FNumber(PersonNumber(digits=_digits("70887100797")))
    with pytest.raises(InvalidDateError):
        DNumber(PersonNumber(digits=_digits("16057902284")))


def test_base_class_is_abstract() -> None:
    with pytest.raises(TypeError):
        NorwegianTin()  # type: ignore[abstract]
