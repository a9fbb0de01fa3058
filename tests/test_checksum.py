from __future__ import annotations
import pytest
from norwegian_tin.checksum import (
    ORG_WEIGHTS,
    check_org_number,
    check_person_number,
    org_check_digit,
    weighted_remainder,
)
from norwegian_tin.errors import InvalidChecksumError


def _digits(value: str) -> tuple[int, ...]:
    return tuple(int(ch) for ch in value)


def test_weighted_remainder() -> None:
    # 27+0+35+36+30+4+24+6 = 162 = 14 * 11 + 8
    assert weighted_remainder(_digits("90566183"), ORG_WEIGHTS) == 8


def test_org_check_digit() -> None:
    assert org_check_digit(_digits("90566183")) == 3
    assert org_check_digit(_digits("00000000")) == 0


def test_org_check_digit_missing() -> None:
    assert org_check_digit(_digits("40000000")) is None


def test_check_org_number() -> None:
    check_org_number(_digits("905661833"))
    with pytest.raises(InvalidChecksumError):
        check_org_number(_digits("905661834"))


def test_first_pass_window() -> None:
    for k1, k2 in [(0, 0), (1, 9), (2, 7), (3, 5)]:
        check_person_number(_digits(f"110100000{k1}{k2}"))


def test_first_pass_outside_window() -> None:
    # k1 = 4 leaves remainder 4; no k2 can rescue it
    for k2 in range(10):
        with pytest.raises(InvalidChecksumError):
            check_person_number(_digits(f"1101000004{k2}"))


def test_second_pass_exact() -> None:
    check_person_number(_digits("16057902284"))
    with pytest.raises(InvalidChecksumError):
        check_person_number(_digits("16057902285"))
