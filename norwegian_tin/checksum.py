from __future__ import annotations
from collections.abc import Sequence
from .errors import InvalidChecksumError

# Mod-11 weights for the organisation number (Enhetsregisteret): 8 digits + 1 check digit.
ORG_WEIGHTS: tuple[int, ...] = (3, 2, 7, 6, 5, 4, 3, 2)
# Personal numbers carry two check digits (k1 at index 9, k2 at index 10).
FIRST_WEIGHTS: tuple[int, ...] = (3, 7, 6, 1, 8, 9, 4, 5, 2)
SECOND_WEIGHTS: tuple[int, ...] = (5, 4, 3, 2, 7, 6, 5, 4, 3, 2)

# Since the 2032 numbering extension k1 may take any of four values for the
# same base digits, so the first pass accepts remainders 0-3 instead of 0.
_FIRST_PASS_WINDOW = range(0, 4)


def weighted_remainder(digits: Sequence[int], weights: Sequence[int]) -> int:
    """Sum of pairwise products, modulo 11."""
    return sum(w * d for w, d in zip(weights, digits)) % 11


def org_check_digit(digits: Sequence[int]) -> int | None:
    """Return the check digit for the first 8 digits, or None if none exists."""
    check = (11 - weighted_remainder(digits[:8], ORG_WEIGHTS)) % 11
    if check == 10:
        return None  # no digit can satisfy remainder 1
    return check


def check_org_number(digits: Sequence[int]) -> None:
    expected = org_check_digit(digits)
    if expected is None or expected != digits[8]:
        raise InvalidChecksumError()


def check_person_number(digits: Sequence[int]) -> None:
    """Validate both check digits of an 11-digit personal number.

    Either failing pass raises the same InvalidChecksumError.
    """
    first = weighted_remainder(digits[:9], FIRST_WEIGHTS)
    if (first + digits[9]) % 11 not in _FIRST_PASS_WINDOW:
        raise InvalidChecksumError()
    second = weighted_remainder(digits[:10], SECOND_WEIGHTS)
    if (second + digits[10]) % 11 != 0:
        raise InvalidChecksumError()
