from __future__ import annotations
from collections.abc import Sequence
from .errors import InvalidDateError

D_NUMBER_DAY_OFFSET = 40

_THIRTY_DAY_MONTHS = {4, 6, 9, 11}


def days_in_month(month: int, year: int) -> int:
    # The century is unknown, so only the plain mod-4 leap rule applies.
    if month == 2:
        return 29 if year % 4 == 0 else 28
    if month in _THIRTY_DAY_MONTHS:
        return 30
    return 31


def is_valid_date(day: int, month: int, year: int) -> bool:
    """Return True if day/month exist for the two-digit year (00-99)."""
    if not 1 <= month <= 12 or day < 1 or not 0 <= year < 100:
        return False
    return day <= days_in_month(month, year)


def check_birth_date(digits: Sequence[int], month_offset: int) -> bool:
    """Validate the DDMMYY field of a personal number.

    Returns True for a D-number (day tens digit 4-7, day stored + 40) and
    False for an F-number (day tens digit 0-3). Raises InvalidDateError for
    day tens digits 8/9 or a day that does not exist.
    """
    day = digits[0] * 10 + digits[1]
    month = digits[2] * 10 + digits[3] - month_offset
    year = digits[4] * 10 + digits[5]

    if digits[0] <= 3:
        is_d_number = False
    elif digits[0] <= 7:
        is_d_number = True
        day -= D_NUMBER_DAY_OFFSET
    else:
        raise InvalidDateError()

    if not is_valid_date(day, month, year):
        raise InvalidDateError()
    return is_d_number
