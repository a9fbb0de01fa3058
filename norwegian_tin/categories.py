from __future__ import annotations
from enum import Enum
from .errors import InvalidDateError


class PersonCategory(str, Enum):
    """Category of a personal number, signalled by an offset on the month field.

    New categories may be added; do not treat the member set as exhaustive.
    """

    NORMAL = "NORMAL"
    H_NUMBER = "H_NUMBER"  # temporary work permit
    ANONYMOUS = "ANONYMOUS"  # anonymised test record
    SYNTHETIC = "SYNTHETIC"  # synthetically generated test record

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def month_offset(self) -> int:
        return _MONTH_OFFSETS[self]

    @property
    def is_test_id(self) -> bool:
        return self is not PersonCategory.NORMAL

    def base_month(self, raw_month: int) -> int:
        return raw_month - self.month_offset


_LABELS: dict[PersonCategory, str] = {
    PersonCategory.NORMAL: "",
    PersonCategory.H_NUMBER: " (H-Number) ",
    PersonCategory.ANONYMOUS: " (Anonymous) ",
    PersonCategory.SYNTHETIC: " (Synthetic) ",
}

_MONTH_OFFSETS: dict[PersonCategory, int] = {
    PersonCategory.NORMAL: 0,
    PersonCategory.H_NUMBER: 40,
    PersonCategory.ANONYMOUS: 60,
    PersonCategory.SYNTHETIC: 80,
}

# Tens digit of the month field -> category. 2 and 3 are unused.
_BY_MONTH_DIGIT: dict[int, PersonCategory] = {
    0: PersonCategory.NORMAL,
    1: PersonCategory.NORMAL,
    4: PersonCategory.H_NUMBER,
    5: PersonCategory.H_NUMBER,
    6: PersonCategory.ANONYMOUS,
    7: PersonCategory.ANONYMOUS,
    8: PersonCategory.SYNTHETIC,
    9: PersonCategory.SYNTHETIC,
}


def category_for(month_digit: int) -> PersonCategory:
    """Return the category for the month tens digit; unused bands are InvalidDate."""
    category = _BY_MONTH_DIGIT.get(month_digit)
    if category is None:
        raise InvalidDateError()
    return category
