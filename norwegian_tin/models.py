from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar
from .categories import PersonCategory, category_for
from .checksum import check_org_number, check_person_number
from .dates import check_birth_date
from .errors import InvalidDateError, InvalidLengthError, NonNumericValueError

TIN_LENGTH = 11
ORG_LENGTH = 9

_MASK = "*****"
_VISIBLE_DIGITS = 6


class TinKind(str, Enum):
    F_NUMBER = "F_NUMBER"  # fødselsnummer, birth date encoded
    D_NUMBER = "D_NUMBER"  # temporary residence number, day + 40
    ORG_NUMBER = "ORG_NUMBER"


def _as_digits(digits: Sequence[int], length: int) -> tuple[int, ...]:
    if len(digits) != length:
        raise InvalidLengthError()
    if not all(isinstance(d, int) and 0 <= d <= 9 for d in digits):
        raise NonNumericValueError()
    return tuple(digits)


@dataclass(frozen=True)
class PersonNumber:
    """Eleven validated digits of a personal number.

    Construction runs the checksum, category and date checks in that order
    and raises the first NorwegianTinError that applies; the category is
    derived from the month field.
    """

    digits: tuple[int, ...]
    category: PersonCategory = field(init=False)
    is_d_number: bool = field(init=False, repr=False)

    def __post_init__(self) -> None:
        digits = _as_digits(self.digits, TIN_LENGTH)
        check_person_number(digits)
        category = category_for(digits[2])
        is_d_number = check_birth_date(digits, category.month_offset)
        object.__setattr__(self, "digits", digits)
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "is_d_number", is_d_number)


@dataclass(frozen=True)
class OrgNumber:
    digits: tuple[int, ...]  # 9 values 0-9

    def __post_init__(self) -> None:
        digits = _as_digits(self.digits, ORG_LENGTH)
        check_org_number(digits)
        object.__setattr__(self, "digits", digits)


class NorwegianTin(ABC):
    """A validated Norwegian identifier: FNumber, DNumber or Organization.

    Instances wrap an already validated record and are never in an invalid
    state. ``str(tin)`` gives the masked rendering; use ``value`` for the
    full digits.
    """

    kind: ClassVar[TinKind]

    @classmethod
    def parse(cls, value: str | bytes) -> NorwegianTin:
        from .parser import parse

        return parse(value)

    @property
    @abstractmethod
    def digits(self) -> tuple[int, ...]:
        ...

    @property
    def category(self) -> PersonCategory:
        # Organisation numbers are not categorised.
        return PersonCategory.NORMAL

    @property
    def is_test_id(self) -> bool:
        return self.category.is_test_id

    @property
    def value(self) -> str:
        """Canonical digit string, e.g. for storage or transmission."""
        return "".join(chr(d + ord("0")) for d in self.digits)

    def masked(self) -> str:
        return f"{self.category.label}{self.value[:_VISIBLE_DIGITS]}{_MASK}"

    def __bytes__(self) -> bytes:
        return bytes(self.digits)

    def __str__(self) -> str:
        return self.masked()


@dataclass(frozen=True)
class FNumber(NorwegianTin):
    person: PersonNumber
    kind: ClassVar[TinKind] = TinKind.F_NUMBER

    def __post_init__(self) -> None:
        if self.person.is_d_number:
            raise InvalidDateError()

    @property
    def digits(self) -> tuple[int, ...]:
        return self.person.digits

    @property
    def category(self) -> PersonCategory:
        return self.person.category


@dataclass(frozen=True)
class DNumber(NorwegianTin):
    person: PersonNumber
    kind: ClassVar[TinKind] = TinKind.D_NUMBER

    def __post_init__(self) -> None:
        if not self.person.is_d_number:
            raise InvalidDateError()

    @property
    def digits(self) -> tuple[int, ...]:
        return self.person.digits

    @property
    def category(self) -> PersonCategory:
        return self.person.category


@dataclass(frozen=True)
class Organization(NorwegianTin):
    org: OrgNumber
    kind: ClassVar[TinKind] = TinKind.ORG_NUMBER

    @property
    def digits(self) -> tuple[int, ...]:
        return self.org.digits


@dataclass(frozen=True)
class Finding:
    kind: TinKind
    start: int
    end: int
    text: str  # matched span, separators included
    category: PersonCategory
    masked: str
    confidence: float

    def __len__(self) -> int:
        return self.end - self.start


@dataclass
class ScanResult:
    original_text: str
    masked_text: str
    findings: list[Finding]

    @property
    def values(self) -> list[str]:
        """Canonical digit strings of all findings, in text order."""
        return [f.text.replace(" ", "") for f in self.findings]
