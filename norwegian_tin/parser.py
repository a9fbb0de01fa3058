"""Parse and classify Norwegian identifiers.

An 11-digit personal number has the layout DDMMYYIIICC:

- DD  day of birth; D-numbers add 40 to the day
- MM  month of birth plus a category offset (0, 40, 60 or 80)
- YY  two-digit year, century unresolved
- III individual number
- CC  two check digits

A 9-digit organisation number carries a single mod-11 check digit.
Validation runs gate -> checksum -> category -> date and raises the
NorwegianTinError subclass of the first stage that fails. The gate lives
here; the remaining stages run when the validated records are built.
"""
from __future__ import annotations
from .errors import (
    ErrorKind,
    InvalidLengthError,
    NonNumericValueError,
    NorwegianTinError,
)
from .models import (
    ORG_LENGTH,
    TIN_LENGTH,
    DNumber,
    FNumber,
    NorwegianTin,
    OrgNumber,
    Organization,
    PersonNumber,
)

_ZERO = ord("0")
_NINE = ord("9")


def _to_digits(value: str | bytes) -> tuple[int, ...]:
    if isinstance(value, str):
        # Lone surrogates encode to three non-digit bytes instead of failing.
        raw = value.encode("utf-8", "surrogatepass")
    elif isinstance(value, (bytes, bytearray, memoryview)):
        raw = bytes(value)
    else:
        raise TypeError(f"expected str or bytes, got {type(value).__name__}")
    # Length is counted in bytes: a non-ASCII character counts as its UTF-8 width.
    if len(raw) not in (TIN_LENGTH, ORG_LENGTH):
        raise InvalidLengthError()
    if any(b < _ZERO or b > _NINE for b in raw):
        raise NonNumericValueError()
    return tuple(b - _ZERO for b in raw)


def parse(value: str | bytes) -> NorwegianTin:
    """Validate ``value`` and return the classified identifier.

    Raises a NorwegianTinError subclass when the value is not a valid
    identifier, and TypeError when it is neither str nor bytes.
    """
    digits = _to_digits(value)
    if len(digits) == ORG_LENGTH:
        return Organization(OrgNumber(digits=digits))
    person = PersonNumber(digits=digits)
    if person.is_d_number:
        return DNumber(person)
    return FNumber(person)


def validate(value: str | bytes) -> ErrorKind | None:
    """Return the error kind for ``value``, or None if it is valid."""
    try:
        parse(value)
    except NorwegianTinError as exc:
        return exc.kind
    return None


def is_valid(value: str | bytes) -> bool:
    return validate(value) is None
