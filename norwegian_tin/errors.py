from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    INVALID_LENGTH = "InvalidLength"
    NON_NUMERIC_VALUE = "NonNumericValue"
    INVALID_CHECKSUM = "InvalidChecksum"
    INVALID_DATE = "InvalidDate"


class NorwegianTinError(ValueError):
    """Base for every validation failure; ``str(err)`` is the stable label."""

    kind: ErrorKind

    def __str__(self) -> str:
        return self.kind.value


class InvalidLengthError(NorwegianTinError):
    kind = ErrorKind.INVALID_LENGTH


class NonNumericValueError(NorwegianTinError):
    kind = ErrorKind.NON_NUMERIC_VALUE


class InvalidChecksumError(NorwegianTinError):
    kind = ErrorKind.INVALID_CHECKSUM


class InvalidDateError(NorwegianTinError):
    kind = ErrorKind.INVALID_DATE
