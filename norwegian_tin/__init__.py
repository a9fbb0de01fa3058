"""norwegian-tin: validate and classify Norwegian personal and organisation numbers."""
from .errors import (
    ErrorKind,
    InvalidChecksumError,
    InvalidDateError,
    InvalidLengthError,
    NonNumericValueError,
    NorwegianTinError,
)
from .categories import PersonCategory
from .models import (
    DNumber,
    FNumber,
    Finding,
    NorwegianTin,
    OrgNumber,
    Organization,
    PersonNumber,
    ScanResult,
    TinKind,
)
from .parser import is_valid, parse, validate
from .scanner import TinScanner

__all__ = [
    "ErrorKind",
    "InvalidChecksumError",
    "InvalidDateError",
    "InvalidLengthError",
    "NonNumericValueError",
    "NorwegianTinError",
    "DNumber",
    "FNumber",
    "Finding",
    "NorwegianTin",
    "OrgNumber",
    "Organization",
    "PersonCategory",
    "PersonNumber",
    "ScanResult",
    "TinKind",
    "is_valid",
    "parse",
    "validate",
    "TinScanner",
]
