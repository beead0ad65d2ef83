"""Open ID Python library.

Generate, verify, and decode 32-character Open ID identifiers.
"""

from .codec import (
    Description,
    generate,
    check,
    verify,
    describe,
    get_time_from_id,
    ID_LENGTH,
    UNKNOWN_LOCATION,
)
from .generator import IDGenerator
from .indicator import TypeIndicator, INDICATOR_CHECKSUM, is_valid_indicator
from .timekey import TIME_KEY_LENGTH, PADDING_CHAR
from .errors import (
    OpenIDError,
    InvalidFieldError,
    TimeKeyOverflowError,
    InvalidIdentifierError,
    InvalidLengthError,
    InvalidFormatError,
    InvalidStructureError,
    ChecksumMismatchError,
    InvalidTimeKeyError,
)

__all__ = [
    "Description",
    "generate",
    "check",
    "verify",
    "describe",
    "get_time_from_id",
    "ID_LENGTH",
    "UNKNOWN_LOCATION",
    "IDGenerator",
    "TypeIndicator",
    "INDICATOR_CHECKSUM",
    "is_valid_indicator",
    "TIME_KEY_LENGTH",
    "PADDING_CHAR",
    "OpenIDError",
    "InvalidFieldError",
    "TimeKeyOverflowError",
    "InvalidIdentifierError",
    "InvalidLengthError",
    "InvalidFormatError",
    "InvalidStructureError",
    "ChecksumMismatchError",
    "InvalidTimeKeyError",
]
__version__ = "0.1.0"
