"""Exceptions raised by the Open ID codec."""

from __future__ import annotations


class OpenIDError(ValueError):
    """Base class for every error raised by the codec."""


class InvalidFieldError(OpenIDError):
    """Raised when a caller-supplied field has the wrong fixed width."""

    def __init__(self, field: str, expected: int) -> None:
        self.field = field
        self.expected = expected
        super().__init__(f"{field} must be length {expected}")


class TimeKeyOverflowError(OpenIDError):
    """Raised when a timestamp does not fit in the time segment."""


class InvalidIdentifierError(OpenIDError):
    """Raised when an identifier fails validation."""

    def __init__(self, message: str, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(message)


class InvalidLengthError(InvalidIdentifierError):
    """Raised when an identifier is not exactly 32 characters."""


class InvalidFormatError(InvalidIdentifierError):
    """Raised when segment widths or characters are wrong."""


class InvalidStructureError(InvalidIdentifierError):
    """Raised when an identifier does not split into four segments."""


class ChecksumMismatchError(InvalidIdentifierError):
    """Raised when the checksum does not match the vendor secret."""


class InvalidTimeKeyError(InvalidIdentifierError):
    """Raised when the time segment cannot be parsed as base 36."""
