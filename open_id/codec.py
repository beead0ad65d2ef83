"""Generation, validation and decoding of Open IDs.

Open ID format::

    {time key}-{indicator}{vendor}{type}{subtype}-{location}-{random}
    IPIH7MI2=-EABCCDEF-MISCR-V669VFQ

- time key: 9 chars, base-36 milliseconds since the epoch padded with '='
- indicator: 1 char, see ``TypeIndicator``
- vendor: 3 chars; type and subtype: 2 chars each
- location: 5 chars, 'MISCR' when unknown
- random: 7 chars; the last one is a checksum when a vendor secret is used
- Total length is always 32 characters.
"""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import datetime

from . import crypto
from .errors import (
    ChecksumMismatchError,
    InvalidFieldError,
    InvalidFormatError,
    InvalidIdentifierError,
    InvalidLengthError,
    InvalidStructureError,
    InvalidTimeKeyError,
)
from .indicator import TypeIndicator, is_valid_indicator, normalize_indicator
from .timekey import TIME_KEY_LENGTH, decode_time_key, encode_time_key

logger = logging.getLogger(__name__)

ID_LENGTH = 32
DELIMITER = "-"
ID_ELEMENTS = 4
VENDOR_LENGTH = 3
TYPE_LENGTH = 2
LOCATION_LENGTH = 5
RANDOM_LENGTH = 7
UNKNOWN_LOCATION = "MISCR"

# Width of each delimited segment, in order
SEGMENT_WIDTHS = (TIME_KEY_LENGTH, 8, LOCATION_LENGTH, RANDOM_LENGTH)
ALLOWED_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789=")


@dataclass(frozen=True)
class Description:
    """Fields decoded from an identifier by ``describe``."""

    indicator: str
    vendor: str
    type: str
    subtype: str
    location: str
    time_key: str
    time: datetime
    random: str

    @property
    def has_known_indicator(self) -> bool:
        """True when the embedded indicator is a defined ``TypeIndicator``."""
        return is_valid_indicator(self.indicator)

    def as_dict(self) -> dict:
        return asdict(self)


def generate(
    indicator: TypeIndicator | str,
    vendor: str,
    type_: str,
    subtype: str = "",
    location: str = "",
    secret: str = "",
    *,
    now: datetime | None = None,
) -> str:
    """Generate a new identifier.

    Fields are upper-cased but not otherwise checked: callers must pass
    alphanumeric vendor, type, subtype and location codes, or the result
    will fail ``check``.

    Args:
        indicator: System indicator. Unknown or empty values become ENTITY.
        vendor: 3-character vendor code.
        type_: 2-character type code.
        subtype: 2-character subtype code. Any other length reuses ``type_``.
        location: 5-character location. Any other length becomes 'MISCR'.
        secret: Vendor secret. When non-empty the last character of the
            identifier is a checksum of the rest.
        now: Generation instant. Defaults to the current time.

    Returns:
        The 32-character identifier.

    Raises:
        InvalidFieldError: If vendor or type has the wrong length.
        TimeKeyOverflowError: If the timestamp does not fit in 9 characters.
    """
    time_key = encode_time_key(now)
    indicator = normalize_indicator(indicator)

    # Widths are measured after upper-casing ("ß" becomes "SS")
    vendor, type_, subtype, location = (
        vendor.upper(), type_.upper(), subtype.upper(), location.upper()
    )
    if len(vendor) != VENDOR_LENGTH:
        raise InvalidFieldError("vendor", VENDOR_LENGTH)
    if len(type_) != TYPE_LENGTH:
        raise InvalidFieldError("type", TYPE_LENGTH)
    if len(subtype) != TYPE_LENGTH:
        subtype = type_
    if len(location) != LOCATION_LENGTH:
        if location:
            logger.warning("Location %r is not %d characters, using %s",
                           location, LOCATION_LENGTH, UNKNOWN_LOCATION)
        location = UNKNOWN_LOCATION

    random = crypto.random_string(RANDOM_LENGTH)
    identifier = DELIMITER.join(
        [time_key, f"{indicator}{vendor}{type_}{subtype}", location, random]
    )

    if secret:
        body = identifier[:-1]
        identifier = body + crypto.checksum_char(secret, body)

    logger.debug("Generated identifier %s-%s", time_key, identifier[10:18])
    return identifier


def check(identifier: str, secret: str = "") -> None:
    """Validate an identifier, raising on the first failed check.

    With an empty ``secret`` only the structure is checked; the last
    character is accepted whether or not it is a checksum.

    Raises:
        InvalidLengthError: If the identifier is not 32 characters.
        InvalidFormatError: If a segment has the wrong width or characters.
        InvalidStructureError: If it does not split into 4 segments.
        ChecksumMismatchError: If the checksum does not match ``secret``.
    """
    if len(identifier) != ID_LENGTH:
        raise InvalidLengthError("ID is of invalid length", identifier)

    offset = 0
    for index, width in enumerate(SEGMENT_WIDTHS):
        segment = identifier[offset:offset + width]
        if len(segment) != width or not ALLOWED_CHARS.issuperset(segment):
            raise InvalidFormatError("ID format is invalid", identifier)
        offset += width
        if index < len(SEGMENT_WIDTHS) - 1:
            if identifier[offset:offset + 1] != DELIMITER:
                raise InvalidFormatError("ID format is invalid", identifier)
            offset += 1

    if len(identifier.split(DELIMITER)) != ID_ELEMENTS:
        raise InvalidStructureError("Unexpected element count in ID", identifier)

    if secret and not crypto.checksum_matches(secret, identifier[:-1], identifier[-1]):
        raise ChecksumMismatchError("Checksum does not match vendor secret", identifier)


def verify(identifier: str, secret: str = "") -> bool:
    """Return True if ``identifier`` is valid (and signed by ``secret``, if given)."""
    try:
        check(identifier, secret)
    except InvalidIdentifierError as exc:
        logger.debug("Rejected identifier %r: %s", identifier, exc)
        return False
    return True


def get_time_from_id(identifier: str) -> datetime:
    """Return the UTC generation time embedded in an identifier.

    Raises:
        InvalidIdentifierError: If the identifier is structurally invalid.
        InvalidTimeKeyError: If the time segment is not base 36.
    """
    check(identifier)
    time_key = identifier.split(DELIMITER)[0]
    try:
        return decode_time_key(time_key)
    except ValueError as exc:
        raise InvalidTimeKeyError(f"Invalid time key {time_key!r}", identifier) from exc


def describe(identifier: str) -> Description:
    """Decode every field of an identifier.

    Raises:
        InvalidIdentifierError: If the identifier is invalid or its time key
            cannot be decoded.
    """
    check(identifier)
    time_key, type_segment, location, random = identifier.split(DELIMITER)
    return Description(
        indicator=type_segment[0:1],
        vendor=type_segment[1:4],
        type=type_segment[4:6],
        subtype=type_segment[6:8],
        location=location,
        time_key=time_key,
        time=get_time_from_id(identifier),
        random=random,
    )
