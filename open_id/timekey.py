"""Base-36 time keys.

The time segment holds milliseconds since the Unix epoch written in base 36
with uppercase digits and right-padded with ``=`` to nine characters::

    2016-06-16 15:43:32.522 UTC  ->  IPIH7MI2=

Nine base-36 digits hold values up to ``36**9 - 1`` milliseconds, so keys
overflow in the year 5188. The padding disappears in 2059 once the value
needs all nine digits.
"""

from __future__ import annotations

import string
from datetime import datetime, timedelta, timezone

from .errors import TimeKeyOverflowError

TIME_KEY_BASE = 36
TIME_KEY_LENGTH = 9
PADDING_CHAR = "="
BASE36_CHARS = string.digits + string.ascii_uppercase
MAX_TIME_KEY_MILLIS = TIME_KEY_BASE**TIME_KEY_LENGTH - 1

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def to_base36(value: int) -> str:
    """Encode a non-negative integer as uppercase base 36."""
    if value < 0:
        raise ValueError(f"Cannot encode negative value {value}")
    if value == 0:
        return "0"
    chars = []
    while value:
        value, remainder = divmod(value, TIME_KEY_BASE)
        chars.append(BASE36_CHARS[remainder])
    return "".join(reversed(chars))


def unix_millis(moment: datetime) -> int:
    """Return whole milliseconds since the epoch. Naive datetimes are UTC."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // timedelta(milliseconds=1)


def encode_time_key(moment: datetime | None = None) -> str:
    """Build the padded time segment for ``moment`` (default: now).

    Raises:
        TimeKeyOverflowError: If the encoded value needs more than nine digits.
    """
    if moment is None:
        moment = datetime.now(timezone.utc)
    millis = unix_millis(moment)
    if millis < 0:
        raise TimeKeyOverflowError(f"Cannot encode time before the epoch: {moment!r}")
    time_key = to_base36(millis)
    if len(time_key) > TIME_KEY_LENGTH:
        raise TimeKeyOverflowError(
            f"Time key {time_key!r} exceeds {TIME_KEY_LENGTH} characters"
        )
    return time_key.ljust(TIME_KEY_LENGTH, PADDING_CHAR)


def decode_time_key(time_key: str) -> datetime:
    """Parse a time segment back into a UTC datetime.

    Raises:
        ValueError: If the unpadded text is not a base-36 integer.
    """
    digits = time_key.replace(PADDING_CHAR, "")
    millis = int(digits, TIME_KEY_BASE)
    if millis < 0:
        raise ValueError(f"Negative time key {time_key!r}")
    return _EPOCH + timedelta(milliseconds=millis)
