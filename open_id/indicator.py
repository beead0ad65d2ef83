"""System indicators for the Open ID format.

The first character of the type segment classifies what kind of thing the
identifier names. Unknown indicators are not an error: they are replaced with
``TypeIndicator.ENTITY``.
"""

from __future__ import annotations

import logging
from enum import Enum

logger = logging.getLogger(__name__)


class TypeIndicator(str, Enum):
    """Single-character system indicators."""

    ENTITY = "E"  # standard entities
    LOG = "L"  # log entries
    CACHE = "C"  # cached data
    MEMORY = "M"  # in-memory item
    META = "A"  # meta data
    CONFIGURATION = "F"  # configuration item
    TIME_SERIES = "T"  # time series data
    RELATIONSHIP = "R"
    NOTE = "N"  # note / comment
    FILE = "D"  # file, likely stored in a bucket

    def __str__(self) -> str:
        return self.value


# Every indicator character, used for membership checks
INDICATOR_CHECKSUM = "".join(member.value for member in TypeIndicator)


def is_valid_indicator(proposed: str | TypeIndicator) -> bool:
    """Return True if ``proposed`` is exactly one known indicator character.

    The check is case-insensitive.
    """
    proposed = str(proposed)
    if len(proposed) != 1:
        return False
    return proposed.upper() in INDICATOR_CHECKSUM


def normalize_indicator(proposed: str | TypeIndicator | None) -> TypeIndicator:
    """Map ``proposed`` onto a ``TypeIndicator``, defaulting to ENTITY."""
    if proposed is None or not is_valid_indicator(proposed):
        if proposed:
            logger.warning("Unknown system indicator %r, using entity", str(proposed))
        return TypeIndicator.ENTITY
    return TypeIndicator(str(proposed).upper())
