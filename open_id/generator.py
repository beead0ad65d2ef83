"""Vendor-bound identifier generator.

Most callers generate every identifier for one vendor with one secret. An
``IDGenerator`` holds those so call sites only pass the type codes::

    ids = IDGenerator.from_env()
    order_id = ids.new("OR", "DR")
    assert ids.owns(order_id)
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping

from . import codec
from .errors import InvalidFieldError, InvalidIdentifierError
from .indicator import TypeIndicator, normalize_indicator

logger = logging.getLogger(__name__)

ENV_VENDOR = "OPEN_ID_VENDOR"
ENV_SECRET = "OPEN_ID_SECRET"
ENV_INDICATOR = "OPEN_ID_INDICATOR"
ENV_LOCATION = "OPEN_ID_LOCATION"


class IDGenerator:
    """Generates and verifies identifiers for a single vendor."""

    def __init__(
        self,
        vendor: str,
        secret: str = "",
        indicator: TypeIndicator | str = TypeIndicator.ENTITY,
        location: str = "",
    ) -> None:
        vendor = vendor.upper()
        if len(vendor) != codec.VENDOR_LENGTH:
            raise InvalidFieldError("vendor", codec.VENDOR_LENGTH)
        self._vendor = vendor
        self._secret = secret
        self._indicator = normalize_indicator(indicator)
        self._location = location

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "IDGenerator":
        """Build a generator from ``OPEN_ID_*`` environment variables.

        Args:
            environ: Mapping to read instead of ``os.environ``.

        Raises:
            InvalidFieldError: If ``OPEN_ID_VENDOR`` is missing or not 3 chars.
        """
        if environ is None:
            environ = os.environ
        generator = cls(
            vendor=environ.get(ENV_VENDOR, ""),
            secret=environ.get(ENV_SECRET, ""),
            indicator=environ.get(ENV_INDICATOR, TypeIndicator.ENTITY),
            location=environ.get(ENV_LOCATION, ""),
        )
        logger.debug("Loaded %r from environment", generator)
        return generator

    @property
    def vendor(self) -> str:
        return self._vendor

    @property
    def signed(self) -> bool:
        """True when identifiers carry a checksum."""
        return bool(self._secret)

    def new(
        self,
        type_: str,
        subtype: str = "",
        indicator: TypeIndicator | str | None = None,
        location: str | None = None,
    ) -> str:
        """Generate an identifier using this generator's defaults."""
        return codec.generate(
            self._indicator if indicator is None else indicator,
            self._vendor,
            type_,
            subtype,
            self._location if location is None else location,
            self._secret,
        )

    def verify(self, identifier: str) -> bool:
        """Verify an identifier against this generator's secret."""
        return codec.verify(identifier, self._secret)

    def owns(self, identifier: str) -> bool:
        """True if ``identifier`` is valid and was issued for this vendor."""
        try:
            codec.check(identifier, self._secret)
        except InvalidIdentifierError:
            return False
        return identifier[codec.TIME_KEY_LENGTH + 2:codec.TIME_KEY_LENGTH + 5] == self._vendor

    def __repr__(self) -> str:
        return (
            f"IDGenerator(vendor={self._vendor!r}, indicator={self._indicator.value!r}, "
            f"signed={self.signed})"
        )
