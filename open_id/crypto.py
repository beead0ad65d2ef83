"""Random suffixes and keyed checksums."""

from __future__ import annotations

import secrets

from cryptography.hazmat.primitives import constant_time, hashes

from .timekey import BASE36_CHARS

# One generator for the whole process. SystemRandom reads from the OS CSPRNG
# and keeps no state of its own, so threads can share it without a lock.
_random = secrets.SystemRandom()


def random_string(length: int) -> str:
    """Return ``length`` random characters from ``0-9A-Z``."""
    return "".join(_random.choice(BASE36_CHARS) for _ in range(length))


def md5_hex(data: bytes) -> str:
    """Return the MD5 hex digest of data."""
    digest = hashes.Hash(hashes.MD5())
    digest.update(data)
    return digest.finalize().hex()


def checksum_char(secret: str, body: str) -> str:
    """Compute the single-character checksum for ``body`` under ``secret``.

    The checksum is the first hex character of ``MD5(secret + body)``,
    upper-cased. It catches typos and wrong secrets; with only 16 possible
    values it is not an authentication mechanism.
    """
    return md5_hex((secret + body).encode("utf-8"))[0].upper()


def checksum_matches(secret: str, body: str, check: str) -> bool:
    """Compare ``check`` against the checksum of ``body``, ignoring case."""
    expected = checksum_char(secret, body).encode("ascii")
    return constant_time.bytes_eq(expected, check.upper().encode("utf-8"))
