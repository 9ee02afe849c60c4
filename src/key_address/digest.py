"""
Digest accumulators used by key addresses.

Three fixed-output configurations are needed:

- SHA3-256 (32 bytes) for short address digests
- SHA3-384 (48 bytes) for long address digests
- CRC-32 (4 bytes, big-endian) for the control code

All of them share the same incremental interface, so a key can feed its
components without knowing which variant is being built.
"""

from __future__ import annotations

import hashlib
import zlib
from typing import ClassVar, Protocol

from typing_extensions import Self

from .constants import CHECKSUM_SIZE, LONG_DIGEST_SIZE, SHORT_DIGEST_SIZE
from .types import Bytes4


class Digest(Protocol):
    """An incremental digest with a fixed output length."""

    digest_size: int
    """Output length in bytes."""

    def update(self, data: bytes) -> Self:
        """Feed more data into the accumulator."""
        ...

    def digest(self) -> bytes:
        """Return the digest of all data fed so far."""
        ...


class _HashlibDigest:
    """Adapter over a `hashlib` constructor."""

    ALGORITHM: ClassVar[str]
    digest_size: ClassVar[int]

    def __init__(self) -> None:
        self._hash = hashlib.new(self.ALGORITHM)

    def update(self, data: bytes) -> Self:
        self._hash.update(data)
        return self

    def digest(self) -> bytes:
        return self._hash.digest()


class Sha3_256(_HashlibDigest):
    """SHA3-256, the short address digest."""

    ALGORITHM = "sha3_256"
    digest_size = SHORT_DIGEST_SIZE


class Sha3_384(_HashlibDigest):
    """SHA3-384, the long address digest."""

    ALGORITHM = "sha3_384"
    digest_size = LONG_DIGEST_SIZE


class Crc32:
    """
    CRC-32 (IEEE 802.3 polynomial) as a 4-byte big-endian digest.

    Detects every single-bit error, which is what makes one flipped bit in an
    address always fail the control code check.
    """

    digest_size: ClassVar[int] = CHECKSUM_SIZE

    def __init__(self) -> None:
        self._crc = 0

    def update(self, data: bytes) -> Self:
        self._crc = zlib.crc32(data, self._crc)
        return self

    def digest(self) -> bytes:
        return self._crc.to_bytes(CHECKSUM_SIZE, "big")


def crc32(data: bytes) -> Bytes4:
    """Compute the control code of `data`."""
    return Bytes4(Crc32().update(data).digest())
