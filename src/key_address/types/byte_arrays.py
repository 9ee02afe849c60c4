"""
Fixed-length byte types.

Key digests and control codes are exposed as `bytes` subclasses whose length
is checked on construction, so a `Bytes48` can never hold a short digest.
They compare and hash like the plain `bytes` they wrap.
"""

from __future__ import annotations

from typing import ClassVar

from typing_extensions import Self


class BaseBytes(bytes):
    """
    Immutable bytes of an exact length.

    Subclasses set `LENGTH`.
    """

    LENGTH: ClassVar[int]
    """The exact number of bytes (overridden by subclasses)."""

    def __new__(cls, value: bytes | bytearray | memoryview = b"") -> Self:
        """
        Create and validate a new instance.

        Raises:
            ValueError: If the byte length differs from `LENGTH`.
        """
        if not hasattr(cls, "LENGTH"):
            raise TypeError(f"{cls.__name__} must define LENGTH")

        b = bytes(value)
        if len(b) != cls.LENGTH:
            raise ValueError(f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(b)}")
        return super().__new__(cls, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.hex()})"


class Bytes4(BaseBytes):
    """Fixed-size byte array of exactly 4 bytes."""

    LENGTH = 4


class Bytes32(BaseBytes):
    """Fixed-size byte array of exactly 32 bytes."""

    LENGTH = 32


class Bytes48(BaseBytes):
    """Fixed-size byte array of exactly 48 bytes."""

    LENGTH = 48
