"""
Key Address
===========

A key address is a short, self-verifying fingerprint of a public key. It
tells which class of key it belongs to, binds to the key's components with a
SHA3 digest, carries 4 bits of caller data and is protected by a CRC-32
control code.

Packed Structure
----------------

::

    offset  size      content
    0       1         header: key mask (bits 7-4) | type mark (bits 3-0)
    1       32 / 48   SHA3-256 / SHA3-384 of the key components
    33 / 49 4         CRC-32 (big-endian) of all preceding bytes

Short addresses are 37 bytes (51 characters as text), long addresses are
53 bytes (72 characters).

Usage
-----

Publish an address::

    address = KeyAddress.from_key(public_key, type_mark=3)
    text = address.to_string()

Check a key received later::

    KeyAddress.from_string(text).is_matching_key(public_key)

Validation
----------

Every instance has passed the mask and control code checks. There is no way
to hold a `KeyAddress` for corrupted data: the `packed` field validator runs
for every constructor, including pydantic's `model_validate_json`.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import field_serializer, field_validator
from typing_extensions import Self

from .base60 import Base60
from .constants import (
    CHECKSUM_SIZE,
    HEADER_SIZE,
    KEY_MASK_MAX,
    LONG_ADDRESS_LENGTH,
    SHORT_ADDRESS_LENGTH,
    TYPE_MARK_MAX,
)
from .digest import Sha3_256, Sha3_384, crc32
from .exceptions import IllegalAddressError, InvalidTypeMarkError
from .keys import as_addressable
from .mask import MaskKey, classify, lookup
from .types import Bytes4, Bytes32, Bytes48, StrictBaseModel

logger = logging.getLogger(__name__)


def _rejected(detail: str, packed: bytes | None = None) -> IllegalAddressError:
    """Build the error for a rejected address and record why."""
    logger.debug("Rejected address %s: %s", packed.hex() if packed else "<empty>", detail)
    return IllegalAddressError(detail)


def _validate_packed(packed: bytes) -> bytes:
    """
    Check packed address bytes.

    Order of checks:
        1. Non-empty
        2. Key mask is not 0
        3. Length is 37 (short) or 53 (long)
        4. Control code matches a fresh CRC-32 of header and digest

    Returns:
        The input, unchanged.

    Raises:
        IllegalAddressError: On the first failing check.
    """
    if not packed:
        raise _rejected("address is empty")

    if packed[0] >> 4 == 0:
        raise _rejected("key mask is 0", packed)

    if len(packed) not in (SHORT_ADDRESS_LENGTH, LONG_ADDRESS_LENGTH):
        raise _rejected(
            f"length must be {SHORT_ADDRESS_LENGTH} or {LONG_ADDRESS_LENGTH} bytes, "
            f"got {len(packed)}",
            packed,
        )

    body, control = packed[:-CHECKSUM_SIZE], packed[-CHECKSUM_SIZE:]
    if crc32(body) != control:
        raise _rejected("control code failed, address is broken", packed)

    return packed


class KeyAddress(StrictBaseModel):
    """Self-verifying address of a key."""

    packed: bytes
    """Packed binary address. All other attributes derive from it."""

    @field_validator("packed", mode="before")
    @classmethod
    def _coerce_packed(cls, value: Any) -> Any:
        """Accept the text form and bytes-like objects."""
        if isinstance(value, str):
            try:
                return Base60.decode(value)
            except ValueError as e:
                raise _rejected(f"cannot decode text form: {e}") from e
        if isinstance(value, (bytearray, memoryview)):
            return bytes(value)
        return value

    @field_validator("packed")
    @classmethod
    def _check_packed(cls, value: bytes) -> bytes:
        """Gate every instance on mask, length and control code."""
        return _validate_packed(value)

    @field_serializer("packed", when_used="json")
    def _serialize_packed(self, value: bytes) -> str:
        """JSON carries the text form."""
        return Base60.encode(value)

    @classmethod
    def from_key(cls, key: Any, type_mark: int = 0, use_long: bool = False) -> Self:
        """
        Build the address of a key.

        Args:
            key: An `AddressableKey` or a `cryptography` key object.
            type_mark: Caller data in [0, 15], stored in the header and
                protected by the control code.
            use_long: Use the SHA3-384 digest (53 bytes) instead of
                SHA3-256 (37 bytes).

        Returns:
            The address of `key`.

        Raises:
            InvalidTypeMarkError: If `type_mark` is not an int in range.
            UnsupportedKeyError: If the key class has no mask.
        """
        if (
            isinstance(type_mark, bool)
            or not isinstance(type_mark, int)
            or not 0 <= type_mark <= TYPE_MARK_MAX
        ):
            raise InvalidTypeMarkError(type_mark, max_value=TYPE_MARK_MAX)

        addressable = as_addressable(key)
        mask = classify(addressable.info())

        digest = Sha3_384() if use_long else Sha3_256()
        key_digest = addressable.update_digest_with_key_components(digest).digest()

        body = bytes([(mask << 4) | type_mark]) + key_digest
        address = cls(packed=body + crc32(body))

        logger.debug(
            "Built %s address for mask %#04x, type mark %d",
            "long" if use_long else "short",
            mask,
            type_mark,
        )
        return address

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview) -> Self:
        """
        Parse a packed address.

        Raises:
            IllegalAddressError: If the data is not a valid address.
        """
        return cls(packed=bytes(data))

    @classmethod
    def from_string(cls, text: str) -> Self:
        """
        Parse the text form produced by `to_string`.

        Raises:
            IllegalAddressError: If the text cannot be decoded or the
                decoded bytes are not a valid address.
        """
        if not isinstance(text, str):
            raise _rejected(f"text form must be str, got {type(text).__name__}")
        return cls(packed=text)

    @property
    def key_mask(self) -> int:
        """Key class code in [1, 15]."""
        return (self.packed[0] >> 4) & KEY_MASK_MAX

    @property
    def type_mark(self) -> int:
        """Caller data in [0, 15]."""
        return self.packed[0] & TYPE_MARK_MAX

    @property
    def is_long(self) -> bool:
        """Whether this is a SHA3-384 (53 byte) address."""
        return len(self.packed) == LONG_ADDRESS_LENGTH

    @property
    def key_digest(self) -> Bytes32 | Bytes48:
        """Digest of the key components."""
        raw = self.packed[HEADER_SIZE:-CHECKSUM_SIZE]
        return Bytes48(raw) if self.is_long else Bytes32(raw)

    @property
    def checksum(self) -> Bytes4:
        """CRC-32 control code."""
        return Bytes4(self.packed[-CHECKSUM_SIZE:])

    @property
    def key_class(self) -> MaskKey | None:
        """
        Key class registered for `key_mask`.

        None for masks that pass validation but have no registered class;
        no key can match such an address.
        """
        return lookup(self.key_mask)

    def is_matching_key(self, key: Any) -> bool:
        """
        Check that `key` is the key this address was built from.

        The key's address is rebuilt with the same variant and compared by
        mask and digest. The type mark is not compared.

        Raises:
            UnsupportedKeyError: If the key class has no mask.
        """
        other = type(self).from_key(key, 0, self.is_long)
        matched = other.key_mask == self.key_mask and other.key_digest == self.key_digest

        logger.debug("Key %s address %s", "matches" if matched else "does not match", self)
        return matched

    def is_matching_address(self, other: KeyAddress) -> bool:
        """
        Check that two addresses denote the same key.

        Type marks are ignored. Short and long addresses never match each
        other, as their digests cannot be related.
        """
        return (
            self.is_long == other.is_long
            and self.key_mask == other.key_mask
            and self.key_digest == other.key_digest
        )

    def to_string(self) -> str:
        """Return the text form (51 or 72 characters)."""
        return Base60.encode(self.packed)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"KeyAddress({self.to_string()})"
