"""
Key mask classification.

The mask is the high nibble of the address header. It names the family and
size class of the addressed key, so that a key of a different class can never
match an address even if digests collided.

| Mask | Key class                      |
|------|--------------------------------|
| 0x00 | reserved, never valid          |
| 0x01 | RSA 2048 bits, exponent 65537  |
| 0x02 | RSA 4096 bits, exponent 65537  |

`MASK_TABLE` is the single place to register new key classes.
"""

from __future__ import annotations

from typing import Final, NamedTuple

from .constants import RSA_PUBLIC_EXPONENT
from .exceptions import UnsupportedKeyError
from .keys import KeyFamily, KeyInfo

__all__ = ["MaskKey", "MASK_TABLE", "classify", "lookup"]


class MaskKey(NamedTuple):
    """Classification key: what must be equal for two keys to share a mask."""

    family: KeyFamily
    key_size: int
    public_exponent: int | None


MASK_TABLE: Final[dict[MaskKey, int]] = {
    MaskKey(KeyFamily.RSA, 2048, RSA_PUBLIC_EXPONENT): 0x01,
    MaskKey(KeyFamily.RSA, 4096, RSA_PUBLIC_EXPONENT): 0x02,
}
"""Supported key classes and their masks. Masks must be in [1, 15]."""

_KEYS_BY_MASK: Final[dict[int, MaskKey]] = {mask: key for key, mask in MASK_TABLE.items()}


def classify(info: KeyInfo) -> int:
    """
    Classify a key into its address mask.

    Args:
        info: Introspection result of the key.

    Returns:
        The non-zero mask of the key class.

    Raises:
        UnsupportedKeyError: If the key class has no mask.
    """
    mask = MASK_TABLE.get(MaskKey(info.algorithm.family, info.key_size, info.public_exponent))
    if mask is None:
        raise UnsupportedKeyError(info)
    return mask


def lookup(mask: int) -> MaskKey | None:
    """Return the key class registered for `mask`, if any."""
    return _KEYS_BY_MASK.get(mask)
