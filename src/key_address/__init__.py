"""
Short, self-verifying addresses for cryptographic keys.

Usage::

    from key_address import KeyAddress

    address = KeyAddress.from_key(public_key)
    text = str(address)

    KeyAddress.from_string(text).is_matching_key(public_key)
"""

from .address import KeyAddress
from .base60 import Base60
from .exceptions import (
    IllegalAddressError,
    InvalidTypeMarkError,
    KeyAddressError,
    UnsupportedKeyError,
)
from .keys import AddressableKey, CryptographyKey, KeyAlgorithm, KeyFamily, KeyInfo
from .mask import MASK_TABLE, MaskKey

__all__ = [
    # Address
    "KeyAddress",
    "Base60",
    # Keys
    "AddressableKey",
    "CryptographyKey",
    "KeyAlgorithm",
    "KeyFamily",
    "KeyInfo",
    "MASK_TABLE",
    "MaskKey",
    # Exceptions
    "KeyAddressError",
    "IllegalAddressError",
    "InvalidTypeMarkError",
    "UnsupportedKeyError",
]
