"""
Protocol constants for key addresses.

Packed layout::

    [header: 1 byte][key digest: 32 or 48 bytes][crc32: 4 bytes]

The header holds the key mask in the high nibble and the type mark in the
low nibble.
"""

from typing import Final

HEADER_SIZE: Final = 1
"""Size of the header byte carrying key mask and type mark."""

KEY_MASK_MAX: Final = 0x0F
"""Largest key mask that fits the high nibble. Mask 0 is reserved."""

TYPE_MARK_MAX: Final = 0x0F
"""Largest type mark that fits the low nibble."""

CHECKSUM_SIZE: Final = 4
"""CRC-32 control code appended to every address."""

SHORT_DIGEST_SIZE: Final = 32
"""SHA3-256 output size, used by short addresses."""

LONG_DIGEST_SIZE: Final = 48
"""SHA3-384 output size, used by long addresses."""

SHORT_ADDRESS_LENGTH: Final = HEADER_SIZE + SHORT_DIGEST_SIZE + CHECKSUM_SIZE
"""Packed length of a short address (37 bytes)."""

LONG_ADDRESS_LENGTH: Final = HEADER_SIZE + LONG_DIGEST_SIZE + CHECKSUM_SIZE
"""Packed length of a long address (53 bytes)."""

SHORT_TEXT_LENGTH: Final = 51
"""Characters in the text form of a short address."""

LONG_TEXT_LENGTH: Final = 72
"""Characters in the text form of a long address."""

RSA_PUBLIC_EXPONENT: Final = 0x10001
"""The only RSA public exponent that can be addressed (65537)."""
