"""
Fixed-width, typo-tolerant text encoding for addresses.

WHY NOT PLAIN BASE58?
---------------------
Base58 drops leading-zero information into leading '1' characters and
otherwise produces a length that depends on the value. Two addresses of the
same variant could then differ in length, which makes them awkward to
validate by eye or by form field.

This codec treats the input as one big-endian number and writes it with
exactly as many base-60 digits as the *byte length* requires::

    width(n) = smallest w such that 60**w >= 256**n

So every 37-byte short address is 51 characters and every 53-byte long
address is 72 characters, whatever its contents.

Decoding inverts the width rule: `w` characters always carry
`floor(log256(60**w))` bytes. Because 60 < 256 the two rules are exact
inverses, leading zero bytes included.


ALPHABET
--------
The Bitcoin Base58 alphabet (no '0', 'O', 'I' or 'l') followed by '-' and
'_'. Both extra characters are URL-safe and never appear as the leading
digit of an address, since the leading digit is always small.

Characters that are easy to mistype are accepted on decode:

    'I', 'l', '|', '!'  ->  '1'
    'O', '0'            ->  'o'
"""

from __future__ import annotations

from typing import Final

__all__ = ["Base60"]


class Base60:
    """Fixed-width big-number encoding over a 60-character alphabet."""

    ALPHABET: Final[str] = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz-_"
    """Digit alphabet, least significant first by index."""

    BASE: Final[int] = len(ALPHABET)
    """Numeric base (60)."""

    _INDEX: Final[dict[str, int]] = {char: i for i, char in enumerate(ALPHABET)}

    _LOOKALIKES: Final[dict[int, str]] = str.maketrans(
        {"I": "1", "l": "1", "|": "1", "!": "1", "O": "o", "0": "o"}
    )

    @classmethod
    def encoded_length(cls, byte_length: int) -> int:
        """
        Number of characters used to encode `byte_length` bytes.

        Args:
            byte_length: Input size in bytes.

        Returns:
            Smallest width whose digit range covers every input value.
        """
        if byte_length < 0:
            raise ValueError(f"byte length must be non-negative, got {byte_length}")

        limit = 1 << (8 * byte_length)
        width = 0
        capacity = 1
        while capacity < limit:
            capacity *= cls.BASE
            width += 1
        return width

    @classmethod
    def decoded_length(cls, char_length: int) -> int:
        """
        Number of bytes carried by `char_length` characters.

        Args:
            char_length: Encoded size in characters.

        Returns:
            Largest byte count whose value range fits the digit range.
        """
        if char_length < 0:
            raise ValueError(f"char length must be non-negative, got {char_length}")

        # 256**n <= 60**w  <=>  8n <= floor(log2(60**w)), as 256**n is a power of two.
        return ((cls.BASE**char_length).bit_length() - 1) // 8

    @classmethod
    def encode(cls, data: bytes) -> str:
        """
        Encode bytes as a fixed-width Base60 string.

        Args:
            data: Bytes to encode.

        Returns:
            Encoded string of `encoded_length(len(data))` characters.
        """
        num = int.from_bytes(data, "big")
        digits: list[str] = []

        for _ in range(cls.encoded_length(len(data))):
            num, remainder = divmod(num, cls.BASE)
            digits.append(cls.ALPHABET[remainder])

        return "".join(reversed(digits))

    @classmethod
    def decode(cls, text: str) -> bytes:
        """
        Decode a Base60 string back to bytes.

        Surrounding whitespace is ignored and lookalike characters are
        normalized before decoding.

        Args:
            text: Encoded string.

        Returns:
            Decoded bytes of `decoded_length(len(text))` bytes.

        Raises:
            ValueError: If the string contains invalid characters or its
                value does not fit the implied byte length.
        """
        normalized = text.strip().translate(cls._LOOKALIKES)

        num = 0
        for char in normalized:
            index = cls._INDEX.get(char)
            if index is None:
                raise ValueError(f"Invalid Base60 character: {char!r}")
            num = num * cls.BASE + index

        length = cls.decoded_length(len(normalized))
        if num.bit_length() > 8 * length:
            raise ValueError(
                f"Base60 value of {len(normalized)} characters overflows {length} bytes"
            )

        return num.to_bytes(length, "big")
