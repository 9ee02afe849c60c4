"""Exception hierarchy for key addresses."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .keys import KeyInfo


class KeyAddressError(Exception):
    """
    Base exception for all key address errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class InvalidTypeMarkError(KeyAddressError, ValueError):
    """
    Raised when a type mark does not fit the 4-bit header slot.

    Attributes:
        value: The rejected type mark.
        min_value: The minimum allowed value (inclusive).
        max_value: The maximum allowed value (inclusive).
    """

    def __init__(self, value: object, *, min_value: int = 0, max_value: int) -> None:
        self.value = value
        self.min_value = min_value
        self.max_value = max_value

        super().__init__(
            f"type mark must be in [{min_value}..{max_value}] range, got {value}"
        )


class UnsupportedKeyError(KeyAddressError, ValueError):
    """
    Raised when a key has no address mask.

    Attributes:
        info: Introspection result of the rejected key, or None when the
            object could not be introspected at all.
    """

    def __init__(self, info: KeyInfo | None, detail: str | None = None) -> None:
        self.info = info

        if detail is not None:
            msg = f"key can't be masked for address: {detail}"
        else:
            msg = f"key can't be masked for address: {info}"

        super().__init__(msg)


class IllegalAddressError(KeyAddressError):
    """
    Raised when packed or textual data is not a valid address.

    Not a ValueError: address validation runs inside pydantic validators and
    must surface unchanged rather than as a ValidationError.

    Attributes:
        detail: Description of what is wrong with the address.
    """

    def __init__(self, detail: str) -> None:
        self.detail = detail
        super().__init__(f"illegal address: {detail}")
