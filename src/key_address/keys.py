"""
Key introspection and identity digest feed.

An address codec needs two things from a key:

1. **Introspection**: which algorithm it is, how large, and any numeric
   parameters that distinguish key classes (the RSA public exponent).
2. **Digest feed**: the key pushes the bytes that define its identity into a
   digest accumulator. The codec never looks at those bytes itself.

Both are captured by the `AddressableKey` protocol. Keys from the
`cryptography` package are adapted through `CryptographyKey`.

RSA identity components::

    [public exponent, unsigned big-endian][modulus, unsigned big-endian]

A private key contributes its public components, so both halves of a pair
share one address.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

from .digest import Digest
from .exceptions import UnsupportedKeyError

__all__ = [
    "KeyAlgorithm",
    "KeyFamily",
    "KeyInfo",
    "AddressableKey",
    "CryptographyKey",
    "as_addressable",
]


class KeyFamily(str, Enum):
    """Algorithm family, shared by the public and private halves of a key."""

    RSA = "rsa"
    EC = "ec"
    ED25519 = "ed25519"
    ED448 = "ed448"
    UNKNOWN = "unknown"


class KeyAlgorithm(str, Enum):
    """Algorithm tag reported by key introspection."""

    RSA_PUBLIC = "rsa_public"
    RSA_PRIVATE = "rsa_private"
    EC_PUBLIC = "ec_public"
    EC_PRIVATE = "ec_private"
    ED25519_PUBLIC = "ed25519_public"
    ED25519_PRIVATE = "ed25519_private"
    ED448_PUBLIC = "ed448_public"
    ED448_PRIVATE = "ed448_private"
    UNKNOWN = "unknown"

    @property
    def family(self) -> KeyFamily:
        """The family this algorithm belongs to."""
        return KeyFamily(self.value.rsplit("_", 1)[0])


@dataclass(frozen=True, slots=True)
class KeyInfo:
    """
    Introspection result of a key.

    Attributes:
        algorithm: Algorithm tag.
        key_size: Key length in bits.
        public_exponent: Public exponent for RSA keys, None otherwise.
    """

    algorithm: KeyAlgorithm
    key_size: int
    public_exponent: int | None = None

    def __str__(self) -> str:
        text = f"{self.algorithm.value}/{self.key_size}"
        if self.public_exponent is not None:
            text = f"{text} e={self.public_exponent:#x}"
        return text


@runtime_checkable
class AddressableKey(Protocol):
    """A key that can be addressed."""

    def info(self) -> KeyInfo:
        """Describe the key for mask classification."""
        ...

    def update_digest_with_key_components(self, digest: Digest) -> Digest:
        """Feed identity-defining bytes into `digest` and return it."""
        ...


def _unsigned_bytes(value: int) -> bytes:
    """Minimal unsigned big-endian encoding (at least one byte)."""
    return value.to_bytes(max(1, (value.bit_length() + 7) // 8), "big")


@dataclass(frozen=True, slots=True)
class CryptographyKey:
    """
    `AddressableKey` adapter for `cryptography` key objects.

    RSA keys are fully supported. Ed25519, Ed448 and EC keys only report
    their introspection data so that classification can reject them with a
    precise message.

    Attributes:
        key: The wrapped `cryptography` key.
    """

    key: Any
    """A `cryptography` public or private key."""

    def info(self) -> KeyInfo:
        key = self.key
        match key:
            case rsa.RSAPublicKey():
                return KeyInfo(
                    KeyAlgorithm.RSA_PUBLIC, key.key_size, key.public_numbers().e
                )
            case rsa.RSAPrivateKey():
                return KeyInfo(
                    KeyAlgorithm.RSA_PRIVATE, key.key_size, key.private_numbers().public_numbers.e
                )
            case ec.EllipticCurvePublicKey():
                return KeyInfo(KeyAlgorithm.EC_PUBLIC, key.key_size)
            case ec.EllipticCurvePrivateKey():
                return KeyInfo(KeyAlgorithm.EC_PRIVATE, key.key_size)
            case ed25519.Ed25519PublicKey():
                return KeyInfo(KeyAlgorithm.ED25519_PUBLIC, 256)
            case ed25519.Ed25519PrivateKey():
                return KeyInfo(KeyAlgorithm.ED25519_PRIVATE, 256)
            case ed448.Ed448PublicKey():
                return KeyInfo(KeyAlgorithm.ED448_PUBLIC, 456)
            case ed448.Ed448PrivateKey():
                return KeyInfo(KeyAlgorithm.ED448_PRIVATE, 456)
        return KeyInfo(KeyAlgorithm.UNKNOWN, 0)

    def update_digest_with_key_components(self, digest: Digest) -> Digest:
        key = self.key
        if isinstance(key, rsa.RSAPrivateKey):
            key = key.public_key()
        if not isinstance(key, rsa.RSAPublicKey):
            raise UnsupportedKeyError(self.info())

        numbers = key.public_numbers()
        digest.update(_unsigned_bytes(numbers.e))
        digest.update(_unsigned_bytes(numbers.n))
        return digest


_CRYPTOGRAPHY_KEY_TYPES = (
    rsa.RSAPublicKey,
    rsa.RSAPrivateKey,
    ec.EllipticCurvePublicKey,
    ec.EllipticCurvePrivateKey,
    ed25519.Ed25519PublicKey,
    ed25519.Ed25519PrivateKey,
    ed448.Ed448PublicKey,
    ed448.Ed448PrivateKey,
)


def as_addressable(key: Any) -> AddressableKey:
    """
    Adapt `key` to the `AddressableKey` protocol.

    Args:
        key: An `AddressableKey` or a `cryptography` key object.

    Returns:
        The key itself, or a `CryptographyKey` wrapping it.

    Raises:
        UnsupportedKeyError: If the object is neither.
    """
    if isinstance(key, AddressableKey):
        return key
    if isinstance(key, _CRYPTOGRAPHY_KEY_TYPES):
        return CryptographyKey(key)
    raise UnsupportedKeyError(None, f"{type(key).__name__} is not a key")
