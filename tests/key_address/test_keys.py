"""Tests for key introspection and the identity digest feed."""

from __future__ import annotations

import hashlib

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

from key_address import (
    AddressableKey,
    CryptographyKey,
    KeyAlgorithm,
    KeyFamily,
    KeyInfo,
    UnsupportedKeyError,
)
from key_address.digest import Sha3_256
from key_address.keys import as_addressable


class TestKeyAlgorithm:
    """Tests for algorithm tags."""

    @pytest.mark.parametrize(
        "algorithm,family",
        [
            (KeyAlgorithm.RSA_PUBLIC, KeyFamily.RSA),
            (KeyAlgorithm.RSA_PRIVATE, KeyFamily.RSA),
            (KeyAlgorithm.EC_PRIVATE, KeyFamily.EC),
            (KeyAlgorithm.ED25519_PUBLIC, KeyFamily.ED25519),
            (KeyAlgorithm.ED448_PRIVATE, KeyFamily.ED448),
            (KeyAlgorithm.UNKNOWN, KeyFamily.UNKNOWN),
        ],
    )
    def test_family(self, algorithm: KeyAlgorithm, family: KeyFamily) -> None:
        """Public and private tags share a family."""
        assert algorithm.family is family


class TestKeyInfo:
    """Tests for introspection results."""

    def test_str_rsa(self) -> None:
        """RSA info shows the exponent in hex."""
        assert str(KeyInfo(KeyAlgorithm.RSA_PUBLIC, 2048, 65537)) == "rsa_public/2048 e=0x10001"

    def test_str_without_exponent(self) -> None:
        """Other keys show algorithm and size."""
        assert str(KeyInfo(KeyAlgorithm.ED25519_PUBLIC, 256)) == "ed25519_public/256"

    def test_immutable(self) -> None:
        """KeyInfo is frozen."""
        info = KeyInfo(KeyAlgorithm.RSA_PUBLIC, 2048, 65537)
        with pytest.raises(AttributeError):
            info.key_size = 4096  # type: ignore[misc]


class TestCryptographyKeyInfo:
    """Tests for introspection of `cryptography` keys."""

    def test_rsa_public(self, rsa_2048: rsa.RSAPrivateKey) -> None:
        """RSA public keys report size and exponent."""
        info = CryptographyKey(rsa_2048.public_key()).info()
        assert info == KeyInfo(KeyAlgorithm.RSA_PUBLIC, 2048, 65537)

    def test_rsa_private(self, rsa_4096: rsa.RSAPrivateKey) -> None:
        """RSA private keys report the public exponent."""
        info = CryptographyKey(rsa_4096).info()
        assert info == KeyInfo(KeyAlgorithm.RSA_PRIVATE, 4096, 65537)

    def test_rsa_exponent(self, rsa_exponent_3: rsa.RSAPrivateKey) -> None:
        """The actual exponent is reported."""
        assert CryptographyKey(rsa_exponent_3).info().public_exponent == 3

    def test_ed25519(self, ed25519_key: ed25519.Ed25519PrivateKey) -> None:
        """Ed25519 keys report their family and size."""
        assert CryptographyKey(ed25519_key).info() == KeyInfo(KeyAlgorithm.ED25519_PRIVATE, 256)
        assert CryptographyKey(ed25519_key.public_key()).info() == KeyInfo(
            KeyAlgorithm.ED25519_PUBLIC, 256
        )

    def test_ed448(self) -> None:
        """Ed448 keys report their family and size."""
        key = ed448.Ed448PrivateKey.generate()
        assert CryptographyKey(key.public_key()).info().algorithm is KeyAlgorithm.ED448_PUBLIC

    def test_ec(self, ec_key: ec.EllipticCurvePrivateKey) -> None:
        """EC keys report the curve size."""
        assert CryptographyKey(ec_key).info() == KeyInfo(KeyAlgorithm.EC_PRIVATE, 256)
        assert CryptographyKey(ec_key.public_key()).info().algorithm is KeyAlgorithm.EC_PUBLIC

    def test_unknown_object(self) -> None:
        """Wrapped non-keys are reported as unknown."""
        assert CryptographyKey(object()).info() == KeyInfo(KeyAlgorithm.UNKNOWN, 0)


class TestDigestFeed:
    """Tests for the identity components fed into digests."""

    def test_rsa_components(self, rsa_2048: rsa.RSAPrivateKey) -> None:
        """RSA feeds the exponent then the modulus, unsigned big-endian."""
        numbers = rsa_2048.public_key().public_numbers()
        expected = hashlib.sha3_256(
            b"\x01\x00\x01" + numbers.n.to_bytes(256, "big")
        ).digest()

        digest = CryptographyKey(rsa_2048.public_key()).update_digest_with_key_components(
            Sha3_256()
        )
        assert digest.digest() == expected

    def test_private_key_feeds_public_components(self, rsa_2048: rsa.RSAPrivateKey) -> None:
        """A private key contributes exactly its public components."""
        public = CryptographyKey(rsa_2048.public_key()).update_digest_with_key_components(
            Sha3_256()
        )
        private = CryptographyKey(rsa_2048).update_digest_with_key_components(Sha3_256())

        assert private.digest() == public.digest()

    def test_unsupported_family(self, ed25519_key: ed25519.Ed25519PrivateKey) -> None:
        """Keys outside the RSA family have no identity components."""
        with pytest.raises(UnsupportedKeyError, match="ed25519_private"):
            CryptographyKey(ed25519_key).update_digest_with_key_components(Sha3_256())


class TestAsAddressable:
    """Tests for adapting objects to `AddressableKey`."""

    def test_cryptography_key_is_wrapped(self, rsa_2048: rsa.RSAPrivateKey) -> None:
        """`cryptography` keys are wrapped in the adapter."""
        adapted = as_addressable(rsa_2048)

        assert isinstance(adapted, CryptographyKey)
        assert adapted.key is rsa_2048

    def test_addressable_key_passes_through(self, stub_key) -> None:
        """Objects implementing the protocol are used as-is."""
        key = stub_key()

        assert isinstance(key, AddressableKey)
        assert as_addressable(key) is key

    @pytest.mark.parametrize("value", [None, 42, b"key bytes", "key"])
    def test_other_objects_rejected(self, value: object) -> None:
        """Anything else is not a key."""
        with pytest.raises(UnsupportedKeyError, match="is not a key") as exc_info:
            as_addressable(value)

        assert exc_info.value.info is None
