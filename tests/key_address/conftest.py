"""
Shared fixtures for key address tests.

RSA key generation is slow, so every real key is generated once per session.
`StubKey` gives fast, deterministic keys for property tests.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

import pytest
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from key_address import KeyAlgorithm, KeyInfo
from key_address.digest import Digest


@dataclass(frozen=True)
class StubKey:
    """An `AddressableKey` with fixed introspection data and components."""

    components: bytes
    algorithm: KeyAlgorithm = KeyAlgorithm.RSA_PUBLIC
    key_size: int = 2048
    public_exponent: int | None = 0x10001

    def info(self) -> KeyInfo:
        return KeyInfo(self.algorithm, self.key_size, self.public_exponent)

    def update_digest_with_key_components(self, digest: Digest) -> Digest:
        return digest.update(self.components)


@pytest.fixture
def stub_key() -> Callable[..., StubKey]:
    """Factory for stub keys."""

    def _create(components: bytes = b"stub key", **kwargs: object) -> StubKey:
        return StubKey(components, **kwargs)  # type: ignore[arg-type]

    return _create


@pytest.fixture(scope="session")
def rsa_2048() -> rsa.RSAPrivateKey:
    """RSA 2048-bit private key, exponent 65537."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_2048_other() -> rsa.RSAPrivateKey:
    """A second, unrelated RSA 2048-bit private key."""
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_4096() -> rsa.RSAPrivateKey:
    """RSA 4096-bit private key, exponent 65537."""
    return rsa.generate_private_key(public_exponent=65537, key_size=4096)


@pytest.fixture(scope="session")
def rsa_1024() -> rsa.RSAPrivateKey:
    """RSA key of an unsupported size."""
    return rsa.generate_private_key(public_exponent=65537, key_size=1024)


@pytest.fixture(scope="session")
def rsa_exponent_3() -> rsa.RSAPrivateKey:
    """RSA 2048-bit key with an unsupported public exponent."""
    return rsa.generate_private_key(public_exponent=3, key_size=2048)


@pytest.fixture(scope="session")
def ed25519_key() -> ed25519.Ed25519PrivateKey:
    """Ed25519 private key (unsupported family)."""
    return ed25519.Ed25519PrivateKey.generate()


@pytest.fixture(scope="session")
def ec_key() -> ec.EllipticCurvePrivateKey:
    """P-256 private key (unsupported family)."""
    return ec.generate_private_key(ec.SECP256R1())
