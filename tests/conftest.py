"""Shared test fixtures for jwtime."""

from collections.abc import Callable
from typing import Any, NamedTuple

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.hazmat.primitives.asymmetric.types import PrivateKeyTypes

from jwtime.core.settings import JwtSettings
from jwtime.tokens.service import JwtService

HMAC_SECRET = "hmac-secret-used-only-in-tests-" + "x" * 40
RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537

EC_CURVES = {
    "ES256": ec.SECP256R1(),
    "ES384": ec.SECP384R1(),
    "ES512": ec.SECP521R1(),
}


class KeyPair(NamedTuple):
    """PEM-encoded private and public halves of a keypair."""

    private_pem: bytes
    public_pem: bytes


def _to_pem_pair(private_key: PrivateKeyTypes) -> KeyPair:
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    public_pem = private_key.public_key().public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return KeyPair(private_pem=private_pem, public_pem=public_pem)


def _generate_rsa() -> KeyPair:
    return _to_pem_pair(
        rsa.generate_private_key(
            public_exponent=RSA_PUBLIC_EXPONENT,
            key_size=RSA_KEY_SIZE,
        )
    )


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep JWT_* variables from the host out of test settings."""
    for name in ("JWT_DEFAULT_ALGORITHM", "JWT_CLOCK_LEEWAY", "JWT_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="session")
def rsa_keys() -> KeyPair:
    """An RSA-2048 keypair shared across the session."""
    return _generate_rsa()


@pytest.fixture(scope="session")
def other_rsa_keys() -> KeyPair:
    """A second RSA keypair that did not sign anything."""
    return _generate_rsa()


@pytest.fixture(scope="session")
def ec_keys() -> dict[str, KeyPair]:
    """EC keypairs keyed by the ES algorithm that uses their curve."""
    return {
        alg: _to_pem_pair(ec.generate_private_key(curve))
        for alg, curve in EC_CURVES.items()
    }


@pytest.fixture(scope="session")
def keys_for(
    rsa_keys: KeyPair, ec_keys: dict[str, KeyPair]
) -> Callable[[str], tuple[Any, Any]]:
    """Return (signing key, verification key) for an algorithm."""

    def _keys(alg: str) -> tuple[Any, Any]:
        if alg.startswith("HS"):
            return HMAC_SECRET, HMAC_SECRET
        if alg.startswith("ES"):
            pair = ec_keys[alg]
            return pair.private_pem, pair.public_pem
        return rsa_keys.private_pem, rsa_keys.public_pem

    return _keys


@pytest.fixture
def service() -> JwtService:
    """A JwtService with default settings and the PyJWT engine."""
    return JwtService(JwtSettings())


@pytest.fixture
def sign_options(rsa_keys: KeyPair) -> Callable[..., dict[str, Any]]:
    """Build RS256 sign options; keyword arguments override payload claims."""

    def _build(**claims: Any) -> dict[str, Any]:
        payload: dict[str, Any] = {"exp": "365d", "sub": "user-1"}
        payload.update(claims)
        return {
            "header": {"alg": "RS256", "typ": "JWT"},
            "payload": payload,
            "privateKey": rsa_keys.private_pem,
        }

    return _build


@pytest.fixture
def verify_options(rsa_keys: KeyPair) -> Callable[..., dict[str, Any]]:
    """Build RS256 verify options for a token."""

    def _build(token: Any, **overrides: Any) -> dict[str, Any]:
        options = {
            "signature": token,
            "algorithm": "RS256",
            "publicKey": rsa_keys.public_pem,
        }
        options.update(overrides)
        return options

    return _build


@pytest.fixture(scope="session")
def hmac_secret() -> str:
    """Shared secret long enough for HS512."""
    return HMAC_SECRET
