"""JWS signing engine interface and its PyJWT-backed implementation."""

import json
import logging
import re
from typing import Any, Protocol

import jwt
from jwt.utils import base64url_decode

from jwtime.core.errors import SigningError
from jwtime.crypto.types import DecodedToken, KeyMaterial

logger = logging.getLogger(__name__)

_SEGMENT_RE = re.compile(r"^[A-Za-z0-9_-]*$")


class JwsEngine(Protocol):
    """Cryptographic capability the orchestrators delegate to."""

    def sign(
        self, header: dict[str, Any], payload: dict[str, Any], key: KeyMaterial
    ) -> str: ...

    def verify(self, token: str, algorithm: str, key: KeyMaterial) -> bool: ...

    def decode(self, token: str) -> DecodedToken | None: ...


def _load_segment(segment: str) -> Any:
    return json.loads(base64url_decode(segment))


def decode(token: Any) -> DecodedToken | None:
    """Split a compact token into header, payload and signature.

    Returns None unless the token has three base64url segments whose header
    and payload are JSON objects and whose header names an ``alg``. The
    signature segment is only checked for its alphabet and may be empty;
    whether it decodes and matches is left to the engine.
    """
    if not isinstance(token, str):
        return None
    segments = token.split(".")
    if len(segments) != 3:
        return None
    header_seg, payload_seg, signature_seg = segments
    if not header_seg or not payload_seg:
        return None
    if not all(_SEGMENT_RE.match(segment) for segment in segments):
        return None
    try:
        header = _load_segment(header_seg)
        payload = _load_segment(payload_seg)
    except ValueError:
        return None
    if not isinstance(header, dict) or "alg" not in header:
        return None
    if not isinstance(payload, dict):
        return None
    return DecodedToken(header=header, payload=payload, signature=signature_seg)


def is_token(token: Any) -> bool:
    """Return True if ``token`` is a well-formed compact JWS."""
    return decode(token) is not None


class PyJWSEngine:
    """Signs and verifies compact JWS tokens with PyJWT."""

    def __init__(self) -> None:
        self._jws = jwt.PyJWS()

    def sign(
        self, header: dict[str, Any], payload: dict[str, Any], key: KeyMaterial
    ) -> str:
        """Sign ``payload`` under ``header["alg"]``; raise SigningError on failure."""
        try:
            body = json.dumps(payload, separators=(",", ":")).encode()
        except (TypeError, ValueError) as e:
            raise SigningError(f"Claims could not be serialised: {e}") from e
        try:
            return self._jws.encode(
                body,
                key,
                algorithm=header["alg"],
                headers=header,
            )
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            logger.warning("Signing with %s failed: %s", header["alg"], type(e).__name__)
            raise SigningError() from e

    def verify(self, token: str, algorithm: str, key: KeyMaterial) -> bool:
        """Return True only if ``token`` is signed by ``key`` using ``algorithm``."""
        try:
            self._jws.decode_complete(token, key, algorithms=[algorithm])
        except (jwt.PyJWTError, ValueError, TypeError) as e:
            logger.debug("Signature check failed: %s", type(e).__name__)
            return False
        return True

    def decode(self, token: str) -> DecodedToken | None:
        return decode(token)
