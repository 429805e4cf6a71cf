"""Sign and verify JWTs with human-friendly iat, nbf and exp claims."""

from jwtime.api.formatting import humanize
from jwtime.claims.coercion import coerce_claims
from jwtime.claims.temporal import is_currently_valid
from jwtime.core.errors import (
    ClaimFormatError,
    DecodeError,
    JwtError,
    SchemaValidationError,
    SignatureVerificationError,
    SigningError,
    TemporalValidityError,
)
from jwtime.core.settings import ALGORITHMS, JwtSettings, configure_logging
from jwtime.crypto.engine import JwsEngine, PyJWSEngine, decode, is_token
from jwtime.crypto.types import DecodedToken, SignResult
from jwtime.tokens.service import JwtService

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "ClaimFormatError",
    "DecodeError",
    "DecodedToken",
    "JwsEngine",
    "JwtError",
    "JwtService",
    "JwtSettings",
    "PyJWSEngine",
    "SchemaValidationError",
    "SignResult",
    "SignatureVerificationError",
    "SigningError",
    "TemporalValidityError",
    "coerce_claims",
    "configure_logging",
    "decode",
    "humanize",
    "is_currently_valid",
    "is_token",
]
