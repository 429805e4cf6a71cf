"""Token verification: validate options, decode, check time, check signature."""

import logging
from typing import Any

from jwtime.api.schemas import VerifyOptions, parse_options
from jwtime.claims.temporal import temporal_failure
from jwtime.core.errors import (
    DecodeError,
    SignatureVerificationError,
    TemporalValidityError,
)
from jwtime.core.settings import JwtSettings
from jwtime.crypto.engine import JwsEngine

logger = logging.getLogger(__name__)


def verify_token(
    options: Any, *, settings: JwtSettings, engine: JwsEngine
) -> dict[str, Any]:
    """Verify ``options["signature"]`` and return its payload.

    The temporal check runs before the signature check, so an expired or
    not-yet-valid token is rejected without touching the key. Raises
    SchemaValidationError, DecodeError, TemporalValidityError or
    SignatureVerificationError.
    """
    request = parse_options(
        VerifyOptions, options, default_algorithm=settings.default_algorithm
    )

    decoded = engine.decode(request.signature)
    if decoded is None:
        raise DecodeError()

    reason = temporal_failure(decoded.payload, leeway=settings.clock_leeway)
    if reason is not None:
        raise TemporalValidityError(reason)

    if not engine.verify(request.signature, request.algorithm, request.public_key):
        raise SignatureVerificationError()

    return decoded.payload
