"""Token signing: validate options, coerce claims, sign."""

import logging
from typing import Any

from jwtime.api.schemas import SignOptions, parse_options
from jwtime.claims.coercion import coerce_claims
from jwtime.core.settings import JwtSettings
from jwtime.crypto.engine import JwsEngine

logger = logging.getLogger(__name__)


def sign_token(options: Any, *, settings: JwtSettings, engine: JwsEngine) -> str:
    """Sign ``options["payload"]`` and return a compact token.

    Options are validated before any claim is coerced, and claims are
    coerced before the engine sees them. Raises SchemaValidationError,
    ClaimFormatError or SigningError.
    """
    request = parse_options(
        SignOptions, options, default_algorithm=settings.default_algorithm
    )
    claims = coerce_claims(request.payload.to_claims())
    header = request.header.to_header()
    token = engine.sign(header, claims, request.private_key)
    logger.debug("Signed %s token with claims %s", header["alg"], sorted(claims))
    return token
