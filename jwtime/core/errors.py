"""Error kinds raised while signing and verifying tokens."""


class JwtError(Exception):
    """Base class for every signing or verification failure."""

    code = "jwt_error"
    default_message = "JWT operation failed"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class SchemaValidationError(JwtError):
    """Options failed structural validation."""

    code = "schema_invalid"
    default_message = "Options are invalid"

    def __init__(self, message: str, messages: list[str] | None = None) -> None:
        self.messages = messages or [message]
        super().__init__(message)


class ClaimFormatError(JwtError):
    """A temporal claim string is neither a calendar date nor a duration."""

    code = "claim_format"

    def __init__(self, claim: str) -> None:
        self.claim = claim
        super().__init__(f"Claim {claim} is not in a recognised time format")


class DecodeError(JwtError):
    """Token is not a valid compact serialization."""

    code = "decode_failed"
    default_message = "Token cannot be decoded as it has an invalid format"


class TemporalValidityError(JwtError):
    """Token iat, nbf or exp rules out use at the current time."""

    code = "temporal_invalid"
    default_message = "JWT is not currently valid due to invalid timestamp"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__()


class SignatureVerificationError(JwtError):
    """Signature does not match the key and algorithm supplied."""

    code = "signature_invalid"
    default_message = "Token signature cannot be verified"


class SigningError(JwtError):
    """The signing engine rejected the key material."""

    code = "signing_failed"
    default_message = "Token could not be signed with the provided key"
