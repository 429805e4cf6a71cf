"""Type definitions for decoded tokens and sign results."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from jwtime.core.errors import JwtError

KeyMaterial = bytes | str


class DecodedToken(BaseModel):
    """Structurally decoded token; nothing here has been verified."""

    model_config = ConfigDict(frozen=True)

    header: dict[str, Any]
    payload: dict[str, Any]
    signature: str


class SignResult(BaseModel):
    """Outcome of a direct-mode sign: exactly one of token or error is set."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    token: str | None = None
    error: JwtError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
