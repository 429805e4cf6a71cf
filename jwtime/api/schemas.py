"""Pydantic schemas for sign and verify options."""

import math
from typing import Any, Literal, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)

from jwtime.api.formatting import humanize, validation_messages
from jwtime.claims.coercion import epoch_seconds
from jwtime.core.errors import SchemaValidationError
from jwtime.core.settings import DEFAULT_ALGORITHM, Algorithm
from jwtime.crypto.types import KeyMaterial

TemporalValue = int | float | str
OptionsT = TypeVar("OptionsT", bound=BaseModel)


def _to_camel(name: str) -> str:
    """Convert snake_case to camelCase for option keys."""
    parts = name.split("_")
    return parts[0] + "".join(p.capitalize() for p in parts[1:])


def _with_default_algorithm(data: Any, field: str, info: ValidationInfo) -> Any:
    """Fill an omitted algorithm field from the validation context."""
    if isinstance(data, dict) and field not in data:
        context = info.context or {}
        return {**data, field: context.get("default_algorithm", DEFAULT_ALGORITHM)}
    return data


class JWTHeader(BaseModel):
    """JOSE header; unknown fields such as ``kid`` are kept."""

    model_config = ConfigDict(extra="allow", frozen=True)

    alg: Algorithm = DEFAULT_ALGORITHM
    typ: Literal["JWT"] = "JWT"

    @model_validator(mode="before")
    @classmethod
    def _default_alg(cls, data: Any, info: ValidationInfo) -> Any:
        return _with_default_algorithm(data, "alg", info)

    def to_header(self) -> dict[str, Any]:
        """Header fields as sent to the signing engine."""
        return self.model_dump()


class ClaimsPayload(BaseModel):
    """Registered claims plus caller-defined extension claims."""

    model_config = ConfigDict(extra="allow", frozen=True)

    iat: TemporalValue = Field(default_factory=epoch_seconds)
    nbf: TemporalValue | None = None
    exp: TemporalValue | None = None
    aud: str | None = None
    iss: str | None = None
    jti: str | None = None
    sub: str | None = None

    @field_validator("iat", "nbf", "exp")
    @classmethod
    def _non_negative(cls, value: TemporalValue | None) -> TemporalValue | None:
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError("must be a finite number")
        if isinstance(value, int | float) and value < 0:
            raise ValueError("must be a non-negative epoch second")
        return value

    @property
    def extensions(self) -> dict[str, Any]:
        """Claims outside the registered set."""
        return dict(self.model_extra or {})

    def to_claims(self) -> dict[str, Any]:
        """Merge registered and extension claims, dropping unset ones."""
        registered = self.model_dump(exclude_none=True, exclude=set(self.extensions))
        return {**self.extensions, **registered}


class SignOptions(BaseModel):
    """Options accepted by ``sign``."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    header: JWTHeader
    payload: ClaimsPayload
    private_key: KeyMaterial

    @field_validator("private_key")
    @classmethod
    def _non_empty_key(cls, value: KeyMaterial) -> KeyMaterial:
        if not value:
            raise ValueError("must not be empty")
        return value


class VerifyOptions(BaseModel):
    """Options accepted by ``verify``; ``signature`` is the compact token."""

    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
        frozen=True,
    )

    signature: str
    algorithm: Algorithm = DEFAULT_ALGORITHM
    public_key: KeyMaterial

    @field_validator("public_key")
    @classmethod
    def _non_empty_key(cls, value: KeyMaterial) -> KeyMaterial:
        if not value:
            raise ValueError("must not be empty")
        return value

    @model_validator(mode="before")
    @classmethod
    def _default_algorithm(cls, data: Any, info: ValidationInfo) -> Any:
        return _with_default_algorithm(data, "algorithm", info)


def parse_options(
    schema: type[OptionsT], options: Any, *, default_algorithm: Algorithm
) -> OptionsT:
    """Validate raw options, raising SchemaValidationError with readable text."""
    try:
        return schema.model_validate(
            options, context={"default_algorithm": default_algorithm}
        )
    except ValidationError as e:
        messages = validation_messages(e)
        raise SchemaValidationError(humanize(messages), messages) from e
