"""Library settings loaded from environment variables."""

import logging
from typing import Literal, get_args

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

Algorithm = Literal[
    "HS256",
    "HS384",
    "HS512",
    "RS256",
    "RS384",
    "RS512",
    "ES256",
    "ES384",
    "ES512",
]

ALGORITHMS: tuple[str, ...] = get_args(Algorithm)
TEMPORAL_CLAIMS: tuple[str, ...] = ("iat", "nbf", "exp")

DEFAULT_ALGORITHM: Algorithm = "RS256"
CLOCK_LEEWAY_DEFAULT = 0


class JwtSettings(BaseSettings):
    """Signing and verification defaults."""

    model_config = SettingsConfigDict(env_prefix="JWT_", frozen=True)

    default_algorithm: Algorithm = DEFAULT_ALGORITHM
    clock_leeway: int = Field(default=CLOCK_LEEWAY_DEFAULT, ge=0)
    log_level: str = "INFO"


def configure_logging(settings: JwtSettings) -> None:
    """Apply the configured level to the library logger."""
    logging.getLogger("jwtime").setLevel(settings.log_level.upper())
