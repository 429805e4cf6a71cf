"""Public sign/verify facade with direct, callback and async modes."""

import asyncio
import logging
from collections.abc import Callable
from typing import Any

from jwtime.core.errors import JwtError
from jwtime.core.settings import JwtSettings
from jwtime.crypto.engine import JwsEngine, PyJWSEngine
from jwtime.crypto.types import DecodedToken, SignResult
from jwtime.tokens.signing import sign_token
from jwtime.tokens.verification import verify_token

logger = logging.getLogger(__name__)

SignCallback = Callable[[JwtError | None, str | None], Any]
VerifyCallback = Callable[[JwtError | None, dict[str, Any] | None], Any]


def _schedule(callback: Callable[..., Any], error: Any, value: Any) -> None:
    """Deliver a result on the next turn of the running event loop."""
    asyncio.get_running_loop().call_soon(callback, error, value)


class JwtService:
    """Signs and verifies JWTs whose iat/nbf/exp may be dates or durations.

    ``sign`` and ``verify`` return their result directly when called without
    a callback. With a callback they return None and the callback is
    scheduled on the running event loop, never invoked before the call
    returns; this needs a running loop. ``sign_async`` and ``verify_async``
    raise the specific JwtError on failure.
    """

    def __init__(
        self,
        settings: JwtSettings | None = None,
        engine: JwsEngine | None = None,
    ) -> None:
        self._settings = settings or JwtSettings()
        self._engine = engine or PyJWSEngine()

    @property
    def settings(self) -> JwtSettings:
        return self._settings

    def _sign(self, options: Any) -> str:
        return sign_token(options, settings=self._settings, engine=self._engine)

    def _verify(self, options: Any) -> dict[str, Any]:
        return verify_token(options, settings=self._settings, engine=self._engine)

    def sign(
        self, options: Any, callback: SignCallback | None = None
    ) -> SignResult | None:
        """Sign a token; returns SignResult, or None when a callback is given."""
        try:
            result = SignResult(token=self._sign(options))
        except JwtError as e:
            logger.warning("Token signing failed (%s): %s", e.code, e.message)
            result = SignResult(error=e)

        if callback is None:
            return result
        _schedule(callback, result.error, result.token)
        return None

    async def sign_async(self, options: Any) -> str:
        """Sign a token, raising JwtError on failure."""
        await asyncio.sleep(0)
        return self._sign(options)

    def verify(
        self, options: Any, callback: VerifyCallback | None = None
    ) -> bool | None:
        """Verify a token; returns a bool, or None when a callback is given.

        Without a callback every failure kind collapses to False.
        """
        error: JwtError | None = None
        payload: dict[str, Any] | None = None
        try:
            payload = self._verify(options)
        except JwtError as e:
            logger.warning("Token verification failed (%s): %s", e.code, e.message)
            error = e

        if callback is None:
            return error is None
        _schedule(callback, error, payload)
        return None

    async def verify_async(self, options: Any) -> dict[str, Any]:
        """Verify a token and return its payload, raising JwtError on failure."""
        await asyncio.sleep(0)
        return self._verify(options)

    def decode(self, token: Any) -> DecodedToken | None:
        """Structurally decode ``token`` without verifying it."""
        return self._engine.decode(token)

    def is_token(self, token: Any) -> bool:
        return self.decode(token) is not None
