"""Check decoded iat/nbf/exp claims against the current time."""

from collections.abc import Mapping
from typing import Any

from jwtime.claims.coercion import epoch_seconds


def _is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def temporal_failure(
    payload: Mapping[str, Any], *, now: int | None = None, leeway: int = 0
) -> str | None:
    """Return why the payload is not valid at ``now``, or None if it is.

    ``exp`` is exclusive: a token stops being valid at its exp second.
    ``leeway`` widens every window by that many seconds of clock skew.
    """
    if now is None:
        now = epoch_seconds()

    for name in ("iat", "nbf", "exp"):
        if name in payload and not _is_number(payload[name]):
            return f"{name} is not a numeric timestamp"

    if "iat" in payload and payload["iat"] > now + leeway:
        return "token is issued in the future"
    if "nbf" in payload and payload["nbf"] > now + leeway:
        return "token is not yet valid"
    if "exp" in payload and now - leeway >= payload["exp"]:
        return "token has expired"
    return None


def is_currently_valid(
    payload: Mapping[str, Any], *, now: int | None = None, leeway: int = 0
) -> bool:
    """Return True when iat, nbf and exp all admit the current time."""
    return temporal_failure(payload, now=now, leeway=leeway) is None
