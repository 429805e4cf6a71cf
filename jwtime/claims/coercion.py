"""Normalise iat/nbf/exp claims into epoch seconds.

Temporal claims may be given as epoch seconds, as a calendar date
(``31-12-2030``, ``31/12/30``) or as a duration relative to now
(``365d``, ``12h``, ``1.5 years``).
"""

import math
import re
import time
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from jwtime.core.errors import ClaimFormatError
from jwtime.core.settings import TEMPORAL_CLAIMS

_DATE_FORMATS = {
    "-": ("%d-%m-%Y", "%d-%m-%y"),
    "/": ("%d/%m/%Y", "%d/%m/%y"),
}
_DATE_RE = re.compile(r"^\d{2}([-/])\d{2}\1(?:\d{2}|\d{4})$")

_SECOND = 1.0
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_YEAR = 365.25 * _DAY

_UNIT_SECONDS = {
    "ms": 0.001,
    "msec": 0.001,
    "msecs": 0.001,
    "millisecond": 0.001,
    "milliseconds": 0.001,
    "s": _SECOND,
    "sec": _SECOND,
    "secs": _SECOND,
    "second": _SECOND,
    "seconds": _SECOND,
    "m": _MINUTE,
    "min": _MINUTE,
    "mins": _MINUTE,
    "minute": _MINUTE,
    "minutes": _MINUTE,
    "h": _HOUR,
    "hr": _HOUR,
    "hrs": _HOUR,
    "hour": _HOUR,
    "hours": _HOUR,
    "d": _DAY,
    "day": _DAY,
    "days": _DAY,
    "w": _WEEK,
    "week": _WEEK,
    "weeks": _WEEK,
    "y": _YEAR,
    "yr": _YEAR,
    "yrs": _YEAR,
    "year": _YEAR,
    "years": _YEAR,
}
_DURATION_RE = re.compile(
    r"^(\d+(?:\.\d+)?|\.\d+) *("
    + "|".join(sorted(_UNIT_SECONDS, key=len, reverse=True))
    + r")$",
    re.IGNORECASE,
)


def epoch_seconds() -> int:
    """Current wall-clock time as whole epoch seconds."""
    return math.floor(time.time())


def parse_calendar_date(value: str) -> int | None:
    """Return midnight UTC of a DD-MM-YYYY style date, or None.

    Dates before the epoch are not valid claim values and also give None.
    """
    match = _DATE_RE.match(value)
    if match is None:
        return None
    for fmt in _DATE_FORMATS[match.group(1)]:
        try:
            parsed = datetime.strptime(value, fmt)
        except ValueError:
            continue
        seconds = int(parsed.replace(tzinfo=UTC).timestamp())
        return seconds if seconds >= 0 else None
    return None


def parse_duration(value: str) -> int | None:
    """Return the whole seconds in a duration like ``"1d"``, or None."""
    match = _DURATION_RE.match(value.strip())
    if match is None:
        return None
    amount, unit = match.groups()
    seconds = float(amount) * _UNIT_SECONDS[unit.lower()]
    if not math.isfinite(seconds):
        return None
    return math.floor(seconds)


def coerce_claim(name: str, value: Any, now: int) -> Any:
    """Coerce a single temporal claim value to epoch seconds."""
    if isinstance(value, str):
        absolute = parse_calendar_date(value)
        if absolute is not None:
            return absolute
        offset = parse_duration(value)
        if offset is not None:
            return now + offset
        raise ClaimFormatError(name)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ClaimFormatError(name)
        return math.floor(value)
    return value


def coerce_claims(
    claims: Mapping[str, Any], *, now: int | None = None
) -> dict[str, Any]:
    """Return a copy of ``claims`` with iat, nbf and exp in epoch seconds.

    Durations are offsets from ``now`` (read once when not given), not from
    the token's ``iat``. Numbers are taken to already be epoch seconds.
    Raises ClaimFormatError for a string that is neither a date nor a
    duration.
    """
    if now is None:
        now = epoch_seconds()
    coerced = dict(claims)
    for name in TEMPORAL_CLAIMS:
        if coerced.get(name) is not None:
            coerced[name] = coerce_claim(name, coerced[name], now)
    return coerced
