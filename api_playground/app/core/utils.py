"""Small helpers shared by the endpoint modules."""

import re
from datetime import datetime, timezone
from typing import Optional

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def coerce_int(value: Optional[str]) -> Optional[int]:
    """Parse the leading integer of ``value`` the way browsers' parseInt does.

    ``"42"`` and ``"42abc"`` both give 42; a string without a leading
    integer gives ``None``.
    """
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))


def coerce_query_int(value: Optional[str]) -> Optional[float]:
    """Parse an optional numeric query parameter.

    A missing or empty value gives ``None`` (the filter is skipped).
    Otherwise the leading integer is used as in :func:`coerce_int`; a
    value without one gives NaN, which compares false with every
    number, so a filter built on it matches nothing.
    """
    if not value:
        return None
    number = coerce_int(value)
    return float("nan") if number is None else number


def iso_timestamp() -> str:
    """Return the current UTC time as an ISO 8601 string ending in ``Z``."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
