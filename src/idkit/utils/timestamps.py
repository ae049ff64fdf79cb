"""Timestamp utilities for idkit.

This module provides the clock and ISO-8601 helpers shared by codecs and
generators.
"""

import time
from datetime import UTC, datetime

__all__ = [
    "now_ms",
    "get_iso_timestamp",
    "millis_to_datetime",
    "millis_to_iso8601",
    "format_duration_ms",
]


def now_ms() -> int:
    """Current time in milliseconds since the Unix epoch."""
    return time.time_ns() // 1_000_000


def get_iso_timestamp() -> str:
    """Get current UTC timestamp in ISO8601 format with microseconds.

    Returns
    -------
    str
        ISO8601 timestamp with microseconds (e.g., "2026-02-03T12:34:56.123456Z").
    """
    return datetime.now(UTC).isoformat().replace("+00:00", "Z")


def millis_to_datetime(millis: int) -> datetime | None:
    """Convert epoch milliseconds to an aware UTC datetime.

    Parameters
    ----------
    millis : int
        Milliseconds since the Unix epoch.

    Returns
    -------
    datetime | None
        UTC datetime, or None when the value is outside the range
        ``datetime`` can represent.
    """
    seconds, remainder = divmod(millis, 1000)
    try:
        moment = datetime.fromtimestamp(seconds, UTC)
    except (OverflowError, OSError, ValueError):
        return None
    return moment.replace(microsecond=remainder * 1000)


def millis_to_iso8601(millis: int) -> str:
    """Render epoch milliseconds as ``YYYY-MM-DDTHH:MM:SS.mmmZ``.

    Returns ``"invalid"`` for values outside the representable range.
    """
    moment = millis_to_datetime(millis)
    if moment is None:
        return "invalid"
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{millis % 1000:03d}Z"


def format_duration_ms(ms: int) -> str:
    """Format a millisecond span as a human-readable duration.

    Parameters
    ----------
    ms : int
        Duration in milliseconds (sign is ignored).

    Returns
    -------
    str
        E.g. ``"250 ms"``, ``"1.50 seconds"``, ``"2.00 days"``.
    """
    ms = abs(ms)
    if ms < 1000:
        return f"{ms} ms"
    if ms < 60_000:
        return f"{ms / 1000:.2f} seconds"
    if ms < 3_600_000:
        return f"{ms / 60_000:.2f} minutes"
    if ms < 86_400_000:
        return f"{ms / 3_600_000:.2f} hours"
    return f"{ms / 86_400_000:.2f} days"
