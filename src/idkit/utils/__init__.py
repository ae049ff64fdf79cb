"""Common utility functions for idkit.

This module consolidates the clock and timestamp rendering helpers used
across the codebase.
"""

from idkit.utils.timestamps import (
    format_duration_ms,
    get_iso_timestamp,
    millis_to_datetime,
    millis_to_iso8601,
    now_ms,
)

__all__ = [
    "now_ms",
    "get_iso_timestamp",
    "millis_to_datetime",
    "millis_to_iso8601",
    "format_duration_ms",
]
