"""Data model for structured audit events."""

from dataclasses import dataclass, field
from typing import Any

__all__ = ["LogEvent", "LEVELS"]

LEVELS = ("DEBUG", "INFO", "WARN", "ERROR")


@dataclass
class LogEvent:
    """Structured log event (one JSONL line).

    Attributes
    ----------
    ts : str
        ISO8601 timestamp.
    run_id : str
        Run identifier.
    level : str
        Log level ("DEBUG", "INFO", "WARN", "ERROR").
    event : str
        Event type identifier.
    data : dict[str, Any]
        Event-specific data.
    kind : str | None
        Identifier kind the event relates to.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    kind: str | None = None
