"""Structured audit logger for JSONL event logging.

Writes one JSON object per line to a file or an already-open text stream,
flushing after each event.
"""

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, TextIO

from ulid import ULID

from idkit.audit.models import LEVELS, LogEvent
from idkit.utils import get_iso_timestamp

__all__ = ["AuditLogger", "new_run_id"]


def new_run_id() -> str:
    """Fresh run identifier (a ULID, so runs sort by start time)."""
    return str(ULID())


class AuditLogger:
    """JSONL audit logger.

    Attributes
    ----------
    run_id : str
        Unique run identifier.
    log_path : Path | None
        Path to the JSONL log file, None when writing to a stream.
    min_level : str
        Events below this level are dropped.
    """

    def __init__(
        self,
        run_id: str | None = None,
        log_path: Path | None = None,
        stream: TextIO | None = None,
        min_level: str = "DEBUG",
    ) -> None:
        """Initialize audit logger.

        Parameters
        ----------
        run_id : str | None, optional
            Run identifier; a new ULID when omitted.
        log_path : Path | None, optional
            File to append to. Parent directories are created.
        stream : TextIO | None, optional
            Open text stream to write to instead of a file. Not closed by
            ``close``.
        min_level : str, optional
            Lowest level that is written.

        Raises
        ------
        ValueError
            If neither or both of ``log_path`` and ``stream`` are given, or
            ``min_level`` is unknown.
        """
        if (log_path is None) == (stream is None):
            raise ValueError("Exactly one of log_path or stream must be given")
        if min_level not in LEVELS:
            raise ValueError(f"Unknown log level: {min_level!r}. Valid levels: {', '.join(LEVELS)}")

        self.run_id = run_id or new_run_id()
        self.log_path = log_path
        self.min_level = min_level

        if log_path is not None:
            log_path.parent.mkdir(parents=True, exist_ok=True)
            self._file: TextIO = log_path.open("a", encoding="utf-8")
            self._owns_file = True
        else:
            self._file = stream  # type: ignore[assignment]
            self._owns_file = False

    def __enter__(self) -> "AuditLogger":
        """Enter context manager."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Exit context manager and close file."""
        self.close()

    def close(self) -> None:
        """Flush, and close the file handle when the logger opened it."""
        if self._file.closed:
            return
        self._file.flush()
        if self._owns_file:
            self._file.close()

    def event(
        self,
        event_type: str,
        data: dict[str, Any] | None = None,
        level: str = "INFO",
        kind: str | None = None,
    ) -> None:
        """Write structured event to log.

        Parameters
        ----------
        event_type : str
            Event type identifier (e.g., "id_parsed").
        data : dict[str, Any] | None, optional
            Event-specific data payload.
        level : str, optional
            Log level ("DEBUG", "INFO", "WARN", "ERROR").
        kind : str | None, optional
            Identifier kind if the event concerns one.
        """
        if LEVELS.index(level) < LEVELS.index(self.min_level):
            return

        log_event = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=level,
            event=event_type,
            data=data or {},
            kind=kind,
        )
        self._write_event(log_event)

    def _write_event(self, event: LogEvent) -> None:
        event_dict = asdict(event)
        if event_dict["kind"] is None:
            del event_dict["kind"]
        json.dump(event_dict, self._file, ensure_ascii=False, separators=(",", ":"))
        self._file.write("\n")
        self._file.flush()

    def id_parsed(self, text: str, kind: str, canonical: str) -> None:
        """Log id_parsed event."""
        self.event("id_parsed", data={"input": text, "canonical": canonical}, kind=kind)

    def candidate_rejected(self, text: str, kind: str, reason: str) -> None:
        """Log candidate_rejected event (a detector guess that failed to parse).

        Parameters
        ----------
        text : str
            Input text.
        kind : str
            Rejected candidate kind.
        reason : str
            Parse error message.
        """
        self.event(
            "candidate_rejected",
            data={"input": text, "reason": reason},
            level="DEBUG",
            kind=kind,
        )

    def detection_failed(self, text: str, candidates: list[str]) -> None:
        """Log detection_failed event.

        Parameters
        ----------
        text : str
            Input text.
        candidates : list[str]
            Kinds that were tried, in rank order.
        """
        self.event(
            "detection_failed",
            data={"input": text, "candidates": candidates},
            level="WARN",
        )

    def ids_generated(self, kind: str, count: int) -> None:
        """Log ids_generated event."""
        self.event("ids_generated", data={"count": count}, kind=kind)

    def validation_finished(self, total: int, invalid: int) -> None:
        """Log validation_finished event.

        Parameters
        ----------
        total : int
            Number of identifiers checked.
        invalid : int
            Number found invalid.
        """
        self.event(
            "validation_finished",
            data={"total": total, "invalid": invalid},
            level="WARN" if invalid else "INFO",
        )

    def error(self, exception_class: str, message: str, kind: str | None = None) -> None:
        """Log error event."""
        self.event(
            "error",
            data={"exception_class": exception_class, "message": message},
            level="ERROR",
            kind=kind,
        )
