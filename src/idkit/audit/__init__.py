"""Structured JSONL event logging for idkit runs."""

from idkit.audit.logger import AuditLogger, new_run_id
from idkit.audit.models import LEVELS, LogEvent

__all__ = ["AuditLogger", "LogEvent", "LEVELS", "new_run_id"]
