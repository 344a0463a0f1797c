"""Audit event record and severity levels."""

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

__all__ = ["Level", "LogEvent"]


class Level(StrEnum):
    """Severity of an audit event."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass
class LogEvent:
    """One line of the JSONL audit log.

    Attributes
    ----------
    ts : str
        UTC ISO8601 timestamp with microseconds.
    run_id : str
        Identifier shared by every event of a conversion run.
    level : str
        Severity (see Level).
    event : str
        Event name, e.g. ``document_parsed``.
    data : dict[str, Any]
        Event payload.
    stage : str | None
        Stage active when the event was written.
    rid : str | None
        Document id for document-level events.
    """

    ts: str
    run_id: str
    level: str
    event: str
    data: dict[str, Any] = field(default_factory=dict)
    stage: str | None = None
    rid: str | None = None
