"""JSONL audit log for conversion runs.

Each event is a single JSON line flushed as soon as it is written, so a
log stays readable when a run is interrupted. Only the batch runner and
the CLI write events; the parsing core never logs.
"""

import json
import time
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import asdict
from pathlib import Path
from typing import Any

from cmsdoc.audit.models import Level, LogEvent
from cmsdoc.utils import get_iso_timestamp

__all__ = ["AuditLogger"]


class AuditLogger:
    """Append-only writer of conversion events.

    Attributes
    ----------
    run_id : str
        Identifier stamped on every event.
    log_path : Path
        JSONL file the events are appended to.
    current_stage : str | None
        Stage stamped on events that do not name one.
    """

    def __init__(self, run_id: str, log_path: Path | str) -> None:
        """Open ``log_path`` for appending, creating parent directories."""
        self.run_id = run_id
        self.log_path = Path(log_path)
        self.current_stage: str | None = None

        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        self._file = self.log_path.open("a", encoding="utf-8")

    def __enter__(self) -> "AuditLogger":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def close(self) -> None:
        """Flush and close the log file; safe to call twice."""
        if not self._file.closed:
            self._file.flush()
            self._file.close()

    def emit(
        self,
        event: str,
        data: dict[str, Any] | None = None,
        *,
        level: Level = Level.INFO,
        stage: str | None = None,
        rid: str | None = None,
    ) -> None:
        """Append one event to the log.

        Parameters
        ----------
        event : str
            Event name.
        data : dict[str, Any] | None, optional
            Event payload, by default empty.
        level : Level, optional
            Severity, by default INFO.
        stage : str | None, optional
            Stage name; defaults to ``current_stage``.
        rid : str | None, optional
            Document id for document-level events.
        """
        record = LogEvent(
            ts=get_iso_timestamp(),
            run_id=self.run_id,
            level=Level(level).value,
            event=event,
            data=data or {},
            stage=stage or self.current_stage,
            rid=rid,
        )
        self._file.write(json.dumps(asdict(record), ensure_ascii=False, separators=(",", ":")))
        self._file.write("\n")
        self._file.flush()

    @contextmanager
    def stage(self, name: str, expected_documents: int | None = None) -> Iterator[dict[str, int]]:
        """Bracket a stage with ``stage_started`` / ``stage_finished`` events.

        Events written inside the block are stamped with ``name``. The
        yielded dict collects counters that are reported, with the stage
        duration, in ``stage_finished``.

        Parameters
        ----------
        name : str
            Stage name (``load``, ``convert``, ``write``).
        expected_documents : int | None, optional
            Number of documents the stage will see, if known.

        Yields
        ------
        dict[str, int]
            Mutable counters for the stage.
        """
        started: dict[str, Any] = {}
        if expected_documents is not None:
            started["expected_documents"] = expected_documents

        self.current_stage = name
        self.emit("stage_started", started)
        start = time.perf_counter()
        counters: dict[str, int] = {}
        try:
            yield counters
        finally:
            finished: dict[str, Any] = {"duration_seconds": time.perf_counter() - start}
            if counters:
                finished["counters"] = counters
            self.emit("stage_finished", finished)
            self.current_stage = None

    def run_started(self, parameters: dict[str, Any]) -> None:
        """Record the configuration a run starts with."""
        self.emit("run_started", {"parameters": parameters})

    def run_finished(
        self,
        status: str,
        duration_seconds: float,
        documents_processed: int | None = None,
    ) -> None:
        """Record how a run ended.

        Parameters
        ----------
        status : str
            ``success``, ``partial`` (some documents skipped) or ``failed``.
        duration_seconds : float
            Wall-clock duration of the run.
        documents_processed : int | None, optional
            Documents read from the input, if loading succeeded.
        """
        data: dict[str, Any] = {"status": status, "duration_seconds": duration_seconds}
        if documents_processed is not None:
            data["documents_processed"] = documents_processed
        self.emit("run_finished", data)

    def document_parsed(self, rid: str, kind_counts: dict[str, int]) -> None:
        """Record a converted document with its field count per kind."""
        self.emit("document_parsed", {"kinds": kind_counts}, rid=rid)

    def field_dropped(self, rid: str, field: str) -> None:
        """Record a field left out because its value is unsupported."""
        self.emit("field_dropped", {"field": field}, level=Level.DEBUG, rid=rid)

    def document_failed(
        self,
        rid: str | None,
        exception_class: str,
        message: str,
        field: str | None = None,
    ) -> None:
        """Record a document that could not be converted.

        ``rid`` is None when the document's envelope could not be read;
        ``field`` is the dotted path of the malformed field, when known.
        """
        data: dict[str, Any] = {"exception_class": exception_class, "message": message}
        if field is not None:
            data["field"] = field
        self.emit("document_failed", data, level=Level.ERROR, rid=rid)
