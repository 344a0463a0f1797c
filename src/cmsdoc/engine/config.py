"""Conversion configuration and result dataclasses."""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from cmsdoc.parse import DataMergeMode


@dataclass
class ConversionConfig:
    """Configuration for a batch conversion run.

    Attributes
    ----------
    merge_mode : DataMergeMode
        How parsed fields populate ``data`` (default: last field only).
    strict : bool
        Abort on the first failing document (default: True). When False,
        failing documents are logged and skipped.
    validate_output : bool
        Validate each output record against the bundled JSON Schema.
    log_path : Path | None
        JSONL audit log path. If None, no events are written.
    """

    merge_mode: DataMergeMode = DataMergeMode.LAST_FIELD
    strict: bool = True
    validate_output: bool = False
    log_path: Path | None = None

    def __post_init__(self) -> None:
        """Coerce and validate."""
        try:
            self.merge_mode = DataMergeMode(self.merge_mode)
        except ValueError:
            valid = [m.value for m in DataMergeMode]
            raise ValueError(
                f"merge_mode must be one of {valid}, got {self.merge_mode!r}"
            ) from None

        if self.log_path is not None:
            self.log_path = Path(self.log_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        data = asdict(self)
        data["merge_mode"] = self.merge_mode.value
        data["log_path"] = str(self.log_path) if self.log_path is not None else None
        return data


@dataclass
class ConversionResult:
    """Results from a batch conversion run.

    Attributes
    ----------
    success : bool
        Whether the run completed (all documents, or all usable ones in
        lenient mode, were written).
    total_documents : int
        Documents read from the input.
    documents_written : int
        Documents written to the output.
    documents_failed : int
        Documents that could not be converted.
    fields_dropped : int
        Fields classified unsupported across all converted documents.
    output_path : str | None
        Output JSONL path, if anything was written.
    error_message : str | None
        Error message if failed.
    """

    success: bool
    total_documents: int
    documents_written: int
    documents_failed: int
    fields_dropped: int
    output_path: str | None = None
    error_message: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)
