"""Batch conversion runner.

Reads raw documents from a JSON/JSONL file, converts each one, and writes
the normalized records as JSONL. Per-document failures are recorded in
the audit log; in strict mode the first failure aborts the run and
nothing is written.
"""

import time
from contextlib import AbstractContextManager, nullcontext
from pathlib import Path
from typing import Any

from jsonschema import ValidationError

from cmsdoc.api import load_documents, write_jsonl
from cmsdoc.audit import AuditLogger, generate_run_id, get_dependency_versions, get_package_version
from cmsdoc.engine.config import ConversionConfig, ConversionResult
from cmsdoc.errors import CmsDocError, FieldParseError
from cmsdoc.models import NormalizedDocument, RawDocument
from cmsdoc.parse import build_document, dispatch_fields
from cmsdoc.validation import validate_normalized_document

STAGE_LOAD = "load"
STAGE_CONVERT = "convert"
STAGE_WRITE = "write"

TRACKED_DEPENDENCIES = ["click", "jsonschema", "markdown"]


def _stage(
    logger: AuditLogger | None,
    name: str,
    expected_documents: int | None = None,
) -> AbstractContextManager[dict[str, int]]:
    if logger:
        return logger.stage(name, expected_documents)
    return nullcontext({})


def _failed_result(total: int, failed: int, dropped: int, message: str) -> ConversionResult:
    return ConversionResult(
        success=False,
        total_documents=total,
        documents_written=0,
        documents_failed=failed,
        fields_dropped=dropped,
        error_message=message,
    )


def _payload_id(payload: Any) -> str | None:
    rid = payload.get("id") if isinstance(payload, dict) else None
    return rid if isinstance(rid, str) else None


def _convert_one(
    payload: Any,
    config: ConversionConfig,
    logger: AuditLogger | None,
) -> tuple[NormalizedDocument, int]:
    """Convert one payload; returns the document and its dropped-field count."""
    raw = RawDocument.from_dict(payload)
    parsed = dispatch_fields(raw.data)
    document = build_document(raw, parsed, config.merge_mode)

    if config.validate_output:
        validate_normalized_document(document)

    if logger:
        for name in parsed.dropped:
            logger.field_dropped(raw.id, name)
        logger.document_parsed(raw.id, parsed.kind_counts())

    return document, len(parsed.dropped)


def _convert_all(
    payloads: list[Any],
    config: ConversionConfig,
    logger: AuditLogger | None,
    counters: dict[str, int],
) -> tuple[list[NormalizedDocument], str | None]:
    """Convert every payload, updating ``counters`` as documents pass or fail.

    Returns
    -------
    tuple[list[NormalizedDocument], str | None]
        Converted documents, and the abort message when strict mode
        stopped at a failing document.
    """
    documents: list[NormalizedDocument] = []
    counters.update(documents_out=0, documents_failed=0, fields_dropped=0)

    for index, payload in enumerate(payloads):
        try:
            document, n_dropped = _convert_one(payload, config, logger)
        except (CmsDocError, ValidationError) as e:
            counters["documents_failed"] += 1
            rid = _payload_id(payload)
            message = e.message if isinstance(e, ValidationError) else str(e)
            if logger:
                logger.document_failed(
                    rid,
                    type(e).__name__,
                    message,
                    field=e.field if isinstance(e, FieldParseError) else None,
                )
            if config.strict:
                return documents, f"Document #{index} ({rid}): {message}"
            continue

        documents.append(document)
        counters["documents_out"] += 1
        counters["fields_dropped"] += n_dropped

    return documents, None


def _run_stages(
    input_path: Path,
    output_path: Path,
    config: ConversionConfig,
    logger: AuditLogger | None,
) -> ConversionResult:
    """Execute load, convert and write stages sequentially."""
    if not input_path.exists():
        return _failed_result(0, 0, 0, f"Input path does not exist: {input_path}")

    with _stage(logger, STAGE_LOAD) as counters:
        try:
            payloads = load_documents(input_path)
        except CmsDocError as e:
            if logger:
                logger.document_failed(None, type(e).__name__, str(e))
            return _failed_result(0, 0, 0, str(e))
        counters["documents_in"] = len(payloads)

    with _stage(logger, STAGE_CONVERT, expected_documents=len(payloads)) as counters:
        documents, abort_message = _convert_all(payloads, config, logger, counters)
    failed = counters["documents_failed"]
    dropped = counters["fields_dropped"]

    if abort_message is not None:
        return _failed_result(len(payloads), failed, dropped, abort_message)

    with _stage(logger, STAGE_WRITE) as counters:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        written = write_jsonl(documents, output_path)
        counters["documents_written"] = written

    return ConversionResult(
        success=True,
        total_documents=len(payloads),
        documents_written=written,
        documents_failed=failed,
        fields_dropped=dropped,
        output_path=str(output_path),
    )


def _run_status(result: ConversionResult) -> str:
    if not result.success:
        return "failed"
    return "partial" if result.documents_failed else "success"


def run_conversion(
    input_path: Path | str,
    output_path: Path | str,
    config: ConversionConfig | None = None,
) -> ConversionResult:
    """Convert every document of an input file into a JSONL output file.

    Parameters
    ----------
    input_path : Path | str
        JSON or JSONL file of raw documents.
    output_path : Path | str
        Destination JSONL file.
    config : ConversionConfig | None, optional
        Conversion configuration. If None, uses defaults.

    Returns
    -------
    ConversionResult
        Run statistics; ``success`` is False when the run aborted.

    Examples
    --------
    Convert leniently, keeping every parsed field:

        >>> from cmsdoc.engine import ConversionConfig, run_conversion
        >>> config = ConversionConfig(merge_mode="merge", strict=False)
        >>> result = run_conversion("documents.json", "out/documents.jsonl", config)
        >>> print(result.documents_written, result.documents_failed)
    """
    input_path = Path(input_path)
    output_path = Path(output_path)

    if config is None:
        config = ConversionConfig()

    if config.log_path is None:
        return _run_stages(input_path, output_path, config, None)

    start = time.perf_counter()
    with AuditLogger(generate_run_id(), config.log_path) as logger:
        logger.run_started(
            {
                **config.to_dict(),
                "input_path": str(input_path),
                "output_path": str(output_path),
                "package_version": get_package_version(),
                "dependencies": get_dependency_versions(TRACKED_DEPENDENCIES),
            }
        )
        result = _run_stages(input_path, output_path, config, logger)
        logger.run_finished(
            _run_status(result), time.perf_counter() - start, result.total_documents
        )

    return result
