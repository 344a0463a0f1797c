"""Public API for converting CMS documents.

This module provides the main public API for cmsdoc, enabling:
- Converting raw documents into NormalizedDocument records
- Loading raw documents from JSON / JSONL files
- Exporting normalized records to JSONL format
"""

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from cmsdoc.errors import DocumentParseError, FieldParseError, InvalidDocumentError
from cmsdoc.models import NormalizedDocument, RawDocument
from cmsdoc.parse import (
    DataMergeMode,
    FieldKind,
    Renderers,
    assemble_document,
    classify,
    unwrap_field,
)

__all__ = [
    "parse_document",
    "parse_documents",
    "classify_fields",
    "load_documents",
    "write_jsonl",
]

# Key holding the document list in a CMS search response
RESULTS_KEY = "results"


def _as_raw(raw: RawDocument | Mapping[str, Any]) -> RawDocument:
    return raw if isinstance(raw, RawDocument) else RawDocument.from_dict(raw)


def parse_document(
    raw: RawDocument | Mapping[str, Any],
    *,
    merge_mode: DataMergeMode | str = DataMergeMode.LAST_FIELD,
    renderers: Renderers | None = None,
) -> NormalizedDocument:
    """Convert a single raw document.

    Parameters
    ----------
    raw : RawDocument | Mapping[str, Any]
        Raw document or decoded payload.
    merge_mode : DataMergeMode | str, optional
        ``last_field`` (default) keeps only the last parsed field in
        ``data``; ``merge`` keeps every parsed field.
    renderers : Renderers | None, optional
        Rendering collaborators; defaults to the bundled renderers.

    Returns
    -------
    NormalizedDocument
        Normalized output record.

    Raises
    ------
    InvalidDocumentError
        If the payload envelope is unusable.
    FieldParseError
        If a field is malformed.

    Examples
    --------
        >>> from cmsdoc import parse_document
        >>> doc = parse_document(payload, merge_mode="merge")
        >>> doc.data["title"]
        'Hello'
    """
    return assemble_document(_as_raw(raw), merge_mode=merge_mode, renderers=renderers)


def parse_documents(
    raws: Iterable[RawDocument | Mapping[str, Any]],
    *,
    merge_mode: DataMergeMode | str = DataMergeMode.LAST_FIELD,
    renderers: Renderers | None = None,
    strict: bool = True,
) -> list[NormalizedDocument]:
    """Convert several raw documents.

    Parameters
    ----------
    raws : Iterable[RawDocument | Mapping[str, Any]]
        Raw documents or decoded payloads.
    merge_mode : DataMergeMode | str, optional
        Merge mode passed to the assembler.
    renderers : Renderers | None, optional
        Rendering collaborators.
    strict : bool, optional
        If True, raise on the first failing document. If False, skip
        failing documents, by default True.

    Returns
    -------
    list[NormalizedDocument]
        Converted documents in input order.

    Raises
    ------
    DocumentParseError
        If a document fails and strict=True.
    """
    documents: list[NormalizedDocument] = []

    for index, raw in enumerate(raws):
        try:
            documents.append(
                parse_document(raw, merge_mode=merge_mode, renderers=renderers)
            )
        except (InvalidDocumentError, FieldParseError) as e:
            if not strict:
                continue
            doc_id = raw.id if isinstance(raw, RawDocument) else _payload_id(raw)
            raise DocumentParseError(
                f"Failed to parse document #{index} ({doc_id}): {e}",
                document_id=doc_id,
            ) from e

    return documents


def _payload_id(raw: Any) -> str | None:
    doc_id = raw.get("id") if isinstance(raw, Mapping) else None
    return doc_id if isinstance(doc_id, str) else None


def classify_fields(raw: RawDocument | Mapping[str, Any]) -> list[tuple[str, FieldKind]]:
    """Classify every field of a document without parsing it.

    Parameters
    ----------
    raw : RawDocument | Mapping[str, Any]
        Raw document or decoded payload.

    Returns
    -------
    list[tuple[str, FieldKind]]
        (field name, classification) pairs in field order.
    """
    document = _as_raw(raw)
    return [(name, classify(unwrap_field(value))) for name, value in document.data.items()]


def load_documents(path: str | Path) -> list[dict[str, Any]]:
    """Load raw document payloads from a JSON or JSONL file.

    A ``.jsonl`` file holds one document per line (blank lines ignored).
    Any other file is read as JSON: a single document, a list of
    documents, or a search response whose ``results`` holds the documents.

    Parameters
    ----------
    path : str | Path
        Input file.

    Returns
    -------
    list[dict[str, Any]]
        Decoded payloads in file order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist.
    InvalidDocumentError
        If the file content is not a document, a list, or a search response.
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    if file_path.suffix.lower() == ".jsonl":
        payloads: list[Any] = []
        with file_path.open(encoding="utf-8") as f:
            for line_num, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    payloads.append(json.loads(line))
                except json.JSONDecodeError as e:
                    raise InvalidDocumentError(
                        f"{file_path.name}:{line_num}: invalid JSON: {e}"
                    ) from e
        return payloads

    try:
        content = json.loads(file_path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidDocumentError(f"{file_path.name}: invalid JSON: {e}") from e

    if isinstance(content, list):
        return content
    if isinstance(content, dict):
        results = content.get(RESULTS_KEY)
        if isinstance(results, list):
            return results
        return [content]

    raise InvalidDocumentError(
        f"{file_path.name}: expected a document, a list, or a search response"
    )


def write_jsonl(
    documents: Iterable[NormalizedDocument],
    path: str | Path,
    *,
    sort_keys: bool = False,
) -> int:
    """Write documents to a JSONL file (one JSON object per line).

    Parameters
    ----------
    documents : Iterable[NormalizedDocument]
        Documents to write.
    path : str | Path
        Output file path.
    sort_keys : bool, optional
        Sort keys instead of keeping the ``id, uid, slug, lang, data``
        order, by default False.

    Returns
    -------
    int
        Number of documents written.
    """
    file_path = Path(path)
    count = 0

    with file_path.open("w", encoding="utf-8", newline="\n") as f:
        for document in documents:
            f.write(json.dumps(document.to_dict(), ensure_ascii=False, sort_keys=sort_keys))
            f.write("\n")
            count += 1

    return count
