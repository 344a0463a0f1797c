"""Normalization of loosely-typed CMS documents.

This package provides:
- Data models (cmsdoc.models): raw and normalized document types
- Parsing (cmsdoc.parse): field classification, per-field parsers, assembly
- Rendering (cmsdoc.render): rich text and markdown renderers
- Engine (cmsdoc.engine): batch file conversion
- Audit (cmsdoc.audit): JSONL event logging
- CLI (cmsdoc.cli): command-line interface
- Public API (cmsdoc.api): high-level convenience functions
"""

__version__ = "0.4.0"
__license__ = "MIT"

from cmsdoc.api import (
    classify_fields,
    load_documents,
    parse_document,
    parse_documents,
    write_jsonl,
)
from cmsdoc.errors import (
    CmsDocError,
    DocumentParseError,
    FieldParseError,
    InvalidDocumentError,
    MalformedFieldValue,
    MalformedLinkValue,
)
from cmsdoc.models import NormalizedDocument, RawDocument
from cmsdoc.parse import DataMergeMode, FieldKind, Renderers, classify
from cmsdoc.utils import capitalize

__all__ = [
    "__version__",
    "__license__",
    "RawDocument",
    "NormalizedDocument",
    "FieldKind",
    "DataMergeMode",
    "Renderers",
    "classify",
    "classify_fields",
    "parse_document",
    "parse_documents",
    "load_documents",
    "write_jsonl",
    "capitalize",
    "CmsDocError",
    "InvalidDocumentError",
    "FieldParseError",
    "MalformedFieldValue",
    "MalformedLinkValue",
    "DocumentParseError",
]
