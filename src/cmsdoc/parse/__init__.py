"""Field classification, parsing and document assembly.

Control flow::

    raw.data -> dispatch_fields (classify + PARSERS per field) -> ParsedFields
    ParsedFields -> build_document -> NormalizedDocument

Main entry points:
- classify: shape -> FieldKind
- dispatch_fields: field map -> ParsedFields
- assemble_document: raw document -> NormalizedDocument
"""

from cmsdoc.parse.assembler import (
    DataMergeMode,
    assemble_document,
    build_document,
    merge_data,
)
from cmsdoc.parse.classifier import FieldKind, classify, is_absent
from cmsdoc.parse.dispatcher import ParsedField, ParsedFields, dispatch_fields, unwrap_field
from cmsdoc.parse.objects import parse_object
from cmsdoc.parse.renderers import DEFAULT_RENDERERS, Renderers
from cmsdoc.parse.strategies import PARSERS, parse_field

__all__ = [
    "DEFAULT_RENDERERS",
    "DataMergeMode",
    "FieldKind",
    "PARSERS",
    "ParsedField",
    "ParsedFields",
    "Renderers",
    "assemble_document",
    "build_document",
    "classify",
    "dispatch_fields",
    "is_absent",
    "merge_data",
    "parse_field",
    "parse_object",
    "unwrap_field",
]
