"""Document assembly: identity fields plus the dispatched data payload.

Two merge modes decide what ends up in ``NormalizedDocument.data``:

- ``last_field`` (default): only the value of the last parsed field, in
  processing order. Every field is still parsed, so a malformed field
  anywhere fails the document, but earlier values are discarded. This is
  the historical output contract that existing templates consume.
- ``merge``: the full ordered name -> value mapping.
"""

from collections.abc import Mapping
from enum import StrEnum
from typing import Any

from cmsdoc.models import NormalizedDocument, RawDocument

from .dispatcher import ParsedFields, dispatch_fields
from .renderers import Renderers

__all__ = ["DataMergeMode", "assemble_document", "build_document", "merge_data"]


class DataMergeMode(StrEnum):
    """How parsed fields are merged into the output ``data`` attribute.

    Attributes
    ----------
    LAST_FIELD : str
        ``data`` is the last parsed field's value (None if no field parsed).
    MERGE : str
        ``data`` is a mapping of every parsed field.
    """

    LAST_FIELD = "last_field"
    MERGE = "merge"


def merge_data(parsed: ParsedFields, mode: DataMergeMode = DataMergeMode.LAST_FIELD) -> Any:
    """Collapse parsed fields into the output ``data`` value.

    Parameters
    ----------
    parsed : ParsedFields
        Dispatcher output.
    mode : DataMergeMode, optional
        Merge mode, by default LAST_FIELD.

    Returns
    -------
    Any
        Last field's value (or None), or the full mapping.
    """
    if mode is DataMergeMode.MERGE:
        return parsed.as_dict()

    last = parsed.last()
    return last.value if last is not None else None


def build_document(
    raw: RawDocument,
    parsed: ParsedFields,
    mode: DataMergeMode = DataMergeMode.LAST_FIELD,
) -> NormalizedDocument:
    """Build the output record from a raw document and its parsed fields.

    Parameters
    ----------
    raw : RawDocument
        Source document (identity fields).
    parsed : ParsedFields
        Result of dispatching ``raw.data``.
    mode : DataMergeMode, optional
        Merge mode, by default LAST_FIELD.

    Returns
    -------
    NormalizedDocument
        Output record.
    """
    return NormalizedDocument(
        id=raw.id,
        uid=raw.canonical_slug,
        slug=raw.canonical_slug,
        lang=raw.lang,
        data=merge_data(parsed, mode),
    )


def assemble_document(
    raw: RawDocument | Mapping[str, Any],
    *,
    merge_mode: DataMergeMode | str = DataMergeMode.LAST_FIELD,
    renderers: Renderers | None = None,
) -> NormalizedDocument:
    """Convert a raw document into its normalized output record.

    Parameters
    ----------
    raw : RawDocument | Mapping[str, Any]
        Raw document, or a decoded payload accepted by RawDocument.from_dict.
    merge_mode : DataMergeMode | str, optional
        How parsed fields populate ``data``, by default LAST_FIELD.
    renderers : Renderers | None, optional
        Rendering collaborators; defaults to the bundled renderers.

    Returns
    -------
    NormalizedDocument
        Output record with ``uid`` and ``slug`` set to the canonical slug.

    Raises
    ------
    InvalidDocumentError
        If a mapping payload has an unusable envelope.
    FieldParseError
        If any field is malformed.

    Examples
    --------
        >>> doc = assemble_document({
        ...     "id": "x1", "slugs": ["my-product", "old-slug"], "lang": "en-us",
        ...     "data": {"title": {"value": [{"type": "heading1", "text": "Hello"}]},
        ...              "price": {"value": 19}},
        ... })
        >>> doc.to_dict()
        {'id': 'x1', 'uid': 'my-product', 'slug': 'my-product', 'lang': 'en-us', 'data': 19}
    """
    if not isinstance(raw, RawDocument):
        raw = RawDocument.from_dict(raw)

    mode = DataMergeMode(merge_mode)
    return build_document(raw, dispatch_fields(raw.data, renderers), mode)
