"""Per-field classification and parsing for a document's data payload.

Fields are processed in the field map's insertion order, which for
decoded JSON is the order of keys in the source payload. The result keeps
that order as an explicit tuple of parsed fields.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from cmsdoc.errors import FieldParseError

from .classifier import FieldKind, classify
from .renderers import DEFAULT_RENDERERS, Renderers
from .strategies import parse_field
from .tables import WRAPPER_KEY

__all__ = ["ParsedField", "ParsedFields", "dispatch_fields", "unwrap_field"]


@dataclass(frozen=True)
class ParsedField:
    """One parsed field.

    Attributes
    ----------
    name : str
        Field name.
    kind : FieldKind
        Classification that selected the parser.
    value : Any
        Normalized value.
    """

    name: str
    kind: FieldKind
    value: Any


@dataclass(frozen=True)
class ParsedFields:
    """Ordered result of dispatching a field map.

    Attributes
    ----------
    fields : tuple[ParsedField, ...]
        Parsed fields in processing order.
    dropped : tuple[str, ...]
        Names of fields classified UNSUPPORTED, in processing order.
    """

    fields: tuple[ParsedField, ...] = ()
    dropped: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.fields)

    def as_dict(self) -> dict[str, Any]:
        """Return field name -> normalized value, in processing order."""
        return {f.name: f.value for f in self.fields}

    def last(self) -> ParsedField | None:
        """Return the last parsed field, or None when nothing was parsed."""
        return self.fields[-1] if self.fields else None

    def kind_counts(self) -> dict[str, int]:
        """Count parsed fields per classification (dropped fields included)."""
        counts: dict[str, int] = {}
        for f in self.fields:
            counts[f.kind.value] = counts.get(f.kind.value, 0) + 1
        if self.dropped:
            counts[FieldKind.UNSUPPORTED.value] = len(self.dropped)
        return counts


def unwrap_field(raw: Any) -> Any:
    """Unwrap a ``{"value": ...}`` record; other values are returned as-is.

    Only a mapping whose sole key is ``value`` counts as a wrapper, so
    nested objects (whose keys are sub-field names) are left intact.
    """
    if isinstance(raw, Mapping) and len(raw) == 1 and WRAPPER_KEY in raw:
        return raw[WRAPPER_KEY]
    return raw


def dispatch_fields(
    field_map: Mapping[str, Any],
    renderers: Renderers | None = None,
) -> ParsedFields:
    """Classify and parse every field of a data payload.

    Parameters
    ----------
    field_map : Mapping[str, Any]
        Field name -> raw field value (bare or wrapped).
    renderers : Renderers | None, optional
        Rendering collaborators; defaults to the bundled renderers.

    Returns
    -------
    ParsedFields
        Parsed fields in insertion order plus the names of dropped fields.

    Raises
    ------
    FieldParseError
        If any field is malformed; ``field`` holds the dotted field path.
        No partial result is returned.

    Examples
    --------
        >>> title = {"value": [{"type": "heading1", "text": "Hi"}]}
        >>> result = dispatch_fields({"title": title, "price": {"value": 19}})
        >>> result.as_dict()
        {'title': 'Hi', 'price': 19}
    """
    renderers = renderers or DEFAULT_RENDERERS
    parsed: list[ParsedField] = []
    dropped: list[str] = []

    for name, raw in field_map.items():
        value = unwrap_field(raw)
        kind = classify(value)

        if kind is FieldKind.UNSUPPORTED:
            dropped.append(name)
            continue

        try:
            normalized = parse_field(kind, value, renderers)
        except FieldParseError as exc:
            raise exc.at(name) from exc

        parsed.append(ParsedField(name=name, kind=kind, value=normalized))

    return ParsedFields(fields=tuple(parsed), dropped=tuple(dropped))
