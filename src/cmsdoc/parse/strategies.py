"""Field value parsers, one per classification tag.

Every parser takes the raw field value (already unwrapped from its
``{"value": ...}`` record by the dispatcher) and a Renderers bundle, and
returns the normalized value. ``UNSUPPORTED`` has no parser: such fields
are dropped by the dispatcher.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from cmsdoc.errors import MalformedFieldValue

from .classifier import FieldKind
from .objects import parse_object
from .renderers import DEFAULT_RENDERERS, Renderers

__all__ = ["FieldParser", "PARSERS", "parse_field"]

FieldParser = Callable[[Any, Renderers], Any]


def parse_passthrough(value: Any, renderers: Renderers) -> Any:
    """Return the value as-is; links and assets are deep-copied."""
    if isinstance(value, Mapping):
        return renderers.deep_copy(value)
    return value


def parse_markdown_block(value: Any, renderers: Renderers) -> str:
    """Render the text of a lone preformatted block as markdown."""
    text = value[0].get("text")
    if not isinstance(text, str):
        raise MalformedFieldValue("preformatted block has no text")
    return renderers.markdown_to_html(text)


def parse_plain_text(value: Any, renderers: Renderers) -> str:
    """Render a rich-text array as plain text."""
    return renderers.rich_text_to_text(value)


def parse_rich_html(value: Any, renderers: Renderers) -> str:
    """Render a rich-text array as HTML."""
    return renderers.rich_text_to_html(value)


def parse_nested_object(value: Any, renderers: Renderers) -> dict[str, Any]:
    """Parse the named sub-fields of a structured object."""
    return parse_object(value, renderers)


PARSERS: MappingProxyType[FieldKind, FieldParser] = MappingProxyType(
    {
        FieldKind.PASSTHROUGH: parse_passthrough,
        FieldKind.MARKDOWN_BLOCK: parse_markdown_block,
        FieldKind.PLAIN_TEXT: parse_plain_text,
        FieldKind.RICH_HTML: parse_rich_html,
        FieldKind.NESTED_OBJECT: parse_nested_object,
    }
)

_UNPARSED_KINDS = frozenset({FieldKind.UNSUPPORTED})


def _check_exhaustive() -> None:
    # Every classification tag must have a parser or be explicitly unparsed
    missing = set(FieldKind) - set(PARSERS) - _UNPARSED_KINDS
    if missing:
        raise RuntimeError(f"No parser registered for field kinds: {sorted(missing)}")


_check_exhaustive()


def parse_field(
    kind: FieldKind,
    value: Any,
    renderers: Renderers = DEFAULT_RENDERERS,
) -> Any:
    """Parse a field value with the parser selected by its classification.

    Parameters
    ----------
    kind : FieldKind
        Classification of ``value``.
    value : Any
        Raw field value.
    renderers : Renderers, optional
        Rendering collaborators.

    Returns
    -------
    Any
        Normalized value.

    Raises
    ------
    ValueError
        If ``kind`` is UNSUPPORTED.
    FieldParseError
        If the value does not have the shape the parser expects.
    """
    if kind in _UNPARSED_KINDS:
        raise ValueError(f"Field kind {kind!s} has no parser")
    return PARSERS[kind](value, renderers)
