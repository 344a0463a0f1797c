"""Field shape classification.

Inspects one raw field value and returns the strategy used to parse it.
Classification is a pure function of shape: the same value always yields
the same tag, and nothing is ever raised.

Decision table, first match wins:

1. absent/falsy value                       -> UNSUPPORTED
2. scalar (str, bool, int, float)           -> PASSTHROUGH
3. mapping with an asset marker or a
   recognized link kind                     -> PASSTHROUGH
   any other mapping                        -> NESTED_OBJECT
4. sequence of exactly one preformatted
   block                                    -> MARKDOWN_BLOCK
   sequence of exactly one heading block    -> PLAIN_TEXT
   any other sequence (including empty)     -> RICH_HTML
5. anything else                            -> UNSUPPORTED
"""

import math
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Any

from .tables import (
    ASSET_ATTRIBUTE,
    HEADING_TYPES,
    LINK_KINDS,
    LINK_TYPE_ATTRIBUTE,
    PREFORMATTED_TYPE,
    SCALAR_TYPES,
)

__all__ = ["FieldKind", "classify", "is_absent"]


class FieldKind(StrEnum):
    """Interpretation strategy selected for a field.

    Attributes
    ----------
    PASSTHROUGH : str
        Scalar, link or asset: used as-is.
    MARKDOWN_BLOCK : str
        Single preformatted rich-text block holding markdown.
    PLAIN_TEXT : str
        Single heading block, rendered as plain text.
    RICH_HTML : str
        Any other rich-text array, rendered as HTML.
    NESTED_OBJECT : str
        Structured sub-object with named sub-fields.
    UNSUPPORTED : str
        Absent or unrecognized value; the field is dropped.
    """

    PASSTHROUGH = "passthrough"
    MARKDOWN_BLOCK = "markdown-block"
    PLAIN_TEXT = "plain-text"
    RICH_HTML = "rich-html"
    NESTED_OBJECT = "nested-object"
    UNSUPPORTED = "unsupported"


def is_absent(value: Any) -> bool:
    """Check whether a field value counts as absent.

    Absent values are None, False, numeric zero, NaN and the empty string.
    Empty lists and empty mappings are present values.

    Parameters
    ----------
    value : Any
        Raw field value.

    Returns
    -------
    bool
        True if the field should be treated as missing.
    """
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return value == ""
    if isinstance(value, float):
        return value == 0 or math.isnan(value)
    if isinstance(value, int):
        return value == 0
    return False


def _is_asset(value: Mapping[str, Any]) -> bool:
    return bool(value.get(ASSET_ATTRIBUTE))


def _is_supported_link(value: Mapping[str, Any]) -> bool:
    link_type = value.get(LINK_TYPE_ATTRIBUTE)
    return isinstance(link_type, str) and link_type.lower() in LINK_KINDS


def _block_type(block: Any) -> str | None:
    block_type = block.get("type") if isinstance(block, Mapping) else None
    return block_type if isinstance(block_type, str) else None


def classify(value: Any) -> FieldKind:
    """Classify a raw field value.

    Parameters
    ----------
    value : Any
        Raw field value (scalar, rich-text array, link, asset or mapping).

    Returns
    -------
    FieldKind
        Parsing strategy for the value.

    Examples
    --------
        >>> classify("hello")
        <FieldKind.PASSTHROUGH: 'passthrough'>
        >>> classify([{"type": "heading2", "text": "Title"}])
        <FieldKind.PLAIN_TEXT: 'plain-text'>
        >>> classify([])
        <FieldKind.RICH_HTML: 'rich-html'>
    """
    if is_absent(value):
        return FieldKind.UNSUPPORTED

    if isinstance(value, SCALAR_TYPES):
        return FieldKind.PASSTHROUGH

    if isinstance(value, Mapping):
        if _is_asset(value) or _is_supported_link(value):
            return FieldKind.PASSTHROUGH
        return FieldKind.NESTED_OBJECT

    if isinstance(value, Sequence) and not isinstance(value, bytes | bytearray):
        # Only a lone block is inspected; longer arrays are always rich text
        if len(value) == 1:
            block_type = _block_type(value[0])
            if block_type == PREFORMATTED_TYPE:
                return FieldKind.MARKDOWN_BLOCK
            if block_type in HEADING_TYPES:
                return FieldKind.PLAIN_TEXT
        return FieldKind.RICH_HTML

    return FieldKind.UNSUPPORTED
