"""Title/description extraction."""

from collections.abc import Mapping, Sequence
from typing import Any

from cmsdoc.errors import MalformedFieldValue

from ._helpers import wrapped_value


def parse_first_block_text(wrapper: Any) -> str:
    """Return the text of the first rich-text block.

    Parameters
    ----------
    wrapper : Any
        Sub-field wrapper whose ``value`` is a rich-text array.

    Returns
    -------
    str
        Text of the first block.

    Raises
    ------
    MalformedFieldValue
        If the value is not a non-empty block list or the first block
        has no string ``text``.
    """
    blocks = wrapped_value(wrapper)
    if isinstance(blocks, str) or not isinstance(blocks, Sequence) or not blocks:
        raise MalformedFieldValue("expected a non-empty rich-text array")

    first = blocks[0]
    text = first.get("text") if isinstance(first, Mapping) else None
    if not isinstance(text, str):
        raise MalformedFieldValue("first rich-text block has no text")
    return text
