"""Nested-object parsing.

A nested object maps sub-field names to wrapper records. Named sub-fields
(see ``OBJECT_FIELD_PARSERS``) are parsed; every other sub-field, and every
sub-field whose wrapper is empty, is copied through unchanged.
"""

from collections.abc import Callable, Mapping, Sized
from typing import Any

from cmsdoc.errors import FieldParseError

from ._fields import (
    parse_category_slugs,
    parse_deep_copy,
    parse_first_block_text,
    parse_linked_slugs,
    parse_raw_number,
)
from .renderers import DEFAULT_RENDERERS, Renderers
from .tables import OBJECT_FIELD_PARSERS, SubFieldParser

__all__ = ["parse_object", "is_empty_wrapper"]


def is_empty_wrapper(wrapper: Any) -> bool:
    """Check whether a sub-field wrapper has no entries.

    Mappings, sequences and strings are empty when they have length zero.
    Non-container values (numbers, booleans, None) have no entries and
    are always empty.

    Parameters
    ----------
    wrapper : Any
        Sub-field wrapper.

    Returns
    -------
    bool
        True if the wrapper should be passed through untouched.
    """
    if isinstance(wrapper, Sized):
        return len(wrapper) == 0
    return True


def _sub_field_parsers(renderers: Renderers) -> dict[SubFieldParser, Callable[[Any], Any]]:
    return {
        SubFieldParser.FIRST_BLOCK_TEXT: parse_first_block_text,
        SubFieldParser.CATEGORY_SLUGS: parse_category_slugs,
        SubFieldParser.LINKED_SLUGS: parse_linked_slugs,
        SubFieldParser.DEEP_COPY: lambda w: parse_deep_copy(w, renderers.deep_copy),
        SubFieldParser.RAW_NUMBER: parse_raw_number,
    }


def parse_object(
    value: Mapping[str, Any],
    renderers: Renderers = DEFAULT_RENDERERS,
) -> dict[str, Any]:
    """Parse the named sub-fields of a nested object.

    Parameters
    ----------
    value : Mapping[str, Any]
        Sub-field name -> wrapper record.
    renderers : Renderers, optional
        Rendering collaborators (only ``deep_copy`` is used here).

    Returns
    -------
    dict[str, Any]
        New mapping with the same keys, in the same order.

    Raises
    ------
    FieldParseError
        If a named sub-field is malformed; ``field`` holds the sub-field name.
    """
    parsers = _sub_field_parsers(renderers)
    parsed: dict[str, Any] = {}

    for key, wrapper in value.items():
        kind = OBJECT_FIELD_PARSERS.get(key)
        if kind is None or is_empty_wrapper(wrapper):
            parsed[key] = wrapper
            continue

        try:
            parsed[key] = parsers[kind](wrapper)
        except FieldParseError as exc:
            raise exc.at(key) from exc

    return parsed
