"""Wrapper access helpers shared by sub-field parsers."""

from collections.abc import Mapping
from typing import Any

from cmsdoc.errors import MalformedFieldValue

from ..tables import WRAPPER_KEY


def require_wrapper(wrapper: Any) -> Mapping[str, Any]:
    """Return ``wrapper`` if it is a mapping, else raise MalformedFieldValue."""
    if not isinstance(wrapper, Mapping):
        raise MalformedFieldValue(
            f"expected a {{{WRAPPER_KEY!r}: ...}} wrapper, got {type(wrapper).__name__}"
        )
    return wrapper


def wrapped_value(wrapper: Any) -> Any:
    """Unwrap ``wrapper["value"]``; None when the key is missing."""
    return require_wrapper(wrapper).get(WRAPPER_KEY)
