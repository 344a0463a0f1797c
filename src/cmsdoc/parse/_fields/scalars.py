"""Image and numeric sub-fields."""

import copy
from collections.abc import Callable
from typing import Any

from ._helpers import wrapped_value


def parse_deep_copy(wrapper: Any, deep_copy: Callable[[Any], Any] = copy.deepcopy) -> Any:
    """Return an independent copy of the wrapped value."""
    return deep_copy(wrapped_value(wrapper))


def parse_raw_number(wrapper: Any) -> Any:
    """Return the wrapped value unchanged.

    No numeric coercion is applied: a string price stays a string.
    """
    return wrapped_value(wrapper)
