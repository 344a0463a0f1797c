"""Named sub-field parsers for nested objects.

Each parser receives the sub-field's wrapper record (``{"value": ...}``)
and returns the normalized value. Shape violations raise
MalformedFieldValue (or MalformedLinkValue for link paths).
"""

from .links import parse_category_slugs, parse_linked_slugs
from .scalars import parse_deep_copy, parse_raw_number
from .text import parse_first_block_text

__all__ = [
    "parse_category_slugs",
    "parse_deep_copy",
    "parse_first_block_text",
    "parse_linked_slugs",
    "parse_raw_number",
]
