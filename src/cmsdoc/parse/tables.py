"""Centralized lookup tables for field classification and parsing.

All tables are immutable. Supporting a new link kind or a new named
sub-field requires only a new entry here (plus, for sub-fields, the
parser it maps to in cmsdoc.parse.objects).
"""

from enum import StrEnum
from types import MappingProxyType

# Runtime types used as-is
SCALAR_TYPES: tuple[type, ...] = (str, bool, int, float)

# Link kinds rendered as-is. Document links are not listed.
LINK_KINDS: frozenset[str] = frozenset({"media", "web"})

HEADING_TYPES: frozenset[str] = frozenset(
    {
        "heading1",
        "heading2",
        "heading3",
        "heading4",
        "heading5",
        "heading6",
    }
)

PREFORMATTED_TYPE = "preformatted"

# Attribute that marks an asset-like value (images and other media)
ASSET_ATTRIBUTE = "dimensions"

# Attribute carrying the link kind on link-like values
LINK_TYPE_ATTRIBUTE = "link_type"

# Key of a field wrapper record: {"value": ...}
WRAPPER_KEY = "value"


class SubFieldParser(StrEnum):
    """Parsers applied to named sub-fields of a nested object.

    Attributes
    ----------
    FIRST_BLOCK_TEXT : str
        Text of the first rich-text block.
    CATEGORY_SLUGS : str
        Slugs of linked documents; tolerates a missing list.
    LINKED_SLUGS : str
        Slugs of linked documents; requires a list.
    DEEP_COPY : str
        Independent copy of the wrapped value.
    RAW_NUMBER : str
        Wrapped value, unchanged.
    """

    FIRST_BLOCK_TEXT = "first_block_text"
    CATEGORY_SLUGS = "category_slugs"
    LINKED_SLUGS = "linked_slugs"
    DEEP_COPY = "deep_copy"
    RAW_NUMBER = "raw_number"


# Named sub-field -> parser. Sub-fields not listed are passed through.
OBJECT_FIELD_PARSERS: MappingProxyType[str, SubFieldParser] = MappingProxyType(
    {
        "title": SubFieldParser.FIRST_BLOCK_TEXT,
        "description": SubFieldParser.FIRST_BLOCK_TEXT,
        "categories": SubFieldParser.CATEGORY_SLUGS,
        "relatedProducts": SubFieldParser.LINKED_SLUGS,
        "image": SubFieldParser.DEEP_COPY,
        "price": SubFieldParser.RAW_NUMBER,
        "weight": SubFieldParser.RAW_NUMBER,
    }
)
