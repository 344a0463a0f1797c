"""Link-slug extraction for category and related-product lists.

Each entry of the wrapped list looks like::

    {"link": {"value": {"document": {"slug": "some-slug", ...}}}}

Entries without a ``link`` are skipped; entries with a link that lacks the
nested slug path are malformed.
"""

from collections.abc import Mapping, Sequence
from typing import Any

from cmsdoc.errors import MalformedLinkValue

from ._helpers import wrapped_value

LINK_SLUG_PATH: tuple[str, ...] = ("value", "document", "slug")


def _link_slug(link: Any) -> str:
    node = link
    for key in LINK_SLUG_PATH:
        if not isinstance(node, Mapping) or key not in node:
            raise MalformedLinkValue(f"link entry has no {'.'.join(LINK_SLUG_PATH)} path")
        node = node[key]
    if not isinstance(node, str):
        raise MalformedLinkValue(f"link slug must be a string, got {type(node).__name__}")
    return node


def _collect_slugs(entries: Sequence[Any]) -> list[str]:
    slugs: list[str] = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise MalformedLinkValue(f"link entry must be a mapping, got {type(entry).__name__}")
        link = entry.get("link")
        if link is None:
            continue
        slugs.append(_link_slug(link))
    return slugs


def _is_entry_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, str)


def parse_category_slugs(wrapper: Any) -> list[str]:
    """Extract linked document slugs, tolerating a missing list.

    Parameters
    ----------
    wrapper : Any
        Sub-field wrapper whose ``value`` is a list of link entries.

    Returns
    -------
    list[str]
        Slugs in entry order; empty when ``value`` is missing or empty.

    Raises
    ------
    MalformedLinkValue
        If a linked entry lacks ``link.value.document.slug`` or the slug
        is not a string.
    """
    entries = wrapped_value(wrapper)
    if not entries:
        return []
    if not _is_entry_list(entries):
        raise MalformedLinkValue("expected a list of link entries")
    return _collect_slugs(entries)


def parse_linked_slugs(wrapper: Any) -> list[str]:
    """Extract linked document slugs; the entry list is mandatory.

    Parameters
    ----------
    wrapper : Any
        Sub-field wrapper whose ``value`` is a list of link entries.

    Returns
    -------
    list[str]
        Slugs in entry order.

    Raises
    ------
    MalformedLinkValue
        If ``value`` is not a list, or a linked entry lacks the slug path
        or has a non-string slug.
    """
    entries = wrapped_value(wrapper)
    if not _is_entry_list(entries):
        raise MalformedLinkValue("expected a list of link entries")
    return _collect_slugs(entries)
