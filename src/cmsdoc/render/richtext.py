"""Structured rich text serialization.

Rich text is an ordered list of blocks::

    {"type": "paragraph", "text": "Hello world",
     "spans": [{"start": 0, "end": 5, "type": "strong"}]}

Block types: heading1..heading6, paragraph, preformatted, list-item,
o-list-item, image, embed. Span types: strong, em, hyperlink, label.
Consecutive list items are grouped into a single ``<ul>``/``<ol>``.
"""

import html
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from cmsdoc.errors import MalformedFieldValue

__all__ = ["as_text", "as_html"]

HEADING_RE = re.compile(r"^heading([1-6])$")

_LIST_TAGS: dict[str, str] = {
    "list-item": "ul",
    "o-list-item": "ol",
}

_SIMPLE_BLOCK_TAGS: dict[str, str] = {
    "paragraph": "p",
    "preformatted": "pre",
}

_SPAN_TAGS: dict[str, str] = {
    "strong": "strong",
    "em": "em",
}


@dataclass(frozen=True)
class _Span:
    start: int
    end: int
    type: str
    data: Mapping[str, Any]


def _require_block(block: Any) -> Mapping[str, Any]:
    if not isinstance(block, Mapping):
        raise MalformedFieldValue(
            f"rich-text block must be a mapping, got {type(block).__name__}"
        )
    return block


def _block_text(block: Mapping[str, Any]) -> str:
    text = block.get("text")
    return text if isinstance(text, str) else ""


def as_text(blocks: Sequence[Any], join: str = " ") -> str:
    """Render rich text as plain text.

    Parameters
    ----------
    blocks : Sequence[Any]
        Rich-text blocks.
    join : str, optional
        Separator placed between block texts, by default a single space.

    Returns
    -------
    str
        Concatenated block texts.

    Raises
    ------
    MalformedFieldValue
        If a block is not a mapping.
    """
    return join.join(_block_text(_require_block(block)) for block in blocks)


def _escape(text: str) -> str:
    return html.escape(text).replace("\n", "<br />")


def _parse_spans(block: Mapping[str, Any], text_len: int) -> list[_Span]:
    spans: list[_Span] = []
    for raw in block.get("spans") or ():
        if not isinstance(raw, Mapping):
            continue
        start, end = raw.get("start"), raw.get("end")
        if not isinstance(start, int) or not isinstance(end, int):
            continue
        start, end = max(start, 0), min(end, text_len)
        if start >= end:
            continue
        data = raw.get("data")
        spans.append(
            _Span(
                start=start,
                end=end,
                type=str(raw.get("type", "")),
                data=data if isinstance(data, Mapping) else {},
            )
        )
    # Outer spans first: earliest start, then longest
    spans.sort(key=lambda s: (s.start, -s.end))
    return spans


def _link_href(data: Mapping[str, Any]) -> str:
    url = data.get("url")
    if isinstance(url, str) and url:
        return url
    slug = data.get("uid") or data.get("slug")
    if isinstance(slug, str) and slug:
        return f"/{slug}"
    return "#"


def _span_tags(span: _Span) -> tuple[str, str]:
    if span.type in _SPAN_TAGS:
        tag = _SPAN_TAGS[span.type]
        return f"<{tag}>", f"</{tag}>"
    if span.type == "hyperlink":
        href = html.escape(_link_href(span.data))
        target = span.data.get("target")
        target_attr = ""
        if isinstance(target, str):
            target_attr = f' target="{html.escape(target)}" rel="noopener"'
        return f'<a href="{href}"{target_attr}>', "</a>"
    if span.type == "label":
        label = span.data.get("label")
        class_attr = f' class="{html.escape(label)}"' if isinstance(label, str) else ""
        return f"<span{class_attr}>", "</span>"
    return "", ""


def _render_inline(block: Mapping[str, Any]) -> str:
    """Render a block's text with its spans.

    The text is cut at every span boundary. Spans covering a segment are
    opened outermost first; when a span ends while an inner one is still
    open, the inner span is closed and opened again in the next segment,
    so overlapping spans keep their formatting over their whole range.
    """
    text = _block_text(block)
    spans = _parse_spans(block, len(text))
    if not spans:
        return _escape(text)

    bounds = sorted({0, len(text), *(s.start for s in spans), *(s.end for s in spans)})
    parts: list[str] = []
    stack: list[_Span] = []

    for seg_start, seg_end in zip(bounds, bounds[1:]):
        active = [s for s in spans if s.start <= seg_start and s.end >= seg_end]

        keep = 0
        while keep < min(len(stack), len(active)) and stack[keep] is active[keep]:
            keep += 1
        while len(stack) > keep:
            parts.append(_span_tags(stack.pop())[1])
        for span in active[keep:]:
            parts.append(_span_tags(span)[0])
            stack.append(span)

        parts.append(_escape(text[seg_start:seg_end]))

    while stack:
        parts.append(_span_tags(stack.pop())[1])
    return "".join(parts)


def _label_attr(block: Mapping[str, Any]) -> str:
    label = block.get("label")
    return f' class="{html.escape(label)}"' if isinstance(label, str) and label else ""


def _render_image(block: Mapping[str, Any]) -> str:
    src = html.escape(str(block.get("url") or ""))
    alt = html.escape(str(block.get("alt") or ""))
    img = f'<img src="{src}" alt="{alt}" />'
    link = block.get("linkTo")
    if isinstance(link, Mapping):
        img = f'<a href="{html.escape(_link_href(link))}">{img}</a>'
    return f'<p class="block-img">{img}</p>'


def _render_embed(block: Mapping[str, Any]) -> str:
    oembed = block.get("oembed")
    if not isinstance(oembed, Mapping):
        return ""
    attrs = [f'data-oembed="{html.escape(str(oembed.get("embed_url") or ""))}"']
    if oembed.get("type"):
        attrs.append(f'data-oembed-type="{html.escape(str(oembed["type"]))}"')
    if oembed.get("provider_name"):
        attrs.append(f'data-oembed-provider="{html.escape(str(oembed["provider_name"]))}"')
    return f"<div {' '.join(attrs)}>{oembed.get('html') or ''}</div>"


def _render_block(block: Mapping[str, Any]) -> str:
    block_type = block.get("type")

    if block_type == "image":
        return _render_image(block)
    if block_type == "embed":
        return _render_embed(block)

    heading = HEADING_RE.match(block_type) if isinstance(block_type, str) else None
    if heading:
        tag = f"h{heading.group(1)}"
    else:
        tag = _SIMPLE_BLOCK_TAGS.get(block_type, "p") if isinstance(block_type, str) else "p"

    return f"<{tag}{_label_attr(block)}>{_render_inline(block)}</{tag}>"


def as_html(blocks: Sequence[Any]) -> str:
    """Render rich text as HTML.

    Parameters
    ----------
    blocks : Sequence[Any]
        Rich-text blocks.

    Returns
    -------
    str
        HTML fragment; empty string for an empty block list.

    Raises
    ------
    MalformedFieldValue
        If a block is not a mapping.

    Examples
    --------
        >>> as_html([{"type": "paragraph", "text": "a & b", "spans": []}])
        '<p>a &amp; b</p>'
    """
    parts: list[str] = []
    open_list: str | None = None

    for raw_block in blocks:
        block = _require_block(raw_block)
        block_type = block.get("type")
        list_tag = _LIST_TAGS.get(block_type) if isinstance(block_type, str) else None

        if open_list and list_tag != open_list:
            parts.append(f"</{open_list}>")
            open_list = None

        if list_tag:
            if open_list is None:
                parts.append(f"<{list_tag}>")
                open_list = list_tag
            parts.append(f"<li{_label_attr(block)}>{_render_inline(block)}</li>")
            continue

        parts.append(_render_block(block))

    if open_list:
        parts.append(f"</{open_list}>")

    return "".join(parts)
