"""Renderers for rich text and markdown content."""

from cmsdoc.render.markdown import render_markdown
from cmsdoc.render.richtext import as_html, as_text

__all__ = [
    "as_html",
    "as_text",
    "render_markdown",
]
