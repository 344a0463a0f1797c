"""Markdown rendering for preformatted rich-text blocks."""

import markdown as _markdown

from cmsdoc.errors import MalformedFieldValue

__all__ = ["render_markdown"]

MARKDOWN_EXTENSIONS: tuple[str, ...] = ("extra", "sane_lists")


def render_markdown(text: str) -> str:
    """Convert markdown source to an HTML fragment.

    Parameters
    ----------
    text : str
        Markdown source.

    Returns
    -------
    str
        Rendered HTML.

    Raises
    ------
    MalformedFieldValue
        If ``text`` is not a string.
    """
    if not isinstance(text, str):
        raise MalformedFieldValue(f"markdown source must be a string, got {type(text).__name__}")
    return _markdown.markdown(text, extensions=list(MARKDOWN_EXTENSIONS))
