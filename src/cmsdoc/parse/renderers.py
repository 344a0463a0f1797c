"""External collaborators used by the field parsers.

Parsers never import renderers directly; they receive a ``Renderers``
bundle so callers can swap in their own rich-text or markdown engines.
"""

import copy
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Any

from cmsdoc.render import as_html, as_text, render_markdown

__all__ = ["Renderers", "DEFAULT_RENDERERS"]


@dataclass(frozen=True)
class Renderers:
    """Bundle of rendering callables.

    Attributes
    ----------
    rich_text_to_text : Callable[[Sequence[Any]], str]
        Rich-text array -> plain string.
    rich_text_to_html : Callable[[Sequence[Any]], str]
        Rich-text array -> HTML string.
    markdown_to_html : Callable[[str], str]
        Markdown source -> HTML string.
    deep_copy : Callable[[Any], Any]
        Structural copy sharing nothing with its argument.
    """

    rich_text_to_text: Callable[[Sequence[Any]], str] = as_text
    rich_text_to_html: Callable[[Sequence[Any]], str] = as_html
    markdown_to_html: Callable[[str], str] = render_markdown
    deep_copy: Callable[[Any], Any] = copy.deepcopy


DEFAULT_RENDERERS = Renderers()
