"""Tests for markdown rendering."""

import pytest

from cmsdoc.errors import MalformedFieldValue
from cmsdoc.render import render_markdown


@pytest.mark.unit
def test_heading() -> None:
    """Test a markdown heading renders as HTML."""
    assert render_markdown("# Title") == "<h1>Title</h1>"


@pytest.mark.unit
def test_paragraph_with_emphasis() -> None:
    """Test inline emphasis inside a paragraph."""
    assert render_markdown("Some *soft* cotton") == "<p>Some <em>soft</em> cotton</p>"


@pytest.mark.unit
def test_list() -> None:
    """Test a bullet list."""
    html = render_markdown("- a\n- b")

    assert "<ul>" in html
    assert "<li>a</li>" in html
    assert "<li>b</li>" in html


@pytest.mark.unit
def test_table_extension() -> None:
    """Test tables from the extra extension are enabled."""
    html = render_markdown("| a | b |\n|---|---|\n| 1 | 2 |")

    assert "<table>" in html
    assert "<td>1</td>" in html


@pytest.mark.unit
def test_empty_source() -> None:
    """Test empty source renders to an empty string."""
    assert render_markdown("") == ""


@pytest.mark.unit
def test_non_string_source() -> None:
    """Test non-string source is malformed."""
    with pytest.raises(MalformedFieldValue):
        render_markdown(None)  # type: ignore[arg-type]
