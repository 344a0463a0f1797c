"""Tests for per-kind field parsers."""

from types import MappingProxyType

import pytest
from _builders import asset, heading, link_entry, paragraph, preformatted

from cmsdoc.errors import MalformedFieldValue
from cmsdoc.parse import PARSERS, FieldKind, Renderers, parse_field
from cmsdoc.parse import strategies


def _fake_renderers() -> Renderers:
    return Renderers(
        rich_text_to_text=lambda blocks: f"text:{len(blocks)}",
        rich_text_to_html=lambda blocks: f"html:{len(blocks)}",
        markdown_to_html=lambda source: f"md:{source}",
        deep_copy=lambda value: {"copied": value},
    )


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_every_parsed_kind_has_a_parser() -> None:
    """Test all kinds except UNSUPPORTED are registered."""
    assert set(PARSERS) == set(FieldKind) - {FieldKind.UNSUPPORTED}


@pytest.mark.unit
def test_unsupported_has_no_parser() -> None:
    """Test parsing an UNSUPPORTED value raises ValueError."""
    with pytest.raises(ValueError, match="unsupported"):
        parse_field(FieldKind.UNSUPPORTED, None)


@pytest.mark.unit
def test_parsers_registry_is_read_only() -> None:
    """Test the parser registry cannot be mutated."""
    with pytest.raises(TypeError):
        PARSERS[FieldKind.UNSUPPORTED] = lambda v, r: v  # type: ignore[index]


# ---------------------------------------------------------------------------
# Default renderers
# ---------------------------------------------------------------------------


@pytest.mark.unit
@pytest.mark.parametrize("value", ["hello", 42, 1.5, True])
def test_passthrough_scalars(value: object) -> None:
    """Test scalars are returned unchanged."""
    assert parse_field(FieldKind.PASSTHROUGH, value) == value


@pytest.mark.unit
def test_passthrough_mapping_is_copied() -> None:
    """Test links and assets come back as independent copies."""
    image = asset()
    result = parse_field(FieldKind.PASSTHROUGH, image)

    assert result == image
    assert result is not image


@pytest.mark.unit
def test_markdown_block() -> None:
    """Test a preformatted block is rendered as markdown."""
    assert parse_field(FieldKind.MARKDOWN_BLOCK, [preformatted("# Title")]) == "<h1>Title</h1>"


@pytest.mark.unit
def test_markdown_block_without_text_is_malformed() -> None:
    """Test a preformatted block lacking text raises."""
    with pytest.raises(MalformedFieldValue):
        parse_field(FieldKind.MARKDOWN_BLOCK, [{"type": "preformatted"}])


@pytest.mark.unit
def test_plain_text() -> None:
    """Test a heading is rendered as its plain text."""
    assert parse_field(FieldKind.PLAIN_TEXT, [heading("Hello")]) == "Hello"


@pytest.mark.unit
def test_rich_html() -> None:
    """Test a rich-text array is rendered as HTML."""
    value = [heading("Title", 2), paragraph("Body")]

    assert parse_field(FieldKind.RICH_HTML, value) == "<h2>Title</h2><p>Body</p>"


@pytest.mark.unit
def test_rich_html_empty_array() -> None:
    """Test an empty array renders to an empty string."""
    assert parse_field(FieldKind.RICH_HTML, []) == ""


@pytest.mark.unit
def test_nested_object() -> None:
    """Test a nested object has its named sub-fields parsed."""
    value = {"title": {"value": [heading("T")]}, "categories": {"value": [link_entry("c")]}}

    assert parse_field(FieldKind.NESTED_OBJECT, value) == {"title": "T", "categories": ["c"]}


# ---------------------------------------------------------------------------
# Injected renderers
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_injected_renderers_are_used() -> None:
    """Test every parser goes through the Renderers bundle."""
    renderers = _fake_renderers()

    assert parse_field(FieldKind.PLAIN_TEXT, [heading("x")], renderers) == "text:1"
    assert parse_field(FieldKind.RICH_HTML, [paragraph("a"), paragraph("b")], renderers) == (
        "html:2"
    )
    assert parse_field(FieldKind.MARKDOWN_BLOCK, [preformatted("*a*")], renderers) == "md:*a*"
    assert parse_field(FieldKind.PASSTHROUGH, {"link_type": "Web"}, renderers) == {
        "copied": {"link_type": "Web"}
    }


@pytest.mark.unit
def test_injected_deep_copy_reaches_nested_image() -> None:
    """Test the nested-object parser forwards the Renderers bundle."""
    value = {"image": {"value": asset()}}

    result = parse_field(FieldKind.NESTED_OBJECT, value, _fake_renderers())

    assert result == {"image": {"copied": asset()}}


@pytest.mark.unit
def test_registry_check_reports_missing_kinds(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the registry check names kinds without a parser."""
    partial = {k: v for k, v in PARSERS.items() if k is not FieldKind.RICH_HTML}
    monkeypatch.setattr(strategies, "PARSERS", MappingProxyType(partial))

    with pytest.raises(RuntimeError, match="rich-html"):
        strategies._check_exhaustive()


@pytest.mark.unit
def test_registry_check_passes_for_bundled_parsers() -> None:
    """Test the bundled registry covers every parsed kind."""
    strategies._check_exhaustive()
