"""Tests for field dispatch over a document's data payload."""

import pytest
from _builders import asset, heading, link_entry, paragraph, preformatted

from cmsdoc.errors import MalformedLinkValue
from cmsdoc.parse import FieldKind, ParsedField, ParsedFields, dispatch_fields, unwrap_field

# ---------------------------------------------------------------------------
# Unwrapping
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_unwrap_single_value_record() -> None:
    """Test a {"value": ...} record is unwrapped."""
    assert unwrap_field({"value": 19}) == 19


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw",
    ["bare", 19, [heading("x")], {"value": 1, "other": 2}, {"title": {"value": []}}, {}],
)
def test_unwrap_leaves_other_values(raw: object) -> None:
    """Test non-wrapper values are returned as-is."""
    assert unwrap_field(raw) is raw


# ---------------------------------------------------------------------------
# Dispatch
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_dispatch_title_and_price() -> None:
    """Test the canonical title + price payload."""
    result = dispatch_fields({"title": {"value": [heading("Hello")]}, "price": {"value": 19}})

    assert result.as_dict() == {"title": "Hello", "price": 19}
    assert [f.kind for f in result.fields] == [FieldKind.PLAIN_TEXT, FieldKind.PASSTHROUGH]
    assert result.dropped == ()


@pytest.mark.unit
def test_dispatch_bare_values() -> None:
    """Test values not wrapped in a record are parsed directly."""
    result = dispatch_fields({"title": [heading("Hello")], "price": 19})

    assert result.as_dict() == {"title": "Hello", "price": 19}


@pytest.mark.unit
def test_dispatch_keeps_insertion_order() -> None:
    """Test fields come out in the payload's key order."""
    field_map = {
        "zeta": "z",
        "alpha": [preformatted("**a**")],
        "mid": [paragraph("m")],
        "image": asset(),
    }

    result = dispatch_fields(field_map)

    assert [f.name for f in result.fields] == ["zeta", "alpha", "mid", "image"]
    assert result.as_dict()["alpha"] == "<p><strong>a</strong></p>"
    assert result.as_dict()["mid"] == "<p>m</p>"


@pytest.mark.unit
def test_dispatch_drops_unsupported_fields() -> None:
    """Test absent values are dropped and reported."""
    field_map = {"a": None, "b": "kept", "c": {"value": ""}, "d": 0, "e": False}

    result = dispatch_fields(field_map)

    assert result.as_dict() == {"b": "kept"}
    assert result.dropped == ("a", "c", "d", "e")


@pytest.mark.unit
def test_dispatch_empty_payload() -> None:
    """Test an empty payload yields no fields."""
    result = dispatch_fields({})

    assert len(result) == 0
    assert result.last() is None
    assert result.as_dict() == {}


@pytest.mark.unit
def test_dispatch_nested_object() -> None:
    """Test a structured sub-object is parsed by name."""
    product = {
        "title": {"value": [heading("T-shirt")]},
        "categories": {"value": [link_entry("shirts")]},
        "price": {"value": 25},
    }

    result = dispatch_fields({"product": {"value": product}})

    assert result.fields == (
        ParsedField(
            name="product",
            kind=FieldKind.NESTED_OBJECT,
            value={"title": "T-shirt", "categories": ["shirts"], "price": 25},
        ),
    )


@pytest.mark.unit
def test_dispatch_error_has_dotted_path() -> None:
    """Test a malformed sub-field fails with the full field path."""
    broken = {"link": {"value": {"document": {}}}}
    field_map = {
        "title": [heading("ok")],
        "product": {"value": {"categories": {"value": [link_entry("a"), broken]}}},
    }

    with pytest.raises(MalformedLinkValue) as exc_info:
        dispatch_fields(field_map)

    assert exc_info.value.field == "product.categories"
    assert str(exc_info.value).startswith("product.categories: ")


@pytest.mark.unit
def test_dispatch_does_not_mutate_input() -> None:
    """Test the raw payload is left untouched."""
    image = asset()
    field_map = {"image": {"value": image}, "title": {"value": [heading("T")]}}

    result = dispatch_fields(field_map)
    result.as_dict()["image"]["url"] = "changed"

    assert image["url"] == "http://x/y.png"
    assert field_map["title"] == {"value": [heading("T")]}


# ---------------------------------------------------------------------------
# ParsedFields
# ---------------------------------------------------------------------------


@pytest.mark.unit
def test_kind_counts() -> None:
    """Test classification totals include dropped fields."""
    parsed = ParsedFields(
        fields=(
            ParsedField("a", FieldKind.PASSTHROUGH, 1),
            ParsedField("b", FieldKind.PASSTHROUGH, 2),
            ParsedField("c", FieldKind.RICH_HTML, "<p>c</p>"),
        ),
        dropped=("d",),
    )

    assert parsed.kind_counts() == {"passthrough": 2, "rich-html": 1, "unsupported": 1}
    assert parsed.last() == ParsedField("c", FieldKind.RICH_HTML, "<p>c</p>")
    assert len(parsed) == 3
