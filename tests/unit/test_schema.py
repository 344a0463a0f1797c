"""Tests for output schema validation."""

import jsonschema
import pytest

from cmsdoc.models import SCHEMA_VERSION, NormalizedDocument
from cmsdoc.validation import load_output_schema, validate_normalized_document


@pytest.mark.unit
def test_schema_is_valid_draft() -> None:
    """Test the bundled schema is itself a valid JSON Schema."""
    schema = load_output_schema()

    jsonschema.Draft202012Validator.check_schema(schema)
    assert schema["required"] == ["id", "uid", "slug", "lang", "data"]
    assert schema["version"] == SCHEMA_VERSION


@pytest.mark.unit
@pytest.mark.parametrize("data", [None, 19, "text", ["a"], {"title": "T"}])
def test_valid_documents(data: object) -> None:
    """Test any data shape passes validation."""
    doc = NormalizedDocument(id="x1", uid="s", slug="s", lang="en-us", data=data)

    validate_normalized_document(doc)


@pytest.mark.unit
def test_null_identity_fields_are_valid() -> None:
    """Test uid, slug and lang may be null."""
    validate_normalized_document(
        {"id": "x1", "uid": None, "slug": None, "lang": None, "data": None}
    )


@pytest.mark.unit
@pytest.mark.parametrize(
    "instance",
    [
        {"uid": "s", "slug": "s", "lang": "en", "data": 1},
        {"id": "", "uid": "s", "slug": "s", "lang": "en", "data": 1},
        {"id": "x1", "uid": 3, "slug": "s", "lang": "en", "data": 1},
        {"id": "x1", "uid": "s", "slug": "s", "lang": "en"},
        {"id": "x1", "uid": "s", "slug": "s", "lang": "en", "data": 1, "extra": True},
    ],
)
def test_invalid_documents(instance: dict) -> None:
    """Test malformed output records fail validation."""
    with pytest.raises(jsonschema.ValidationError):
        validate_normalized_document(instance)
