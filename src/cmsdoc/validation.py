"""JSON Schema validation of normalized output records."""

import json
from functools import lru_cache
from importlib.resources import files
from typing import Any

import jsonschema

from cmsdoc.models import NormalizedDocument

__all__ = ["load_output_schema", "validate_normalized_document"]

OUTPUT_SCHEMA_RESOURCE = "normalized_document.schema.json"


@lru_cache(maxsize=1)
def load_output_schema() -> dict[str, Any]:
    """Load the bundled output JSON Schema.

    Returns
    -------
    dict[str, Any]
        Decoded schema.
    """
    resource = files("cmsdoc") / "schemas" / OUTPUT_SCHEMA_RESOURCE
    return json.loads(resource.read_text(encoding="utf-8"))


def validate_normalized_document(document: NormalizedDocument | dict[str, Any]) -> None:
    """Validate an output record against the bundled schema.

    Parameters
    ----------
    document : NormalizedDocument | dict[str, Any]
        Output record or its dictionary form.

    Raises
    ------
    jsonschema.ValidationError
        If the record does not match the schema.
    """
    instance = document.to_dict() if isinstance(document, NormalizedDocument) else document
    jsonschema.validate(instance=instance, schema=load_output_schema())
