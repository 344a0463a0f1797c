"""Shared data types for cmsdoc.

Parse-time types (classification tags, parsed field collections) live
closer to their consumers in cmsdoc.parse.
"""

from cmsdoc.models.documents import SCHEMA_VERSION, NormalizedDocument, RawDocument

__all__ = [
    "SCHEMA_VERSION",
    "RawDocument",
    "NormalizedDocument",
]
