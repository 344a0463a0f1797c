"""Document data models for cmsdoc.

Raw documents are the loosely-typed records served by the content source;
normalized documents are the public output shape consumed by templates.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from cmsdoc.errors import InvalidDocumentError

# Output schema version (see cmsdoc/schemas/normalized_document.schema.json)
SCHEMA_VERSION = "1.0.0"


@dataclass(frozen=True)
class RawDocument:
    """Raw content document as delivered by the content source.

    Attributes
    ----------
    id : str
        Opaque document identifier.
    slugs : tuple[str, ...]
        URL-safe aliases; the first one is canonical.
    lang : str | None
        Language tag (e.g. ``en-us``), passed through untouched.
    data : dict[str, Any]
        Field name -> raw field value, in payload order.
    """

    id: str
    slugs: tuple[str, ...]
    lang: str | None
    data: dict[str, Any]

    @property
    def canonical_slug(self) -> str | None:
        """Return the canonical (first) slug, or None when there is none."""
        return self.slugs[0] if self.slugs else None

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RawDocument":
        """Build a raw document from a decoded payload.

        Keys other than ``id``, ``slugs``, ``lang`` and ``data`` are ignored.

        Parameters
        ----------
        payload : Mapping[str, Any]
            Decoded document (e.g. one entry of a search response).

        Returns
        -------
        RawDocument
            Raw document.

        Raises
        ------
        InvalidDocumentError
            If the identity fields or the data payload are unusable.
        """
        if not isinstance(payload, Mapping):
            raise InvalidDocumentError(
                f"Document must be a mapping, got {type(payload).__name__}"
            )

        doc_id = payload.get("id")
        if not isinstance(doc_id, str) or not doc_id:
            raise InvalidDocumentError(f"Document id must be a non-empty string, got {doc_id!r}")

        slugs = payload.get("slugs", ())
        if (
            isinstance(slugs, str)
            or not isinstance(slugs, Sequence)
            or not all(isinstance(slug, str) for slug in slugs)
        ):
            raise InvalidDocumentError(f"Document {doc_id}: slugs must be a list of strings")

        lang = payload.get("lang")
        if lang is not None and not isinstance(lang, str):
            raise InvalidDocumentError(f"Document {doc_id}: lang must be a string")

        data = payload.get("data", {})
        if not isinstance(data, Mapping):
            raise InvalidDocumentError(f"Document {doc_id}: data must be a mapping")

        return cls(id=doc_id, slugs=tuple(slugs), lang=lang, data=dict(data))


@dataclass(frozen=True)
class NormalizedDocument:
    """Normalized output record.

    Attributes
    ----------
    id : str
        Document identifier.
    uid : str | None
        Canonical slug.
    slug : str | None
        Canonical slug (same value as ``uid``).
    lang : str | None
        Language tag.
    data : Any
        Parsed field payload. Its shape depends on the merge mode used by
        the assembler: the last parsed field's value, or the full mapping.
    """

    id: str
    uid: str | None
    slug: str | None
    lang: str | None
    data: Any = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to the public output mapping.

        Returns
        -------
        dict[str, Any]
            ``{id, uid, slug, lang, data}`` in that key order.
        """
        return {
            "id": self.id,
            "uid": self.uid,
            "slug": self.slug,
            "lang": self.lang,
            "data": self.data,
        }
