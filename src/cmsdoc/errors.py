"""Exception taxonomy for cmsdoc.

Classification never raises: a field whose shape matches no strategy is
tagged ``unsupported`` and dropped. Shape violations found while parsing a
field abort the conversion of the whole document.
"""

__all__ = [
    "CmsDocError",
    "InvalidDocumentError",
    "FieldParseError",
    "MalformedFieldValue",
    "MalformedLinkValue",
    "DocumentParseError",
]


class CmsDocError(Exception):
    """Base class for all cmsdoc errors."""


class InvalidDocumentError(CmsDocError, ValueError):
    """Raised when a raw document envelope (id, slugs, lang, data) is unusable."""


class FieldParseError(CmsDocError):
    """Raised when a field value does not have the shape its parser expects."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize field parse error.

        Parameters
        ----------
        message : str
            Error message.
        field : str | None, optional
            Dotted path of the offending field (e.g. ``product.categories``).
        """
        self.reason = message
        self.field = field
        super().__init__(f"{field}: {message}" if field else message)

    def at(self, name: str) -> "FieldParseError":
        """Return a copy of this error located under field ``name``.

        Parameters
        ----------
        name : str
            Name of the enclosing field.

        Returns
        -------
        FieldParseError
            Error of the same class whose ``field`` is prefixed by ``name``.
        """
        field = f"{name}.{self.field}" if self.field else name
        return type(self)(self.reason, field=field)


class MalformedFieldValue(FieldParseError):
    """A field wrapper is missing the structure its parser requires."""


class MalformedLinkValue(MalformedFieldValue):
    """A link entry lacks the nested ``value.document.slug`` path."""


class DocumentParseError(CmsDocError):
    """Raised when a whole document cannot be converted."""

    def __init__(self, message: str, document_id: str | None = None) -> None:
        """Initialize document parse error.

        Parameters
        ----------
        message : str
            Error message.
        document_id : str | None, optional
            Identifier of the document that failed.
        """
        super().__init__(message)
        self.document_id = document_id
