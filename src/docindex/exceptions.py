"""Custom exceptions for docindex."""

from __future__ import annotations


class DocIndexError(Exception):
    """Base exception for docindex operations."""


class MalformedIndexError(DocIndexError):
    """The index source does not have the documented shape.

    Raised while building a ``DocIndex``; no partial index is ever returned.

    Attributes:
        location: Dotted location of the offending value inside the source,
            e.g. ``en.contents['00_quickstart'].title``. None for errors that
            concern the document as a whole.
    """

    def __init__(self, message: str, *, location: str | None = None) -> None:
        self.message = message
        self.location = location
        super().__init__(f"{location}: {message}" if location else message)


class UnknownLanguageError(DocIndexError, LookupError):
    """A language code was requested that the index does not declare."""


class FetchError(DocIndexError):
    """Error while fetching an index over HTTP."""


class IndexNotFoundError(FetchError):
    """The remote index does not exist (HTTP 404)."""
