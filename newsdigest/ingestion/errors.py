"""
Exceptions raised while fetching and extracting newsletter posts.
"""
from typing import Optional


class NewsdigestError(Exception):
    """Base class for all newsdigest errors."""


class FetchError(NewsdigestError):
    """
    Raised when a page cannot be retrieved: either the server answered with a
    non-success status or the transport failed (status is None).
    """

    def __init__(self, status: Optional[int], url: str, message: Optional[str] = None):
        self.status = status
        self.url = url
        if message is None:
            if status is not None:
                message = f"HTTP {status} fetching {url}"
            else:
                message = f"Request failed fetching {url}"
        super().__init__(message)


class ParseError(NewsdigestError):
    """Raised for a malformed structured-data block. Always recovered locally."""

    def __init__(self, source: str, cause: Exception):
        self.source = source
        self.cause = cause
        super().__init__(f"Malformed {source}: {cause}")


class ExtractionError(NewsdigestError):
    """Raised when a post reference cannot be turned into PostContent."""

    def __init__(self, reference, cause: Exception):
        self.reference = reference
        self.cause = cause
        super().__init__(str(cause))
