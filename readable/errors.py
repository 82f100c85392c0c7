"""Failures that end a request with a rendered error page.

Each subclass carries the fields of the page shown to the reader: a short
``title``, a one-line ``header`` and the underlying error text as ``detail``.
"""

from __future__ import annotations


class ReadableError(Exception):
    """Base class for every failure surfaced to the reader."""

    status_code: int = 400
    title: str = "Yikes!"
    header: str = "Couldn't render article. (It is an article, right?)"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class InvalidURLError(ReadableError):
    """The request path is not an absolute URL."""

    title = "Invalid URL"
    header = "Check if the path represents a valid URL"


class FetchTransportError(ReadableError):
    """The target could not be reached (DNS, connect, TLS, timeout, ...)."""

    def __init__(self, error: object) -> None:
        super().__init__(f"Can't fetch URL: {error}")


class FetchBodyReadError(ReadableError):
    """The target answered but its body could not be read as text."""

    def __init__(self, error: object) -> None:
        super().__init__(f"Can't fetch response body text: {error}")


class ExtractionError(ReadableError):
    """No content tree could be extracted from the page, or it failed to serialize."""

    title = "Ouch"
    header = "Couldn't extract content from the article. (It is an article, right?)"

    def __init__(self, error: object) -> None:
        super().__init__(f"Can't serialize content: {error}")


class ContentEncodingError(ReadableError):
    """The serialized content is not valid UTF-8."""

    title = "Humm..."
    header = "Invalid UTF-8 in article content"

    def __init__(self, error: object) -> None:
        super().__init__(f"Can't decode content: {error}")


class StaticAssetError(Exception):
    """A bundled static asset could not be loaded (answered with a bare 500)."""
