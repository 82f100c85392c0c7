"""Content extraction: find the article inside a fetched page.

The readability heuristics themselves live in ``readability-lxml``; this
module only adapts them to the service: it builds the content tree with
links resolved against the page URL, collects the two titles, and turns
the tree back into text.
"""

from __future__ import annotations

import html as html_lib
import re
from typing import Optional

import lxml.html
import trafilatura
from lxml.etree import LxmlError
from readability import Document
from readability.readability import Unparseable

from readable.errors import ContentEncodingError, ExtractionError
from readable.scraper.models import Extraction, FetchedPage


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _extract_title(html: str) -> Optional[str]:
    """Return the text of the first ``<title>`` tag, or ``None``."""
    match = re.search(r"<title[^>]*>([^<]+)</title>", html, re.IGNORECASE)
    if match:
        return html_lib.unescape(match.group(1)).strip() or None
    return None


def _extract_article_title(html: str, url: str) -> Optional[str]:
    """Return the headline of the article (OpenGraph / heading heuristics)."""
    metadata = trafilatura.extract_metadata(html, default_url=url)
    if metadata is None or not metadata.title:
        return None
    return metadata.title.strip() or None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_content(page: FetchedPage) -> Extraction:
    """Extract the readable subtree of *page*.

    Relative links and images inside the article are made absolute against
    ``page.url``.

    Raises:
        ExtractionError: readability could not make sense of the page.
    """
    try:
        summary = Document(page.html, url=page.url).summary(html_partial=True)
        content = lxml.html.fromstring(summary)
    except (Unparseable, LxmlError) as exc:
        raise ExtractionError(exc) from exc

    return Extraction(
        content=content,
        page_title=_extract_title(page.html),
        article_title=_extract_article_title(page.html, page.url),
    )


def serialize_content(content: lxml.html.HtmlElement) -> bytes:
    """Serialize the content tree to UTF-8 encoded HTML.

    Raises:
        ExtractionError: the tree could not be serialized.
    """
    try:
        return lxml.html.tostring(content, encoding="utf-8", method="html")
    except LxmlError as exc:
        raise ExtractionError(exc) from exc


def decode_content(data: bytes) -> str:
    """Interpret serialized content as UTF-8 text.

    Raises:
        ContentEncodingError: *data* is not valid UTF-8.
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise ContentEncodingError(exc) from exc
