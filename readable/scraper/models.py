"""Request-scoped data models for the fetch → extract pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lxml.html import HtmlElement


@dataclass
class FetchedPage:
    """The upstream response for a single target URL."""

    url: str
    html: str
    status_code: int


@dataclass
class Extraction:
    """The readable part of a page plus its titles.

    ``content`` is the article subtree; either title may be ``None`` when
    the page does not provide one.
    """

    content: HtmlElement
    page_title: Optional[str] = None
    article_title: Optional[str] = None
