"""Turn a request path into a rendered page.

This is the whole pipeline behind every non-static route:

    path → target URL → fetch → extract → serialize → render

Every failure along the way is raised as a :class:`ReadableError`
subclass; callers decide how to present it (HTML page, CLI message).
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx
from pydantic import AnyUrl, TypeAdapter, ValidationError

from readable.errors import InvalidURLError
from readable.render import render, render_index
from readable.scraper import decode_content, extract_content, fetch_url, serialize_content
from readable.utils import format_now, resolve_agent

logger = logging.getLogger(__name__)

DEFAULT_TITLE = "Readable"

_URL_ADAPTER = TypeAdapter(AnyUrl)


def parse_target(target: str) -> str:
    """Validate *target* as an absolute URL and return its canonical form.

    Raises:
        InvalidURLError: *target* is not an absolute URL.
    """
    try:
        url = _URL_ADAPTER.validate_python(target)
    except ValidationError as exc:
        raise InvalidURLError(exc.errors()[0]["msg"]) from exc
    return str(url)


def build_header(url: str, retrieved_on: str) -> str:
    return (
        f'A readable version of <a class="shortened" href="{url}">{url}</a>'
        f"<br />retrieved on {retrieved_on}"
    )


def read_article(client: httpx.Client, target: str, user_agent: Optional[str] = None) -> str:
    """Fetch *target* and return the rendered readable page.

    *user_agent* is the caller's own User-Agent; it is forwarded upstream
    when it is a valid header value.
    """
    url = parse_target(target)
    page = fetch_url(client, url, resolve_agent(user_agent))
    extraction = extract_content(page)
    content = decode_content(serialize_content(extraction.content))

    logger.info("Rendered %s (%d bytes of content)", url, len(content))
    return render(
        extraction.page_title or DEFAULT_TITLE,
        extraction.article_title or DEFAULT_TITLE,
        build_header(url, format_now()),
        content,
        canonical=url,
    )


def read_path(client: httpx.Client, path: str, user_agent: Optional[str] = None) -> str:
    """Handle a request *path*: the landing page for ``/``, an article otherwise.

    Exactly one leading ``/`` is stripped; the rest is the target URL.
    """
    target = path[1:] if path.startswith("/") else path
    if not target:
        return render_index()
    return read_article(client, target, user_agent)
