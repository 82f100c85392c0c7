"""Outbound HTTP fetch of the target page."""

from __future__ import annotations

import logging

import httpx

from readable.config import settings
from readable.errors import FetchBodyReadError, FetchTransportError
from readable.scraper.models import FetchedPage

logger = logging.getLogger(__name__)


def create_client() -> httpx.Client:
    """Return the pooled client shared by every request.

    ``httpx.Client`` is safe to use from the worker threads FastAPI runs
    sync endpoints on.
    """
    return httpx.Client(
        timeout=settings.request_timeout,
        follow_redirects=True,
        max_redirects=settings.max_redirects,
    )


def fetch_url(client: httpx.Client, url: str, user_agent: str) -> FetchedPage:
    """GET *url* with *user_agent* and return its body as text.

    A single attempt is made.  Non-2xx responses are returned like any other
    page; only failures to talk to the server or to read its body raise.

    Raises:
        FetchTransportError: The request could not be sent or no response
            headers were received.
        FetchBodyReadError: The response body could not be read or decoded.
    """
    request = client.build_request("GET", url, headers={"User-Agent": user_agent})
    try:
        response = client.send(request, stream=True)
    except httpx.HTTPError as exc:
        raise FetchTransportError(exc) from exc

    try:
        response.read()
        html = response.text
    except (httpx.HTTPError, httpx.StreamError) as exc:
        raise FetchBodyReadError(exc) from exc
    finally:
        response.close()

    if response.is_success:
        logger.info("Fetched %s (HTTP %d)", url, response.status_code)
    else:
        logger.warning("Upstream answered %s with HTTP %d", url, response.status_code)

    return FetchedPage(url=url, html=html, status_code=response.status_code)
