"""FastAPI application factory.

Lifespan
--------
On startup the app opens a single pooled ``httpx.Client`` (shared across
all requests via ``request.app.state.http``).  On shutdown it closes the
client cleanly.

Routers
-------
Fixed routes are mounted first, the catch-all reader last:

    /static/*.woff2   — bundled fonts
    /{target:path}    — landing page and readable articles

Errors
------
``ReadableError`` becomes a rendered HTML page with its status code;
``StaticAssetError`` becomes a bare 500.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, Response
from fastapi.responses import HTMLResponse

from readable import __version__
from readable.errors import ReadableError, StaticAssetError
from readable.render import render_error
from readable.scraper import create_client

from readable.api.routers import assets as assets_router
from readable.api.routers import reader as reader_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the outbound HTTP client on startup and close it on shutdown."""
    client = create_client()
    app.state.http = client
    try:
        yield
    finally:
        client.close()


async def readable_error_handler(request: Request, exc: ReadableError) -> HTMLResponse:
    logger.warning("%s %s failed: %s", type(exc).__name__, request.url.path, exc.detail)
    return HTMLResponse(render_error(exc), status_code=exc.status_code)


async def static_asset_error_handler(request: Request, exc: StaticAssetError) -> Response:
    logger.error("Static asset unavailable: %s", exc)
    return Response(status_code=500)


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="Readable",
        description=(
            "Fetches the page whose URL follows the leading slash, extracts "
            "its main content and serves it as a clean, reading-friendly page."
        ),
        version=__version__,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    app.add_exception_handler(ReadableError, readable_error_handler)
    app.add_exception_handler(StaticAssetError, static_asset_error_handler)

    app.include_router(assets_router.router, tags=["static"])
    app.include_router(reader_router.router, tags=["reader"])

    return app


# Module-level instance used by uvicorn:
#   uvicorn readable.api.app:app --reload
app = create_app()
