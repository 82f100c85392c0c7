"""Catch-all reader route.

Routes
------
GET|HEAD /                 → landing page
GET|HEAD /<absolute-url>   → readable version of <absolute-url>

This router must be included after every fixed route: its ``{target:path}``
pattern matches anything.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Header, Request
from fastapi.responses import HTMLResponse

from readable.reader import read_path

router = APIRouter()


def _request_path(request: Request) -> str:
    """Return the path as sent by the client, percent-encoding and query intact."""
    raw_path = request.scope.get("raw_path")
    if raw_path:
        path = raw_path.split(b"?", 1)[0].decode("latin-1")
    else:
        path = request.url.path
    query = request.scope.get("query_string", b"")
    if query:
        path = f"{path}?{query.decode('latin-1')}"
    return path


@router.api_route("/{target:path}", methods=["GET", "HEAD"], response_class=HTMLResponse)
def read(request: Request, user_agent: Optional[str] = Header(None)) -> HTMLResponse:
    """Render the landing page or a readable version of the target URL.

    Failures are raised as ``ReadableError`` and rendered by the handler
    registered in :func:`readable.api.app.create_app`.
    """
    client = request.app.state.http
    return HTMLResponse(read_path(client, _request_path(request), user_agent))
