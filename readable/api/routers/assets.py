"""Static font assets.

Routes
------
GET /static/Crimson.woff2         → text/woff2
GET /static/JetBrainsMono.woff2   → font/woff2
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from fastapi import APIRouter, Response

from readable.config import settings
from readable.errors import StaticAssetError

router = APIRouter()


@lru_cache(maxsize=None)
def _read_asset(path: Path) -> bytes:
    return path.read_bytes()


def static_content(name: str, content_type: str) -> Response:
    """Return the bundled asset *name* with *content_type*.

    The Content-Type header is set verbatim so that no charset is appended
    to ``text/*`` types.
    """
    path = settings.fonts_dir / name
    try:
        data = _read_asset(path)
    except OSError as exc:
        raise StaticAssetError(f"Can't load {path}: {exc}") from exc
    return Response(content=data, headers={"Content-Type": content_type})


@router.get("/static/Crimson.woff2")
def crimson_font() -> Response:
    return static_content("Crimson.woff2", "text/woff2")


@router.get("/static/JetBrainsMono.woff2")
def jetbrains_mono_font() -> Response:
    return static_content("JetBrainsMono.woff2", "font/woff2")
