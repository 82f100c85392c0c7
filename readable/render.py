"""Render pages by plain placeholder substitution into ``template.html``.

Placeholders
------------
``{{page_title}}``, ``{{article_title}}``, ``{{header}}``, ``{{content}}``
and ``{{canonical}}``.  Values are inserted verbatim: nothing is escaped,
so a value that itself contains a placeholder or markup is rendered as-is.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from readable.config import settings
from readable.errors import ReadableError

_INDEX_HEADER = (
    "A simple web service to extract the main content from an article<br /> "
    "and format it for <i>reading</i>.\n"
    "Source code <a href=\"https://github.com/mre/readable\">here</a>.\n"
)


@lru_cache(maxsize=None)
def _load(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def canonical_link(url: str) -> str:
    """Return the ``<link rel="canonical">`` tag pointing at *url*."""
    return f'<link rel="canonical" href="{url}" />'


def render(
    page_title: str,
    article_title: str,
    header: str,
    content: str,
    canonical: Optional[str] = None,
) -> str:
    """Fill the page template.

    When *canonical* is ``None`` the ``{{canonical}}`` placeholder is
    removed rather than left in the output.
    """
    output = (
        _load(settings.template_path)
        .replace("{{page_title}}", page_title)
        .replace("{{article_title}}", article_title)
        .replace("{{header}}", header)
        .replace("{{content}}", content)
    )
    return output.replace(
        "{{canonical}}", canonical_link(canonical) if canonical is not None else ""
    )


def render_index() -> str:
    """Return the landing page shown for ``GET /``."""
    return render(
        "Readable.",
        "Readable",
        _INDEX_HEADER,
        _load(settings.index_path),
    )


def render_error(error: ReadableError) -> str:
    """Render *error* as a full page (same template, no canonical link)."""
    return render(error.title, error.title, error.header, error.detail)
