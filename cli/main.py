"""Readable CLI — entry-point for serving and one-off reads.

Usage:
    python cli/main.py --help

Commands:
    serve     → run the HTTP service with uvicorn
    read      → render one article to stdout or a file
    version   → print the service name and version
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from readable.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import logging
from typing import Optional

import typer

from readable.config import settings
from readable.errors import ReadableError

app = typer.Typer(
    name="readable",
    help="Readable — extract the main content of web articles.",
    no_args_is_help=True,
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stdout,
    )


@app.command("serve")
def serve(
    host: str = typer.Option(settings.host, help="Interface to bind."),
    port: int = typer.Option(settings.port, help="Port to listen on."),
    reload: bool = typer.Option(False, help="Restart on code changes (development)."),
) -> None:
    """Run the HTTP service."""
    import uvicorn

    configure_logging(settings.log_level)
    typer.echo(f"[serve] {settings.default_user_agent} on http://{host}:{port}/")
    uvicorn.run(
        "readable.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )


@app.command("read")
def read(
    url: str = typer.Argument(..., help="Absolute URL of the article."),
    user_agent: Optional[str] = typer.Option(
        None, "--user-agent", help="User-Agent to send upstream."
    ),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Write the page here instead of stdout."
    ),
) -> None:
    """Fetch URL and print its readable version as a full HTML page."""
    from readable.reader import read_article
    from readable.scraper import create_client

    with create_client() as client:
        try:
            page = read_article(client, url, user_agent)
        except ReadableError as exc:
            typer.echo(f"[read] {exc.title}: {exc.detail}", err=True)
            raise typer.Exit(1)

    if output is None:
        typer.echo(page)
    else:
        output.write_text(page, encoding="utf-8")
        typer.echo(f"[read] Wrote {len(page)} characters to {output}")


@app.command("version")
def version() -> None:
    """Print the service name and version."""
    typer.echo(settings.default_user_agent)


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
