"""Tests for the Readable CLI."""

from __future__ import annotations

import httpx
import respx
from typer.testing import CliRunner

from cli.main import app
from readable.config import settings

runner = CliRunner()


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert settings.default_user_agent in result.output


def test_read_prints_page(article_html):
    with respx.mock:
        respx.get("https://example.com/a").mock(
            return_value=httpx.Response(200, text=article_html)
        )
        result = runner.invoke(app, ["read", "https://example.com/a"])

    assert result.exit_code == 0
    assert "<title>Battery Breakthrough - Example News</title>" in result.output
    assert '<link rel="canonical" href="https://example.com/a" />' in result.output


def test_read_forwards_user_agent(article_html):
    with respx.mock:
        route = respx.get("https://example.com/a").mock(
            return_value=httpx.Response(200, text=article_html)
        )
        runner.invoke(app, ["read", "https://example.com/a", "--user-agent", "MyBot/1.0"])

    assert route.calls.last.request.headers["User-Agent"] == "MyBot/1.0"


def test_read_writes_output_file(article_html, tmp_path):
    out = tmp_path / "article.html"
    with respx.mock:
        respx.get("https://example.com/a").mock(
            return_value=httpx.Response(200, text=article_html)
        )
        result = runner.invoke(app, ["read", "https://example.com/a", "-o", str(out)])

    assert result.exit_code == 0
    assert "solid-state battery" in out.read_text(encoding="utf-8")


def test_read_invalid_url_exits_nonzero():
    result = runner.invoke(app, ["read", "not-a-url"])
    assert result.exit_code == 1
    assert "[read] Invalid URL:" in result.output


def test_read_fetch_failure_exits_nonzero():
    with respx.mock:
        respx.get("https://unreachable.example/").mock(
            side_effect=httpx.ConnectError("Name or service not known")
        )
        result = runner.invoke(app, ["read", "https://unreachable.example/"])

    assert result.exit_code == 1
    assert "Can't fetch URL" in result.output


def test_serve_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(target, **kwargs):
        calls["target"] = target
        calls.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)
    result = runner.invoke(app, ["serve", "--port", "9123"])

    assert result.exit_code == 0
    assert calls["target"] == "readable.api.app:app"
    assert calls["port"] == 9123
