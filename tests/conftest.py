"""Shared fixtures: a realistic article page, a pooled outbound client and a
response whose body cannot be decoded."""

from __future__ import annotations

import httpx
import pytest

from readable.scraper import create_client

ARTICLE_HTML = """\
<!DOCTYPE html>
<html>
<head>
  <title>Battery Breakthrough - Example News</title>
  <meta property="og:title" content="Battery Breakthrough" />
</head>
<body>
  <nav class="menu">
    <a href="/">Home</a> <a href="/world">World</a> <a href="/tech">Tech</a>
  </nav>
  <div id="sidebar">
    <a href="/offers">Sponsored: limited time offers</a>
  </div>
  <article>
    <h1>Battery Breakthrough</h1>
    <p>Researchers announced on Tuesday that a new solid-state battery design
    could store twice as much energy as the cells in today's electric cars,
    while charging in a fraction of the time.</p>
    <p>The team, based in a small university laboratory, spent six years
    refining the electrolyte, testing hundreds of ceramic compounds, and
    publishing their results in a peer-reviewed journal this week.</p>
    <p>Industry analysts cautioned that manufacturing at scale remains the
    hardest problem, noting that earlier promising chemistries stalled
    between the laboratory bench and the factory floor.</p>
    <p>Still, the researchers say pilot production could begin within three
    years, and several carmakers have already asked for samples, according
    to <a href="/related/battery-history">our earlier coverage</a> of the field.</p>
  </article>
  <footer class="footer">Copyright Example News</footer>
</body>
</html>
"""


@pytest.fixture()
def article_html() -> str:
    return ARTICLE_HTML


@pytest.fixture()
def client():
    """An outbound ``httpx.Client`` configured like the service's own."""
    with create_client() as c:
        yield c


class _RawBytes(httpx.SyncByteStream):
    """Response body handed to the client undecoded, whatever its headers claim."""

    def __init__(self, data: bytes) -> None:
        self._data = data

    def __iter__(self):
        yield self._data


@pytest.fixture()
def broken_gzip_response() -> httpx.Response:
    """A 200 that announces gzip but carries plain bytes, so reading it fails."""
    return httpx.Response(
        200,
        headers={"Content-Encoding": "gzip"},
        stream=_RawBytes(b"this is not gzip data"),
    )
