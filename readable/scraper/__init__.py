"""Scraper package — outbound fetch & readable-content extraction."""

from readable.scraper.extractor import decode_content, extract_content, serialize_content
from readable.scraper.fetcher import create_client, fetch_url
from readable.scraper.models import Extraction, FetchedPage

__all__ = [
    "create_client",
    "fetch_url",
    "extract_content",
    "serialize_content",
    "decode_content",
    "FetchedPage",
    "Extraction",
]
