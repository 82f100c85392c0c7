"""Readable — serve a clean, reading-friendly copy of any web article."""

__version__ = "0.1.0"
