"""Small helpers: human-readable timestamps and outbound User-Agent selection."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Optional

from readable.config import settings

# A header value the outbound client can send verbatim: visible ASCII,
# inner spaces/tabs allowed, no leading/trailing whitespace, no CR/LF.
_HEADER_VALUE = re.compile(r"[\x21-\x7e](?:[\x20-\x7e\t]*[\x21-\x7e])?")


def format_now(now: Optional[datetime] = None) -> str:
    """Format *now* (default: the current local time) for display.

    Example: ``"Friday, December  1, 2017, 12:00:00"``.  The day of the month
    is padded with a space to two characters, never with a zero.
    """
    if now is None:
        now = datetime.now()
    return f"{now:%A, %B} {now.day:>2}, {now:%Y, %H:%M:%S}"


def is_valid_header_value(value: str) -> bool:
    """Return ``True`` if *value* can be sent as an HTTP header value."""
    return _HEADER_VALUE.fullmatch(value) is not None


def resolve_agent(header: Optional[str]) -> str:
    """Pick the User-Agent to send upstream.

    The caller's own User-Agent is forwarded when present and well-formed;
    anything else falls back to ``settings.default_user_agent``.
    """
    if header is not None and is_valid_header_value(header):
        return header
    return settings.default_user_agent
