"""Centralised settings for the Readable service.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

from readable import __version__

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Identity (baked in, not configurable)
    # ------------------------------------------------------------------
    service_name: str = "Readable"
    version: str = __version__

    @property
    def default_user_agent(self) -> str:
        """User-Agent sent upstream when the caller did not supply a usable one."""
        return f"{self.service_name}/{self.version}"

    # ------------------------------------------------------------------
    # Outbound fetch
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("READABLE_REQUEST_TIMEOUT", "30.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("READABLE_MAX_REDIRECTS", "10"))
    )

    # ------------------------------------------------------------------
    # Server
    # ------------------------------------------------------------------
    host: str = field(
        default_factory=lambda: os.environ.get("READABLE_HOST", "127.0.0.1")
    )
    port: int = field(
        default_factory=lambda: int(os.environ.get("READABLE_PORT", "8000"))
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("READABLE_LOG_LEVEL", "INFO")
    )

    # ------------------------------------------------------------------
    # Static assets
    # ------------------------------------------------------------------
    static_dir: Path = field(
        default_factory=lambda: Path(
            os.environ.get("READABLE_STATIC_DIR", Path(__file__).resolve().parent / "static")
        )
    )

    @property
    def template_path(self) -> Path:
        """HTML template every page (success or error) is rendered into."""
        return self.static_dir / "template.html"

    @property
    def index_path(self) -> Path:
        """Body of the landing page."""
        return self.static_dir / "index.html"

    @property
    def fonts_dir(self) -> Path:
        return self.static_dir / "fonts"


# Module-level singleton — import this everywhere:
#   from readable.config import settings
settings = Settings()
