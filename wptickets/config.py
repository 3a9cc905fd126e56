"""Centralised settings for wptickets.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).  The defaults match the
public WordPress.org forums, so nothing needs to be configured.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (two levels up from this file)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Target site
    # ------------------------------------------------------------------
    base_url: str = field(
        default_factory=lambda: os.environ.get(
            "WPTICKETS_BASE_URL", "https://wordpress.org"
        ).rstrip("/")
    )

    # ------------------------------------------------------------------
    # Scraper
    # ------------------------------------------------------------------
    request_timeout: float = field(
        default_factory=lambda: float(os.environ.get("WPTICKETS_REQUEST_TIMEOUT", "5.0"))
    )

    # ------------------------------------------------------------------
    # Report
    # ------------------------------------------------------------------
    default_pages: int = field(
        default_factory=lambda: int(os.environ.get("WPTICKETS_DEFAULT_PAGES", "10"))
    )


# Module-level singleton — import this everywhere:
#   from wptickets.config import settings
settings = Settings()
