"""Centralised settings for the smartscrape pipeline.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).

Every threshold below is a strict "greater than" bound: a paragraph is kept
only when its text is *longer* than ``min_paragraph_length``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)

_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/122.0.0.0 Safari/537.36"
)


def _env_list(name: str, default: str) -> List[str]:
    raw = os.environ.get(name, default)
    return [part.strip() for part in raw.split(",") if part.strip()]


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Relay fetcher
    # ------------------------------------------------------------------
    relay_timeout: float = field(
        default_factory=lambda: float(os.environ.get("SCRAPER_RELAY_TIMEOUT", "15.0"))
    )
    # Empty list means "every enabled relay, in table order".
    relays: List[str] = field(
        default_factory=lambda: _env_list("SCRAPER_RELAYS", "")
    )
    user_agent: str = field(
        default_factory=lambda: os.environ.get("SCRAPER_USER_AGENT", _DEFAULT_USER_AGENT)
    )
    min_html_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_HTML_LENGTH", "500"))
    )
    block_markers: List[str] = field(
        default_factory=lambda: _env_list(
            "SCRAPER_BLOCK_MARKERS", "captcha,blocked,access denied"
        )
    )

    # ------------------------------------------------------------------
    # Boilerplate stripper
    # ------------------------------------------------------------------
    min_container_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_CONTAINER_LENGTH", "200"))
    )

    # ------------------------------------------------------------------
    # Block decomposer
    # ------------------------------------------------------------------
    min_heading_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_HEADING_LENGTH", "2"))
    )
    min_paragraph_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_PARAGRAPH_LENGTH", "30"))
    )
    min_list_item_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_LIST_ITEM_LENGTH", "5"))
    )
    min_quote_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_MIN_QUOTE_LENGTH", "10"))
    )
    document_order: bool = field(
        default_factory=lambda: _env_bool("SCRAPER_DOCUMENT_ORDER", False)
    )

    # ------------------------------------------------------------------
    # Assembler fallbacks
    # ------------------------------------------------------------------
    plain_text_limit: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_PLAIN_TEXT_LIMIT", "5000"))
    )
    body_text_limit: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_BODY_TEXT_LIMIT", "3000"))
    )
    thin_content_length: int = field(
        default_factory=lambda: int(os.environ.get("SCRAPER_THIN_CONTENT_LENGTH", "100"))
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("SCRAPER_LOG_LEVEL", "INFO").upper()
    )


# Module-level singleton, import this everywhere:
#   from smartscrape.config import settings
settings = Settings()
