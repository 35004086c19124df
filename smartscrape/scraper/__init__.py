"""Scraper package: relay fetch, boilerplate removal and block extraction."""

from smartscrape.scraper.assembler import build_article, render_plain_text, scrape
from smartscrape.scraper.errors import RelayExhaustedError, ScrapeError
from smartscrape.scraper.fetcher import DEFAULT_RELAYS, Relay, active_relays, fetch_html
from smartscrape.scraper.models import (
    BlockKind,
    ContentBlock,
    NoteBlock,
    PageMetadata,
    RelayFailure,
    ScrapedArticle,
)
from smartscrape.scraper.notes import to_note_blocks
from smartscrape.scraper.urls import extract_domain, is_valid_url

__all__ = [
    "scrape",
    "build_article",
    "render_plain_text",
    "fetch_html",
    "active_relays",
    "Relay",
    "DEFAULT_RELAYS",
    "is_valid_url",
    "extract_domain",
    "to_note_blocks",
    "BlockKind",
    "ContentBlock",
    "NoteBlock",
    "PageMetadata",
    "RelayFailure",
    "ScrapedArticle",
    "ScrapeError",
    "RelayExhaustedError",
]
