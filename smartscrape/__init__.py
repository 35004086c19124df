"""smartscrape: turn an arbitrary article URL into structured content blocks."""

from smartscrape.scraper import (
    ContentBlock,
    ScrapedArticle,
    extract_domain,
    is_valid_url,
    scrape,
    to_note_blocks,
)

__version__ = "0.1.0"

__all__ = [
    "scrape",
    "is_valid_url",
    "extract_domain",
    "to_note_blocks",
    "ContentBlock",
    "ScrapedArticle",
]
