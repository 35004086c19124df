"""Article assembly: the single public entry point of the pipeline.

``scrape`` orchestrates the full pipeline from a raw URL to a
:class:`ScrapedArticle`:

    validate → fetch (relay chain) → metadata + strip → decompose → assemble

It never raises for expected failures: an invalid URL or an exhausted relay
chain comes back as a record whose ``error`` field explains what happened.
Thin pages are not errors; they degrade through successive text fallbacks.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup

from smartscrape.config import settings
from smartscrape.scraper.decomposer import HTML_PARSER, decompose, strip_tags
from smartscrape.scraper.errors import RelayExhaustedError
from smartscrape.scraper.fetcher import fetch_html
from smartscrape.scraper.metadata import extract_metadata
from smartscrape.scraper.models import (
    NO_CONTENT,
    UNTITLED,
    BlockKind,
    ContentBlock,
    ScrapedArticle,
)
from smartscrape.scraper.stripper import strip_boilerplate
from smartscrape.scraper.urls import is_valid_url

logger = logging.getLogger(__name__)

INVALID_URL = "Invalid URL format"


def render_plain_text(blocks: Iterable[ContentBlock]) -> str:
    """Flatten *blocks* into readable text, one blank line between blocks.

    Headings are prefixed with ``#`` per level; list items become ``- `` lines.
    """
    parts: List[str] = []
    for block in blocks:
        if block.kind is BlockKind.HEADING:
            parts.append(f"{'#' * block.level} {block.text}")
        elif block.is_list:
            parts.append("\n".join(f"- {item}" for item in block.items))
        else:
            parts.append(block.text)
    return "\n\n".join(parts)


def _body_text(html: str) -> str:
    body = BeautifulSoup(html, HTML_PARSER).body
    if body is None:
        return ""
    return strip_tags(body.decode_contents())[: settings.body_text_limit]


def _fallback_text(html: str, fragment: str) -> str:
    """Best available plain text when decomposition produced no blocks."""
    text = strip_tags(fragment)[: settings.plain_text_limit]
    if len(text) < settings.thin_content_length:
        body = _body_text(html)
        if len(body) > len(text):
            logger.debug("Using <body> text fallback (%d chars)", len(body))
            text = body
    return text or NO_CONTENT


def build_article(url: str, html: str, document_order: Optional[bool] = None) -> ScrapedArticle:
    """Turn already-fetched *html* into a :class:`ScrapedArticle`.  No network."""
    metadata = extract_metadata(html)
    fragment = strip_boilerplate(html)
    blocks = decompose(fragment, document_order=document_order)

    if blocks:
        plain_text = render_plain_text(blocks)
    else:
        logger.info("No content blocks found for %s; using text fallback", url)
        plain_text = _fallback_text(html, fragment)

    return ScrapedArticle(
        source_url=url,
        title=metadata.title or UNTITLED,
        plain_text=plain_text,
        content_blocks=tuple(blocks),
        author=metadata.author,
        published_date=metadata.published_date,
        meta_description=metadata.description,
        featured_image=metadata.image,
    )


def scrape(url: str, document_order: Optional[bool] = None) -> ScrapedArticle:
    """Scrape *url* into a structured article.

    Pipeline:
        1. :func:`~smartscrape.scraper.urls.is_valid_url`: reject anything
           that is not an absolute http(s) URL, before any I/O.
        2. :func:`~smartscrape.scraper.fetcher.fetch_html`: relay chain.
        3. :func:`build_article`: metadata, boilerplate removal,
           decomposition and text fallbacks.

    Returns:
        A populated article, or an error record whose ``error`` field is set.
    """
    if not is_valid_url(url):
        logger.info("Rejected invalid URL %r", url)
        return ScrapedArticle.failure(url, INVALID_URL)

    logger.info("Starting scrape for %s", url)
    try:
        html = fetch_html(url.strip())
        article = build_article(url, html, document_order=document_order)
    except RelayExhaustedError as exc:
        return ScrapedArticle.failure(url, exc.message)
    except Exception as exc:
        logger.exception("Unexpected failure while scraping %s", url)
        return ScrapedArticle.failure(url, str(exc) or exc.__class__.__name__)

    logger.info(
        "Scraped %s: %d block(s), %d chars of text",
        url, len(article.content_blocks), len(article.plain_text),
    )
    return article
