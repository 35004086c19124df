"""Boilerplate removal: reduce a full page to the fragment holding the article.

Two strategies, tried in order:

1. **Container match**: walk :data:`CONTAINER_PATTERNS` and return the inner
   HTML of the first matching element that is longer than
   ``settings.min_container_length``.
2. **Subtractive clean-up**: when no container qualifies, delete page
   furniture (header/footer/nav/aside, scripts, comments, noise-classed
   blocks) and return whatever is left.

This is a pattern heuristic, not a content-scoring algorithm; it will
sometimes keep too much or too little.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup, Comment
from bs4.element import Tag

from smartscrape.config import settings
from smartscrape.scraper.decomposer import HTML_PARSER

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContainerPattern:
    """A CSS selector that may locate the main content container."""

    label: str
    selector: str


# ---------------------------------------------------------------------------
# Container patterns (highest priority first)
# ---------------------------------------------------------------------------
CONTAINER_PATTERNS: tuple = (
    ContainerPattern("article tag", "article"),
    ContainerPattern("entry-content class", ".entry-content"),
    ContainerPattern("article-content class", ".article-content"),
    ContainerPattern("post-content class", ".post-content"),
    ContainerPattern("content-area class", ".content-area"),
    ContainerPattern("content id", "#content"),
    ContainerPattern("main tag", "main"),
)

_FURNITURE_TAGS = ["header", "footer", "nav", "aside", "script", "style", "noscript"]

_BLOCK_TAGS = frozenset({
    "div", "section", "aside", "nav", "header", "footer", "ul", "ol",
    "form", "figure", "table", "details", "dl", "article",
})

# "ad"/"ads" only count as whole class tokens, otherwise "header" or
# "download" would match.
_NOISE_CLASS = re.compile(
    r"(?<![a-z0-9])(?:ads?|advertisement)(?![a-z0-9])"
    r"|sidebar|widget|comment|social|share|related|menu|navigation",
    re.IGNORECASE,
)


def _class_string(tag: Tag) -> str:
    classes = tag.get("class") or []
    if isinstance(classes, str):
        return classes
    return " ".join(classes)


def _is_noise_block(tag: Tag) -> bool:
    if tag.name not in _BLOCK_TAGS:
        return False
    return bool(_NOISE_CLASS.search(_class_string(tag)))


def find_main_container(html: str) -> Optional[str]:
    """Return the inner HTML of the first qualifying content container.

    Only the first element matching each pattern is considered.  Returns
    ``None`` when no pattern yields a container longer than
    ``settings.min_container_length`` characters.
    """
    soup = BeautifulSoup(html, HTML_PARSER)
    for pattern in CONTAINER_PATTERNS:
        element = soup.select_one(pattern.selector)
        if element is None:
            continue
        inner = element.decode_contents()
        if len(inner) > settings.min_container_length:
            logger.debug("Main container matched by %s (%d chars)", pattern.label, len(inner))
            return inner
        logger.debug("Skipping %s: only %d chars", pattern.label, len(inner))
    return None


def remove_boilerplate(html: str) -> str:
    """Delete navigation, scripts, comments and noise-classed blocks from *html*.

    Returns the inner HTML of what remains of ``<body>``.
    """
    soup = BeautifulSoup(html, HTML_PARSER)

    for comment in soup.find_all(string=lambda s: isinstance(s, Comment)):
        comment.extract()

    # Collect before decomposing: a decomposed parent takes its children with it.
    doomed = soup.find_all(_FURNITURE_TAGS) + soup.find_all(_is_noise_block)
    for tag in doomed:
        if not tag.decomposed:
            tag.decompose()

    # <head> holds the <title>, which must not lead the fallback text.
    if soup.body is not None:
        return soup.body.decode_contents()
    return str(soup)


def strip_boilerplate(html: str) -> str:
    """Reduce *html* to a fragment likely to contain only the article body."""
    container = find_main_container(html)
    if container is not None:
        return container
    logger.debug("No content container found; falling back to boilerplate removal")
    return remove_boilerplate(html)
