"""HTML fragment → ordered :class:`ContentBlock` list.

The fragment is parsed once and then scanned by four independent passes,
each appending to the same output list:

    headings → paragraphs → lists → quotes

so by default the result is grouped by block type rather than following
document order.  Pass ``document_order=True`` (or set
``SCRAPER_DOCUMENT_ORDER``) to re-sort the same blocks by the position of
their source elements.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

from bs4 import BeautifulSoup
from bs4.element import Tag

from smartscrape.config import settings
from smartscrape.scraper.models import ContentBlock

# lxml applies the HTML5 implied-end-tag rules, so "<p>a<p>b" and
# "<li>a<li>b" come out as siblings rather than nested elements.
HTML_PARSER = "lxml"

_WHITESPACE = re.compile(r"\s+")
_HEADING_TAG = re.compile(r"^h[1-6]$")
_NON_TEXT_TAGS = ["script", "style", "noscript", "template"]

# (position of the source element, block)
_Located = Tuple[int, ContentBlock]


def normalise_whitespace(text: str) -> str:
    """Collapse every whitespace run to a single space and trim the ends."""
    return _WHITESPACE.sub(" ", text).strip()


def _parse(html: str) -> BeautifulSoup:
    soup = BeautifulSoup(html, HTML_PARSER)
    for tag in soup.find_all(_NON_TEXT_TAGS):
        if not tag.decomposed:
            tag.decompose()
    return soup


def _text(tag: Tag) -> str:
    # A space per tag boundary keeps "<b>a</b>b" from fusing into "ab".
    return normalise_whitespace(tag.get_text(" "))


def strip_tags(html: str) -> str:
    """Return the visible text of *html* with whitespace normalised.

    Script and style elements are dropped with their content; every other
    tag becomes a single space.
    """
    return _text(_parse(html))


# ---------------------------------------------------------------------------
# Extraction passes
# ---------------------------------------------------------------------------

def _heading_pass(soup: BeautifulSoup, positions: Dict[int, int]) -> List[_Located]:
    blocks = []
    for tag in soup.find_all(_HEADING_TAG):
        text = _text(tag)
        if len(text) > settings.min_heading_length:
            blocks.append((positions[id(tag)], ContentBlock.heading(int(tag.name[1]), text)))
    return blocks


def _paragraph_pass(soup: BeautifulSoup, positions: Dict[int, int]) -> List[_Located]:
    blocks = []
    for tag in soup.find_all("p"):
        text = _text(tag)
        if len(text) > settings.min_paragraph_length:
            blocks.append((positions[id(tag)], ContentBlock.paragraph(text)))
    return blocks


def _list_pass(soup: BeautifulSoup, positions: Dict[int, int]) -> List[_Located]:
    blocks = []
    for tag in soup.find_all(["ul", "ol"]):
        items = [_text(li) for li in tag.find_all("li", recursive=False)]
        items = [item for item in items if len(item) > settings.min_list_item_length]
        if not items:
            continue
        if tag.name == "ol":
            block = ContentBlock.numbered(items)
        else:
            block = ContentBlock.bullet(items)
        blocks.append((positions[id(tag)], block))
    return blocks


def _quote_pass(soup: BeautifulSoup, positions: Dict[int, int]) -> List[_Located]:
    blocks = []
    for tag in soup.find_all("blockquote"):
        text = _text(tag)
        if len(text) > settings.min_quote_length:
            blocks.append((positions[id(tag)], ContentBlock.quote(text)))
    return blocks


_PASSES = (_heading_pass, _paragraph_pass, _list_pass, _quote_pass)


def decompose(fragment: str, document_order: Optional[bool] = None) -> List[ContentBlock]:
    """Split *fragment* into typed content blocks.

    Args:
        fragment: HTML produced by
            :func:`~smartscrape.scraper.stripper.strip_boilerplate`.
        document_order: Sort blocks by source position instead of pass
            order.  ``None`` defers to ``settings.document_order``.

    Returns:
        The emitted blocks; empty when nothing passes the length thresholds.
    """
    if document_order is None:
        document_order = settings.document_order

    soup = _parse(fragment)
    positions = {id(tag): index for index, tag in enumerate(soup.find_all(True))}

    located: List[_Located] = []
    for extraction_pass in _PASSES:
        located.extend(extraction_pass(soup, positions))

    if document_order:
        located.sort(key=lambda pair: pair[0])
    return [block for _, block in located]
