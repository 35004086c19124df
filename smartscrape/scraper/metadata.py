"""Document-level metadata: title, description, author, date, image.

Runs against the original, unstripped HTML; each value is looked up on its
own and may be missing independently of the others.
"""

from __future__ import annotations

import re
from typing import Optional

from bs4 import BeautifulSoup

from smartscrape.scraper.decomposer import HTML_PARSER, normalise_whitespace
from smartscrape.scraper.models import PageMetadata

# "Article Title | Site Name" → "Article Title".  Titles that contain one of
# these separators legitimately get cut too.
_SITE_SUFFIX = re.compile(r"\s*[|\-–—:]\s*[^|]*$")


def clean_title(title: str) -> str:
    """Strip a trailing separator-delimited site name from *title*."""
    return _SITE_SUFFIX.sub("", title, count=1).strip()


def _meta(soup: BeautifulSoup, attr: str, value: str) -> Optional[str]:
    pattern = re.compile(rf"^\s*{re.escape(value)}\s*$", re.IGNORECASE)
    tag = soup.find("meta", attrs={attr: pattern, "content": True})
    if tag is None:
        return None
    content = normalise_whitespace(tag["content"])
    return content or None


def _document_title(soup: BeautifulSoup) -> Optional[str]:
    og_title = _meta(soup, "property", "og:title")
    if og_title:
        return og_title
    if soup.title is not None:
        text = normalise_whitespace(soup.title.get_text())
        return text or None
    return None


def extract_metadata(html: str) -> PageMetadata:
    """Return the :class:`PageMetadata` found in *html*'s head."""
    soup = BeautifulSoup(html, HTML_PARSER)

    title = _document_title(soup)
    if title is not None:
        title = clean_title(title) or None

    return PageMetadata(
        title=title,
        description=(
            _meta(soup, "name", "description")
            or _meta(soup, "property", "og:description")
        ),
        author=_meta(soup, "name", "author"),
        published_date=_meta(soup, "property", "article:published_time"),
        image=_meta(soup, "property", "og:image"),
    )
