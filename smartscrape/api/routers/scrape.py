"""Scrape endpoints.

Routes
------
POST /scrape          Body: {"url": "https://..."}   → scrape
POST /scrape/notes    Body: {"url": "https://..."}   → scrape + to_note_blocks
GET  /scrape/domain   ?url=https://...               → extract_domain

Pipeline failures are part of the response body (``error``), not HTTP
errors: the caller branches on ``error`` exactly as library users do.
"""

from __future__ import annotations

from typing import Any, List, Optional

from fastapi import APIRouter, Query
from pydantic import BaseModel

from smartscrape.scraper import extract_domain, is_valid_url, scrape, to_note_blocks

router = APIRouter()


# ---------------------------------------------------------------------------
# Schemas
# ---------------------------------------------------------------------------

class ScrapeRequest(BaseModel):
    # Plain str: invalid URLs must reach the pipeline and come back as data.
    url: str


class ContentBlockOut(BaseModel):
    type: str
    text: str
    level: Optional[int] = None
    items: Optional[List[str]] = None


class ScrapeResponse(BaseModel):
    source_url: str
    title: str
    plain_text: str
    content_blocks: List[ContentBlockOut]
    author: Optional[str] = None
    published_date: Optional[str] = None
    meta_description: Optional[str] = None
    featured_image: Optional[str] = None
    error: Optional[str] = None


class NoteBlockOut(BaseModel):
    id: str
    type: str
    content: str


class NotesResponse(BaseModel):
    source_url: str
    title: str
    error: Optional[str] = None
    blocks: List[NoteBlockOut]


class DomainResponse(BaseModel):
    url: str
    domain: str
    valid: bool


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.post("", response_model=ScrapeResponse)
def scrape_endpoint(body: ScrapeRequest) -> dict[str, Any]:
    """Run the full pipeline for *url* and return the article record."""
    return scrape(body.url).to_dict()


@router.post("/notes", response_model=NotesResponse)
def scrape_notes_endpoint(body: ScrapeRequest) -> dict[str, Any]:
    """Scrape *url* and return its content as note-editor blocks."""
    article = scrape(body.url)
    return {
        "source_url": article.source_url,
        "title": article.title,
        "error": article.error,
        "blocks": [n.to_dict() for n in to_note_blocks(article.content_blocks)],
    }


@router.get("/domain", response_model=DomainResponse)
def domain_endpoint(url: str = Query(..., description="URL to inspect.")) -> dict[str, Any]:
    """Return the bare hostname of *url* and whether it is scrapeable."""
    return {"url": url, "domain": extract_domain(url), "valid": is_valid_url(url)}
