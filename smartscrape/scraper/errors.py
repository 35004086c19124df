"""Exceptions raised inside the scrape pipeline.

None of these cross :func:`smartscrape.scraper.assembler.scrape`; it turns
them into the ``error`` field of a :class:`ScrapedArticle`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from smartscrape.scraper.models import RelayFailure


class ScrapeError(Exception):
    """Base exception for all pipeline errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class RelayExhaustedError(ScrapeError):
    """Every configured relay failed to return usable HTML."""

    def __init__(self, failures: List["RelayFailure"]):
        if failures:
            summary = "; ".join(f"{f.relay}: {f.reason}" for f in failures)
            message = f"All relays failed: {summary}"
        else:
            message = "All relays failed: no relays configured"
        super().__init__(message, details={"failures": [f.kind for f in failures]})
        self.failures = list(failures)
