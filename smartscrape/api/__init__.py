"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from smartscrape.api import app

    uvicorn smartscrape.api:app --reload
"""

from smartscrape.api.app import app

__all__ = ["app"]
