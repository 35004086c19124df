"""FastAPI application factory.

Routers
-------
    /scrape    run the pipeline, convert to note blocks, domain lookup
    /health    liveness probe

The pipeline is stateless, so there is nothing to open on startup beyond
logging.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from smartscrape import __version__
from smartscrape.config import settings
from smartscrape.log import setup_logging

from smartscrape.api.routers import scrape as scrape_router


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup."""
    setup_logging(settings.log_level)
    yield


def create_app() -> FastAPI:
    """Return a fully-configured FastAPI application instance."""
    app = FastAPI(
        title="smartscrape API",
        description=(
            "Fetches an article through a chain of CORS relays and returns "
            "its metadata, typed content blocks and a plain-text rendering."
        ),
        version=__version__,
        lifespan=lifespan,
    )

    # Allow browser frontends on any origin (tighten for production).
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(scrape_router.router, prefix="/scrape", tags=["scrape"])

    @app.get("/health", tags=["health"])
    def health() -> dict:
        return {"status": "ok"}

    return app


# Module-level instance used by uvicorn:
#   uvicorn smartscrape.api.app:app --reload
app = create_app()
