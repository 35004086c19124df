"""Tests for the /scrape API endpoints.

``scrape`` is patched at the router so no relay is contacted; the
invalid-URL test runs the real pipeline because it never reaches the network.
"""

from __future__ import annotations

import importlib
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from smartscrape.api.app import create_app
from smartscrape.scraper.models import ContentBlock, ScrapedArticle


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def client(monkeypatch):
    """TestClient over a fresh app; logging handlers are left alone."""
    # ``smartscrape.api.app`` resolves to the re-exported FastAPI instance via
    # attribute lookup, so patch the submodule object itself.
    app_module = importlib.import_module("smartscrape.api.app")
    monkeypatch.setattr(app_module, "setup_logging", lambda level: None)
    with TestClient(create_app(), raise_server_exceptions=True) as c:
        yield c


_ARTICLE = ScrapedArticle(
    source_url="https://example.com/a",
    title="Grid Storage",
    plain_text="# Grid Storage\n\nBody text.",
    content_blocks=(
        ContentBlock.heading(1, "Grid Storage"),
        ContentBlock.paragraph("Utilities are adding batteries at record pace."),
        ContentBlock.bullet(["lithium iron phosphate", "sodium ion"]),
    ),
    author="Jane Doe",
)


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------

class TestScrapeEndpoint:
    def test_returns_article(self, client) -> None:
        with patch("smartscrape.api.routers.scrape.scrape", return_value=_ARTICLE) as mock_scrape:
            resp = client.post("/scrape", json={"url": "https://example.com/a"})

        mock_scrape.assert_called_once_with("https://example.com/a")
        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Grid Storage"
        assert data["author"] == "Jane Doe"
        assert data["error"] is None
        assert [b["type"] for b in data["content_blocks"]] == ["heading", "paragraph", "bullet"]
        assert data["content_blocks"][0]["level"] == 1
        assert data["content_blocks"][2]["items"] == ["lithium iron phosphate", "sodium ion"]

    def test_invalid_url_is_data_not_http_error(self, client) -> None:
        resp = client.post("/scrape", json={"url": "not a url"})
        assert resp.status_code == 200
        data = resp.json()
        assert data["error"] == "Invalid URL format"
        assert data["content_blocks"] == []

    def test_missing_body_field_rejected(self, client) -> None:
        resp = client.post("/scrape", json={})
        assert resp.status_code == 422


class TestNotesEndpoint:
    def test_converts_blocks(self, client) -> None:
        with patch("smartscrape.api.routers.scrape.scrape", return_value=_ARTICLE):
            resp = client.post("/scrape/notes", json={"url": "https://example.com/a"})

        assert resp.status_code == 200
        data = resp.json()
        assert data["title"] == "Grid Storage"
        assert [b["type"] for b in data["blocks"]] == ["h1", "paragraph", "bullet", "bullet"]
        assert data["blocks"][3]["content"] == "sodium ion"


class TestDomainEndpoint:
    def test_valid(self, client) -> None:
        resp = client.get("/scrape/domain", params={"url": "https://www.example.com/x"})
        assert resp.json() == {
            "url": "https://www.example.com/x", "domain": "example.com", "valid": True,
        }

    def test_invalid(self, client) -> None:
        resp = client.get("/scrape/domain", params={"url": "nope"})
        assert resp.json() == {"url": "nope", "domain": "nope", "valid": False}


def test_health(client) -> None:
    assert client.get("/health").json() == {"status": "ok"}
