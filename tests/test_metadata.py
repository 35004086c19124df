"""Tests for head/meta extraction and title clean-up."""

from __future__ import annotations

import pytest

from smartscrape.scraper.metadata import clean_title, extract_metadata
from smartscrape.scraper.models import PageMetadata


_FULL_HEAD = """\
<html><head>
  <title>Ignored Title | Example Site</title>
  <meta property="og:title" content="Grid Storage Explained">
  <meta name="description" content="How utilities store renewable power.">
  <meta name="author" content="Jane Doe">
  <meta property="article:published_time" content="2024-03-01T09:00:00Z">
  <meta property="og:image" content="https://example.com/hero.jpg">
</head><body><p>Body</p></body></html>
"""


class TestCleanTitle:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("Breaking News | The Daily Example", "Breaking News"),
            ("Market Update - Finance Weekly", "Market Update"),
            ("Election Night – Live", "Election Night"),
            ("Review — The Critic", "Review"),
            ("Guide: Part Two", "Guide"),
            ("No separator here", "No separator here"),
        ],
    )
    def test_strips_site_suffix(self, raw: str, expected: str) -> None:
        assert clean_title(raw) == expected

    def test_over_strips_legitimate_punctuation(self) -> None:
        # Known limitation: the first separator with no later pipe wins.
        assert clean_title("Covid-19 cases rise") == "Covid"


class TestExtractMetadata:
    def test_all_fields(self) -> None:
        assert extract_metadata(_FULL_HEAD) == PageMetadata(
            title="Grid Storage Explained",
            description="How utilities store renewable power.",
            author="Jane Doe",
            published_date="2024-03-01T09:00:00Z",
            image="https://example.com/hero.jpg",
        )

    def test_title_tag_when_no_og_title(self) -> None:
        html = "<html><head><title>Breaking News | The Daily Example</title></head></html>"
        assert extract_metadata(html).title == "Breaking News"

    def test_og_title_is_cleaned_too(self) -> None:
        html = '<head><meta property="og:title" content="Story | Site"></head>'
        assert extract_metadata(html).title == "Story"

    def test_attribute_order_and_case_do_not_matter(self) -> None:
        html = '<head><meta content="Ann Author" NAME="Author"></head>'
        assert extract_metadata(html).author == "Ann Author"

    def test_missing_values_are_none(self) -> None:
        assert extract_metadata("<html><body>nothing</body></html>") == PageMetadata()

    def test_blank_content_is_none(self) -> None:
        html = '<head><meta name="description" content="   "><title>  </title></head>'
        meta = extract_metadata(html)
        assert meta.description is None
        assert meta.title is None

    def test_title_that_cleans_to_nothing_is_none(self) -> None:
        assert extract_metadata("<title>| Site Name</title>").title is None

    def test_entities_decoded(self) -> None:
        html = "<title>Fish &amp; Chips</title>"
        assert extract_metadata(html).title == "Fish & Chips"

    def test_og_description_when_no_meta_description(self) -> None:
        html = '<head><meta property="og:description" content="Summary here."></head>'
        assert extract_metadata(html).description == "Summary here."

    def test_meta_description_preferred_over_og(self) -> None:
        html = (
            '<head><meta property="og:description" content="Open Graph summary.">'
            '<meta name="description" content="Plain summary."></head>'
        )
        assert extract_metadata(html).description == "Plain summary."
