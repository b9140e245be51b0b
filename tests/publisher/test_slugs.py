"""Tests for slug derivation."""

import pytest

from src.publisher.slugs import SLUG_PATTERN, slugify, unique_slug


class TestSlugify:
    def test_basic(self):
        assert slugify("Hello World") == "hello-world"

    def test_collapses_runs(self):
        assert slugify("AI  &  ML -- The Future!!!") == "ai-ml-the-future"

    def test_trims_hyphens(self):
        assert slugify("  ...Cloud Trends...  ") == "cloud-trends"

    def test_non_ascii_dropped(self):
        assert slugify("Café Über 2026") == "caf-ber-2026"

    def test_no_alphanumerics_gives_empty(self):
        assert slugify("¿¡—!?") == ""
        assert slugify("") == ""

    @pytest.mark.parametrize("title", [
        "Hello World",
        "10 Tips for Better UX (2026 Edition)",
        "--Leading and trailing--",
        "Mixed_CASE_with_underscores",
        "Ünïcödé Tïtle",
        "!!!",
    ])
    def test_matches_slug_pattern_or_empty(self, title):
        slug = slugify(title)
        assert slug == "" or SLUG_PATTERN.match(slug)

    def test_idempotent(self):
        once = slugify("The Future of Technology: What's Next?")
        assert slugify(once) == once


class TestUniqueSlug:
    def test_appends_timestamp(self):
        assert unique_slug("Hello World", 1767225600000) == "hello-world-1767225600000"

    def test_uses_clock_when_no_timestamp(self):
        slug = unique_slug("Hello World")
        prefix, _, ts = slug.rpartition("-")
        assert prefix == "hello-world"
        assert ts.isdigit() and len(ts) >= 13

    def test_empty_title_falls_back(self):
        assert unique_slug("???", 42) == "post-42"

    def test_same_title_same_millisecond_collides(self):
        assert unique_slug("Same Title", 1000) == unique_slug("Same Title", 1000)

    def test_same_title_different_millisecond_differs(self):
        assert unique_slug("Same Title", 1000) != unique_slug("Same Title", 1001)
