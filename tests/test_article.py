"""Tests for the Article entity and record normalization."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from magazine_search.domain.entities import (
    DEFAULT_AUTHOR,
    Article,
    HeroMedia,
    author_name,
    canonical_url,
    hero_media,
    is_valid_slug,
    normalize_record,
    parse_timestamp,
)


class TestParseTimestamp:
    def test_date_only_is_midnight_utc(self):
        assert parse_timestamp("2024-01-15") == datetime(2024, 1, 15, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert parse_timestamp("2024-01-20T08:00:00Z") == datetime(
            2024, 1, 20, 8, tzinfo=timezone.utc
        )

    def test_naive_taken_as_utc(self):
        parsed = parse_timestamp("2024-01-20T08:00:00")
        assert parsed.tzinfo == timezone.utc

    def test_offset_preserved(self):
        parsed = parse_timestamp("2024-01-20T10:00:00+02:00")
        assert parsed == datetime(2024, 1, 20, 8, tzinfo=timezone.utc)

    @pytest.mark.parametrize("value", ["not-a-date", "", "   ", None, 20240101])
    def test_unparseable(self, value):
        assert parse_timestamp(value) is None


class TestDerivations:
    def test_author_string(self):
        assert author_name({"author": "  Jane  "}) == "Jane"

    def test_author_object(self):
        assert author_name({"author": {"name": "Jane"}}) == "Jane"

    def test_author_fallback(self):
        assert author_name({}) == DEFAULT_AUTHOR
        assert author_name({"author": {"name": ""}}) == DEFAULT_AUTHOR
        assert author_name({"author": 42}) == DEFAULT_AUTHOR

    def test_url_from_link(self):
        assert canonical_url({"slug": "x", "link": "https://example.com/x"}) == "https://example.com/x"

    def test_url_from_slug(self):
        assert canonical_url({"slug": "intro-to-x"}) == "https://www.unic.com/en/magazine/intro-to-x"

    def test_hero_explicit_wins(self):
        record = {
            "heroUrl": "https://img/explicit.jpg",
            "keyvisual": {"cloudinaryAsset": [{"url": "https://img/kv.jpg", "alt": "kv"}]},
        }
        assert hero_media(record) == HeroMedia(url="https://img/explicit.jpg", alt="kv")

    def test_hero_from_keyvisual(self):
        record = {"keyvisual": {"cloudinaryAsset": [{"url": "https://img/kv.jpg", "alt": "kv"}]}}
        assert hero_media(record) == HeroMedia(url="https://img/kv.jpg", alt="kv")

    def test_hero_missing(self):
        assert hero_media({"keyvisual": {"cloudinaryAsset": []}}) == HeroMedia()

    def test_slug_pattern(self):
        assert is_valid_slug("Intro-To-X-2")
        assert not is_valid_slug("bad slug")
        assert not is_valid_slug("under_score")
        assert not is_valid_slug(None)


class TestNormalizeRecord:
    def test_full_record(self, sample_records):
        article = normalize_record(sample_records[0])
        assert article.slug == "value-added-ai-solutions"
        assert article.author == "Jane Doe"
        assert article.author_name == "Jane Doe"
        assert article.hero == HeroMedia(url="https://img.example/ai.jpg", alt="AI")
        assert article.published_at == datetime(2024, 3, 10, tzinfo=timezone.utc)

    def test_article_passes_through(self, sample_articles):
        article = sample_articles[0]
        assert normalize_record(article) is article

    def test_missing_author_keeps_explicit_none(self, sample_records):
        article = normalize_record(sample_records[2])
        assert article.author is None
        assert article.author_name == DEFAULT_AUTHOR
        assert article.lead is None

    def test_trims_fields(self):
        article = normalize_record(
            {"slug": " trimmed ", "title": "  Title  ", "publicationDate": " 2024-01-01 "}
        )
        assert article.slug == "trimmed"
        assert article.title == "Title"
        assert article.publication_date == "2024-01-01"

    @pytest.mark.parametrize("index", [4, 5, 6, 7])
    def test_invalid_records_rejected(self, sample_records, index):
        assert normalize_record(sample_records[index]) is None

    def test_non_mapping_rejected(self):
        assert normalize_record(["not", "a", "record"]) is None
        assert normalize_record("slug") is None

    def test_to_dict_uses_derived_fields(self, sample_records):
        data = normalize_record(sample_records[2]).to_dict()
        assert data == {
            "slug": "design-systems",
            "title": "Why design systems matter",
            "publicationDate": "2023-11-05",
            "lead": None,
            "author": DEFAULT_AUTHOR,
            "link": "https://www.unic.com/en/magazine/design-systems",
            "heroUrl": "https://img.example/ds.jpg",
            "heroAlt": "Design",
        }

    def test_article_is_immutable(self, sample_articles):
        with pytest.raises(AttributeError):
            sample_articles[0].title = "changed"  # type: ignore[misc]
        assert isinstance(sample_articles[0], Article)
