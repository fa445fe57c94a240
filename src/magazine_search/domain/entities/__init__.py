"""Domain entities."""

from __future__ import annotations

from .article import (
    ARTICLE_BASE_URL,
    DEFAULT_AUTHOR,
    Article,
    ArticleInput,
    HeroMedia,
    RawRecord,
    author_name,
    canonical_url,
    explicit_author,
    hero_media,
    is_valid_slug,
    normalize_record,
    parse_timestamp,
)

__all__ = [
    "ARTICLE_BASE_URL",
    "DEFAULT_AUTHOR",
    "Article",
    "ArticleInput",
    "HeroMedia",
    "RawRecord",
    "author_name",
    "canonical_url",
    "explicit_author",
    "hero_media",
    "is_valid_slug",
    "normalize_record",
    "parse_timestamp",
]
