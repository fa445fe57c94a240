"""
Article - Normalized Magazine Article Model

This module defines the canonical article record held in the corpus index,
and the single conversion path from a raw CMS record to it.

Raw records arrive from the CMS export with loosely typed fields:
    - author: "Jane Doe" or {"name": "Jane Doe"} or missing
    - link: canonical URL, sometimes missing
    - hero media: heroUrl/heroAlt, or keyvisual.cloudinaryAsset[0]

Each derived field has exactly one pure, total derivation function below.
Everything downstream (text formatting, widget payloads, resources) reads
the derived values from the Article, so all paths agree on what
"the same article" looks like.

Example:
    >>> article = normalize_record({
    ...     "slug": "intro-to-x",
    ...     "title": "Intro to X",
    ...     "publicationDate": "2024-01-01",
    ... })
    >>> article.author_name
    'Editorial team'
    >>> article.url
    'https://www.unic.com/en/magazine/intro-to-x'
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Union

DEFAULT_AUTHOR = "Editorial team"
ARTICLE_BASE_URL = "https://www.unic.com/en/magazine"

SLUG_PATTERN = re.compile(r"^[a-z0-9-]+$", re.IGNORECASE)

# One untyped JSON object from the corpus file
RawRecord = Mapping[str, Any]


@dataclass(frozen=True)
class HeroMedia:
    """Hero image of an article. Both fields may be absent."""

    url: str | None = None
    alt: str | None = None


@dataclass(frozen=True)
class Article:
    """
    A validated, immutable magazine article.

    Attributes:
        slug: Unique URL-safe identifier
        title: Article title (non-empty)
        publication_date: Publication date string as published by the CMS
        published_at: Parsed, timezone-aware publication timestamp
        lead: Summary paragraph (optional)
        author: Explicitly present author name, None when the CMS has none
        author_name: Display name, falls back to DEFAULT_AUTHOR
        url: Canonical article URL
        hero: Hero image URL and alt text
    """

    slug: str
    title: str
    publication_date: str
    published_at: datetime
    lead: str | None = None
    author: str | None = None
    author_name: str = DEFAULT_AUTHOR
    url: str = ""
    hero: HeroMedia = HeroMedia()

    def to_dict(self) -> dict[str, Any]:
        """Convert to the corpus JSON shape (camelCase keys)."""
        return {
            "slug": self.slug,
            "title": self.title,
            "publicationDate": self.publication_date,
            "lead": self.lead,
            "author": self.author_name,
            "link": self.url,
            "heroUrl": self.hero.url,
            "heroAlt": self.hero.alt,
        }


ArticleInput = Union[RawRecord, Article]


# ============================================================================
# Field helpers
# ============================================================================


def _clean(value: Any) -> str | None:
    """Trimmed string, or None for non-strings and blanks."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def parse_timestamp(value: Any) -> datetime | None:
    """
    Parse an ISO 8601 date or datetime string.

    Date-only values mean midnight. Naive values are taken as UTC.
    Returns None when the value cannot be parsed.
    """
    text = _clean(value)
    if text is None:
        return None
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def is_valid_slug(slug: Any) -> bool:
    """Check that a slug contains only letters, digits and hyphens."""
    return isinstance(slug, str) and bool(SLUG_PATTERN.match(slug))


# ============================================================================
# Derivations (one per field, each total)
# ============================================================================


def explicit_author(record: RawRecord) -> str | None:
    """Author name as present in the record: string author or author.name."""
    author = record.get("author")
    if isinstance(author, str):
        return _clean(author)
    if isinstance(author, Mapping):
        return _clean(author.get("name"))
    return None


def author_name(record: RawRecord) -> str:
    """Display name for the author, falling back to the editorial team."""
    return explicit_author(record) or DEFAULT_AUTHOR


def canonical_url(record: RawRecord) -> str:
    """CMS link when present, otherwise the magazine URL built from the slug."""
    link = _clean(record.get("link"))
    if link:
        return link
    slug = _clean(record.get("slug")) or ""
    return f"{ARTICLE_BASE_URL}/{slug}"


def hero_media(record: RawRecord) -> HeroMedia:
    """Explicit heroUrl/heroAlt, else the first keyvisual cloudinary asset."""
    asset: Mapping[str, Any] = {}
    keyvisual = record.get("keyvisual")
    if isinstance(keyvisual, Mapping):
        assets = keyvisual.get("cloudinaryAsset")
        if isinstance(assets, list) and assets and isinstance(assets[0], Mapping):
            asset = assets[0]

    return HeroMedia(
        url=_clean(record.get("heroUrl")) or _clean(asset.get("url")),
        alt=_clean(record.get("heroAlt")) or _clean(asset.get("alt")),
    )


# ============================================================================
# Conversion
# ============================================================================


def normalize_record(value: ArticleInput) -> Article | None:
    """
    Convert a raw record into an Article.

    An Article passes through unchanged. A mapping is validated and
    converted; records without a valid slug, a title or a parseable
    publication date yield None.
    """
    if isinstance(value, Article):
        return value
    if not isinstance(value, Mapping):
        return None

    slug = _clean(value.get("slug"))
    title = _clean(value.get("title"))
    publication_date = _clean(value.get("publicationDate"))
    if not slug or not title or not publication_date:
        return None
    if not is_valid_slug(slug):
        return None

    published_at = parse_timestamp(publication_date)
    if published_at is None:
        return None

    return Article(
        slug=slug,
        title=title,
        publication_date=publication_date,
        published_at=published_at,
        lead=_clean(value.get("lead")),
        author=explicit_author(value),
        author_name=author_name(value),
        url=canonical_url(value),
        hero=hero_media(value),
    )
