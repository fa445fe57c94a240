"""
Corpus Index - In-memory query primitives over the article corpus.

The index is built once from the loaded articles and never mutated.
All query methods return fresh lists; nothing observable changes.

Ordering rules:
    - search / search_by_title keep corpus load order
    - date and author filters sort newest first BEFORE truncating,
      so the limit applies to the globally newest matches
    - sorting is stable: equal timestamps keep load order
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from datetime import datetime
from typing import Any

from magazine_search.core.exceptions import InvalidDateError
from magazine_search.domain.entities import Article, parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MAX_LIMIT = 100
DEFAULT_LISTED_RESOURCES = 50


def clamp_limit(limit: Any = None) -> int:
    """
    Clamp a requested limit into [1, MAX_LIMIT].

    Missing, non-numeric or non-positive limits fall back to DEFAULT_LIMIT;
    limits above the ceiling are clamped, not rejected.
    """
    if limit is None or isinstance(limit, bool):
        return DEFAULT_LIMIT
    try:
        value = int(limit)
    except (TypeError, ValueError):
        return DEFAULT_LIMIT
    if value < 1:
        return DEFAULT_LIMIT
    return min(value, MAX_LIMIT)


def parse_date_bound(value: str | None, bound: str) -> datetime | None:
    """Parse an optional date bound; raise InvalidDateError when unparseable."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    parsed = parse_timestamp(value)
    if parsed is None:
        raise InvalidDateError(value, bound=bound)
    return parsed


def _newest_first(articles: Iterable[Article]) -> list[Article]:
    # sorted() is stable, so ties keep load order
    return sorted(articles, key=lambda a: a.published_at, reverse=True)


class CorpusIndex:
    """
    Immutable article set plus a slug lookup.

    Args:
        articles: Validated articles in load order. On duplicate slugs the
            lookup keeps the last one; the sequence keeps both.
    """

    def __init__(self, articles: Iterable[Article]):
        self._articles: tuple[Article, ...] = tuple(articles)
        by_slug: dict[str, Article] = {}
        for article in self._articles:
            by_slug[article.slug] = article
        self._by_slug = by_slug

    def __len__(self) -> int:
        return len(self._articles)

    @property
    def articles(self) -> Sequence[Article]:
        """All articles in load order."""
        return self._articles

    # ── Matching ────────────────────────────────────────────────────────

    def _matching(self, predicate: Callable[[Article], bool]) -> list[Article]:
        return [article for article in self._articles if predicate(article)]

    @staticmethod
    def _contains(field_value: str | None, needle: str) -> bool:
        return bool(field_value) and needle in field_value.lower()

    # ── Queries ─────────────────────────────────────────────────────────

    def search(self, term: str, limit: Any = None) -> list[Article]:
        """
        Case-insensitive substring search in title, lead and author name.

        Results keep load order (no relevance ranking).
        """
        needle = term.lower()
        matches = self._matching(
            lambda a: self._contains(a.title, needle)
            or self._contains(a.lead, needle)
            or self._contains(a.author, needle)
        )
        return matches[: clamp_limit(limit)]

    def search_by_title(self, term: str, limit: Any = None) -> list[Article]:
        """Case-insensitive substring search restricted to the title."""
        needle = term.lower()
        matches = self._matching(lambda a: self._contains(a.title, needle))
        return matches[: clamp_limit(limit)]

    def filter_by_date_range(
        self,
        start: str | None = None,
        end: str | None = None,
        limit: Any = None,
    ) -> list[Article]:
        """
        Articles published within [start, end], newest first.

        Raises:
            InvalidDateError: If a bound is given but cannot be parsed.
        """
        start_at = parse_date_bound(start, "start date")
        end_at = parse_date_bound(end, "end date")

        def in_range(article: Article) -> bool:
            if start_at is not None and article.published_at < start_at:
                return False
            if end_at is not None and article.published_at > end_at:
                return False
            return True

        return _newest_first(self._matching(in_range))[: clamp_limit(limit)]

    def filter_by_author(self, name: str, limit: Any = None) -> list[Article]:
        """Articles whose author name contains `name`, newest first."""
        needle = name.lower()
        matches = self._matching(lambda a: self._contains(a.author, needle))
        return _newest_first(matches)[: clamp_limit(limit)]

    def list_recent(self, limit: Any = None) -> list[Article]:
        """The most recently published articles."""
        return self.filter_by_date_range(None, None, limit)

    def lookup_by_slug(self, slug: str) -> Article | None:
        """Exact slug lookup; None when absent."""
        return self._by_slug.get(slug)

    def recent_for_listing(self, limit: int | None = None) -> list[Article]:
        """Newest articles for resource listings (not bound by MAX_LIMIT)."""
        count = limit if limit and limit > 0 else DEFAULT_LISTED_RESOURCES
        return _newest_first(self._articles)[:count]
