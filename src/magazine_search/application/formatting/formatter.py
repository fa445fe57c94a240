"""
Response Formatter - plain text and widget payloads for article results.

Both output paths consume the derived Article fields (author_name, url,
hero), so the text rendering and the widget rendering always agree.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, timezone
from typing import Any

from magazine_search.domain.entities import Article

from .payloads import ArticleListPayload, ArticlePreviewPayload, WidgetArticle

NO_ARTICLES = "No articles found."
NO_SUMMARY = "No summary available."


# ============================================================================
# Date helpers
# ============================================================================


def _utc(moment: datetime) -> datetime:
    return moment.astimezone(timezone.utc)


def iso_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision, e.g. 2024-01-01T00:00:00.000Z."""
    return _utc(moment).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def format_long_date(moment: datetime) -> str:
    """'January 5, 2024'"""
    moment = _utc(moment)
    return f"{moment:%B} {moment.day}, {moment.year}"


def format_short_date(moment: datetime) -> str:
    """'Jan 5, 2024'"""
    moment = _utc(moment)
    return f"{moment:%b} {moment.day}, {moment.year}"


def format_month_year(moment: datetime) -> str:
    """'Jan 2024'"""
    moment = _utc(moment)
    return f"{moment:%b} {moment.year}"


# ============================================================================
# Plain text
# ============================================================================


def format_article_preview(article: Article) -> str:
    """Single rich block with title, date, author, link and lead."""
    return (
        f"**{article.title}**\n\n"
        f"📅 Published: {format_long_date(article.published_at)}\n"
        f"✍️ Author: {article.author_name}\n"
        f"🔗 Read full article: {article.url}\n\n"
        f"{article.lead or NO_SUMMARY}"
    )


def format_article_list(articles: Sequence[Article]) -> str:
    """Numbered list with date, author and link per article."""
    if not articles:
        return NO_ARTICLES

    entries = []
    for i, article in enumerate(articles, 1):
        entries.append(
            f"{i}. **{article.title}**\n"
            f"   📅 {format_short_date(article.published_at)} | ✍️ {article.author_name}\n"
            f"   🔗 Read more: {article.url}"
        )
    return "\n\n".join(entries)


def format_article_url_list(articles: Sequence[Article]) -> str:
    """Compact one-line-per-article list with URLs."""
    if not articles:
        return NO_ARTICLES

    return "\n".join(
        f"{i}. {article.title} ({format_month_year(article.published_at)}) - {article.url}"
        for i, article in enumerate(articles, 1)
    )


def describe_date_range(start: str | None, end: str | None) -> str:
    """Human phrase for a date filter."""
    if start and end:
        return f"between {start} and {end}"
    if start:
        return f"from {start} onwards"
    if end:
        return f"until {end}"
    return "from all time"


# ============================================================================
# Widget payloads
# ============================================================================


def to_widget_article(article: Article) -> WidgetArticle:
    """Map an article to the widget record."""
    return WidgetArticle(
        id=article.slug,
        slug=article.slug,
        title=article.title,
        lead=article.lead or "",
        author=article.author_name,
        publication_date=iso_timestamp(article.published_at),
        url=article.url,
        hero_url=article.hero.url,
        hero_alt=article.hero.alt,
    )


def create_list_payload(
    heading: str,
    articles: Sequence[Article],
    *,
    limit: int,
    context: dict[str, Any] | None = None,
    now: datetime | None = None,
) -> ArticleListPayload:
    """Build the article-list widget payload."""
    widget_articles = [to_widget_article(a) for a in articles]
    return ArticleListPayload(
        heading=heading,
        articles=widget_articles,
        summary=f"Found {len(articles)} article(s) (limit {limit}).",
        total=len(widget_articles),
        generated_at=iso_timestamp(now or datetime.now(timezone.utc)),
        context={
            **(context or {}),
            "limit": limit,
            "totalMatches": len(articles),
            "widgetArticles": len(widget_articles),
        },
    )


def create_search_payload(
    query: str,
    limit: int,
    articles: Sequence[Article],
    *,
    now: datetime | None = None,
) -> ArticleListPayload:
    """Article-list payload for a keyword search."""
    return create_list_payload(
        f'Results for "{query}"',
        articles,
        limit=limit,
        context={"query": query},
        now=now,
    )


def create_preview_payload(
    article: Article,
    *,
    now: datetime | None = None,
) -> ArticlePreviewPayload:
    """Article-preview widget payload."""
    return ArticlePreviewPayload(
        heading="Article Preview",
        article=to_widget_article(article),
        generated_at=iso_timestamp(now or datetime.now(timezone.utc)),
    )
