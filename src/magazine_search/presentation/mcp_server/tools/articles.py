"""
Article List Tools - Search and filter the magazine corpus.

Tools:
- search_articles: Keyword search in title, summary and author
- filter_articles_by_date: Publication date range, newest first
- filter_articles_by_author: Author name, newest first
- list_recent_articles: Most recent articles

All four render through the article-list widget when it resolved, and fall
back to plain text otherwise.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Optional

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from magazine_search.application.corpus import CorpusIndex, clamp_limit
from magazine_search.application.formatting import (
    create_list_payload,
    create_search_payload,
    describe_date_range,
    format_article_list,
    format_article_url_list,
)
from magazine_search.application.widgets import ARTICLE_LIST, WidgetResolver
from magazine_search.core.exceptions import ValidationError
from magazine_search.domain.entities import Article

from ._common import READ_ONLY, WIDGET_NOTICE, ResponseFormatter, limit_note, tool_meta

logger = logging.getLogger(__name__)


def _url_list_text(headline: str, results: Sequence[Article], hint: str) -> str:
    return f"{headline}.\n\n**Quick Reference:**\n{format_article_url_list(results)}\n\n💡 **Try:** {hint}"


def register_article_tools(mcp: FastMCP, index: CorpusIndex, widgets: WidgetResolver):
    """Register the article list tools."""

    list_widget = widgets.resolve(ARTICLE_LIST.name)

    def respond(
        headline: str,
        results: Sequence[Article],
        hint: str,
        heading: str,
        limit: int,
        context: Optional[dict[str, Any]] = None,
    ) -> CallToolResult:
        if list_widget is None:
            return ResponseFormatter.text(_url_list_text(headline, results, hint))
        payload = create_list_payload(heading, results, limit=limit, context=context)
        return ResponseFormatter.widget(
            list_widget,
            f"{headline}.\n{WIDGET_NOTICE}\n💡 **Try:** {hint}",
            payload.to_structured(),
        )

    @mcp.tool(
        title="Search Unic magazine articles",
        annotations=READ_ONLY,
        meta=tool_meta(list_widget),
    )
    async def search_articles(query: str, limit: Optional[int] = None) -> CallToolResult:
        """
        Search magazine articles by keyword or phrase.

        Searches the title, the lead/summary and the author name
        (case-insensitive). Returns matching articles with their URLs
        (https://www.unic.com/en/magazine/...).

        Args:
            query: Search keyword or phrase
            limit: Maximum number of results to return (default: 10, max: 100)
        """
        effective = clamp_limit(limit)
        logger.info(f"Searching articles: query='{query}', limit={effective}")
        results = index.search(query, effective)

        if list_widget is None:
            return ResponseFormatter.text(
                f'Found {len(results)} article(s) matching "{query}":\n\n{format_article_list(results)}'
            )

        payload = create_search_payload(query, effective, results)
        text = (
            f'Found {len(results)} article(s) matching "{query}"{limit_note(effective)}.\n'
            f"{WIDGET_NOTICE}\n"
            "**Quick Reference:** display summary of search results as a whole.\n"
            "💡 **Try:** display summary of an article."
        )
        return ResponseFormatter.widget(list_widget, text, payload.to_structured())

    @mcp.tool(
        title="Filter articles by date",
        annotations=READ_ONLY,
        meta=tool_meta(list_widget),
    )
    async def filter_articles_by_date(
        startDate: Optional[str] = None,  # noqa: N803
        endDate: Optional[str] = None,  # noqa: N803
        limit: Optional[int] = None,
    ) -> CallToolResult:
        """
        Filter magazine articles by publication date range.

        Bounds are inclusive; either may be omitted. Returns articles sorted
        by date (newest first) with their URLs.

        Args:
            startDate: Start date in ISO format (YYYY-MM-DD), optional
            endDate: End date in ISO format (YYYY-MM-DD), optional
            limit: Maximum number of results to return (default: 10, max: 100)
        """
        effective = clamp_limit(limit)
        logger.info(f"Filtering by date: {startDate!r}..{endDate!r}, limit={effective}")
        try:
            results = index.filter_by_date_range(startDate, endDate, effective)
        except ValidationError as e:
            raise ResponseFormatter.error(e, "filter_articles_by_date") from e

        date_context = describe_date_range(startDate, endDate)
        context = {k: v for k, v in (("startDate", startDate), ("endDate", endDate)) if v}
        return respond(
            f"Found {len(results)} article(s) {date_context}{limit_note(effective)}",
            results,
            "Search by keyword or filter by specific author.",
            f"Articles {date_context}",
            effective,
            context,
        )

    @mcp.tool(
        title="Filter articles by author",
        annotations=READ_ONLY,
        meta=tool_meta(list_widget),
    )
    async def filter_articles_by_author(
        authorName: str,  # noqa: N803
        limit: Optional[int] = None,
    ) -> CallToolResult:
        """
        Find magazine articles written by a specific author.

        Partial, case-insensitive names match. Results are newest first.

        Args:
            authorName: Author name or partial name to search for
            limit: Maximum number of results to return (default: 10, max: 100)
        """
        effective = clamp_limit(limit)
        logger.info(f"Filtering by author: '{authorName}', limit={effective}")
        results = index.filter_by_author(authorName, effective)
        return respond(
            f'Found {len(results)} article(s) by "{authorName}"{limit_note(effective)}',
            results,
            "Filter by date range or search for specific topics.",
            f'Articles by "{authorName}"',
            effective,
            {"authorName": authorName},
        )

    @mcp.tool(
        title="List recent articles",
        annotations=READ_ONLY,
        meta=tool_meta(list_widget),
    )
    async def list_recent_articles(limit: Optional[int] = None) -> CallToolResult:
        """
        List the most recently published magazine articles.

        Args:
            limit: Maximum number of articles to return (default: 10, max: 100)
        """
        effective = clamp_limit(limit)
        results = index.list_recent(effective)
        return respond(
            f"Showing {len(results)} most recent article(s)"
            f"{limit_note(effective, ' (limit: {limit})')}",
            results,
            "Search by keyword, filter by author, or specify a date range.",
            "Most recent articles",
            effective,
        )

    logger.info(
        f"Registered article tools (widget {'enabled' if list_widget else 'unavailable'})"
    )
