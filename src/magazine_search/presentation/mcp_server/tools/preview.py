"""
Article Preview Tool - One article, rendered as a rich preview.

Tools:
- get_article_preview: Find an article by (partial) title and preview it
"""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP
from mcp.types import CallToolResult

from magazine_search.application.corpus import CorpusIndex
from magazine_search.application.formatting import create_preview_payload, format_article_preview
from magazine_search.application.widgets import ARTICLE_PREVIEW, WidgetResolver

from ._common import READ_ONLY, ResponseFormatter, tool_meta

logger = logging.getLogger(__name__)

PREVIEW_NOTICE = (
    "[Widget displayed above contains complete article preview - "
    "DO NOT generate additional summary or repeat any article content below]"
)


def register_preview_tools(mcp: FastMCP, index: CorpusIndex, widgets: WidgetResolver):
    """Register the article preview tool."""

    preview_widget = widgets.resolve(ARTICLE_PREVIEW.name)

    @mcp.tool(
        title="Get article preview",
        annotations=READ_ONLY,
        meta=tool_meta(preview_widget),
    )
    async def get_article_preview(title: str) -> CallToolResult:
        """
        Get a detailed summary or preview of a specific article by its title.

        Use this whenever a user asks for a summary, preview or details of a
        specific article. The first article whose title contains the given
        text is shown.

        Args:
            title: Article title or phrase to search for, e.g. "AI solutions"
        """
        matches = index.search_by_title(title, 1)
        if not matches:
            logger.info(f"Article preview: no title matching '{title}'")
            return ResponseFormatter.text(
                f'Article with title "{title}" not found. '
                "Try using the search_articles tool first to find the correct article."
            )

        article = matches[0]
        if preview_widget is None:
            return ResponseFormatter.text(format_article_preview(article))

        payload = create_preview_payload(article)
        return ResponseFormatter.widget(preview_widget, PREVIEW_NOTICE, payload.to_structured())
