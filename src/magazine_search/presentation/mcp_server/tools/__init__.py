"""
Magazine Search MCP Tools

✅ Article lists (4), article-list widget:
- search_articles, filter_articles_by_date
- filter_articles_by_author, list_recent_articles

✅ Article preview (1), article-preview widget:
- get_article_preview

Usage:
    from .tools import register_all_tools
    register_all_tools(mcp, index, widgets)
"""

from __future__ import annotations

from mcp.server.fastmcp import FastMCP

from magazine_search.application.corpus import CorpusIndex
from magazine_search.application.widgets import WidgetResolver

from .articles import register_article_tools
from .preview import register_preview_tools


def register_all_tools(mcp: FastMCP, index: CorpusIndex, widgets: WidgetResolver):
    """Register every article tool on the given server."""
    register_article_tools(mcp, index, widgets)
    register_preview_tools(mcp, index, widgets)


__all__ = ["register_all_tools", "register_article_tools", "register_preview_tools"]
