"""Tests for the article MCP tools: search, filters, recency and preview."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from mcp.server.fastmcp.exceptions import ToolError

from magazine_search.application.widgets import WidgetResolver
from magazine_search.presentation.mcp_server.tools import register_all_tools


def _capture_tools(mcp, index, widgets):
    """Capture registered tool functions and their decorator kwargs."""
    tools = {}
    options = {}

    def tool(**kwargs):
        def decorator(func):
            tools[func.__name__] = func
            options[func.__name__] = kwargs
            return func

        return decorator

    mcp.tool = tool
    register_all_tools(mcp, index, widgets)
    return tools, options


@pytest.fixture
def widget_tools(index, assets_dir):
    return _capture_tools(MagicMock(), index, WidgetResolver(assets_dir))


@pytest.fixture
def text_tools(index, temp_dir):
    return _capture_tools(MagicMock(), index, WidgetResolver(temp_dir / "missing"))


def _text(result):
    return result.content[0].text


# ============================================================
# Registration
# ============================================================


class TestRegistration:
    def test_all_tools_registered(self, widget_tools):
        tools, _ = widget_tools
        assert set(tools) == {
            "search_articles",
            "filter_articles_by_date",
            "filter_articles_by_author",
            "list_recent_articles",
            "get_article_preview",
        }

    def test_read_only_annotations(self, widget_tools):
        _, options = widget_tools
        for kwargs in options.values():
            assert kwargs["annotations"].readOnlyHint is True

    def test_widget_meta_attached(self, widget_tools):
        _, options = widget_tools
        assert options["search_articles"]["meta"]["openai/outputTemplate"] == (
            "ui://widget/article-list.html"
        )
        assert options["get_article_preview"]["meta"]["openai/widgetAccessible"] is True

    def test_no_meta_without_widget(self, text_tools):
        _, options = text_tools
        assert all(kwargs["meta"] is None for kwargs in options.values())


# ============================================================
# search_articles
# ============================================================


class TestSearchArticles:
    @pytest.mark.asyncio
    async def test_widget_response(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["search_articles"](query="AI", limit=5)
        text = _text(result)
        assert text.startswith('Found 2 article(s) matching "AI" (showing up to 5).')
        assert "DO NOT show published date and author name" in text
        assert result.structuredContent["heading"] == 'Results for "AI"'
        assert result.structuredContent["context"]["limit"] == 5
        assert result.meta == {
            "openai/toolInvocation/invoking": "Curating magazine stories",
            "openai/toolInvocation/invoked": "Article list ready",
        }

    @pytest.mark.asyncio
    async def test_text_response(self, text_tools):
        tools, _ = text_tools
        result = await tools["search_articles"](query="commerce")
        text = _text(result)
        assert text.startswith('Found 1 article(s) matching "commerce":')
        assert "1. **Commerce trends 2024**" in text
        assert result.structuredContent is None
        assert result.meta is None

    @pytest.mark.asyncio
    async def test_no_results(self, text_tools):
        tools, _ = text_tools
        result = await tools["search_articles"](query="zzzz")
        assert "No articles found." in _text(result)

    @pytest.mark.asyncio
    async def test_limit_clamped(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["search_articles"](query="a", limit=500)
        assert result.structuredContent["context"]["limit"] == 100
        assert "showing up to" not in _text(result)

    @pytest.mark.asyncio
    async def test_default_limit(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["search_articles"](query="a", limit=None)
        assert result.structuredContent["context"]["limit"] == 10


# ============================================================
# filter_articles_by_date
# ============================================================


class TestFilterByDate:
    @pytest.mark.asyncio
    async def test_text_response(self, text_tools):
        tools, _ = text_tools
        result = await tools["filter_articles_by_date"](startDate="2024-01-01", endDate="2024-02-01")
        text = _text(result)
        assert text.startswith("Found 1 article(s) between 2024-01-01 and 2024-02-01 (showing up to 10).")
        assert "**Quick Reference:**" in text
        assert "1. Commerce trends 2024 (Jan 2024) - https://www.unic.com/en/magazine/commerce-trends" in text

    @pytest.mark.asyncio
    async def test_widget_response(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["filter_articles_by_date"](startDate="2024-01-01")
        assert "from 2024-01-01 onwards" in _text(result)
        assert result.structuredContent["heading"] == "Articles from 2024-01-01 onwards"
        assert result.structuredContent["context"]["startDate"] == "2024-01-01"
        assert "endDate" not in result.structuredContent["context"]
        assert result.structuredContent["total"] == 3

    @pytest.mark.asyncio
    async def test_invalid_date_is_tool_error(self, widget_tools):
        tools, _ = widget_tools
        with pytest.raises(ToolError) as exc:
            await tools["filter_articles_by_date"](startDate="not-a-date")
        assert "Invalid start date format: not-a-date" in str(exc.value)
        assert "YYYY-MM-DD" in str(exc.value)

    @pytest.mark.asyncio
    async def test_all_time(self, text_tools):
        tools, _ = text_tools
        result = await tools["filter_articles_by_date"]()
        assert "Found 4 article(s) from all time" in _text(result)


# ============================================================
# filter_articles_by_author / list_recent_articles
# ============================================================


class TestAuthorAndRecent:
    @pytest.mark.asyncio
    async def test_author_text(self, text_tools):
        tools, _ = text_tools
        result = await tools["filter_articles_by_author"](authorName="jane", limit=1)
        text = _text(result)
        assert text.startswith('Found 1 article(s) by "jane" (showing up to 1).')
        assert "Value-added AI solutions" in text

    @pytest.mark.asyncio
    async def test_author_widget(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["filter_articles_by_author"](authorName="John")
        assert result.structuredContent["context"]["authorName"] == "John"
        assert [a["slug"] for a in result.structuredContent["articles"]] == ["commerce-trends"]

    @pytest.mark.asyncio
    async def test_author_no_match(self, text_tools):
        tools, _ = text_tools
        result = await tools["filter_articles_by_author"](authorName="Nobody")
        assert "No articles found." in _text(result)

    @pytest.mark.asyncio
    async def test_recent_text(self, text_tools):
        tools, _ = text_tools
        result = await tools["list_recent_articles"](limit=2)
        text = _text(result)
        assert text.startswith("Showing 2 most recent article(s) (limit: 2).")

    @pytest.mark.asyncio
    async def test_recent_widget_order(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["list_recent_articles"]()
        slugs = [a["slug"] for a in result.structuredContent["articles"]]
        assert slugs == [
            "value-added-ai-solutions",
            "ai-in-healthcare",
            "commerce-trends",
            "design-systems",
        ]


# ============================================================
# get_article_preview
# ============================================================


class TestArticlePreview:
    @pytest.mark.asyncio
    async def test_widget_response(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["get_article_preview"](title="design systems")
        assert "DO NOT generate additional summary" in _text(result)
        assert result.structuredContent["article"]["slug"] == "design-systems"
        assert result.meta["openai/toolInvocation/invoked"] == "Article preview ready"

    @pytest.mark.asyncio
    async def test_text_response(self, text_tools):
        tools, _ = text_tools
        result = await tools["get_article_preview"](title="Commerce")
        assert _text(result).startswith("**Commerce trends 2024**")
        assert result.structuredContent is None

    @pytest.mark.asyncio
    async def test_not_found_is_not_an_error(self, widget_tools):
        tools, _ = widget_tools
        result = await tools["get_article_preview"](title="Quantum baking")
        assert _text(result) == (
            'Article with title "Quantum baking" not found. '
            "Try using the search_articles tool first to find the correct article."
        )
        assert not result.isError
