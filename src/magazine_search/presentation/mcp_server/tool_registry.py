"""
Tool Registry - Central place for MCP tool and resource registration

Usage:
    from .tool_registry import register_all_mcp_tools, list_registered_tools

    # Register everything on a server
    register_all_mcp_tools(mcp, index, widgets)

    # Query defined tools
    tools = list_registered_tools()
"""

from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from magazine_search.application.corpus import DEFAULT_LISTED_RESOURCES, CorpusIndex
from magazine_search.application.widgets import WidgetResolver

logger = logging.getLogger(__name__)


# ============================================================================
# Tool Categories
# ============================================================================

TOOL_CATEGORIES = {
    "search": {
        "name": "Search",
        "description": "Keyword search across titles, summaries and authors",
        "tools": ["search_articles"],
    },
    "filter": {
        "name": "Filters",
        "description": "Date range, author and recency listings",
        "tools": [
            "filter_articles_by_date",
            "filter_articles_by_author",
            "list_recent_articles",
        ],
    },
    "preview": {
        "name": "Preview",
        "description": "Single article preview",
        "tools": ["get_article_preview"],
    },
}


# ============================================================================
# Registration Functions
# ============================================================================


def register_all_mcp_tools(
    mcp: FastMCP,
    index: CorpusIndex,
    widgets: WidgetResolver,
    max_listed_resources: int = DEFAULT_LISTED_RESOURCES,
) -> dict[str, int]:
    """
    Register all MCP tools and resources.

    Args:
        mcp: FastMCP server instance
        index: Loaded corpus index
        widgets: Widget resolver (already resolved or resolved on demand)
        max_listed_resources: Number of newest articles listed as resources

    Returns:
        Dict with category names and counts
    """
    from .resources import register_resources
    from .tools import register_all_tools

    stats = {}

    logger.debug("Registering article tools...")
    register_all_tools(mcp, index, widgets)
    stats["tools"] = sum(len(cat["tools"]) for cat in TOOL_CATEGORIES.values())

    logger.debug("Registering resources...")
    register_resources(mcp, index, widgets, max_listed_resources)
    stats["listed_articles"] = min(len(index), max_listed_resources)

    return stats


def list_registered_tools() -> dict[str, list[str]]:
    """
    List every defined tool, grouped by category.

    Returns:
        Dict with category ids as keys and tool lists as values
    """
    return {cat_id: cat_info["tools"] for cat_id, cat_info in TOOL_CATEGORIES.items()}


def get_tool_info(tool_name: str) -> dict[str, str] | None:
    """
    Category information for a tool, or None if not defined.
    """
    for cat_id, cat_info in TOOL_CATEGORIES.items():
        if tool_name in cat_info["tools"]:
            return {
                "name": tool_name,
                "category": cat_info["name"],
                "category_id": cat_id,
                "category_description": cat_info["description"],
            }
    return None


def get_tools_by_category(category_id: str) -> list[str]:
    """Tools of one category, or an empty list for an unknown category."""
    if category_id in TOOL_CATEGORIES:
        return TOOL_CATEGORIES[category_id]["tools"]
    return []


# ============================================================================
# Validation Functions
# ============================================================================


def validate_tool_registry(mcp: FastMCP) -> dict[str, object]:
    """
    Check that TOOL_CATEGORIES and the tools registered on `mcp` agree.

    Returns:
        Dict with defined, registered, missing, extra and valid
    """
    defined_tools = set()
    for cat_info in TOOL_CATEGORIES.values():
        defined_tools.update(cat_info["tools"])

    try:
        registered_tools = set(mcp._tool_manager._tools.keys())
    except AttributeError:
        logger.warning("Cannot access registered tools from FastMCP instance")
        return {
            "defined": sorted(defined_tools),
            "registered": [],
            "missing": [],
            "extra": [],
            "valid": False,
            "error": "Cannot access FastMCP tools registry",
        }

    missing = defined_tools - registered_tools
    extra = registered_tools - defined_tools

    if missing:
        logger.warning(f"Tools defined but not registered: {missing}")
    if extra:
        logger.info(f"Tools registered but not in TOOL_CATEGORIES: {extra}")

    return {
        "defined": sorted(defined_tools),
        "registered": sorted(registered_tools),
        "missing": sorted(missing),
        "extra": sorted(extra),
        "valid": not missing and not extra,
    }


def check_tool_registration(mcp: FastMCP, raise_on_error: bool = False) -> bool:
    """
    Production check that every tool is registered.

    Args:
        mcp: FastMCP server instance
        raise_on_error: Raise RuntimeError instead of returning False
    """
    result = validate_tool_registry(mcp)

    if not result["valid"]:
        msg = f"Tool registry validation failed. Missing: {result['missing']}, Extra: {result['extra']}"
        if raise_on_error:
            raise RuntimeError(msg)
        logger.error(msg)
        return False

    return True


__all__ = [
    "TOOL_CATEGORIES",
    "check_tool_registration",
    "get_tool_info",
    "get_tools_by_category",
    "list_registered_tools",
    "register_all_mcp_tools",
    "validate_tool_registry",
]
