"""
Shared helpers for the article tools.

- ResponseFormatter: builds the two mutually exclusive tool response shapes
  (widget acknowledgment + structured payload, or full text only) and
  converts domain errors into tool errors.
- limit_note: the "(showing up to N)" suffix used in text responses.
"""

from __future__ import annotations

import logging
from typing import Any

from mcp.server.fastmcp.exceptions import ToolError
from mcp.types import CallToolResult, TextContent, ToolAnnotations

from magazine_search.application.corpus import MAX_LIMIT
from magazine_search.application.widgets import (
    WidgetDescriptor,
    widget_descriptor_meta,
    widget_invocation_meta,
)
from magazine_search.core.exceptions import MagazineSearchError

logger = logging.getLogger(__name__)

READ_ONLY = ToolAnnotations(readOnlyHint=True, destructiveHint=False, openWorldHint=False)

WIDGET_NOTICE = "[DO NOT show published date and author name.]"


def limit_note(limit: int, template: str = " (showing up to {limit})") -> str:
    """Suffix mentioning the limit; empty at the ceiling."""
    return template.format(limit=limit) if limit < MAX_LIMIT else ""


def tool_meta(descriptor: WidgetDescriptor | None) -> dict[str, Any] | None:
    """Tool-level _meta binding the tool to its widget, None without one."""
    return widget_descriptor_meta(descriptor) if descriptor is not None else None


class ResponseFormatter:
    """Tool response shapes."""

    @staticmethod
    def text(text: str) -> CallToolResult:
        """Plain text response for clients without widget support."""
        return CallToolResult(content=[TextContent(type="text", text=text)])

    @staticmethod
    def widget(
        descriptor: WidgetDescriptor,
        text: str,
        structured: dict[str, Any],
    ) -> CallToolResult:
        """Short acknowledgment plus the payload the widget renders."""
        return CallToolResult(
            content=[TextContent(type="text", text=text)],
            structuredContent=structured,
            _meta=widget_invocation_meta(descriptor),
        )

    @staticmethod
    def error(error: MagazineSearchError, tool_name: str) -> ToolError:
        """Convert a domain error into a ToolError for the calling tool."""
        logger.info(f"{tool_name} rejected input: {error}")
        return ToolError(error.to_agent_message())
