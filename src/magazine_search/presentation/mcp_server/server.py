"""
Magazine Search MCP Server

Model Context Protocol server for the Unic magazine article corpus.

Features:
- Keyword search, date and author filters, recency listing
- Single article preview
- Widget rendering (article list and article preview) with text fallback
- Article documents as resources (blog://article/{slug})

Architecture:
- instructions.py: SERVER_INSTRUCTIONS for AI agents
- tool_registry.py: Centralized tool and resource registration
- tools/: Tool implementations
- presentation/http: Session transport that builds one server per request
"""

from __future__ import annotations

import logging
import sys
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import TYPE_CHECKING, Any

from mcp.server.fastmcp import FastMCP

from .instructions import SERVER_INSTRUCTIONS
from .tool_registry import register_all_mcp_tools

if TYPE_CHECKING:
    from collections.abc import AsyncIterator, Callable

    from magazine_search.presentation.http.state import ApplicationState

logger = logging.getLogger(__name__)

SERVER_NAME = "unic-article-server"


def _make_lifespan(
    state: ApplicationState,
) -> Callable[[FastMCP[Any]], AbstractAsyncContextManager[ApplicationState]]:
    """Create a FastMCP lifespan handler bound to *state*."""

    @asynccontextmanager
    async def _lifespan(server: FastMCP[Any]) -> AsyncIterator[ApplicationState]:
        logger.debug("Session server started")
        try:
            yield state
        finally:
            logger.debug("Session server stopped")

    return _lifespan


def create_server(state: ApplicationState, name: str = SERVER_NAME) -> FastMCP:
    """
    Create an MCP server bound to the shared corpus and widgets.

    The state must be initialized; the session transport guarantees this
    before it builds a server.

    Args:
        state: Initialized application state
        name: Server name

    Returns:
        Configured FastMCP server instance.
    """
    mcp = FastMCP(
        name,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=_make_lifespan(state),
    )

    stats = register_all_mcp_tools(
        mcp=mcp,
        index=state.index,
        widgets=state.widgets,
        max_listed_resources=state.settings.max_listed_resources,
    )
    logger.debug(f"Tool registration complete: {stats}")

    return mcp


def main():
    """Run the HTTP server with settings from the environment."""
    from magazine_search.core.exceptions import CorpusLoadError
    from magazine_search.infrastructure import Settings
    from magazine_search.presentation.http import ApplicationState, serve

    settings = Settings.from_env()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    state = ApplicationState(settings)
    try:
        state.initialize()
    except CorpusLoadError as e:
        logger.critical(f"{e}")
        sys.exit(1)

    serve(state)


if __name__ == "__main__":
    main()
