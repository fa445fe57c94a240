"""
Magazine Search MCP Server

Usage as standalone server (streamable HTTP on PORT, default 8001):
    python -m magazine_search.presentation.mcp_server

Usage for integration:
    from magazine_search.presentation.mcp_server import create_server, register_all_tools

    # Option 1: One server bound to an initialized state
    server = create_server(state)

    # Option 2: Register tools on an existing server
    register_all_tools(your_mcp_server, index, widgets)
"""

from __future__ import annotations

from .server import create_server, main
from .tools import register_all_tools

__all__ = ["create_server", "main", "register_all_tools"]
