"""Presentation layer: MCP server and HTTP transport."""
