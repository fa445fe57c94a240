"""Streamable HTTP surface: CORS, session transport, Starlette app."""

from __future__ import annotations

from .app import create_http_app, serve
from .cors import CorsPolicy
from .state import ApplicationState
from .transport import McpSession, SessionTransport

__all__ = [
    "ApplicationState",
    "CorsPolicy",
    "McpSession",
    "SessionTransport",
    "create_http_app",
    "serve",
]
