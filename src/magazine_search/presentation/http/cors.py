"""
CORS policy for the MCP endpoint.

Development: echo the request origin (or "*").
Production: echo the origin when it is allow-listed, otherwise answer with
the first allow-listed origin so the browser rejects the response.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_ALLOWED_ORIGINS = ("https://chatgpt.com", "https://chat.openai.com")
SESSION_HEADER = "Mcp-Session-Id"
PREFLIGHT_METHODS = "POST, GET, DELETE, OPTIONS"
DEFAULT_PREFLIGHT_HEADERS = "content-type, mcp-session-id"


@dataclass(frozen=True)
class CorsPolicy:
    production: bool = False
    allowed_origins: tuple[str, ...] = ()

    @property
    def effective_origins(self) -> tuple[str, ...]:
        return self.allowed_origins or DEFAULT_ALLOWED_ORIGINS

    def allow_origin(self, origin: str | None) -> str:
        """Value for Access-Control-Allow-Origin."""
        if not self.production:
            return origin or "*"
        origins = self.effective_origins
        if origin and origin in origins:
            return origin
        return origins[0]

    def headers(self, origin: str | None, *, expose_session: bool = True) -> dict[str, str]:
        """Headers applied to every MCP response."""
        allowed = self.allow_origin(origin)
        headers = {
            "Access-Control-Allow-Origin": allowed,
            "Vary": "Origin",
        }
        if allowed != "*":
            headers["Access-Control-Allow-Credentials"] = "true"
        if expose_session:
            headers["Access-Control-Expose-Headers"] = SESSION_HEADER
        return headers

    def preflight_headers(self, origin: str | None, requested_headers: str | None) -> dict[str, str]:
        """Headers for a 204 OPTIONS response."""
        headers = self.headers(origin)
        headers["Access-Control-Allow-Methods"] = PREFLIGHT_METHODS
        headers["Access-Control-Allow-Headers"] = requested_headers or DEFAULT_PREFLIGHT_HEADERS
        return headers
