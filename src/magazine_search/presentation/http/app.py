"""
HTTP application: banner, health check and the MCP session endpoint.

Routes:
    GET  /            plain-text banner
    GET  /health      JSON status
    *    {mcp_path}   session transport (and any sub-path)
"""

from __future__ import annotations

import logging

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route

from .cors import CorsPolicy
from .state import ApplicationState
from .transport import SessionTransport

logger = logging.getLogger(__name__)

SERVICE_NAME = "magazine-search-mcp"
BANNER = "Unic.com MCP server"


def create_http_app(state: ApplicationState) -> Starlette:
    """Build the Starlette app serving the MCP endpoint for *state*."""
    settings = state.settings
    cors = CorsPolicy(production=settings.production, allowed_origins=settings.allowed_origins)
    transport = SessionTransport(state, cors)

    async def banner(request: Request) -> PlainTextResponse:
        return PlainTextResponse(BANNER)

    async def health(request: Request) -> JSONResponse:
        body: dict[str, object] = {"status": "ok", "service": SERVICE_NAME}
        if state.failed:
            body["status"] = "unavailable"
            return JSONResponse(body, status_code=503)
        if state.initialized:
            body["articles"] = len(state.index)
        return JSONResponse(body)

    routes = [
        Route("/", banner, methods=["GET"]),
        Route("/health", health, methods=["GET"]),
        Route(settings.mcp_path, transport),
        Route(f"{settings.mcp_path}/{{rest:path}}", transport),
    ]
    return Starlette(routes=routes)


def serve(state: ApplicationState) -> None:
    """Run the HTTP app with uvicorn (blocks)."""
    import uvicorn

    settings = state.settings
    app = create_http_app(state)

    logger.info(f"Unic.com MCP server listening on http://{settings.host}:{settings.port}{settings.mcp_path}")
    if state.initialized:
        logger.info(f"  Server loaded {len(state.index)} articles")
    logger.info(f"  Deployment: {settings.deployment.value}, CORS: {'production' if settings.production else 'development'}")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
        server_header=False,
    )
