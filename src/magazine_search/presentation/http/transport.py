"""
Session Transport - Per-request MCP sessions over streamable HTTP.

Every request to the MCP path gets its own session: a fresh FastMCP server
bound to the shared state and a StreamableHTTPServerTransport in JSON
response mode. Both are torn down when the request finishes, the client
disconnects, or handling fails.

Request flow:
    OPTIONS                     -> 204 preflight
    GET without session header  -> 200 liveness text
    other than GET/POST/DELETE  -> 405
    otherwise                   -> ready-once init (503 on failure),
                                   Accept repair, session id, dispatch
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING
from uuid import uuid4

import anyio
from mcp.server.streamable_http import MCP_SESSION_ID_HEADER, StreamableHTTPServerTransport
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from magazine_search.presentation.mcp_server import create_server

from .cors import CorsPolicy

if TYPE_CHECKING:
    from mcp.server.fastmcp import FastMCP
    from starlette.types import Message, Receive, Scope, Send

    from .state import ApplicationState

logger = logging.getLogger(__name__)

MCP_METHODS = frozenset({"GET", "POST", "DELETE"})
ALLOW_HEADER = "GET, POST, DELETE, OPTIONS"

LIVENESS_TEXT = (
    "Unic.com MCP server is running. "
    "Connect via an MCP client (e.g., ChatGPT) to use the search tool."
)
UNAVAILABLE_TEXT = "Service unavailable"
INTERNAL_ERROR_TEXT = "Internal server error"

JSON_MEDIA = "application/json"
EVENT_STREAM_MEDIA = "text/event-stream"

# Visible ASCII, as accepted by the streamable HTTP transport
_SESSION_ID = re.compile(r"^[\x21-\x7E]+$")


def repair_accept(accept: str | None, method: str) -> str:
    """
    Make an Accept header acceptable to the streamable transport.

    Missing or */* becomes "application/json, text/event-stream"; the event
    stream type is always present, and POST also requires JSON.
    """
    value = (accept or "").strip()
    if not value or value == "*/*":
        return f"{JSON_MEDIA}, {EVENT_STREAM_MEDIA}"
    if EVENT_STREAM_MEDIA not in value:
        value = f"{value}, {EVENT_STREAM_MEDIA}"
    if method == "POST" and JSON_MEDIA not in value:
        value = f"{value}, {JSON_MEDIA}"
    return value


def with_headers(scope: Scope, updates: dict[str, str]) -> Scope:
    """Copy of an ASGI scope with the given headers replaced."""
    names = {name.lower().encode("latin-1") for name in updates}
    headers = [(k, v) for k, v in scope.get("headers", []) if k.lower() not in names]
    headers.extend(
        (name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in updates.items()
    )
    return {**scope, "headers": headers}


def new_session_id() -> str:
    return uuid4().hex


class McpSession:
    """
    One protocol server plus one transport, released exactly once.

    States: OPEN -> ACTIVE -> CLOSED. A second close is a no-op.
    """

    def __init__(self, state: ApplicationState, session_id: str):
        self.session_id = session_id
        self.server: FastMCP = create_server(state)
        self.transport = StreamableHTTPServerTransport(
            mcp_session_id=session_id,
            is_json_response_enabled=True,
        )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def handle(self, scope: Scope, receive: Receive, send: Send) -> None:
        """Run the server for the lifetime of one HTTP request."""
        lowlevel = self.server._mcp_server

        async def run_server(*, task_status=anyio.TASK_STATUS_IGNORED):
            async with self.transport.connect() as (read_stream, write_stream):
                task_status.started()
                await lowlevel.run(
                    read_stream,
                    write_stream,
                    lowlevel.create_initialization_options(),
                    stateless=True,
                )

        async with anyio.create_task_group() as tg:
            await tg.start(run_server)
            try:
                await self.transport.handle_request(scope, receive, send)
            finally:
                # terminating closes the streams, which ends run_server
                await self.close()

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        await self.transport.terminate()
        logger.debug(f"Session {self.session_id} closed")


class SessionTransport:
    """
    ASGI endpoint for the MCP path.

    Args:
        state: Shared application state (initialized lazily)
        cors: CORS policy applied to every response
    """

    def __init__(self, state: ApplicationState, cors: CorsPolicy):
        self.state = state
        self.cors = cors

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            return

        request = Request(scope)
        method = request.method.upper()
        origin = request.headers.get("origin")

        if method == "OPTIONS":
            headers = self.cors.preflight_headers(
                origin, request.headers.get("access-control-request-headers")
            )
            await Response(status_code=204, headers=headers)(scope, receive, send)
            return

        cors_headers = self.cors.headers(origin)

        if method not in MCP_METHODS:
            response = PlainTextResponse(
                "Method Not Allowed",
                status_code=405,
                headers={**cors_headers, "Allow": ALLOW_HEADER},
            )
            await response(scope, receive, send)
            return

        session_id = request.headers.get(MCP_SESSION_ID_HEADER)
        if method == "GET" and not session_id:
            await PlainTextResponse(LIVENESS_TEXT, headers=cors_headers)(scope, receive, send)
            return

        if session_id is not None and not _SESSION_ID.match(session_id):
            response = PlainTextResponse(
                "Bad Request: Invalid session ID", status_code=400, headers=cors_headers
            )
            await response(scope, receive, send)
            return

        try:
            await self.state.ensure_ready()
        except Exception as e:
            logger.error(f"Initialization failed, refusing request: {e}")
            response = PlainTextResponse(UNAVAILABLE_TEXT, status_code=503, headers=cors_headers)
            await response(scope, receive, send)
            return

        session_id = session_id or new_session_id()
        scope = with_headers(
            scope,
            {
                "accept": repair_accept(request.headers.get("accept"), method),
                MCP_SESSION_ID_HEADER: session_id,
            },
        )

        await self._dispatch(scope, receive, send, session_id, cors_headers)

    async def _dispatch(
        self,
        scope: Scope,
        receive: Receive,
        send: Send,
        session_id: str,
        cors_headers: dict[str, str],
    ) -> None:
        raw_cors = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in cors_headers.items()
        ]
        response_started = False

        async def send_wrapper(message: Message) -> None:
            nonlocal response_started
            if message["type"] == "http.response.start":
                response_started = True
                present = {k.lower() for k, _ in message.get("headers", [])}
                message = dict(message)
                message["headers"] = [
                    *message.get("headers", []),
                    *((k, v) for k, v in raw_cors if k not in present),
                ]
            await send(message)

        session: McpSession | None = None
        try:
            session = McpSession(self.state, session_id)
            await session.handle(scope, receive, send_wrapper)
        except Exception:
            logger.exception(f"Error handling MCP request (session {session_id})")
            if not response_started:
                response = PlainTextResponse(
                    INTERNAL_ERROR_TEXT, status_code=500, headers=cors_headers
                )
                await response(scope, receive, send)
        finally:
            if session is not None:
                await session.close()
