"""TransportManager: HTTP / stdio / Streamable HTTP transport lifecycle."""

from __future__ import annotations

import logging
import uuid

import anyio
import uvicorn
from mcp.server.lowlevel import Server
from mcp.server.models import InitializationOptions
from mcp.server.stdio import stdio_server
from mcp.server.streamable_http import StreamableHTTPServerTransport
from starlette.applications import Starlette
from starlette.routing import Mount

logger = logging.getLogger(__name__)

MCP_PATH = "/mcp"


class TransportManager:
    """Runs the tool endpoints, the MCP server, or both, on one address.

    The address is validated once, on construction.
    """

    def __init__(self, host: str = "127.0.0.1", port: int = 8000) -> None:
        if not host:
            raise ValueError("Host must not be empty")
        if isinstance(port, bool) or not isinstance(port, int) or not 1 <= port <= 65535:
            raise ValueError(f"Port must be between 1 and 65535, got {port!r}")
        self.host = host
        self.port = port

    def _http_server(self, app: Starlette) -> uvicorn.Server:
        return uvicorn.Server(uvicorn.Config(app, host=self.host, port=self.port, log_level="info"))

    async def run_http(self, app: Starlette) -> None:
        """Serve the tool endpoints until uvicorn shuts down."""
        logger.info("Serving tool endpoints on http://%s:%d", self.host, self.port)
        await self._http_server(app).serve()

    async def run_stdio(self, server: Server, init_options: InitializationOptions) -> None:
        """Serve MCP over stdin/stdout until the client disconnects."""
        logger.info("Serving MCP over stdio")
        async with stdio_server() as (reader, writer):
            await server.run(reader, writer, init_options)

    async def run_streamable_http(
        self,
        server: Server,
        init_options: InitializationOptions,
        app: Starlette,
    ) -> None:
        """Serve the tool endpoints with MCP mounted at ``/mcp``.

        The MCP session is cancelled once uvicorn exits.
        """
        logger.info("Serving tool endpoints and MCP on http://%s:%d%s", self.host, self.port, MCP_PATH)
        transport = StreamableHTTPServerTransport(mcp_session_id=uuid.uuid4().hex)
        app.router.routes.append(Mount(MCP_PATH, app=transport.handle_request))
        http = self._http_server(app)

        async with transport.connect() as (reader, writer):
            async with anyio.create_task_group() as tg:
                tg.start_soon(server.run, reader, writer, init_options)
                await http.serve()
                tg.cancel_scope.cancel()
