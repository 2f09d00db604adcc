"""MCPServerFactory: an MCP low-level Server over the Zuglang tools."""

from __future__ import annotations

import logging
from typing import Any

from mcp import types as mcp_types
from mcp.server.lowlevel import NotificationOptions, Server
from mcp.server.models import InitializationOptions

from zuglang_tools.adapters.annotations import AnnotationMapper
from zuglang_tools.adapters.schema import SchemaConverter
from zuglang_tools.server.router import ExecutionRouter
from zuglang_tools.tools import ToolDescriptor

logger = logging.getLogger(__name__)


class ToolCallFailed(Exception):
    """Raised from ``call_tool`` so the SDK reports ``isError: true``."""


class MCPServerFactory:
    """Builds an MCP Server that lists and calls the tools of one router.

    Args:
        router: The router whose tools are exposed. Calls go through
            ``router.handle_call``.
    """

    def __init__(self, router: ExecutionRouter) -> None:
        self._router = router
        self._schemas = SchemaConverter()
        self._annotations = AnnotationMapper()

    def tool_for(self, descriptor: ToolDescriptor) -> mcp_types.Tool:
        """Describe *descriptor* as an MCP Tool with its schema and hints."""
        hints = self._annotations.to_mcp_annotations(descriptor.hints)
        return mcp_types.Tool(
            name=descriptor.name,
            description=descriptor.description,
            inputSchema=self._schemas.convert_input_schema(descriptor),
            annotations=mcp_types.ToolAnnotations(**hints),
        )

    def listed_tools(self) -> list[mcp_types.Tool]:
        """MCP Tools for every router tool. A tool that cannot be described is left out."""
        listed: list[mcp_types.Tool] = []
        for descriptor in self._router.tools.values():
            try:
                listed.append(self.tool_for(descriptor))
            except Exception:
                logger.warning("Leaving %s out of list_tools", descriptor.name, exc_info=True)
        return listed

    def build(self, name: str, version: str) -> tuple[Server, InitializationOptions]:
        """Create the Server, register its handlers and return it with its init options."""
        server: Server = Server(name)
        tools = self.listed_tools()
        router = self._router

        @server.list_tools()
        async def list_tools() -> list[mcp_types.Tool]:
            return tools

        @server.call_tool()
        async def call_tool(tool_name: str, arguments: dict[str, Any] | None) -> list[mcp_types.TextContent]:
            content, is_error = await router.handle_call(tool_name, arguments or {})
            if is_error:
                raise ToolCallFailed(content[0]["text"])
            return [mcp_types.TextContent(type="text", text=item["text"]) for item in content]

        options = InitializationOptions(
            server_name=name,
            server_version=version,
            capabilities=server.get_capabilities(NotificationOptions(), {}),
        )
        logger.debug("MCP server %r exposes %d tools", name, len(tools))
        return server, options
