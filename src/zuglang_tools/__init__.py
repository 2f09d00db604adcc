"""zuglang-tools: Zuglang translation and numeral tools over HTTP and MCP."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from zuglang_tools.adapters.annotations import AnnotationMapper
from zuglang_tools.adapters.errors import ErrorMapper
from zuglang_tools.adapters.schema import SchemaConverter
from zuglang_tools.calculator import Calculation, ComputeFailure, Operator, compute
from zuglang_tools.catalog import discovery_payload
from zuglang_tools.constants import ERROR_CODES
from zuglang_tools.converters.openai import OpenAIConverter
from zuglang_tools.errors import (
    DivisionByZeroError,
    EmptyInputError,
    InvalidDigitError,
    InvalidOperatorError,
    NumeralTooLongError,
    ZuglangError,
)
from zuglang_tools.numerals import decode, encode
from zuglang_tools.server.app import create_app
from zuglang_tools.server.factory import MCPServerFactory
from zuglang_tools.server.router import ExecutionRouter
from zuglang_tools.server.transport import TransportManager
from zuglang_tools.tools import TOOLS, ToolResult, select_tools
from zuglang_tools.translator import Translation, translate

__all__ = [
    # Public API
    "serve",
    "to_openai_tools",
    "create_app",
    # Core
    "decode",
    "encode",
    "compute",
    "translate",
    "discovery_payload",
    "Calculation",
    "ComputeFailure",
    "Operator",
    "Translation",
    "ToolResult",
    "TOOLS",
    # Errors
    "ZuglangError",
    "InvalidDigitError",
    "EmptyInputError",
    "DivisionByZeroError",
    "InvalidOperatorError",
    "NumeralTooLongError",
    "ERROR_CODES",
    # Server building blocks
    "MCPServerFactory",
    "ExecutionRouter",
    "TransportManager",
    # Adapters
    "AnnotationMapper",
    "SchemaConverter",
    "ErrorMapper",
    "OpenAIConverter",
]

__version__ = "0.1.0"

logger = logging.getLogger(__name__)

TRANSPORTS = ("http", "stdio", "streamable-http")


def serve(
    *,
    transport: str = "http",
    host: str = "127.0.0.1",
    port: int = 8000,
    name: str = "zuglang-tools",
    version: str | None = None,
    base_url: str | None = None,
    tools: list[str] | None = None,
    on_startup: Callable[[], None] | None = None,
    on_shutdown: Callable[[], None] | None = None,
    log_level: str | None = None,
) -> None:
    """Launch the Zuglang tools server.

    Args:
        transport: "http" (tool endpoints only), "stdio" (MCP only) or
            "streamable-http" (tool endpoints plus MCP at ``/mcp``).
        host: Host address for HTTP-based transports.
        port: Port number for HTTP-based transports.
        name: MCP server name.
        version: MCP server version. Defaults to the package version.
        base_url: Base URL advertised by the discovery route. Derived from
            each request when None.
        tools: Restrict the exposed tools to these names.
        on_startup: Optional callback invoked after setup, before transport starts.
        on_shutdown: Optional callback invoked after the transport completes.
        log_level: Set the log level for the zuglang_tools logger (e.g. "DEBUG").
    """
    if not name:
        raise ValueError("name must not be empty")
    if len(name) > 255:
        raise ValueError(f"name exceeds maximum length of 255: {len(name)}")
    mode = transport.lower()
    if mode not in TRANSPORTS:
        raise ValueError(f"Unknown transport: {transport!r}. Expected one of {', '.join(TRANSPORTS)}.")
    if tools is not None and not tools:
        raise ValueError("tools must not be empty")
    if log_level is not None:
        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level!r}")
        logging.getLogger("zuglang_tools").setLevel(level)

    descriptors = select_tools(tools)
    if not descriptors:
        raise ValueError(f"No known tools in {tools!r}. Available: {sorted(TOOLS)}")
    router = ExecutionRouter({d.name: d for d in descriptors})
    version = version or __version__

    if mode == "stdio":
        manager = TransportManager()
    else:
        manager = TransportManager(host=host, port=port)

    logger.info("Starting '%s' v%s with %d tools via %s", name, version, len(descriptors), mode)

    async def _run() -> None:
        if mode == "http":
            await manager.run_http(create_app(router, base_url=base_url))
            return
        server, init_options = MCPServerFactory(router).build(name, version)
        if mode == "stdio":
            await manager.run_stdio(server, init_options)
        else:
            await manager.run_streamable_http(server, init_options, create_app(router, base_url=base_url))

    if on_startup is not None:
        on_startup()
    try:
        asyncio.run(_run())
    finally:
        if on_shutdown is not None:
            on_shutdown()


def to_openai_tools(
    *,
    embed_annotations: bool = False,
    strict: bool = False,
    names: list[str] | None = None,
) -> list[dict]:
    """Export the Zuglang tools as OpenAI-compatible tool definitions.

    Args:
        embed_annotations: Embed annotation metadata in tool descriptions.
        strict: Add strict: true for OpenAI Structured Outputs.
        names: Only export these tools.

    Returns:
        List of OpenAI tool definition dicts, directly usable with
        openai.chat.completions.create(tools=...).
    """
    tools = OpenAIConverter().convert_tools(names, embed_annotations=embed_annotations, strict=strict)
    logger.debug("Converted %d tools to OpenAI format", len(tools))
    return tools
