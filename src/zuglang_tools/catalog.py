"""Tool discovery payload served by the router endpoint."""

from __future__ import annotations

from typing import Any

from zuglang_tools.adapters.schema import SchemaConverter
from zuglang_tools.tools import ToolDescriptor, select_tools

_schema_converter = SchemaConverter()


def describe_tool(descriptor: ToolDescriptor, base_url: str) -> dict[str, Any]:
    return {
        "name": descriptor.name,
        "description": descriptor.description,
        "url": f"{base_url.rstrip('/')}{descriptor.path}",
        "method": descriptor.method,
        "parameters": _schema_converter.to_parameters(descriptor),
    }


def discovery_payload(base_url: str, tools: list[ToolDescriptor] | None = None) -> dict[str, Any]:
    """Build the ``{"tools": [...]}`` listing with one callable URL per tool."""
    if tools is None:
        tools = select_tools()
    return {"tools": [describe_tool(descriptor, base_url) for descriptor in tools]}
