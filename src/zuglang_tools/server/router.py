"""ExecutionRouter: route tool calls -> Zuglang tool handlers."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from zuglang_tools.adapters.errors import ErrorMapper
from zuglang_tools.errors import InvalidParametersError, ToolNotFoundError
from zuglang_tools.tools import TOOLS, ToolDescriptor, ToolResult

logger = logging.getLogger(__name__)


class ExecutionRouter:
    """Routes tool calls from the HTTP and MCP surfaces to tool handlers.

    ``execute`` validates the arguments against the tool's pydantic input
    model and returns the handler's tagged ``ToolResult``. ``handle_call``
    wraps that in the ``(content, is_error)`` tuple the MCP factory passes to
    ``CallToolResult``.

    Args:
        tools: Tool registry to route to. Defaults to all Zuglang tools.
    """

    def __init__(self, tools: Mapping[str, ToolDescriptor] | None = None) -> None:
        self._tools = tools if tools is not None else TOOLS
        self._error_mapper = ErrorMapper()

    @property
    def tools(self) -> Mapping[str, ToolDescriptor]:
        return self._tools

    def execute(self, tool_name: str, arguments: dict[str, Any]) -> ToolResult:
        """Validate *arguments* and run *tool_name*.

        Domain failures come back inside the ``ToolResult``; only unexpected
        exceptions from a handler propagate.
        """
        descriptor = self._tools.get(tool_name)
        if descriptor is None:
            return ToolResult.failure(tool_name, ToolNotFoundError(tool_name))

        try:
            inputs = descriptor.input_model.model_validate(arguments)
        except ValidationError as exc:
            errors = [
                {"field": ".".join(str(part) for part in err["loc"]) or "body", "message": err["msg"]}
                for err in exc.errors()
            ]
            return ToolResult.failure(tool_name, InvalidParametersError(tool_name, errors))

        result = descriptor.handler(inputs)
        if result.is_error:
            logger.debug("Tool %s failed: %s", tool_name, result.error.code)
        return result

    async def handle_call(
        self,
        tool_name: str,
        arguments: dict[str, Any],
    ) -> tuple[list[dict[str, str]], bool]:
        """Execute a tool call and format it for MCP.

        Returns:
            A ``(content, is_error)`` tuple where *content* is a list of
            ``TextContent``-compatible dicts.
        """
        logger.debug("Executing tool call: %s", tool_name)
        try:
            result = self.execute(tool_name, arguments)
        except Exception as error:
            logger.exception("Unexpected error in tool %s", tool_name)
            error_info = self._error_mapper.to_error_info(error)
            return ([{"type": "text", "text": error_info["message"]}], True)

        if result.is_error:
            error_info = self._error_mapper.to_error_info(result.error)
            return ([{"type": "text", "text": error_info["message"]}], True)

        json_output = json.dumps(result.payload, default=str)
        return ([{"type": "text", "text": json_output}], False)
