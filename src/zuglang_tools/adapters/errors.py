"""ErrorMapper: zuglang-tools errors → HTTP / MCP error responses."""

from __future__ import annotations

from typing import Any

from zuglang_tools.constants import ErrorCodes
from zuglang_tools.errors import ZuglangError

INTERNAL_MESSAGE = "Internal error occurred"


class ErrorMapper:
    """Maps exceptions to error payloads and HTTP status codes.

    A ``ZuglangError`` keeps its code, message and details. Any other
    exception becomes ``INTERNAL_ERROR`` with a fixed message, so exception
    text never reaches a client.
    """

    _STATUS_CODES = {
        ErrorCodes["INVALID_DIGIT"]: 422,
        ErrorCodes["EMPTY_INPUT"]: 422,
        ErrorCodes["NUMERAL_TOO_LONG"]: 422,
        ErrorCodes["DIVISION_BY_ZERO"]: 422,
        ErrorCodes["INVALID_OPERATOR"]: 400,
        ErrorCodes["INVALID_PARAMETERS"]: 400,
        ErrorCodes["INVALID_REQUEST"]: 400,
        ErrorCodes["TOOL_NOT_FOUND"]: 404,
        ErrorCodes["INTERNAL_ERROR"]: 500,
    }

    def to_error_info(self, error: Exception) -> dict[str, Any]:
        """``{"error_type", "message", "details"}`` for *error*.

        Field-level validation failures are folded into the message as
        ``"field: message; field: message"``.
        """
        if not isinstance(error, ZuglangError):
            return {"error_type": ErrorCodes["INTERNAL_ERROR"], "message": INTERNAL_MESSAGE, "details": None}

        message = error.message
        if error.code == ErrorCodes["INVALID_PARAMETERS"]:
            fields = "; ".join(f"{e['field']}: {e['message']}" for e in error.details.get("errors", []))
            if fields:
                message = f"{message}: {fields}"
        return {"error_type": error.code, "message": message, "details": error.details or None}

    def status_code(self, error: Exception) -> int:
        """HTTP status code for *error*; 500 for anything unrecognised."""
        if isinstance(error, ZuglangError):
            return self._STATUS_CODES.get(error.code, 500)
        return 500

    def to_http_body(self, tool: str | None, error: Exception) -> dict[str, Any]:
        """JSON body for an HTTP error response.

        The human-readable message stays under ``error`` so that clients of
        the original endpoints keep working.
        """
        info = self.to_error_info(error)
        body: dict[str, Any] = {} if tool is None else {"tool": tool}
        body["error"] = info["message"]
        body["error_type"] = info["error_type"]
        if info["details"]:
            body["details"] = info["details"]
        return body
