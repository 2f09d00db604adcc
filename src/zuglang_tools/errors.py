"""Error hierarchy for zuglang-tools.

Every error carries a stable ``code`` (see ``constants.ERROR_CODES``), a
human-readable ``message`` and a ``details`` dict. ``ErrorMapper`` relies on
these three attributes to build transport responses.
"""

from __future__ import annotations

from typing import Any

from zuglang_tools.constants import ErrorCodes


class ZuglangError(Exception):
    """Base error for all zuglang-tools failures."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class InvalidDigitError(ZuglangError):
    """A numeral-string contains a character outside A-J."""

    def __init__(self, char: str, position: int | None = None) -> None:
        details: dict[str, Any] = {"char": char}
        if position is not None:
            details["position"] = position
        super().__init__(
            code=ErrorCodes["INVALID_DIGIT"],
            message=f"Invalid Zuglang digit: {char}",
            details=details,
        )
        self.char = char
        self.position = position


class EmptyInputError(ZuglangError):
    """A numeral-string has no digits."""

    def __init__(self, numeral: str = "") -> None:
        super().__init__(
            code=ErrorCodes["EMPTY_INPUT"],
            message="Zuglang number must not be empty",
            details={"input": numeral},
        )


class NumeralTooLongError(ZuglangError):
    """A numeral-string has more digits than the decoder accepts."""

    def __init__(self, length: int, limit: int) -> None:
        super().__init__(
            code=ErrorCodes["NUMERAL_TOO_LONG"],
            message=f"Zuglang number has {length} digits, at most {limit} are supported",
            details={"length": length, "limit": limit},
        )


class DivisionByZeroError(ZuglangError):
    """The divisor of ``/`` decoded to zero."""

    def __init__(self, dividend: int) -> None:
        super().__init__(
            code=ErrorCodes["DIVISION_BY_ZERO"],
            message="Zuglang has not defined Division by zero",
            details={"dividend": dividend},
        )


class InvalidOperatorError(ZuglangError):
    """The operator is not one of + - * /."""

    def __init__(self, operator: str, allowed: list[str]) -> None:
        super().__init__(
            code=ErrorCodes["INVALID_OPERATOR"],
            message=f"Invalid operator. Must be one of: {', '.join(allowed)}",
            details={"operator": operator, "allowed": allowed},
        )
        self.operator = operator


class InvalidParametersError(ZuglangError):
    """Tool arguments failed validation against the tool's input model."""

    def __init__(self, tool: str, errors: list[dict[str, str]]) -> None:
        super().__init__(
            code=ErrorCodes["INVALID_PARAMETERS"],
            message=f"Invalid parameters for {tool}",
            details={"errors": errors},
        )


class InvalidRequestError(ZuglangError):
    """The HTTP request body could not be used (not JSON, not an object)."""

    def __init__(self, message: str = "Request body must be a JSON object") -> None:
        super().__init__(code=ErrorCodes["INVALID_REQUEST"], message=message)


class ToolNotFoundError(ZuglangError):
    """No tool is registered under the requested name."""

    def __init__(self, tool: str) -> None:
        super().__init__(
            code=ErrorCodes["TOOL_NOT_FOUND"],
            message=f"Tool not found: {tool}",
            details={"tool": tool},
        )
