"""Shared constants for zuglang-tools."""

from __future__ import annotations

import types

# Zuglang digits: A=0, B=1, ... J=9
DIGIT_LETTERS = "ABCDEFGHIJ"
LETTER_VALUES = types.MappingProxyType({letter: value for value, letter in enumerate(DIGIT_LETTERS)})

ERROR_CODES: dict[str, str] = {
    "INVALID_DIGIT": "INVALID_DIGIT",
    "EMPTY_INPUT": "EMPTY_INPUT",
    "NUMERAL_TOO_LONG": "NUMERAL_TOO_LONG",
    "DIVISION_BY_ZERO": "DIVISION_BY_ZERO",
    "INVALID_OPERATOR": "INVALID_OPERATOR",
    "INVALID_PARAMETERS": "INVALID_PARAMETERS",
    "INVALID_REQUEST": "INVALID_REQUEST",
    "TOOL_NOT_FOUND": "TOOL_NOT_FOUND",
    "INTERNAL_ERROR": "INTERNAL_ERROR",
}
ErrorCodes = ERROR_CODES

# Longest accepted numeral. Keeps every operand, product and decimal rendering
# under the interpreter's int-to-str digit limit.
MAX_NUMERAL_DIGITS = 2000

# Public route names. The router keeps the name it was first deployed under.
ROUTER_NAME = "zulang_tool_rooter"
API_PREFIX = "/api"

BASE_URL_ENV = "FUNCTION_BASE_URL"
