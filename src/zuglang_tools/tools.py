"""The Zuglang tools: input models, handlers and the tool registry."""

from __future__ import annotations

import types
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, Field, StrictInt

from zuglang_tools.calculator import OPERATOR_SYMBOLS, compute
from zuglang_tools.errors import ZuglangError
from zuglang_tools.numerals import decode, encode
from zuglang_tools.translator import translate

TRANSLATOR = "zuglang_translator"
CALCULATOR = "zuglang_calculator"
TO_DECIMAL = "zuglang_to_decimal"
TO_ZUGLANG = "decimal_to_zuglang"


@dataclass(frozen=True)
class ToolHints:
    """Behaviour hints advertised to MCP and OpenAI clients."""

    readonly: bool = False
    destructive: bool = False
    idempotent: bool = False
    open_world: bool = True


@dataclass(frozen=True)
class ToolResult:
    """Tagged outcome of a tool call: exactly one of payload or error is set."""

    tool: str
    payload: dict[str, Any] | None = None
    error: ZuglangError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, tool: str, payload: dict[str, Any]) -> ToolResult:
        return cls(tool=tool, payload=payload)

    @classmethod
    def failure(cls, tool: str, error: ZuglangError) -> ToolResult:
        return cls(tool=tool, error=error)


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    input_model: type[BaseModel]
    handler: Callable[[Any], ToolResult]
    method: str = "POST"
    hints: ToolHints = field(default_factory=ToolHints)

    @property
    def path(self) -> str:
        return f"/{self.name}"


# ---------------------------------------------------------------------------
# Input models
# ---------------------------------------------------------------------------


class TranslatorInput(BaseModel):
    expression: str = Field(..., min_length=1, description="The Zuglang expression to translate")


class CalculatorInput(BaseModel):
    expression1: str = Field(..., description="The first Zuglang expression")
    expression2: str = Field(..., description="The second Zuglang expression")
    # Not a Literal: an unknown operator must reach compute() and come back
    # as INVALID_OPERATOR rather than a generic validation error.
    operator: str = Field(
        ...,
        description="The operator to apply",
        json_schema_extra={"enum": OPERATOR_SYMBOLS},
    )


class ToDecimalInput(BaseModel):
    expression: str = Field(..., description="The Zuglang number to convert, optionally with a leading '-'")


class ToZuglangInput(BaseModel):
    # Strict: JSON true, "12" and 12.0 are not integers.
    number: StrictInt = Field(..., description="The decimal integer to convert")


# ---------------------------------------------------------------------------
# Handlers
# ---------------------------------------------------------------------------


def run_translator(inputs: TranslatorInput) -> ToolResult:
    translation = translate(inputs.expression)
    return ToolResult.success(TRANSLATOR, {"result": translation.text, "found": translation.found})


def run_calculator(inputs: CalculatorInput) -> ToolResult:
    outcome = compute(inputs.expression1, inputs.expression2, inputs.operator)
    if not outcome.ok:
        return ToolResult.failure(CALCULATOR, outcome.error)
    return ToolResult.success(CALCULATOR, {"result": outcome.summary, "calculation": outcome.to_dict()})


def run_to_decimal(inputs: ToDecimalInput) -> ToolResult:
    try:
        value = decode(inputs.expression, signed=True)
    except ZuglangError as error:
        return ToolResult.failure(TO_DECIMAL, error)
    return ToolResult.success(TO_DECIMAL, {"result": value})


def run_to_zuglang(inputs: ToZuglangInput) -> ToolResult:
    return ToolResult.success(TO_ZUGLANG, {"result": encode(inputs.number)})


_PURE = ToolHints(readonly=True, idempotent=True, open_world=False)

TOOLS: Mapping[str, ToolDescriptor] = types.MappingProxyType(
    {
        TRANSLATOR: ToolDescriptor(
            name=TRANSLATOR,
            description="Translates a Zuglang expression to natural language",
            input_model=TranslatorInput,
            handler=run_translator,
            hints=_PURE,
        ),
        CALCULATOR: ToolDescriptor(
            name=CALCULATOR,
            description="Performs a calculation on two Zuglang expressions",
            input_model=CalculatorInput,
            handler=run_calculator,
            hints=_PURE,
        ),
        TO_DECIMAL: ToolDescriptor(
            name=TO_DECIMAL,
            description="Converts a Zuglang number (letters A-J) to a decimal integer",
            input_model=ToDecimalInput,
            handler=run_to_decimal,
            hints=_PURE,
        ),
        TO_ZUGLANG: ToolDescriptor(
            name=TO_ZUGLANG,
            description="Converts a decimal integer to a Zuglang number (letters A-J)",
            input_model=ToZuglangInput,
            handler=run_to_zuglang,
            hints=_PURE,
        ),
    }
)


def select_tools(names: list[str] | None = None) -> list[ToolDescriptor]:
    """Return descriptors in registry order, optionally restricted to *names*.

    Unknown names are ignored.
    """
    if names is None:
        return list(TOOLS.values())
    wanted = set(names)
    return [descriptor for name, descriptor in TOOLS.items() if name in wanted]
