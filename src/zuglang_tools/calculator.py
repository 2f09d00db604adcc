"""Arithmetic over Zuglang numerals.

``compute`` never raises for bad input. It returns either a ``Calculation``
or a ``ComputeFailure`` carrying the typed error, and callers branch on
``result.ok``.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, ClassVar, Union

from zuglang_tools.errors import DivisionByZeroError, InvalidOperatorError, ZuglangError
from zuglang_tools.numerals import decode, encode


class Operator(str, enum.Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def parse(cls, symbol: str | Operator) -> Operator:
        """Return the Operator for *symbol*, or raise InvalidOperatorError."""
        if isinstance(symbol, cls):
            return symbol
        try:
            return cls(symbol)
        except ValueError:
            raise InvalidOperatorError(str(symbol), allowed=OPERATOR_SYMBOLS) from None

    def apply(self, left: int, right: int) -> int:
        if self is Operator.ADD:
            return left + right
        if self is Operator.SUBTRACT:
            return left - right
        if self is Operator.MULTIPLY:
            return left * right
        if right == 0:
            raise DivisionByZeroError(left)
        # Floor division, matching integer division on non-negative operands.
        return left // right


OPERATOR_SYMBOLS: list[str] = [op.value for op in Operator]


@dataclass(frozen=True)
class Calculation:
    """A successful calculation in both notations."""

    ok: ClassVar[bool] = True

    operand1: str
    operand2: str
    operator: Operator
    encoded_result: str
    decimal_operand1: int
    decimal_operand2: int
    decimal_result: int

    @property
    def summary(self) -> str:
        """Human-readable summary, e.g. ``BC + CF = DH (12 + 25 = 37 in decimal)``."""
        op = self.operator.value
        return (
            f"{self.operand1} {op} {self.operand2} = {self.encoded_result} "
            f"({self.decimal_operand1} {op} {self.decimal_operand2} = {self.decimal_result} in decimal)"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "operand1": self.operand1,
            "operand2": self.operand2,
            "operator": self.operator.value,
            "encoded_result": self.encoded_result,
            "decimal_operand1": self.decimal_operand1,
            "decimal_operand2": self.decimal_operand2,
            "decimal_result": self.decimal_result,
        }


@dataclass(frozen=True)
class ComputeFailure:
    """A calculation that could not be carried out."""

    ok: ClassVar[bool] = False

    error: ZuglangError

    @property
    def code(self) -> str:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.message


ComputeResult = Union[Calculation, ComputeFailure]


def compute(operand1: str, operand2: str, operator: str | Operator) -> ComputeResult:
    """Apply *operator* to two Zuglang numerals.

    The operator is checked before the operands, and the first operand is
    decoded before the second, so the reported failure is always the
    earliest one.

    Args:
        operand1: Left numeral-string.
        operand2: Right numeral-string.
        operator: One of ``+``, ``-``, ``*``, ``/``.

    Returns:
        A ``Calculation`` on success. A ``ComputeFailure`` wrapping
        ``InvalidOperatorError``, ``InvalidDigitError``, ``EmptyInputError``
        or ``DivisionByZeroError`` otherwise.
    """
    try:
        op = Operator.parse(operator)
        left = decode(operand1)
        right = decode(operand2)
        result = op.apply(left, right)
    except ZuglangError as error:
        return ComputeFailure(error)

    return Calculation(
        operand1=operand1,
        operand2=operand2,
        operator=op,
        encoded_result=encode(result),
        decimal_operand1=left,
        decimal_operand2=right,
        decimal_result=result,
    )
