from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from ..writer import IndentingWriter

Assignment = Mapping[str, int]


@dataclass
class RuntimeContext:
    writer: IndentingWriter = field(default_factory=IndentingWriter)


class EvaluationError(Exception):
    """The expression cannot be evaluated under the given assignment."""


class UnboundVariable(EvaluationError):
    def __init__(self, name: str) -> None:
        super().__init__(f"no value assigned to variable {name!r}")
        self.name = name


class DivisionByZero(EvaluationError):
    """The divisor of a quotient evaluated to zero."""


class SimplificationError(ArithmeticError):
    """Raised when constant folding divides a literal by zero."""


def truncating_div(dividend: int, divisor: int) -> int:
    """Integer division rounding toward zero, unlike Python's ``//``."""
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        return -quotient
    return quotient
