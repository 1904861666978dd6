import operator
from typing import Callable

from ..frontend.ast_expressions import (
    BinaryExpression,
    BinaryOp,
    Expression,
    IntegerLiteral,
    Quotient,
    Variable,
)
from .core import Assignment, DivisionByZero, RuntimeContext, UnboundVariable, truncating_div

_binary_ops: dict[BinaryOp, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": truncating_div,
}


def evaluate(
    expr: Expression, assignment: Assignment, context: RuntimeContext | None = None
) -> int:
    return eval_expr(expr, assignment, context or RuntimeContext())


def eval_expr(expr: Expression, assignment: Assignment, context: RuntimeContext) -> int:
    if isinstance(expr, IntegerLiteral):
        return expr.value

    if isinstance(expr, Variable):
        if expr.name not in assignment:
            raise UnboundVariable(expr.name)
        return assignment[expr.name]

    if isinstance(expr, BinaryExpression):
        left_value = eval_expr(expr.left, assignment, context)
        right_value = eval_expr(expr.right, assignment, context)
        if isinstance(expr, Quotient) and right_value == 0:
            raise DivisionByZero(f"division by zero in {expr}")
        result = _binary_ops[expr.op](left_value, right_value)
        context.writer.debugln(
            f"[({expr.left}) {expr.op} ({expr.right}) => {result}]"
        )
        return result

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")
