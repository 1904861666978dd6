"""Algebraic simplification of expression trees.

Children are simplified first, then the rules of the parent operator are
applied to the simplified children:

* constant folding when both operands are literals;
* identity elimination (``x+0``, ``x-0``, ``x*1``, ``x/1``);
* zero absorption (``x*0``, ``0/x``);
* self cancellation of identical variables (``x-x``, ``x/x``).

``0-x`` simplifies to ``x``, not to its negation.
"""

from typing import Callable

from ..frontend.ast_expressions import (
    BinaryExpression,
    Difference,
    Expression,
    IntegerLiteral,
    Product,
    Quotient,
    Sum,
    Variable,
)
from ..writer import indented_output
from .core import RuntimeContext, SimplificationError, truncating_div


def simplify(expr: Expression, context: RuntimeContext | None = None) -> Expression:
    return simplify_expr(expr, context or RuntimeContext())


def simplify_expr(expr: Expression, context: RuntimeContext) -> Expression:
    if isinstance(expr, (IntegerLiteral, Variable)):
        return expr

    if isinstance(expr, BinaryExpression):
        with indented_output(context.writer):
            left = simplify_expr(expr.left, context)
            right = simplify_expr(expr.right, context)
        result = _rules[type(expr)](left, right)
        context.writer.debugln(f"[simplify {expr} => {result}]")
        return result

    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")


def _split_literal(
    left: Expression, right: Expression
) -> tuple[IntegerLiteral, Expression] | None:
    if isinstance(left, IntegerLiteral):
        return left, right
    if isinstance(right, IntegerLiteral):
        return right, left
    return None


def _simplify_sum(left: Expression, right: Expression) -> Expression:
    if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
        return IntegerLiteral(left.value + right.value)

    split = _split_literal(left, right)
    if split is not None:
        literal, other = split
        if literal.value == 0:
            return other
        return Sum(literal, other)

    return Sum(left, right)


def _simplify_difference(left: Expression, right: Expression) -> Expression:
    if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
        return IntegerLiteral(left.value - right.value)

    if isinstance(left, IntegerLiteral):
        if left.value == 0:
            return right
    elif isinstance(right, IntegerLiteral):
        if right.value == 0:
            return left
    elif isinstance(left, Variable) and left == right:
        return IntegerLiteral(0)

    return Difference(left, right)


def _simplify_product(left: Expression, right: Expression) -> Expression:
    if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
        return IntegerLiteral(left.value * right.value)

    split = _split_literal(left, right)
    if split is not None:
        literal, other = split
        if literal.value == 1:
            return other
        if literal.value == 0:
            return IntegerLiteral(0)

    return Product(left, right)


def _simplify_quotient(left: Expression, right: Expression) -> Expression:
    if isinstance(left, IntegerLiteral) and isinstance(right, IntegerLiteral):
        if right.value == 0:
            raise SimplificationError(f"division by zero in ({left}/{right})")
        return IntegerLiteral(truncating_div(left.value, right.value))

    if isinstance(left, IntegerLiteral):
        if left.value == 0:
            return IntegerLiteral(0)
    elif isinstance(right, IntegerLiteral):
        if right.value == 1:
            return left
    elif isinstance(left, Variable) and left == right:
        return IntegerLiteral(1)

    return Quotient(left, right)


_rules: dict[type[BinaryExpression], Callable[[Expression, Expression], Expression]] = {
    Sum: _simplify_sum,
    Difference: _simplify_difference,
    Product: _simplify_product,
    Quotient: _simplify_quotient,
}
