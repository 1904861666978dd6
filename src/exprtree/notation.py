"""Rendering of expression trees in prefix, infix and postfix notation.

The ``*_tokens`` functions return one token per literal, variable, operator
and parenthesis, so their output can be fed back to the parsers. The string
forms join those tokens without separators.
"""

from .frontend.ast_expressions import (
    BinaryExpression,
    Expression,
    IntegerLiteral,
    Variable,
)


def prefix_tokens(expr: Expression) -> list[str]:
    if isinstance(expr, BinaryExpression):
        return [expr.op, *prefix_tokens(expr.left), *prefix_tokens(expr.right)]
    return [_leaf_token(expr)]


def infix_tokens(expr: Expression) -> list[str]:
    if isinstance(expr, BinaryExpression):
        return ["(", *infix_tokens(expr.left), expr.op, *infix_tokens(expr.right), ")"]
    return [_leaf_token(expr)]


def postfix_tokens(expr: Expression) -> list[str]:
    if isinstance(expr, BinaryExpression):
        return [*postfix_tokens(expr.left), *postfix_tokens(expr.right), expr.op]
    return [_leaf_token(expr)]


def to_prefix(expr: Expression) -> str:
    return "".join(prefix_tokens(expr))


def to_infix(expr: Expression) -> str:
    return "".join(infix_tokens(expr))


def to_postfix(expr: Expression) -> str:
    return "".join(postfix_tokens(expr))


def variables(expr: Expression) -> list[str]:
    """Names of the variables used in ``expr``, deduplicated and sorted."""
    return sorted(_collect_variables(expr))


def _collect_variables(expr: Expression) -> set[str]:
    if isinstance(expr, Variable):
        return {expr.name}
    if isinstance(expr, BinaryExpression):
        return _collect_variables(expr.left) | _collect_variables(expr.right)
    return set()


def _leaf_token(expr: Expression) -> str:
    if isinstance(expr, IntegerLiteral):
        return str(expr.value)
    if isinstance(expr, Variable):
        return expr.name
    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")
