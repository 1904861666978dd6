import re
from typing import Sequence

from ..runtime.core import RuntimeContext
from .ast_expressions import (
    OPERATORS,
    Expression,
    IntegerLiteral,
    Variable,
    make_expression,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

_precedence: dict[str, int] = {
    "*": 3,
    "/": 3,
    "+": 2,
    "-": 2,
    "(": 1,
    ")": 0,
}


class ParseError(ValueError):
    """Raised when a token sequence does not describe a single expression."""


def parse_postfix(
    tokens: Sequence[str], context: RuntimeContext | None = None
) -> Expression:
    context = context or RuntimeContext()
    _require_tokens(tokens)

    operands: list[Expression] = []
    for token in tokens:
        if token in OPERATORS:
            _reduce(token, operands, context)
        else:
            operands.append(_operand(token))

    return _single_result(operands)


def parse_infix(
    tokens: Sequence[str], context: RuntimeContext | None = None
) -> Expression:
    context = context or RuntimeContext()
    _require_tokens(tokens)

    operators: list[str] = []
    operands: list[Expression] = []
    for token in tokens:
        if token in OPERATORS:
            while operators and _precedence[operators[-1]] >= _precedence[token]:
                _reduce(operators.pop(), operands, context)
            operators.append(token)
        elif token == "(":
            operators.append(token)
        elif token == ")":
            while operators and operators[-1] != "(":
                _reduce(operators.pop(), operands, context)
            if not operators:
                raise ParseError("unmatched ')'")
            operators.pop()
        elif _is_infix_operand(token):
            operands.append(_operand(token))
        else:
            raise ParseError(f"unexpected token {token!r}")

    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ParseError("unmatched '('")
        _reduce(operator, operands, context)

    return _single_result(operands)


def _require_tokens(tokens: Sequence[str]) -> None:
    if not tokens:
        raise ParseError("empty expression")


def _is_infix_operand(token: str) -> bool:
    if token[:1].isalpha():
        return True
    # a leading minus on a longer token is a negative literal, not subtraction
    return bool(_INTEGER_RE.fullmatch(token)) and not token.startswith("+")


def _operand(token: str) -> Expression:
    if token[:1].isalpha():
        return Variable(token)
    if not _INTEGER_RE.fullmatch(token):
        raise ParseError(f"invalid integer literal {token!r}")
    return IntegerLiteral(int(token))


def _reduce(operator: str, operands: list[Expression], context: RuntimeContext) -> None:
    if len(operands) < 2:
        raise ParseError(f"operator {operator!r} is missing an operand")
    right = operands.pop()
    left = operands.pop()
    expression = make_expression(left, right, operator)
    context.writer.debugln(f"[reduce {left} {operator} {right} => {expression}]")
    operands.append(expression)


def _single_result(operands: list[Expression]) -> Expression:
    if len(operands) != 1:
        raise ParseError(
            f"expected a single expression, found {len(operands)} operands"
        )
    return operands[0]
