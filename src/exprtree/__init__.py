from .frontend.ast_expressions import (
    BinaryExpression,
    Difference,
    Expression,
    IntegerLiteral,
    Product,
    Quotient,
    Sum,
    Variable,
    equals,
    make_expression,
)
from .frontend.lexer import tokenize
from .frontend.parser import ParseError, parse_infix, parse_postfix
from .graph import draw_expression, to_graph
from .notation import (
    infix_tokens,
    postfix_tokens,
    prefix_tokens,
    to_infix,
    to_postfix,
    to_prefix,
    variables,
)
from .runtime.core import (
    DivisionByZero,
    EvaluationError,
    RuntimeContext,
    SimplificationError,
    UnboundVariable,
)
from .runtime.expression_evaluator import evaluate
from .runtime.simplifier import simplify

__all__ = [
    "BinaryExpression",
    "Difference",
    "DivisionByZero",
    "EvaluationError",
    "Expression",
    "IntegerLiteral",
    "ParseError",
    "Product",
    "Quotient",
    "RuntimeContext",
    "SimplificationError",
    "Sum",
    "UnboundVariable",
    "Variable",
    "draw_expression",
    "equals",
    "evaluate",
    "infix_tokens",
    "make_expression",
    "parse_infix",
    "parse_postfix",
    "postfix_tokens",
    "prefix_tokens",
    "simplify",
    "to_graph",
    "to_infix",
    "to_postfix",
    "to_prefix",
    "tokenize",
    "variables",
]
