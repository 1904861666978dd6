from functools import lru_cache
from importlib.resources import files
from typing import Any, cast

from lark import Lark, Token, Tree
from lark.exceptions import LarkError

from .parser import ParseError

_OPERAND_TYPES = ("NUMBER", "NAME", "RPAR")


def _load_grammar_text() -> str:
    grammar_file = files("exprtree.frontend").joinpath("tokens.lark")
    return grammar_file.read_text(encoding="utf-8")


@lru_cache(maxsize=1)
def get_lexer() -> Lark:
    grammar = _load_grammar_text()
    return Lark(grammar, start="start", parser="lalr", lexer="basic")


def lex(text: str) -> list[Token]:
    lexer: Any = get_lexer()
    try:
        tree = cast(Tree[Token], lexer.parse(text))
    except LarkError as error:
        raise ParseError(f"invalid expression text: {error}") from error
    return [child for child in tree.children if isinstance(child, Token)]


def tokenize(text: str) -> list[str]:
    """Split expression text into the tokens the parsers consume.

    A ``-`` glued to the digits after it becomes a negative literal unless it
    follows an operand, so ``3-5`` is a subtraction and ``3 * -5`` is not.
    """
    tokens = lex(text)
    result: list[str] = []
    previous: Token | None = None
    index = 0
    while index < len(tokens):
        token = tokens[index]
        following = tokens[index + 1] if index + 1 < len(tokens) else None
        if (
            token == "-"
            and following is not None
            and following.type == "NUMBER"
            and following.start_pos == token.end_pos
            and (previous is None or previous.type not in _OPERAND_TYPES)
        ):
            result.append(f"-{following}")
            previous = following
            index += 2
            continue

        result.append(str(token))
        previous = token
        index += 1
    return result
