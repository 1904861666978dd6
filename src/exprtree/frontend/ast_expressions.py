from dataclasses import dataclass
from typing import ClassVar, Literal as TypingLiteral

BinaryOp = TypingLiteral["+", "-", "*", "/"]

OPERATORS: tuple[BinaryOp, ...] = ("+", "-", "*", "/")


class Expression:
    pass


@dataclass(frozen=True, slots=True, eq=False)
class IntegerLiteral(Expression):
    value: int

    def __eq__(self, other: object) -> bool:
        return isinstance(other, IntegerLiteral) and other.value == self.value

    def __hash__(self) -> int:
        return hash((IntegerLiteral, self.value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True, eq=False)
class Variable(Expression):
    name: str

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Variable) and other.name == self.name

    def __hash__(self) -> int:
        return hash((Variable, self.name))

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True, eq=False)
class BinaryExpression(Expression):
    """An operator applied to two operands.

    Equality is structural. Operators flagged ``commutative`` also compare
    equal with their operands swapped, so ``a+b == b+a`` but ``a-b != b-a``.
    """

    op: ClassVar[BinaryOp]
    commutative: ClassVar[bool] = False

    left: Expression
    right: Expression

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return False
        assert isinstance(other, BinaryExpression)

        if self.left == other.left and self.right == other.right:
            return True
        return self.commutative and (
            self.left == other.right and self.right == other.left
        )

    def __hash__(self) -> int:
        if self.commutative:
            return hash((type(self), frozenset((hash(self.left), hash(self.right)))))
        return hash((type(self), self.left, self.right))

    def __str__(self) -> str:
        return f"({self.left}{self.op}{self.right})"


@dataclass(frozen=True, slots=True, eq=False)
class Sum(BinaryExpression):
    op: ClassVar[BinaryOp] = "+"
    commutative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True, eq=False)
class Difference(BinaryExpression):
    op: ClassVar[BinaryOp] = "-"


@dataclass(frozen=True, slots=True, eq=False)
class Product(BinaryExpression):
    op: ClassVar[BinaryOp] = "*"
    commutative: ClassVar[bool] = True


@dataclass(frozen=True, slots=True, eq=False)
class Quotient(BinaryExpression):
    op: ClassVar[BinaryOp] = "/"


_binary_classes: dict[str, type[BinaryExpression]] = {
    "+": Sum,
    "-": Difference,
    "*": Product,
    "/": Quotient,
}


def make_expression(left: Expression, right: Expression, op: str) -> BinaryExpression:
    try:
        expression_class = _binary_classes[op]
    except KeyError:
        raise ValueError(f"Unsupported operator: {op!r}") from None
    return expression_class(left, right)


def equals(a: Expression, b: Expression) -> bool:
    """Structural equality, treating ``+`` and ``*`` as commutative."""
    return a == b
