import pytest

from exprtree import (
    Difference,
    IntegerLiteral,
    Product,
    Quotient,
    Sum,
    Variable,
    equals,
    make_expression,
    parse_infix,
    tokenize,
)

a = Variable("a")
b = Variable("b")
two = IntegerLiteral(2)


# ===== Leaves =====
def test_leaves_compare_by_value() -> None:
    assert equals(IntegerLiteral(3), IntegerLiteral(3))
    assert not equals(IntegerLiteral(3), IntegerLiteral(4))
    assert equals(Variable("x"), Variable("x"))
    assert not equals(Variable("x"), Variable("y"))


def test_different_variants_are_never_equal() -> None:
    assert not equals(IntegerLiteral(3), Variable("x"))
    assert not equals(Sum(a, b), Product(a, b))
    assert not equals(Difference(a, b), Quotient(a, b))


def test_expression_is_not_equal_to_plain_values() -> None:
    assert IntegerLiteral(3) != 3
    assert Variable("x") != "x"


# ===== Commutativity =====
def test_sum_and_product_are_commutative() -> None:
    assert equals(Sum(a, b), Sum(b, a))
    assert equals(Product(a, two), Product(two, a))


def test_difference_and_quotient_are_positional() -> None:
    assert not equals(Difference(a, b), Difference(b, a))
    assert not equals(Quotient(a, b), Quotient(b, a))
    assert equals(Difference(a, a), Difference(a, a))


def test_commutativity_applies_in_nested_trees() -> None:
    left = parse_infix(tokenize("x * 2 + y"))
    right = parse_infix(tokenize("y + 2 * x"))

    assert left == right


def test_commutative_equal_expressions_hash_equally() -> None:
    assert hash(Sum(a, b)) == hash(Sum(b, a))
    assert len({Product(a, two), Product(two, a), Difference(a, two)}) == 2


# ===== Construction =====
@pytest.mark.parametrize(
    ("op", "expected_type"),
    [("+", Sum), ("-", Difference), ("*", Product), ("/", Quotient)],
)
def test_make_expression_picks_the_operator_class(op: str, expected_type: type) -> None:
    expression = make_expression(a, b, op)

    assert type(expression) is expected_type
    assert expression.left == a
    assert expression.right == b
    assert expression.op == op


def test_make_expression_rejects_unknown_operator() -> None:
    with pytest.raises(ValueError, match="Unsupported operator"):
        make_expression(a, b, "%")


def test_expressions_are_immutable() -> None:
    expression = Sum(a, b)

    with pytest.raises(AttributeError):
        expression.left = two  # type: ignore[misc]
