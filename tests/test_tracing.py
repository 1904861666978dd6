import importlib

import pytest

from exprtree import (
    IntegerLiteral,
    Product,
    RuntimeContext,
    Sum,
    Variable,
    evaluate,
    parse_infix,
    parse_postfix,
    simplify,
    writer,
)
from exprtree.writer import IndentingWriter, indented_output


@pytest.fixture
def debug_enabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(writer, "DEBUG", True)


# ===== Silent By Default =====
def test_no_output_when_debug_is_off(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setattr(writer, "DEBUG", False)

    simplify(parse_postfix(["x", "x", "-"]))

    assert capsys.readouterr().out == ""


# ===== Traces =====
@pytest.mark.usefixtures("debug_enabled")
def test_parser_traces_reductions(capsys: pytest.CaptureFixture[str]) -> None:
    parse_infix(["3", "+", "4", "*", "2"])

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["[reduce 4 * 2 => (4*2)]", "[reduce 3 + (4*2) => (3+(4*2))]"]


@pytest.mark.usefixtures("debug_enabled")
def test_evaluator_traces_binary_steps(capsys: pytest.CaptureFixture[str]) -> None:
    evaluate(Sum(IntegerLiteral(3), IntegerLiteral(4)), {})

    assert capsys.readouterr().out == "[(3) + (4) => 7]\n"


@pytest.mark.usefixtures("debug_enabled")
def test_simplifier_traces_nested_rewrites(capsys: pytest.CaptureFixture[str]) -> None:
    x = Variable("x")
    simplify(Sum(Product(x, IntegerLiteral(1)), IntegerLiteral(2)))

    lines = capsys.readouterr().out.splitlines()
    assert lines == ["   [simplify (x*1) => x]", "[simplify ((x*1)+2) => (2+x)]"]


@pytest.mark.usefixtures("debug_enabled")
def test_custom_indent_size(capsys: pytest.CaptureFixture[str]) -> None:
    context = RuntimeContext(writer=IndentingWriter(indent_size=1))
    with indented_output(context.writer):
        context.writer.debugln("step")

    assert capsys.readouterr().out == " step\n"


# ===== Configuration =====
def test_debug_flag_reads_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EXPRTREE_DEBUG", "yes")
    try:
        importlib.reload(writer)
        assert writer.DEBUG is True
    finally:
        monkeypatch.delenv("EXPRTREE_DEBUG")
        importlib.reload(writer)

    assert writer.DEBUG is False
