from __future__ import annotations

from itertools import count
from typing import Iterator

from graphviz import Graph

from .frontend.ast_expressions import (
    BinaryExpression,
    Expression,
    IntegerLiteral,
    Variable,
)


def to_graph(expr: Expression) -> Graph:
    """Build an undirected Graphviz graph with one node per tree node.

    Nodes are named ``node<i>`` where ``i`` is the pre-order position of the
    tree node, so the root is always ``node0``.
    """
    graph = Graph(name="Expression")
    _add_node(graph, expr, count())
    return graph


def draw_expression(expr: Expression, filename: str) -> None:
    """Write ``expr`` to ``filename`` in DOT format."""
    to_graph(expr).save(filename)


def _add_node(graph: Graph, expr: Expression, ids: Iterator[int]) -> str:
    node_id = f"node{next(ids)}"
    graph.node(node_id, label=_label(expr))

    if isinstance(expr, BinaryExpression):
        for child in (expr.left, expr.right):
            child_id = _add_node(graph, child, ids)
            graph.edge(node_id, child_id)

    return node_id


def _label(expr: Expression) -> str:
    if isinstance(expr, IntegerLiteral):
        return str(expr.value)
    if isinstance(expr, Variable):
        return expr.name
    if isinstance(expr, BinaryExpression):
        return expr.op
    raise TypeError(f"Unsupported expression type: {type(expr).__name__}")
