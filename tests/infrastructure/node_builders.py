"""
Короткие конструкторы деревьев узлов, заменяющие парсер в тестах.

    block(text("a"), out(var("x"), pipe("upcase")))
    tag(engine, "for", lit("item"), var("items"), block(...), attr("limit", 2))
"""

from __future__ import annotations

from typing import Any, Union

from lq.engine import Engine
from lq.nodes import (
    AttributeNode, BlockNode, CompareNode, FilterCall, LiteralNode, LogicalNode,
    LookupNode, Node, OutputNode, RangeNode, SignalNode, TagNode, TextNode,
)
from lq.signals import Signal
from lq.tags import Tag


def _node(value: Any) -> Node:
    return value if isinstance(value, Node) else LiteralNode(value)


def text(s: str) -> TextNode:
    return TextNode(s)


def lit(value: Any) -> LiteralNode:
    return LiteralNode(value)


def var(name: str, *path: Union[str, int]) -> LookupNode:
    return LookupNode(name, tuple(path))


def pipe(name: str, *params: Any) -> FilterCall:
    """Ступень пайпа; простые параметры оборачиваются в литералы."""
    return FilterCall(name, tuple(_node(p) for p in params))


def out(expression: Any, *filters: FilterCall) -> OutputNode:
    return OutputNode(_node(expression), tuple(filters))


def block(*children: Node) -> BlockNode:
    return BlockNode(tuple(children))


def tag(engine: Engine, name_or_tag: Union[str, Tag], *nodes: Any) -> TagNode:
    """Найти тег через движок, как это делает парсер. FilterCall передаются как есть."""
    resolved = engine.get_tag(name_or_tag) if isinstance(name_or_tag, str) else name_or_tag
    children = tuple(n if isinstance(n, FilterCall) else _node(n) for n in nodes)
    return TagNode(resolved, children)


def cmp(op: str, left: Any, right: Any) -> CompareNode:
    return CompareNode(op, _node(left), _node(right))


def logic(op: str, left: Any, right: Any) -> LogicalNode:
    return LogicalNode(op, _node(left), _node(right))


def rng(start: Any, stop: Any) -> RangeNode:
    return RangeNode(_node(start), _node(stop))


def attr(name: str, value: Any = True) -> AttributeNode:
    return AttributeNode(name, _node(value))


def brk() -> SignalNode:
    return SignalNode(Signal.BREAK)


def cont() -> SignalNode:
    return SignalNode(Signal.CONTINUE)


__all__ = [
    "text", "lit", "var", "pipe", "out", "block", "tag",
    "cmp", "logic", "rng", "attr", "brk", "cont",
]
