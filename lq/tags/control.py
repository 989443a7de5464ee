"""
Условные теги: if, unless, case.

Ни один из них не поглощает сигналы цикла: результат выбранной ветки,
включая сигнал, возвращается вызывающему без изменений.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Sequence

from .base import Tag
from ..nodes import Node
from ..values import is_truthy

if TYPE_CHECKING:
    from ..context import RenderContext


def _render_branches(context: RenderContext, nodes: Sequence[Node], negate_first: bool = False) -> Any:
    if len(nodes) % 2:
        raise ValueError("Conditional tag expects (condition, body) node pairs")

    for i in range(0, len(nodes), 2):
        condition, body = nodes[i], nodes[i + 1]
        truthy = is_truthy(condition.render(context))
        if i == 0 and negate_first:
            truthy = not truthy
        if truthy:
            # BREAK/CONTINUE уходят к объемлющему циклу
            return body.render(context)
    return ""


class If(Tag):
    """
    `{% if a %}...{% elsif b %}...{% else %}...{% endif %}`

    Узлы: пары (условие, тело); `else` это пара с условием
    LiteralNode(True).
    """
    name = "if"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        return _render_branches(context, nodes)


class Unless(Tag):
    """Раскладка как у `if`; первое условие инвертируется."""
    name = "unless"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        return _render_branches(context, nodes, negate_first=True)


class Case(Tag):
    """
    `{% case x %}{% when 1 %}...{% when 2 %}...{% else %}...{% endcase %}`

    Узлы: субъект, пары (значение when, тело), необязательное тело else в конце.
    """
    name = "case"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        if not nodes:
            return ""

        subject = nodes[0].render(context)
        rest = nodes[1:]
        else_body = rest[-1] if len(rest) % 2 else None
        pairs = rest[:-1] if else_body is not None else rest

        for i in range(0, len(pairs), 2):
            when, body = pairs[i], pairs[i + 1]
            if when.render(context) == subject:
                return body.render(context)

        if else_body is not None:
            return else_body.render(context)
        return ""


__all__ = ["If", "Unless", "Case"]
