"""
Теги, пишущие в контекст рендера: assign, capture, cycle.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Hashable

from .base import Tag
from ..nodes import Node
from ..signals import is_signal
from ..values import as_string

if TYPE_CHECKING:
    from ..context import RenderContext


class Assign(Tag):
    """
    `{% assign name = expression | filter: arg %}`

    Узлы: имя переменной, выражение значения, затем FilterCall для каждой
    ступени пайпа. Ничего не выводит.
    """
    name = "assign"

    def render(self, context: RenderContext, *nodes: Any) -> Any:
        var_name = as_string(nodes[0].render(context))
        value = nodes[1].render(context)
        calls = [(call.name, call.evaluate_params(context)) for call in nodes[2:]]
        context[var_name] = context.engine.apply_filters(value, calls)
        return ""


class Capture(Tag):
    """
    `{% capture name %}...{% endcapture %}`

    Узлы: имя переменной, тело. Сигнал из тела возвращается как есть,
    присваивания не происходит.
    """
    name = "capture"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        var_name = as_string(nodes[0].render(context))
        result = nodes[1].render(context)
        if is_signal(result):
            return result
        context[var_name] = as_string(result)
        return ""


class Cycle(Tag):
    """
    `{% cycle 'group': 'odd', 'even' %}`

    Узлы: имя группы (LiteralNode(None), если его нет), затем значения.
    Каждая группа помнит позицию до конца рендера; без имени группу
    определяет сам список значений.
    """
    name = "cycle"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        if len(nodes) < 2:
            return ""

        values = [node.render(context) for node in nodes[1:]]
        group = nodes[0].render(context)
        key: Hashable = as_string(group) if group is not None else tuple(as_string(v) for v in values)

        counters: Dict[Hashable, int] = context.registers.setdefault("cycle", {})
        position = counters.get(key, 0)
        counters[key] = position + 1
        return values[position % len(values)]


__all__ = ["Assign", "Capture", "Cycle"]
