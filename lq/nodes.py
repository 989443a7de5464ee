"""
Узлы шаблона, которые умеют себя отрисовать.

Неизменяемые классы узлов, которые парсер строит один раз на текст
шаблона. Каждый узел предоставляет render(context); блочные узлы могут
вернуть сигнал вместо контента.
"""

from __future__ import annotations

import operator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Tuple, Union

from .errors import ComparisonError
from .signals import RenderResult, Signal, render_sequence
from .values import as_number, is_truthy

if TYPE_CHECKING:
    from .context import RenderContext
    from .tags.base import Tag


@dataclass(frozen=True)
class Node:
    """Базовый класс всех узлов шаблона."""

    def render(self, context: RenderContext) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class LiteralNode(Node):
    value: Any = None

    def render(self, context: RenderContext) -> Any:
        return self.value


@dataclass(frozen=True)
class TextNode(Node):
    """Статический текст между разметкой, выводится как есть."""
    text: str

    def render(self, context: RenderContext) -> Any:
        return self.text


_SPECIAL_PROPERTIES = ("size", "first", "last")


def _lookup_step(target: Any, key: Union[str, int]) -> Any:
    if isinstance(target, Mapping):
        if key in target:
            return target[key]
    elif isinstance(target, (list, tuple, str)) and isinstance(key, int):
        if -len(target) <= key < len(target):
            return target[key]
        return None

    # `items.size`, `items.first`, `items.last`
    if key in _SPECIAL_PROPERTIES and isinstance(target, (list, tuple, str, Mapping)):
        if key == "size":
            return len(target)
        if isinstance(target, (list, tuple)) and target:
            return target[0] if key == "first" else target[-1]
    return None


@dataclass(frozen=True)
class LookupNode(Node):
    """
    Ссылка на переменную с необязательным путём свойств/индексов.

    `user.address.city` → LookupNode("user", ("address", "city"))
    """
    name: str
    path: Tuple[Union[str, int], ...] = ()

    def render(self, context: RenderContext) -> Any:
        value = context.resolve(self.name)
        for key in self.path:
            if value is None:
                return None
            value = _lookup_step(value, key)
        return value


@dataclass(frozen=True)
class RangeNode(Node):
    """Целочисленный диапазон `(start..stop)` с включёнными границами."""
    start: Node
    stop: Node

    def render(self, context: RenderContext) -> Any:
        start = int(as_number(self.start.render(context)))
        stop = int(as_number(self.stop.render(context)))
        return list(range(start, stop + 1))


def _contains(left: Any, right: Any) -> bool:
    if isinstance(left, str):
        return right is not None and str(right) in left
    if isinstance(left, (list, tuple, Mapping)):
        return right in left
    return False


_COMPARISONS: Dict[str, Callable[[Any, Any], bool]] = {
    "==": operator.eq,
    "!=": operator.ne,
    "<>": operator.ne,
    "<": operator.lt,
    "<=": operator.le,
    ">": operator.gt,
    ">=": operator.ge,
    "contains": _contains,
}


@dataclass(frozen=True)
class CompareNode(Node):
    op: str
    left: Node
    right: Node

    def __post_init__(self):
        if self.op not in _COMPARISONS:
            raise ValueError(f"Unknown comparison operator '{self.op}'")

    def render(self, context: RenderContext) -> Any:
        left = self.left.render(context)
        right = self.right.render(context)
        try:
            return bool(_COMPARISONS[self.op](left, right))
        except TypeError:
            raise ComparisonError(self.op, left, right) from None


@dataclass(frozen=True)
class LogicalNode(Node):
    """`and` / `or` с истинностью шаблонов и коротким замыканием."""
    op: str
    left: Node
    right: Node

    def __post_init__(self):
        if self.op not in ("and", "or"):
            raise ValueError(f"Unknown logical operator '{self.op}'")

    def render(self, context: RenderContext) -> Any:
        left = is_truthy(self.left.render(context))
        if self.op == "and" and not left:
            return False
        if self.op == "or" and left:
            return True
        return is_truthy(self.right.render(context))


@dataclass(frozen=True)
class FilterCall:
    """Одна ступень пайпа: имя фильтра и выражения параметров."""
    name: str
    params: Tuple[Node, ...] = ()

    def evaluate_params(self, context: RenderContext) -> List[Any]:
        return [p.render(context) for p in self.params]


@dataclass(frozen=True)
class OutputNode(Node):
    """`{{ expression | filter: a, b | other }}`"""
    expression: Node
    filters: Tuple[FilterCall, ...] = ()

    def render(self, context: RenderContext) -> Any:
        value = self.expression.render(context)
        calls = [(call.name, call.evaluate_params(context)) for call in self.filters]
        return context.engine.apply_filters(value, calls)


@dataclass(frozen=True)
class BlockNode(Node):
    """Последовательность дочерних узлов в порядке документа."""
    children: Tuple[Node, ...] = ()

    def render(self, context: RenderContext) -> RenderResult:
        return render_sequence(context, self.children)


@dataclass(frozen=True)
class TagNode(Node):
    """Вызов уже найденного тега с его дочерними узлами."""
    tag: Tag
    nodes: Tuple[Union[Node, FilterCall], ...] = ()

    def render(self, context: RenderContext) -> Any:
        return self.tag.render(context, *self.nodes)


@dataclass(frozen=True)
class SignalNode(Node):
    """`{% break %}` / `{% continue %}`"""
    signal: Signal

    def render(self, context: RenderContext) -> Any:
        return self.signal


@dataclass(frozen=True)
class AttributeNode(Node):
    """Именованный атрибут тега, например `limit: 3` или `reversed`."""
    name: str
    value: Node = field(default_factory=lambda: LiteralNode(True))

    def render(self, context: RenderContext) -> Any:
        return self.value.render(context)


__all__ = [
    "Node",
    "LiteralNode",
    "TextNode",
    "LookupNode",
    "RangeNode",
    "CompareNode",
    "LogicalNode",
    "FilterCall",
    "OutputNode",
    "BlockNode",
    "TagNode",
    "SignalNode",
    "AttributeNode",
]
