"""
Контракт тегов и общие помощники составных тегов.

Теги реализуют логику шаблона. Тег получает контекст рендера и дочерние
узлы, которые к нему прикрепил парсер, и возвращает контент или сигнал.

Правила обработки сигналов:
- итерационные теги поглощают BREAK и CONTINUE, пришедшие из тела;
- любой другой тег, рендерящий детей, возвращает сигнал вызывающему
  без изменений, чтобы он дошёл до ближайшего цикла на любой глубине.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

from ..nodes import AttributeNode, Node
from ..registry import validate_name
from ..signals import Signal, split_result
from ..values import as_list, as_number

if TYPE_CHECKING:
    from ..context import RenderContext


class Tag(ABC):
    """
    Базовый класс тегов.

    Подкласс без явного имени регистрируется под именем класса
    в нижнем регистре.
    """

    #: Имя в реестре; пустое значит "вывести из имени класса"
    name: str = ""

    def __init__(self, name: Optional[str] = None):
        if name is None:
            name = type(self).name or type(self).__name__.lower()
        self.name = validate_name(name)

    @abstractmethod
    def render(self, context: RenderContext, *nodes: Node) -> Any:
        """
        Отрисовать тег.

        Args:
            context: Переменные, с которыми рендерится тег
            *nodes: Дочерние узлы тега; раскладка описана у каждого
                стандартного тега

        Returns:
            Контент или сигнал для обработки объемлющим циклом
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.name}'>"


def split_attributes(nodes: Iterable[Node]) -> Tuple[List[Node], Dict[str, Node]]:
    """Отделить AttributeNode от позиционных узлов."""
    positional: List[Node] = []
    attributes: Dict[str, Node] = {}
    for node in nodes:
        if isinstance(node, AttributeNode):
            attributes[node.name] = node
        else:
            positional.append(node)
    return positional, attributes


class IterationTag(Tag):
    """
    Базовый класс циклов.

    Подклассы собирают элементы, связывают переменные цикла и вызывают
    run_body() на каждый элемент. Только run_body() поглощает сигналы.
    """

    def collect_items(self, context: RenderContext, collection: Node, attributes: Dict[str, Node]) -> List[Any]:
        """Вычислить коллекцию и применить offset/limit/reversed."""
        items = as_list(collection.render(context))

        offset = attributes.get("offset")
        if offset is not None:
            items = items[max(int(as_number(offset.render(context))), 0):]

        limit = attributes.get("limit")
        if limit is not None:
            items = items[:max(int(as_number(limit.render(context))), 0)]

        reversed_attr = attributes.get("reversed")
        if reversed_attr is not None and reversed_attr.render(context):
            items.reverse()

        return items

    @staticmethod
    def run_body(context: RenderContext, body: Node) -> Tuple[str, bool]:
        """
        Отрисовать тело для одной итерации.

        Текст, отрисованный до break/continue, сохраняется.

        Returns:
            Контент итерации и признак остановки цикла
        """
        text, signal = split_result(body.render(context))
        return text, signal is Signal.BREAK


__all__ = ["Tag", "IterationTag", "split_attributes"]
