"""
Движок шаблонов: владелец реестров, конфигурации и частичных шаблонов.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from .config import DEFAULT_CONFIG, EngineConfig, load_config
from .context import RenderContext
from .errors import StraySignalError, UnknownTemplateError
from .filters import Filter, new_filter_registry, thread_filters
from .nodes import Node
from .registry import Registry, validate_name
from .signals import split_result
from .tags import Tag, new_tag_registry, thread_tags

logger = logging.getLogger(__name__)

# Одна ступень пайпа: имя фильтра и вычисленные параметры
FilterStage = Tuple[str, Sequence[Any]]


class Engine:
    """
    Явный владелец всего, что нужно для рендера.

    У каждого движка свои реестры фильтров и тегов, засеянные стандартными
    наборами, поэтому расширения одного движка не видны другому.
    for_current_thread() даёт движок поверх реестров текущего потока.
    """

    def __init__(
        self,
        config: Optional[EngineConfig] = None,
        filters: Optional[Registry[Filter]] = None,
        tags: Optional[Registry[Tag]] = None,
    ):
        """
        Инициализирует движок.

        Args:
            config: Переключатели поведения рендера; по умолчанию DEFAULT_CONFIG
            filters: Реестр фильтров; если не задан, создаётся новый
            tags: Реестр тегов; если не задан, создаётся новый
        """
        self.config = config or DEFAULT_CONFIG
        self.filters: Registry[Filter] = filters if filters is not None else new_filter_registry()
        self.tags: Registry[Tag] = tags if tags is not None else new_tag_registry()
        self._templates: Dict[str, Node] = {}

        logger.debug(
            f"Engine initialized: {len(self.filters)} filters, {len(self.tags)} tags, "
            f"stray_signal={self.config.stray_signal}"
        )

    @classmethod
    def for_current_thread(cls, config: Optional[EngineConfig] = None) -> Engine:
        """Движок, привязанный к реестрам вызывающего потока."""
        return cls(config, filters=thread_filters(), tags=thread_tags())

    @classmethod
    def from_config_file(cls, path: Path) -> Engine:
        return cls(load_config(path))

    # --- Фильтры ---------------------------------

    def get_filter(self, name: str) -> Filter:
        return self.filters.get(name)

    def register_filter(self, filter: Filter) -> None:
        self.filters.register(filter)

    def apply_filters(self, value: Any, stages: Iterable[FilterStage]) -> Any:
        """
        Провести значение через пайп фильтров строго слева направо.

        Args:
            value: Левое значение первого фильтра
            stages: Пары (имя фильтра, вычисленные параметры)

        Returns:
            Результат последнего фильтра (само значение для пустого пайпа)
        """
        for name, params in stages:
            value = self.get_filter(name).apply(value, *params)
        return value

    # --- Теги ------------------------------------

    def get_tag(self, name: str) -> Tag:
        return self.tags.get(name)

    def register_tag(self, tag: Tag) -> None:
        self.tags.register(tag)

    # --- Частичные шаблоны -----------------------

    def register_template(self, name: str, template: Node) -> None:
        """Зарегистрировать уже разобранный шаблон для `include`."""
        self._templates[validate_name(name)] = template
        logger.debug(f"Registered template: {name}")

    def get_template(self, name: str) -> Node:
        template = self._templates.get(name)
        if template is None:
            raise UnknownTemplateError(name, sorted(self._templates))
        return template

    # --- Рендер ----------------------------------

    def new_context(self, variables: Optional[Mapping[str, Any]] = None) -> RenderContext:
        return RenderContext(self, variables)

    def render(
        self,
        nodes: Union[Node, Iterable[Node]],
        variables: Union[Mapping[str, Any], RenderContext, None] = None,
    ) -> str:
        """
        Отрисовать узлы верхнего уровня в текст.

        Сигнал, дошедший до этого уровня, не имел объемлющего цикла.
        При stray_signal "ignore" текст, отрисованный до сигнала, остаётся,
        а рендер продолжается со следующего узла; при "error" рендер
        прерывается.

        Raises:
            StraySignalError: Сигнал вне цикла при политике "error"
            LiquidError: Любая ошибка фильтров, тегов или узлов
        """
        if isinstance(variables, RenderContext):
            context = variables
        else:
            context = self.new_context(variables)

        if isinstance(nodes, Node):
            nodes = [nodes]

        parts: List[str] = []
        for node in nodes:
            text, signal = split_result(node.render(context))
            if signal is not None:
                if self.config.stray_signal == "error":
                    raise StraySignalError(signal)
                logger.debug(f"Ignoring '{signal.keyword}' outside of a loop")
            parts.append(text)
        return "".join(parts)


__all__ = ["FilterStage", "Engine"]
