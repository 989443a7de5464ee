"""
Теги без собственного управления потоком: comment, raw, include.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict

from .base import Tag
from ..nodes import Node
from ..signals import render_sequence
from ..values import as_string

if TYPE_CHECKING:
    from ..context import RenderContext

logger = logging.getLogger(__name__)


class Comment(Tag):
    """Дочерние узлы никогда не рендерятся."""
    name = "comment"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        return ""


class Raw(Tag):
    """Узлы: дословный текст, который парсер оставил неразобранным."""
    name = "raw"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        # Сигнал от ребёнка уходит выше, а не превращается в ""
        return render_sequence(context, nodes)


class Include(Tag):
    """
    `{% include 'product' with item %}`

    Узлы: имя шаблона, необязательное with-значение. Частичный шаблон
    рендерится в текущем контексте; with-значение на время включения
    связывается с именем шаблона. Сигналы из шаблона возвращаются как есть.
    """
    name = "include"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        template_name = as_string(nodes[0].render(context))
        template = context.engine.get_template(template_name)

        bindings: Dict[str, Any] = {}
        if len(nodes) > 1:
            bindings[template_name] = nodes[1].render(context)

        logger.debug(f"Including template '{template_name}' at scope depth {context.depth}")
        with context.scope(bindings):
            return template.render(context)


__all__ = ["Comment", "Raw", "Include"]
