"""
Итерационные теги: for, tablerow.

Оба поглощают сигналы BREAK/CONTINUE из своего тела и никогда не
передают их выше.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List

from .base import IterationTag, split_attributes
from ..nodes import Node
from ..values import as_number, as_string

if TYPE_CHECKING:
    from ..context import RenderContext


def _loop_state(name: str, index0: int, length: int) -> Dict[str, Any]:
    return {
        "name": name,
        "length": length,
        "index": index0 + 1,
        "index0": index0,
        "rindex": length - index0,
        "rindex0": length - index0 - 1,
        "first": index0 == 0,
        "last": index0 == length - 1,
    }


class For(IterationTag):
    """
    `{% for item in collection limit: 2 offset: 1 reversed %}...{% endfor %}`

    Узлы: имя переменной цикла, коллекция, тело, затем AttributeNode
    (limit, offset, reversed). Внутри тела доступен `forloop`.
    """
    name = "for"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        positional, attributes = split_attributes(nodes)
        var_node, collection, body = positional[:3]
        var_name = as_string(var_node.render(context))

        items = self.collect_items(context, collection, attributes)
        length = len(items)
        output: List[str] = []

        with context.scope() as frame:
            for index0, item in enumerate(items):
                frame[var_name] = item
                frame["forloop"] = _loop_state(var_name, index0, length)
                text, stop = self.run_body(context, body)
                output.append(text)
                if stop:
                    break

        return "".join(output)


class Tablerow(IterationTag):
    """
    `{% tablerow item in collection cols: 3 %}...{% endtablerow %}`

    Узлы: имя переменной цикла, коллекция, тело, затем AttributeNode
    (cols, limit, offset). Выводит разметку `<tr>`/`<td>`, внутри тела
    доступен `tablerowloop`. Прерванная ячейка закрывается с уже
    отрисованным текстом.
    """
    name = "tablerow"

    def render(self, context: RenderContext, *nodes: Node) -> Any:
        positional, attributes = split_attributes(nodes)
        var_node, collection, body = positional[:3]
        var_name = as_string(var_node.render(context))

        items = self.collect_items(context, collection, attributes)
        length = len(items)

        cols_node = attributes.get("cols")
        cols = int(as_number(cols_node.render(context))) if cols_node is not None else length
        if cols <= 0:
            cols = max(length, 1)

        output: List[str] = ['<tr class="row1">\n']
        row, col = 1, 0

        with context.scope() as frame:
            for index0, item in enumerate(items):
                col += 1
                state = _loop_state(var_name, index0, length)
                state.update({
                    "col": col,
                    "col0": col - 1,
                    "col_first": col == 1,
                    "col_last": col == cols,
                    "row": row,
                })
                frame[var_name] = item
                frame["tablerowloop"] = state

                text, stop = self.run_body(context, body)
                output.append(f'<td class="col{col}">{text}</td>')
                if stop:
                    break

                if col == cols and index0 != length - 1:
                    row += 1
                    col = 0
                    output.append(f'</tr>\n<tr class="row{row}">')

        output.append("</tr>\n")
        return "".join(output)


__all__ = ["For", "Tablerow"]
