"""
Тестовые утилиты: узлы-наблюдатели и помощники для потоков.
"""

from __future__ import annotations

import threading
from typing import Any, Callable, List, Sequence, TypeVar

from lq.nodes import Node

_T = TypeVar("_T")


class RecordingNode(Node):
    """Узел, считающий свои рендеры и выводящий фиксированное значение."""

    def __init__(self, value: Any = ""):
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "calls", [])

    def render(self, context) -> Any:
        self.calls.append(dict(context))
        return self.value

    @property
    def count(self) -> int:
        return len(self.calls)


class ScriptedNode(Node):
    """Узел, на каждый рендер возвращающий следующее значение сценария."""

    def __init__(self, script: Sequence[Any]):
        object.__setattr__(self, "script", list(script))
        object.__setattr__(self, "renders", 0)

    def render(self, context) -> Any:
        value = self.script[self.renders]
        object.__setattr__(self, "renders", self.renders + 1)
        return value


def run_in_thread(func: Callable[[], _T]) -> _T:
    """
    Выполнить функцию в новом потоке и вернуть её результат.

    Исключения из потока пробрасываются вызывающему.
    """
    result: List[Any] = []
    errors: List[BaseException] = []

    def target() -> None:
        try:
            result.append(func())
        except BaseException as e:  # пробрасывается ниже
            errors.append(e)

    thread = threading.Thread(target=target)
    thread.start()
    thread.join()
    if errors:
        raise errors[0]
    return result[0]


__all__ = ["RecordingNode", "ScriptedNode", "run_in_thread"]
