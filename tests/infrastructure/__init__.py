"""
Общая тестовая инфраструктура.

Модули:
- node_builders: Короткие конструкторы деревьев узлов (парсера в тестах нет)
- testing_utils: Узлы-наблюдатели и помощники для потоков
- file_utils: Утилиты для создания файлов
"""

from .file_utils import write
from .node_builders import (
    attr, block, brk, cmp, cont, lit, logic, out, pipe, rng, tag, text, var,
)
from .testing_utils import RecordingNode, ScriptedNode, run_in_thread

__all__ = [
    # Файловые утилиты
    "write",

    # Конструкторы узлов
    "text", "lit", "var", "pipe", "out", "block", "tag",
    "cmp", "logic", "rng", "attr", "brk", "cont",

    # Тестовые утилиты
    "RecordingNode", "ScriptedNode", "run_in_thread",
]
