"""
Сигналы управления циклом.

Узел break/continue возвращает Signal вместо контента. Сигнал поднимается
через все составные теги, пока его не поглотит ближайший итерационный тег.
Текст, отрисованный в блоке до сигнала, не теряется: он едет вместе с
сигналом в Interrupted.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional, Tuple, Union

from .values import as_string


class Signal(enum.Enum):
    """Закрытый набор управляющих маркеров."""

    BREAK = "break"
    CONTINUE = "continue"

    @property
    def keyword(self) -> str:
        return self.value

    def __str__(self) -> str:
        # Утёкший сигнал не должен быть виден в выводе
        return ""


@dataclass(frozen=True)
class Interrupted:
    """Блок, прерванный сигналом: уже отрисованный текст и сам сигнал."""
    text: str
    signal: Signal

    def __str__(self) -> str:
        return ""


RenderResult = Union[str, Signal, Interrupted]


def is_signal(value: Any) -> bool:
    """True, если результат рендера несёт сигнал (голый или с текстом)."""
    return isinstance(value, (Signal, Interrupted))


def interrupt(text: str, signal: Signal) -> Union[Signal, Interrupted]:
    """Сигнал вместе с текстом; без текста возвращается сам сигнал."""
    return Interrupted(text, signal) if text else signal


def split_result(value: Any) -> Tuple[str, Optional[Signal]]:
    """
    Разложить результат рендера на текст и сигнал.

    Returns:
        (текст, сигнал или None для обычного контента)
    """
    if isinstance(value, Signal):
        return "", value
    if isinstance(value, Interrupted):
        return value.text, value.signal
    return as_string(value), None


def render_sequence(context, nodes: Iterable[Any]) -> RenderResult:
    """
    Отрисовать узлы по порядку документа и склеить их текст.

    Останавливается на первом узле, вернувшем сигнал. Оставшиеся узлы не
    рендерятся, а накопленный текст возвращается вместе с сигналом.

    Args:
        context: Контекст рендера, передаётся каждому узлу
        nodes: Узлы с методом render(context)

    Returns:
        Склеенный текст, либо сигнал (Interrupted, если до него был текст)
    """
    parts: List[str] = []
    for node in nodes:
        text, signal = split_result(node.render(context))
        parts.append(text)
        if signal is not None:
            return interrupt("".join(parts), signal)
    return "".join(parts)


__all__ = [
    "Signal",
    "Interrupted",
    "RenderResult",
    "is_signal",
    "interrupt",
    "split_result",
    "render_sequence",
]
