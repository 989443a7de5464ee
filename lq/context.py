"""
Контекст рендера: связывания переменных, видимые в течение одного рендера.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Dict, Iterator, List, Mapping, Optional

from .errors import UndefinedVariableError

if TYPE_CHECKING:
    from .engine import Engine


class RenderContext(MutableMapping):
    """
    Изменяемый словарь имя переменной → значение со стеком областей.

    Присваивания всегда идут в корневую область, поэтому переменная,
    присвоенная в теле цикла, видна и после него. Внутренние области
    держат только связывания тегов (переменные цикла, аргументы include)
    и исчезают, когда тег завершается.
    """

    def __init__(self, engine: Engine, variables: Optional[Mapping[str, Any]] = None):
        self.engine = engine
        self._scopes: List[Dict[str, Any]] = [dict(variables or {})]
        # Состояние тегов с памятью на время рендера (счетчики cycle, ...)
        self.registers: Dict[str, Any] = {}

    def __getitem__(self, name: str) -> Any:
        for scope in reversed(self._scopes):
            if name in scope:
                return scope[name]
        raise KeyError(name)

    def __setitem__(self, name: str, value: Any) -> None:
        self._scopes[0][name] = value

    def __delitem__(self, name: str) -> None:
        del self._scopes[0][name]

    def __iter__(self) -> Iterator[str]:
        seen: Dict[str, None] = {}
        for scope in reversed(self._scopes):
            for name in scope:
                seen.setdefault(name)
        return iter(seen)

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def resolve(self, name: str) -> Any:
        """
        Найти переменную.

        Отсутствующая переменная дает None, если движок не запущен
        со strict_variables.
        """
        try:
            return self[name]
        except KeyError:
            if self.engine.config.strict_variables:
                raise UndefinedVariableError(name) from None
            return None

    @contextmanager
    def scope(self, bindings: Optional[Mapping[str, Any]] = None) -> Iterator[Dict[str, Any]]:
        """Временная область на время with-блока."""
        frame: Dict[str, Any] = dict(bindings or {})
        self._scopes.append(frame)
        try:
            yield frame
        finally:
            self._scopes.pop()

    @property
    def depth(self) -> int:
        return len(self._scopes)


__all__ = ["RenderContext"]
