"""
Исключения ядра шаблонизатора.

Все ожидаемые ошибки, о которых нужно чисто сообщить автору шаблона,
наследуются от LiquidError. Они поднимаются в точке ошибки и прерывают
весь вызов рендера.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence, Tuple


class LiquidError(Exception):
    """Базовый класс всех пользовательских ошибок ядра."""
    pass


@dataclass
class UnknownFilterError(LiquidError):
    """Фильтра с таким именем нет в реестре."""
    name: str

    def __str__(self) -> str:
        return f"unknown filter: {self.name}"


@dataclass
class UnknownTagError(LiquidError):
    """Тега с таким именем нет в реестре."""
    name: str

    def __str__(self) -> str:
        return f"unknown tag: {self.name}"


@dataclass
class FilterArityError(LiquidError):
    """
    Фильтр получил неверное число параметров.

    Сообщение считает левое значение пайпа неявным первым аргументом,
    поэтому оба числа в нём на единицу больше числа параметров.
    """
    filter_name: Optional[str]
    expected: int
    actual: int

    def __str__(self) -> str:
        return (
            f"Liquid error: wrong number of arguments "
            f"({self.actual + 1} for {self.expected + 1})"
        )


ArityError = FilterArityError


@dataclass
class ParameterIndexError(LiquidError):
    """Фильтр запросил параметр по индексу, которого нет."""
    filter_name: str
    index: int
    params: Tuple[Any, ...] = field(default_factory=tuple)

    def __str__(self) -> str:
        return (
            f"error in filter '{self.filter_name}': cannot get param index: "
            f"{self.index} from: {list(self.params)!r}"
        )


@dataclass
class FilterError(LiquidError):
    """Фильтр не может обработать свой вход."""
    filter_name: str
    message: str

    def __str__(self) -> str:
        return f"Liquid error in filter '{self.filter_name}': {self.message}"


@dataclass
class UnknownTemplateError(LiquidError):
    """Включаемый шаблон не зарегистрирован в движке."""
    name: str
    available: Sequence[str] = field(default_factory=list)

    def __str__(self) -> str:
        avail = f". Available: {', '.join(self.available)}" if self.available else ""
        return f"unknown template '{self.name}'{avail}"


@dataclass
class UndefinedVariableError(LiquidError):
    """Переменная не найдена при включённом strict_variables."""
    name: str

    def __str__(self) -> str:
        return f"undefined variable '{self.name}'"


@dataclass
class ComparisonError(LiquidError):
    """Операнды сравнения нельзя упорядочить друг относительно друга."""
    op: str
    left: Any
    right: Any

    def __str__(self) -> str:
        return (
            f"Liquid error: comparison of {type(self.left).__name__} "
            f"with {type(self.right).__name__} failed ({self.op})"
        )


@dataclass
class StraySignalError(LiquidError):
    """break/continue дошёл до верхнего уровня без объемлющего цикла."""
    signal: Any

    def __str__(self) -> str:
        return f"'{self.signal.keyword}' used outside of a loop"


class ConfigError(LiquidError):
    """Некорректная конфигурация движка с путём к проблемному ключу."""
    def __init__(self, message: str, path: Tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


__all__ = [
    "LiquidError",
    "UnknownFilterError",
    "UnknownTagError",
    "FilterArityError",
    "ArityError",
    "ParameterIndexError",
    "FilterError",
    "UnknownTemplateError",
    "UndefinedVariableError",
    "ComparisonError",
    "StraySignalError",
    "ConfigError",
]
