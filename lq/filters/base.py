"""
Контракт фильтров.

Разметка вывода принимает фильтры. Первый аргумент фильтра всегда
результат левой части пайпа; возвращенное фильтром значение становится
левой частью следующего фильтра. В `{{ 'AAA' | f: 1, 2, 3 }}` фильтр `f`
получает значение 'AAA' и параметры (1, 2, 3).
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Callable, Optional, Sequence

from ..errors import FilterArityError, ParameterIndexError
from ..registry import validate_name


def check_params(params: Optional[Sequence[Any]], expected: int, filter_name: Optional[str] = None) -> None:
    """
    Проверить число параметров фильтра.

    Raises:
        FilterArityError: Если params равен None или его длина отличается от expected
    """
    if params is None or len(params) != expected:
        actual = 0 if params is None else len(params)
        raise FilterArityError(filter_name, expected, actual)


class Filter(ABC):
    """
    Базовый класс фильтров.

    Подкласс без явного имени регистрируется под именем класса
    в нижнем регистре (`class Upcase` → "upcase").
    """

    #: Имя в реестре; пустое значит "вывести из имени класса"
    name: str = ""

    def __init__(self, name: Optional[str] = None):
        if name is None:
            name = type(self).name or type(self).__name__.lower()
        self.name = validate_name(name)

    @abstractmethod
    def apply(self, value: Any, *params: Any) -> Any:
        """
        Применить фильтр к значению.

        Args:
            value: Левое значение пайпа
            *params: Уже вычисленные аргументы фильтра

        Returns:
            Новое левое значение
        """
        pass

    def check_params(self, params: Optional[Sequence[Any]], expected: int) -> None:
        check_params(params, expected, self.name)

    def check_params_between(self, params: Sequence[Any], low: int, high: int) -> None:
        """Проверка арности для фильтров с необязательными хвостовыми параметрами."""
        if len(params) < low:
            raise FilterArityError(self.name, low, len(params))
        if len(params) > high:
            raise FilterArityError(self.name, high, len(params))

    def get(self, index: int, *params: Any) -> Any:
        """
        Вернуть параметр по индексу.

        Raises:
            ParameterIndexError: Если такого индекса нет
        """
        if index < 0 or index >= len(params):
            raise ParameterIndexError(self.name, index, tuple(params))
        return params[index]

    def __repr__(self) -> str:
        return f"<{type(self).__name__} '{self.name}'>"


class FunctionFilter(Filter):
    """Фильтр поверх обычной функции `func(value, *params)`."""

    def __init__(self, name: str, func: Callable[..., Any]):
        super().__init__(validate_name(name))
        self.func = func

    def apply(self, value: Any, *params: Any) -> Any:
        return self.func(value, *params)


def as_filter(name: str) -> Callable[[Callable[..., Any]], FunctionFilter]:
    """Декоратор, превращающий функцию в именованный FunctionFilter."""
    def decorate(func: Callable[..., Any]) -> FunctionFilter:
        return FunctionFilter(name, func)
    return decorate


__all__ = ["Filter", "FunctionFilter", "as_filter", "check_params"]
