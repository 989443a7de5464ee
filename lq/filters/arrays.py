"""
Стандартные фильтры коллекций.
"""

from __future__ import annotations

from typing import Any, Mapping

from .base import Filter
from ..errors import FilterError
from ..values import as_list, as_string


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple, range))


def _property(item: Any, key: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get(key)
    return None


class First(Filter):
    name = "first"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        if _is_sequence(value) and len(value) > 0:
            return value[0]
        return None


class Last(Filter):
    name = "last"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        if _is_sequence(value) and len(value) > 0:
            return value[-1]
        return None


class Join(Filter):
    """`{{ names | join: ', ' }}`; по умолчанию склеивает одним пробелом."""
    name = "join"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params_between(params, 0, 1)
        glue = as_string(params[0]) if params else " "
        if not _is_sequence(value):
            return as_string(value)
        return glue.join(as_string(item) for item in value)


class Map(Filter):
    """Собирает одно свойство каждого словаря списка."""
    name = "map"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        key = self.get(0, *params)
        return [_property(item, key) for item in as_list(value)]


class Size(Filter):
    name = "size"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        if isinstance(value, (str, list, tuple, range, Mapping)):
            return len(value)
        return 0


class Sort(Filter):
    """
    Сортирует список, при необходимости по свойству элементов-словарей.

    Элементы без этого свойства идут в конце.
    """
    name = "sort"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params_between(params, 0, 1)
        items = as_list(value)
        try:
            if params:
                key = params[0]
                present = [i for i in items if _property(i, key) is not None]
                missing = [i for i in items if _property(i, key) is None]
                return sorted(present, key=lambda i: _property(i, key)) + missing
            return sorted(items)
        except TypeError as e:
            raise FilterError(self.name, f"cannot compare elements: {e}") from e


__all__ = ["First", "Last", "Join", "Map", "Size", "Sort"]
