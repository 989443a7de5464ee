"""
Фильтры: контракт, стандартный набор и реестр фильтров на поток.
"""

from __future__ import annotations

from typing import Mapping

from .arrays import First, Join, Last, Map, Size, Sort
from .base import Filter, FunctionFilter, as_filter, check_params
from .dates import Date
from .html import Escape, EscapeOnce, H, StripHtml
from .numbers import DividedBy, Minus, Modulo, Plus, Times
from .strings import (
    Append, Capitalize, Downcase, Prepend, Remove, RemoveFirst,
    Replace, ReplaceFirst, Split, StripNewlines, Truncate, Truncatewords, Upcase,
)
from ..errors import UnknownFilterError
from ..registry import PerThreadRegistry, Registry, build_default_set

#: Стандартные фильтры без состояния, общие для всех потоков и движков
STANDARD_FILTERS: Mapping[str, Filter] = build_default_set([
    Append(),
    Capitalize(),
    Date(),
    DividedBy(),
    Downcase(),
    Escape(),
    EscapeOnce(),
    First(),
    H(),
    Join(),
    Last(),
    Map(),
    Minus(),
    Modulo(),
    Plus(),
    Prepend(),
    Remove(),
    RemoveFirst(),
    Replace(),
    ReplaceFirst(),
    Size(),
    Sort(),
    Split(),
    StripHtml(),
    StripNewlines(),
    Times(),
    Truncate(),
    Truncatewords(),
    Upcase(),
])


def new_filter_registry() -> Registry[Filter]:
    """Новый реестр, засеянный стандартными фильтрами."""
    return Registry("filter", STANDARD_FILTERS, UnknownFilterError)


_THREAD_FILTERS: PerThreadRegistry[Filter] = PerThreadRegistry(new_filter_registry)


def thread_filters() -> Registry[Filter]:
    """Реестр фильтров вызывающего потока."""
    return _THREAD_FILTERS.current()


def get_filter(name: str) -> Filter:
    """
    Получить фильтр по имени из реестра вызывающего потока.

    Raises:
        UnknownFilterError: Если под этим именем нет фильтра
    """
    return thread_filters().get(name)


def register_filter(filter: Filter) -> None:
    """Зарегистрировать фильтр в вызывающем потоке, заменив одноименный."""
    thread_filters().register(filter)


__all__ = [
    "Filter",
    "FunctionFilter",
    "as_filter",
    "check_params",
    "STANDARD_FILTERS",
    "new_filter_registry",
    "thread_filters",
    "get_filter",
    "register_filter",
]
