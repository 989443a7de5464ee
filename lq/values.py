"""
Помощники приведения значений, общие для узлов, фильтров и тегов.
"""

from __future__ import annotations

import re
from typing import Any, List, Mapping, Union

Number = Union[int, float]

_INT_RE = re.compile(r"^\s*[-+]?\d+\s*$")
_FLOAT_RE = re.compile(r"^\s*[-+]?(?:\d+\.\d*|\.\d+|\d+)(?:[eE][-+]?\d+)?\s*$")


def is_truthy(value: Any) -> bool:
    """В шаблонах ложны только None и False."""
    return value is not None and value is not False


def as_string(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return "".join(as_string(v) for v in value)
    return str(value)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_number(value: Any) -> Number:
    """
    Привести значение к int или float.

    Числовые строки сохраняют целочисленность или дробность; всё, что
    не похоже на число, становится 0.
    """
    if is_number(value):
        return value
    if isinstance(value, str):
        if _INT_RE.match(value):
            return int(value)
        if _FLOAT_RE.match(value):
            return float(value)
    return 0


def as_list(value: Any) -> List[Any]:
    if value is None:
        return []
    if isinstance(value, (list, tuple, range)):
        return list(value)
    if isinstance(value, Mapping):
        return [[k, v] for k, v in value.items()]
    return [value]


__all__ = ["Number", "is_truthy", "as_string", "is_number", "as_number", "as_list"]
