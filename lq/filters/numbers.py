"""
Стандартные арифметические фильтры.

Оба операнда проходят через as_number(); результат остается целым, если
оба операнда целые.
"""

from __future__ import annotations

import operator
from typing import Any, Callable

from .base import Filter
from ..errors import FilterError
from ..values import Number, as_number


class _ArithmeticFilter(Filter):
    """Бинарная операция между левым значением и единственным параметром."""

    op: Callable[[Number, Number], Number]

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        left = as_number(value)
        right = as_number(params[0])
        return self.compute(left, right)

    def compute(self, left: Number, right: Number) -> Number:
        return type(self).op(left, right)


class Plus(_ArithmeticFilter):
    name = "plus"
    op = operator.add


class Minus(_ArithmeticFilter):
    name = "minus"
    op = operator.sub


class Times(_ArithmeticFilter):
    name = "times"
    op = operator.mul


class DividedBy(_ArithmeticFilter):
    """Для целых операндов деление с округлением вниз: `{{ 7 | divided_by: 2 }}` → 3."""
    name = "divided_by"

    def compute(self, left: Number, right: Number) -> Number:
        if right == 0:
            raise FilterError(self.name, "divided by 0")
        if isinstance(left, int) and isinstance(right, int):
            return left // right
        return left / right


class Modulo(_ArithmeticFilter):
    name = "modulo"

    def compute(self, left: Number, right: Number) -> Number:
        if right == 0:
            raise FilterError(self.name, "divided by 0")
        return left % right


__all__ = ["Plus", "Minus", "Times", "DividedBy", "Modulo"]
