"""
Стандартный фильтр дат.
"""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional, Union

from .base import Filter
from ..values import Number, as_number, as_string, is_number

DateLike = Union[dt.date, dt.datetime]


def _from_epoch(seconds: Number) -> Optional[dt.datetime]:
    try:
        return dt.datetime.fromtimestamp(seconds)
    except (OverflowError, OSError, ValueError):
        # Вне диапазона платформенного time_t
        return None


def to_datetime(value: Any) -> Optional[DateLike]:
    """
    Интерпретировать значение как момент времени.

    Принимает объекты date/datetime, секунды эпохи (числа или числовые
    строки), строки ISO 8601 и ключевые слова "now" и "today".
    Возвращает None, если значение не удаётся интерпретировать.
    """
    if isinstance(value, (dt.datetime, dt.date)):
        return value
    if is_number(value):
        return _from_epoch(value)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.lower() in ("now", "today"):
        return dt.datetime.now()
    if text.lstrip("-").isdigit():
        return _from_epoch(as_number(text))
    try:
        return dt.datetime.fromisoformat(text)
    except ValueError:
        return None


class Date(Filter):
    """
    Форматирует дату директивами strftime.

    `{{ article.published_at | date: '%a, %b %d, %y' }}`; вход, который
    нельзя прочитать как дату, возвращается без изменений.
    """
    name = "date"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        fmt = as_string(params[0])
        moment = to_datetime(value)
        if moment is None or not fmt:
            return value
        return moment.strftime(fmt)


__all__ = ["DateLike", "to_datetime", "Date"]
