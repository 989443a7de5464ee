"""
Стандартные строковые фильтры.
"""

from __future__ import annotations

import re
from typing import Any

from .base import Filter
from ..values import as_number, as_string


class Append(Filter):
    """`{{ 'foo' | append: 'bar' }}` → foobar"""
    name = "append"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        return as_string(value) + as_string(params[0])


class Prepend(Filter):
    """`{{ 'bar' | prepend: 'foo' }}` → foobar"""
    name = "prepend"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        return as_string(params[0]) + as_string(value)


class Capitalize(Filter):
    """Переводит в верхний регистр первый символ, остальное не трогает."""
    name = "capitalize"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        text = as_string(value)
        if not text:
            return text
        return text[0].upper() + text[1:]


class Downcase(Filter):
    name = "downcase"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        return as_string(value).lower()


class Upcase(Filter):
    name = "upcase"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        return as_string(value).upper()


class Remove(Filter):
    name = "remove"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        return as_string(value).replace(as_string(params[0]), "")


class RemoveFirst(Filter):
    name = "remove_first"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        return as_string(value).replace(as_string(params[0]), "", 1)


class Replace(Filter):
    name = "replace"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 2)
        return as_string(value).replace(as_string(params[0]), as_string(params[1]))


class ReplaceFirst(Filter):
    name = "replace_first"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 2)
        return as_string(value).replace(as_string(params[0]), as_string(params[1]), 1)


class Split(Filter):
    """
    Разбивает строку в список.

    Пустой разделитель разбивает на отдельные символы; пустые элементы
    в конце отбрасываются.
    """
    name = "split"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 1)
        text = as_string(value)
        separator = as_string(params[0])
        parts = list(text) if separator == "" else text.split(separator)
        while parts and parts[-1] == "":
            parts.pop()
        return parts


class StripNewlines(Filter):
    name = "strip_newlines"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        return re.sub(r"[\r\n]", "", as_string(value))


class Truncate(Filter):
    """
    Обрезает строку до `length` символов, включая многоточие.

    `{{ 'Ground control to Major Tom.' | truncate: 20 }}` → Ground control to...
    """
    name = "truncate"

    default_length = 50
    default_ellipsis = "..."

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params_between(params, 0, 2)
        text = as_string(value)
        length = int(as_number(params[0])) if params else self.default_length
        ellipsis = as_string(params[1]) if len(params) > 1 else self.default_ellipsis

        if len(text) <= length:
            return text
        keep = max(length - len(ellipsis), 0)
        return text[:keep] + ellipsis


class Truncatewords(Filter):
    """Оставляет первые N слов и добавляет многоточие, если что-то обрезано."""
    name = "truncatewords"

    default_words = 15
    default_ellipsis = "..."

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params_between(params, 0, 2)
        text = as_string(value)
        count = int(as_number(params[0])) if params else self.default_words
        ellipsis = as_string(params[1]) if len(params) > 1 else self.default_ellipsis

        words = text.split()
        if len(words) <= count:
            return text
        return " ".join(words[:max(count, 1)]) + ellipsis


__all__ = [
    "Append",
    "Prepend",
    "Capitalize",
    "Downcase",
    "Upcase",
    "Remove",
    "RemoveFirst",
    "Replace",
    "ReplaceFirst",
    "Split",
    "StripNewlines",
    "Truncate",
    "Truncatewords",
]
