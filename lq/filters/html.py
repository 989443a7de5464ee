"""
Стандартные HTML фильтры.
"""

from __future__ import annotations

import re
from typing import Any, Dict

from .base import Filter
from ..values import as_string

_ESCAPES: Dict[str, str] = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
}

_ESCAPE_RE = re.compile(r"[&<>\"']")

# &, с которого не начинается сущность
_BARE_AMP_RE = re.compile(r"&(?!(?:[a-zA-Z][a-zA-Z0-9]*|#\d+|#[xX][0-9a-fA-F]+);)")

_STRIP_BLOCKS_RE = re.compile(r"<script.*?</script>|<style.*?</style>|<!--.*?-->", re.DOTALL | re.IGNORECASE)
_STRIP_TAGS_RE = re.compile(r"<.*?>", re.DOTALL)


def escape_html(text: str) -> str:
    return _ESCAPE_RE.sub(lambda m: _ESCAPES[m.group(0)], text)


class Escape(Filter):
    name = "escape"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        return escape_html(as_string(value))


class H(Escape):
    """Короткий псевдоним escape."""
    name = "h"


class EscapeOnce(Filter):
    """Экранирует HTML, не трогая уже экранированные сущности."""
    name = "escape_once"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        text = _BARE_AMP_RE.sub("&amp;", as_string(value))
        return re.sub(r"[<>\"']", lambda m: _ESCAPES[m.group(0)], text)


class StripHtml(Filter):
    name = "strip_html"

    def apply(self, value: Any, *params: Any) -> Any:
        self.check_params(params, 0)
        text = _STRIP_BLOCKS_RE.sub("", as_string(value))
        return _STRIP_TAGS_RE.sub("", text)


__all__ = ["escape_html", "Escape", "H", "EscapeOnce", "StripHtml"]
