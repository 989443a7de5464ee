"""
Ядро расширяемости и диспетчеризации интерпретатора шаблонов в стиле Liquid.

Контракты фильтров и тегов, их реестры (на поток и на движок)
и сигналы управления циклом.
"""

from __future__ import annotations

from .config import EngineConfig, load_config
from .context import RenderContext
from .engine import Engine
from .errors import (
    ArityError,
    FilterArityError,
    LiquidError,
    ParameterIndexError,
    UnknownFilterError,
    UnknownTagError,
)
from .filters import Filter, FunctionFilter, as_filter, check_params, get_filter, register_filter
from .signals import Interrupted, Signal
from .tags import IterationTag, Tag, get_tag, register_tag

__all__ = [
    "Engine",
    "EngineConfig",
    "load_config",
    "RenderContext",
    "Signal",
    "Interrupted",
    "Filter",
    "FunctionFilter",
    "as_filter",
    "check_params",
    "get_filter",
    "register_filter",
    "Tag",
    "IterationTag",
    "get_tag",
    "register_tag",
    "LiquidError",
    "UnknownFilterError",
    "UnknownTagError",
    "FilterArityError",
    "ArityError",
    "ParameterIndexError",
]
