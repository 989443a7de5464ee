"""
Теги: контракт, стандартный набор и реестр тегов на поток.
"""

from __future__ import annotations

from typing import Mapping

from .base import IterationTag, Tag, split_attributes
from .control import Case, If, Unless
from .loops import For, Tablerow
from .misc import Comment, Include, Raw
from .variables import Assign, Capture, Cycle
from ..errors import UnknownTagError
from ..registry import PerThreadRegistry, Registry, build_default_set

#: Стандартные теги без состояния, общие для всех потоков и движков
STANDARD_TAGS: Mapping[str, Tag] = build_default_set([
    Assign(),
    Case(),
    Capture(),
    Comment(),
    Cycle(),
    For(),
    If(),
    Include(),
    Raw(),
    Tablerow(),
    Unless(),
])


def new_tag_registry() -> Registry[Tag]:
    """Новый реестр, засеянный стандартными тегами."""
    return Registry("tag", STANDARD_TAGS, UnknownTagError)


_THREAD_TAGS: PerThreadRegistry[Tag] = PerThreadRegistry(new_tag_registry)


def thread_tags() -> Registry[Tag]:
    """Реестр тегов вызывающего потока."""
    return _THREAD_TAGS.current()


def get_tag(name: str) -> Tag:
    """
    Получить тег по имени из реестра вызывающего потока.

    Raises:
        UnknownTagError: Если под этим именем нет тега
    """
    return thread_tags().get(name)


def register_tag(tag: Tag) -> None:
    """Зарегистрировать тег в вызывающем потоке, заменив одноименный."""
    thread_tags().register(tag)


__all__ = [
    "Tag",
    "IterationTag",
    "split_attributes",
    "STANDARD_TAGS",
    "new_tag_registry",
    "thread_tags",
    "get_tag",
    "register_tag",
]
