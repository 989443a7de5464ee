"""
Общий контейнер реестров: наборы по умолчанию, оверлеи, реентерабельность.
"""

import pytest

from lq import Engine, FunctionFilter, Tag
from lq.errors import UnknownFilterError
from lq.filters import STANDARD_FILTERS, new_filter_registry, thread_filters
from lq.registry import PerThreadRegistry, Registry, build_default_set
from lq.tags import STANDARD_TAGS
from tests.infrastructure import run_in_thread, tag


def test_default_sets_are_read_only():
    with pytest.raises(TypeError):
        STANDARD_FILTERS["upcase"] = FunctionFilter("upcase", lambda v: v)
    with pytest.raises(TypeError):
        STANDARD_TAGS["if"] = None


def test_default_set_rejects_duplicates():
    with pytest.raises(ValueError):
        build_default_set([FunctionFilter("x", len), FunctionFilter("x", len)])


def test_overlay_does_not_change_defaults():
    registry = new_filter_registry()
    custom = FunctionFilter("upcase", lambda v: v)
    registry.register(custom)
    assert registry.get("upcase") is custom
    assert STANDARD_FILTERS["upcase"] is not custom
    assert new_filter_registry().get("upcase") is STANDARD_FILTERS["upcase"]


def test_registry_basics():
    registry = Registry("thing", {}, UnknownFilterError)
    assert len(registry) == 0
    assert registry.find("a") is None
    registry.register(FunctionFilter("a", len))
    assert "a" in registry
    assert registry.names() == ["a"]
    with pytest.raises(UnknownFilterError):
        registry.get("b")


def test_per_thread_registry_is_created_once_per_thread():
    created = []

    def factory():
        registry = Registry("thing", {}, UnknownFilterError)
        created.append(registry)
        return registry

    per_thread = PerThreadRegistry(factory)

    def touch_twice():
        return per_thread.current() is per_thread.current()

    assert run_in_thread(touch_twice) is True
    assert run_in_thread(touch_twice) is True
    assert len(created) == 2


def test_thread_registry_is_stable_within_thread():
    assert run_in_thread(lambda: thread_filters() is thread_filters()) is True


class RegisteringTag(Tag):
    """Во время рендера регистрирует производный фильтр для каждого известного."""
    name = "register_all"

    def render(self, context, *nodes):
        registry = context.engine.filters
        for name in registry.names():
            registry.register(FunctionFilter(name + "_copy", lambda v: v))
        return str(len(registry))


def test_reentrant_registration_during_render():
    engine = Engine()
    before = len(engine.filters)
    engine.register_tag(RegisteringTag())
    assert engine.render(tag(engine, "register_all")) == str(before * 2)
    assert "upcase_copy" in engine.filters
