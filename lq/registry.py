"""
Реестры фильтров и тегов по имени.

Реестр это изменяемый оверлей, засеянный из неизменяемого набора
по умолчанию. Набор по умолчанию строится один раз при импорте и
разделяется всеми потоками только для чтения; у каждого потока
(или движка) свой оверлей.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType
from typing import Callable, Dict, Generic, Iterable, List, Mapping, Optional, Protocol, TypeVar

logger = logging.getLogger(__name__)


class Named(Protocol):
    name: str


T = TypeVar("T", bound=Named)


def validate_name(name: object) -> str:
    """Имя это непустая строка; регистр значим."""
    if not isinstance(name, str) or not name:
        raise ValueError(f"Name must be a non-empty string, got {name!r}")
    return name


def build_default_set(items: Iterable[T]) -> Mapping[str, T]:
    """
    Построить словарь имя → элемент только для чтения.

    Raises:
        ValueError: Если у двух элементов одинаковое имя
    """
    table: Dict[str, T] = {}
    for item in items:
        name = validate_name(item.name)
        if name in table:
            raise ValueError(f"Duplicate name '{name}' in default set")
        table[name] = item
    return MappingProxyType(table)


class Registry(Generic[T]):
    """
    Изменяемый словарь имя → элемент, побеждает последняя регистрация.

    Защищен реентерабельной блокировкой: рендер в потоке-владельце может
    регистрировать и искать элементы, обходя реестр.
    """

    def __init__(
        self,
        kind: str,
        defaults: Mapping[str, T],
        missing: Callable[[str], Exception],
    ):
        self.kind = kind
        self._missing = missing
        self._lock = threading.RLock()
        self._items: Dict[str, T] = dict(defaults)
        logger.debug(f"{kind} registry seeded with {len(self._items)} entries")

    def register(self, item: T) -> None:
        name = validate_name(item.name)
        with self._lock:
            if name in self._items:
                logger.debug(f"{self.kind} '{name}' overrides existing entry")
            self._items[name] = item
        logger.debug(f"Registered {self.kind}: {name}")

    def get(self, name: str) -> T:
        with self._lock:
            item = self._items.get(name)
        if item is None:
            raise self._missing(name)
        return item

    def find(self, name: str) -> Optional[T]:
        with self._lock:
            return self._items.get(name)

    def names(self) -> List[str]:
        """Снимок зарегистрированных имен; его можно обходить во время регистрации."""
        with self._lock:
            return sorted(self._items)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)


class PerThreadRegistry(Generic[T]):
    """
    Свой Registry на каждый поток выполнения, создается лениво при первом обращении.

    Регистрации в одном потоке не видны другому; пулы воркеров должны
    регистрировать свои расширения в каждом воркере.
    """

    def __init__(self, factory: Callable[[], Registry[T]]):
        self._factory = factory
        self._local = threading.local()

    def current(self) -> Registry[T]:
        registry = getattr(self._local, "registry", None)
        if registry is None:
            registry = self._factory()
            self._local.registry = registry
            logger.debug(
                f"Created {registry.kind} registry for thread {threading.current_thread().name}"
            )
        return registry


__all__ = ["Named", "validate_name", "build_default_set", "Registry", "PerThreadRegistry"]
