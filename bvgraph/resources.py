"""A registry that keeps exactly one resource per key, created on demand."""

from __future__ import annotations

import threading
from typing import Callable, Generic, Hashable, TypeVar

K = TypeVar("K", bound=Hashable)
R = TypeVar("R")


class ResourceManager(Generic[K, R]):
    """Creates resources with ``factory(key)`` the first time a key is asked for."""

    def __init__(self, factory: Callable[[K], R]) -> None:
        self._factory = factory
        self._registry: dict[K, R] = {}
        self._lock = threading.RLock()

    def get(self, key: K) -> R:
        """Return the resource for ``key``, creating it if there is none yet."""
        with self._lock:
            if key not in self._registry:
                self._registry[key] = self._factory(key)
            return self._registry[key]

    def close(self) -> None:
        """Forget every resource, closing those that have a ``close`` method."""
        with self._lock:
            resources = list(self._registry.values())
            self._registry.clear()
        for resource in resources:
            closer = getattr(resource, "close", None)
            if callable(closer):
                closer()

    def __contains__(self, key: object) -> bool:
        return key in self._registry

    def __len__(self) -> int:
        return len(self._registry)

    def __enter__(self) -> ResourceManager[K, R]:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()