"""In-process implementation of CacheStore.

Entries live in a plain dict keyed by cache key, alongside the time they
were stored. Useful for tests and single long-lived processes; nothing
survives a restart.
"""

import copy
import time
from collections.abc import Callable
from typing import Any

from news_proxy.entities import CacheLookup, CacheWrite


class MemoryCacheRepository:
    """Dictionary-backed cache store."""

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._store: dict[str, tuple[float, dict[str, Any]]] = {}
        self._clock = clock

    def get(self, key: str, ttl: int) -> CacheLookup:
        entry = self._store.get(key)
        if entry is None:
            return CacheLookup.miss("absent")
        stored_at, payload = entry
        age = self._clock() - stored_at
        if age > ttl:
            self._store.pop(key, None)
            return CacheLookup.miss("expired")
        return CacheLookup.found(copy.deepcopy(payload), age)

    def set(self, key: str, payload: dict[str, Any]) -> CacheWrite:
        self._store[key] = (self._clock(), copy.deepcopy(payload))
        return CacheWrite.stored()

    def delete(self, key: str) -> bool:
        return self._store.pop(key, None) is not None

    def clear(self) -> int:
        count = len(self._store)
        self._store.clear()
        return count

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._store)

    def __contains__(self, key: object) -> bool:
        return key in self._store
