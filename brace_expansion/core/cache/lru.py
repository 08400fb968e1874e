from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from brace_expansion.core.expand.cache_config import CacheConfig


logger = logging.getLogger(__name__)

V = TypeVar("V")


@dataclass(frozen=True)
class CacheStats:
    name: str
    capacity: int
    size: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total else 0.0


class LRUCache(Generic[V]):
    """Bounded string-keyed map that evicts the least recently used entry.

    get() promotes a hit to most recently used. set() on an existing key
    replaces the value and promotes it; on a new key it evicts the oldest
    entry first when the cache is full.
    """

    def __init__(self, capacity: int, name: str = "cache") -> None:
        if capacity < 1:
            raise ValueError(f"{name}: capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self.name = name
        self._data: OrderedDict[str, V] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> Optional[V]:
        with self._lock:
            try:
                value = self._data[key]
            except KeyError:
                self._misses += 1
                return None
            self._data.move_to_end(key)
            self._hits += 1
            return value

    def set(self, key: str, value: V) -> None:
        with self._lock:
            if key in self._data:
                self._data.move_to_end(key)
            elif len(self._data) >= self.capacity:
                self._data.popitem(last=False)
            self._data[key] = value

    def clear(self) -> None:
        with self._lock:
            self._data.clear()
            self._hits = 0
            self._misses = 0

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._data.keys())

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                name=self.name,
                capacity=self.capacity,
                size=len(self._data),
                hits=self._hits,
                misses=self._misses,
            )

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._data

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)


class CacheTier:
    """The three independent caches owned by one expander."""

    def __init__(self, config: CacheConfig | None = None) -> None:
        config = config or CacheConfig()
        self.config = config
        self.results: LRUCache[list[str]] = LRUCache(config.results, name="results")
        self.comma_parts: LRUCache[list[str]] = LRUCache(config.comma_parts, name="comma_parts")
        self.sub_expansions: LRUCache[list[str]] = LRUCache(
            config.sub_expansions, name="sub_expansions"
        )

    def clear(self) -> None:
        self.results.clear()
        self.comma_parts.clear()
        self.sub_expansions.clear()
        logger.debug("cleared expansion caches")

    def stats(self) -> list[CacheStats]:
        return [c.stats() for c in (self.results, self.comma_parts, self.sub_expansions)]
