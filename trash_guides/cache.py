"""In-memory TTL caches for fetched guide documents."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

from .types import CFGroup, CustomFormat, Naming, QualityProfile, QualitySize

T = TypeVar("T")

DEFAULT_TTL = 3600.0  # 1 hour


@dataclass
class CacheEntry(Generic[T]):
    data: T
    timestamp: float


class TTLCache(Generic[T]):
    """
    Key/value store whose entries expire ``ttl`` seconds after being written.

    Staleness is checked on read only; an expired entry stays in place
    until it is overwritten or the store is cleared.
    """

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}
        self._hits = 0
        self._misses = 0

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> T | None:
        entry = self._entries.get(key)
        if entry is not None and (self._clock() - entry.timestamp) < self._ttl:
            self._hits += 1
            return entry.data
        self._misses += 1
        return None

    def set(self, key: str, data: T) -> None:
        self._entries[key] = CacheEntry(data=data, timestamp=self._clock())

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)

    def get_stats(self) -> dict[str, int]:
        return {"entries": len(self._entries), "hits": self._hits, "misses": self._misses}


class TrashCache:
    """One TTLCache per resource kind, plus the two name-list caches."""

    def __init__(self, ttl: float = DEFAULT_TTL, clock: Callable[[], float] = time.monotonic) -> None:
        self.profiles: TTLCache[QualityProfile] = TTLCache(ttl, clock)
        self.profile_lists: TTLCache[list[str]] = TTLCache(ttl, clock)
        self.custom_formats: TTLCache[CustomFormat] = TTLCache(ttl, clock)
        self.cf_lists: TTLCache[list[str]] = TTLCache(ttl, clock)
        self.cf_groups: TTLCache[CFGroup] = TTLCache(ttl, clock)
        self.quality_sizes: TTLCache[QualitySize] = TTLCache(ttl, clock)
        self.naming: TTLCache[Naming] = TTLCache(ttl, clock)

    def _stores(self) -> dict[str, TTLCache[Any]]:
        return {
            "profiles": self.profiles,
            "profile_lists": self.profile_lists,
            "custom_formats": self.custom_formats,
            "cf_lists": self.cf_lists,
            "cf_groups": self.cf_groups,
            "quality_sizes": self.quality_sizes,
            "naming": self.naming,
        }

    def clear(self) -> None:
        """Drop every entry in every store."""
        for store in self._stores().values():
            store.clear()

    def get_stats(self) -> dict[str, dict[str, int]]:
        return {name: store.get_stats() for name, store in self._stores().items()}
