"""TTL cache for parsed catalog records."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol, TypeVar

T = TypeVar("T")


class Cache(Protocol):
    """Cache interface for catalog data."""

    def get(self, key: str) -> object | None:
        """Return a cached value if present and not expired."""

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value for ``ttl_seconds``."""

    def clear(self) -> None:
        """Drop every cached value."""


@dataclass
class _CacheEntry:
    value: object
    expires_at: float


@dataclass
class InMemoryCache(Cache):
    """Per-instance in-memory cache with monotonic expiry."""

    clock: Callable[[], float] = time.monotonic
    _entries: dict[str, _CacheEntry] = field(default_factory=dict)

    def get(self, key: str) -> object | None:
        """Return a cached value if it hasn't expired."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.clock() >= entry.expires_at:
            self._entries.pop(key, None)
            return None
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> None:
        """Store a value with a TTL."""
        self._entries[key] = _CacheEntry(
            value=value, expires_at=self.clock() + ttl_seconds
        )

    def clear(self) -> None:
        """Drop every cached value."""
        self._entries.clear()


def get_or_load(cache: Cache, key: str, loader: Callable[[], T], ttl_seconds: int) -> T:
    """Return the cached value for ``key``, loading and storing it on a miss."""
    cached = cache.get(key)
    if cached is not None:
        return cached  # type: ignore[return-value]
    value = loader()
    cache.set(key, value, ttl_seconds=ttl_seconds)
    return value
