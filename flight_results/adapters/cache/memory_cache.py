"""Thread-safe in-memory cache for sorted itinerary sequences.

Entries are evicted oldest-first once ``max_size`` is reached. Values
never expire: a key already encodes everything the value depends on.
"""

from __future__ import annotations

import logging
import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class InMemoryCache(Generic[T]):
    """Thread-safe in-memory cache with a bounded size.

    This cache implements the CachePort protocol.

    Attributes:
        max_size: Maximum number of entries (None = unlimited)
        name: Cache name for logging

    Example:
        cache = InMemoryCache[tuple](name="sorted", max_size=32)
        ordered = cache.get_or_compute(key, lambda: sort_itineraries(items, "price"))
    """

    max_size: Optional[int] = None
    name: str = "cache"

    _store: "OrderedDict[Hashable, Any]" = field(default_factory=OrderedDict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    # Statistics
    _hits: int = field(default=0, repr=False)
    _misses: int = field(default=0, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(f"{__name__}.{self.name}")

    def get(self, key: Hashable) -> Optional[T]:
        with self._lock:
            if key not in self._store:
                self._misses += 1
                return None
            self._hits += 1
            return self._store[key]

    def set(self, key: Hashable, value: T) -> None:
        """Set a value, evicting the oldest entry when full."""
        with self._lock:
            if key in self._store:
                self._store[key] = value
                return

            if self.max_size is not None and len(self._store) >= self.max_size:
                oldest_key, _ = self._store.popitem(last=False)
                self._logger.debug(
                    "Cache evicted entry",
                    extra={"key": oldest_key, "reason": "max_size"},
                )

            self._store[key] = value
            self._logger.debug("Cache entry set", extra={"key": key})

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        The computation runs outside the lock; two threads missing on the
        same key both compute, and the values are equal.
        """
        with self._lock:
            if key in self._store:
                self._hits += 1
                self._logger.debug("Cache hit", extra={"key": key})
                return self._store[key]
            self._misses += 1

        self._logger.debug("Cache miss, computing", extra={"key": key})
        computed = compute_fn()
        self.set(key, computed)
        return computed

    def clear(self) -> int:
        """Clear all entries and reset statistics.

        Returns:
            Number of entries that were cleared.
        """
        with self._lock:
            count = len(self._store)
            self._store.clear()
            self._hits = 0
            self._misses = 0
            self._logger.info("Cache cleared", extra={"entries_cleared": count})
            return count

    def size(self) -> int:
        with self._lock:
            return len(self._store)

    def stats(self) -> Dict[str, Any]:
        """Return hit/miss counts and size."""
        with self._lock:
            total = self._hits + self._misses
            hit_rate = (self._hits / total * 100) if total > 0 else 0.0
            return {
                "size": len(self._store),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate_percent": round(hit_rate, 1),
            }
