"""Null cache implementation.

Always misses. Used when FLR_SORT_CACHE_ENABLED=false and in tests that
must not depend on state left behind by earlier calls.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Generic, Hashable, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - every lookup recomputes.

    Implements the CachePort protocol without storing anything.
    """

    name: str = "null"

    def get(self, key: Hashable) -> Optional[T]:
        return None

    def set(self, key: Hashable, value: T) -> None:
        pass

    def get_or_compute(self, key: Hashable, compute_fn: Callable[[], T]) -> T:
        return compute_fn()

    def clear(self) -> int:
        return 0

    def size(self) -> int:
        return 0

    def stats(self) -> Dict[str, int]:
        return {"size": 0, "hits": 0, "misses": 0, "hit_rate_percent": 0}
