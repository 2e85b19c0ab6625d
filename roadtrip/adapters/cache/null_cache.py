"""Null cache implementation.

This cache always misses. The container installs it when predecessor
caching is disabled in the routing configuration, and tests use it to
observe every shortest-path computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class NullCache(Generic[T]):
    """No-op cache - always misses.

    Implements the CachePort protocol without storing anything: every
    get_or_compute() calls the compute function.
    """

    name: str = "null"

    def get(self, key: str) -> Optional[T]:
        return None

    def set(self, key: str, value: T) -> None:
        pass

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Always computes."""
        return compute_fn()

    def clear(self) -> int:
        return 0
