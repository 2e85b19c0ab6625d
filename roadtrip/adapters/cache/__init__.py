"""Cache adapters - Implementations of the cache port.

Available implementations:
- InMemoryCache: Thread-safe dictionary cache with optional size bound
- NullCache: Always misses (caching disabled)
"""

from .memory_cache import InMemoryCache
from .null_cache import NullCache

__all__ = ["InMemoryCache", "NullCache"]
