"""Cache port - Injectable caching abstraction.

Used by the analysis service to memoize whole-graph analyses
(centrality, topological order) keyed by graph revision.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol, TypeVar

T = TypeVar("T")


class CachePort(Protocol[T]):
    """Port for caching.

    Implementations:
    - adapters/cache/memory_cache.py (InMemoryCache) - Production
    - adapters/cache/null_cache.py (NullCache) - Testing
    """

    def get(self, key: str) -> Optional[T]:
        """Get a value from the cache, or None if not found."""
        ...

    def set(self, key: str, value: T) -> None:
        """Set a value in the cache."""
        ...

    def get_or_compute(self, key: str, compute_fn: Callable[[], T]) -> T:
        """Get from cache or compute and cache the value.

        Args:
            key: The cache key.
            compute_fn: Function to compute the value if not cached.

        Returns:
            The cached or computed value.
        """
        ...

    def clear(self) -> int:
        """Clear all entries, returning how many were dropped."""
        ...

    def size(self) -> int:
        """Return the number of entries in the cache."""
        ...
