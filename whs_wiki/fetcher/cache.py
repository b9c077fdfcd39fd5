"""Disk-based caching for cross-lingual service responses."""

import os
from typing import Any, Callable, Optional

import diskcache


class WikiCache:
    """Persistent key/value cache backed by diskcache."""

    def __init__(self, cache_dir: str = "./cache", ttl_days: Optional[int] = None):
        """Initialize cache.

        Args:
            cache_dir: Directory to store cache files.
            ttl_days: Time-to-live for cached items in days (None keeps
                them until the cache is cleared).
        """
        os.makedirs(cache_dir, exist_ok=True)
        self.cache = diskcache.Cache(cache_dir)
        self.ttl = ttl_days * 86400 if ttl_days else None

    def get(self, key: str) -> Optional[Any]:
        return self.cache.get(key)

    def set(self, key: str, value: Any) -> None:
        self.cache.set(key, value, expire=self.ttl)

    def get_or_fetch(
        self, key: str, fetch_fn: Callable[[], Any], refresh: bool = False
    ) -> Any:
        """Get cached value or fetch and cache it.

        Args:
            key: Cache key.
            fetch_fn: Function to call if value not in cache.
            refresh: If True, ignore the cached value.

        Returns:
            Cached or freshly fetched value.
        """
        if not refresh:
            value = self.get(key)
            if value is not None:
                return value

        value = fetch_fn()
        if value is not None:
            self.set(key, value)
        return value

    def clear(self) -> None:
        self.cache.clear()

    def close(self) -> None:
        self.cache.close()
