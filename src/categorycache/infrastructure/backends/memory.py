"""In-memory cache store implementation."""

import threading
import time
from collections.abc import Callable
from typing import Generic, TypeVar

from cachetools import TLRUCache  # type: ignore[import-untyped]

from categorycache.core.entities.cache_config import CacheEntryOptions
from categorycache.core.entities.cache_entry import CacheEntry

V = TypeVar("V")


def _time_to_use(key: str, entry: CacheEntry[V], now: float) -> float:
    return entry.expires_at(now)


class InMemoryCacheStore(Generic[V]):
    """In-memory cache store with sliding and absolute expiration.

    Suitable for single-process deployments. Uses a cachetools
    ``TLRUCache`` whose per-item expiry is recomputed on every write, so a
    read refreshes the sliding window by re-inserting the entry. The
    absolute deadline is fixed when the entry is created and caps every
    refresh. Expired entries are dropped lazily on access and on writes,
    or explicitly with :meth:`expire`.

    All operations hold an internal lock, so one instance can be shared
    by concurrent tasks and threads.
    """

    def __init__(
        self,
        maxsize: int = 1024,
        default_options: CacheEntryOptions | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        """Initialize the in-memory cache store.

        Args:
            maxsize: Maximum number of entries; least recently used
                entries are evicted beyond it.
            default_options: Expiration policy used when ``set`` is called
                without options.
            timer: Clock returning seconds. Tests inject a fake clock.
        """
        self._maxsize = maxsize
        self._default_options = default_options or CacheEntryOptions()
        self._cache: TLRUCache[str, CacheEntry[V]] = TLRUCache(
            maxsize=maxsize,
            ttu=_time_to_use,
            timer=timer,
        )
        self._lock = threading.Lock()

    async def get(self, key: str) -> V | None:
        """Retrieve a cached value and refresh its sliding expiration.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        with self._lock:
            entry = self._cache.get(key)
            if entry is None:
                return None
            # Re-inserting recomputes the expiry from the current time.
            self._cache[key] = entry
            return entry.value

    async def set(
        self,
        key: str,
        value: V,
        options: CacheEntryOptions | None = None,
    ) -> None:
        """Store a value, restarting both expiration clocks.

        Args:
            key: The cache key.
            value: The value to store.
            options: Expiration policy. If None, uses the store default.
        """
        with self._lock:
            entry = CacheEntry.create(
                key=key,
                value=value,
                now=self._cache.timer(),
                options=options or self._default_options,
            )
            self._cache[key] = entry

    async def delete(self, key: str) -> bool:
        """Delete cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry existed and was deleted, False otherwise.
        """
        with self._lock:
            if key not in self._cache:
                return False
            try:
                del self._cache[key]
                return True
            except KeyError:
                # Expired between the membership test and the delete.
                return False

    async def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists, without refreshing it.

        Args:
            key: The cache key to check.

        Returns:
            True if the key exists, False otherwise.
        """
        with self._lock:
            return key in self._cache

    async def clear(self) -> None:
        """Clear all cached values."""
        with self._lock:
            self._cache.clear()

    def expire(self) -> int:
        """Drop every expired entry.

        Returns:
            Number of entries removed.
        """
        with self._lock:
            before = len(self._cache)
            self._cache.expire()
            return before - len(self._cache)

    def __len__(self) -> int:
        """Return the number of stored entries, including unswept expired ones."""
        with self._lock:
            return len(self._cache)

    @property
    def maxsize(self) -> int:
        """Return the maximum size of the cache."""
        return self._maxsize

    @property
    def default_options(self) -> CacheEntryOptions:
        return self._default_options
