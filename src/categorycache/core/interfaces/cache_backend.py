"""Cache store interface."""

from typing import Protocol, TypeVar

from categorycache.core.entities.cache_config import CacheEntryOptions

V = TypeVar("V")


class ICacheStore(Protocol[V]):
    """Contract for cache stores holding values of a single shape.

    Implementations must be safe to call concurrently from multiple
    tasks and threads without caller-side locking. Methods are async so
    in-memory and remote stores share the same contract. None of them
    raise for a missing key.
    """

    async def get(self, key: str) -> V | None:
        """Retrieve a cached value and refresh its sliding expiration.

        Args:
            key: The cache key to retrieve.

        Returns:
            The cached value, or None if not found or expired.
        """
        ...

    async def set(
        self,
        key: str,
        value: V,
        options: CacheEntryOptions | None = None,
    ) -> None:
        """Store a value, replacing any previous entry at the key.

        Args:
            key: The cache key.
            value: The value to store.
            options: Expiration policy. If None, uses the store default.
        """
        ...

    async def delete(self, key: str) -> bool:
        """Delete a cached value.

        Args:
            key: The cache key to delete.

        Returns:
            True if a live entry existed and was deleted, False otherwise.
        """
        ...

    async def exists(self, key: str) -> bool:
        """Check if an unexpired entry exists, without refreshing it."""
        ...

    async def clear(self) -> None:
        """Clear all cached values."""
        ...
