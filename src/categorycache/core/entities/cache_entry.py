"""Cache entry entity."""

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import Generic, TypeVar

from categorycache.core.entities.cache_config import CacheEntryOptions

V = TypeVar("V")


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    """Immutable cache entry value object.

    Times are expressed in seconds of the owning store's timer, which is
    monotonic by default, so entries are unaffected by wall-clock changes.
    """

    key: str
    value: V
    created_at: float
    sliding_expiration: timedelta | None = None
    absolute_expiration: timedelta | None = None

    @property
    def absolute_deadline(self) -> float:
        """Time after which the entry is dead regardless of access.

        Returns:
            The deadline in timer seconds, or ``math.inf`` if unbounded.
        """
        if self.absolute_expiration is None:
            return math.inf
        return self.created_at + self.absolute_expiration.total_seconds()

    def expires_at(self, now: float) -> float:
        """Calculate the expiration time if the entry is touched at ``now``.

        The sliding window restarts at ``now`` but is capped by the
        absolute deadline.

        Args:
            now: Current timer value.

        Returns:
            The expiration time in timer seconds.
        """
        deadline = self.absolute_deadline
        if self.sliding_expiration is None:
            return deadline
        return min(now + self.sliding_expiration.total_seconds(), deadline)

    @classmethod
    def create(
        cls,
        key: str,
        value: V,
        now: float,
        options: CacheEntryOptions | None = None,
    ) -> "CacheEntry[V]":
        """Factory method to create a new cache entry.

        Args:
            key: The cache key.
            value: The value to cache.
            now: Current timer value; starts both expiration clocks.
            options: Expiration policy. Uses the default policy if None.

        Returns:
            A new CacheEntry instance.
        """
        options = options or CacheEntryOptions()
        return cls(
            key=key,
            value=value,
            created_at=now,
            sliding_expiration=options.sliding_expiration,
            absolute_expiration=options.absolute_expiration,
        )
