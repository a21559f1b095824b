"""Cache configuration entities."""

from dataclasses import dataclass, field
from datetime import timedelta

DEFAULT_SLIDING_EXPIRATION = timedelta(minutes=10)
DEFAULT_ABSOLUTE_EXPIRATION = timedelta(hours=24)


@dataclass(frozen=True)
class CacheEntryOptions:
    """Expiration policy applied to a cache entry.

    An entry is dropped once ``sliding_expiration`` has elapsed since it was
    last read or written, or once ``absolute_expiration`` has elapsed since
    it was written, whichever comes first. ``None`` disables that bound.
    """

    sliding_expiration: timedelta | None = DEFAULT_SLIDING_EXPIRATION
    absolute_expiration: timedelta | None = DEFAULT_ABSOLUTE_EXPIRATION

    def __post_init__(self) -> None:
        """Reject non-positive durations."""
        for name in ("sliding_expiration", "absolute_expiration"):
            value = getattr(self, name)
            if value is not None and value <= timedelta(0):
                raise ValueError(f"{name} must be positive, got {value}")


@dataclass
class CacheConfig:
    """Category cache configuration.

    Holds the key namespace, the size bound of each in-memory store and
    the expiration policy used when populating entries.
    """

    enabled: bool = True
    max_size: int = 1024
    key_prefix: str = "category"
    all_key: str = "all-categories"
    entry_options: CacheEntryOptions = field(default_factory=CacheEntryOptions)

    def __post_init__(self) -> None:
        if self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
