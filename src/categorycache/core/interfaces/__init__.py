"""Core interfaces (Protocol classes) for categorycache."""

from categorycache.core.interfaces.cache_backend import ICacheStore
from categorycache.core.interfaces.category_store import ICategoryStore

__all__ = [
    "ICacheStore",
    "ICategoryStore",
]
