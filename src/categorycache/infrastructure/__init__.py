"""Infrastructure layer implementations for categorycache."""

from categorycache.infrastructure.backends import InMemoryCacheStore
from categorycache.infrastructure.stores import SqliteCategoryStore

__all__ = [
    "InMemoryCacheStore",
    "SqliteCategoryStore",
]
