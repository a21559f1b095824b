"""Category store implementations."""

from categorycache.infrastructure.stores.sqlite import SqliteCategoryStore

__all__ = ["SqliteCategoryStore"]
