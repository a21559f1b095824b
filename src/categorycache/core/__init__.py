"""Core domain layer for categorycache."""

from categorycache.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheEntryOptions,
    Category,
    CategoryCacheKeys,
)
from categorycache.core.exceptions import (
    BadRequestError,
    CategoryCacheError,
    NotFoundError,
    StoreError,
    ValidationError,
)
from categorycache.core.interfaces import ICacheStore, ICategoryStore
from categorycache.core.services import CategoryService

__all__ = [
    # Entities
    "Category",
    "CacheConfig",
    "CacheEntry",
    "CacheEntryOptions",
    "CategoryCacheKeys",
    # Errors
    "CategoryCacheError",
    "ValidationError",
    "BadRequestError",
    "NotFoundError",
    "StoreError",
    # Interfaces
    "ICacheStore",
    "ICategoryStore",
    # Services
    "CategoryService",
]
