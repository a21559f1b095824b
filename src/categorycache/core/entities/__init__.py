"""Domain entities for categorycache."""

from categorycache.core.entities.cache_config import (
    DEFAULT_ABSOLUTE_EXPIRATION,
    DEFAULT_SLIDING_EXPIRATION,
    CacheConfig,
    CacheEntryOptions,
)
from categorycache.core.entities.cache_entry import CacheEntry
from categorycache.core.entities.cache_key import CategoryCacheKeys
from categorycache.core.entities.category import Category
from categorycache.core.entities.commands import (
    CreateCategoryCommand,
    UpdateCategoryCommand,
)
from categorycache.core.entities.views import (
    CategoryDetail,
    CategoryListItem,
    ResponseDto,
)

__all__ = [
    "Category",
    "CategoryListItem",
    "CategoryDetail",
    "ResponseDto",
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
    "CacheEntry",
    "CacheEntryOptions",
    "CacheConfig",
    "CategoryCacheKeys",
    "DEFAULT_SLIDING_EXPIRATION",
    "DEFAULT_ABSOLUTE_EXPIRATION",
]
