"""categorycache - category CRUD behind a read-through in-memory cache.

Reads are served from an in-memory cache with sliding and absolute
expiration (10 minutes and 24 hours by default); on a miss the category
store is queried and the result cached. Writes commit to the store and
then evict the affected entries, so a read that starts after a write
never sees data from before it.

Example:
    from categorycache import (
        CreateCategoryCommand,
        SqliteCategoryStore,
        UpdateCategoryCommand,
        create_category_service,
    )

    store = await SqliteCategoryStore.connect("categories.db")
    service = create_category_service(store)

    created = await service.create_category(
        CreateCategoryCommand(name="Tech", description="Gadgets")
    )
    category_id = created.data

    await service.get_category(category_id)      # miss, then cached
    await service.update_category(
        category_id,
        UpdateCategoryCommand(id=category_id, name="Tech2", description=""),
    )                                             # evicts item and list
    await service.list_categories()               # reloaded from the store
"""

from categorycache.core.entities import (
    DEFAULT_ABSOLUTE_EXPIRATION,
    DEFAULT_SLIDING_EXPIRATION,
    CacheConfig,
    CacheEntry,
    CacheEntryOptions,
    Category,
    CategoryCacheKeys,
    CategoryDetail,
    CategoryListItem,
    CreateCategoryCommand,
    ResponseDto,
    UpdateCategoryCommand,
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
from categorycache.factory import create_category_service
from categorycache.infrastructure import InMemoryCacheStore, SqliteCategoryStore

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Entities
    "Category",
    "CategoryListItem",
    "CategoryDetail",
    "ResponseDto",
    "CreateCategoryCommand",
    "UpdateCategoryCommand",
    # Cache entities
    "CacheConfig",
    "CacheEntry",
    "CacheEntryOptions",
    "CategoryCacheKeys",
    "DEFAULT_SLIDING_EXPIRATION",
    "DEFAULT_ABSOLUTE_EXPIRATION",
    # Errors
    "CategoryCacheError",
    "ValidationError",
    "BadRequestError",
    "NotFoundError",
    "StoreError",
    # Core interfaces
    "ICacheStore",
    "ICategoryStore",
    # Core services
    "CategoryService",
    "create_category_service",
    # Infrastructure implementations
    "InMemoryCacheStore",
    "SqliteCategoryStore",
]
