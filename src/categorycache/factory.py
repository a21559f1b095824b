"""Wiring helpers."""

import time
from collections.abc import Callable

from categorycache.core.entities.cache_config import CacheConfig
from categorycache.core.interfaces.category_store import ICategoryStore
from categorycache.core.services.category_service import CategoryService
from categorycache.infrastructure.backends.memory import InMemoryCacheStore


def create_category_service(
    store: ICategoryStore,
    config: CacheConfig | None = None,
    timer: Callable[[], float] = time.monotonic,
) -> CategoryService:
    """Build a CategoryService with in-memory caches sized from ``config``.

    Args:
        store: The persistence gateway.
        config: Optional cache configuration. Uses defaults if not provided.
        timer: Clock shared by both caches.

    Returns:
        A ready to use CategoryService.

    Example:
        store = await SqliteCategoryStore.connect("categories.db")
        service = create_category_service(store)
        response = await service.create_category(
            CreateCategoryCommand(name="Tech", description="Gadgets")
        )
    """
    config = config or CacheConfig()
    return CategoryService(
        store=store,
        list_cache=InMemoryCacheStore(
            maxsize=config.max_size,
            default_options=config.entry_options,
            timer=timer,
        ),
        item_cache=InMemoryCacheStore(
            maxsize=config.max_size,
            default_options=config.entry_options,
            timer=timer,
        ),
        config=config,
    )
