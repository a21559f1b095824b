"""Category service - read-through cache over the category store."""

import asyncio
import logging
import weakref
from collections.abc import Awaitable, Callable
from typing import TypeVar, cast

from categorycache.core.entities.cache_config import CacheConfig
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
from categorycache.core.exceptions import BadRequestError, NotFoundError, StoreError
from categorycache.core.interfaces.cache_backend import ICacheStore
from categorycache.core.interfaces.category_store import ICategoryStore
from categorycache.core.services import messages

logger = logging.getLogger(__name__)

T = TypeVar("T")
V = TypeVar("V")

CategoryList = tuple[CategoryListItem, ...]


class CategoryService:
    """Domain service for category CRUD behind a read-through cache.

    Reads probe the cache and fall back to the store, populating the
    cache on the way out. Writes go to the store first and evict the
    affected keys only after the store has committed; a failed write
    leaves the cache untouched.

    List and detail views live in separate typed caches. Concurrent
    misses on one key share a single store fetch, and a fetch that
    overlaps an invalidation is returned to its caller but not cached.
    """

    def __init__(
        self,
        store: ICategoryStore,
        list_cache: ICacheStore[CategoryList],
        item_cache: ICacheStore[CategoryDetail],
        config: CacheConfig | None = None,
    ) -> None:
        """Initialize the category service.

        Args:
            store: The persistence gateway.
            list_cache: Cache holding the "all categories" view.
            item_cache: Cache holding single-category views.
            config: Optional cache configuration. Uses defaults if not provided.
        """
        self._store = store
        self._list_cache = list_cache
        self._item_cache = item_cache
        self._config = config or CacheConfig()
        self._keys = CategoryCacheKeys(
            prefix=self._config.key_prefix,
            all_key=self._config.all_key,
        )
        self._load_locks: weakref.WeakValueDictionary[str, asyncio.Lock] = (
            weakref.WeakValueDictionary()
        )
        # Bumped by every invalidation; a load only populates the cache if
        # the epoch it started in is still current.
        self._epoch = 0
        # Writes that keep running after their caller was cancelled.
        self._writes: set[asyncio.Task] = set()

        # Statistics
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> CacheConfig:
        """Get the cache configuration."""
        return self._config

    @property
    def keys(self) -> CategoryCacheKeys:
        return self._keys

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total requests.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    async def list_categories(self) -> CategoryList:
        """Return every category as ``{id, name}`` items."""
        result = await self._read_through(
            self._list_cache, self._keys.all_key, self._load_all
        )
        return cast(CategoryList, result)

    async def get_category(self, category_id: int) -> CategoryDetail:
        """Return a single category.

        Raises:
            NotFoundError: If no category has ``category_id``. Nothing is
                cached in that case.
        """
        result = await self._read_through(
            self._item_cache,
            self._keys.item(category_id),
            lambda: self._load_one(category_id),
        )
        if result is None:
            raise NotFoundError(category_id, messages.not_found_message(category_id))
        return result

    async def create_category(self, command: CreateCategoryCommand) -> ResponseDto[int]:
        """Create a category and return its new id.

        Raises:
            ValidationError: If the name or description is invalid.
            StoreError: If the store fails to commit.
        """
        category = Category.create(command.name, command.description)
        self._store.add(category)
        # A new category has no item entry yet; only the list is stale.
        await self._run_to_completion(self._save_and_invalidate(self._keys.all_key))

        if category.id is None:
            raise StoreError("Store did not assign an id to the new category")
        logger.debug("Created category %d", category.id)
        return ResponseDto.success(category.id, messages.created_message())

    async def update_category(
        self, category_id: int, command: UpdateCategoryCommand
    ) -> ResponseDto[None]:
        """Replace the name and description of a category.

        Raises:
            BadRequestError: If ``command.id`` differs from ``category_id``.
            NotFoundError: If no category has ``category_id``.
            ValidationError: If the name or description is invalid.
            StoreError: If the store fails to load or commit.
        """
        if command.id != category_id:
            raise BadRequestError(messages.id_mismatch_message(category_id, command.id))

        category = await self._store.find_by_id(category_id)
        if category is None:
            raise NotFoundError(category_id, messages.not_found_message(category_id))

        category.update(command.name, command.description)
        await self._run_to_completion(
            self._save_and_invalidate(*self._keys.affected_by(category_id))
        )
        logger.debug("Updated category %d", category_id)
        return ResponseDto.success(None, messages.updated_message())

    async def delete_category(self, category_id: int) -> ResponseDto[None]:
        """Delete a category.

        Raises:
            NotFoundError: If no row was deleted. The cache is left as is.
            StoreError: If the store fails.
        """
        deleted = await self._run_to_completion(self._delete_and_invalidate(category_id))
        if deleted == 0:
            raise NotFoundError(category_id, messages.not_found_message(category_id))

        logger.debug("Deleted category %d", category_id)
        return ResponseDto.success(None, messages.deleted_message())

    async def _read_through(
        self,
        cache: ICacheStore[V],
        key: str,
        load: Callable[[], Awaitable[V | None]],
    ) -> V | None:
        if not self._config.enabled:
            return await load()

        cached = await cache.get(key)
        if cached is not None:
            self._hits += 1
            logger.debug("Cache hit for %s", key)
            return cached

        async with self._lock_for(key):
            # Another task may have loaded the key while we waited.
            cached = await cache.get(key)
            if cached is not None:
                self._hits += 1
                return cached

            self._misses += 1
            logger.debug("Cache miss for %s", key)
            epoch = self._epoch
            value = await load()
            if value is None:
                return None
            if epoch == self._epoch:
                await cache.set(key, value, self._config.entry_options)
            else:
                logger.warning("Not caching %s: invalidated during load", key)
            return value

    async def drain(self) -> None:
        """Wait for writes whose callers were cancelled to finish."""
        if self._writes:
            await asyncio.gather(*self._writes, return_exceptions=True)

    async def _run_to_completion(self, write: Awaitable[T]) -> T:
        # The store commit and the eviction that follows it run as one task
        # that outlives a cancelled caller; otherwise a committed write
        # could leave its old value cached.
        task = asyncio.ensure_future(write)
        self._writes.add(task)
        task.add_done_callback(self._writes.discard)
        return await asyncio.shield(task)

    async def _save_and_invalidate(self, *keys: str) -> None:
        await self._store.save_changes()
        await self._invalidate(*keys)

    async def _delete_and_invalidate(self, category_id: int) -> int:
        deleted = await self._store.delete_where_id(category_id)
        if deleted:
            await self._invalidate(*self._keys.affected_by(category_id))
        return deleted

    async def _invalidate(self, *keys: str) -> None:
        self._epoch += 1
        for key in keys:
            if key == self._keys.all_key:
                await self._list_cache.delete(key)
            else:
                await self._item_cache.delete(key)
        logger.debug("Invalidated %s", ", ".join(keys))

    def _lock_for(self, key: str) -> asyncio.Lock:
        lock = self._load_locks.get(key)
        if lock is None:
            lock = asyncio.Lock()
            self._load_locks[key] = lock
        return lock

    async def _load_all(self) -> CategoryList:
        categories = await self._store.find_all()
        return tuple(CategoryListItem.from_entity(c) for c in categories)

    async def _load_one(self, category_id: int) -> CategoryDetail | None:
        category = await self._store.find_by_id(category_id)
        if category is None:
            return None
        return CategoryDetail.from_entity(category)
