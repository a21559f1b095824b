"""SQLite category store built on aiosqlite."""

import asyncio
import logging
import weakref
from pathlib import Path

import aiosqlite

from categorycache.core.entities.category import Category
from categorycache.core.exceptions import StoreError

logger = logging.getLogger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS categories (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        description TEXT NOT NULL DEFAULT ''
    )
"""


class SqliteCategoryStore:
    """Unit-of-work category store over a single aiosqlite connection.

    Categories passed to :meth:`add` are inserted by the next
    :meth:`save_changes`. Each category returned by :meth:`find_by_id` is
    tracked, weakly, together with the values it was loaded with, and
    :meth:`save_changes` writes back the ones that changed. Categories
    from :meth:`find_all` are read-only snapshots. Writes are serialized
    with an ``asyncio.Lock``.
    """

    def __init__(self, connection: aiosqlite.Connection) -> None:
        self._db = connection
        self._db.row_factory = aiosqlite.Row
        self._pending: list[Category] = []
        self._tracked: weakref.WeakKeyDictionary[Category, tuple[str, str]] = (
            weakref.WeakKeyDictionary()
        )
        self._lock = asyncio.Lock()

    @classmethod
    async def connect(cls, path: str | Path = ":memory:") -> "SqliteCategoryStore":
        """Open a connection and create the schema.

        Args:
            path: Database file, or ``":memory:"`` for a private in-memory
                database.

        Returns:
            An initialized store.

        Raises:
            StoreError: If the database cannot be opened.
        """
        if isinstance(path, Path):
            path.parent.mkdir(parents=True, exist_ok=True)
        try:
            connection = await aiosqlite.connect(path)
        except (aiosqlite.Error, OSError) as e:
            raise StoreError(f"Failed to open category store at {path}: {e}") from e
        store = cls(connection)
        await store.initialize()
        return store

    async def initialize(self) -> None:
        """Create the categories table if it does not exist."""
        try:
            await self._db.execute(SCHEMA)
            await self._db.commit()
        except aiosqlite.Error as e:
            raise StoreError(f"Failed to initialize category store: {e}") from e

    async def close(self) -> None:
        await self._db.close()

    async def find_all(self) -> list[Category]:
        """Return every stored category ordered by id.

        Waits for any write in progress, so only committed rows are seen.
        """
        async with self._lock:
            try:
                async with self._db.execute(
                    "SELECT id, name, description FROM categories ORDER BY id"
                ) as cursor:
                    rows = await cursor.fetchall()
            except aiosqlite.Error as e:
                raise StoreError(f"Failed to list categories: {e}") from e
        return [_to_entity(row) for row in rows]

    async def find_by_id(self, category_id: int) -> Category | None:
        """Return the category with ``category_id``, or None if absent.

        Waits for any write in progress, so only committed rows are seen.
        The returned category is tracked; changes made through
        :meth:`Category.update` are written by the next save.
        """
        async with self._lock:
            try:
                async with self._db.execute(
                    "SELECT id, name, description FROM categories WHERE id = ?",
                    (category_id,),
                ) as cursor:
                    row = await cursor.fetchone()
            except aiosqlite.Error as e:
                raise StoreError(f"Failed to load category {category_id}: {e}") from e
        if row is None:
            return None
        category = _to_entity(row)
        self._tracked[category] = (category.name, category.description)
        return category

    def add(self, category: Category) -> None:
        """Stage a new category for insertion on the next save."""
        if category.id is not None:
            raise ValueError(f"Category {category.id} is already persisted")
        self._pending.append(category)

    async def delete_where_id(self, category_id: int) -> int:
        """Delete the category with ``category_id`` immediately.

        Returns:
            Number of rows deleted.
        """
        async with self._lock:
            try:
                cursor = await self._db.execute(
                    "DELETE FROM categories WHERE id = ?", (category_id,)
                )
                await self._db.commit()
            except aiosqlite.Error as e:
                await self._rollback()
                raise StoreError(f"Failed to delete category {category_id}: {e}") from e
            return cursor.rowcount

    async def save_changes(self) -> int:
        """Insert staged categories and update modified tracked ones.

        Everything is written in one transaction. A save flushes the
        categories staged before it was called; if it is cancelled before
        it starts writing, those categories are discarded. New categories
        receive their ids only after the commit succeeds. On failure
        nothing is written, the staged categories are discarded and the
        modified ones are no longer tracked.

        Once the commit has been issued it runs to completion even if the
        caller is cancelled, and ids are assigned before the cancellation
        is re-raised.

        Returns:
            Number of rows written.

        Raises:
            StoreError: If the transaction fails.
        """
        pending, self._pending = self._pending, []
        async with self._lock:
            modified = [
                (category, (category.name, category.description))
                for category, loaded in list(self._tracked.items())
                if (category.name, category.description) != loaded
            ]
            if not pending and not modified:
                return 0

            inserted: list[tuple[Category, int]] = []
            written = 0
            try:
                for category in pending:
                    cursor = await self._db.execute(
                        "INSERT INTO categories (name, description) VALUES (?, ?)",
                        (category.name, category.description),
                    )
                    inserted.append((category, cursor.lastrowid))
                    written += 1
                for category, values in modified:
                    cursor = await self._db.execute(
                        "UPDATE categories SET name = ?, description = ? WHERE id = ?",
                        (*values, category.id),
                    )
                    written += cursor.rowcount
            except aiosqlite.Error as e:
                await self._rollback()
                self._untrack(modified)
                raise StoreError(f"Failed to save category changes: {e}") from e
            except asyncio.CancelledError:
                await asyncio.shield(self._rollback())
                self._untrack(modified)
                raise

            commit = asyncio.ensure_future(self._db.commit())
            cancelled = False
            while not commit.done():
                try:
                    await asyncio.shield(commit)
                except asyncio.CancelledError:
                    cancelled = True
                except aiosqlite.Error:
                    break
            if commit.exception() is not None:
                await asyncio.shield(self._rollback())
                self._untrack(modified)
                e = commit.exception()
                raise StoreError(f"Failed to save category changes: {e}") from e

            for category, category_id in inserted:
                category.assign_id(category_id)
            for category, values in modified:
                self._tracked[category] = values
            logger.debug(
                "Saved %d category row(s): %d insert(s), %d update(s)",
                written,
                len(inserted),
                len(modified),
            )
            if cancelled:
                raise asyncio.CancelledError()
            return written

    def _untrack(self, modified: list[tuple[Category, tuple[str, str]]]) -> None:
        # A rolled-back change must not be written by a later save.
        for category, _ in modified:
            self._tracked.pop(category, None)

    async def _rollback(self) -> None:
        try:
            await self._db.rollback()
        except aiosqlite.Error:
            logger.exception("Rollback of category store transaction failed")


def _to_entity(row: aiosqlite.Row) -> Category:
    return Category.from_persistence(row["id"], row["name"], row["description"])
