"""Category store (persistence gateway) interface."""

from typing import Protocol

from categorycache.core.entities.category import Category


class ICategoryStore(Protocol):
    """Contract for the relational store behind the category cache.

    The store is a unit of work: ``add`` stages new categories and
    categories returned by ``find_*`` are tracked, so in-place changes
    are written by the next ``save_changes``. ``delete_where_id`` is an
    immediate filtered delete. Every method raises ``StoreError`` on
    persistence failure.
    """

    async def find_all(self) -> list[Category]:
        """Return every stored category."""
        ...

    async def find_by_id(self, category_id: int) -> Category | None:
        """Return the category with ``category_id``, or None if absent."""
        ...

    def add(self, category: Category) -> None:
        """Stage a new category for insertion on the next save."""
        ...

    async def delete_where_id(self, category_id: int) -> int:
        """Delete the category with ``category_id``.

        Returns:
            Number of rows deleted (0 or 1).
        """
        ...

    async def save_changes(self) -> int:
        """Commit staged inserts and tracked modifications atomically.

        New categories receive their ids before this returns.

        Returns:
            Number of rows written.
        """
        ...
