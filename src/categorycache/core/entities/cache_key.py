"""Cache key namespace for categories."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CategoryCacheKeys:
    """Builds the keys under which category views are cached.

    A mutation of a single category must invalidate both its item key and
    the aggregate key, because the list view embeds every category's name.
    """

    prefix: str = "category"
    all_key: str = "all-categories"

    def item(self, category_id: int) -> str:
        """Return the key of a single category, e.g. ``category-42``."""
        return f"{self.prefix}-{category_id}"

    def affected_by(self, category_id: int) -> tuple[str, str]:
        """Return every key a mutation of ``category_id`` invalidates."""
        return (self.all_key, self.item(category_id))
