"""Domain services for categorycache."""

from categorycache.core.services.category_service import CategoryList, CategoryService

__all__ = [
    "CategoryService",
    "CategoryList",
]
