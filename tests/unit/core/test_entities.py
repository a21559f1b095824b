"""Tests for core entities."""

import math
from datetime import timedelta

import pytest

from categorycache.core.entities import (
    CacheConfig,
    CacheEntry,
    CacheEntryOptions,
    Category,
    CategoryCacheKeys,
    CategoryDetail,
    CategoryListItem,
    ResponseDto,
)
from categorycache.core.exceptions import ValidationError


class TestCategory:
    """Tests for Category entity."""

    def test_create_category(self) -> None:
        """Test creating a category with the factory method."""
        category = Category.create("Tech", "Gadgets and software")

        assert category.id is None
        assert category.name == "Tech"
        assert category.description == "Gadgets and software"

    def test_create_allows_empty_description(self) -> None:
        category = Category.create("Tech", "")
        assert category.description == ""

    def test_create_normalizes_missing_description(self) -> None:
        category = Category.create("Tech", None)
        assert category.description == ""

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_create_rejects_empty_name(self, name: str | None) -> None:
        """Test that a null, empty or blank name is rejected."""
        with pytest.raises(ValidationError):
            Category.create(name, "desc")

    def test_create_rejects_long_fields(self) -> None:
        with pytest.raises(ValidationError):
            Category.create("x" * 101, "")
        with pytest.raises(ValidationError):
            Category.create("Tech", "x" * 1001)

    def test_update_changes_fields(self) -> None:
        category = Category.from_persistence(1, "Tech", "desc")

        category.update("Tech2", "desc2")

        assert category.id == 1
        assert category.name == "Tech2"
        assert category.description == "desc2"

    def test_invalid_update_leaves_fields_unchanged(self) -> None:
        """Test that validation happens before any field is mutated."""
        category = Category.from_persistence(1, "Tech", "desc")

        with pytest.raises(ValidationError):
            category.update("", "new description")

        assert category.name == "Tech"
        assert category.description == "desc"

    def test_assign_id_once(self) -> None:
        """Test that the id is immutable once assigned."""
        category = Category.create("Tech", "")
        category.assign_id(7)

        assert category.id == 7
        with pytest.raises(ValueError):
            category.assign_id(8)
        assert category.id == 7

    def test_validation_error_status_code(self) -> None:
        assert ValidationError.status_code == 400


class TestCacheEntry:
    """Tests for CacheEntry entity."""

    def test_create_cache_entry(self) -> None:
        """Test creating a cache entry with factory method."""
        entry = CacheEntry.create(key="category-1", value="v", now=100.0)

        assert entry.key == "category-1"
        assert entry.value == "v"
        assert entry.created_at == 100.0
        assert entry.sliding_expiration == timedelta(minutes=10)
        assert entry.absolute_expiration == timedelta(hours=24)

    def test_absolute_deadline(self) -> None:
        entry = CacheEntry.create(key="k", value=1, now=100.0)
        assert entry.absolute_deadline == 100.0 + 24 * 3600

    def test_sliding_window_is_capped_by_absolute_deadline(self) -> None:
        """Test expires_at never exceeds the absolute deadline."""
        options = CacheEntryOptions(
            sliding_expiration=timedelta(seconds=10),
            absolute_expiration=timedelta(seconds=25),
        )
        entry = CacheEntry.create(key="k", value=1, now=0.0, options=options)

        assert entry.expires_at(0.0) == 10.0
        assert entry.expires_at(12.0) == 22.0
        assert entry.expires_at(20.0) == 25.0

    def test_sliding_only_entry(self) -> None:
        options = CacheEntryOptions(
            sliding_expiration=timedelta(seconds=10), absolute_expiration=None
        )
        entry = CacheEntry.create(key="k", value=1, now=0.0, options=options)

        assert entry.absolute_deadline == math.inf
        assert entry.expires_at(10**6) == 10**6 + 10.0

    def test_entry_without_expiration(self) -> None:
        options = CacheEntryOptions(sliding_expiration=None, absolute_expiration=None)
        entry = CacheEntry.create(key="k", value=1, now=0.0, options=options)

        assert entry.absolute_deadline == math.inf
        assert entry.expires_at(10**9) == math.inf


class TestCacheEntryOptions:
    """Tests for CacheEntryOptions."""

    def test_defaults(self) -> None:
        options = CacheEntryOptions()
        assert options.sliding_expiration == timedelta(minutes=10)
        assert options.absolute_expiration == timedelta(hours=24)

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"sliding_expiration": timedelta(0)},
            {"absolute_expiration": timedelta(seconds=-1)},
        ],
    )
    def test_rejects_non_positive_durations(self, kwargs: dict) -> None:
        with pytest.raises(ValueError):
            CacheEntryOptions(**kwargs)


class TestCacheConfig:
    """Tests for CacheConfig entity."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = CacheConfig()

        assert config.enabled is True
        assert config.max_size == 1024
        assert config.key_prefix == "category"
        assert config.all_key == "all-categories"
        assert config.entry_options == CacheEntryOptions()

    def test_rejects_non_positive_max_size(self) -> None:
        with pytest.raises(ValueError):
            CacheConfig(max_size=0)


class TestCategoryCacheKeys:
    """Tests for the cache key namespace."""

    def test_item_key(self) -> None:
        assert CategoryCacheKeys().item(999) == "category-999"

    def test_affected_keys_include_aggregate(self) -> None:
        keys = CategoryCacheKeys(prefix="cat", all_key="cats")
        assert keys.affected_by(3) == ("cats", "cat-3")


class TestViews:
    """Tests for read-side projections."""

    def test_projections(self) -> None:
        category = Category.from_persistence(5, "Tech", "desc")

        assert CategoryListItem.from_entity(category).to_dict() == {
            "id": 5,
            "name": "Tech",
        }
        assert CategoryDetail.from_entity(category).to_dict() == {
            "id": 5,
            "name": "Tech",
            "description": "desc",
        }

    def test_cannot_project_unsaved_category(self) -> None:
        with pytest.raises(ValueError):
            CategoryDetail.from_entity(Category.create("Tech", ""))

    def test_response_dto_shapes(self) -> None:
        created = ResponseDto.success(3, "created")
        updated = ResponseDto.success(None, "updated")

        assert created.is_success
        assert created.to_dict() == {"id": 3, "message": "created"}
        assert updated.to_dict() == {"message": "updated"}
