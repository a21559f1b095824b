"""Read-side projections and the response envelope."""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from categorycache.core.entities.category import Category

T = TypeVar("T")


@dataclass(frozen=True)
class CategoryListItem:
    """Projection of a category used by the list operation."""

    id: int
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryListItem":
        if category.id is None:
            raise ValueError("Cannot project an unsaved category")
        return cls(id=category.id, name=category.name)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class CategoryDetail:
    """Projection of a single category with all of its fields."""

    id: int
    name: str
    description: str

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDetail":
        if category.id is None:
            raise ValueError("Cannot project an unsaved category")
        return cls(id=category.id, name=category.name, description=category.description)

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "description": self.description}


@dataclass(frozen=True)
class ResponseDto(Generic[T]):
    """Success envelope returned by write operations.

    Failures are signalled with exceptions instead of envelopes.
    """

    data: T | None
    message: str
    is_success: bool = True

    @classmethod
    def success(cls, data: T | None, message: str) -> "ResponseDto[T]":
        return cls(data=data, message=message, is_success=True)

    def to_dict(self) -> dict[str, Any]:
        """Return the wire shape: ``{id, message}`` or ``{message}``."""
        result: dict[str, Any] = {}
        if self.data is not None:
            result["id"] = self.data
        result["message"] = self.message
        return result
