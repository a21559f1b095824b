"""Category entity."""

from categorycache.core.exceptions import ValidationError

NAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000


class Category:
    """A category record.

    The ``id`` is assigned by the store on first save and never changes
    afterwards. ``name`` and ``description`` are only mutated through
    :meth:`update`.
    """

    __slots__ = ("_id", "_name", "_description", "__weakref__")

    def __init__(
        self,
        name: str,
        description: str,
        category_id: int | None = None,
    ) -> None:
        self._id = category_id
        self._name = name
        self._description = description

    @property
    def id(self) -> int | None:
        """Store-assigned identity, or None before the first save."""
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def description(self) -> str:
        return self._description

    @classmethod
    def create(cls, name: str | None, description: str | None) -> "Category":
        """Factory method to create a new, unsaved category.

        Args:
            name: Category name. Must not be empty or blank.
            description: Free text description. May be empty.

        Returns:
            A new Category with no id.

        Raises:
            ValidationError: If the name or description is invalid.
        """
        name, description = _validate(name, description)
        return cls(name=name, description=description)

    @classmethod
    def from_persistence(
        cls, category_id: int, name: str, description: str | None
    ) -> "Category":
        """Rehydrate a category loaded from the store."""
        return cls(name=name, description=description or "", category_id=category_id)

    def update(self, name: str | None, description: str | None) -> None:
        """Replace name and description in place.

        Both values are validated before either field changes.

        Raises:
            ValidationError: If the name or description is invalid.
        """
        self._name, self._description = _validate(name, description)

    def assign_id(self, category_id: int) -> None:
        """Set the store-assigned id.

        Raises:
            ValueError: If the category already has an id.
        """
        if self._id is not None:
            raise ValueError(f"Category already has id {self._id}")
        self._id = category_id

    def __repr__(self) -> str:
        return f"Category(id={self._id!r}, name={self._name!r})"


def _validate(name: str | None, description: str | None) -> tuple[str, str]:
    if name is None or not name.strip():
        raise ValidationError("Category name must not be empty")
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Category name must be at most {NAME_MAX_LENGTH} characters"
        )
    description = description or ""
    if len(description) > DESCRIPTION_MAX_LENGTH:
        raise ValidationError(
            f"Category description must be at most {DESCRIPTION_MAX_LENGTH} characters"
        )
    return name, description
