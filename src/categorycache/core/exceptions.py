"""Error taxonomy for the category API.

Every error carries the HTTP-equivalent ``status_code`` a transport layer
should answer with.
"""


class CategoryCacheError(Exception):
    """Base class for all categorycache errors."""

    status_code: int = 500


class ValidationError(CategoryCacheError):
    """Raised when input fails entity validation (e.g. an empty name)."""

    status_code = 400


class BadRequestError(CategoryCacheError):
    """Raised when a request is inconsistent, such as a path/body id mismatch."""

    status_code = 400


class NotFoundError(CategoryCacheError):
    """Raised when no category exists for the requested id."""

    status_code = 404

    def __init__(self, category_id: int, message: str | None = None) -> None:
        self.category_id = category_id
        super().__init__(message or f"Category {category_id} was not found")


class StoreError(CategoryCacheError):
    """Raised when the persistence layer fails."""

    pass
