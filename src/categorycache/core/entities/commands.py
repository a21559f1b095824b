"""Write-side request objects."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateCategoryCommand:
    name: str
    description: str = ""


@dataclass(frozen=True)
class UpdateCategoryCommand:
    """Body of an update request.

    ``id`` must match the id of the category being updated.
    """

    id: int
    name: str
    description: str = ""
