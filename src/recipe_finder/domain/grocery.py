"""Domain models for the grocery list."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class GroceryItem:
    """Entry on the shopping checklist."""

    id: str
    name: str
    completed: bool
    created_at: datetime | None
    recipe_id: int | None = None
    recipe_name: str | None = None

    def to_payload(self) -> dict[str, object]:
        """Return the stored JSON shape of the item."""
        payload: dict[str, object] = {
            "id": self.id,
            "name": self.name,
            "completed": self.completed,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
        }
        if self.recipe_id is not None:
            payload["recipeId"] = self.recipe_id
        if self.recipe_name is not None:
            payload["recipeName"] = self.recipe_name
        return payload


@dataclass(frozen=True)
class ClearResult:
    """Outcome of clearing completed grocery items."""

    cleared: int
    notice: str | None = None
