"""Pydantic models for API request payloads."""

from pydantic import BaseModel, ConfigDict, Field


class FavoriteRequest(BaseModel):
    """Recipe summary submitted to the favorites list."""

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    title: str = ""
    image: str | None = None
    ready_in_minutes: int | None = Field(default=None, alias="readyInMinutes")
    health_score: float | None = Field(default=None, alias="healthScore")


class SearchRequest(BaseModel):
    """Recipe search payload."""

    query: str


class GroceryItemRequest(BaseModel):
    """Manually entered grocery item."""

    name: str


class RecipeIngredientsRequest(BaseModel):
    """Ingredient selection for adding a recipe to the grocery list."""

    model_config = ConfigDict(populate_by_name=True)

    selected_indices: list[int] | None = Field(
        default=None, alias="selectedIndices"
    )


class ExportRequest(BaseModel):
    """Grocery list export payload."""

    target: str
    email: str | None = None
    phone: str | None = None
