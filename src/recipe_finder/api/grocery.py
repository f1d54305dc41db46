"""Grocery list endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recipe_finder.api.models import GroceryItemRequest, RecipeIngredientsRequest

if TYPE_CHECKING:
    from recipe_finder.containers import AppContainer

router = APIRouter(prefix="/grocery-list", tags=["grocery"])


def _list_state(container: AppContainer) -> dict[str, object]:
    service = container.grocery_service
    completed, total = service.progress()
    return {
        "items": [item.to_payload() for item in service.items],
        "completed": completed,
        "total": total,
    }


@router.get("")
async def get_grocery_list(request: Request) -> dict[str, object]:
    """Return grocery items with completion progress."""
    container: AppContainer = request.app.state.container
    return _list_state(container)


@router.post("/items", status_code=status.HTTP_201_CREATED)
async def add_item(body: GroceryItemRequest, request: Request) -> dict[str, object]:
    """Add a manually entered item."""
    container: AppContainer = request.app.state.container
    item = await container.grocery_service.add_item(body.name)
    if item is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Item name must not be empty",
        )
    return {"item": item.to_payload(), **_list_state(container)}


@router.post("/items/{item_id}/toggle")
async def toggle_item(item_id: str, request: Request) -> dict[str, object]:
    """Flip the completed flag of an item."""
    container: AppContainer = request.app.state.container
    item = await container.grocery_service.toggle_item_completion(item_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return {"item": item.to_payload(), **_list_state(container)}


@router.delete("/items/{item_id}")
async def delete_item(item_id: str, request: Request) -> dict[str, object]:
    """Delete an item."""
    container: AppContainer = request.app.state.container
    if not await container.grocery_service.delete_item(item_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
    return _list_state(container)


@router.post("/clear-completed")
async def clear_completed(request: Request) -> dict[str, object]:
    """Remove completed items."""
    container: AppContainer = request.app.state.container
    result = await container.grocery_service.clear_completed_items()
    return {
        "cleared": result.cleared,
        "notice": result.notice,
        **_list_state(container),
    }


@router.post("/from-recipe/{recipe_id}", status_code=status.HTTP_201_CREATED)
async def add_from_recipe(
    recipe_id: int, body: RecipeIngredientsRequest, request: Request
) -> dict[str, object]:
    """Add selected ingredients of a recipe; all of them when none are given."""
    container: AppContainer = request.app.state.container
    result = await container.recipe_service.get_details_or_placeholder(recipe_id)
    if result.is_placeholder:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error
        )
    recipe = result.recipe
    selected = (
        body.selected_indices
        if body.selected_indices is not None
        else range(len(recipe.extended_ingredients))
    )
    try:
        added = await container.grocery_service.add_ingredients_from_recipe(
            recipe, selected
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    plural = "s" if len(added) > 1 else ""
    return {
        "added": [item.to_payload() for item in added],
        "message": f"Added {len(added)} ingredient{plural} to your grocery list",
        **_list_state(container),
    }
