"""Favorites endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recipe_finder.api.models import FavoriteRequest
from recipe_finder.domain.favorites import FavoriteRecipe

if TYPE_CHECKING:
    from recipe_finder.containers import AppContainer

router = APIRouter(prefix="/favorites", tags=["favorites"])
logger = logging.getLogger(__name__)


def _favorites_payload(container: AppContainer) -> list[dict[str, object]]:
    return [item.to_payload() for item in container.favorites_service.favorites]


@router.get("")
async def list_favorites(request: Request) -> dict[str, object]:
    """Return the favorites list."""
    container: AppContainer = request.app.state.container
    return {"favorites": _favorites_payload(container)}


@router.get("/details")
async def favorite_details(request: Request) -> dict[str, object]:
    """Return full recipe records for every saved recipe id."""
    container: AppContainer = request.app.state.container
    ids = list(container.favorite_ids_service.ids)
    try:
        recipes = await container.recipe_service.get_bulk(ids)
    except Exception as exc:
        logger.exception("Error fetching favorite recipe details")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=(
                "Failed to load recipe details. "
                "Please check your internet connection or API key."
            ),
        ) from exc
    return {"recipes": recipes}


@router.get("/saved")
async def list_saved_recipes(request: Request) -> dict[str, object]:
    """Return the saved recipe ids shown on the favorites screen."""
    container: AppContainer = request.app.state.container
    return {"ids": list(container.favorite_ids_service.ids)}


@router.delete("/saved/{recipe_id}")
async def remove_saved_recipe(recipe_id: int, request: Request) -> dict[str, object]:
    """Remove a recipe id from the favorites screen."""
    container: AppContainer = request.app.state.container
    removed = await container.favorite_ids_service.remove(recipe_id)
    return {"removed": removed, "ids": list(container.favorite_ids_service.ids)}


@router.post("")
async def add_favorite(body: FavoriteRequest, request: Request) -> dict[str, object]:
    """Add a recipe to favorites."""
    container: AppContainer = request.app.state.container
    if not body.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid recipe object provided to add_favorite",
        )
    added = await container.favorites_service.add_favorite(
        body.model_dump(by_alias=True)
    )
    return {"added": added, "favorites": _favorites_payload(container)}


@router.delete("/{recipe_id}")
async def remove_favorite(recipe_id: int, request: Request) -> dict[str, object]:
    """Remove a recipe from favorites."""
    container: AppContainer = request.app.state.container
    removed = await container.favorites_service.remove_favorite(recipe_id)
    return {"removed": removed, "favorites": _favorites_payload(container)}


@router.post("/{recipe_id}/toggle")
async def toggle_favorite(recipe_id: int, request: Request) -> dict[str, object]:
    """Flip the favorite state of a recipe using its current details."""
    container: AppContainer = request.app.state.container
    result = await container.recipe_service.get_details_or_placeholder(recipe_id)
    if result.is_placeholder:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY, detail=result.error
        )
    recipe = result.recipe
    is_favorite = await container.favorites_service.toggle_favorite(
        FavoriteRecipe(
            id=recipe.id,
            title=recipe.title,
            image=recipe.image,
            ready_in_minutes=recipe.ready_in_minutes,
            health_score=recipe.health_score or 0,
        )
    )
    action = "added to" if is_favorite else "removed from"
    return {
        "is_favorite": is_favorite,
        "message": f"{recipe.title} has been {action} your favorites",
    }
