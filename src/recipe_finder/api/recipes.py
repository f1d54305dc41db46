"""Recipe browsing and detail endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Query, Request, status

from recipe_finder.api.models import SearchRequest

if TYPE_CHECKING:
    from recipe_finder.containers import AppContainer

router = APIRouter(prefix="/recipes", tags=["recipes"])


def _browse_state(
    container: AppContainer, filter_text: str | None = None
) -> dict[str, object]:
    browser = container.recipe_browser
    return {
        "recipes": browser.filtered(filter_text),
        "query": browser.query,
        "error": browser.error,
        "favorite_ids": list(container.favorite_ids_service.ids),
    }


@router.get("")
async def list_recipes(
    request: Request, filter_text: str | None = Query(default=None, alias="filter")
) -> dict[str, object]:
    """Return the current recipe list, optionally filtered by title."""
    container: AppContainer = request.app.state.container
    return _browse_state(container, filter_text)


@router.post("/refresh")
async def refresh_recipes(request: Request) -> dict[str, object]:
    """Reload random recipes."""
    container: AppContainer = request.app.state.container
    await container.recipe_browser.clear_search()
    return _browse_state(container)


@router.post("/search")
async def search_recipes(body: SearchRequest, request: Request) -> dict[str, object]:
    """Search recipes; a blank query leaves the current list untouched."""
    container: AppContainer = request.app.state.container
    if not await container.recipe_browser.search(body.query):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Search query must not be empty",
        )
    return _browse_state(container)


@router.get("/{recipe_id}")
async def recipe_detail(recipe_id: int, request: Request) -> dict[str, object]:
    """Return recipe details, masked with placeholder content on failure."""
    container: AppContainer = request.app.state.container
    result = await container.recipe_service.get_details_or_placeholder(recipe_id)
    return {
        "recipe": result.recipe,
        "error": result.error,
        "is_placeholder": result.is_placeholder,
        "is_favorite": (
            not result.is_placeholder
            and container.favorites_service.is_favorite(recipe_id)
        ),
    }


@router.post("/{recipe_id}/favorite")
async def toggle_saved_recipe(recipe_id: int, request: Request) -> dict[str, object]:
    """Flip the browse-list heart for a recipe."""
    container: AppContainer = request.app.state.container
    saved = await container.favorite_ids_service.toggle(recipe_id)
    return {
        "is_favorite": saved,
        "message": (
            "Recipe added to favorites" if saved else "Recipe removed from favorites"
        ),
        "favorite_ids": list(container.favorite_ids_service.ids),
    }
