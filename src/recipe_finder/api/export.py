"""Grocery list export endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request, status

from recipe_finder.api.models import ExportRequest
from recipe_finder.services.export import (
    EmptyGroceryListError,
    ExportInputError,
    UnknownExportTargetError,
)

if TYPE_CHECKING:
    from recipe_finder.containers import AppContainer

router = APIRouter(prefix="/export", tags=["export"])


@router.get("/targets")
async def list_targets(request: Request) -> dict[str, object]:
    """Return the export targets and whether each is available."""
    container: AppContainer = request.app.state.container
    return {"targets": list(container.export_service.targets)}


@router.post("")
async def export_grocery_list(
    body: ExportRequest, request: Request
) -> dict[str, object]:
    """Export the current grocery list to a target."""
    container: AppContainer = request.app.state.container
    try:
        outcome = container.export_service.export(
            body.target,
            container.grocery_service.items,
            email=body.email,
            phone=body.phone,
        )
    except UnknownExportTargetError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)
        ) from exc
    except (EmptyGroceryListError, ExportInputError) as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return {"outcome": outcome}
