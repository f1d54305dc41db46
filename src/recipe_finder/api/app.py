"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from recipe_finder.api.export import router as export_router
from recipe_finder.api.favorites import router as favorites_router
from recipe_finder.api.grocery import router as grocery_router
from recipe_finder.api.recipes import router as recipes_router
from recipe_finder.app_logging import configure_logging
from recipe_finder.containers import AppContainer


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        await app.state.container.initialize()
        logger.info(
            "Loaded %s favorites and %s grocery items",
            len(app.state.container.favorites_service.favorites),
            len(app.state.container.grocery_service.items),
        )
        await app.state.container.recipe_browser.refresh()
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(recipes_router)
    app.include_router(favorites_router)
    app.include_router(grocery_router)
    app.include_router(export_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
