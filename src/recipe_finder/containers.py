"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from recipe_finder.adapters.spoonacular_client import HttpxSpoonacularClient
from recipe_finder.adapters.supabase_key_value_store import SupabaseKeyValueStore
from recipe_finder.config import Settings
from recipe_finder.services.browse import RecipeBrowser
from recipe_finder.services.export import ExportService
from recipe_finder.services.favorites import FavoriteIdsService, FavoritesService
from recipe_finder.services.grocery import GroceryListService
from recipe_finder.services.recipes import RecipeService
from recipe_finder.services.storage import (
    InMemoryKeyValueStore,
    JsonStore,
    KeyValueStore,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    recipe_service: RecipeService
    recipe_browser: RecipeBrowser
    favorites_service: FavoritesService
    favorite_ids_service: FavoriteIdsService
    grocery_service: GroceryListService
    export_service: ExportService
    close_resources: Callable[[], Awaitable[None]]

    async def initialize(self) -> None:
        """Load persisted state before the application serves requests."""
        await self.favorites_service.load()
        await self.favorite_ids_service.load()
        await self.grocery_service.load()


def build_key_value_store(settings: Settings) -> KeyValueStore:
    """Create the configured key-value backend."""
    if settings.uses_supabase:
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseKeyValueStore(client, table=settings.storage_table)
    return InMemoryKeyValueStore()


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    json_store = JsonStore(build_key_value_store(resolved_settings))
    spoonacular_client = HttpxSpoonacularClient.create(
        api_key=resolved_settings.spoonacular_api_key,
        base_url=resolved_settings.spoonacular_base_url,
    )
    recipe_service = RecipeService(
        client=spoonacular_client,
        page_size=resolved_settings.recipe_page_size,
    )
    favorites_service = FavoritesService(
        json_store,
        storage_key=resolved_settings.favorites_storage_key,
        id_list_key=resolved_settings.favorite_ids_storage_key,
    )
    favorite_ids_service = FavoriteIdsService(
        json_store, storage_key=resolved_settings.favorite_ids_storage_key
    )
    grocery_service = GroceryListService(json_store)

    async def close_resources() -> None:
        await spoonacular_client.close()

    return AppContainer(
        settings=resolved_settings,
        recipe_service=recipe_service,
        recipe_browser=RecipeBrowser(recipe_service),
        favorites_service=favorites_service,
        favorite_ids_service=favorite_ids_service,
        grocery_service=grocery_service,
        export_service=ExportService(),
        close_resources=close_resources,
    )
