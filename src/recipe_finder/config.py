"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    spoonacular_api_key: str
    spoonacular_base_url: str = "https://api.spoonacular.com"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    storage_table: str = "app_storage"
    favorites_storage_key: str = "favorites"
    favorite_ids_storage_key: str = "favoriteRecipes"
    recipe_page_size: int = 20
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def uses_supabase(self) -> bool:
        """Return True when Supabase credentials are configured."""
        return bool(self.supabase_url and self.supabase_service_key)
