"""Spoonacular recipe API client."""

from dataclasses import dataclass
from typing import Any, Protocol

import httpx


class SpoonacularClient(Protocol):
    """Interface for Spoonacular API interactions."""

    async def get_random(self, number: int = 20) -> dict[str, object]:
        """Fetch random recipes and return raw API data."""

    async def complex_search(self, query: str, number: int = 20) -> dict[str, object]:
        """Search recipes by query and return raw API data."""

    async def get_information(self, recipe_id: int) -> dict[str, object]:
        """Fetch a recipe with nutrition by id and return raw API data."""

    async def get_information_bulk(
        self, recipe_ids: list[int]
    ) -> list[dict[str, object]]:
        """Fetch several recipes by id and return raw API data."""


@dataclass
class HttpxSpoonacularClient(SpoonacularClient):
    """HTTPX-backed Spoonacular client."""

    api_key: str
    base_url: str
    http_client: httpx.AsyncClient

    @classmethod
    def create(cls, api_key: str, base_url: str) -> "HttpxSpoonacularClient":
        """Create a Spoonacular client with a managed httpx session."""
        return cls(
            api_key=api_key,
            base_url=base_url,
            http_client=httpx.AsyncClient(timeout=None),
        )

    async def get_random(self, number: int = 20) -> dict[str, object]:
        """Fetch random recipes."""
        return await self._get("/recipes/random", {"number": number})

    async def complex_search(self, query: str, number: int = 20) -> dict[str, object]:
        """Search recipes with recipe information included."""
        return await self._get(
            "/recipes/complexSearch",
            {"query": query, "number": number, "addRecipeInformation": "true"},
        )

    async def get_information(self, recipe_id: int) -> dict[str, object]:
        """Fetch a single recipe including nutrition data."""
        return await self._get(
            f"/recipes/{recipe_id}/information", {"includeNutrition": "true"}
        )

    async def get_information_bulk(
        self, recipe_ids: list[int]
    ) -> list[dict[str, object]]:
        """Fetch several recipes in one call."""
        return await self._get(
            "/recipes/informationBulk",
            {"ids": ",".join(str(recipe_id) for recipe_id in recipe_ids)},
        )

    async def _get(self, path: str, params: dict[str, object]) -> Any:
        response = await self.http_client.get(
            f"{self.base_url}{path}",
            params={"apiKey": self.api_key, **params},
        )
        response.raise_for_status()
        return response.json()

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self.http_client.aclose()
