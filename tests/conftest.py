"""Shared test fixtures."""

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import httpx
import pytest

from recipe_finder.adapters.spoonacular_client import SpoonacularClient
from recipe_finder.config import Settings
from recipe_finder.containers import AppContainer
from recipe_finder.services.browse import RecipeBrowser
from recipe_finder.services.export import ExportService
from recipe_finder.services.favorites import FavoriteIdsService, FavoritesService
from recipe_finder.services.grocery import GroceryListService
from recipe_finder.services.recipes import RecipeService
from recipe_finder.services.storage import InMemoryKeyValueStore, JsonStore


def recipe_payload(
    recipe_id: int = 716429, title: str = "Pasta with Garlic"
) -> dict[str, object]:
    """Return a Spoonacular information payload."""
    return {
        "id": recipe_id,
        "title": title,
        "image": f"https://img.spoonacular.com/recipes/{recipe_id}-556x370.jpg",
        "readyInMinutes": 45,
        "servings": 2,
        "summary": "A quick weeknight pasta.",
        "healthScore": 19,
        "instructions": "Boil pasta. Toss with garlic.",
        "extendedIngredients": [
            {
                "id": 20420,
                "name": "pasta",
                "original": "1 lb spaghetti",
                "amount": 1,
                "unit": "lb",
            },
            {
                "id": 11215,
                "name": "garlic",
                "original": "",
                "amount": 3,
                "unit": "cloves",
            },
            {
                "id": 1001,
                "name": "butter",
                "original": "2 tbsp butter",
                "amount": 2,
                "unit": "tbsp",
            },
        ],
        "analyzedInstructions": [
            {
                "name": "",
                "steps": [
                    {"number": 1, "step": "Boil pasta."},
                    {"number": 2, "step": "Toss with garlic."},
                ],
            }
        ],
        "nutrition": {
            "nutrients": [
                {"name": "Calories", "amount": 584.46, "unit": "kcal"},
                {"name": "Protein", "amount": 19.4, "unit": "g"},
            ]
        },
    }


def http_error(status_code: int) -> httpx.HTTPStatusError:
    """Build an HTTP status error like the one raised by httpx."""
    request = httpx.Request("GET", "https://api.test/recipes/1/information")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(
        f"HTTP {status_code}", request=request, response=response
    )


@dataclass
class FakeSpoonacularClient(SpoonacularClient):
    """Fake Spoonacular client with in-memory responses."""

    random_payload: dict[str, object] = field(
        default_factory=lambda: {
            "recipes": [
                {"id": 1, "title": "Tomato Soup", "image": None, "servings": 4},
                {"id": 2, "title": "Chicken Curry", "readyInMinutes": 40},
                {"id": 3, "title": "Green Soup", "image": "https://img/3.jpg"},
            ]
        }
    )
    search_payload: dict[str, object] = field(
        default_factory=lambda: {
            "results": [
                {"id": 716429, "title": "Pasta with Garlic", "readyInMinutes": 45}
            ]
        }
    )
    information: dict[int, dict[str, object]] = field(
        default_factory=lambda: {716429: recipe_payload()}
    )
    error: Exception | None = None
    calls: list[tuple[str, object]] = field(default_factory=list)

    async def get_random(self, number: int = 20) -> dict[str, object]:
        self.calls.append(("random", number))
        self._maybe_fail()
        return self.random_payload

    async def complex_search(self, query: str, number: int = 20) -> dict[str, object]:
        self.calls.append(("search", query))
        self._maybe_fail()
        return self.search_payload

    async def get_information(self, recipe_id: int) -> dict[str, object]:
        self.calls.append(("information", recipe_id))
        self._maybe_fail()
        if recipe_id not in self.information:
            raise http_error(404)
        return self.information[recipe_id]

    async def get_information_bulk(
        self, recipe_ids: list[int]
    ) -> list[dict[str, object]]:
        self.calls.append(("bulk", recipe_ids))
        self._maybe_fail()
        return [self.information[i] for i in recipe_ids if i in self.information]

    def _maybe_fail(self) -> None:
        if self.error is not None:
            raise self.error


@dataclass
class RecordingKeyValueStore(InMemoryKeyValueStore):
    """In-memory store that records every write."""

    writes: list[tuple[str, str]]

    def __init__(self) -> None:
        super().__init__()
        self.writes = []

    async def set_item(self, key: str, value: str) -> None:
        self.writes.append((key, value))
        await super().set_item(key, value)


@dataclass
class FailingKeyValueStore:
    """Store whose reads and writes always fail."""

    async def get_item(self, key: str) -> str | None:
        raise OSError("storage unavailable")

    async def set_item(self, key: str, value: str) -> None:
        raise OSError("storage unavailable")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    yield
    logger = logging.getLogger("recipe_finder")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def settings() -> Settings:
    return Settings(spoonacular_api_key="spoonacular-key")


@pytest.fixture
def key_value_store() -> RecordingKeyValueStore:
    return RecordingKeyValueStore()


@pytest.fixture
def spoonacular_client() -> FakeSpoonacularClient:
    return FakeSpoonacularClient()


@pytest.fixture
def container(
    settings: Settings,
    key_value_store: RecordingKeyValueStore,
    spoonacular_client: FakeSpoonacularClient,
) -> AppContainer:
    json_store = JsonStore(key_value_store)
    recipe_service = RecipeService(spoonacular_client, page_size=20)

    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        recipe_service=recipe_service,
        recipe_browser=RecipeBrowser(recipe_service),
        favorites_service=FavoritesService(json_store),
        favorite_ids_service=FavoriteIdsService(json_store),
        grocery_service=GroceryListService(json_store),
        export_service=ExportService(),
        close_resources=close_resources,
    )
