"""Recipe lookups against Spoonacular."""

import logging
from dataclasses import dataclass

from recipe_finder.adapters.spoonacular_client import SpoonacularClient
from recipe_finder.domain.recipes import (
    DEFAULT_RECIPE_IMAGE,
    DetailResult,
    Ingredient,
    InstructionStep,
    Nutrient,
    RecipeDetails,
    RecipeSummary,
)

API_KEY_ERROR = "API Key Error. Check your Spoonacular API key."
DETAIL_ERROR = "Failed to load recipe details. Please try again later."

PLACEHOLDER_RECIPE = RecipeDetails(
    id=1,
    title="Mock Recipe",
    image=DEFAULT_RECIPE_IMAGE,
    ready_in_minutes=None,
    servings=None,
    summary=None,
    instructions="Mix ingredients and bake.",
    extended_ingredients=[
        Ingredient(
            id=None, name="flour", original="1 cup flour", amount=1, unit="cup"
        ),
        Ingredient(id=None, name="eggs", original="2 eggs", amount=2, unit=None),
    ],
)

_logger = logging.getLogger(__name__)


class EmptyQueryError(ValueError):
    """Raised when a search is attempted with a blank query."""


@dataclass
class RecipeService:
    """Service mapping Spoonacular payloads to recipe records."""

    client: SpoonacularClient
    page_size: int = 20

    async def search(
        self, query: str, limit: int | None = None
    ) -> list[RecipeSummary]:
        """Search recipes; blank queries are rejected without a network call."""
        cleaned = query.strip()
        if not cleaned:
            raise EmptyQueryError("Search query must not be empty")
        payload = await self.client.complex_search(
            cleaned, number=limit or self.page_size
        )
        results = payload.get("results") or []
        _logger.info("Recipe search: query=%s results=%s", cleaned, len(results))
        return [_parse_summary(row) for row in results]

    async def random(self, count: int | None = None) -> list[RecipeSummary]:
        """Fetch a page of random recipes."""
        payload = await self.client.get_random(number=count or self.page_size)
        return [_parse_summary(row) for row in payload.get("recipes") or []]

    async def get_details(self, recipe_id: int) -> RecipeDetails:
        """Fetch the full recipe record including ingredients and nutrition."""
        payload = await self.client.get_information(recipe_id)
        if not payload:
            raise RuntimeError("No recipe details in response")
        return parse_details(payload)

    async def get_details_or_placeholder(self, recipe_id: int) -> DetailResult:
        """Fetch recipe details, substituting the placeholder recipe on failure."""
        try:
            recipe = await self.get_details(recipe_id)
        except Exception as exc:
            _logger.warning("Error fetching recipe details for %s: %s", recipe_id, exc)
            status_code = _status_code_from_exception(exc)
            message = API_KEY_ERROR if status_code in {401, 403} else DETAIL_ERROR
            return DetailResult(
                recipe=PLACEHOLDER_RECIPE, error=message, is_placeholder=True
            )
        return DetailResult(recipe=recipe)

    async def get_bulk(self, recipe_ids: list[int]) -> list[RecipeDetails]:
        """Fetch details for several recipes at once."""
        if not recipe_ids:
            return []
        payload = await self.client.get_information_bulk(recipe_ids)
        return [parse_details(row) for row in payload or []]


def _status_code_from_exception(exc: Exception) -> int | None:
    """Extract HTTP status code from an exception, if available."""
    response = getattr(exc, "response", None)
    status_code = getattr(response, "status_code", None)
    return status_code if isinstance(status_code, int) else None


def _parse_summary(row: dict[str, object]) -> RecipeSummary:
    return RecipeSummary(
        id=int(row["id"]),
        title=str(row.get("title", "")),
        image=str(row.get("image") or DEFAULT_RECIPE_IMAGE),
        ready_in_minutes=row.get("readyInMinutes"),
        servings=row.get("servings"),
        summary=row.get("summary"),
    )


def parse_details(payload: dict[str, object]) -> RecipeDetails:
    """Parse a Spoonacular information payload into a recipe record."""
    summary = _parse_summary(payload)
    return RecipeDetails(
        id=summary.id,
        title=summary.title,
        image=summary.image,
        ready_in_minutes=summary.ready_in_minutes,
        servings=summary.servings,
        summary=summary.summary,
        health_score=payload.get("healthScore"),
        instructions=payload.get("instructions"),
        extended_ingredients=[
            Ingredient(
                id=ingredient.get("id"),
                name=str(ingredient.get("name", "")),
                original=ingredient.get("original"),
                amount=ingredient.get("amount"),
                unit=ingredient.get("unit"),
            )
            for ingredient in payload.get("extendedIngredients") or []
        ],
        analyzed_instructions=[
            [
                InstructionStep(number=int(step.get("number", 0)), step=step["step"])
                for step in block.get("steps") or []
                if step.get("step")
            ]
            for block in payload.get("analyzedInstructions") or []
        ],
        nutrients=_extract_nutrients(payload.get("nutrition") or {}),
    )


def _extract_nutrients(nutrition: dict[str, object]) -> list[Nutrient]:
    """Extract per-serving nutrients from the nutrition block."""
    return [
        Nutrient(
            name=str(nutrient.get("name", "")),
            amount=float(nutrient.get("amount") or 0.0),
            unit=str(nutrient.get("unit", "")),
        )
        for nutrient in nutrition.get("nutrients") or []
    ]
