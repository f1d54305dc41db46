"""Tests for the recipe service."""

import asyncio

import pytest

from recipe_finder.domain.recipes import DEFAULT_RECIPE_IMAGE
from recipe_finder.services.recipes import (
    API_KEY_ERROR,
    DETAIL_ERROR,
    PLACEHOLDER_RECIPE,
    EmptyQueryError,
    RecipeService,
)
from tests.conftest import FakeSpoonacularClient, http_error


def test_search_rejects_blank_query_without_network_call() -> None:
    client = FakeSpoonacularClient()
    service = RecipeService(client)

    with pytest.raises(EmptyQueryError):
        asyncio.run(service.search("   "))

    assert client.calls == []


def test_search_maps_results() -> None:
    client = FakeSpoonacularClient()
    service = RecipeService(client, page_size=10)

    results = asyncio.run(service.search("pasta"))

    assert results[0].id == 716429
    assert results[0].image == DEFAULT_RECIPE_IMAGE
    assert results[0].ready_in_minutes == 45
    assert client.calls == [("search", "pasta")]


def test_random_falls_back_to_default_image() -> None:
    service = RecipeService(FakeSpoonacularClient())

    recipes = asyncio.run(service.random())

    assert [recipe.title for recipe in recipes] == [
        "Tomato Soup",
        "Chicken Curry",
        "Green Soup",
    ]
    assert recipes[0].image == DEFAULT_RECIPE_IMAGE
    assert recipes[0].servings == 4
    assert recipes[2].image == "https://img/3.jpg"


def test_get_details_parses_ingredients_and_instructions() -> None:
    service = RecipeService(FakeSpoonacularClient())

    recipe = asyncio.run(service.get_details(716429))

    assert recipe.health_score == 19
    assert [item.name for item in recipe.extended_ingredients] == [
        "pasta",
        "garlic",
        "butter",
    ]
    assert recipe.analyzed_instructions[0][1].step == "Toss with garlic."
    assert recipe.nutrients[0].name == "Calories"


@pytest.mark.parametrize(
    ("status_code", "message"),
    [(401, API_KEY_ERROR), (403, API_KEY_ERROR), (500, DETAIL_ERROR)],
)
def test_detail_failure_falls_back_to_placeholder(
    status_code: int, message: str
) -> None:
    client = FakeSpoonacularClient(error=http_error(status_code))
    service = RecipeService(client)

    result = asyncio.run(service.get_details_or_placeholder(716429))

    assert result.is_placeholder is True
    assert result.recipe == PLACEHOLDER_RECIPE
    assert result.error == message


def test_detail_network_failure_uses_generic_message() -> None:
    client = FakeSpoonacularClient(error=ConnectionError("offline"))
    service = RecipeService(client)

    result = asyncio.run(service.get_details_or_placeholder(716429))

    assert result.error == DETAIL_ERROR


def test_get_bulk_skips_call_for_empty_ids() -> None:
    client = FakeSpoonacularClient()
    service = RecipeService(client)

    assert asyncio.run(service.get_bulk([])) == []
    assert client.calls == []

    recipes = asyncio.run(service.get_bulk([716429]))
    assert recipes[0].title == "Pasta with Garlic"
