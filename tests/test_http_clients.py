"""Tests for HTTP-based adapters."""

import asyncio

import httpx
import pytest

from recipe_finder.adapters.spoonacular_client import HttpxSpoonacularClient


def _client(handler) -> HttpxSpoonacularClient:  # type: ignore[no-untyped-def]
    transport = httpx.MockTransport(handler)
    return HttpxSpoonacularClient(
        api_key="key",
        base_url="https://api.test",
        http_client=httpx.AsyncClient(transport=transport),
    )


def test_spoonacular_client_endpoints() -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        if request.url.path.endswith("/random"):
            return httpx.Response(200, json={"recipes": []})
        if request.url.path.endswith("/complexSearch"):
            return httpx.Response(200, json={"results": []})
        if request.url.path.endswith("/informationBulk"):
            return httpx.Response(200, json=[{"id": 1}, {"id": 2}])
        return httpx.Response(200, json={"id": 716429})

    client = _client(handler)

    random = asyncio.run(client.get_random(number=5))
    search = asyncio.run(client.complex_search("pasta", number=3))
    detail = asyncio.run(client.get_information(716429))
    bulk = asyncio.run(client.get_information_bulk([1, 2]))

    assert random == {"recipes": []}
    assert search == {"results": []}
    assert detail["id"] == 716429
    assert [row["id"] for row in bulk] == [1, 2]
    assert all(request.url.params["apiKey"] == "key" for request in seen)
    assert seen[0].url.params["number"] == "5"
    assert seen[1].url.params["query"] == "pasta"
    assert seen[1].url.params["addRecipeInformation"] == "true"
    assert seen[2].url.path == "/recipes/716429/information"
    assert seen[2].url.params["includeNutrition"] == "true"
    assert seen[3].url.params["ids"] == "1,2"


def test_spoonacular_client_raises_on_auth_error() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, json={"message": "invalid key"})

    client = _client(handler)

    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        asyncio.run(client.get_information(1))

    assert excinfo.value.response.status_code == 401
