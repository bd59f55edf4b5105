"""Catalog listing and detail routes."""

from __future__ import annotations

import pytest
from httpx import AsyncClient

from backend.cache import pokemon_detail_key
from tests.conftest import MemoryCache


@pytest.mark.asyncio
async def test_list_pokemon_paginates_in_pokedex_order(client: AsyncClient) -> None:
    response = await client.get("/pokemon", params={"limit": 3, "offset": 1})

    assert response.status_code == 200
    payload = response.json()
    assert payload["total"] == 7
    assert payload["limit"] == 3
    assert payload["offset"] == 1
    assert [item["id"] for item in payload["items"]] == [4, 6, 7]


@pytest.mark.asyncio
async def test_list_items_carry_types_in_slot_order(client: AsyncClient) -> None:
    response = await client.get("/pokemon", params={"limit": 1})

    bulbasaur = response.json()["items"][0]
    assert bulbasaur["name"] == "Bulbasaur"
    assert [t["name"] for t in bulbasaur["types"]] == ["Grass", "Poison"]
    assert bulbasaur["types"][0]["color"] == "0xFF7AC74C"


@pytest.mark.asyncio
async def test_get_pokemon_detail_is_cached(
    client: AsyncClient, memory_cache: MemoryCache
) -> None:
    response = await client.get("/pokemon/25")

    assert response.status_code == 200
    detail = response.json()
    assert detail["name"] == "Pikachu"
    assert detail["height"] == 0.4
    assert memory_cache.store[pokemon_detail_key(25)]["name"] == "Pikachu"


@pytest.mark.asyncio
async def test_get_unknown_pokemon_is_404(client: AsyncClient) -> None:
    response = await client.get("/pokemon/9999")

    assert response.status_code == 404
    assert response.json()["message"] == "Pokémon with id 9999 not found"


@pytest.mark.asyncio
async def test_list_pokemon_rejects_out_of_range_limit(client: AsyncClient) -> None:
    response = await client.get("/pokemon", params={"limit": 0})

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_healthcheck(client: AsyncClient) -> None:
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}
    assert response.headers["X-Request-ID"]
