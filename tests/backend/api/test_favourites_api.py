"""End-to-end tests for the favourites routes through the ASGI app."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from httpx import AsyncClient

from backend.db.models import User
from backend.settings import get_settings
from tests.conftest import bearer_headers


@pytest.fixture
def empty_is_error(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("FAVOURITES_EMPTY_IS_ERROR", "true")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_favourite_lifecycle(client: AsyncClient, user: User) -> None:
    headers = bearer_headers(user)

    created = await client.post("/pokemon/25/favourite", headers=headers)
    assert created.status_code == 201
    body = created.json()
    assert body["status"] == "Success"
    assert body["data"]["user_id"] == user.id
    assert body["data"]["pokemon_id"] == 25

    duplicate = await client.post("/pokemon/25/favourite", headers=headers)
    assert duplicate.status_code == 400
    assert duplicate.json()["status"] == "fail"
    assert duplicate.json()["error_type"] == "conflict"
    assert duplicate.json()["message"] == (
        f"User with id {user.id} has already liked the Pokémon with id 25"
    )

    listed = await client.get("/favourites", headers=headers)
    assert listed.status_code == 200
    assert listed.json() == {
        "status": "Success",
        "data": {"user_id": user.id, "pokemons": [{"id": 25, "name": "Pikachu"}]},
    }

    removed = await client.delete("/pokemon/25/favourite", headers=headers)
    assert removed.status_code == 204
    assert removed.content == b""

    again = await client.delete("/pokemon/25/favourite", headers=headers)
    assert again.status_code == 404
    assert again.json()["message"] == f"User {user.id} doesn't like pokemon with id 25"


@pytest.mark.asyncio
async def test_favouriting_unknown_pokemon_is_404(client: AsyncClient, user: User) -> None:
    response = await client.post("/pokemon/9999/favourite", headers=bearer_headers(user))

    assert response.status_code == 404
    payload = response.json()
    assert payload["status"] == "fail"
    assert payload["message"] == "Pokémon with id 9999 not found"
    assert payload["error_type"] == "not_found"
    assert payload["path"] == "/pokemon/9999/favourite"
    assert payload["request_id"] == response.headers["X-Request-ID"]


@pytest.mark.asyncio
async def test_empty_favourites_list_is_success(client: AsyncClient, user: User) -> None:
    response = await client.get("/favourites", headers=bearer_headers(user))

    assert response.status_code == 200
    assert response.json()["data"] == {"user_id": user.id, "pokemons": []}


@pytest.mark.asyncio
async def test_empty_favourites_list_is_404_in_compatibility_mode(
    client: AsyncClient, user: User, empty_is_error: None
) -> None:
    response = await client.get("/favourites", headers=bearer_headers(user))

    assert response.status_code == 404
    assert response.json()["message"] == (
        f"No favourite Pokémon found for user with id {user.id}"
    )


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path"),
    [
        ("POST", "/pokemon/25/favourite"),
        ("GET", "/favourites"),
        ("DELETE", "/pokemon/25/favourite"),
    ],
)
async def test_favourite_routes_require_a_bearer_token(
    client: AsyncClient, method: str, path: str
) -> None:
    response = await client.request(method, path)

    assert response.status_code == 401
    assert response.headers["WWW-Authenticate"] == "Bearer"
    assert response.json()["status"] == "fail"
    assert response.json()["error_type"] == "authentication_error"


@pytest.mark.asyncio
async def test_invalid_token_is_rejected(client: AsyncClient) -> None:
    response = await client.get(
        "/favourites", headers={"Authorization": "Bearer not-a-token"}
    )

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_non_integer_pokemon_id_is_validation_error(
    client: AsyncClient, user: User
) -> None:
    response = await client.post("/pokemon/pikachu/favourite", headers=bearer_headers(user))

    assert response.status_code == 422
    payload = response.json()
    assert payload["error_type"] == "validation_error"
    assert payload["errors"][0]["field"] == "path.pokemon_id"
