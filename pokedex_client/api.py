"""Thin async wrapper over the Pokédex HTTP API.

Every non-2xx response, and every transport failure, is raised as
:class:`ApiError` carrying the server's ``message`` so callers can surface it
directly.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from .models import AuthSession, Pokemon, User

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"


class ApiError(Exception):
    """Raised for any failed API call."""

    def __init__(self, status_code: int | None, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict):
        for key in ("message", "detail"):
            if isinstance(body.get(key), str):
                return body[key]
    return response.reason_phrase


class PokedexApiClient:
    """Async API client. Pass ``client`` to reuse or mock the transport."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        token: str | None = None,
        client: httpx.AsyncClient | None = None,
        timeout: float = 10.0,
    ) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._owns_client = client is None
        self._token = token

    async def __aenter__(self) -> PokedexApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def is_authenticated(self) -> bool:
        return self._token is not None

    def set_token(self, token: str | None) -> None:
        self._token = token

    async def _request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if self._token is not None:
            headers["Authorization"] = f"Bearer {self._token}"
        try:
            response = await self._client.request(method, path, headers=headers, **kwargs)
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", method, path, exc)
            raise ApiError(None, f"Network error: {exc}") from exc

        if response.is_error:
            message = _error_message(response)
            logger.debug("%s %s -> %s: %s", method, path, response.status_code, message)
            raise ApiError(response.status_code, message)
        return response

    async def _authenticate(self, path: str, email: str, password: str) -> AuthSession:
        response = await self._request(
            "POST", path, json={"email": email, "password": password}
        )
        body = response.json()
        return AuthSession(user=User.model_validate(body["user"]), access_token=body["access_token"])

    async def register(self, email: str, password: str) -> AuthSession:
        return await self._authenticate("/auth/register", email, password)

    async def login(self, email: str, password: str) -> AuthSession:
        return await self._authenticate("/auth/login", email, password)

    async def _pokemon_page(self, *, limit: int, offset: int) -> tuple[list[Pokemon], int]:
        response = await self._request(
            "GET", "/pokemon", params={"limit": limit, "offset": offset}
        )
        body = response.json()
        return [Pokemon.model_validate(item) for item in body["items"]], body["total"]

    async def list_pokemon(self, *, limit: int = 200, offset: int = 0) -> list[Pokemon]:
        pokemons, _ = await self._pokemon_page(limit=limit, offset=offset)
        return pokemons

    async def list_all_pokemon(self, *, page_size: int = 200) -> list[Pokemon]:
        """Walk ``/pokemon`` by offset until the reported ``total`` is reached."""
        pokemons: list[Pokemon] = []
        while True:
            page, total = await self._pokemon_page(limit=page_size, offset=len(pokemons))
            pokemons.extend(page)
            if not page or len(pokemons) >= total:
                return pokemons

    async def add_favourite(self, pokemon_id: int) -> None:
        await self._request("POST", f"/pokemon/{pokemon_id}/favourite")

    async def remove_favourite(self, pokemon_id: int) -> None:
        await self._request("DELETE", f"/pokemon/{pokemon_id}/favourite")

    async def list_favourite_ids(self) -> set[int]:
        """Return the ids the signed-in user has favourited.

        A 404 is the server's compatibility answer for an empty list.
        """
        try:
            response = await self._request("GET", "/favourites")
        except ApiError as exc:
            if exc.status_code == 404:
                return set()
            raise
        return {entry["id"] for entry in response.json()["data"]["pokemons"]}
