"""Caching helpers dedicated to favourites orchestration."""

from __future__ import annotations

import uuid

from backend.cache import CacheClient, favourite_generation_key, favourite_list_key
from backend.schemas.favourites import UserFavourites

INITIAL_GENERATION = "0"
# Outlives any list entry so an expired marker never resurrects an old list.
_GENERATION_TTL_SECONDS = 7 * 24 * 60 * 60


class FavouritesCache:
    """Typed read/write/invalidate helpers for a user's favourites list.

    Lists are stored under the user's current generation. Invalidation moves
    the generation forward, so a list computed before a mutation lands under
    a key that is never read again.
    """

    def __init__(self, client: CacheClient) -> None:
        self._client = client

    async def current_generation(self, *, user_id: int) -> str:
        stored = await self._client.get_json(favourite_generation_key(user_id))
        return INITIAL_GENERATION if stored is None else str(stored)

    async def read_favourites(self, *, user_id: int, generation: str) -> UserFavourites | None:
        """Return the list cached for ``generation`` if present."""

        cached = await self._client.get_json(favourite_list_key(user_id, generation))
        if cached is None:
            return None
        return UserFavourites.model_validate(cached)

    async def write_favourites(self, *, payload: UserFavourites, generation: str) -> None:
        """Store a list computed while ``generation`` was current."""

        await self._client.set_json(
            favourite_list_key(payload.user_id, generation), payload.model_dump(mode="json")
        )

    async def invalidate(self, *, user_id: int) -> None:
        """Start a new generation and drop the list cached under the old one."""

        previous = await self.current_generation(user_id=user_id)
        await self._client.set_json(
            favourite_generation_key(user_id), uuid.uuid4().hex, ttl=_GENERATION_TTL_SECONDS
        )
        await self._client.delete(favourite_list_key(user_id, previous))
