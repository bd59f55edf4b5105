"""Business logic powering the favourites API endpoints.

Persistence-oriented operations are delegated to :class:`FavouritesPersistence`
(existence checks, inserts, deletes and the join query behind the list
view). :class:`FavouritesCache` keeps each user's list warm between
mutations. :class:`FavouritesService` coordinates the two and enforces the
invariants:

* a favourite can only reference an existing Pokémon;
* at most one favourite exists per ``(user_id, pokemon_id)`` pair;
* removing a favourite that does not exist is an error, not a no-op.
"""

from __future__ import annotations

import logging

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from backend.cache import CacheClient, get_cache_client
from backend.db.connection import get_db
from backend.schemas.favourites import FavouritePokemon, FavouriteRecord, UserFavourites
from backend.services.favourites import (
    FavouriteAlreadyExistsError,
    FavouriteNotFoundError,
    FavouritesCache,
    FavouritesPersistence,
    NoFavouritesError,
    PokemonNotFoundError,
)
from backend.settings import get_settings

logger = logging.getLogger(__name__)


class FavouritesService:
    """Orchestrates persistence and caching dependencies."""

    def __init__(
        self,
        *,
        persistence: FavouritesPersistence,
        cache: FavouritesCache,
        empty_is_error: bool = False,
    ) -> None:
        self._persistence = persistence
        self._cache = cache
        self._empty_is_error = empty_is_error

    async def add_favourite(self, *, user_id: int, pokemon_id: int) -> FavouriteRecord:
        """Favourite ``pokemon_id`` for ``user_id``.

        Raises :class:`PokemonNotFoundError` for unknown Pokémon and
        :class:`FavouriteAlreadyExistsError` for duplicates, including the
        loser of a concurrent insert race.
        """

        if not await self._persistence.pokemon_exists(pokemon_id):
            raise PokemonNotFoundError(pokemon_id)

        existing = await self._persistence.find_favourite(
            user_id=user_id, pokemon_id=pokemon_id
        )
        if existing is not None:
            raise FavouriteAlreadyExistsError(user_id, pokemon_id)

        favourite = await self._persistence.create_favourite(
            user_id=user_id, pokemon_id=pokemon_id
        )
        await self._cache.invalidate(user_id=user_id)
        logger.info("User %s favourited pokemon %s", user_id, pokemon_id)
        return FavouriteRecord.model_validate(favourite)

    async def list_favourites(self, *, user_id: int) -> UserFavourites:
        """Return the Pokémon ``user_id`` has favourited as ``{id, name}`` pairs."""

        # Read before the query; a mutation committed meanwhile bumps it.
        generation = await self._cache.current_generation(user_id=user_id)
        payload = await self._cache.read_favourites(user_id=user_id, generation=generation)
        if payload is None:
            rows = await self._persistence.list_favourite_pokemon(user_id=user_id)
            payload = UserFavourites(
                user_id=user_id,
                pokemons=[FavouritePokemon(id=pokemon_id, name=name) for pokemon_id, name in rows],
            )
            await self._cache.write_favourites(payload=payload, generation=generation)

        if not payload.pokemons and self._empty_is_error:
            raise NoFavouritesError(user_id)
        return payload

    async def remove_favourite(self, *, user_id: int, pokemon_id: int) -> None:
        """Delete the favourite for the pair or raise :class:`FavouriteNotFoundError`."""

        favourite = await self._persistence.find_favourite(
            user_id=user_id, pokemon_id=pokemon_id
        )
        if favourite is None:
            raise FavouriteNotFoundError(user_id, pokemon_id)

        await self._persistence.delete_favourite(favourite)
        await self._cache.invalidate(user_id=user_id)
        logger.info("User %s no longer likes pokemon %s", user_id, pokemon_id)


async def get_favourites_service(
    session: AsyncSession = Depends(get_db),
    cache_client: CacheClient = Depends(get_cache_client),
) -> FavouritesService:
    """FastAPI dependency that wires the orchestrator together."""

    return FavouritesService(
        persistence=FavouritesPersistence(session),
        cache=FavouritesCache(cache_client),
        empty_is_error=get_settings().favourites_empty_is_error,
    )
