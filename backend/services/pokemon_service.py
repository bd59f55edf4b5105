"""Read-only access to the Pokémon catalog."""

from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from backend.cache import CacheClient, pokemon_detail_key
from backend.db.models import Pokemon
from backend.schemas.pokemon import (
    PaginatedPokemonResponse,
    PokemonDetail,
    PokemonListItem,
)


class PokemonService:
    """List and detail queries over the catalog.

    Catalog rows are immutable once seeded, so detail payloads are cached
    without invalidation hooks and simply expire with the TTL.
    """

    def __init__(self, session: AsyncSession, *, cache: CacheClient) -> None:
        self._session = session
        self._cache = cache

    async def list_pokemon(self, *, limit: int, offset: int) -> PaginatedPokemonResponse:
        total = await self._session.scalar(select(func.count(Pokemon.id)))
        result = await self._session.execute(
            select(Pokemon).order_by(Pokemon.id).limit(limit).offset(offset)
        )
        items = [PokemonListItem.model_validate(row) for row in result.scalars().all()]
        return PaginatedPokemonResponse(
            total=int(total or 0),
            limit=limit,
            offset=offset,
            items=items,
        )

    async def get_pokemon(self, pokemon_id: int) -> PokemonDetail | None:
        cache_key = pokemon_detail_key(pokemon_id)
        cached = await self._cache.get_json(cache_key)
        if cached is not None:
            return PokemonDetail.model_validate(cached)

        pokemon = await self._session.get(Pokemon, pokemon_id)
        if pokemon is None:
            return None

        detail = PokemonDetail.model_validate(pokemon)
        await self._cache.set_json(cache_key, detail.model_dump(mode="json"))
        return detail
