from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from backend.schemas.pokemon import PaginatedPokemonResponse, PokemonDetail
from backend.services.dependencies import get_pokemon_service
from backend.services.pokemon_service import PokemonService

router = APIRouter()


@router.get("", response_model=PaginatedPokemonResponse)
async def list_pokemon(
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    service: PokemonService = Depends(get_pokemon_service),
) -> PaginatedPokemonResponse:
    """Return a page of the catalog ordered by Pokédex number."""

    return await service.list_pokemon(limit=limit, offset=offset)


@router.get("/{pokemon_id}", response_model=PokemonDetail)
async def get_pokemon(
    pokemon_id: int,
    service: PokemonService = Depends(get_pokemon_service),
) -> PokemonDetail:
    pokemon = await service.get_pokemon(pokemon_id)
    if pokemon is None:
        raise HTTPException(status_code=404, detail=f"Pokémon with id {pokemon_id} not found")
    return pokemon
