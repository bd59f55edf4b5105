"""Pydantic schemas for the read-only Pokémon catalog."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PokemonTypeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    name: str
    color: str = Field(..., description="ARGB hex literal, e.g. 0xFFF7D02C")
    image_url: str | None = None
    image_url_outline: str | None = None


class PokemonListItem(BaseModel):
    """Compact representation used by list views."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="National Pokédex number")
    name: str
    image_url: str | None = None
    types: list[PokemonTypeRead] = Field(default_factory=list)


class PokemonDetail(PokemonListItem):
    description: str | None = None
    height: float | None = Field(None, description="Height in metres")
    weight: float | None = Field(None, description="Weight in kilograms")


class PaginatedPokemonResponse(BaseModel):
    total: int
    limit: int
    offset: int
    items: list[PokemonListItem]


__all__ = [
    "PaginatedPokemonResponse",
    "PokemonDetail",
    "PokemonListItem",
    "PokemonTypeRead",
]
