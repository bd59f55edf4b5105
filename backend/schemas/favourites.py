"""Pydantic schemas that power the favourites API surface."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class FavouriteRecord(BaseModel):
    """A single persisted favourite row."""

    model_config = ConfigDict(from_attributes=True)

    user_id: int = Field(..., description="Owner of the favourite")
    pokemon_id: int = Field(..., description="National Pokédex number of the liked entry")
    created_at: datetime | None = Field(
        None, description="Timestamp when the user favourited the Pokémon."
    )


class FavouritePokemon(BaseModel):
    """Projection of a favourited catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class UserFavourites(BaseModel):
    """The acting user together with the Pokémon they favourited."""

    user_id: int
    pokemons: list[FavouritePokemon] = Field(default_factory=list)


class FavouriteCreatedResponse(BaseModel):
    """Envelope returned by ``POST /pokemon/{pokemon_id}/favourite``."""

    status: Literal["Success"] = "Success"
    data: FavouriteRecord


class FavouriteListResponse(BaseModel):
    """Envelope returned by ``GET /favourites``."""

    status: Literal["Success"] = "Success"
    data: UserFavourites


__all__ = [
    "FavouriteCreatedResponse",
    "FavouriteListResponse",
    "FavouritePokemon",
    "FavouriteRecord",
    "UserFavourites",
]
