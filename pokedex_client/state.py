"""Catalog state, the actions that change it, and the reducer.

``reduce`` is a pure function: it never mutates its input and always returns
a new :class:`PokemonState`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict

from .models import Pokemon


class PokemonStatus(str, Enum):
    INITIAL = "initial"
    LOADING = "loading"
    SUCCESS = "success"
    FAILURE = "failure"


class PokemonState(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: PokemonStatus = PokemonStatus.INITIAL
    pokemons: tuple[Pokemon, ...] = ()
    error: str | None = None

    def get_pokemon_by_id(self, pokemon_id: int) -> Pokemon | None:
        for pokemon in self.pokemons:
            if pokemon.id == pokemon_id:
                return pokemon
        return None

    @property
    def favourites(self) -> tuple[Pokemon, ...]:
        return tuple(pokemon for pokemon in self.pokemons if pokemon.is_favourite)


@dataclass(frozen=True)
class PokemonRequested:
    pass


@dataclass(frozen=True)
class PokemonLoaded:
    pokemons: tuple[Pokemon, ...]


@dataclass(frozen=True)
class PokemonLoadFailed:
    message: str


@dataclass(frozen=True)
class FavouriteToggled:
    pokemon_id: int
    is_favourite: bool


@dataclass(frozen=True)
class FavouriteToggleFailed:
    """The server rejected a toggle; ``is_favourite`` is the flag to restore."""

    pokemon_id: int
    is_favourite: bool
    message: str


PokemonAction = (
    PokemonRequested | PokemonLoaded | PokemonLoadFailed | FavouriteToggled | FavouriteToggleFailed
)


def _with_flag(state: PokemonState, pokemon_id: int, is_favourite: bool) -> tuple[Pokemon, ...]:
    if state.get_pokemon_by_id(pokemon_id) is None:
        raise KeyError(pokemon_id)
    return tuple(
        pokemon.model_copy(update={"is_favourite": is_favourite})
        if pokemon.id == pokemon_id
        else pokemon
        for pokemon in state.pokemons
    )


def reduce(state: PokemonState, action: PokemonAction) -> PokemonState:
    """Return the state that results from applying ``action`` to ``state``.

    Toggle actions for an id that is not in ``state.pokemons`` raise
    :class:`KeyError`.
    """
    if isinstance(action, PokemonRequested):
        return state.model_copy(update={"status": PokemonStatus.LOADING, "error": None})
    if isinstance(action, PokemonLoaded):
        return PokemonState(status=PokemonStatus.SUCCESS, pokemons=action.pokemons)
    if isinstance(action, PokemonLoadFailed):
        return state.model_copy(update={"status": PokemonStatus.FAILURE, "error": action.message})
    if isinstance(action, FavouriteToggled):
        pokemons = _with_flag(state, action.pokemon_id, action.is_favourite)
        return state.model_copy(update={"pokemons": pokemons, "error": None})
    if isinstance(action, FavouriteToggleFailed):
        pokemons = _with_flag(state, action.pokemon_id, action.is_favourite)
        return state.model_copy(update={"pokemons": pokemons, "error": action.message})
    raise TypeError(f"Unsupported action: {action!r}")
