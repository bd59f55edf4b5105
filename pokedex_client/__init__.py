"""Async client and state stores for the Pokédex API."""

from .api import ApiError, PokedexApiClient
from .auth import AuthState, AuthStatus, AuthStore
from .models import AuthSession, Pokemon, PokemonType, User
from .state import (
    FavouriteToggled,
    FavouriteToggleFailed,
    PokemonLoaded,
    PokemonLoadFailed,
    PokemonRequested,
    PokemonState,
    PokemonStatus,
    reduce,
)
from .store import PokemonStore

__all__ = [
    "ApiError",
    "AuthSession",
    "AuthState",
    "AuthStatus",
    "AuthStore",
    "FavouriteToggleFailed",
    "FavouriteToggled",
    "Pokemon",
    "PokemonLoadFailed",
    "PokemonLoaded",
    "PokemonRequested",
    "PokemonState",
    "PokemonStatus",
    "PokemonStore",
    "PokemonType",
    "User",
    "reduce",
]
