"""Favourites domain components split by responsibility.

Persistence and caching live in separate modules so the orchestrating
service can be tested against either one in isolation.
"""

from .cache import FavouritesCache
from .errors import (
    FavouriteAlreadyExistsError,
    FavouriteNotFoundError,
    NoFavouritesError,
    PokemonNotFoundError,
)
from .persistence import FavouritesPersistence

__all__ = [
    "FavouriteAlreadyExistsError",
    "FavouriteNotFoundError",
    "FavouritesCache",
    "FavouritesPersistence",
    "NoFavouritesError",
    "PokemonNotFoundError",
]
