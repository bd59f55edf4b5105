"""Domain errors raised by the favourites workflow.

The classes derive from the built-in ``LookupError`` and ``ValueError`` so
routers can keep translating the broad families into HTTP status codes while
tests assert on the precise failure.
"""

from __future__ import annotations


class PokemonNotFoundError(LookupError):
    def __init__(self, pokemon_id: int) -> None:
        super().__init__(f"Pokémon with id {pokemon_id} not found")
        self.pokemon_id = pokemon_id


class FavouriteNotFoundError(LookupError):
    def __init__(self, user_id: int, pokemon_id: int) -> None:
        super().__init__(f"User {user_id} doesn't like pokemon with id {pokemon_id}")
        self.user_id = user_id
        self.pokemon_id = pokemon_id


class NoFavouritesError(LookupError):
    def __init__(self, user_id: int) -> None:
        super().__init__(f"No favourite Pokémon found for user with id {user_id}")
        self.user_id = user_id


class FavouriteAlreadyExistsError(ValueError):
    def __init__(self, user_id: int, pokemon_id: int) -> None:
        super().__init__(
            f"User with id {user_id} has already liked the Pokémon with id {pokemon_id}"
        )
        self.user_id = user_id
        self.pokemon_id = pokemon_id


__all__ = [
    "FavouriteAlreadyExistsError",
    "FavouriteNotFoundError",
    "NoFavouritesError",
    "PokemonNotFoundError",
]
