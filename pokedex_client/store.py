"""State container that drives the catalog screens.

The store is created explicitly and handed to whatever renders it; listeners
receive every emitted state synchronously, in order.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from .api import ApiError, PokedexApiClient
from .state import (
    FavouriteToggled,
    FavouriteToggleFailed,
    PokemonAction,
    PokemonLoaded,
    PokemonLoadFailed,
    PokemonRequested,
    PokemonState,
    reduce,
)

logger = logging.getLogger(__name__)

Listener = Callable[[PokemonState], None]


class PokemonStore:
    """Serialises catalog commands and emits reduced states to listeners."""

    def __init__(self, api: PokedexApiClient, *, initial_state: PokemonState | None = None) -> None:
        self._api = api
        self._state = initial_state or PokemonState()
        self._listeners: list[Listener] = []
        # One command at a time; a toggle never interleaves with a reload.
        self._lock = asyncio.Lock()

    @property
    def state(self) -> PokemonState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: PokemonAction) -> PokemonState:
        self._state = reduce(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state

    async def load(self, *, page_size: int = 200) -> None:
        """Fetch the whole catalog and mark the signed-in user's favourites."""
        async with self._lock:
            self.dispatch(PokemonRequested())
            try:
                pokemons = await self._api.list_all_pokemon(page_size=page_size)
                favourite_ids = (
                    await self._api.list_favourite_ids() if self._api.is_authenticated else set()
                )
            except ApiError as exc:
                logger.warning("Loading catalog failed: %s", exc.message)
                self.dispatch(PokemonLoadFailed(exc.message))
                return

            self.dispatch(
                PokemonLoaded(
                    tuple(
                        pokemon.model_copy(update={"is_favourite": pokemon.id in favourite_ids})
                        for pokemon in pokemons
                    )
                )
            )

    async def toggle_favourite(self, pokemon_id: int) -> None:
        """Flip the favourite flag, then confirm it with the API.

        The flag is restored if the call fails. Raises :class:`KeyError` for
        an id that is not loaded.
        """
        async with self._lock:
            pokemon = self._state.get_pokemon_by_id(pokemon_id)
            if pokemon is None:
                raise KeyError(pokemon_id)

            target = not pokemon.is_favourite
            self.dispatch(FavouriteToggled(pokemon_id, target))
            try:
                if target:
                    await self._api.add_favourite(pokemon_id)
                else:
                    await self._api.remove_favourite(pokemon_id)
            except ApiError as exc:
                logger.info("Reverting favourite toggle for %s: %s", pokemon_id, exc.message)
                self.dispatch(FavouriteToggleFailed(pokemon_id, not target, exc.message))
