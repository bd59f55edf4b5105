"""PokemonStore command handling with a fake API."""

from __future__ import annotations

import asyncio

import pytest

from pokedex_client import (
    ApiError,
    Pokemon,
    PokemonRequested,
    PokemonState,
    PokemonStatus,
    PokemonStore,
)


class FakeApi:
    """In-memory stand-in for :class:`pokedex_client.PokedexApiClient`."""

    def __init__(self, *, authenticated: bool = True) -> None:
        self.catalog = [Pokemon(id=1, name="Bulbasaur"), Pokemon(id=25, name="Pikachu")]
        self.favourites: set[int] = {25}
        self.is_authenticated = authenticated
        self.fail_with: ApiError | None = None
        self.calls: list[tuple[str, int]] = []

    async def list_all_pokemon(self, *, page_size: int = 200) -> list[Pokemon]:
        if self.fail_with is not None:
            raise self.fail_with
        return list(self.catalog)

    async def list_favourite_ids(self) -> set[int]:
        return set(self.favourites)

    async def add_favourite(self, pokemon_id: int) -> None:
        self.calls.append(("add", pokemon_id))
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        self.favourites.add(pokemon_id)

    async def remove_favourite(self, pokemon_id: int) -> None:
        self.calls.append(("remove", pokemon_id))
        await asyncio.sleep(0)
        if self.fail_with is not None:
            raise self.fail_with
        self.favourites.discard(pokemon_id)


@pytest.mark.asyncio
async def test_load_marks_favourites_and_notifies_listeners() -> None:
    store = PokemonStore(FakeApi())
    emitted: list[PokemonState] = []
    store.subscribe(emitted.append)

    await store.load()

    assert [state.status for state in emitted] == [PokemonStatus.LOADING, PokemonStatus.SUCCESS]
    assert [p.id for p in store.state.favourites] == [25]


@pytest.mark.asyncio
async def test_load_skips_favourites_when_signed_out() -> None:
    store = PokemonStore(FakeApi(authenticated=False))

    await store.load()

    assert store.state.favourites == ()


@pytest.mark.asyncio
async def test_load_failure_is_recorded() -> None:
    api = FakeApi()
    api.fail_with = ApiError(None, "Network error: connection refused")
    store = PokemonStore(api)

    await store.load()

    assert store.state.status is PokemonStatus.FAILURE
    assert store.state.error == "Network error: connection refused"


@pytest.mark.asyncio
async def test_toggle_adds_and_removes() -> None:
    api = FakeApi()
    store = PokemonStore(api)
    await store.load()

    await store.toggle_favourite(1)
    await store.toggle_favourite(25)

    assert api.calls == [("add", 1), ("remove", 25)]
    assert [p.id for p in store.state.favourites] == [1]


@pytest.mark.asyncio
async def test_toggle_is_optimistic_and_reverted_on_failure() -> None:
    api = FakeApi()
    store = PokemonStore(api)
    await store.load()
    api.fail_with = ApiError(400, "User with id 7 has already liked the Pokémon with id 1")
    flags: list[bool] = []
    store.subscribe(lambda state: flags.append(state.get_pokemon_by_id(1).is_favourite))

    await store.toggle_favourite(1)

    assert flags == [True, False]
    assert store.state.get_pokemon_by_id(1).is_favourite is False
    assert store.state.get_pokemon_by_id(25).is_favourite is True
    assert store.state.error == "User with id 7 has already liked the Pokémon with id 1"


@pytest.mark.asyncio
async def test_concurrent_toggles_are_serialised() -> None:
    api = FakeApi()
    store = PokemonStore(api)
    await store.load()

    await asyncio.gather(store.toggle_favourite(1), store.toggle_favourite(1))

    # The second toggle observes the first one's result and undoes it.
    assert api.calls == [("add", 1), ("remove", 1)]
    assert store.state.get_pokemon_by_id(1).is_favourite is False


@pytest.mark.asyncio
async def test_toggle_unknown_id_raises() -> None:
    store = PokemonStore(FakeApi())
    await store.load()

    with pytest.raises(KeyError):
        await store.toggle_favourite(999)


def test_unsubscribe_stops_notifications() -> None:
    store = PokemonStore(FakeApi())
    emitted: list[PokemonState] = []
    unsubscribe = store.subscribe(emitted.append)

    unsubscribe()
    store.dispatch(PokemonRequested())

    assert emitted == []
