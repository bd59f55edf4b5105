"""Database-oriented helpers for user favourites."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from backend.db.models import Favourite, Pokemon

from .errors import FavouriteAlreadyExistsError

logger = logging.getLogger(__name__)


class FavouritesPersistence:
    """Encapsulates SQLAlchemy operations required by the favourites domain.

    Only ``favourites`` rows are ever written; ``users`` and ``pokemon`` are
    read for existence checks.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def pokemon_exists(self, pokemon_id: int) -> bool:
        """Return ``True`` when the catalog contains ``pokemon_id``."""

        result = await self._session.execute(
            select(Pokemon.id).where(Pokemon.id == pokemon_id)
        )
        return result.scalar_one_or_none() is not None

    async def find_favourite(self, *, user_id: int, pokemon_id: int) -> Favourite | None:
        """Load the favourite row for the pair, if any."""

        query = select(Favourite).where(
            Favourite.user_id == user_id,
            Favourite.pokemon_id == pokemon_id,
        )
        result = await self._session.execute(query)
        return result.scalar_one_or_none()

    async def create_favourite(self, *, user_id: int, pokemon_id: int) -> Favourite:
        """Insert and commit a favourite row.

        The composite unique constraint is the final arbiter for concurrent
        inserts: a violation rolls the session back and surfaces as
        :class:`FavouriteAlreadyExistsError`.
        """

        favourite = Favourite(user_id=user_id, pokemon_id=pokemon_id)
        self._session.add(favourite)
        try:
            await self._session.commit()
        except IntegrityError as exc:
            await self._session.rollback()
            logger.info(
                "Unique constraint rejected duplicate favourite user=%s pokemon=%s: %s",
                user_id,
                pokemon_id,
                exc.orig,
            )
            raise FavouriteAlreadyExistsError(user_id, pokemon_id) from exc
        return favourite

    async def delete_favourite(self, favourite: Favourite) -> None:
        """Delete and commit a favourite row."""

        await self._session.delete(favourite)
        await self._session.commit()

    async def list_favourite_pokemon(self, *, user_id: int) -> list[tuple[int, str]]:
        """Return ``(id, name)`` pairs of Pokémon favourited by ``user_id``."""

        query = (
            select(Pokemon.id, Pokemon.name)
            .join(Favourite, Favourite.pokemon_id == Pokemon.id)
            .where(Favourite.user_id == user_id)
            .order_by(Pokemon.id)
        )
        result = await self._session.execute(query)
        return [(row.id, row.name) for row in result.all()]
