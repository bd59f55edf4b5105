"""SQLAlchemy ORM model for user favourites.

A favourite is a plain join row between a user and a catalog entry. Rows are
created by the "favourite" action and deleted by "unfavourite"; they are
never updated in place, so the table carries no mutable columns.
"""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from . import Base, Pokemon, User, utcnow


class Favourite(Base):
    """Association row that links a user to a Pokémon they like."""

    __tablename__ = "favourites"
    __table_args__ = (
        UniqueConstraint(
            "user_id",
            "pokemon_id",
            name="uq_favourites_user_pokemon",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    pokemon_id: Mapped[int] = mapped_column(
        ForeignKey("pokemon.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )

    user: Mapped[User] = relationship("User", back_populates="favourites")
    pokemon: Mapped[Pokemon] = relationship("Pokemon")
