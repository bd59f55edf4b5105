from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Table,
    Text,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def utcnow() -> datetime:
    """Return current UTC datetime."""
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


pokemon_type_links = Table(
    "pokemon_type_links",
    Base.metadata,
    Column(
        "pokemon_id",
        ForeignKey("pokemon.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "type_id",
        ForeignKey("pokemon_types.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    # Primary type first; the client colours tiles from the first type.
    Column("slot", Integer, nullable=False, default=0),
)


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    favourites: Mapped[list[Favourite]] = relationship(
        "Favourite",
        back_populates="user",
        cascade="all, delete-orphan",
    )


class PokemonType(Base):
    __tablename__ = "pokemon_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), unique=True, nullable=False)
    color: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        doc="ARGB hex literal such as 0xFFF7D02C, parsed directly by the client.",
    )
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    image_url_outline: Mapped[str | None] = mapped_column(String, nullable=True)


class Pokemon(Base):
    __tablename__ = "pokemon"

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=False,
        doc="National Pokédex number.",
    )
    name: Mapped[str] = mapped_column(String(100), unique=True, index=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(String, nullable=True)
    height: Mapped[float | None]
    weight: Mapped[float | None]

    types: Mapped[list[PokemonType]] = relationship(
        "PokemonType",
        secondary=pokemon_type_links,
        order_by=pokemon_type_links.c.slot,
        lazy="selectin",
    )


# Imported late to avoid circular dependency with favourites module.
from .favourites import Favourite  # noqa: E402

__all__ = [
    "Base",
    "Favourite",
    "Pokemon",
    "PokemonType",
    "User",
    "pokemon_type_links",
    "utcnow",
]
