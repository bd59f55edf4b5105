"""Immutable records the client works with.

These mirror the API payloads but are owned by the client so the stores never
depend on backend modules.
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict


class PokemonType(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    color: str
    image_url: str | None = None
    image_url_outline: str | None = None

    @property
    def argb(self) -> int:
        """Colour literal such as ``0xFFF7D02C`` parsed into an integer."""
        return int(self.color, 16)


class Pokemon(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    image_url: str | None = None
    types: tuple[PokemonType, ...] = ()
    is_favourite: bool = False


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    created_at: datetime | None = None


class AuthSession(BaseModel):
    """A signed-in user together with the bearer token issued for them."""

    model_config = ConfigDict(frozen=True)

    user: User
    access_token: str
