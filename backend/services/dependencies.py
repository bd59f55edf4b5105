"""FastAPI dependency wiring for backend services.

Keeping dependency factories out of the service modules leaves the services
free of web-layer concerns so tests and scripts can build them directly.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from backend.cache import CacheClient, get_cache_client
from backend.db.connection import get_db
from backend.db.models import User
from backend.services.auth_service import AuthenticationError, AuthService
from backend.services.pokemon_service import PokemonService

# ``auto_error`` is disabled so a missing header produces our 401 envelope
# instead of FastAPI's default response.
bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_service(session: AsyncSession = Depends(get_db)) -> AuthService:
    return AuthService(session)


def get_pokemon_service(
    session: AsyncSession = Depends(get_db),
    cache: CacheClient = Depends(get_cache_client),
) -> PokemonService:
    """Provide a fully-wired :class:`PokemonService` instance."""

    return PokemonService(session, cache=cache)


async def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    service: AuthService = Depends(get_auth_service),
) -> User:
    """Resolve the acting user from the ``Authorization: Bearer`` header."""

    if credentials is None or credentials.scheme.lower() != "bearer":
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return await service.resolve_token(credentials.credentials)
    except AuthenticationError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
            headers={"WWW-Authenticate": "Bearer"},
        ) from exc


CurrentUser = Annotated[User, Depends(get_current_user)]

__all__ = [
    "CurrentUser",
    "bearer_scheme",
    "get_auth_service",
    "get_current_user",
    "get_pokemon_service",
]
