from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from backend.settings import get_settings

logger = logging.getLogger(__name__)


def get_database_url() -> str:
    """Return the async database URL resolved from :mod:`backend.settings`.

    The settings object owns normalisation (``postgres://`` upgrades, SQLite
    fallback) so every caller observes the same error message when
    ``DATABASE_URL`` is malformed.
    """

    return get_settings().resolved_database_url


def get_database_type() -> str:
    """Return ``postgresql`` or ``sqlite`` for the configured database."""

    return get_settings().database_type


def create_engine(url: str | None = None) -> AsyncEngine:
    """Create the async SQLAlchemy engine.

    PostgreSQL engines keep a warm connection pool; SQLite engines are used for
    development and tests only and rely on SQLAlchemy's default pool.
    """

    url = url or get_database_url()

    if url.startswith("sqlite"):
        return create_async_engine(url, future=True, echo=False)

    return create_async_engine(
        url,
        future=True,
        echo=False,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=1800,
        pool_timeout=30,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


@asynccontextmanager
async def get_session(engine: AsyncEngine | None = None) -> AsyncIterator[AsyncSession]:
    engine = engine or get_engine()
    session_factory = create_session_factory(engine)
    async with session_factory() as session:
        yield session


# Process-wide engine shared by the API and scripts.
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def get_engine() -> AsyncEngine:
    """Get or create the global engine instance."""
    global _engine
    if _engine is None:
        _engine = create_engine()
    return _engine


def get_session_factory() -> async_sessionmaker[AsyncSession]:
    """Lazily create a session factory bound to the shared engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = create_session_factory(get_engine())
    return _session_factory


async def dispose_engine() -> None:
    """Dispose the shared engine so pooled connections close on shutdown."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def get_db() -> AsyncIterator[AsyncSession]:
    """
    Dependency to provide database session.

    Commits when the request handler succeeds and rolls back on errors.
    """
    async with get_session_factory()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
