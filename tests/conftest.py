"""Shared fixtures: an in-memory database seeded with the catalog, a cache
double, and an HTTP client bound to the FastAPI app."""

from __future__ import annotations

import json
from collections.abc import AsyncIterator, Callable
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from backend.cache import get_cache_client
from backend.db.connection import get_db
from backend.db.models import Base, User
from backend.main import app
from backend.scripts.seed_pokemon import load_catalog
from backend.security import create_access_token

FIXTURE_PATH = Path(__file__).resolve().parent.parent / "data" / "fixtures" / "pokemon.json"


class MemoryCache:
    """In-memory cache double that mimics :class:`backend.cache.CacheClient`."""

    def __init__(self) -> None:
        self.store: dict[str, object] = {}
        self.deleted: list[str] = []

    async def get_json(self, key: str) -> object | None:
        return self.store.get(key)

    async def set_json(self, key: str, value: object, ttl: int | None = None) -> None:
        self.store[key] = value

    async def delete(self, *keys: str) -> None:
        for key in keys:
            self.store.pop(key, None)
            self.deleted.append(key)


@pytest.fixture
def catalog_payload() -> dict:
    return json.loads(FIXTURE_PATH.read_text(encoding="utf-8"))


@pytest_asyncio.fixture
async def engine() -> AsyncIterator[AsyncEngine]:
    """In-memory SQLite shared by every session the test opens."""
    pytest.importorskip("aiosqlite")
    db_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield db_engine
    await db_engine.dispose()


@pytest_asyncio.fixture
async def session_factory(
    engine: AsyncEngine, catalog_payload: dict
) -> async_sessionmaker[AsyncSession]:
    factory = async_sessionmaker(engine, expire_on_commit=False)
    async with factory() as seed_session:
        await load_catalog(seed_session, catalog_payload)
        await seed_session.commit()
    return factory


@pytest_asyncio.fixture
async def session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncIterator[AsyncSession]:
    async with session_factory() as db_session:
        yield db_session
        if db_session.in_transaction():
            await db_session.rollback()


@pytest.fixture
def memory_cache() -> MemoryCache:
    return MemoryCache()


@pytest_asyncio.fixture
async def make_user(
    session_factory: async_sessionmaker[AsyncSession],
) -> Callable[[str], object]:
    """Return a coroutine factory inserting users without hashing a password."""

    async def _make_user(email: str) -> User:
        async with session_factory() as db_session:
            user = User(email=email, hashed_password="not-a-bcrypt-hash")
            db_session.add(user)
            await db_session.commit()
            return user

    return _make_user


@pytest_asyncio.fixture
async def user(make_user) -> User:
    return await make_user("ash@example.com")


def bearer_headers(user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(str(user.id))}"}


@pytest_asyncio.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
    memory_cache: MemoryCache,
) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app with the database and cache overridden."""

    async def _override_get_db() -> AsyncIterator[AsyncSession]:
        async with session_factory() as db_session:
            try:
                yield db_session
                await db_session.commit()
            except Exception:
                await db_session.rollback()
                raise

    async def _override_get_cache_client() -> MemoryCache:
        return memory_cache

    app.dependency_overrides[get_db] = _override_get_db
    app.dependency_overrides[get_cache_client] = _override_get_cache_client
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as http_client:
            yield http_client
    finally:
        app.dependency_overrides.clear()
