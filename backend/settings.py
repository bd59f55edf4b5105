"""Typed configuration for the Pokédex API, scripts and migrations."""

from __future__ import annotations

import logging
from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Populate os.environ from a local .env so Alembic and the seed script see the
# same values as uvicorn.
load_dotenv()

DEFAULT_SQLITE_DATABASE_URL = "sqlite+aiosqlite:///./data/app.db"
SQLITE_ASYNC_PREFIX = "sqlite+aiosqlite://"
POSTGRES_ASYNC_PREFIX = "postgresql+psycopg://"
POSTGRES_SYNC_PREFIXES = ("postgres://", "postgresql://")
DEFAULT_REDIS_URL = "redis://localhost:6379/0"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_JWT_SECRET = "please-change-me"
DEFAULT_FAVOURITES_CACHE_TTL_SECONDS = 600


class AppSettings(BaseSettings):
    """Environment-backed settings.

    Raw values are kept as declared; the properties below derive the forms
    the rest of the backend consumes (driver-qualified database URL, numeric
    log level, parsed CORS origins).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    database_url: str | None = Field(default=None, alias="DATABASE_URL")
    use_sqlite: bool = Field(
        default=False,
        alias="USE_SQLITE",
        description="Ignore DATABASE_URL and use the local SQLite file.",
    )
    redis_url: str = Field(default=DEFAULT_REDIS_URL, alias="REDIS_URL")
    cors_allow_origins_raw: str | None = Field(
        default=None,
        alias="CORS_ALLOW_ORIGINS",
        description="Comma-separated origins allowed in addition to localhost.",
    )
    log_level: str = Field(default=DEFAULT_LOG_LEVEL, alias="LOG_LEVEL")

    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET, alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24, alias="ACCESS_TOKEN_EXPIRE_MINUTES", ge=1
    )

    favourites_cache_ttl_seconds: int = Field(
        default=DEFAULT_FAVOURITES_CACHE_TTL_SECONDS,
        alias="FAVOURITES_CACHE_TTL_SECONDS",
        ge=1,
    )
    favourites_empty_is_error: bool = Field(
        default=False,
        alias="FAVOURITES_EMPTY_IS_ERROR",
        description=(
            "Answer GET /favourites with 404 when the list is empty, as older"
            " mobile builds expect."
        ),
    )

    @property
    def resolved_database_url(self) -> str:
        """Database URL with the async driver filled in.

        Raises ``RuntimeError`` for anything other than PostgreSQL or
        ``sqlite+aiosqlite``.
        """

        if self.use_sqlite or not self.database_url:
            return DEFAULT_SQLITE_DATABASE_URL

        url = self.database_url.strip()
        if url.startswith((POSTGRES_ASYNC_PREFIX, SQLITE_ASYNC_PREFIX)):
            return url

        sync_prefix = next((p for p in POSTGRES_SYNC_PREFIXES if url.startswith(p)), None)
        if sync_prefix is None:
            raise RuntimeError(f"Unsupported DATABASE_URL scheme: {url.split('://', 1)[0]}")
        return POSTGRES_ASYNC_PREFIX + url[len(sync_prefix):]

    @property
    def database_type(self) -> str:
        return "sqlite" if self.resolved_database_url.startswith("sqlite") else "postgresql"

    @property
    def cors_allow_origins(self) -> list[str]:
        raw = self.cors_allow_origins_raw or ""
        origins = (item.strip().rstrip("/") for item in raw.split(","))
        return [origin for origin in origins if origin]

    @property
    def log_level_numeric(self) -> int:
        level = logging.getLevelName(self.log_level.upper())
        return level if isinstance(level, int) else logging.INFO

    def optional_config_warnings(self) -> list[str]:
        """Describe optional settings that were left at their defaults.

        A value counts as configured once it was supplied at all, even when
        it equals the default.
        """

        provided = self.model_fields_set
        warnings: list[str] = []

        if "redis_url" not in provided:
            warnings.append(
                "REDIS_URL is not set - favourites will be served without a cache"
                " if the default localhost instance is unreachable"
            )
        if "cors_allow_origins_raw" not in provided or not self.cors_allow_origins:
            warnings.append(
                "CORS_ALLOW_ORIGINS is not set - using default localhost origins only"
            )
        if self.jwt_secret == DEFAULT_JWT_SECRET:
            warnings.append(
                "JWT_SECRET is not set - access tokens are signed with the"
                " development secret"
            )
        return warnings


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()

__all__ = [
    "AppSettings",
    "DEFAULT_FAVOURITES_CACHE_TTL_SECONDS",
    "DEFAULT_JWT_SECRET",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_REDIS_URL",
    "DEFAULT_SQLITE_DATABASE_URL",
    "POSTGRES_ASYNC_PREFIX",
    "POSTGRES_SYNC_PREFIXES",
    "get_settings",
    "settings",
]
