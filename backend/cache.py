from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from redis.asyncio import Redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import TimeoutError as RedisTimeoutError

from backend.settings import get_settings

logger = logging.getLogger(__name__)

_DEFAULT_TTL_SECONDS = 600
_FAVOURITE_LIST_PREFIX = "favourites:list"
_FAVOURITE_GENERATION_PREFIX = "favourites:generation"
_POKEMON_DETAIL_PREFIX = "pokemon:detail"

_redis_client: Redis | None = None
_client_lock = asyncio.Lock()
_redis_disabled = False

_UNAVAILABLE_ERRORS = (RedisConnectionError, RedisTimeoutError, OSError)


def _redis_url() -> str:
    return get_settings().redis_url


def favourite_list_key(user_id: int | str, generation: str) -> str:
    return f"{_FAVOURITE_LIST_PREFIX}:{user_id}:{generation}"


def favourite_generation_key(user_id: int | str) -> str:
    return f"{_FAVOURITE_GENERATION_PREFIX}:{user_id}"


def pokemon_detail_key(pokemon_id: int | str) -> str:
    return f"{_POKEMON_DETAIL_PREFIX}:{pokemon_id}"


async def get_redis() -> Redis | None:
    """Get Redis client, returning None if connection fails."""
    global _redis_client, _redis_disabled

    if _redis_disabled:
        logger.debug("Redis connection disabled after previous failure; skipping attempt.")
        return None

    # Acquire the lock first so concurrent requests share one connection attempt.
    async with _client_lock:
        if _redis_client is not None:
            return _redis_client

        if _redis_disabled:
            return None

        client = Redis.from_url(_redis_url(), decode_responses=True, encoding="utf-8")
        try:
            await client.ping()
        except _UNAVAILABLE_ERRORS as exc:
            logger.warning(f"Redis connection failed: {exc}. Caching will be disabled.")
            await client.aclose()
            _redis_disabled = True
            return None

        _redis_client = client
        logger.info("Redis connection established successfully")
        return _redis_client


class CacheClient:
    """JSON cache facade over Redis.

    A ``None`` backend turns every call into a no-op, and connection errors
    are logged and swallowed so a Redis outage degrades to uncached reads.
    """

    def __init__(self, redis: Redis | None, *, default_ttl: int = _DEFAULT_TTL_SECONDS) -> None:
        self._redis = redis
        self._default_ttl = default_ttl

    async def get_json(self, key: str) -> Any:
        if self._redis is None:
            return None
        try:
            payload = await self._redis.get(key)
        except _UNAVAILABLE_ERRORS as exc:
            logger.debug(f"Redis get failed for key {key}: {exc}")
            return None
        if payload is None:
            return None
        try:
            return json.loads(payload)
        except json.JSONDecodeError:
            logger.warning("Discarding undecodable cache payload for key %s", key)
            return None

    async def set_json(self, key: str, value: Any, ttl: int | None = None) -> None:
        if self._redis is None:
            return
        encoded = json.dumps(value, default=str)
        try:
            await self._redis.set(key, encoded, ex=ttl or self._default_ttl)
        except _UNAVAILABLE_ERRORS as exc:
            logger.debug(f"Redis set failed for key {key}: {exc}")

    async def delete(self, *keys: str) -> None:
        if self._redis is None or not keys:
            return
        try:
            await self._redis.delete(*keys)
        except _UNAVAILABLE_ERRORS as exc:
            logger.debug(f"Redis delete failed: {exc}")


async def get_cache_client() -> CacheClient:
    redis = await get_redis()
    return CacheClient(redis, default_ttl=get_settings().favourites_cache_ttl_seconds)


async def close_redis() -> None:
    """Close the global Redis connection gracefully."""
    global _redis_client, _redis_disabled
    if _redis_client is not None:
        await _redis_client.aclose()
        _redis_client = None
    _redis_disabled = False


__all__ = [
    "CacheClient",
    "close_redis",
    "favourite_generation_key",
    "favourite_list_key",
    "get_cache_client",
    "get_redis",
    "pokemon_detail_key",
]
