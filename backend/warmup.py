"""Backend warmup to eliminate cold start delays.

Opens a database connection and a Redis connection before the first request
so the pool and the cache client are hot. Failures are logged and never
prevent startup.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


async def warmup_database(resolve_engine: Callable[[], AsyncEngine] | None = None) -> None:
    """Run ``SELECT 1`` so the pool establishes an initial connection."""
    try:
        if resolve_engine is None:
            from backend.db.connection import get_engine as resolve_engine

        start = time.time()
        engine = resolve_engine()
        async with engine.begin() as conn:
            await conn.execute(text("SELECT 1"))

        elapsed = (time.time() - start) * 1000
        logger.info(f"✓ Database connection warmed up ({elapsed:.0f}ms)")
    except Exception as e:
        logger.warning(f"Database warmup failed: {e}")


async def warmup_redis() -> None:
    """Establish the shared Redis client; degrade gracefully when unavailable."""
    from backend.cache import get_redis

    start = time.time()
    redis = await get_redis()
    if redis is None:
        logger.info("⚠ Redis warmup skipped (connection unavailable)")
        return

    elapsed = (time.time() - start) * 1000
    logger.info(f"✓ Redis connection warmed up ({elapsed:.0f}ms)")


async def warmup_all(resolve_engine: Callable[[], AsyncEngine] | None = None) -> None:
    """Warm up all backend connections and log the total time."""
    start = time.time()

    await warmup_database(resolve_engine=resolve_engine)
    await warmup_redis()

    total_elapsed = (time.time() - start) * 1000
    logger.info(f"✓ Backend warmup complete ({total_elapsed:.0f}ms)")
