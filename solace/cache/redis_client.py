"""
Redis client - cache for read-mostly listings (store catalogue, sponsors).
Failures degrade to a cache miss; the database is always the source of truth.
"""

import json
import logging
from typing import Any

from redis.asyncio import Redis

from solace.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()

_redis: Redis | None = None


async def get_redis() -> Redis:
    """Shared client; redis-py manages the connection pool."""
    global _redis
    if _redis is None:
        _redis = Redis.from_url(
            settings.redis_url,
            encoding="utf-8",
            decode_responses=True,
        )
    return _redis


async def cache_get(key: str) -> str | None:
    try:
        client = await get_redis()
        return await client.get(key)
    except Exception as e:
        logger.warning("cache_get failed for key=%s: %s", key, e)
        return None


async def cache_get_json(key: str) -> Any | None:
    raw = await cache_get(key)
    if raw is None:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        logger.warning("Discarding undecodable cache entry key=%s", key)
        return None


async def cache_set(key: str, value: str | dict[str, Any] | list[Any], ttl_seconds: int | None = None) -> bool:
    """Set value with TTL (defaults to settings.cache_ttl_seconds). Dicts and lists are JSON-encoded."""
    try:
        client = await get_redis()
        if not isinstance(value, str):
            value = json.dumps(value)
        await client.setex(key, ttl_seconds or settings.cache_ttl_seconds, value)
        return True
    except Exception as e:
        logger.warning("cache_set failed for key=%s: %s", key, e)
        return False


async def cache_delete(*keys: str) -> bool:
    """Invalidate one or more keys after a write."""
    if not keys:
        return True
    try:
        client = await get_redis()
        await client.delete(*keys)
        return True
    except Exception as e:
        logger.warning("cache_delete failed for keys=%s: %s", keys, e)
        return False
