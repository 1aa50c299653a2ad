"""
Health checks - liveness for load balancers, readiness with dependency checks.
"""

import logging

from fastapi import APIRouter
from sqlalchemy import text

from solace.cache.redis_client import get_redis
from solace.config import get_settings
from solace.db.session import DbSession

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.get("")
async def health():
    """Liveness: is the process up?"""
    return {"status": "ok", "app": settings.app_name}


@router.get("/ready")
async def ready(session: DbSession):
    """Readiness: the database must answer; Redis is reported but optional."""
    await session.execute(text("SELECT 1"))
    checks = {"database": "ok"}
    try:
        redis = await get_redis()
        await redis.ping()
        checks["cache"] = "ok"
    except Exception as e:
        logger.warning("Readiness: cache unavailable: %s", e)
        checks["cache"] = "unavailable"
    return {"status": "ready", "checks": checks}
