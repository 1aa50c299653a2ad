"""
Health endpoint tests - liveness and readiness checks.
"""

import pytest
from httpx import AsyncClient

from solace.api.v1.endpoints import health


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["app"]


@pytest.mark.asyncio
async def test_ready(client: AsyncClient):
    """GET /api/v1/health/ready checks the database and the cache."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok", "cache": "ok"}}


@pytest.mark.asyncio
async def test_ready_with_cache_down(client: AsyncClient, monkeypatch):
    async def _unreachable():
        raise ConnectionError("redis is down")

    monkeypatch.setattr(health, "get_redis", _unreachable)
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert response.json()["checks"]["cache"] == "unavailable"


@pytest.mark.asyncio
async def test_metrics_exposed(client: AsyncClient):
    response = await client.get("/metrics/")
    assert response.status_code == 200
    assert "python_info" in response.text
