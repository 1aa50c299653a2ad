"""
BDD step definitions for the health feature (pytest-bdd).

Steps are synchronous; each request runs in its own event loop against a throwaway
in-memory database so readiness can be checked without PostgreSQL.
"""

import asyncio

import pytest
from httpx import ASGITransport, AsyncClient
from pytest_bdd import parsers, scenarios, then, when
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from solace.db.session import get_db
from solace.main import app

scenarios("health.feature")


async def _request(path: str) -> tuple[int, dict]:
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    sessions = async_sessionmaker(engine, expire_on_commit=False)

    async def _get_db():
        async with sessions() as session:
            yield session

    app.dependency_overrides[get_db] = _get_db
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get(path)
    finally:
        app.dependency_overrides.pop(get_db, None)
        await engine.dispose()
    return r.status_code, r.json()


@pytest.fixture
def response():
    """Last response, shared between when and then steps."""
    return {}


@when(parsers.parse('I request "GET" "{path}"'))
def request_path(response, path):
    response["status"], response["body"] = asyncio.run(_request(path))


@then(parsers.parse("the response status should be {code:d}"))
def status_is(response, code):
    assert response["status"] == code


@then(parsers.parse('the response body should have "{field}" equals "{value}"'))
def body_field_equals(response, field, value):
    assert response["body"].get(field) == value


@then(parsers.parse('the "{name}" check should be "{value}"'))
def check_is(response, name, value):
    assert response["body"]["checks"][name] == value
