"""
Pytest fixtures - in-memory database, API client, members at each verification tier.

External services are replaced for every test: Redis by an in-memory dict, Elasticsearch is
unreachable (search falls back to the database), Celery publishes are captured, Stripe calls
return canned sessions.
"""

from collections.abc import AsyncGenerator
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from solace.api.v1.endpoints import health
from solace.cache import redis_client
from solace.core.clock import utcnow
from solace.core.enums import VerificationStatus
from solace.core.security import create_access_token, hash_password
from solace.db.base import Base
from solace.db.models import Profile
from solace.db.session import get_db
from solace.main import app
from solace.payments import stripe_client
from solace.queue import publish
from solace.search import elasticsearch_client

# One private in-memory database per test
TEST_DATABASE_URL = "sqlite+aiosqlite://"
PASSWORD = "password123"


class FakeRedis:
    """The handful of redis.asyncio calls the cache layer makes."""

    def __init__(self):
        self.store: dict[str, str] = {}

    async def get(self, key):
        return self.store.get(key)

    async def setex(self, key, ttl, value):
        self.store[key] = value

    async def delete(self, *keys):
        for key in keys:
            self.store.pop(key, None)

    async def ping(self):
        return True


@pytest.fixture(autouse=True)
def fake_redis(monkeypatch) -> FakeRedis:
    redis = FakeRedis()

    async def _get_redis():
        return redis

    monkeypatch.setattr(redis_client, "get_redis", _get_redis)
    monkeypatch.setattr(health, "get_redis", _get_redis)
    return redis


@pytest.fixture(autouse=True)
def search_offline(monkeypatch):
    async def _unreachable():
        raise ConnectionError("Elasticsearch is not running in tests")

    monkeypatch.setattr(elasticsearch_client, "get_elasticsearch", _unreachable)


@pytest.fixture(autouse=True)
def queued(monkeypatch) -> SimpleNamespace:
    """Celery tasks published during the test: queued.emails.delay.call_args_list etc."""
    tasks = SimpleNamespace(emails=MagicMock(), index=MagicMock(), removals=MagicMock())
    monkeypatch.setattr(publish, "send_email_task", tasks.emails)
    monkeypatch.setattr(publish, "index_document_task", tasks.index)
    monkeypatch.setattr(publish, "remove_document_task", tasks.removals)
    return tasks


@pytest.fixture
def sent_emails(queued: SimpleNamespace):
    """Callable returning (to, template_id, data) for every e-mail published so far."""

    def _sent() -> list[tuple[str, str, dict]]:
        return [c.args for c in queued.emails.delay.call_args_list]

    return _sent


@pytest.fixture(autouse=True)
def stripe_calls(monkeypatch) -> SimpleNamespace:
    calls = SimpleNamespace(
        checkout=AsyncMock(
            return_value={"session_id": "cs_test_123", "url": "https://checkout.stripe.test/c/cs_test_123"}
        ),
        customer=AsyncMock(return_value="cus_test_123"),
        portal=AsyncMock(return_value="https://billing.stripe.test/p/session"),
    )
    monkeypatch.setattr(stripe_client, "create_checkout_session", calls.checkout)
    monkeypatch.setattr(stripe_client, "create_customer", calls.customer)
    monkeypatch.setattr(stripe_client, "create_portal_session", calls.portal)
    return calls


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session(engine) -> AsyncGenerator[AsyncSession, None]:
    async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as s:
        yield s


@pytest_asyncio.fixture
async def client(session: AsyncSession):
    async def override_get_db():
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def make_profile(session: AsyncSession):
    """Factory: make_profile("ana@example.com", VerificationStatus.ID_VERIFIED, is_admin=False, ...)."""

    async def _make(
        email: str,
        status: VerificationStatus = VerificationStatus.EMAIL_VERIFIED,
        **fields,
    ) -> Profile:
        now = utcnow()
        profile = Profile(
            email=email,
            hashed_password=hash_password(PASSWORD),
            display_name=fields.pop("display_name", email.split("@")[0].title()),
            verification_status=status.value,
            email_verified_at=now if status != VerificationStatus.UNVERIFIED else None,
            **fields,
        )
        session.add(profile)
        await session.commit()
        await session.refresh(profile)
        # Detach so a rolled-back request on the shared session cannot expire the fixture
        session.expunge(profile)
        return profile

    return _make


@pytest_asyncio.fixture
async def member(make_profile) -> Profile:
    return await make_profile("grace@example.com", VerificationStatus.EMAIL_VERIFIED)


@pytest_asyncio.fixture
async def newcomer(make_profile) -> Profile:
    return await make_profile("new@example.com", VerificationStatus.UNVERIFIED)


@pytest_asyncio.fixture
async def verified_member(make_profile) -> Profile:
    return await make_profile("ida@example.com", VerificationStatus.ID_VERIFIED)


@pytest_asyncio.fixture
async def organizer(make_profile) -> Profile:
    return await make_profile(
        "olive@example.com",
        VerificationStatus.MEETUP_ORGANIZER,
        id_verified_at=utcnow(),
        meetup_organizer_verified_at=utcnow(),
    )


@pytest_asyncio.fixture
async def admin(make_profile) -> Profile:
    return await make_profile("admin@example.com", VerificationStatus.ID_VERIFIED, is_admin=True)


def _bearer(profile: Profile) -> dict:
    return {"Authorization": f"Bearer {create_access_token(profile.id)}"}


@pytest.fixture
def auth_for():
    """auth_for(profile) -> Authorization header for that member."""
    return _bearer


@pytest.fixture
def auth_headers(member: Profile) -> dict:
    return _bearer(member)


@pytest.fixture
def admin_headers(admin: Profile) -> dict:
    return _bearer(admin)
