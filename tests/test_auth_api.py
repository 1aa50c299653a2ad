"""
Registration, login and e-mail verification.
"""

import pytest
from httpx import AsyncClient

from solace.core.security import create_access_token, create_email_verification_token


@pytest.mark.asyncio
async def test_register_creates_unverified_profile_and_sends_welcome(client: AsyncClient, sent_emails, queued):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": "june@example.com", "password": "longenough", "display_name": "June"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["email"] == "june@example.com"
    assert data["verification_status"] == "unverified"
    assert "hashed_password" not in data

    [(to, template_id, payload)] = sent_emails()
    assert to == "june@example.com"
    assert template_id == "welcome"
    assert "/auth/verify-email?token=" in payload["verifyUrl"]
    assert queued.index.delay.call_args.args[0] == "users"


@pytest.mark.asyncio
async def test_register_duplicate_email_conflicts(client: AsyncClient, member):
    response = await client.post(
        "/api/v1/auth/register",
        json={"email": member.email, "password": "longenough"},
    )
    assert response.status_code == 409
    assert response.json() == {"error": "Email already registered"}


@pytest.mark.asyncio
async def test_register_short_password_is_rejected(client: AsyncClient):
    response = await client.post("/api/v1/auth/register", json={"email": "a@example.com", "password": "short"})
    assert response.status_code == 400
    assert "password" in response.json()["error"]


@pytest.mark.asyncio
async def test_login_returns_bearer_token(client: AsyncClient, member):
    response = await client.post("/api/v1/auth/login", json={"email": member.email, "password": "password123"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    me = await client.get("/api/v1/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["id"] == member.id


@pytest.mark.asyncio
async def test_login_wrong_password(client: AsyncClient, member):
    response = await client.post("/api/v1/auth/login", json={"email": member.email, "password": "wrong-password"})
    assert response.status_code == 401
    assert response.json()["error"] == "Invalid email or password"


@pytest.mark.asyncio
async def test_me_requires_token(client: AsyncClient):
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.json() == {"error": "Not authenticated"}


@pytest.mark.asyncio
async def test_banned_member_token_is_refused(client: AsyncClient, make_profile):
    banned = await make_profile("gone@example.com", is_banned=True)
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": f"Bearer {create_access_token(banned.id)}"}
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Account suspended"


@pytest.mark.asyncio
async def test_verify_email_promotes_newcomer(client: AsyncClient, newcomer):
    token = create_email_verification_token(newcomer.id, newcomer.email)
    response = await client.post("/api/v1/auth/verify-email", json={"token": token})
    assert response.status_code == 200
    assert response.json()["verification_status"] == "email_verified"
    assert response.json()["email_verified_at"] is not None


@pytest.mark.asyncio
async def test_access_token_cannot_verify_email(client: AsyncClient, newcomer):
    response = await client.post("/api/v1/auth/verify-email", json={"token": create_access_token(newcomer.id)})
    assert response.status_code == 400
    assert response.json()["error"] == "Invalid or expired verification token"


@pytest.mark.asyncio
async def test_resend_verification(client: AsyncClient, newcomer, member, auth_for, sent_emails):
    response = await client.post("/api/v1/auth/resend-verification", headers=auth_for(newcomer))
    assert response.status_code == 200
    assert sent_emails()[-1][1] == "verify_email"

    already = await client.post("/api/v1/auth/resend-verification", headers=auth_for(member))
    assert already.status_code == 409
