"""
Profiles: privacy, account status and ID verification requests.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from solace.core.clock import utcnow
from solace.core.enums import VerificationStatus


@pytest.mark.asyncio
async def test_update_me(client: AsyncClient, member, auth_headers, queued):
    response = await client.patch(
        "/api/v1/profiles/me",
        headers=auth_headers,
        json={"bio": "Missing my dad every day", "profile_visibility": "verified_members"},
    )
    assert response.status_code == 200
    assert response.json()["bio"] == "Missing my dad every day"
    assert response.json()["profile_visibility"] == "verified_members"
    queued.index.delay.assert_called_once()


@pytest.mark.asyncio
async def test_null_privacy_settings_are_ignored(client: AsyncClient, auth_headers):
    response = await client.patch(
        "/api/v1/profiles/me",
        headers=auth_headers,
        json={"allow_messages": None, "show_in_directory": None, "profile_visibility": None, "bio": None},
    )
    assert response.status_code == 200
    assert response.json()["allow_messages"] is True
    assert response.json()["show_in_directory"] is True
    assert response.json()["profile_visibility"] == "public"
    assert response.json()["bio"] is None


@pytest.mark.asyncio
async def test_private_profile_is_hidden_from_others(client: AsyncClient, make_profile, member, auth_headers):
    hidden = await make_profile("quiet@example.com", profile_visibility="private")
    response = await client.get(f"/api/v1/profiles/{hidden.id}", headers=auth_headers)
    assert response.status_code == 404
    assert response.json() == {"error": "Profile not found"}


@pytest.mark.asyncio
async def test_verified_members_only_profile(
    client: AsyncClient, make_profile, member, verified_member, auth_for
):
    guarded = await make_profile("guarded@example.com", profile_visibility="verified_members")
    url = f"/api/v1/profiles/{guarded.id}"
    assert (await client.get(url)).status_code == 404
    assert (await client.get(url, headers=auth_for(member))).status_code == 404
    visible = await client.get(url, headers=auth_for(verified_member))
    assert visible.status_code == 200
    assert "email" not in visible.json()


@pytest.mark.asyncio
async def test_account_status_for_premium_host(client: AsyncClient, make_profile, auth_for):
    host = await make_profile(
        "host@example.com",
        subscription_tier="premium",
        subscription_status="active",
        background_check_status="approved",
        background_check_expires_at=utcnow() + timedelta(days=200),
    )
    response = await client.get("/api/v1/profiles/me/status", headers=auth_for(host))
    assert response.status_code == 200
    data = response.json()
    assert data["verification"]["status"] == "email_verified"
    assert data["verification"]["can_post"] is True
    assert data["is_premium"] is True
    assert data["background_check"]["is_expired"] is False
    assert data["can_host_gatherings"] is True


@pytest.mark.asyncio
async def test_expired_background_check_cannot_host(client: AsyncClient, make_profile, auth_for):
    host = await make_profile(
        "lapsed@example.com",
        subscription_tier="premium",
        subscription_status="active",
        background_check_status="approved",
        background_check_expires_at=utcnow() - timedelta(days=1),
    )
    data = (await client.get("/api/v1/profiles/me/status", headers=auth_for(host))).json()
    assert data["background_check"]["is_expired"] is True
    assert data["can_host_gatherings"] is False


@pytest.mark.asyncio
async def test_id_verification_request_flow(client: AsyncClient, member, auth_headers, admin_headers, sent_emails):
    body = {"full_name": "Grace Hopper", "reason": "I want to join the Tuesday meetup"}
    created = await client.post("/api/v1/profiles/me/verification-requests", headers=auth_headers, json=body)
    assert created.status_code == 201
    request_id = created.json()["id"]

    duplicate = await client.post("/api/v1/profiles/me/verification-requests", headers=auth_headers, json=body)
    assert duplicate.status_code == 409

    pending = await client.get("/api/v1/admin/verification-requests", headers=admin_headers)
    assert [r["id"] for r in pending.json()] == [request_id]

    approved = await client.post(f"/api/v1/admin/verification-requests/{request_id}/approve", headers=admin_headers)
    assert approved.status_code == 200
    assert approved.json()["status"] == "approved"

    me = await client.get("/api/v1/profiles/me", headers=auth_headers)
    assert me.json()["verification_status"] == VerificationStatus.ID_VERIFIED.value
    assert sent_emails()[-1][1] == "account_verified"

    again = await client.post(
        f"/api/v1/admin/verification-requests/{request_id}/reject", headers=admin_headers, json={"reason": "late"}
    )
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_unverified_member_cannot_request_id_verification(client: AsyncClient, newcomer, auth_for):
    response = await client.post(
        "/api/v1/profiles/me/verification-requests",
        headers=auth_for(newcomer),
        json={"full_name": "New Person", "reason": "please"},
    )
    assert response.status_code == 403
