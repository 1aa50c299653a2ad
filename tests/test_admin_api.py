"""
Admin dashboard: stats, member verification tiers, bans, templated e-mail.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_admin_routes_require_admin(client: AsyncClient, auth_headers):
    response = await client.get("/api/v1/admin/stats", headers=auth_headers)
    assert response.status_code == 403
    assert response.json() == {"error": "Admin access required"}


@pytest.mark.asyncio
async def test_stats(client: AsyncClient, admin_headers, member, verified_member, make_profile):
    await make_profile("banned@example.com", is_banned=True)
    response = await client.get("/api/v1/admin/stats", headers=admin_headers)
    assert response.status_code == 200
    data = response.json()
    # admin + member + verified_member + banned
    assert data["total_users"] == 4
    assert data["verified_users"] == 2
    assert data["banned_users"] == 1
    assert data["memorials"] == 0
    assert data["pending_reports"] == 0


@pytest.mark.asyncio
async def test_list_users_filtered_by_tier(client: AsyncClient, admin_headers, member, newcomer):
    response = await client.get("/api/v1/admin/users?verification_status=unverified", headers=admin_headers)
    assert [u["email"] for u in response.json()] == [newcomer.email]


@pytest.mark.asyncio
async def test_set_verification_stamps_every_tier(client: AsyncClient, admin_headers, newcomer):
    response = await client.patch(
        f"/api/v1/admin/users/{newcomer.id}/verification",
        headers=admin_headers,
        json={"verification_status": "meetup_organizer"},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["verification_status"] == "meetup_organizer"
    assert data["email_verified_at"] is not None
    assert data["id_verified_at"] is not None
    assert data["meetup_organizer_verified_at"] is not None


@pytest.mark.asyncio
async def test_ban_and_unban(client: AsyncClient, admin, admin_headers, member, auth_headers, queued):
    banned = await client.post(
        f"/api/v1/admin/users/{member.id}/ban", headers=admin_headers, json={"reason": "Harassment"}
    )
    assert banned.status_code == 200
    assert banned.json()["is_banned"] is True
    assert banned.json()["ban_reason"] == "Harassment"
    queued.removals.delay.assert_called_once_with("users", member.id)

    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).status_code == 403

    lifted = await client.post(f"/api/v1/admin/users/{member.id}/unban", headers=admin_headers)
    assert lifted.json()["is_banned"] is False
    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).status_code == 200


@pytest.mark.asyncio
async def test_admin_cannot_ban_themselves(client: AsyncClient, admin, admin_headers):
    response = await client.post(f"/api/v1/admin/users/{admin.id}/ban", headers=admin_headers, json={"reason": "x"})
    assert response.status_code == 400
    assert response.json()["error"] == "You cannot ban yourself"


@pytest.mark.asyncio
async def test_send_templated_email(client: AsyncClient, admin_headers, sent_emails):
    response = await client.post(
        "/api/v1/emails/send",
        headers=admin_headers,
        json={"to": "friend@example.com", "template_id": "welcome", "data": {"displayName": "Friend"}},
    )
    assert response.status_code == 200
    assert response.json()["success"] is True
    assert sent_emails() == [("friend@example.com", "welcome", {"displayName": "Friend"})]


@pytest.mark.asyncio
async def test_send_unknown_template(client: AsyncClient, admin_headers, sent_emails):
    response = await client.post(
        "/api/v1/emails/send",
        headers=admin_headers,
        json={"to": "friend@example.com", "template_id": "no_such_template"},
    )
    assert response.status_code == 400
    assert sent_emails() == []
