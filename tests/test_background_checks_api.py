"""
Background checks: one live application per member, admin approval mirrored onto the profile.
"""

import pytest
from httpx import AsyncClient

APPLICATION = {
    "full_legal_name": "Grace Hopper",
    "date_of_birth": "1980-12-09",
    "ssn_last_4": "1234",
    "address_line_1": "12 Elm Street",
    "city": "Portland",
    "state": "OR",
    "zip_code": "97201",
}


async def _apply(client: AsyncClient, headers: dict) -> dict:
    response = await client.post("/api/v1/background-check/apply", headers=headers, json=APPLICATION)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_apply_marks_profile_pending(client: AsyncClient, auth_headers):
    application = await _apply(client, auth_headers)
    assert application["status"] == "pending"
    assert application["provider"] == "manual"

    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    assert me["background_check_status"] == "pending"

    again = await client.post("/api/v1/background-check/apply", headers=auth_headers, json=APPLICATION)
    assert again.status_code == 409


@pytest.mark.asyncio
async def test_ssn_must_be_four_digits(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/background-check/apply", headers=auth_headers, json={**APPLICATION, "ssn_last_4": "12a4"}
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("ssn_last_4")


@pytest.mark.asyncio
async def test_approve_sets_expiry(client: AsyncClient, auth_headers, admin_headers):
    application = await _apply(client, auth_headers)
    listed = await client.get("/api/v1/admin/background-checks?status=pending", headers=admin_headers)
    assert [a["id"] for a in listed.json()] == [application["id"]]

    approved = await client.post(
        f"/api/v1/admin/background-checks/{application['id']}/approve",
        headers=admin_headers,
        json={"admin_notes": "Clear"},
    )
    assert approved.json()["status"] == "approved"
    assert approved.json()["expires_at"] is not None

    status = (await client.get("/api/v1/profiles/me/status", headers=auth_headers)).json()
    assert status["background_check"]["status"] == "approved"
    assert status["background_check"]["is_expired"] is False
    # Still needs premium membership to host
    assert status["can_host_gatherings"] is False

    twice = await client.post(f"/api/v1/admin/background-checks/{application['id']}/approve", headers=admin_headers)
    assert twice.status_code == 409


@pytest.mark.asyncio
async def test_reject_needs_reason(client: AsyncClient, auth_headers, admin_headers):
    application = await _apply(client, auth_headers)
    url = f"/api/v1/admin/background-checks/{application['id']}/reject"

    missing = await client.post(url, headers=admin_headers, json={})
    assert missing.status_code == 400
    assert missing.json() == {"error": "Rejection reason is required"}

    rejected = await client.post(url, headers=admin_headers, json={"rejection_reason": "Address mismatch"})
    assert rejected.json()["status"] == "rejected"
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    assert me["background_check_status"] == "rejected"

    # Rejected members may apply again
    await _apply(client, auth_headers)
