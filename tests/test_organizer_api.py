"""
Organizer applications: consent, one open application, fee checkout and admin review.
"""

import pytest
from httpx import AsyncClient

from solace.db.models import OrganizerApplication

APPLICATION = {
    "experience": "Volunteer grief counsellor since 2015",
    "motivation": "I want to start a widowers' breakfast group",
    "planned_meetups": "Saturday breakfasts, twice a month",
    "certifications": "Certified grief educator",
    "background_check_consent": True,
}


async def _apply(client: AsyncClient, headers: dict) -> dict:
    response = await client.post("/api/v1/organizer/applications", headers=headers, json=APPLICATION)
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_apply_requires_consent(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/organizer/applications", headers=auth_headers, json={**APPLICATION, "background_check_consent": False}
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Background check consent is required"}


@pytest.mark.asyncio
async def test_one_open_application(client: AsyncClient, auth_headers):
    first = await _apply(client, auth_headers)
    assert first["status"] == "pending_payment"
    assert first["payment_amount_cents"] > 0

    second = await client.post("/api/v1/organizer/applications", headers=auth_headers, json=APPLICATION)
    assert second.status_code == 409


@pytest.mark.asyncio
async def test_organizers_cannot_reapply(client: AsyncClient, organizer, auth_for):
    response = await client.post("/api/v1/organizer/applications", headers=auth_for(organizer), json=APPLICATION)
    assert response.status_code == 409
    assert response.json() == {"error": "You are already a meetup organizer"}


@pytest.mark.asyncio
async def test_fee_checkout(client: AsyncClient, member, auth_headers, stripe_calls):
    application = await _apply(client, auth_headers)
    response = await client.post(
        "/api/v1/organizer/create-checkout", headers=auth_headers, json={"application_id": application["id"]}
    )
    assert response.json()["session_id"] == "cs_test_123"

    params = stripe_calls.checkout.call_args.kwargs
    assert params["metadata"] == {
        "application_id": str(application["id"]),
        "user_id": str(member.id),
        "type": "organizer_verification",
    }
    assert params["line_items"][0]["price_data"]["unit_amount"] == application["payment_amount_cents"]


@pytest.mark.asyncio
async def test_fee_checkout_for_someone_elses_application(
    client: AsyncClient, auth_headers, verified_member, auth_for
):
    application = await _apply(client, auth_headers)
    response = await client.post(
        "/api/v1/organizer/create-checkout",
        headers=auth_for(verified_member),
        json={"application_id": application["id"]},
    )
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_unpaid_application_cannot_be_reviewed(client: AsyncClient, auth_headers, admin_headers):
    application = await _apply(client, auth_headers)
    assert (await client.get("/api/v1/admin/organizer-applications", headers=admin_headers)).json() == []

    response = await client.post(
        f"/api/v1/admin/organizer-applications/{application['id']}/approve", headers=admin_headers
    )
    assert response.status_code == 409
    assert response.json() == {"error": "Application is already pending_payment"}


@pytest.mark.asyncio
async def test_reject_paid_application(client: AsyncClient, member, session, auth_headers, admin_headers, sent_emails):
    application = await _apply(client, auth_headers)
    record = await session.get(OrganizerApplication, application["id"])
    record.status = "payment_complete"
    await session.commit()

    pending = (await client.get("/api/v1/admin/organizer-applications", headers=admin_headers)).json()
    assert [a["id"] for a in pending] == [application["id"]]

    rejected = await client.post(
        f"/api/v1/admin/organizer-applications/{application['id']}/reject",
        headers=admin_headers,
        json={"reason": "Please complete the training module first"},
    )
    assert rejected.json()["status"] == "rejected"
    assert rejected.json()["rejection_reason"] == "Please complete the training module first"
    to, template_id, data = sent_emails()[-1]
    assert (to, template_id) == (member.email, "organizer_rejected")
    assert data["reason"] == "Please complete the training module first"

    # A rejected application no longer blocks a new one
    await _apply(client, auth_headers)
