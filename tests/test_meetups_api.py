"""
Meetups: who may host, publishing, RSVPs and the waitlist.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient

from solace.core.clock import utcnow
from solace.core.enums import VerificationStatus


def _meetup(**overrides) -> dict:
    start = utcnow() + timedelta(days=7)
    body = {
        "title": "Tuesday evening circle",
        "description": "A gentle space to talk about loss.",
        "loss_categories": ["parent", "general"],
        "format": "in_person",
        "start_time": start.isoformat(),
        "end_time": (start + timedelta(hours=2)).isoformat(),
        "location_name": "Community library",
        "location_city": "Portland",
        "publish": True,
    }
    body.update(overrides)
    return body


async def _create(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/v1/meetups", headers=headers, json=_meetup(**overrides))
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_organizer_creates_published_meetup(client: AsyncClient, organizer, auth_for, sent_emails, queued):
    data = await _create(client, auth_for(organizer))
    assert data["status"] == "published"
    assert data["organizer_id"] == organizer.id
    assert data["attendee_count"] == 0
    assert sent_emails()[-1][1] == "meetup_created"
    assert queued.index.delay.call_args.args[0] == "meetups"

    listed = await client.get("/api/v1/meetups?city=Portland")
    assert [m["id"] for m in listed.json()] == [data["id"]]


@pytest.mark.asyncio
async def test_id_verified_member_cannot_host(client: AsyncClient, verified_member, auth_for):
    response = await client.post("/api/v1/meetups", headers=auth_for(verified_member), json=_meetup())
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_premium_member_with_background_check_can_host(client: AsyncClient, make_profile, auth_for):
    host = await make_profile(
        "premium@example.com",
        subscription_tier="premium",
        subscription_status="active",
        background_check_status="approved",
        background_check_expires_at=utcnow() + timedelta(days=30),
    )
    await _create(client, auth_for(host))


@pytest.mark.asyncio
async def test_in_person_meetup_needs_city(client: AsyncClient, organizer, auth_for):
    response = await client.post("/api/v1/meetups", headers=auth_for(organizer), json=_meetup(location_city=None))
    assert response.status_code == 400
    assert "location_city" in response.json()["error"]


@pytest.mark.asyncio
async def test_draft_is_hidden_until_published(client: AsyncClient, organizer, auth_for, verified_member):
    draft = await _create(client, auth_for(organizer), publish=False)
    url = f"/api/v1/meetups/{draft['id']}"
    assert (await client.get(url, headers=auth_for(verified_member))).status_code == 404
    assert (await client.get(url, headers=auth_for(organizer))).status_code == 200

    published = await client.post(f"{url}/status", headers=auth_for(organizer), json={"status": "published"})
    assert published.json()["status"] == "published"
    assert (await client.get(url)).status_code == 200

    back = await client.post(f"{url}/status", headers=auth_for(organizer), json={"status": "draft"})
    assert back.status_code == 409


@pytest.mark.asyncio
async def test_rsvp_requires_id_verification(client: AsyncClient, organizer, member, auth_for):
    meetup = await _create(client, auth_for(organizer))
    response = await client.post(
        "/api/v1/meetups/rsvp", headers=auth_for(member), json={"meetup_id": meetup["id"], "status": "attending"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_waitlist_promotion(client: AsyncClient, organizer, verified_member, make_profile, auth_for):
    second = await make_profile("second@example.com", VerificationStatus.ID_VERIFIED)
    meetup = await _create(client, auth_for(organizer), max_attendees=1)
    meetup_id = meetup["id"]

    first_rsvp = await client.post(
        "/api/v1/meetups/rsvp",
        headers=auth_for(verified_member),
        json={"meetup_id": meetup_id, "status": "attending"},
    )
    assert first_rsvp.status_code == 200

    full = await client.post(
        "/api/v1/meetups/rsvp", headers=auth_for(second), json={"meetup_id": meetup_id, "status": "attending"}
    )
    assert full.status_code == 400
    assert full.json()["error"] == "Meetup is full"

    waiting = await client.post(
        "/api/v1/meetups/rsvp", headers=auth_for(second), json={"meetup_id": meetup_id, "status": "waitlist"}
    )
    assert waiting.json()["status"] == "waitlist"

    detail = await client.get(f"/api/v1/meetups/{meetup_id}")
    assert detail.json()["attendee_count"] == 1
    assert detail.json()["is_full"] is True

    cancelled = await client.delete(f"/api/v1/meetups/rsvp?meetup_id={meetup_id}", headers=auth_for(verified_member))
    assert cancelled.status_code == 204

    attendees = await client.get(f"/api/v1/meetups/{meetup_id}/attendees", headers=auth_for(organizer))
    assert [(a["user_id"], a["status"]) for a in attendees.json()] == [(second.id, "attending")]
    assert (await client.get(f"/api/v1/meetups/{meetup_id}")).json()["attendee_count"] == 1


@pytest.mark.asyncio
async def test_waitlist_only_open_when_full(client: AsyncClient, organizer, verified_member, auth_for):
    meetup = await _create(client, auth_for(organizer), max_attendees=5)
    response = await client.post(
        "/api/v1/meetups/rsvp",
        headers=auth_for(verified_member),
        json={"meetup_id": meetup["id"], "status": "waitlist"},
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_attendees_are_organizer_only(client: AsyncClient, organizer, verified_member, auth_for):
    meetup = await _create(client, auth_for(organizer))
    response = await client.get(f"/api/v1/meetups/{meetup['id']}/attendees", headers=auth_for(verified_member))
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_raising_capacity_promotes_waitlist(
    client: AsyncClient, organizer, verified_member, make_profile, auth_for
):
    second = await make_profile("patient@example.com", VerificationStatus.ID_VERIFIED)
    meetup = await _create(client, auth_for(organizer), max_attendees=1)
    await client.post(
        "/api/v1/meetups/rsvp",
        headers=auth_for(verified_member),
        json={"meetup_id": meetup["id"], "status": "attending"},
    )
    await client.post(
        "/api/v1/meetups/rsvp", headers=auth_for(second), json={"meetup_id": meetup["id"], "status": "waitlist"}
    )

    updated = await client.patch(
        f"/api/v1/meetups/{meetup['id']}", headers=auth_for(organizer), json={"max_attendees": 2}
    )
    assert updated.json()["attendee_count"] == 2


@pytest.mark.asyncio
async def test_admin_can_cancel_any_meetup(client: AsyncClient, organizer, auth_for, admin_headers, queued):
    meetup = await _create(client, auth_for(organizer))
    response = await client.post(
        f"/api/v1/admin/meetups/{meetup['id']}/status", headers=admin_headers, json={"status": "cancelled"}
    )
    assert response.json()["status"] == "cancelled"
    queued.removals.delay.assert_called_with("meetups", meetup["id"])

    listing = await client.get("/api/v1/admin/meetups?status=cancelled", headers=admin_headers)
    assert [m["id"] for m in listing.json()] == [meetup["id"]]
