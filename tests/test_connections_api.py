"""
Member connections: requests, accept/decline, tabs and removal.
"""

import pytest
from httpx import AsyncClient

URL = "/api/v1/connections"


@pytest.mark.asyncio
async def test_request_and_accept(client: AsyncClient, member, auth_headers, verified_member, auth_for):
    sent = await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})
    assert sent.status_code == 201
    assert sent.json()["status"] == "pending"
    assert sent.json()["direction"] == "sent"
    assert sent.json()["member"]["display_name"] == "Ida"
    assert sent.json()["responded_at"] is None
    connection_id = sent.json()["id"]

    received = (await client.get(f"{URL}?tab=received", headers=auth_for(verified_member))).json()
    assert [c["id"] for c in received] == [connection_id]
    assert received[0]["direction"] == "received"
    assert received[0]["member"]["id"] == member.id
    outgoing = (await client.get(f"{URL}?tab=sent", headers=auth_headers)).json()
    assert [c["id"] for c in outgoing] == [connection_id]

    status = await client.get(f"{URL}/with/{member.id}", headers=auth_for(verified_member))
    assert status.json() == {"user_id": member.id, "status": "pending", "connection_id": connection_id}

    accepted = await client.post(f"{URL}/{connection_id}/accept", headers=auth_for(verified_member))
    assert accepted.status_code == 200
    assert accepted.json()["status"] == "accepted"
    assert accepted.json()["responded_at"] is not None

    mine = (await client.get(URL, headers=auth_headers)).json()
    theirs = (await client.get(URL, headers=auth_for(verified_member))).json()
    assert [c["member"]["id"] for c in mine] == [verified_member.id]
    assert [c["member"]["id"] for c in theirs] == [member.id]
    assert (await client.get(f"{URL}?tab=received", headers=auth_for(verified_member))).json() == []

    again = await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})
    assert again.status_code == 409
    assert again.json()["error"] == "You are already connected"


@pytest.mark.asyncio
async def test_only_addressee_can_respond(client: AsyncClient, auth_headers, verified_member, auth_for):
    connection_id = (await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})).json()["id"]

    response = await client.post(f"{URL}/{connection_id}/accept", headers=auth_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Connection request not found"

    declined = await client.post(f"{URL}/{connection_id}/decline", headers=auth_for(verified_member))
    assert declined.json()["status"] == "declined"
    late = await client.post(f"{URL}/{connection_id}/accept", headers=auth_for(verified_member))
    assert late.status_code == 409
    assert late.json()["error"] == "Connection request is already declined"


@pytest.mark.asyncio
async def test_declined_request_stays_sent_for_requester(
    client: AsyncClient, member, auth_headers, verified_member, auth_for
):
    connection_id = (await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})).json()["id"]
    await client.post(f"{URL}/{connection_id}/decline", headers=auth_for(verified_member))

    mine = await client.get(f"{URL}/with/{verified_member.id}", headers=auth_headers)
    assert mine.json()["status"] == "sent"
    resend = await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})
    assert resend.status_code == 409

    theirs = await client.get(f"{URL}/with/{member.id}", headers=auth_for(verified_member))
    assert theirs.json()["status"] == "none"
    reversed_request = await client.post(URL, headers=auth_for(verified_member), json={"user_id": member.id})
    assert reversed_request.status_code == 201
    assert reversed_request.json()["id"] == connection_id
    assert reversed_request.json()["status"] == "pending"
    assert reversed_request.json()["requester_id"] == verified_member.id


@pytest.mark.asyncio
async def test_mutual_request_connects(client: AsyncClient, member, auth_headers, verified_member, auth_for):
    await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})
    response = await client.post(URL, headers=auth_for(verified_member), json={"user_id": member.id})
    assert response.json()["status"] == "accepted"
    assert (await client.get(f"{URL}/with/{verified_member.id}", headers=auth_headers)).json()["status"] == "accepted"


@pytest.mark.asyncio
async def test_cancel_and_remove(client: AsyncClient, member, auth_headers, verified_member, make_profile, auth_for):
    outsider = await make_profile("outside@example.com")
    connection_id = (await client.post(URL, headers=auth_headers, json={"user_id": verified_member.id})).json()["id"]

    assert (await client.delete(f"{URL}/{connection_id}", headers=auth_for(outsider))).status_code == 404
    assert (await client.delete(f"{URL}/{connection_id}", headers=auth_headers)).status_code == 204
    status = await client.get(f"{URL}/with/{verified_member.id}", headers=auth_headers)
    assert status.json() == {"user_id": verified_member.id, "status": "none", "connection_id": None}


@pytest.mark.asyncio
async def test_request_validation(client: AsyncClient, member, auth_headers, newcomer, auth_for):
    yourself = await client.post(URL, headers=auth_headers, json={"user_id": member.id})
    assert yourself.status_code == 400
    assert yourself.json()["error"] == "You cannot connect with yourself"

    unknown = await client.post(URL, headers=auth_headers, json={"user_id": 9999})
    assert unknown.status_code == 404

    unverified = await client.post(URL, headers=auth_for(newcomer), json={"user_id": member.id})
    assert unverified.status_code == 403

    bad_tab = await client.get(f"{URL}?tab=everyone", headers=auth_headers)
    assert bad_tab.status_code == 400
