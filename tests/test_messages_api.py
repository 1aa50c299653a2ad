"""
Direct messages between ID-verified members.
"""

import pytest
from httpx import AsyncClient

from solace.core.enums import VerificationStatus


@pytest.mark.asyncio
async def test_send_and_read_conversation(
    client: AsyncClient, verified_member, make_profile, auth_for, sent_emails
):
    friend = await make_profile("friend@example.com", VerificationStatus.ID_VERIFIED, display_name="Sam")
    sent = await client.post(
        f"/api/v1/messages/with/{friend.id}",
        headers=auth_for(verified_member),
        json={"content": "  Thinking of you today.  "},
    )
    assert sent.status_code == 201
    assert sent.json()["content"] == "Thinking of you today."
    assert sent_emails() == [
        (friend.email, "new_message", {"senderName": verified_member.display_name, "senderId": verified_member.id})
    ]

    inbox = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert len(inbox) == 1
    assert inbox[0]["unread_count"] == 1
    assert inbox[0]["last_message_preview"] == "Thinking of you today."
    assert inbox[0]["other_user"]["id"] == verified_member.id

    thread = (await client.get(f"/api/v1/messages/with/{verified_member.id}", headers=auth_for(friend))).json()
    assert [m["content"] for m in thread["messages"]] == ["Thinking of you today."]
    assert thread["other_user"]["display_name"] == verified_member.display_name

    inbox = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert inbox[0]["unread_count"] == 0


@pytest.mark.asyncio
async def test_one_conversation_per_pair(client: AsyncClient, verified_member, make_profile, auth_for):
    friend = await make_profile("pair@example.com", VerificationStatus.ID_VERIFIED)
    await client.post(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "hi"})
    await client.post(f"/api/v1/messages/with/{verified_member.id}", headers=auth_for(friend), json={"content": "hey"})

    mine = (await client.get("/api/v1/messages/conversations", headers=auth_for(verified_member))).json()
    theirs = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert len(mine) == len(theirs) == 1
    assert mine[0]["id"] == theirs[0]["id"]
    assert mine[0]["last_message_preview"] == "hey"


@pytest.mark.asyncio
async def test_preview_is_truncated(client: AsyncClient, verified_member, make_profile, auth_for):
    friend = await make_profile("long@example.com", VerificationStatus.ID_VERIFIED)
    await client.post(
        f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "x" * 300}
    )
    inbox = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert len(inbox[0]["last_message_preview"]) == 100


@pytest.mark.asyncio
async def test_email_verified_member_cannot_message(client: AsyncClient, member, verified_member, auth_for):
    response = await client.post(
        f"/api/v1/messages/with/{verified_member.id}", headers=auth_for(member), json={"content": "hello"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_cannot_message_yourself(client: AsyncClient, verified_member, auth_for):
    response = await client.post(
        f"/api/v1/messages/with/{verified_member.id}", headers=auth_for(verified_member), json={"content": "me"}
    )
    assert response.status_code == 400
    assert response.json()["error"] == "You cannot message yourself"


@pytest.mark.asyncio
async def test_recipient_closed_messages(client: AsyncClient, verified_member, make_profile, auth_for):
    closed = await make_profile("closed@example.com", VerificationStatus.ID_VERIFIED, allow_messages=False)
    response = await client.post(
        f"/api/v1/messages/with/{closed.id}", headers=auth_for(verified_member), json={"content": "hello"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_unknown_recipient(client: AsyncClient, verified_member, auth_for):
    response = await client.post(
        "/api/v1/messages/with/9999", headers=auth_for(verified_member), json={"content": "hello"}
    )
    assert response.status_code == 404
    assert response.json()["error"] == "User not found"


@pytest.mark.asyncio
async def test_muted_conversation_sends_no_email(
    client: AsyncClient, verified_member, make_profile, auth_for, sent_emails
):
    friend = await make_profile("muted@example.com", VerificationStatus.ID_VERIFIED)
    await client.post(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "1"})

    muted = await client.patch(
        f"/api/v1/messages/with/{verified_member.id}/settings", headers=auth_for(friend), json={"is_muted": True}
    )
    assert muted.status_code == 200
    assert muted.json()["is_muted"] is True
    assert muted.json()["is_archived"] is False

    await client.post(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "2"})
    assert len(sent_emails()) == 1
    inbox = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert inbox[0]["is_muted"] is True


@pytest.mark.asyncio
async def test_archived_conversation_returns_on_new_message(
    client: AsyncClient, verified_member, make_profile, auth_for
):
    friend = await make_profile("archive@example.com", VerificationStatus.ID_VERIFIED)
    await client.post(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "1"})

    await client.patch(
        f"/api/v1/messages/with/{verified_member.id}/settings", headers=auth_for(friend), json={"is_archived": True}
    )
    assert (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json() == []

    await client.post(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "2"})
    inbox = (await client.get("/api/v1/messages/conversations", headers=auth_for(friend))).json()
    assert inbox[0]["last_message_preview"] == "2"


@pytest.mark.asyncio
async def test_settings_without_conversation(client: AsyncClient, verified_member, make_profile, auth_for):
    stranger = await make_profile("stranger@example.com", VerificationStatus.ID_VERIFIED)
    response = await client.patch(
        f"/api/v1/messages/with/{stranger.id}/settings", headers=auth_for(verified_member), json={"is_muted": True}
    )
    assert response.status_code == 404
    assert response.json()["error"] == "Conversation not found"


@pytest.mark.asyncio
async def test_deleted_message_hidden_only_for_deleter(client: AsyncClient, verified_member, make_profile, auth_for):
    friend = await make_profile("delete@example.com", VerificationStatus.ID_VERIFIED)
    outsider = await make_profile("outsider@example.com", VerificationStatus.ID_VERIFIED)
    sent = await client.post(
        f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member), json={"content": "oops"}
    )
    message_id = sent.json()["id"]

    assert (await client.delete(f"/api/v1/messages/{message_id}", headers=auth_for(outsider))).status_code == 404
    assert (await client.delete(f"/api/v1/messages/{message_id}", headers=auth_for(verified_member))).status_code == 204

    mine = (await client.get(f"/api/v1/messages/with/{friend.id}", headers=auth_for(verified_member))).json()
    theirs = (await client.get(f"/api/v1/messages/with/{verified_member.id}", headers=auth_for(friend))).json()
    assert mine["messages"] == []
    assert [m["content"] for m in theirs["messages"]] == ["oops"]
