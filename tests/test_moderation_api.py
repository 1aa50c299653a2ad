"""
Content reports and the feature suggestion board.
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_file_and_review_report(client: AsyncClient, member, auth_headers, admin, admin_headers):
    filed = await client.post(
        "/api/v1/reports",
        headers=auth_headers,
        json={
            "reportable_type": "post",
            "reportable_id": 42,
            "report_type": "harassment",
            "description": "  Repeated unkind replies  ",
        },
    )
    assert filed.status_code == 201
    report = filed.json()
    assert report["reporter_id"] == member.id
    assert report["status"] == "pending"
    assert report["description"] == "Repeated unkind replies"
    assert report["evidence_urls"] is None

    pending = (await client.get("/api/v1/admin/reports?status=pending", headers=admin_headers)).json()
    assert [r["id"] for r in pending] == [report["id"]]

    reviewed = await client.patch(
        f"/api/v1/admin/reports/{report['id']}",
        headers=admin_headers,
        json={"status": "resolved_action_taken", "action_taken": "Post hidden"},
    )
    assert reviewed.json()["status"] == "resolved_action_taken"
    assert reviewed.json()["reviewed_by"] == admin.id
    assert (await client.get("/api/v1/admin/reports?status=pending", headers=admin_headers)).json() == []


@pytest.mark.asyncio
async def test_report_needs_known_type(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/reports",
        headers=auth_headers,
        json={"reportable_type": "post", "reportable_id": 1, "report_type": "rude", "description": "x"},
    )
    assert response.status_code == 400
    assert response.json()["error"].startswith("report_type")


@pytest.mark.asyncio
async def test_reports_require_login(client: AsyncClient):
    response = await client.post(
        "/api/v1/reports",
        json={"reportable_type": "user", "reportable_id": 1, "report_type": "spam", "description": "x"},
    )
    assert response.status_code == 401


@pytest.mark.asyncio
async def test_suggestion_upvotes(client: AsyncClient, auth_headers, verified_member, auth_for):
    first = await client.post(
        "/api/v1/suggestions",
        headers=auth_headers,
        json={"title": "Dark mode", "description": "Easier on the eyes at night", "category": "general"},
    )
    second = await client.post(
        "/api/v1/suggestions",
        headers=auth_headers,
        json={"title": "Anniversary reminders", "description": "Remind me before the date"},
    )
    assert second.json()["status"] == "submitted"
    assert second.json()["upvote_count"] == 0

    url = f"/api/v1/suggestions/{second.json()['id']}/upvote"
    voter = auth_for(verified_member)
    assert (await client.post(url, headers=voter)).json() == {"upvoted": True, "upvote_count": 1}

    board = (await client.get("/api/v1/suggestions", headers=voter)).json()
    assert [s["id"] for s in board] == [second.json()["id"], first.json()["id"]]
    assert [s["has_upvoted"] for s in board] == [True, False]

    assert (await client.post(url, headers=voter)).json() == {"upvoted": False, "upvote_count": 0}


@pytest.mark.asyncio
async def test_blank_suggestion_rejected(client: AsyncClient, auth_headers):
    response = await client.post("/api/v1/suggestions", headers=auth_headers, json={"title": "   ", "description": "x"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_admin_notes_only_visible_to_admins(client: AsyncClient, auth_headers, admin_headers):
    created = await client.post(
        "/api/v1/suggestions", headers=auth_headers, json={"title": "Export memorial", "description": "As a PDF"}
    )
    updated = await client.patch(
        f"/api/v1/admin/suggestions/{created.json()['id']}",
        headers=admin_headers,
        json={"status": "planned", "priority": "high", "admin_notes": "Q3 roadmap"},
    )
    assert updated.json()["status"] == "planned"
    assert updated.json()["admin_notes"] == "Q3 roadmap"

    public = (await client.get("/api/v1/suggestions?status=planned")).json()
    assert public[0]["priority"] == "high"
    assert public[0]["admin_notes"] is None
    as_admin = (await client.get("/api/v1/suggestions?status=planned", headers=admin_headers)).json()
    assert as_admin[0]["admin_notes"] == "Q3 roadmap"
