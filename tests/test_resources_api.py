"""
Resource library: public submissions and admin approval.
"""

import pytest
from httpx import AsyncClient

HOTLINE = {
    "title": "Grief Support Line",
    "description": "Free, confidential support around the clock",
    "resource_type": "hotline",
    "categories": ["crisis_support"],
    "phone_number": "1-800-555-0199",
    "submitter_name": "Lee",
    "submitter_email": "Lee@Example.com",
}


@pytest.mark.asyncio
async def test_submit_and_approve(client: AsyncClient, admin_headers, queued):
    submitted = await client.post("/api/v1/resources/submit", json=HOTLINE)
    assert submitted.status_code == 201
    submission_id = submitted.json()["id"]

    queue = (await client.get("/api/v1/admin/resource-submissions", headers=admin_headers)).json()
    assert [s["id"] for s in queue] == [submission_id]
    assert queue[0]["submitter_email"] == "lee@example.com"
    assert (await client.get("/api/v1/resources")).json() == []

    approved = await client.post(f"/api/v1/admin/resource-submissions/{submission_id}/approve", headers=admin_headers)
    assert approved.status_code == 200
    resource = approved.json()
    assert resource["phone_number"] == "1-800-555-0199"
    assert queued.index.delay.call_args.args[0] == "resources"

    assert (await client.get("/api/v1/admin/resource-submissions", headers=admin_headers)).json() == []
    by_category = (await client.get("/api/v1/resources?category=crisis_support")).json()
    assert [r["id"] for r in by_category] == [resource["id"]]
    assert (await client.get("/api/v1/resources?category=pet_loss")).json() == []
    assert (await client.get("/api/v1/resources?type=book")).json() == []


@pytest.mark.asyncio
async def test_hotline_needs_phone_number(client: AsyncClient):
    response = await client.post("/api/v1/resources/submit", json={**HOTLINE, "phone_number": None})
    assert response.status_code == 400
    assert "Phone number is required for hotlines" in response.json()["error"]


@pytest.mark.asyncio
async def test_article_needs_url(client: AsyncClient):
    article = {**HOTLINE, "resource_type": "article", "phone_number": None}
    response = await client.post("/api/v1/resources/submit", json=article)
    assert response.status_code == 400
    assert "URL is required" in response.json()["error"]


@pytest.mark.asyncio
async def test_reject_submission(client: AsyncClient, admin_headers):
    submission_id = (await client.post("/api/v1/resources/submit", json=HOTLINE)).json()["id"]
    url = f"/api/v1/admin/resource-submissions/{submission_id}"
    assert (await client.delete(url, headers=admin_headers)).status_code == 204
    assert (await client.delete(url, headers=admin_headers)).status_code == 404
