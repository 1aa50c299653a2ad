"""
Memorial pages: custom URLs, privacy, tributes, candles and photo uploads.
"""

from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlalchemy import select

from solace.config import get_settings
from solace.core.clock import utcnow
from solace.db.models import MemorialCandle

MEMORIAL = {
    "first_name": "Rose",
    "last_name": "Alvarez",
    "date_of_birth": "1941-03-02",
    "date_of_passing": "2024-11-20",
    "loss_type": "parent",
    "obituary": "Rose loved her garden and her grandchildren.",
    "hobbies": ["gardening", "crosswords"],
    "service_links": [{"type": "gofundme", "url": "https://gofundme.com/rose"}],
}


async def _create(client: AsyncClient, headers: dict, **overrides) -> dict:
    response = await client.post("/api/v1/memorials", headers=headers, json={**MEMORIAL, **overrides})
    assert response.status_code == 201, response.text
    return response.json()


@pytest.mark.asyncio
async def test_create_memorial_generates_slug(client: AsyncClient, member, auth_headers, queued):
    data = await _create(client, auth_headers)
    assert data["slug"] == "rose-alvarez"
    assert data["name"] == "Rose Alvarez"
    assert data["created_by"] == member.id
    assert data["service_links"][0]["type"] == "gofundme"
    queued.index.delay.assert_called_once()

    second = await _create(client, auth_headers)
    assert second["slug"] == "rose-alvarez-2"


@pytest.mark.asyncio
async def test_unverified_member_cannot_create_memorial(client: AsyncClient, newcomer, auth_for):
    response = await client.post("/api/v1/memorials", headers=auth_for(newcomer), json=MEMORIAL)
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_birth_after_passing_is_rejected(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/memorials", headers=auth_headers, json={**MEMORIAL, "date_of_birth": "2025-01-01"}
    )
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_slug_availability(client: AsyncClient, auth_headers):
    await _create(client, auth_headers)
    taken = await client.get("/api/v1/memorials/slug-availability?slug=rose-alvarez")
    assert taken.json() == {"slug": "rose-alvarez", "valid": True, "available": False}

    reserved = await client.get("/api/v1/memorials/slug-availability?slug=admin")
    assert reserved.json()["valid"] is False

    free = await client.get("/api/v1/memorials/slug-availability?slug=Grandma-Rose")
    assert free.json() == {"slug": "grandma-rose", "valid": True, "available": True}


@pytest.mark.asyncio
async def test_change_slug(client: AsyncClient, auth_headers):
    first = await _create(client, auth_headers)
    other = await _create(client, auth_headers, first_name="Tom")

    conflict = await client.patch(
        f"/api/v1/memorials/{other['id']}", headers=auth_headers, json={"slug": first["slug"]}
    )
    assert conflict.status_code == 409

    invalid = await client.patch(f"/api/v1/memorials/{other['id']}", headers=auth_headers, json={"slug": "Not OK!"})
    assert invalid.status_code == 400

    renamed = await client.patch(f"/api/v1/memorials/{other['id']}", headers=auth_headers, json={"slug": "uncle-tom"})
    assert renamed.json()["slug"] == "uncle-tom"
    by_slug = await client.get("/api/v1/memorials/by-slug/uncle-tom")
    assert by_slug.json()["id"] == other["id"]


@pytest.mark.asyncio
async def test_only_creator_can_edit(client: AsyncClient, auth_headers, verified_member, auth_for):
    memorial = await _create(client, auth_headers)
    response = await client.patch(
        f"/api/v1/memorials/{memorial['id']}", headers=auth_for(verified_member), json={"obituary": "changed"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_private_memorial_visible_to_creator_only(
    client: AsyncClient, auth_headers, verified_member, auth_for, queued
):
    memorial = await _create(client, auth_headers, is_public=False)
    queued.removals.delay.assert_called_once_with("memorials", memorial["id"])

    url = f"/api/v1/memorials/{memorial['id']}"
    assert (await client.get(url)).status_code == 404
    assert (await client.get(url, headers=auth_for(verified_member))).status_code == 404
    assert (await client.get(url, headers=auth_headers)).status_code == 200

    public = await client.get("/api/v1/memorials")
    assert public.json() == []


@pytest.mark.asyncio
async def test_tributes(client: AsyncClient, member, auth_headers, verified_member, auth_for):
    memorial = await _create(client, auth_headers)
    url = f"/api/v1/memorials/{memorial['id']}/tributes"

    created = await client.post(url, headers=auth_for(verified_member), json={"content": "  She taught me to knit.  "})
    assert created.status_code == 201
    assert created.json()["content"] == "She taught me to knit."
    assert created.json()["author_name"] == verified_member.display_name

    listed = await client.get(url)
    assert [t["content"] for t in listed.json()] == ["She taught me to knit."]


@pytest.mark.asyncio
async def test_tributes_can_be_disabled(client: AsyncClient, auth_headers):
    memorial = await _create(client, auth_headers, allow_tributes=False)
    response = await client.post(
        f"/api/v1/memorials/{memorial['id']}/tributes", headers=auth_headers, json={"content": "hello"}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_delete_memorial(client: AsyncClient, auth_headers, queued):
    memorial = await _create(client, auth_headers)
    response = await client.delete(f"/api/v1/memorials/{memorial['id']}", headers=auth_headers)
    assert response.status_code == 204
    assert (await client.get(f"/api/v1/memorials/{memorial['id']}")).status_code == 404
    queued.removals.delay.assert_called_with("memorials", memorial["id"])


@pytest.mark.asyncio
async def test_upload_profile_photo(client: AsyncClient, member, auth_headers, monkeypatch, tmp_path):
    monkeypatch.setattr(get_settings(), "media_root", str(tmp_path))
    memorial = await _create(client, auth_headers)

    response = await client.post(
        f"/api/v1/memorials/{memorial['id']}/photos/profile",
        headers=auth_headers,
        files={"file": ("rose.png", b"\x89PNG fake image bytes", "image/png")},
    )
    assert response.status_code == 200
    url = response.json()["profile_photo_url"]
    assert url.startswith(f"/media/{member.id}/{memorial['id']}/profile-")
    assert url.endswith(".png")
    stored = list(tmp_path.rglob("*.png"))
    assert len(stored) == 1
    assert stored[0].read_bytes() == b"\x89PNG fake image bytes"


@pytest.mark.asyncio
async def test_upload_rejects_non_images(client: AsyncClient, auth_headers, monkeypatch, tmp_path):
    monkeypatch.setattr(get_settings(), "media_root", str(tmp_path))
    memorial = await _create(client, auth_headers)
    response = await client.post(
        f"/api/v1/memorials/{memorial['id']}/photos/cover",
        headers=auth_headers,
        files={"file": ("notes.txt", b"hello", "text/plain")},
    )
    assert response.status_code == 400
    assert "Invalid file type" in response.json()["error"]


@pytest.mark.asyncio
async def test_upload_rejects_oversized_files(client: AsyncClient, auth_headers, monkeypatch, tmp_path):
    monkeypatch.setattr(get_settings(), "media_root", str(tmp_path))
    monkeypatch.setattr(get_settings(), "max_upload_bytes", 1024 * 1024)
    memorial = await _create(client, auth_headers)
    response = await client.post(
        f"/api/v1/memorials/{memorial['id']}/photos/cover",
        headers=auth_headers,
        files={"file": ("huge.png", b"\x00" * (3 * 1024 * 1024), "image/png")},
    )
    assert response.status_code == 400
    assert response.json()["error"] == "File too large. Maximum size is 1MB."
    assert list(tmp_path.rglob("*")) == []


@pytest.mark.asyncio
async def test_null_for_required_fields_is_ignored(client: AsyncClient, auth_headers):
    memorial = await _create(client, auth_headers)
    response = await client.patch(
        f"/api/v1/memorials/{memorial['id']}",
        headers=auth_headers,
        json={
            "first_name": None,
            "last_name": None,
            "date_of_passing": None,
            "is_public": None,
            "allow_tributes": None,
            "allow_photos": None,
            "hobbies": None,
            "obituary": None,
        },
    )
    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Rose Alvarez"
    assert body["date_of_passing"] == "2024-11-20"
    assert body["is_public"] is True
    assert body["allow_tributes"] is True
    assert body["allow_photos"] is True
    assert body["hobbies"] == ["gardening", "crosswords"]
    assert body["obituary"] is None


@pytest.mark.asyncio
async def test_light_candle(client: AsyncClient, auth_headers, verified_member, auth_for):
    memorial = await _create(client, auth_headers)
    url = f"/api/v1/memorials/{memorial['id']}/candles"

    lit = await client.post(url, headers=auth_for(verified_member), json={"message": "  Thinking of you, Rose  "})
    assert lit.status_code == 201
    assert lit.json()["message"] == "Thinking of you, Rose"
    assert lit.json()["lighter_name"] == verified_member.display_name
    assert lit.json()["lit_by"] == verified_member.id

    quiet = await client.post(url, headers=auth_headers, json={"message": "   "})
    assert quiet.json()["message"] is None

    listed = (await client.get(url)).json()
    assert listed["burning_count"] == 2
    assert [c["id"] for c in listed["candles"]] == [quiet.json()["id"], lit.json()["id"]]

    assert (await client.post(url, json={})).status_code == 401


@pytest.mark.asyncio
async def test_burnt_out_candles_are_not_listed(client: AsyncClient, session, auth_headers):
    memorial = await _create(client, auth_headers)
    url = f"/api/v1/memorials/{memorial['id']}/candles"
    old = await client.post(url, headers=auth_headers, json={})
    fresh = await client.post(url, headers=auth_headers, json={"message": "still here"})

    candle = (await session.execute(select(MemorialCandle).where(MemorialCandle.id == old.json()["id"]))).scalar_one()
    candle.expires_at = utcnow() - timedelta(minutes=1)
    await session.commit()

    listed = (await client.get(url)).json()
    assert listed["burning_count"] == 1
    assert [c["id"] for c in listed["candles"]] == [fresh.json()["id"]]


@pytest.mark.asyncio
async def test_candles_on_private_memorial(client: AsyncClient, auth_headers, verified_member, auth_for):
    memorial = await _create(client, auth_headers, is_public=False)
    url = f"/api/v1/memorials/{memorial['id']}/candles"
    assert (await client.post(url, headers=auth_for(verified_member), json={})).status_code == 404
    assert (await client.get(url)).status_code == 404
