"""
Search falls back to the database while Elasticsearch is unreachable (always, in tests).
"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_query_too_short(client: AsyncClient):
    response = await client.get("/api/v1/search?q=a")
    assert response.status_code == 400
    assert response.json() == {"error": "Query too short"}


@pytest.mark.asyncio
async def test_unknown_type(client: AsyncClient):
    response = await client.get("/api/v1/search?q=rose&type=photos")
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_database_fallback_across_types(client: AsyncClient, member, auth_headers, make_profile):
    await make_profile("hidden@example.com", display_name="Rosalind Hidden", show_in_directory=False)
    await make_profile("rosa@example.com", display_name="Rosa Martin")
    await client.post(
        "/api/v1/memorials",
        headers=auth_headers,
        json={"first_name": "Rose", "last_name": "Alvarez", "date_of_passing": "2024-11-20"},
    )
    await client.post(
        "/api/v1/memorials",
        headers=auth_headers,
        json={"first_name": "Rosemary", "last_name": "Private", "date_of_passing": "2024-01-02", "is_public": False},
    )

    response = await client.get("/api/v1/search?q=ros")
    assert response.status_code == 200
    data = response.json()
    assert data["query"] == "ros"
    assert [u["display_name"] for u in data["results"]["users"]] == ["Rosa Martin"]
    assert [m["name"] for m in data["results"]["memorials"]] == ["Rose Alvarez"]
    assert data["results"]["meetups"] == []
    assert data["total"] == 2


@pytest.mark.asyncio
async def test_search_single_type(client: AsyncClient, auth_headers):
    await client.post(
        "/api/v1/memorials",
        headers=auth_headers,
        json={"first_name": "Walter", "last_name": "Gray", "date_of_passing": "2021-06-30"},
    )
    data = (await client.get("/api/v1/search?q=walter&type=memorials")).json()
    assert list(data["results"]) == ["memorials"]
    assert data["results"]["memorials"][0]["slug"] == "walter-gray"
