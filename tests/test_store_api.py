"""
Gift store: catalogue (cached), admin product management, checkout and orders.
"""

import pytest
import pytest_asyncio
from httpx import AsyncClient


@pytest_asyncio.fixture
async def candle(client: AsyncClient, admin_headers) -> dict:
    response = await client.post(
        "/api/v1/admin/products",
        headers=admin_headers,
        json={
            "name": "Memorial candle",
            "description": "A candle that stays lit on the memorial page",
            "product_type": "icon",
            "price_cents": 499,
            "preview_image_url": "https://cdn.example.com/candle.png",
            "status": "active",
        },
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def memorial(client: AsyncClient, auth_headers) -> dict:
    response = await client.post(
        "/api/v1/memorials",
        headers=auth_headers,
        json={"first_name": "Arthur", "last_name": "Lane", "date_of_passing": "2023-05-01"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.asyncio
async def test_new_products_start_as_drafts(client: AsyncClient, admin_headers):
    response = await client.post(
        "/api/v1/admin/products",
        headers=admin_headers,
        json={"name": "Sympathy card", "product_type": "card", "price_cents": 299},
    )
    assert response.json()["status"] == "draft"
    assert (await client.get("/api/v1/store/products")).json() == []

    everything = await client.get("/api/v1/admin/products", headers=admin_headers)
    assert [p["name"] for p in everything.json()] == ["Sympathy card"]


@pytest.mark.asyncio
async def test_product_admin_requires_admin(client: AsyncClient, auth_headers):
    response = await client.post(
        "/api/v1/admin/products", headers=auth_headers, json={"name": "x", "product_type": "card", "price_cents": 1}
    )
    assert response.status_code == 403


@pytest.mark.asyncio
async def test_catalogue_is_cached_and_invalidated(client: AsyncClient, candle, admin_headers, fake_redis):
    listed = await client.get("/api/v1/store/products?type=icon")
    assert [p["id"] for p in listed.json()] == [candle["id"]]
    assert "store:products:icon" in fake_redis.store

    await client.patch(f"/api/v1/admin/products/{candle['id']}", headers=admin_headers, json={"price_cents": 599})
    assert "store:products:icon" not in fake_redis.store

    listed = await client.get("/api/v1/store/products?type=icon")
    assert listed.json()[0]["price_cents"] == 599
    assert (await client.get("/api/v1/store/products?type=card")).json() == []


@pytest.mark.asyncio
async def test_checkout_creates_pending_order(client: AsyncClient, member, candle, memorial, auth_headers, stripe_calls):
    response = await client.post(
        "/api/v1/checkout/create-session",
        headers=auth_headers,
        json={
            "items": [
                {
                    "product_id": candle["id"],
                    "memorial_id": memorial["id"],
                    "memorial_name": "Arthur Lane",
                    "dedication_message": "Always in our hearts",
                }
            ]
        },
    )
    assert response.status_code == 200
    assert response.json() == {"session_id": "cs_test_123", "url": "https://checkout.stripe.test/c/cs_test_123"}

    params = stripe_calls.checkout.call_args.kwargs
    assert params["mode"] == "payment"
    assert params["customer_email"] == member.email
    assert params["line_items"][0]["price_data"]["unit_amount"] == 499
    assert params["line_items"][0]["price_data"]["product_data"]["description"] == "For Arthur Lane"

    orders = (await client.get("/api/v1/store/orders", headers=auth_headers)).json()
    assert len(orders) == 1
    assert params["metadata"] == {"order_id": str(orders[0]["id"]), "user_id": str(member.id)}
    assert orders[0]["total_amount_cents"] == 499
    assert orders[0]["payment_status"] == "pending"
    assert orders[0]["items"][0]["product_snapshot"]["name"] == "Memorial candle"
    assert orders[0]["items"][0]["dedication_message"] == "Always in our hearts"


@pytest.mark.asyncio
async def test_checkout_validation(client: AsyncClient, candle, memorial, auth_headers, admin_headers, stripe_calls):
    url = "/api/v1/checkout/create-session"

    empty = await client.post(url, headers=auth_headers, json={"items": []})
    assert empty.json() == {"error": "Invalid cart items"}

    unknown_memorial = await client.post(
        url, headers=auth_headers, json={"items": [{"product_id": candle["id"], "memorial_id": 9999}]}
    )
    assert unknown_memorial.json() == {"error": "Memorial not found for one or more cart items"}

    await client.patch(f"/api/v1/admin/products/{candle['id']}", headers=admin_headers, json={"status": "archived"})
    archived = await client.post(
        url, headers=auth_headers, json={"items": [{"product_id": candle["id"], "memorial_id": memorial["id"]}]}
    )
    assert archived.status_code == 400
    assert archived.json() == {"error": "Invalid products in cart"}
    stripe_calls.checkout.assert_not_called()


@pytest.mark.asyncio
async def test_checkout_requires_verified_email(client: AsyncClient, candle, memorial, newcomer, auth_for):
    response = await client.post(
        "/api/v1/checkout/create-session",
        headers=auth_for(newcomer),
        json={"items": [{"product_id": candle["id"], "memorial_id": memorial["id"]}]},
    )
    assert response.status_code == 403
    assert response.json()["error"] == "Email verification required to make purchases"
