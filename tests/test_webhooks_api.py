"""
Stripe webhooks: signature checks, order fulfilment, organizer fees, membership lifecycle.
"""

import hashlib
import hmac
import json
import time

import pytest
from httpx import AsyncClient

from solace.config import get_settings

WEBHOOK_URL = "/api/v1/webhooks/stripe"
SECRET = "whsec_test_secret"


@pytest.fixture(autouse=True)
def webhook_secret(monkeypatch):
    monkeypatch.setattr(get_settings(), "stripe_webhook_secret", SECRET)


def _event(event_id: str, event_type: str, obj: dict) -> dict:
    return {"id": event_id, "type": event_type, "data": {"object": obj}}


async def _deliver(client: AsyncClient, event: dict, secret: str = SECRET):
    body = json.dumps(event)
    timestamp = int(time.time())
    signature = hmac.new(secret.encode(), f"{timestamp}.{body}".encode(), hashlib.sha256).hexdigest()
    return await client.post(
        WEBHOOK_URL,
        content=body,
        headers={"Stripe-Signature": f"t={timestamp},v1={signature}", "Content-Type": "application/json"},
    )


async def _place_order(client: AsyncClient, auth_headers: dict, admin_headers: dict) -> tuple[dict, dict]:
    product = await client.post(
        "/api/v1/admin/products",
        headers=admin_headers,
        json={"name": "Forget-me-not", "product_type": "icon", "price_cents": 300, "status": "active"},
    )
    memorial = await client.post(
        "/api/v1/memorials",
        headers=auth_headers,
        json={"first_name": "June", "last_name": "Park", "date_of_passing": "2022-08-14"},
    )
    await client.post(
        "/api/v1/checkout/create-session",
        headers=auth_headers,
        json={
            "items": [
                {
                    "product_id": product.json()["id"],
                    "memorial_id": memorial.json()["id"],
                    "dedication_message": "Love, Grace",
                }
            ]
        },
    )
    order = (await client.get("/api/v1/store/orders", headers=auth_headers)).json()[0]
    return order, memorial.json()


@pytest.mark.asyncio
async def test_missing_signature_rejected(client: AsyncClient):
    response = await client.post(WEBHOOK_URL, content=b"{}")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid signature"}


@pytest.mark.asyncio
async def test_wrong_secret_rejected(client: AsyncClient):
    response = await _deliver(client, _event("evt_bad", "invoice.paid", {}), secret="whsec_other")
    assert response.status_code == 400
    assert response.json() == {"error": "Invalid signature"}


@pytest.mark.asyncio
async def test_unhandled_event_is_acknowledged(client: AsyncClient):
    response = await _deliver(client, _event("evt_misc", "charge.refunded", {"id": "ch_1"}))
    assert response.status_code == 200
    assert response.json() == {"received": True}


@pytest.mark.asyncio
async def test_checkout_completed_fulfils_order(client: AsyncClient, auth_headers, admin_headers):
    order, memorial = await _place_order(client, auth_headers, admin_headers)
    event = _event(
        "evt_checkout_1",
        "checkout.session.completed",
        {"id": "cs_test_123", "mode": "payment", "payment_intent": "pi_123", "metadata": {"order_id": str(order["id"])}},
    )

    response = await _deliver(client, event)
    assert response.status_code == 200
    assert response.json() == {"received": True}

    orders = (await client.get("/api/v1/store/orders", headers=auth_headers)).json()
    assert orders[0]["payment_status"] == "paid"
    assert orders[0]["fulfillment_status"] == "fulfilled"
    assert orders[0]["paid_at"] is not None

    gifts = (await client.get(f"/api/v1/memorials/{memorial['id']}/gifts")).json()
    assert len(gifts) == 1
    assert gifts[0]["product_name"] == "Forget-me-not"
    assert gifts[0]["purchaser_name"] == "Grace"
    assert gifts[0]["dedication_message"] == "Love, Grace"

    # Redelivery of the same event is a no-op
    assert (await _deliver(client, event)).json() == {"received": True}
    # A different event for the same order finds it already fulfilled
    again = await _deliver(client, {**event, "id": "evt_checkout_2"})
    assert again.json() == {"received": True, "message": "Already fulfilled"}
    assert len((await client.get(f"/api/v1/memorials/{memorial['id']}/gifts")).json()) == 1

    products = (await client.get("/api/v1/admin/products", headers=admin_headers)).json()
    assert products[0]["purchase_count"] == 1


@pytest.mark.asyncio
async def test_checkout_for_unknown_order(client: AsyncClient):
    event = _event("evt_lost", "checkout.session.completed", {"mode": "payment", "metadata": {"order_id": "9999"}})
    response = await _deliver(client, event)
    assert response.status_code == 404
    assert response.json() == {"error": "Order not found"}


@pytest.mark.asyncio
async def test_organizer_fee_marks_application_paid(client: AsyncClient, member, auth_headers, admin_headers, sent_emails):
    application = await client.post(
        "/api/v1/organizer/applications",
        headers=auth_headers,
        json={
            "experience": "Ran a hospice support group for six years",
            "motivation": "Nobody should grieve alone",
            "planned_meetups": "Monthly walks in the park",
            "background_check_consent": True,
        },
    )
    application_id = application.json()["id"]
    event = _event(
        "evt_org",
        "checkout.session.completed",
        {
            "mode": "payment",
            "payment_intent": "pi_org",
            "metadata": {"type": "organizer_verification", "application_id": str(application_id)},
        },
    )
    assert (await _deliver(client, event)).status_code == 200

    mine = (await client.get("/api/v1/organizer/applications/mine", headers=auth_headers)).json()
    assert mine[0]["status"] == "payment_complete"
    assert mine[0]["paid_at"] is not None

    approved = await client.post(f"/api/v1/admin/organizer-applications/{application_id}/approve", headers=admin_headers)
    assert approved.json()["status"] == "approved"
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    assert me["verification_status"] == "meetup_organizer"
    assert sent_emails()[-1][:2] == (member.email, "organizer_approved")


@pytest.mark.asyncio
async def test_subscription_lifecycle(client: AsyncClient, member, auth_headers):
    now = int(time.time())
    subscription = {
        "id": "sub_123",
        "customer": "cus_123",
        "status": "active",
        "current_period_start": now,
        "current_period_end": now + 30 * 86400,
        "cancel_at_period_end": False,
        "metadata": {"user_id": str(member.id)},
        "items": {"data": [{"price": {"id": "price_premium", "unit_amount": 999, "currency": "usd"}}]},
    }

    await _deliver(client, _event("evt_sub_created", "customer.subscription.created", subscription))
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    assert me["subscription_tier"] == "premium"
    assert me["subscription_status"] == "active"
    assert me["subscription_ends_at"] is not None

    await _deliver(client, _event("evt_inv_failed", "invoice.payment_failed", {"subscription": "sub_123"}))
    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).json()["subscription_status"] == "past_due"

    await _deliver(client, _event("evt_inv_paid", "invoice.paid", {"subscription": "sub_123"}))
    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).json()["subscription_status"] == "active"

    updated = {**subscription, "status": "past_due", "cancel_at_period_end": True}
    await _deliver(client, _event("evt_sub_updated", "customer.subscription.updated", updated))
    assert (await client.get("/api/v1/auth/me", headers=auth_headers)).json()["subscription_status"] == "past_due"

    await _deliver(client, _event("evt_sub_deleted", "customer.subscription.deleted", {"id": "sub_123"}))
    me = (await client.get("/api/v1/auth/me", headers=auth_headers)).json()
    assert me["subscription_tier"] == "free"
    assert me["subscription_status"] == "cancelled"


@pytest.mark.asyncio
async def test_update_for_unknown_subscription(client: AsyncClient):
    response = await _deliver(client, _event("evt_ghost", "customer.subscription.updated", {"id": "sub_ghost"}))
    assert response.status_code == 404
