"""
Payment provider webhooks. The signature is checked against the raw request body.
"""

from fastapi import APIRouter, Header, Request

from solace.db.repositories.billing_repository import StripeEventRepository, StripeSubscriptionRepository
from solace.db.repositories.memorial_repository import MemorialStoreItemRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.store_repository import (
    StoreOrderItemRepository,
    StoreOrderRepository,
    StoreProductRepository,
)
from solace.db.repositories.verification_repository import OrganizerApplicationRepository
from solace.db.session import DbSession
from solace.payments import stripe_client
from solace.schemas.billing import WebhookAck
from solace.services.organizer_service import OrganizerService
from solace.services.webhook_service import WebhookService

router = APIRouter()


def _get_webhook_service(session: DbSession) -> WebhookService:
    profiles = ProfileRepository(session)
    return WebhookService(
        StripeEventRepository(session),
        StripeSubscriptionRepository(session),
        profiles,
        StoreOrderRepository(session),
        StoreOrderItemRepository(session),
        StoreProductRepository(session),
        MemorialStoreItemRepository(session),
        OrganizerService(OrganizerApplicationRepository(session), profiles),
    )


@router.post("/stripe", response_model=WebhookAck, response_model_exclude_none=True)
async def stripe_webhook(
    request: Request,
    session: DbSession,
    stripe_signature: str | None = Header(None, alias="Stripe-Signature"),
):
    payload = await request.body()
    event = stripe_client.construct_event(payload, stripe_signature)
    return await _get_webhook_service(session).handle(event)
