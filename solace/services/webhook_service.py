"""
Stripe webhook processing.

Every delivery is recorded in stripe_events; a redelivered event that was already
processed is acknowledged without side effects. Order fulfilment is also idempotent
at the item level (one memorial gift per order item).
"""

import logging
from typing import Any

from solace.core.clock import from_timestamp, utcnow
from solace.core.enums import FulfillmentStatus, PaymentStatus, SubscriptionTier
from solace.core.errors import InvalidRequestError, NotFoundError
from solace.db.models.billing import StripeEvent, StripeSubscription
from solace.db.models.memorial import MemorialStoreItem
from solace.db.repositories.billing_repository import StripeEventRepository, StripeSubscriptionRepository
from solace.db.repositories.memorial_repository import MemorialStoreItemRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.store_repository import (
    StoreOrderItemRepository,
    StoreOrderRepository,
    StoreProductRepository,
)
from solace.services.organizer_service import CHECKOUT_TYPE, OrganizerService

logger = logging.getLogger(__name__)


def _first_price(subscription: dict[str, Any]) -> dict[str, Any]:
    items = (subscription.get("items") or {}).get("data") or []
    if not items:
        return {}
    return items[0].get("price") or {}


class WebhookService:
    """Payment provider events."""

    def __init__(
        self,
        event_repo: StripeEventRepository,
        subscription_repo: StripeSubscriptionRepository,
        profile_repo: ProfileRepository,
        order_repo: StoreOrderRepository,
        order_item_repo: StoreOrderItemRepository,
        product_repo: StoreProductRepository,
        gift_repo: MemorialStoreItemRepository,
        organizer_service: OrganizerService,
    ):
        self.event_repo = event_repo
        self.subscription_repo = subscription_repo
        self.profile_repo = profile_repo
        self.order_repo = order_repo
        self.order_item_repo = order_item_repo
        self.product_repo = product_repo
        self.gift_repo = gift_repo
        self.organizer_service = organizer_service
        self._handlers = {
            "checkout.session.completed": self._checkout_completed,
            "customer.subscription.created": self._subscription_created,
            "customer.subscription.updated": self._subscription_updated,
            "customer.subscription.deleted": self._subscription_deleted,
            "invoice.paid": self._invoice_paid,
            "invoice.payment_failed": self._invoice_failed,
        }

    async def handle(self, event: dict[str, Any]) -> dict[str, Any]:
        """Dispatch a payment event once. Unknown types are acknowledged and ignored."""
        event_type = event.get("type", "")
        handler = self._handlers.get(event_type)
        if handler is None:
            logger.info("Ignoring Stripe event %s (%s)", event.get("id"), event_type)
            return {"received": True}

        obj = (event.get("data") or {}).get("object") or {}
        record = None
        event_id = event.get("id")
        if event_id:
            record = await self.event_repo.get_by_event_id(event_id)
            if record is not None and record.processed:
                logger.info("Stripe event %s already processed", event_id)
                return {"received": True}
            if record is None:
                record = await self.event_repo.add(
                    StripeEvent(stripe_event_id=event_id, event_type=event_type, event_data=obj)
                )

        result = await handler(obj)
        if record is not None:
            record.processed = True
            record.processed_at = utcnow()
            await self.event_repo.save(record)
        return result

    # --- Checkout ---

    async def _checkout_completed(self, session: dict[str, Any]) -> dict[str, Any]:
        metadata = session.get("metadata") or {}
        if metadata.get("type") == CHECKOUT_TYPE:
            application_id = metadata.get("application_id")
            if not application_id:
                raise InvalidRequestError("Missing application_id")
            await self.organizer_service.mark_paid(int(application_id), session.get("payment_intent"))
            return {"received": True}

        if session.get("mode") == "subscription":
            # Membership state arrives with customer.subscription.* events
            return {"received": True}

        order_id = metadata.get("order_id")
        if not order_id:
            raise InvalidRequestError("Missing order_id")
        return await self._fulfil_order(int(order_id), session.get("payment_intent"))

    async def _fulfil_order(self, order_id: int, payment_intent_id: str | None) -> dict[str, Any]:
        order = await self.order_repo.get_by_id(order_id)
        if not order:
            raise NotFoundError("Order not found")
        if order.fulfillment_status == FulfillmentStatus.FULFILLED.value:
            logger.info("Order %s already fulfilled", order.id)
            return {"received": True, "message": "Already fulfilled"}

        now = utcnow()
        order.payment_status = PaymentStatus.PAID.value
        order.stripe_payment_intent_id = payment_intent_id
        order.paid_at = now
        await self.order_repo.save(order)

        purchaser = await self.profile_repo.get_by_id(order.user_id)
        purchaser_name = (purchaser.display_name or purchaser.email) if purchaser else None
        purchaser_name = purchaser_name or "Anonymous"

        items = await self.order_item_repo.list_for_order(order.id)
        done = await self.gift_repo.exists_for_order_items([i.id for i in items])
        products = await self.product_repo.get_by_ids([i.product_id for i in items])
        for item in items:
            if item.id in done:
                continue
            snapshot = item.product_snapshot or {}
            await self.gift_repo.add(
                MemorialStoreItem(
                    memorial_id=item.memorial_id,
                    order_item_id=item.id,
                    product_id=item.product_id,
                    purchased_by=order.user_id,
                    purchaser_name=purchaser_name,
                    dedication_message=item.dedication_message,
                    product_name=snapshot.get("name", ""),
                    product_type=snapshot.get("product_type", ""),
                    preview_image_url=snapshot.get("preview_image_url"),
                    digital_asset_path=snapshot.get("digital_asset_path"),
                )
            )
            product = products.get(item.product_id)
            if product is not None:
                product.purchase_count += 1
                await self.product_repo.save(product)

        order.fulfillment_status = FulfillmentStatus.FULFILLED.value
        order.fulfilled_at = now
        await self.order_repo.save(order)
        logger.info("Order %s fulfilled (%s items)", order.id, len(items))
        return {"received": True}

    # --- Subscriptions ---

    async def _subscription_created(self, subscription: dict[str, Any]) -> dict[str, Any]:
        user_id = (subscription.get("metadata") or {}).get("user_id")
        if not user_id:
            raise InvalidRequestError("Missing user_id")
        profile = await self.profile_repo.get_by_id(int(user_id))
        if not profile:
            raise NotFoundError("Profile not found")

        period_start = from_timestamp(subscription.get("current_period_start"))
        period_end = from_timestamp(subscription.get("current_period_end"))
        cancel_at_period_end = bool(subscription.get("cancel_at_period_end"))

        profile.subscription_tier = SubscriptionTier.PREMIUM.value
        profile.subscription_status = subscription.get("status")
        profile.stripe_subscription_id = subscription["id"]
        profile.subscription_started_at = period_start
        profile.subscription_ends_at = period_end
        profile.auto_renew = not cancel_at_period_end
        if subscription.get("customer") and not profile.stripe_customer_id:
            profile.stripe_customer_id = subscription["customer"]
        await self.profile_repo.save(profile)

        price = _first_price(subscription)
        record = await self.subscription_repo.get_by_stripe_id(subscription["id"])
        if record is None:
            await self.subscription_repo.add(
                StripeSubscription(
                    user_id=profile.id,
                    stripe_customer_id=subscription.get("customer") or "",
                    stripe_subscription_id=subscription["id"],
                    stripe_price_id=price.get("id"),
                    status=subscription.get("status") or "incomplete",
                    current_period_start=period_start,
                    current_period_end=period_end,
                    cancel_at_period_end=cancel_at_period_end,
                    amount=price.get("unit_amount") or 0,
                    currency=price.get("currency") or "usd",
                )
            )
        logger.info("Subscription %s created for profile %s", subscription["id"], profile.id)
        return {"received": True}

    async def _get_subscription(self, subscription_id: str | None) -> StripeSubscription:
        record = await self.subscription_repo.get_by_stripe_id(subscription_id) if subscription_id else None
        if record is None:
            logger.error("Subscription %s not found", subscription_id)
            raise NotFoundError("Not found")
        return record

    async def _subscription_updated(self, subscription: dict[str, Any]) -> dict[str, Any]:
        record = await self._get_subscription(subscription.get("id"))
        cancelled_at = from_timestamp(subscription.get("canceled_at"))
        record.status = subscription.get("status") or record.status
        record.current_period_start = from_timestamp(subscription.get("current_period_start"))
        record.current_period_end = from_timestamp(subscription.get("current_period_end"))
        record.cancel_at_period_end = bool(subscription.get("cancel_at_period_end"))
        record.cancelled_at = cancelled_at
        await self.subscription_repo.save(record)

        profile = await self.profile_repo.get_by_id(record.user_id)
        if profile is not None:
            profile.subscription_status = record.status
            profile.subscription_ends_at = record.current_period_end
            profile.auto_renew = not record.cancel_at_period_end
            if cancelled_at:
                profile.subscription_cancelled_at = cancelled_at
            await self.profile_repo.save(profile)
        logger.info("Subscription %s updated (%s)", record.stripe_subscription_id, record.status)
        return {"received": True}

    async def _subscription_deleted(self, subscription: dict[str, Any]) -> dict[str, Any]:
        record = await self._get_subscription(subscription.get("id"))
        record.status = "canceled"
        record.cancelled_at = utcnow()
        await self.subscription_repo.save(record)

        profile = await self.profile_repo.get_by_id(record.user_id)
        if profile is not None:
            profile.subscription_tier = SubscriptionTier.FREE.value
            profile.subscription_status = "cancelled"
            profile.stripe_subscription_id = None
            await self.profile_repo.save(profile)
        logger.info("Profile %s downgraded to free tier", record.user_id)
        return {"received": True}

    # --- Invoices ---

    async def _invoice_paid(self, invoice: dict[str, Any]) -> dict[str, Any]:
        profile = await self._invoice_profile(invoice)
        if profile is not None:
            profile.subscription_tier = SubscriptionTier.PREMIUM.value
            profile.subscription_status = "active"
            await self.profile_repo.save(profile)
        return {"received": True}

    async def _invoice_failed(self, invoice: dict[str, Any]) -> dict[str, Any]:
        profile = await self._invoice_profile(invoice)
        if profile is not None:
            profile.subscription_status = "past_due"
            await self.profile_repo.save(profile)
            logger.warning("Payment failed for subscription %s", invoice.get("subscription"))
        return {"received": True}

    async def _invoice_profile(self, invoice: dict[str, Any]):
        subscription_id = invoice.get("subscription")
        if not subscription_id:
            return None
        record = await self.subscription_repo.get_by_stripe_id(subscription_id)
        if record is None:
            return None
        return await self.profile_repo.get_by_id(record.user_id)
