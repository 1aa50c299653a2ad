"""
Billing repository - Stripe webhook event log and subscription mirror.
"""

from sqlalchemy import select

from solace.db.models.billing import StripeEvent, StripeSubscription
from solace.db.repositories.base_repository import BaseRepository


class StripeEventRepository(BaseRepository[StripeEvent]):
    def __init__(self, session):
        super().__init__(session, StripeEvent)

    async def get_by_event_id(self, event_id: str) -> StripeEvent | None:
        result = await self.session.execute(select(StripeEvent).where(StripeEvent.stripe_event_id == event_id))
        return result.scalar_one_or_none()


class StripeSubscriptionRepository(BaseRepository[StripeSubscription]):
    def __init__(self, session):
        super().__init__(session, StripeSubscription)

    async def get_by_stripe_id(self, subscription_id: str) -> StripeSubscription | None:
        result = await self.session.execute(
            select(StripeSubscription).where(StripeSubscription.stripe_subscription_id == subscription_id)
        )
        return result.scalar_one_or_none()
