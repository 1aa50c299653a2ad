"""
Billing service - premium membership checkout and the Stripe billing portal.
"""

import logging

from solace.config import get_settings
from solace.core.errors import InvalidRequestError, NotFoundError
from solace.db.models.profile import Profile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.payments import stripe_client

logger = logging.getLogger(__name__)


class BillingService:
    """Premium subscription checkout and billing portal."""

    def __init__(self, profile_repo: ProfileRepository):
        self.profile_repo = profile_repo

    async def create_subscription_checkout(self, profile: Profile) -> dict[str, str]:
        """Start a premium subscription checkout, creating the payment customer on first use."""
        settings = get_settings()
        if not settings.stripe_premium_price_id:
            raise InvalidRequestError("Premium membership is not available")
        if not profile.stripe_customer_id:
            profile.stripe_customer_id = await stripe_client.create_customer(
                profile.email, metadata={"user_id": str(profile.id)}
            )
            await self.profile_repo.save(profile)
            logger.info("Created Stripe customer for profile %s", profile.id)

        site_url = settings.site_url.rstrip("/")
        return await stripe_client.create_checkout_session(
            mode="subscription",
            customer=profile.stripe_customer_id,
            line_items=[{"price": settings.stripe_premium_price_id, "quantity": 1}],
            success_url=f"{site_url}/dashboard/settings/billing?success=true",
            cancel_url=f"{site_url}/pricing?canceled=true",
            metadata={"user_id": str(profile.id)},
            subscription_data={"metadata": {"user_id": str(profile.id)}},
        )

    async def create_portal(self, profile: Profile) -> dict[str, str]:
        """Billing portal link for a member with a payment customer."""
        if not profile.stripe_customer_id:
            raise NotFoundError("No subscription found")
        site_url = get_settings().site_url.rstrip("/")
        url = await stripe_client.create_portal_session(
            profile.stripe_customer_id, return_url=f"{site_url}/dashboard/settings/billing"
        )
        return {"url": url}
