"""
Premium membership endpoints - subscription checkout and billing portal.
"""

from fastapi import APIRouter

from solace.core.dependencies import CurrentProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.billing import CheckoutSessionResponse, PortalResponse
from solace.services.billing_service import BillingService

router = APIRouter()


def _get_billing_service(session: DbSession) -> BillingService:
    return BillingService(ProfileRepository(session))


@router.post("/create-checkout", response_model=CheckoutSessionResponse)
async def create_checkout(session: DbSession, profile: CurrentProfile):
    return await _get_billing_service(session).create_subscription_checkout(profile)


@router.post("/create-portal", response_model=PortalResponse)
async def create_portal(session: DbSession, profile: CurrentProfile):
    return await _get_billing_service(session).create_portal(profile)
