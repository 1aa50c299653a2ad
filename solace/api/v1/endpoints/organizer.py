"""
Meetup organizer application endpoints - apply, pay the verification fee, admin review.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import AdminProfile, CurrentProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import OrganizerApplicationRepository
from solace.db.session import DbSession
from solace.schemas.billing import CheckoutSessionResponse
from solace.schemas.verification import (
    OrganizerApplicationCreate,
    OrganizerApplicationResponse,
    OrganizerCheckoutRequest,
    ReviewRejection,
)
from solace.services.organizer_service import OrganizerService

router = APIRouter()
admin_router = APIRouter()


def _get_organizer_service(session: DbSession) -> OrganizerService:
    return OrganizerService(OrganizerApplicationRepository(session), ProfileRepository(session))


@router.post("/applications", response_model=OrganizerApplicationResponse, status_code=status.HTTP_201_CREATED)
async def apply(session: DbSession, profile: CurrentProfile, data: OrganizerApplicationCreate):
    return await _get_organizer_service(session).apply(profile, data)


@router.get("/applications/mine", response_model=list[OrganizerApplicationResponse])
async def my_applications(session: DbSession, profile: CurrentProfile):
    return await _get_organizer_service(session).list_mine(profile)


@router.post("/create-checkout", response_model=CheckoutSessionResponse)
async def create_checkout(session: DbSession, profile: CurrentProfile, data: OrganizerCheckoutRequest):
    """Hosted payment page for the one-time verification fee."""
    return await _get_organizer_service(session).create_checkout(profile, data.application_id)


# --- Admin ---


@admin_router.get("", response_model=list[OrganizerApplicationResponse])
async def applications_for_review(session: DbSession, admin: AdminProfile):
    return await _get_organizer_service(session).list_for_review()


@admin_router.post("/{application_id}/approve", response_model=OrganizerApplicationResponse)
async def approve(session: DbSession, application_id: int, admin: AdminProfile):
    return await _get_organizer_service(session).approve(application_id, admin)


@admin_router.post("/{application_id}/reject", response_model=OrganizerApplicationResponse)
async def reject(session: DbSession, application_id: int, admin: AdminProfile, data: ReviewRejection):
    return await _get_organizer_service(session).reject(application_id, admin, data.reason)
