"""
Profile endpoints - own profile, account status, public profiles and ID verification requests.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import CurrentProfile, OptionalProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import VerificationRequestRepository
from solace.db.session import DbSession
from solace.schemas.profile import (
    AccountStatus,
    ProfilePrivate,
    ProfilePublic,
    ProfileUpdate,
    VerificationRequestCreate,
    VerificationRequestResponse,
)
from solace.services.profile_service import ProfileService

router = APIRouter()


def _get_profile_service(session: DbSession) -> ProfileService:
    return ProfileService(ProfileRepository(session), VerificationRequestRepository(session))


@router.get("/me", response_model=ProfilePrivate)
async def get_me(profile: CurrentProfile):
    return profile


@router.patch("/me", response_model=ProfilePrivate)
async def update_me(session: DbSession, profile: CurrentProfile, data: ProfileUpdate):
    return await _get_profile_service(session).update(profile, data)


@router.get("/me/status", response_model=AccountStatus)
async def account_status(session: DbSession, profile: CurrentProfile):
    """Verification tier, premium membership, background check and hosting eligibility."""
    return _get_profile_service(session).account_status(profile)


@router.post(
    "/me/verification-requests",
    response_model=VerificationRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def request_verification(session: DbSession, profile: CurrentProfile, data: VerificationRequestCreate):
    return await _get_profile_service(session).request_id_verification(profile, data)


@router.get("/{profile_id}", response_model=ProfilePublic)
async def get_profile(session: DbSession, profile_id: int, viewer: OptionalProfile):
    return await _get_profile_service(session).get_visible(profile_id, viewer)
