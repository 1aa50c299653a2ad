"""
Background check endpoints - member application and admin review.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import AdminProfile, CurrentProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import BackgroundCheckRepository
from solace.db.session import DbSession
from solace.schemas.verification import (
    BackgroundCheckApply,
    BackgroundCheckApprove,
    BackgroundCheckReject,
    BackgroundCheckResponse,
)
from solace.services.background_check_service import BackgroundCheckService

router = APIRouter()
admin_router = APIRouter()


def _get_background_check_service(session: DbSession) -> BackgroundCheckService:
    return BackgroundCheckService(BackgroundCheckRepository(session), ProfileRepository(session))


@router.post("/apply", response_model=BackgroundCheckResponse, status_code=status.HTTP_201_CREATED)
async def apply(session: DbSession, profile: CurrentProfile, data: BackgroundCheckApply):
    return await _get_background_check_service(session).apply(profile, data)


@admin_router.get("", response_model=list[BackgroundCheckResponse])
async def list_applications(session: DbSession, admin: AdminProfile, status: str | None = None):
    return await _get_background_check_service(session).list_applications(status)


@admin_router.post("/{application_id}/approve", response_model=BackgroundCheckResponse)
async def approve(
    session: DbSession, application_id: int, admin: AdminProfile, data: BackgroundCheckApprove | None = None
):
    notes = data.admin_notes if data else None
    return await _get_background_check_service(session).approve(application_id, notes)


@admin_router.post("/{application_id}/reject", response_model=BackgroundCheckResponse)
async def reject(session: DbSession, application_id: int, admin: AdminProfile, data: BackgroundCheckReject):
    return await _get_background_check_service(session).reject(
        application_id, data.rejection_reason, data.admin_notes
    )
