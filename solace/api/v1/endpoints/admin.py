"""
Admin endpoints - dashboard stats, member management and ID verification review.
Domain-specific moderation (forums, meetups, store, sponsors, ...) lives next to its module.
"""

from fastapi import APIRouter, Query

from solace.config import get_settings
from solace.core.dependencies import AdminProfile
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import VerificationRequestRepository
from solace.db.session import DbSession
from solace.schemas.admin import AdminStats, AdminUser, BanRequest, VerificationChange
from solace.schemas.profile import VerificationApprove, VerificationReject, VerificationRequestResponse
from solace.services.admin_service import AdminService
from solace.services.verification_service import VerificationService

router = APIRouter()
settings = get_settings()


def _get_admin_service(session: DbSession) -> AdminService:
    return AdminService(ProfileRepository(session))


def _get_verification_service(session: DbSession) -> VerificationService:
    return VerificationService(VerificationRequestRepository(session), ProfileRepository(session))


@router.get("/stats", response_model=AdminStats)
async def stats(session: DbSession, admin: AdminProfile):
    return await _get_admin_service(session).stats()


@router.get("/users", response_model=list[AdminUser])
async def list_users(
    session: DbSession,
    admin: AdminProfile,
    verification_status: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=settings.max_page_size),
):
    return await _get_admin_service(session).list_users(verification_status, skip, limit)


@router.patch("/users/{user_id}/verification", response_model=AdminUser)
async def set_verification(session: DbSession, admin: AdminProfile, user_id: int, data: VerificationChange):
    return await _get_admin_service(session).set_verification(user_id, data.verification_status, admin)


@router.post("/users/{user_id}/ban", response_model=AdminUser)
async def ban_user(session: DbSession, admin: AdminProfile, user_id: int, data: BanRequest):
    return await _get_admin_service(session).ban(user_id, data.reason, admin)


@router.post("/users/{user_id}/unban", response_model=AdminUser)
async def unban_user(session: DbSession, admin: AdminProfile, user_id: int):
    return await _get_admin_service(session).unban(user_id, admin)


@router.get("/verification-requests", response_model=list[VerificationRequestResponse])
async def pending_verification_requests(session: DbSession, admin: AdminProfile):
    return await _get_verification_service(session).list_pending()


@router.post("/verification-requests/{request_id}/approve", response_model=VerificationRequestResponse)
async def approve_verification_request(
    session: DbSession, admin: AdminProfile, request_id: int, data: VerificationApprove | None = None
):
    notes = data.admin_notes if data else None
    return await _get_verification_service(session).approve(request_id, admin, notes)


@router.post("/verification-requests/{request_id}/reject", response_model=VerificationRequestResponse)
async def reject_verification_request(
    session: DbSession, admin: AdminProfile, request_id: int, data: VerificationReject
):
    return await _get_verification_service(session).reject(request_id, admin, data.reason, data.admin_notes)
