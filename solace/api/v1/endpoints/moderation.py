"""
Community moderation endpoints - content reports and the feature suggestion board.
"""

from typing import Literal

from fastapi import APIRouter, Query, status

from solace.config import get_settings
from solace.core.dependencies import AdminProfile, CurrentProfile, OptionalProfile
from solace.db.repositories.moderation_repository import (
    ReportRepository,
    SuggestionRepository,
    SuggestionUpvoteRepository,
)
from solace.db.session import DbSession
from solace.schemas.moderation import (
    ReportCreate,
    ReportResponse,
    ReportReview,
    SuggestionCreate,
    SuggestionResponse,
    SuggestionUpdate,
    UpvoteResult,
)
from solace.services.moderation_service import ModerationService

reports_router = APIRouter()
suggestions_router = APIRouter()
admin_router = APIRouter()
settings = get_settings()


def _get_moderation_service(session: DbSession) -> ModerationService:
    return ModerationService(
        ReportRepository(session), SuggestionRepository(session), SuggestionUpvoteRepository(session)
    )


@reports_router.post("", response_model=ReportResponse, status_code=status.HTTP_201_CREATED)
async def file_report(session: DbSession, profile: CurrentProfile, data: ReportCreate):
    return await _get_moderation_service(session).file_report(profile, data)


@suggestions_router.get("", response_model=list[SuggestionResponse])
async def list_suggestions(
    session: DbSession,
    viewer: OptionalProfile,
    sort: Literal["upvotes", "recent"] = "upvotes",
    status: str | None = None,
):
    return await _get_moderation_service(session).list_suggestions(viewer, status=status, sort=sort)


@suggestions_router.post("", response_model=SuggestionResponse, status_code=status.HTTP_201_CREATED)
async def create_suggestion(session: DbSession, profile: CurrentProfile, data: SuggestionCreate):
    return await _get_moderation_service(session).create_suggestion(profile, data)


@suggestions_router.post("/{suggestion_id}/upvote", response_model=UpvoteResult)
async def toggle_upvote(session: DbSession, suggestion_id: int, profile: CurrentProfile):
    return await _get_moderation_service(session).toggle_upvote(profile, suggestion_id)


# --- Admin ---


@admin_router.get("/reports", response_model=list[ReportResponse])
async def list_reports(
    session: DbSession,
    admin: AdminProfile,
    status: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=settings.max_page_size),
):
    return await _get_moderation_service(session).list_reports(status, skip=skip, limit=limit)


@admin_router.patch("/reports/{report_id}", response_model=ReportResponse)
async def review_report(session: DbSession, report_id: int, admin: AdminProfile, data: ReportReview):
    return await _get_moderation_service(session).review_report(report_id, admin, data)


@admin_router.patch("/suggestions/{suggestion_id}", response_model=SuggestionResponse)
async def update_suggestion(session: DbSession, suggestion_id: int, admin: AdminProfile, data: SuggestionUpdate):
    return await _get_moderation_service(session).update_suggestion(suggestion_id, admin, data)
