"""
Meetup endpoints - browsing, hosting, RSVPs and attendee lists.
"""

from fastapi import APIRouter, Query, status

from solace.config import get_settings
from solace.core.dependencies import AdminProfile, CurrentProfile, IdVerifiedProfile, OptionalProfile
from solace.db.repositories.meetup_repository import MeetupRepository, MeetupRsvpRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.meetup import (
    AttendeeResponse,
    MeetupCreate,
    MeetupResponse,
    MeetupStatusChange,
    MeetupUpdate,
    RsvpRequest,
    RsvpResponse,
)
from solace.services.meetup_service import MeetupService

router = APIRouter()
admin_router = APIRouter()
settings = get_settings()


def _get_meetup_service(session: DbSession) -> MeetupService:
    return MeetupService(MeetupRepository(session), MeetupRsvpRepository(session), ProfileRepository(session))


@router.get("", response_model=list[MeetupResponse])
async def list_meetups(
    session: DbSession,
    loss_category: str | None = None,
    format: str | None = None,
    city: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=settings.max_page_size),
):
    """Published meetups that have not started yet, soonest first."""
    svc = _get_meetup_service(session)
    return await svc.list_upcoming(loss_category=loss_category, format=format, city=city, skip=skip, limit=limit)


@router.post("", response_model=MeetupResponse, status_code=status.HTTP_201_CREATED)
async def create_meetup(session: DbSession, profile: CurrentProfile, data: MeetupCreate):
    return await _get_meetup_service(session).create(profile, data)


@router.get("/mine", response_model=list[MeetupResponse])
async def my_meetups(session: DbSession, profile: CurrentProfile):
    return await _get_meetup_service(session).list_mine(profile)


@router.post("/rsvp", response_model=RsvpResponse)
async def rsvp(session: DbSession, profile: IdVerifiedProfile, data: RsvpRequest):
    return await _get_meetup_service(session).rsvp(profile, data)


@router.delete("/rsvp", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_rsvp(session: DbSession, profile: CurrentProfile, meetup_id: int = Query(...)):
    await _get_meetup_service(session).cancel_rsvp(profile, meetup_id)


@router.get("/{meetup_id}", response_model=MeetupResponse)
async def get_meetup(session: DbSession, meetup_id: int, viewer: OptionalProfile):
    return await _get_meetup_service(session).get(meetup_id, viewer)


@router.patch("/{meetup_id}", response_model=MeetupResponse)
async def update_meetup(session: DbSession, meetup_id: int, profile: CurrentProfile, data: MeetupUpdate):
    return await _get_meetup_service(session).update(meetup_id, profile, data)


@router.post("/{meetup_id}/status", response_model=MeetupResponse)
async def change_status(session: DbSession, meetup_id: int, profile: CurrentProfile, data: MeetupStatusChange):
    return await _get_meetup_service(session).set_status(meetup_id, profile, data.status.value)


@router.get("/{meetup_id}/attendees", response_model=list[AttendeeResponse])
async def attendees(session: DbSession, meetup_id: int, profile: CurrentProfile):
    return await _get_meetup_service(session).attendees(meetup_id, profile)


# --- Admin ---


@admin_router.get("", response_model=list[MeetupResponse])
async def admin_list_meetups(
    session: DbSession,
    admin: AdminProfile,
    status: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=settings.max_page_size),
):
    return await _get_meetup_service(session).list_all(status, skip=skip, limit=limit)


@admin_router.post("/{meetup_id}/status", response_model=MeetupResponse)
async def admin_change_status(session: DbSession, meetup_id: int, admin: AdminProfile, data: MeetupStatusChange):
    return await _get_meetup_service(session).set_status(meetup_id, admin, data.status.value)
