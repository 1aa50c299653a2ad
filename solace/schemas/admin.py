"""Admin dashboard schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, EmailStr, Field

from solace.core.enums import MeetupStatus, VerificationStatus
from solace.schemas.profile import ProfilePrivate


class AdminStats(BaseModel):
    total_users: int
    verified_users: int
    banned_users: int
    memorials: int
    published_meetups: int
    forum_topics: int
    pending_reports: int
    pending_organizer_applications: int
    pending_background_checks: int
    pending_verification_requests: int


class AdminUser(ProfilePrivate):
    is_banned: bool
    banned_at: datetime | None
    ban_reason: str | None


class VerificationChange(BaseModel):
    verification_status: VerificationStatus


class BanRequest(BaseModel):
    reason: str = Field(..., min_length=1)


class MeetupModeration(BaseModel):
    status: MeetupStatus


class EmailSendRequest(BaseModel):
    to: EmailStr
    template_id: str = Field(..., min_length=1)
    data: dict[str, Any] = {}


class EmailSendResponse(BaseModel):
    success: bool
    message: str
