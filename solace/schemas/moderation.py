"""Report and feature suggestion schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from solace.core.enums import (
    ReportableType,
    ReportStatus,
    ReportType,
    SuggestionCategory,
    SuggestionPriority,
    SuggestionStatus,
)


class ReportCreate(BaseModel):
    reportable_type: ReportableType
    reportable_id: int
    report_type: ReportType
    description: str = Field(..., min_length=1, max_length=5000)
    evidence_urls: list[str] = []


class ReportReview(BaseModel):
    status: ReportStatus
    action_taken: str | None = None
    admin_notes: str | None = None


class ReportResponse(BaseModel):
    id: int
    reporter_id: int
    reportable_type: str
    reportable_id: int
    report_type: str
    description: str
    evidence_urls: list[str] | None
    status: str
    reviewed_by: int | None
    reviewed_at: datetime | None
    admin_notes: str | None
    action_taken: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class SuggestionCreate(BaseModel):
    title: str = Field(..., max_length=255)
    description: str
    category: SuggestionCategory | None = None

    @field_validator("title", "description")
    @classmethod
    def not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be empty")
        return v


class SuggestionUpdate(BaseModel):
    status: SuggestionStatus | None = None
    priority: SuggestionPriority | None = None
    admin_notes: str | None = None


class SuggestionResponse(BaseModel):
    id: int
    submitted_by: int
    title: str
    description: str
    category: str | None
    status: str
    priority: str
    admin_notes: str | None = None
    upvote_count: int
    created_at: datetime
    has_upvoted: bool = False

    model_config = {"from_attributes": True}


class UpvoteResult(BaseModel):
    upvoted: bool
    upvote_count: int
