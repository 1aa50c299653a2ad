"""Organizer application and background check schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class OrganizerApplicationCreate(BaseModel):
    experience: str = Field(..., min_length=1)
    motivation: str = Field(..., min_length=1)
    planned_meetups: str = Field(..., min_length=1)
    certifications: str | None = None
    background_check_consent: bool = False


class OrganizerApplicationResponse(BaseModel):
    id: int
    user_id: int
    experience: str
    motivation: str
    planned_meetups: str
    certifications: str | None
    background_check_consent: bool
    payment_amount_cents: int
    status: str
    paid_at: datetime | None
    reviewed_at: datetime | None
    rejection_reason: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class OrganizerCheckoutRequest(BaseModel):
    application_id: int


class ReviewRejection(BaseModel):
    reason: str = Field(..., min_length=1)


class BackgroundCheckApply(BaseModel):
    full_legal_name: str = Field(..., min_length=1, max_length=255)
    date_of_birth: date
    ssn_last_4: str = Field(..., pattern=r"^\d{4}$")
    address_line_1: str = Field(..., min_length=1, max_length=255)
    address_line_2: str | None = Field(None, max_length=255)
    city: str = Field(..., min_length=1, max_length=120)
    state: str = Field(..., min_length=1, max_length=64)
    zip_code: str = Field(..., min_length=1, max_length=20)


class BackgroundCheckResponse(BaseModel):
    id: int
    user_id: int
    status: str
    provider: str
    full_legal_name: str
    city: str
    state: str
    approved_at: datetime | None
    expires_at: datetime | None
    reviewed_at: datetime | None
    rejection_reason: str | None
    admin_notes: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class BackgroundCheckApprove(BaseModel):
    admin_notes: str | None = None


class BackgroundCheckReject(BaseModel):
    # Optional here so a missing reason gets the workflow's own 400 message
    rejection_reason: str | None = None
    admin_notes: str | None = None
