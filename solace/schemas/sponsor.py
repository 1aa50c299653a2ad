"""Sponsor and advertising schemas."""

from datetime import date, datetime

from pydantic import BaseModel, EmailStr, Field

from solace.core.enums import InquiryStatus, PlacementLocation, SponsorStatus, SponsorTier


class TierInfo(BaseModel):
    tier: str
    label: str
    price: str
    benefits: list[str]


class SponsorCatalogue(BaseModel):
    tiers: list[TierInfo]
    placements: dict[str, str]


class SponsorPublic(BaseModel):
    id: int
    company_name: str
    slug: str
    description: str | None
    logo_url: str | None
    website_url: str
    tier: str
    tagline: str | None
    display_order: int

    model_config = {"from_attributes": True}


class SponsorCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    website_url: str = Field(..., min_length=1, max_length=500)
    contact_email: EmailStr
    contact_name: str | None = None
    tier: SponsorTier
    description: str | None = None
    logo_url: str | None = None
    tagline: str | None = Field(None, max_length=255)
    start_date: date | None = None
    end_date: date | None = None
    monthly_rate_cents: int | None = Field(None, ge=0)
    display_order: int = 0
    show_on_homepage: bool = False
    categories: list[str] = []
    notes: str | None = None
    placements: list[PlacementLocation] = []


class SponsorStatusChange(BaseModel):
    status: SponsorStatus


class SponsorAdmin(SponsorPublic):
    contact_email: str
    contact_name: str | None
    status: str
    start_date: date | None
    end_date: date | None
    monthly_rate_cents: int | None
    show_on_homepage: bool
    total_impressions: int
    total_clicks: int
    approved_by: int | None
    approved_at: datetime | None
    created_at: datetime


class ImpressionRequest(BaseModel):
    sponsor_id: int
    location: PlacementLocation


class SponsorAnalytics(BaseModel):
    id: int
    company_name: str
    tier: str
    status: str
    impressions: int
    clicks: int
    ctr: float


class InquiryCreate(BaseModel):
    company_name: str = Field(..., min_length=1, max_length=255)
    contact_name: str = Field(..., min_length=1, max_length=255)
    contact_email: EmailStr
    phone: str | None = None
    website_url: str | None = None
    company_description: str = Field(..., min_length=1)
    interested_tiers: list[SponsorTier] = []
    interested_placements: list[PlacementLocation] = []
    budget_range: str | None = None
    message: str = Field(..., min_length=1)


class InquiryUpdate(BaseModel):
    status: InquiryStatus
    admin_notes: str | None = None


class InquiryResponse(BaseModel):
    id: int
    company_name: str
    contact_name: str
    contact_email: str
    phone: str | None
    website_url: str | None
    company_description: str
    interested_tiers: list[str]
    interested_placements: list[str]
    budget_range: str | None
    message: str
    status: str
    admin_notes: str | None
    responded_at: datetime | None
    created_at: datetime

    model_config = {"from_attributes": True}
