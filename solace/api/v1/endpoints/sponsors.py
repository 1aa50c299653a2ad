"""
Sponsor and advertising endpoints - public sponsor listings, ad tracking, inquiries, admin.
"""

from fastapi import APIRouter, Header, status

from solace.core.dependencies import AdminProfile, OptionalProfile
from solace.core.enums import PlacementLocation
from solace.db.repositories.sponsor_repository import (
    AdImpressionRepository,
    AdPlacementRepository,
    AdvertisingInquiryRepository,
    SponsorRepository,
)
from solace.db.session import DbSession
from solace.schemas.sponsor import (
    ImpressionRequest,
    InquiryCreate,
    InquiryResponse,
    InquiryUpdate,
    SponsorAdmin,
    SponsorAnalytics,
    SponsorCatalogue,
    SponsorCreate,
    SponsorPublic,
    SponsorStatusChange,
)
from solace.services.sponsor_service import SponsorService, catalogue

router = APIRouter()
advertising_router = APIRouter()
admin_router = APIRouter()


def _get_sponsor_service(session: DbSession) -> SponsorService:
    return SponsorService(
        SponsorRepository(session),
        AdPlacementRepository(session),
        AdImpressionRepository(session),
        AdvertisingInquiryRepository(session),
    )


@router.get("", response_model=list[SponsorPublic])
async def list_sponsors(session: DbSession, placement: PlacementLocation | None = None):
    """Active sponsors, platinum first. Cached per placement."""
    return await _get_sponsor_service(session).list_active(placement.value if placement else None)


@router.get("/tiers", response_model=SponsorCatalogue)
async def sponsor_tiers():
    return catalogue()


@router.post("/track-impression")
async def track_impression(
    session: DbSession,
    data: ImpressionRequest,
    viewer: OptionalProfile,
    x_forwarded_for: str | None = Header(None),
):
    await _get_sponsor_service(session).track_impression(
        data.sponsor_id, data.location.value, viewer, x_forwarded_for
    )
    return {"success": True}


@router.post("/{sponsor_id}/track-click")
async def track_click(session: DbSession, sponsor_id: int):
    await _get_sponsor_service(session).track_click(sponsor_id)
    return {"success": True}


@advertising_router.post("/inquiry", status_code=status.HTTP_201_CREATED)
async def submit_inquiry(session: DbSession, data: InquiryCreate):
    inquiry = await _get_sponsor_service(session).submit_inquiry(data)
    return {"success": True, "id": inquiry.id}


# --- Admin ---


@admin_router.get("/sponsors", response_model=list[SponsorAdmin])
async def admin_list_sponsors(session: DbSession, admin: AdminProfile, status: str | None = None):
    return await _get_sponsor_service(session).list_all(status)


@admin_router.post("/sponsors", response_model=SponsorAdmin, status_code=status.HTTP_201_CREATED)
async def create_sponsor(session: DbSession, admin: AdminProfile, data: SponsorCreate):
    return await _get_sponsor_service(session).create(data)


@admin_router.post("/sponsors/{sponsor_id}/status", response_model=SponsorAdmin)
async def set_sponsor_status(session: DbSession, sponsor_id: int, admin: AdminProfile, data: SponsorStatusChange):
    return await _get_sponsor_service(session).set_status(sponsor_id, data.status.value, admin)


@admin_router.get("/sponsor-analytics", response_model=list[SponsorAnalytics])
async def sponsor_analytics(session: DbSession, admin: AdminProfile):
    return await _get_sponsor_service(session).analytics()


@admin_router.get("/advertising-inquiries", response_model=list[InquiryResponse])
async def list_inquiries(session: DbSession, admin: AdminProfile, status: str | None = None):
    return await _get_sponsor_service(session).list_inquiries(status)


@admin_router.patch("/advertising-inquiries/{inquiry_id}", response_model=InquiryResponse)
async def update_inquiry(session: DbSession, inquiry_id: int, admin: AdminProfile, data: InquiryUpdate):
    return await _get_sponsor_service(session).update_inquiry(inquiry_id, data, admin)
