"""
Memorial endpoints - memorial pages, custom URLs, tributes, candles, gifts and photo uploads.
"""

from fastapi import APIRouter, File, Query, UploadFile, status

from solace.config import get_settings
from solace.core.dependencies import CurrentProfile, EmailVerifiedProfile, OptionalProfile
from solace.db.repositories.memorial_repository import (
    MemorialCandleRepository,
    MemorialRepository,
    MemorialStoreItemRepository,
    MemorialTributeRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.memorial import (
    CandleCreate,
    CandleList,
    CandleResponse,
    MemorialCreate,
    MemorialGiftResponse,
    MemorialResponse,
    MemorialUpdate,
    SlugAvailability,
    TributeCreate,
    TributeResponse,
)
from solace.services.memorial_service import MemorialService

router = APIRouter()
settings = get_settings()


def _get_memorial_service(session: DbSession) -> MemorialService:
    return MemorialService(
        MemorialRepository(session),
        MemorialTributeRepository(session),
        MemorialStoreItemRepository(session),
        MemorialCandleRepository(session),
        ProfileRepository(session),
    )


@router.get("", response_model=list[MemorialResponse])
async def list_memorials(
    session: DbSession,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=settings.max_page_size),
):
    """Public memorials, newest first."""
    return await _get_memorial_service(session).list_public(skip=skip, limit=limit)


@router.post("", response_model=MemorialResponse, status_code=status.HTTP_201_CREATED)
async def create_memorial(session: DbSession, profile: EmailVerifiedProfile, data: MemorialCreate):
    return await _get_memorial_service(session).create(profile, data)


@router.get("/mine", response_model=list[MemorialResponse])
async def my_memorials(session: DbSession, profile: CurrentProfile):
    return await _get_memorial_service(session).list_mine(profile)


@router.get("/slug-availability", response_model=SlugAvailability)
async def slug_availability(session: DbSession, slug: str = Query(..., min_length=1), exclude_id: int | None = None):
    return await _get_memorial_service(session).slug_availability(slug, exclude_id)


@router.get("/by-slug/{slug}", response_model=MemorialResponse)
async def get_memorial_by_slug(session: DbSession, slug: str, viewer: OptionalProfile):
    return await _get_memorial_service(session).get_by_slug(slug, viewer)


@router.get("/{memorial_id}", response_model=MemorialResponse)
async def get_memorial(session: DbSession, memorial_id: int, viewer: OptionalProfile):
    return await _get_memorial_service(session).get(memorial_id, viewer)


@router.patch("/{memorial_id}", response_model=MemorialResponse)
async def update_memorial(session: DbSession, memorial_id: int, profile: CurrentProfile, data: MemorialUpdate):
    return await _get_memorial_service(session).update(memorial_id, profile, data)


@router.delete("/{memorial_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_memorial(session: DbSession, memorial_id: int, profile: CurrentProfile):
    await _get_memorial_service(session).delete(memorial_id, profile)


@router.get("/{memorial_id}/tributes", response_model=list[TributeResponse])
async def list_tributes(session: DbSession, memorial_id: int, viewer: OptionalProfile):
    return await _get_memorial_service(session).list_tributes(memorial_id, viewer)


@router.post("/{memorial_id}/tributes", response_model=TributeResponse, status_code=status.HTTP_201_CREATED)
async def add_tribute(session: DbSession, memorial_id: int, profile: EmailVerifiedProfile, data: TributeCreate):
    return await _get_memorial_service(session).add_tribute(memorial_id, profile, data)


@router.get("/{memorial_id}/candles", response_model=CandleList)
async def list_candles(
    session: DbSession, memorial_id: int, viewer: OptionalProfile, limit: int = Query(10, ge=1, le=50)
):
    return await _get_memorial_service(session).list_candles(memorial_id, viewer, limit=limit)


@router.post("/{memorial_id}/candles", response_model=CandleResponse, status_code=status.HTTP_201_CREATED)
async def light_candle(session: DbSession, memorial_id: int, profile: CurrentProfile, data: CandleCreate):
    return await _get_memorial_service(session).light_candle(memorial_id, profile, data)


@router.get("/{memorial_id}/gifts", response_model=list[MemorialGiftResponse])
async def list_gifts(session: DbSession, memorial_id: int, viewer: OptionalProfile):
    return await _get_memorial_service(session).list_gifts(memorial_id, viewer)


@router.post("/{memorial_id}/photos/{kind}", response_model=MemorialResponse)
async def upload_photo(
    session: DbSession,
    memorial_id: int,
    kind: str,
    profile: CurrentProfile,
    file: UploadFile = File(...),
):
    """Profile or cover photo. JPEG, PNG, WEBP or GIF up to the configured size."""
    data = await file.read(get_settings().max_upload_bytes + 1)
    return await _get_memorial_service(session).upload_photo(memorial_id, profile, kind, file.content_type, data)
