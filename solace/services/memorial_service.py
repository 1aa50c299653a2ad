"""
Memorial service - memorial pages, custom URLs, tributes, candles, gifts and photos.
"""

import logging
import time
from datetime import timedelta

from solace.config import get_settings
from solace.core import slugs
from solace.core.clock import utcnow
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError, PermissionDeniedError
from solace.db.models.memorial import Memorial, MemorialCandle, MemorialStoreItem, MemorialTribute
from solace.db.models.profile import Profile
from solace.db.repositories.memorial_repository import (
    MemorialCandleRepository,
    MemorialRepository,
    MemorialStoreItemRepository,
    MemorialTributeRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_index, queue_removal
from solace.schemas.memorial import CandleCreate, MemorialCreate, MemorialUpdate, TributeCreate
from solace.search.documents import memorial_doc
from solace.storage import media

logger = logging.getLogger(__name__)

PHOTO_KINDS = ("profile", "cover")
REQUIRED_FIELDS = {
    "first_name",
    "last_name",
    "date_of_passing",
    "is_public",
    "allow_tributes",
    "allow_photos",
    "hobbies",
}


def _plain(value):
    """Enums and nested models to JSON-ready values."""
    if hasattr(value, "value"):
        return value.value
    if isinstance(value, list):
        return [v.model_dump(mode="json") if hasattr(v, "model_dump") else v for v in value]
    return value


class MemorialService:
    """Memorials with their tributes, candles, gifts and photos."""

    def __init__(
        self,
        memorial_repo: MemorialRepository,
        tribute_repo: MemorialTributeRepository,
        gift_repo: MemorialStoreItemRepository,
        candle_repo: MemorialCandleRepository,
        profile_repo: ProfileRepository,
    ):
        self.memorial_repo = memorial_repo
        self.tribute_repo = tribute_repo
        self.gift_repo = gift_repo
        self.candle_repo = candle_repo
        self.profile_repo = profile_repo

    async def generate_slug(self, first_name: str, last_name: str) -> str:
        """Slug from the name, suffixed -2, -3, ... until unused."""
        base = slugs.slug_from_text(f"{first_name} {last_name}")[: slugs.MEMORIAL_SLUG_MAX_LENGTH - 6].strip("-")
        if not base:
            base = "in-memory"
        if base in slugs.RESERVED_WORDS:
            base = f"{base}-memorial"
        taken = await self.memorial_repo.slugs_with_prefix(base)
        if base not in taken:
            return base
        n = 2
        while f"{base}-{n}" in taken:
            n += 1
        return f"{base}-{n}"

    def _sync_index(self, memorial: Memorial) -> None:
        if memorial.is_public:
            queue_index("memorials", memorial_doc(memorial))
        else:
            queue_removal("memorials", memorial.id)

    async def create(self, profile: Profile, data: MemorialCreate) -> Memorial:
        """Create a memorial under a generated unique slug."""
        values = {field: _plain(value) for field, value in data.model_dump(exclude_unset=False).items()}
        values["service_links"] = _plain(data.service_links) if data.service_links else None
        memorial = Memorial(
            created_by=profile.id,
            slug=await self.generate_slug(data.first_name, data.last_name),
            **values,
        )
        memorial = await self.memorial_repo.add(memorial)
        logger.info("Profile %s created memorial %s (%s)", profile.id, memorial.id, memorial.slug)
        self._sync_index(memorial)
        return memorial

    @staticmethod
    def _can_view(memorial: Memorial, viewer: Profile | None) -> bool:
        if memorial.is_public:
            return True
        return viewer is not None and (viewer.id == memorial.created_by or viewer.is_admin)

    async def get(self, memorial_id: int, viewer: Profile | None) -> Memorial:
        """Memorial by id if the viewer may see it."""
        memorial = await self.memorial_repo.get_by_id(memorial_id)
        if not memorial or not self._can_view(memorial, viewer):
            raise NotFoundError("Memorial not found")
        return memorial

    async def get_by_slug(self, slug: str, viewer: Profile | None) -> Memorial:
        """Memorial by slug if the viewer may see it."""
        memorial = await self.memorial_repo.get_by_slug(slug.lower())
        if not memorial or not self._can_view(memorial, viewer):
            raise NotFoundError("Memorial not found")
        return memorial

    async def list_public(self, skip: int, limit: int) -> list[Memorial]:
        """Page of public memorials, newest first."""
        return await self.memorial_repo.list_public(skip=skip, limit=limit)

    async def list_mine(self, profile: Profile) -> list[Memorial]:
        """Memorials the caller created."""
        return await self.memorial_repo.list_by_creator(profile.id)

    async def _get_owned(self, memorial_id: int, profile: Profile) -> Memorial:
        memorial = await self.get(memorial_id, profile)
        if memorial.created_by != profile.id:
            raise PermissionDeniedError("Only the creator can change this memorial")
        return memorial

    async def slug_availability(self, slug: str, exclude_id: int | None = None) -> dict:
        """Whether a slug is valid and free, with a suggestion when it is not."""
        slug = slug.strip().lower()
        valid = slugs.is_valid_memorial_slug(slug)
        available = valid and not await self.memorial_repo.slug_taken(slug, exclude_id)
        return {"slug": slug, "valid": valid, "available": available}

    async def update(self, memorial_id: int, profile: Profile, data: MemorialUpdate) -> Memorial:
        """Apply a partial update. Nulls for required fields leave them unchanged."""
        memorial = await self._get_owned(memorial_id, profile)
        changes = data.model_dump(exclude_unset=True)
        new_slug = changes.pop("slug", None)
        if new_slug is not None:
            new_slug = new_slug.strip().lower()
            if new_slug != memorial.slug:
                if not slugs.is_valid_memorial_slug(new_slug):
                    raise InvalidRequestError(
                        "Invalid URL: use 1-100 lowercase letters, numbers and hyphens, not a reserved word"
                    )
                if await self.memorial_repo.slug_taken(new_slug, exclude_id=memorial.id):
                    raise ConflictError("This URL is already taken")
                memorial.slug = new_slug
        if "service_links" in changes:
            changes["service_links"] = _plain(data.service_links) if data.service_links else None
        for field, value in changes.items():
            if value is None and field in REQUIRED_FIELDS:
                continue
            setattr(memorial, field, _plain(value))
        birth, passing = memorial.date_of_birth, memorial.date_of_passing
        if birth and passing and birth > passing:
            raise InvalidRequestError("date_of_birth must be before date_of_passing")
        memorial = await self.memorial_repo.save(memorial)
        self._sync_index(memorial)
        return memorial

    async def delete(self, memorial_id: int, profile: Profile) -> None:
        """Delete a memorial. Allowed for its creator and admins."""
        memorial = await self.get(memorial_id, profile)
        if memorial.created_by != profile.id and not profile.is_admin:
            raise PermissionDeniedError("Only the creator can delete this memorial")
        await self.memorial_repo.delete(memorial)
        queue_removal("memorials", memorial_id)
        logger.info("Profile %s deleted memorial %s", profile.id, memorial_id)

    async def list_tributes(self, memorial_id: int, viewer: Profile | None) -> list[dict]:
        """Visible tributes on a memorial the viewer may see."""
        await self.get(memorial_id, viewer)
        tributes = await self.tribute_repo.list_visible(memorial_id)
        authors = await self.profile_repo.get_by_ids([t.author_id for t in tributes])
        return [self.tribute_view(t, authors.get(t.author_id)) for t in tributes]

    @staticmethod
    def tribute_view(tribute: MemorialTribute, author: Profile | None) -> dict:
        return {
            "id": tribute.id,
            "memorial_id": tribute.memorial_id,
            "author_id": tribute.author_id,
            "author_name": author.public_name if author else None,
            "content": tribute.content,
            "created_at": tribute.created_at,
        }

    async def add_tribute(self, memorial_id: int, profile: Profile, data: TributeCreate) -> dict:
        """Leave a tribute where the memorial allows them."""
        memorial = await self.get(memorial_id, profile)
        if not memorial.allow_tributes:
            raise PermissionDeniedError("Tributes are disabled for this memorial")
        tribute = await self.tribute_repo.add(
            MemorialTribute(memorial_id=memorial.id, author_id=profile.id, content=data.content.strip())
        )
        return self.tribute_view(tribute, profile)

    @staticmethod
    def candle_view(candle: MemorialCandle, lighter: Profile | None) -> dict:
        return {
            "id": candle.id,
            "memorial_id": candle.memorial_id,
            "lit_by": candle.lit_by,
            "lighter_name": lighter.public_name if lighter else None,
            "message": candle.message,
            "expires_at": candle.expires_at,
            "created_at": candle.created_at,
        }

    async def light_candle(self, memorial_id: int, profile: Profile, data: CandleCreate) -> dict:
        """Light a candle on a memorial the caller can see. It burns for the configured lifetime."""
        memorial = await self.get(memorial_id, profile)
        message = (data.message or "").strip() or None
        expires_at = utcnow() + timedelta(minutes=get_settings().candle_lifetime_minutes)
        candle = await self.candle_repo.add(
            MemorialCandle(memorial_id=memorial.id, lit_by=profile.id, message=message, expires_at=expires_at)
        )
        logger.info("Profile %s lit candle %s on memorial %s", profile.id, candle.id, memorial.id)
        return self.candle_view(candle, profile)

    async def list_candles(self, memorial_id: int, viewer: Profile | None, limit: int = 10) -> dict:
        """Candles still burning, newest first, with the total still burning."""
        memorial = await self.get(memorial_id, viewer)
        now = utcnow()
        candles = await self.candle_repo.list_burning(memorial.id, now, limit=limit)
        lighters = await self.profile_repo.get_by_ids([c.lit_by for c in candles])
        return {
            "burning_count": await self.candle_repo.count_burning(memorial.id, now),
            "candles": [self.candle_view(c, lighters.get(c.lit_by)) for c in candles],
        }

    async def list_gifts(self, memorial_id: int, viewer: Profile | None) -> list[MemorialStoreItem]:
        """Visible gifts placed on a memorial."""
        await self.get(memorial_id, viewer)
        return await self.gift_repo.list_visible(memorial_id)

    async def upload_photo(
        self, memorial_id: int, profile: Profile, kind: str, content_type: str | None, data: bytes
    ) -> Memorial:
        """Store a profile or cover image for the memorial's creator."""
        if kind not in PHOTO_KINDS:
            raise NotFoundError("Unknown photo type")
        memorial = await self._get_owned(memorial_id, profile)
        extension = media.IMAGE_EXTENSIONS.get((content_type or "").lower())
        if extension is None:
            raise InvalidRequestError("Invalid file type. Please upload a JPEG, PNG, WEBP, or GIF image.")
        max_bytes = get_settings().max_upload_bytes
        if len(data) > max_bytes:
            raise InvalidRequestError(f"File too large. Maximum size is {max_bytes // (1024 * 1024)}MB.")
        path = f"{profile.id}/{memorial.id}/{kind}-{int(time.time() * 1000)}.{extension}"
        url = await media.save_file(path, data)
        if kind == "profile":
            memorial.profile_photo_url = url
        else:
            memorial.cover_photo_url = url
        memorial = await self.memorial_repo.save(memorial)
        self._sync_index(memorial)
        return memorial
