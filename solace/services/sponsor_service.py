"""
Sponsor service - sponsor directory, ad impression/click tracking and advertising inquiries.
"""

import hashlib
import logging
from dataclasses import dataclass

from solace.cache.redis_client import cache_delete, cache_get_json, cache_set
from solace.config import get_settings
from solace.core import slugs
from solace.core.clock import utcnow
from solace.core.enums import PlacementLocation, SponsorStatus, SponsorTier
from solace.core.errors import NotFoundError
from solace.db.models.profile import Profile
from solace.db.models.sponsor import AdImpression, AdPlacement, AdvertisingInquiry, Sponsor
from solace.db.repositories.sponsor_repository import (
    AdImpressionRepository,
    AdPlacementRepository,
    AdvertisingInquiryRepository,
    SponsorRepository,
)
from solace.schemas.sponsor import InquiryCreate, InquiryUpdate, SponsorCreate, SponsorPublic

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TierInfo:
    label: str
    price: str
    benefits: tuple[str, ...]


SPONSOR_TIERS: dict[str, TierInfo] = {
    SponsorTier.PLATINUM.value: TierInfo(
        "Platinum Partner",
        "$2,000/month",
        (
            "Homepage banner placement",
            "Featured in all email newsletters",
            "Dedicated sponsor spotlight article",
            "Logo on all pages",
            "Priority support",
        ),
    ),
    SponsorTier.GOLD.value: TierInfo(
        "Gold Partner",
        "$1,000/month",
        (
            "Resources page sidebar placement",
            "Monthly newsletter mention",
            "Logo on sponsors page",
            "Social media shoutout",
        ),
    ),
    SponsorTier.SILVER.value: TierInfo(
        "Silver Partner",
        "$500/month",
        ("Forums or meetups sidebar placement", "Quarterly newsletter mention", "Logo on sponsors page"),
    ),
    SponsorTier.BRONZE.value: TierInfo("Bronze Partner", "$200/month", ("Logo on sponsors page", "Website link")),
    SponsorTier.COMMUNITY.value: TierInfo(
        "Community Partner",
        "Free / In-kind",
        ("Logo on sponsors page", "For nonprofits and community organizations"),
    ),
}

# Dict order is display order: platinum first
TIER_RANK = {tier: rank for rank, tier in enumerate(SPONSOR_TIERS)}

PLACEMENT_LABELS = {
    PlacementLocation.HOMEPAGE_BANNER.value: "Homepage Banner",
    PlacementLocation.RESOURCES_SIDEBAR.value: "Resources Sidebar",
    PlacementLocation.FORUMS_BANNER.value: "Forums Banner",
    PlacementLocation.MEETUPS_SIDEBAR.value: "Meetups Sidebar",
    PlacementLocation.NEWSLETTER.value: "Email Newsletter",
    PlacementLocation.SPONSORS_PAGE.value: "Sponsors Page",
}

SPONSORS_CACHE_PREFIX = "sponsors:active:"


def sponsors_cache_key(placement: str | None) -> str:
    return f"{SPONSORS_CACHE_PREFIX}{placement or 'all'}"


def hash_client_address(forwarded_for: str | None) -> str | None:
    if not forwarded_for:
        return None
    return hashlib.sha256(forwarded_for.encode("utf-8")).hexdigest()


def click_through_rate(impressions: int, clicks: int) -> float:
    """Percentage, two decimals."""
    if impressions <= 0:
        return 0.0
    return round(clicks / impressions * 100, 2)


def catalogue() -> dict:
    return {
        "tiers": [
            {"tier": tier, "label": info.label, "price": info.price, "benefits": list(info.benefits)}
            for tier, info in SPONSOR_TIERS.items()
        ],
        "placements": dict(PLACEMENT_LABELS),
    }


class SponsorService:
    """Sponsors, ad tracking and advertising inquiries."""

    def __init__(
        self,
        sponsor_repo: SponsorRepository,
        placement_repo: AdPlacementRepository,
        impression_repo: AdImpressionRepository,
        inquiry_repo: AdvertisingInquiryRepository,
    ):
        self.sponsor_repo = sponsor_repo
        self.placement_repo = placement_repo
        self.impression_repo = impression_repo
        self.inquiry_repo = inquiry_repo

    async def list_active(self, placement: str | None = None) -> list[dict]:
        """Active sponsors for a placement in tier order. Cached."""
        key = sponsors_cache_key(placement)
        cached = await cache_get_json(key)
        if cached is not None:
            return cached
        sponsors = await self.sponsor_repo.list_active(placement)
        sponsors.sort(key=lambda s: (TIER_RANK.get(s.tier, len(TIER_RANK)), s.display_order, s.id))
        payload = [SponsorPublic.model_validate(s).model_dump(mode="json") for s in sponsors]
        await cache_set(key, payload, ttl_seconds=get_settings().cache_ttl_seconds)
        return payload

    async def _invalidate(self) -> None:
        await cache_delete(sponsors_cache_key(None), *(sponsors_cache_key(p.value) for p in PlacementLocation))

    async def _get(self, sponsor_id: int) -> Sponsor:
        sponsor = await self.sponsor_repo.get_by_id(sponsor_id)
        if not sponsor:
            raise NotFoundError("Sponsor not found")
        return sponsor

    async def track_impression(
        self, sponsor_id: int, location: str, viewer: Profile | None, forwarded_for: str | None
    ) -> None:
        """Count an impression, storing only a hash of the client address."""
        sponsor = await self._get(sponsor_id)
        await self.impression_repo.add(
            AdImpression(
                sponsor_id=sponsor.id,
                location=location,
                user_id=viewer.id if viewer else None,
                ip_hash=hash_client_address(forwarded_for),
            )
        )
        sponsor.total_impressions += 1
        await self.sponsor_repo.save(sponsor)

    async def track_click(self, sponsor_id: int) -> None:
        """Count a click."""
        sponsor = await self._get(sponsor_id)
        sponsor.total_clicks += 1
        await self.sponsor_repo.save(sponsor)

    async def submit_inquiry(self, data: InquiryCreate) -> AdvertisingInquiry:
        """Record an advertising inquiry."""
        values = data.model_dump()
        values["interested_tiers"] = [t.value for t in data.interested_tiers]
        values["interested_placements"] = [p.value for p in data.interested_placements]
        inquiry = await self.inquiry_repo.add(AdvertisingInquiry(**values))
        logger.info("Advertising inquiry %s from %s", inquiry.id, inquiry.company_name)
        return inquiry

    # --- Admin ---

    async def _unique_slug(self, company_name: str) -> str:
        base = slugs.slug_from_text(company_name) or "sponsor"
        candidate, n = base, 2
        while await self.sponsor_repo.slug_exists(candidate):
            candidate = f"{base}-{n}"
            n += 1
        return candidate

    async def create(self, data: SponsorCreate) -> Sponsor:
        """Create a sponsor with its placements."""
        values = data.model_dump(exclude={"placements"})
        values["tier"] = data.tier.value
        sponsor = await self.sponsor_repo.add(Sponsor(slug=await self._unique_slug(data.company_name), **values))
        for location in data.placements:
            await self.placement_repo.add(
                AdPlacement(
                    sponsor_id=sponsor.id,
                    location=location.value,
                    start_date=data.start_date,
                    end_date=data.end_date,
                )
            )
        logger.info("Created sponsor %s (%s)", sponsor.id, sponsor.slug)
        await self._invalidate()
        return sponsor

    async def list_all(self, status: str | None = None) -> list[Sponsor]:
        """Sponsors for the admin listing."""
        return await self.sponsor_repo.list_all(status)

    async def set_status(self, sponsor_id: int, status: str, admin: Profile) -> Sponsor:
        """Change a sponsor's status, stamping the approval on activation."""
        sponsor = await self._get(sponsor_id)
        if status == SponsorStatus.ACTIVE.value and sponsor.status != status:
            sponsor.approved_at = utcnow()
            sponsor.approved_by = admin.id
        sponsor.status = status
        sponsor = await self.sponsor_repo.save(sponsor)
        logger.info("Sponsor %s is now %s (by %s)", sponsor.id, status, admin.id)
        await self._invalidate()
        return sponsor

    async def analytics(self) -> list[dict]:
        """Impressions, clicks and click-through rate per sponsor."""
        sponsors = await self.sponsor_repo.list_all()
        return [
            {
                "id": s.id,
                "company_name": s.company_name,
                "tier": s.tier,
                "status": s.status,
                "impressions": s.total_impressions,
                "clicks": s.total_clicks,
                "ctr": click_through_rate(s.total_impressions, s.total_clicks),
            }
            for s in sponsors
        ]

    async def list_inquiries(self, status: str | None = None) -> list[AdvertisingInquiry]:
        """Inquiries for the admin listing."""
        return await self.inquiry_repo.list_by_status(status)

    async def update_inquiry(self, inquiry_id: int, data: InquiryUpdate, admin: Profile) -> AdvertisingInquiry:
        """Record the response to an inquiry."""
        inquiry = await self.inquiry_repo.get_by_id(inquiry_id)
        if not inquiry:
            raise NotFoundError("Inquiry not found")
        inquiry.status = data.status.value
        if data.admin_notes is not None:
            inquiry.admin_notes = data.admin_notes
        inquiry.responded_by = admin.id
        inquiry.responded_at = utcnow()
        return await self.inquiry_repo.save(inquiry)
