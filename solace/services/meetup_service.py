"""
Meetup service - hosting, publishing and RSVPs.

attendee_count always equals the number of `attending` RSVPs; it is recomputed in the
same transaction as every RSVP change. When a seat frees up, the oldest waitlisted
RSVP is promoted.
"""

import logging

from solace.core import permissions
from solace.core.clock import ensure_aware, utcnow
from solace.core.enums import MeetupStatus, RsvpStatus
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError, PermissionDeniedError
from solace.db.models.meetup import Meetup, MeetupRsvp
from solace.db.models.profile import Profile
from solace.db.repositories.meetup_repository import MeetupRepository, MeetupRsvpRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_email, queue_index, queue_removal
from solace.schemas.meetup import MeetupCreate, MeetupUpdate, RsvpRequest
from solace.search.documents import meetup_doc
from solace.services.profile_service import can_host_gatherings

logger = logging.getLogger(__name__)

# Columns that cannot be cleared by sending null
REQUIRED_FIELDS = {
    "title",
    "description",
    "format",
    "start_time",
    "end_time",
    "loss_categories",
    "timezone",
    "location_country",
    "requires_approval",
}

# Allowed status moves; anything else is a conflict
STATUS_TRANSITIONS = {
    MeetupStatus.DRAFT.value: {MeetupStatus.PUBLISHED.value, MeetupStatus.CANCELLED.value},
    MeetupStatus.PUBLISHED.value: {MeetupStatus.CANCELLED.value, MeetupStatus.COMPLETED.value},
    MeetupStatus.CANCELLED.value: set(),
    MeetupStatus.COMPLETED.value: set(),
}


def _plain(value):
    if hasattr(value, "value"):
        return value.value
    if isinstance(value, list):
        return [_plain(v) for v in value]
    return value


def can_create_meetups(profile: Profile) -> bool:
    return (
        profile.is_admin
        or permissions.can_create_meetups(profile.verification_status)
        or can_host_gatherings(profile)
    )


class MeetupService:
    """Meetup lifecycle and RSVPs, including the waitlist."""

    def __init__(
        self,
        meetup_repo: MeetupRepository,
        rsvp_repo: MeetupRsvpRepository,
        profile_repo: ProfileRepository,
    ):
        self.meetup_repo = meetup_repo
        self.rsvp_repo = rsvp_repo
        self.profile_repo = profile_repo

    def _sync_index(self, meetup: Meetup) -> None:
        if meetup.status == MeetupStatus.PUBLISHED.value:
            queue_index("meetups", meetup_doc(meetup))
        else:
            queue_removal("meetups", meetup.id)

    async def list_upcoming(
        self,
        *,
        loss_category: str | None = None,
        format: str | None = None,
        city: str | None = None,
        skip: int = 0,
        limit: int = 20,
    ) -> list[Meetup]:
        """Published meetups that have not started, optionally filtered."""
        meetups = await self.meetup_repo.list_upcoming(after=utcnow(), format=format, city=city)
        if loss_category:
            meetups = [m for m in meetups if loss_category in (m.loss_categories or [])]
        return meetups[skip : skip + limit]

    async def get(self, meetup_id: int, viewer: Profile | None = None) -> Meetup:
        """Meetup by id. Drafts are visible only to whoever can manage them."""
        meetup = await self.meetup_repo.get_by_id(meetup_id)
        if not meetup:
            raise NotFoundError("Meetup not found")
        if meetup.status == MeetupStatus.DRAFT.value and not self._can_manage(meetup, viewer):
            raise NotFoundError("Meetup not found")
        return meetup

    @staticmethod
    def _can_manage(meetup: Meetup, profile: Profile | None) -> bool:
        return profile is not None and (profile.id == meetup.organizer_id or profile.is_admin)

    async def _get_managed(self, meetup_id: int, profile: Profile) -> Meetup:
        meetup = await self.meetup_repo.get_by_id(meetup_id)
        if not meetup:
            raise NotFoundError("Meetup not found")
        if not self._can_manage(meetup, profile):
            raise PermissionDeniedError("Only the organizer can manage this meetup")
        return meetup

    async def list_mine(self, profile: Profile) -> list[Meetup]:
        """Meetups the caller organizes."""
        return await self.meetup_repo.list_by_organizer(profile.id)

    async def list_all(self, status: str | None = None, skip: int = 0, limit: int = 50) -> list[Meetup]:
        """All meetups for the admin listing."""
        return await self.meetup_repo.list_all(status, skip=skip, limit=limit)

    async def create(self, profile: Profile, data: MeetupCreate) -> Meetup:
        """Create a meetup as a draft or published. Only organizers may create."""
        if not can_create_meetups(profile):
            raise PermissionDeniedError(
                "Meetup organizer verification or premium membership with an approved background check is required"
            )
        values = {k: _plain(v) for k, v in data.model_dump(exclude={"publish"}, exclude_none=True).items()}
        meetup = await self.meetup_repo.add(
            Meetup(
                organizer_id=profile.id,
                status=MeetupStatus.PUBLISHED.value if data.publish else MeetupStatus.DRAFT.value,
                **values,
            )
        )
        logger.info("Profile %s created meetup %s (%s)", profile.id, meetup.id, meetup.status)
        queue_email(profile.email, "meetup_created", {"meetupTitle": meetup.title, "meetupId": meetup.id})
        self._sync_index(meetup)
        return meetup

    async def update(self, meetup_id: int, profile: Profile, data: MeetupUpdate) -> Meetup:
        """Apply a partial update. Nulls for required fields leave them unchanged."""
        meetup = await self._get_managed(meetup_id, profile)
        for field, value in data.model_dump(exclude_unset=True).items():
            if value is None and field in REQUIRED_FIELDS:
                continue
            setattr(meetup, field, _plain(value))
        if ensure_aware(meetup.end_time) <= ensure_aware(meetup.start_time):
            raise InvalidRequestError("end_time must be after start_time")
        await self._promote_waitlist(meetup)
        meetup = await self.meetup_repo.save(meetup)
        self._sync_index(meetup)
        return meetup

    async def set_status(self, meetup_id: int, profile: Profile, status: str) -> Meetup:
        """Move a meetup along its allowed status transitions."""
        meetup = await self._get_managed(meetup_id, profile)
        if status == meetup.status:
            return meetup
        if status not in STATUS_TRANSITIONS.get(meetup.status, set()):
            raise ConflictError(f"Meetup is already {meetup.status}")
        meetup.status = status
        meetup = await self.meetup_repo.save(meetup)
        logger.info("Meetup %s is now %s (by profile %s)", meetup.id, status, profile.id)
        self._sync_index(meetup)
        return meetup

    async def attendees(self, meetup_id: int, profile: Profile) -> list[dict]:
        """Attendee list with emergency contacts, for the organizer only."""
        meetup = await self._get_managed(meetup_id, profile)
        rsvps = await self.rsvp_repo.list_for_meetup(meetup.id)
        people = await self.profile_repo.get_by_ids([r.user_id for r in rsvps])
        rows = []
        for rsvp in rsvps:
            person = people.get(rsvp.user_id)
            rows.append(
                {
                    "rsvp_id": rsvp.id,
                    "user_id": rsvp.user_id,
                    "display_name": person.public_name if person else None,
                    "status": rsvp.status,
                    "message": rsvp.message,
                    "emergency_contact_name": person.emergency_contact_name if person else None,
                    "emergency_contact_phone": person.emergency_contact_phone if person else None,
                    "emergency_contact_relationship": person.emergency_contact_relationship if person else None,
                    "responded_at": rsvp.updated_at,
                }
            )
        return rows

    async def _refresh_count(self, meetup: Meetup) -> None:
        meetup.attendee_count = await self.rsvp_repo.count_attending(meetup.id)
        await self.meetup_repo.save(meetup)

    async def _promote_waitlist(self, meetup: Meetup) -> None:
        """Move waitlisted members into free seats, oldest first."""
        await self._refresh_count(meetup)
        while not meetup.is_full:
            waiting = await self.rsvp_repo.oldest_waitlisted(meetup.id)
            if waiting is None:
                break
            waiting.status = RsvpStatus.ATTENDING.value
            await self.rsvp_repo.save(waiting)
            logger.info("Promoted RSVP %s from waitlist on meetup %s", waiting.id, meetup.id)
            await self._refresh_count(meetup)

    async def rsvp(self, profile: Profile, data: RsvpRequest) -> MeetupRsvp:
        """RSVP to a published meetup. Attending is refused once full; the waitlist opens only then."""
        meetup = await self.meetup_repo.get_by_id(data.meetup_id)
        if not meetup:
            raise NotFoundError("Meetup not found")
        if meetup.status != MeetupStatus.PUBLISHED.value:
            raise InvalidRequestError("Meetup is not available")

        status = data.status.value
        existing = await self.rsvp_repo.get_for_user(meetup.id, profile.id)
        was_attending = existing is not None and existing.status == RsvpStatus.ATTENDING.value

        if status == RsvpStatus.ATTENDING.value and meetup.is_full and not was_attending:
            raise InvalidRequestError("Meetup is full")
        if status == RsvpStatus.WAITLIST.value and (not meetup.is_full or was_attending):
            raise InvalidRequestError("The waitlist is only open while the meetup is full")

        if existing:
            existing.status = status
            existing.message = data.message
            rsvp = await self.rsvp_repo.save(existing)
        else:
            rsvp = await self.rsvp_repo.add(
                MeetupRsvp(meetup_id=meetup.id, user_id=profile.id, status=status, message=data.message)
            )

        if was_attending and status != RsvpStatus.ATTENDING.value:
            await self._promote_waitlist(meetup)
        else:
            await self._refresh_count(meetup)
        return rsvp

    async def cancel_rsvp(self, profile: Profile, meetup_id: int) -> None:
        """Withdraw an RSVP. A freed seat goes to the oldest waitlisted member."""
        rsvp = await self.rsvp_repo.get_for_user(meetup_id, profile.id)
        if not rsvp:
            raise NotFoundError("RSVP not found")
        was_attending = rsvp.status == RsvpStatus.ATTENDING.value
        await self.rsvp_repo.delete(rsvp)
        meetup = await self.meetup_repo.get_by_id(meetup_id)
        if meetup is None:
            return
        if was_attending:
            await self._promote_waitlist(meetup)
        else:
            await self._refresh_count(meetup)
