"""
Verification tiers and what each one unlocks.

Members climb unverified -> email_verified -> id_verified -> meetup_organizer.
Each step is a strict superset of the previous one.
"""

from dataclasses import dataclass

from solace.core.enums import VerificationStatus


@dataclass(frozen=True)
class VerificationLevel:
    status: VerificationStatus
    rank: int
    label: str
    description: str
    badge: str
    can_browse: bool
    can_post: bool
    can_message: bool
    can_join_meetups: bool
    can_create_meetups: bool
    next_step: str | None


VERIFICATION_LEVELS: dict[VerificationStatus, VerificationLevel] = {
    VerificationStatus.UNVERIFIED: VerificationLevel(
        status=VerificationStatus.UNVERIFIED,
        rank=0,
        label="Unverified",
        description="Browse memorials, forums and resources.",
        badge="",
        can_browse=True,
        can_post=False,
        can_message=False,
        can_join_meetups=False,
        can_create_meetups=False,
        next_step="Verify your email address to start posting in the forums.",
    ),
    VerificationStatus.EMAIL_VERIFIED: VerificationLevel(
        status=VerificationStatus.EMAIL_VERIFIED,
        rank=1,
        label="Email Verified",
        description="Post in the forums, create memorials and leave tributes.",
        badge="✉️",
        can_browse=True,
        can_post=True,
        can_message=False,
        can_join_meetups=False,
        can_create_meetups=False,
        next_step="Request ID verification to message members and join meetups.",
    ),
    VerificationStatus.ID_VERIFIED: VerificationLevel(
        status=VerificationStatus.ID_VERIFIED,
        rank=2,
        label="ID Verified",
        description="Message other members and RSVP to meetups.",
        badge="✓",
        can_browse=True,
        can_post=True,
        can_message=True,
        can_join_meetups=True,
        can_create_meetups=False,
        next_step="Apply to become a meetup organizer to host gatherings.",
    ),
    VerificationStatus.MEETUP_ORGANIZER: VerificationLevel(
        status=VerificationStatus.MEETUP_ORGANIZER,
        rank=3,
        label="Meetup Organizer",
        description="Host in-person and virtual support meetups.",
        badge="⭐",
        can_browse=True,
        can_post=True,
        can_message=True,
        can_join_meetups=True,
        can_create_meetups=True,
        next_step=None,
    ),
}


def level_for(status: str) -> VerificationLevel:
    """Unknown values are treated as unverified."""
    try:
        return VERIFICATION_LEVELS[VerificationStatus(status)]
    except ValueError:
        return VERIFICATION_LEVELS[VerificationStatus.UNVERIFIED]


def has_level(status: str, required: VerificationStatus) -> bool:
    return level_for(status).rank >= VERIFICATION_LEVELS[required].rank


def can_post(status: str) -> bool:
    return level_for(status).can_post


def can_message(status: str) -> bool:
    return level_for(status).can_message


def can_join_meetups(status: str) -> bool:
    return level_for(status).can_join_meetups


def can_create_meetups(status: str) -> bool:
    return level_for(status).can_create_meetups
