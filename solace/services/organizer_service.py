"""
Organizer application service.

Lifecycle: pending_payment -> payment_complete (webhook) -> [under_review] -> approved | rejected.
Approval promotes the applicant to meetup_organizer.
"""

import logging

from solace.config import get_settings
from solace.core.clock import utcnow
from solace.core.enums import OrganizerApplicationStatus, VerificationStatus
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError
from solace.db.models.profile import Profile
from solace.db.models.verification import OrganizerApplication
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.verification_repository import OrganizerApplicationRepository
from solace.payments import stripe_client
from solace.queue.publish import queue_email
from solace.schemas.verification import OrganizerApplicationCreate

logger = logging.getLogger(__name__)

OPEN_STATUSES = [
    OrganizerApplicationStatus.PENDING_PAYMENT.value,
    OrganizerApplicationStatus.PAYMENT_COMPLETE.value,
    OrganizerApplicationStatus.UNDER_REVIEW.value,
]
REVIEWABLE_STATUSES = [
    OrganizerApplicationStatus.PAYMENT_COMPLETE.value,
    OrganizerApplicationStatus.UNDER_REVIEW.value,
]
CHECKOUT_TYPE = "organizer_verification"


class OrganizerService:
    """Paid meetup organizer applications."""

    def __init__(self, application_repo: OrganizerApplicationRepository, profile_repo: ProfileRepository):
        self.application_repo = application_repo
        self.profile_repo = profile_repo

    async def apply(self, profile: Profile, data: OrganizerApplicationCreate) -> OrganizerApplication:
        """Submit an organizer application awaiting the verification fee."""
        if not data.background_check_consent:
            raise InvalidRequestError("Background check consent is required")
        if profile.verification_status == VerificationStatus.MEETUP_ORGANIZER.value:
            raise ConflictError("You are already a meetup organizer")
        if await self.application_repo.get_open_for_user(profile.id, OPEN_STATUSES):
            raise ConflictError("You already have an application in progress")
        application = await self.application_repo.add(
            OrganizerApplication(
                user_id=profile.id,
                experience=data.experience,
                motivation=data.motivation,
                planned_meetups=data.planned_meetups,
                certifications=data.certifications,
                background_check_consent=True,
                payment_amount_cents=get_settings().organizer_verification_fee_cents,
                status=OrganizerApplicationStatus.PENDING_PAYMENT.value,
            )
        )
        logger.info("Profile %s submitted organizer application %s", profile.id, application.id)
        return application

    async def list_mine(self, profile: Profile) -> list[OrganizerApplication]:
        """The caller's organizer applications."""
        return await self.application_repo.list_for_user(profile.id)

    async def create_checkout(self, profile: Profile, application_id: int) -> dict[str, str]:
        """Start the verification fee checkout for an unpaid application."""
        application = await self.application_repo.get_by_id(application_id)
        if not application or application.user_id != profile.id:
            raise NotFoundError("Application not found")
        if application.status != OrganizerApplicationStatus.PENDING_PAYMENT.value:
            raise InvalidRequestError("Application already paid")
        settings = get_settings()
        site_url = settings.site_url.rstrip("/")
        session = await stripe_client.create_checkout_session(
            mode="payment",
            customer_email=profile.email,
            line_items=[
                {
                    "price_data": {
                        "currency": settings.store_currency,
                        "product_data": {
                            "name": "Meetup Organizer Verification",
                            "description": "One-time verification fee to become a certified meetup organizer",
                        },
                        "unit_amount": application.payment_amount_cents,
                    },
                    "quantity": 1,
                }
            ],
            success_url=f"{site_url}/become-organizer/success?session_id={{CHECKOUT_SESSION_ID}}",
            cancel_url=f"{site_url}/become-organizer",
            metadata={
                "application_id": str(application.id),
                "user_id": str(profile.id),
                "type": CHECKOUT_TYPE,
            },
        )
        application.stripe_checkout_session_id = session["session_id"]
        await self.application_repo.save(application)
        return session

    async def mark_paid(self, application_id: int, payment_intent_id: str | None) -> OrganizerApplication:
        """Called from the payment webhook. Repeated deliveries leave a paid application untouched."""
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise NotFoundError("Application not found")
        if application.status == OrganizerApplicationStatus.PENDING_PAYMENT.value:
            application.status = OrganizerApplicationStatus.PAYMENT_COMPLETE.value
            application.paid_at = utcnow()
            application.stripe_payment_intent_id = payment_intent_id
            application = await self.application_repo.save(application)
            logger.info("Organizer application %s payment completed", application.id)
        return application

    async def list_for_review(self) -> list[OrganizerApplication]:
        """Paid applications awaiting review."""
        return await self.application_repo.list_by_statuses(REVIEWABLE_STATUSES)

    async def _get_reviewable(self, application_id: int) -> OrganizerApplication:
        application = await self.application_repo.get_by_id(application_id)
        if not application:
            raise NotFoundError("Application not found")
        if application.status not in REVIEWABLE_STATUSES:
            raise ConflictError(f"Application is already {application.status}")
        return application

    async def approve(self, application_id: int, admin: Profile) -> OrganizerApplication:
        """Approve an application and make the applicant a meetup organizer."""
        application = await self._get_reviewable(application_id)
        now = utcnow()
        application.status = OrganizerApplicationStatus.APPROVED.value
        application.reviewed_by = admin.id
        application.reviewed_at = now
        profile = await self.profile_repo.get_by_id(application.user_id)
        if profile:
            profile.verification_status = VerificationStatus.MEETUP_ORGANIZER.value
            profile.meetup_organizer_verified_at = now
            await self.profile_repo.save(profile)
            queue_email(profile.email, "organizer_approved", {"displayName": profile.public_name})
        application = await self.application_repo.save(application)
        logger.info("Admin %s approved organizer application %s", admin.id, application.id)
        return application

    async def reject(self, application_id: int, admin: Profile, reason: str) -> OrganizerApplication:
        """Reject an application and e-mail the applicant the reason."""
        application = await self._get_reviewable(application_id)
        application.status = OrganizerApplicationStatus.REJECTED.value
        application.rejection_reason = reason
        application.reviewed_by = admin.id
        application.reviewed_at = utcnow()
        application = await self.application_repo.save(application)
        profile = await self.profile_repo.get_by_id(application.user_id)
        if profile:
            queue_email(profile.email, "organizer_rejected", {"displayName": profile.public_name, "reason": reason})
        logger.info("Admin %s rejected organizer application %s", admin.id, application.id)
        return application
