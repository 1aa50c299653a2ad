"""
Moderation service - member reports and the feature suggestion board.
"""

import logging

from solace.core.clock import utcnow
from solace.core.errors import NotFoundError
from solace.db.models.moderation import FeatureSuggestion, Report, SuggestionUpvote
from solace.db.models.profile import Profile
from solace.db.repositories.moderation_repository import (
    ReportRepository,
    SuggestionRepository,
    SuggestionUpvoteRepository,
)
from solace.schemas.moderation import ReportCreate, ReportReview, SuggestionCreate, SuggestionUpdate

logger = logging.getLogger(__name__)


class ModerationService:
    """Content reports and feature suggestions."""

    def __init__(
        self,
        report_repo: ReportRepository,
        suggestion_repo: SuggestionRepository,
        upvote_repo: SuggestionUpvoteRepository,
    ):
        self.report_repo = report_repo
        self.suggestion_repo = suggestion_repo
        self.upvote_repo = upvote_repo

    async def file_report(self, profile: Profile, data: ReportCreate) -> Report:
        """Report content or a member for review."""
        report = await self.report_repo.add(
            Report(
                reporter_id=profile.id,
                reportable_type=data.reportable_type.value,
                reportable_id=data.reportable_id,
                report_type=data.report_type.value,
                description=data.description.strip(),
                evidence_urls=data.evidence_urls or None,
            )
        )
        logger.info(
            "Report %s filed by %s against %s %s", report.id, profile.id, report.reportable_type, report.reportable_id
        )
        return report

    async def list_reports(self, status: str | None = None, skip: int = 0, limit: int = 50) -> list[Report]:
        """Reports for the admin queue."""
        return await self.report_repo.list_by_status(status, skip=skip, limit=limit)

    async def review_report(self, report_id: int, admin: Profile, data: ReportReview) -> Report:
        """Record the review outcome on a report."""
        report = await self.report_repo.get_by_id(report_id)
        if not report:
            raise NotFoundError("Report not found")
        report.status = data.status.value
        if data.action_taken is not None:
            report.action_taken = data.action_taken
        if data.admin_notes is not None:
            report.admin_notes = data.admin_notes
        report.reviewed_by = admin.id
        report.reviewed_at = utcnow()
        return await self.report_repo.save(report)

    async def list_suggestions(
        self, viewer: Profile | None, status: str | None = None, sort: str = "upvotes"
    ) -> list[dict]:
        """Feature suggestions with the viewer's upvotes."""
        suggestions = await self.suggestion_repo.list_sorted(status=status, sort=sort)
        voted = set()
        if viewer is not None:
            voted = await self.upvote_repo.voted_ids(viewer.id, [s.id for s in suggestions])
        return [self._view(s, s.id in voted, viewer) for s in suggestions]

    @staticmethod
    def _view(suggestion: FeatureSuggestion, has_upvoted: bool, viewer: Profile | None) -> dict:
        return {
            "id": suggestion.id,
            "submitted_by": suggestion.submitted_by,
            "title": suggestion.title,
            "description": suggestion.description,
            "category": suggestion.category,
            "status": suggestion.status,
            "priority": suggestion.priority,
            "admin_notes": suggestion.admin_notes if viewer is not None and viewer.is_admin else None,
            "upvote_count": suggestion.upvote_count,
            "created_at": suggestion.created_at,
            "has_upvoted": has_upvoted,
        }

    async def create_suggestion(self, profile: Profile, data: SuggestionCreate) -> dict:
        """Submit a feature suggestion."""
        suggestion = await self.suggestion_repo.add(
            FeatureSuggestion(
                submitted_by=profile.id,
                title=data.title,
                description=data.description,
                category=data.category.value if data.category else None,
            )
        )
        return self._view(suggestion, False, profile)

    async def toggle_upvote(self, profile: Profile, suggestion_id: int) -> dict:
        """Upvote a suggestion, or take the upvote back."""
        suggestion = await self.suggestion_repo.get_by_id(suggestion_id)
        if not suggestion:
            raise NotFoundError("Suggestion not found")
        existing = await self.upvote_repo.get_for_user(suggestion.id, profile.id)
        if existing:
            await self.upvote_repo.delete(existing)
            suggestion.upvote_count = max(0, suggestion.upvote_count - 1)
        else:
            await self.upvote_repo.add(SuggestionUpvote(suggestion_id=suggestion.id, user_id=profile.id))
            suggestion.upvote_count += 1
        suggestion = await self.suggestion_repo.save(suggestion)
        return {"upvoted": existing is None, "upvote_count": suggestion.upvote_count}

    async def update_suggestion(self, suggestion_id: int, admin: Profile, data: SuggestionUpdate) -> dict:
        """Set a suggestion's status, priority or notes."""
        suggestion = await self.suggestion_repo.get_by_id(suggestion_id)
        if not suggestion:
            raise NotFoundError("Suggestion not found")
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(suggestion, field, value.value if hasattr(value, "value") else value)
        suggestion.reviewed_by = admin.id
        suggestion.reviewed_at = utcnow()
        suggestion = await self.suggestion_repo.save(suggestion)
        return self._view(suggestion, False, admin)
