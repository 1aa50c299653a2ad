"""
Resource service - the grief resource library and community submissions.
"""

import logging

from solace.core.errors import NotFoundError
from solace.db.models.resource import Resource, ResourceSubmission
from solace.db.repositories.resource_repository import ResourceRepository, ResourceSubmissionRepository
from solace.queue.publish import queue_index
from solace.schemas.resource import ResourceSubmit
from solace.search.documents import resource_doc

logger = logging.getLogger(__name__)


class ResourceService:
    """Resource library and public submissions."""

    def __init__(self, resource_repo: ResourceRepository, submission_repo: ResourceSubmissionRepository):
        self.resource_repo = resource_repo
        self.submission_repo = submission_repo

    async def list_published(self, category: str | None = None, resource_type: str | None = None) -> list[Resource]:
        """Published resources, optionally filtered by category and type."""
        resources = await self.resource_repo.list_published(resource_type)
        if category:
            # categories is a JSON array; filtered here so SQLite and PostgreSQL behave alike
            resources = [r for r in resources if category in (r.categories or [])]
        return resources

    async def submit(self, data: ResourceSubmit) -> ResourceSubmission:
        """Accept a public resource submission for review."""
        submission = await self.submission_repo.add(
            ResourceSubmission(
                title=data.title.strip(),
                description=data.description.strip(),
                resource_type=data.resource_type.value,
                categories=[c.value for c in data.categories],
                external_url=data.external_url or None,
                phone_number=data.phone_number or None,
                author=data.author,
                source=data.source,
                submitter_name=data.submitter_name.strip(),
                submitter_email=str(data.submitter_email).lower(),
                submitter_notes=data.submitter_notes,
            )
        )
        logger.info("Resource submission %s received (%s)", submission.id, submission.resource_type)
        return submission

    async def list_submissions(self) -> list[ResourceSubmission]:
        """Submissions awaiting review."""
        return await self.submission_repo.list_pending()

    async def _get_submission(self, submission_id: int) -> ResourceSubmission:
        submission = await self.submission_repo.get_by_id(submission_id)
        if not submission:
            raise NotFoundError("Submission not found")
        return submission

    async def approve_submission(self, submission_id: int) -> Resource:
        """Publish the submission as a resource and drop it from the queue."""
        submission = await self._get_submission(submission_id)
        resource = await self.resource_repo.add(
            Resource(
                title=submission.title,
                description=submission.description,
                resource_type=submission.resource_type,
                categories=list(submission.categories or []),
                external_url=submission.external_url,
                phone_number=submission.phone_number,
                author=submission.author,
                source=submission.source,
                is_published=True,
            )
        )
        await self.submission_repo.delete(submission)
        logger.info("Submission %s published as resource %s", submission_id, resource.id)
        queue_index("resources", resource_doc(resource))
        return resource

    async def reject_submission(self, submission_id: int) -> None:
        """Drop a submission from the queue."""
        submission = await self._get_submission(submission_id)
        await self.submission_repo.delete(submission)
        logger.info("Submission %s rejected", submission_id)
