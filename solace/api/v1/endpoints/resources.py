"""
Resource library endpoints - browse, submit, and admin review of submissions.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import AdminProfile
from solace.core.enums import ResourceCategory, ResourceType
from solace.db.repositories.resource_repository import ResourceRepository, ResourceSubmissionRepository
from solace.db.session import DbSession
from solace.schemas.resource import ResourceResponse, ResourceSubmit, SubmissionResponse
from solace.services.resource_service import ResourceService

router = APIRouter()
admin_router = APIRouter()


def _get_resource_service(session: DbSession) -> ResourceService:
    return ResourceService(ResourceRepository(session), ResourceSubmissionRepository(session))


@router.get("", response_model=list[ResourceResponse])
async def list_resources(
    session: DbSession, category: ResourceCategory | None = None, type: ResourceType | None = None
):
    """Published resources, featured first."""
    return await _get_resource_service(session).list_published(
        category.value if category else None, type.value if type else None
    )


@router.post("/submit", status_code=status.HTTP_201_CREATED)
async def submit_resource(session: DbSession, data: ResourceSubmit):
    submission = await _get_resource_service(session).submit(data)
    return {"success": True, "id": submission.id}


# --- Admin ---


@admin_router.get("", response_model=list[SubmissionResponse])
async def list_submissions(session: DbSession, admin: AdminProfile):
    return await _get_resource_service(session).list_submissions()


@admin_router.post("/{submission_id}/approve", response_model=ResourceResponse)
async def approve_submission(session: DbSession, submission_id: int, admin: AdminProfile):
    return await _get_resource_service(session).approve_submission(submission_id)


@admin_router.delete("/{submission_id}", status_code=status.HTTP_204_NO_CONTENT)
async def reject_submission(session: DbSession, submission_id: int, admin: AdminProfile):
    await _get_resource_service(session).reject_submission(submission_id)
