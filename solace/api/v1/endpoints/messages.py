"""
Direct message endpoints - conversation list and one-to-one threads.
"""

from fastapi import APIRouter, status

from solace.core.dependencies import CurrentProfile, IdVerifiedProfile
from solace.db.repositories.messaging_repository import (
    ConversationParticipantRepository,
    ConversationRepository,
    MessageRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.messaging import (
    ConversationSettings,
    ConversationSettingsUpdate,
    ConversationSummary,
    ConversationThread,
    MessageCreate,
    MessageResponse,
)
from solace.services.messaging_service import MessagingService

router = APIRouter()


def _get_messaging_service(session: DbSession) -> MessagingService:
    return MessagingService(
        ConversationRepository(session),
        ConversationParticipantRepository(session),
        MessageRepository(session),
        ProfileRepository(session),
    )


@router.get("/conversations", response_model=list[ConversationSummary])
async def list_conversations(session: DbSession, profile: CurrentProfile):
    return await _get_messaging_service(session).list_conversations(profile)


@router.get("/with/{user_id}", response_model=ConversationThread)
async def thread(session: DbSession, user_id: int, profile: CurrentProfile):
    """Open (or start) the conversation with a member and mark it read."""
    return await _get_messaging_service(session).thread_with(profile, user_id)


@router.post("/with/{user_id}", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def send_message(session: DbSession, user_id: int, profile: IdVerifiedProfile, data: MessageCreate):
    return await _get_messaging_service(session).send(profile, user_id, data.content)


@router.patch("/with/{user_id}/settings", response_model=ConversationSettings)
async def update_settings(session: DbSession, user_id: int, profile: CurrentProfile, data: ConversationSettingsUpdate):
    """Mute (no e-mail on new messages) or archive (hidden from the list until the next message)."""
    return await _get_messaging_service(session).update_settings(profile, user_id, data)


@router.delete("/{message_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_message(session: DbSession, message_id: int, profile: CurrentProfile):
    await _get_messaging_service(session).delete_message(profile, message_id)
