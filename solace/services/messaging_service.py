"""
Messaging service - one private conversation per pair of members.
"""

import logging

from solace.core.clock import utcnow
from solace.core.errors import InvalidRequestError, NotFoundError, PermissionDeniedError
from solace.db.models.messaging import Conversation, ConversationParticipant, Message
from solace.db.models.profile import Profile
from solace.db.repositories.messaging_repository import (
    ConversationParticipantRepository,
    ConversationRepository,
    MessageRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_email
from solace.schemas.messaging import ConversationSettingsUpdate

logger = logging.getLogger(__name__)

PREVIEW_LENGTH = 100


def partner_view(profile: Profile) -> dict:
    return {
        "id": profile.id,
        "display_name": profile.public_name,
        "profile_image_url": profile.profile_image_url,
        "verification_status": profile.verification_status,
    }


class MessagingService:
    """Direct messages between members."""

    def __init__(
        self,
        conversation_repo: ConversationRepository,
        participant_repo: ConversationParticipantRepository,
        message_repo: MessageRepository,
        profile_repo: ProfileRepository,
    ):
        self.conversation_repo = conversation_repo
        self.participant_repo = participant_repo
        self.message_repo = message_repo
        self.profile_repo = profile_repo

    async def _other_user(self, profile: Profile, user_id: int) -> Profile:
        if user_id == profile.id:
            raise InvalidRequestError("You cannot message yourself")
        other = await self.profile_repo.get_by_id(user_id)
        if not other:
            raise NotFoundError("User not found")
        return other

    async def get_or_create(self, first: int, second: int) -> Conversation:
        """The conversation between two members, created on first use."""
        conversation = await self.conversation_repo.get_for_pair(first, second)
        if conversation:
            return conversation
        conversation = await self.conversation_repo.add(
            Conversation(participant_one=min(first, second), participant_two=max(first, second))
        )
        for user_id in (first, second):
            await self.participant_repo.add(ConversationParticipant(conversation_id=conversation.id, user_id=user_id))
        logger.info("Opened conversation %s between %s and %s", conversation.id, first, second)
        return conversation

    async def list_conversations(self, profile: Profile) -> list[dict]:
        """The caller's unarchived conversations, most recent first."""
        conversations = await self.conversation_repo.list_for_user(profile.id)
        states = await self.participant_repo.for_user(profile.id, [c.id for c in conversations])
        others = await self.profile_repo.get_by_ids([c.other_participant(profile.id) for c in conversations])
        summaries = []
        for conversation in conversations:
            state = states.get(conversation.id)
            if state is not None and state.is_archived:
                continue
            other = others.get(conversation.other_participant(profile.id))
            summaries.append(
                {
                    "id": conversation.id,
                    "other_user": partner_view(other) if other else None,
                    "last_message_at": conversation.last_message_at,
                    "last_message_preview": conversation.last_message_preview,
                    "unread_count": state.unread_count if state else 0,
                    "is_muted": state.is_muted if state else False,
                }
            )
        return summaries

    async def thread_with(self, profile: Profile, user_id: int) -> dict:
        """Messages with another member. Marks the thread read."""
        other = await self._other_user(profile, user_id)
        conversation = await self.get_or_create(profile.id, other.id)
        messages = await self.message_repo.list_for_conversation(conversation.id)

        now = utcnow()
        state = await self.participant_repo.get(conversation.id, profile.id)
        if state is not None:
            state.unread_count = 0
            state.last_read_at = now
            await self.participant_repo.save(state)
        await self.message_repo.mark_read(conversation.id, profile.id, now)

        visible = [
            m
            for m in messages
            if not (m.sender_id == profile.id and m.deleted_by_sender)
            and not (m.sender_id != profile.id and m.deleted_by_recipient)
        ]
        return {"conversation_id": conversation.id, "other_user": partner_view(other), "messages": visible}

    async def send(self, profile: Profile, user_id: int, content: str) -> Message:
        """Send a message, un-archive the thread for the recipient and e-mail them unless muted."""
        recipient = await self._other_user(profile, user_id)
        if recipient.is_banned:
            raise PermissionDeniedError("This member cannot receive messages")
        if not recipient.allow_messages:
            raise PermissionDeniedError("This member is not accepting messages")
        content = content.strip()
        if not content:
            raise InvalidRequestError("Message cannot be empty")

        conversation = await self.get_or_create(profile.id, recipient.id)
        message = await self.message_repo.add(
            Message(conversation_id=conversation.id, sender_id=profile.id, content=content)
        )
        conversation.last_message_at = utcnow()
        conversation.last_message_preview = content[:PREVIEW_LENGTH]
        await self.conversation_repo.save(conversation)

        state = await self.participant_repo.get(conversation.id, recipient.id)
        if state is None:
            state = await self.participant_repo.add(
                ConversationParticipant(conversation_id=conversation.id, user_id=recipient.id)
            )
        state.unread_count += 1
        state.is_archived = False
        await self.participant_repo.save(state)

        if not state.is_muted:
            queue_email(
                recipient.email,
                "new_message",
                {"senderName": profile.public_name, "senderId": profile.id},
            )
        return message

    async def update_settings(self, profile: Profile, user_id: int, data: ConversationSettingsUpdate) -> dict:
        """Mute or archive the conversation with a member, for the caller only."""
        other = await self._other_user(profile, user_id)
        conversation = await self.conversation_repo.get_for_pair(profile.id, other.id)
        if conversation is None:
            raise NotFoundError("Conversation not found")
        state = await self.participant_repo.get(conversation.id, profile.id)
        if state is None:
            state = await self.participant_repo.add(
                ConversationParticipant(conversation_id=conversation.id, user_id=profile.id)
            )
        if data.is_muted is not None:
            state.is_muted = data.is_muted
        if data.is_archived is not None:
            state.is_archived = data.is_archived
        state = await self.participant_repo.save(state)
        return {"conversation_id": conversation.id, "is_muted": state.is_muted, "is_archived": state.is_archived}

    async def delete_message(self, profile: Profile, message_id: int) -> None:
        """Hide a message from the caller's side of the thread. The other member still sees it."""
        message = await self.message_repo.get_by_id(message_id)
        conversation = await self.conversation_repo.get_by_id(message.conversation_id) if message else None
        if conversation is None or profile.id not in (conversation.participant_one, conversation.participant_two):
            raise NotFoundError("Message not found")
        if message.sender_id == profile.id:
            message.deleted_by_sender = True
        else:
            message.deleted_by_recipient = True
        await self.message_repo.save(message)
