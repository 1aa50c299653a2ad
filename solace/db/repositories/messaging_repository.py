"""
Messaging repository - conversations, participant state and messages.
"""

from sqlalchemy import select

from solace.db.models.messaging import Conversation, ConversationParticipant, Message
from solace.db.repositories.base_repository import BaseRepository


class ConversationRepository(BaseRepository[Conversation]):
    def __init__(self, session):
        super().__init__(session, Conversation)

    async def get_for_pair(self, first: int, second: int) -> Conversation | None:
        one, two = min(first, second), max(first, second)
        result = await self.session.execute(
            select(Conversation).where(Conversation.participant_one == one, Conversation.participant_two == two)
        )
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: int) -> list[Conversation]:
        result = await self.session.execute(
            select(Conversation)
            .where((Conversation.participant_one == user_id) | (Conversation.participant_two == user_id))
            .order_by(Conversation.last_message_at.desc(), Conversation.id.desc())
        )
        return list(result.scalars().all())


class ConversationParticipantRepository(BaseRepository[ConversationParticipant]):
    def __init__(self, session):
        super().__init__(session, ConversationParticipant)

    async def get(self, conversation_id: int, user_id: int) -> ConversationParticipant | None:
        result = await self.session.execute(
            select(ConversationParticipant).where(
                ConversationParticipant.conversation_id == conversation_id,
                ConversationParticipant.user_id == user_id,
            )
        )
        return result.scalar_one_or_none()

    async def for_user(self, user_id: int, conversation_ids: list[int]) -> dict[int, ConversationParticipant]:
        if not conversation_ids:
            return {}
        result = await self.session.execute(
            select(ConversationParticipant).where(
                ConversationParticipant.user_id == user_id,
                ConversationParticipant.conversation_id.in_(conversation_ids),
            )
        )
        return {p.conversation_id: p for p in result.scalars().all()}


class MessageRepository(BaseRepository[Message]):
    def __init__(self, session):
        super().__init__(session, Message)

    async def list_for_conversation(self, conversation_id: int, limit: int = 200) -> list[Message]:
        result = await self.session.execute(
            select(Message)
            .where(Message.conversation_id == conversation_id)
            .order_by(Message.created_at, Message.id)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def mark_read(self, conversation_id: int, reader_id: int, when) -> None:
        result = await self.session.execute(
            select(Message).where(
                Message.conversation_id == conversation_id,
                Message.sender_id != reader_id,
                Message.read_at.is_(None),
            )
        )
        for message in result.scalars().all():
            message.read_at = when
        await self.session.flush()
