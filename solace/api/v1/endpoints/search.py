"""
Search endpoint - community-wide full-text search with a database fallback when ES is down.
"""

from fastapi import APIRouter, Query

from solace.db.repositories.forum_repository import ForumTopicRepository
from solace.db.repositories.meetup_repository import MeetupRepository
from solace.db.repositories.memorial_repository import MemorialRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.resource_repository import ResourceRepository
from solace.db.session import DbSession
from solace.services.search_service import SearchService

router = APIRouter()


def _get_search_service(session: DbSession) -> SearchService:
    return SearchService(
        ProfileRepository(session),
        MemorialRepository(session),
        MeetupRepository(session),
        ForumTopicRepository(session),
        ResourceRepository(session),
    )


@router.get("")
async def search(session: DbSession, q: str = Query(""), type: str = Query("all")):
    """Up to ten results per type: users, memorials, meetups, forums, resources."""
    return await _get_search_service(session).search(q, type)
