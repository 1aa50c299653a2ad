"""
Search service - community-wide search across members, memorials, meetups, forum topics
and resources. Elasticsearch first; the database answers when the cluster is unreachable.
"""

import logging

from solace.core.errors import InvalidRequestError
from solace.db.repositories.forum_repository import ForumTopicRepository
from solace.db.repositories.meetup_repository import MeetupRepository
from solace.db.repositories.memorial_repository import MemorialRepository
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.resource_repository import ResourceRepository
from solace.search.documents import meetup_doc, memorial_doc, profile_doc, resource_doc, topic_doc
from solace.search.elasticsearch_client import SEARCH_INDICES, search_documents

logger = logging.getLogger(__name__)

MIN_QUERY_LENGTH = 2
RESULTS_PER_TYPE = 10
SEARCH_TYPES = ("all", *SEARCH_INDICES)


class SearchService:
    """Site search across members, memorials, meetups, topics and resources."""

    def __init__(
        self,
        profile_repo: ProfileRepository,
        memorial_repo: MemorialRepository,
        meetup_repo: MeetupRepository,
        topic_repo: ForumTopicRepository,
        resource_repo: ResourceRepository,
    ):
        self._fallbacks = {
            "users": (profile_repo.search_directory, profile_doc),
            "memorials": (memorial_repo.search_public, memorial_doc),
            "meetups": (meetup_repo.search_published, meetup_doc),
            "forums": (topic_repo.search, topic_doc),
            "resources": (resource_repo.search_published, resource_doc),
        }

    async def search(self, query: str, search_type: str = "all") -> dict:
        """Search each requested kind, falling back to the database when the index is down."""
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            raise InvalidRequestError("Query too short")
        if search_type not in SEARCH_TYPES:
            raise InvalidRequestError(f"Unknown search type: {search_type}")

        kinds = list(SEARCH_INDICES) if search_type == "all" else [search_type]
        results = {}
        for kind in kinds:
            hits = await search_documents(kind, query, limit=RESULTS_PER_TYPE)
            if hits is None:
                hits = await self._search_database(kind, query)
            results[kind] = hits
        return {
            "query": query,
            "type": search_type,
            "results": results,
            "total": sum(len(v) for v in results.values()),
        }

    async def _search_database(self, kind: str, query: str) -> list[dict]:
        finder, to_doc = self._fallbacks[kind]
        rows = await finder(query, limit=RESULTS_PER_TYPE)
        logger.debug("Database fallback for %s returned %s rows", kind, len(rows))
        return [to_doc(row) for row in rows]
