"""
Elasticsearch client - community full-text search.
One index per searchable kind (members, memorials, meetups, forum topics, resources).
Async helpers serve the API; sync helpers are used by Celery workers (no event loop after fork).
"""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import urlparse

from elasticsearch import AsyncElasticsearch, Elasticsearch

from solace.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass(frozen=True)
class SearchIndex:
    name: str
    fields: tuple[str, ...]
    properties: dict[str, dict]


SEARCH_INDICES: dict[str, SearchIndex] = {
    "users": SearchIndex(
        name="solace-users",
        fields=("display_name^2", "bio"),
        properties={
            "id": {"type": "integer"},
            "display_name": {"type": "text"},
            "bio": {"type": "text"},
            "profile_image_url": {"type": "keyword", "index": False},
            "verification_status": {"type": "keyword"},
        },
    ),
    "memorials": SearchIndex(
        name="solace-memorials",
        fields=("name^3", "obituary", "life_story"),
        properties={
            "id": {"type": "integer"},
            "slug": {"type": "keyword"},
            "name": {"type": "text"},
            "obituary": {"type": "text"},
            "life_story": {"type": "text"},
            "date_of_passing": {"type": "date"},
            "profile_photo_url": {"type": "keyword", "index": False},
        },
    ),
    "meetups": SearchIndex(
        name="solace-meetups",
        fields=("title^2", "description", "location_city"),
        properties={
            "id": {"type": "integer"},
            "title": {"type": "text"},
            "description": {"type": "text"},
            "format": {"type": "keyword"},
            "location_city": {"type": "text"},
            "start_time": {"type": "date"},
        },
    ),
    "forums": SearchIndex(
        name="solace-forum-topics",
        fields=("title^2",),
        properties={
            "id": {"type": "integer"},
            "title": {"type": "text"},
            "slug": {"type": "keyword"},
            "category_id": {"type": "integer"},
            "reply_count": {"type": "integer"},
            "created_at": {"type": "date"},
        },
    ),
    "resources": SearchIndex(
        name="solace-resources",
        fields=("title^2", "description"),
        properties={
            "id": {"type": "integer"},
            "title": {"type": "text"},
            "description": {"type": "text"},
            "resource_type": {"type": "keyword"},
            "categories": {"type": "keyword"},
        },
    ),
}

_es_client: AsyncElasticsearch | None = None


def _es_client_options() -> dict:
    """Client options from settings. Credentials embedded in the URL become basic_auth."""
    url = settings.elasticsearch_url
    basic_auth = None
    parsed = urlparse(url)
    if parsed.username and parsed.password:
        basic_auth = (parsed.username, parsed.password)
        netloc = parsed.hostname or ""
        if parsed.port:
            netloc += f":{parsed.port}"
        url = f"{parsed.scheme}://{netloc}"
    opts = {
        "hosts": [url],
        "verify_certs": settings.elasticsearch_verify_certs,
        "request_timeout": 30,
    }
    if basic_auth:
        opts["basic_auth"] = basic_auth
    return opts


async def get_elasticsearch() -> AsyncElasticsearch:
    global _es_client
    if _es_client is None:
        _es_client = AsyncElasticsearch(**_es_client_options())
    return _es_client


def _index_body(index: SearchIndex) -> dict:
    # Single-node deployments: no replicas, otherwise shards stay unassigned
    return {
        "settings": {"index": {"number_of_replicas": 0}},
        "mappings": {"properties": index.properties},
    }


def _clean(doc: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in doc.items() if v is not None}


async def ensure_indices() -> None:
    es = await get_elasticsearch()
    for index in SEARCH_INDICES.values():
        if not await es.indices.exists(index=index.name):
            body = _index_body(index)
            await es.indices.create(index=index.name, settings=body["settings"], mappings=body["mappings"])


async def search_documents(kind: str, query: str, limit: int = 10) -> list[dict[str, Any]] | None:
    """
    Full-text search over one kind. Returns the matching documents, or None when
    Elasticsearch cannot be reached so the caller can fall back to the database.
    """
    index = SEARCH_INDICES[kind]
    try:
        es = await get_elasticsearch()
        response = await es.search(
            index=index.name,
            query={
                "multi_match": {
                    "query": query,
                    "fields": list(index.fields),
                    "fuzziness": "AUTO",
                }
            },
            size=limit,
        )
    except Exception as e:
        logger.warning("search_documents unavailable: kind=%s query=%r error=%s", kind, query, e)
        return None
    body = getattr(response, "body", response)
    return [hit["_source"] for hit in body["hits"]["hits"]]


# --- Sync API for Celery workers ---

def _sync_es_client() -> Elasticsearch:
    """New sync client per call (safe in forked Celery worker)."""
    return Elasticsearch(**_es_client_options())


def ensure_index_sync(kind: str) -> None:
    index = SEARCH_INDICES[kind]
    es = _sync_es_client()
    if not es.indices.exists(index=index.name):
        body = _index_body(index)
        es.indices.create(index=index.name, settings=body["settings"], mappings=body["mappings"])


def index_document_sync(kind: str, doc: dict[str, Any]) -> None:
    """Index or replace one document. Raises so the Celery task can retry."""
    index = SEARCH_INDICES[kind]
    ensure_index_sync(kind)
    # ES 8 expects document ids as strings
    _sync_es_client().index(index=index.name, id=str(doc["id"]), document=_clean(doc))


def delete_document_sync(kind: str, doc_id: int) -> None:
    index = SEARCH_INDICES[kind]
    _sync_es_client().options(ignore_status=404).delete(index=index.name, id=str(doc_id))
