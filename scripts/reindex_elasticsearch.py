#!/usr/bin/env python3
"""
Reindex everything searchable from PostgreSQL into Elasticsearch via Celery.
Use this after fixing the worker or when an index was lost; no data is created.
Requires: database reachable (DATABASE_URL). Celery worker must be running to process the queue.

If you get 503 / no_shard_available from Elasticsearch, delete the broken indices and reindex:
  python scripts/reindex_elasticsearch.py --reset-index

  python scripts/reindex_elasticsearch.py
  python scripts/reindex_elasticsearch.py --kind memorials --kind forums
"""

import argparse
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from sqlalchemy import select

from solace.core.enums import MeetupStatus
from solace.db.models import ForumTopic, Meetup, Memorial, Profile, Resource
from solace.db.session import async_session_maker, engine
from solace.queue.tasks import index_document_task
from solace.search import documents
from solace.search.elasticsearch_client import SEARCH_INDICES, _sync_es_client

BATCH_SIZE = 500

# Same visibility rules as the live indexing in the services
SOURCES = {
    "users": (Profile, (Profile.show_in_directory.is_(True), Profile.is_banned.is_(False)), documents.profile_doc),
    "memorials": (Memorial, (Memorial.is_public.is_(True),), documents.memorial_doc),
    "meetups": (Meetup, (Meetup.status == MeetupStatus.PUBLISHED.value,), documents.meetup_doc),
    "forums": (ForumTopic, (), documents.topic_doc),
    "resources": (Resource, (Resource.is_published.is_(True),), documents.resource_doc),
}


def delete_indices(kinds: list[str]):
    """Delete indices so Celery recreates them with number_of_replicas=0 (single-node safe)."""
    es = _sync_es_client()
    for kind in kinds:
        name = SEARCH_INDICES[kind].name
        if es.indices.exists(index=name):
            es.indices.delete(index=name)
            print(f"Deleted index '{name}'.")
        else:
            print(f"Index '{name}' does not exist (already deleted or never created).")


async def enqueue(kinds: list[str]) -> dict[str, int]:
    counts = {}
    async with async_session_maker() as session:
        for kind in kinds:
            model, criteria, to_doc = SOURCES[kind]
            counts[kind] = 0
            result = await session.stream_scalars(select(model).where(*criteria).order_by(model.id))
            async for partition in result.partitions(BATCH_SIZE):
                for row in partition:
                    index_document_task.delay(kind, to_doc(row))
                counts[kind] += len(partition)
    await engine.dispose()
    return counts


def main():
    ap = argparse.ArgumentParser(description="Enqueue searchable rows for Elasticsearch reindex")
    ap.add_argument("--kind", action="append", choices=list(SOURCES), help="Only these kinds (repeatable)")
    ap.add_argument(
        "--reset-index",
        action="store_true",
        help="Delete the indices first (fixes 503 / no_shard_available), then enqueue",
    )
    args = ap.parse_args()
    kinds = args.kind or list(SOURCES)

    if args.reset_index:
        delete_indices(kinds)
        print()

    counts = asyncio.run(enqueue(kinds))
    for kind, count in counts.items():
        print(f"Enqueued {count} {kind} documents.")
    if not any(counts.values()):
        print("Nothing to index. Run seed_data.py first or create content via the API.")
        return
    print("Ensure the Celery worker is running, then: curl -s 'http://localhost:9200/solace-*/_count?pretty'")


if __name__ == "__main__":
    main()
