"""
Fire-and-forget publishing of background work from request handlers.
A broker outage is logged and does not fail the request that triggered it.
"""

import logging

from solace.queue.tasks import index_document_task, remove_document_task, send_email_task

logger = logging.getLogger(__name__)


def queue_email(to: str | None, template_id: str, data: dict | None = None) -> bool:
    if not to:
        return False
    try:
        send_email_task.delay(to, template_id, data or {})
        return True
    except Exception as e:
        logger.warning("Could not queue %s e-mail for %s: %s", template_id, to, e)
        return False


def queue_index(kind: str, doc: dict) -> None:
    try:
        index_document_task.delay(kind, doc)
    except Exception as e:
        logger.warning("Could not queue indexing of %s/%s: %s", kind, doc.get("id"), e)


def queue_removal(kind: str, doc_id: int) -> None:
    try:
        remove_document_task.delay(kind, doc_id)
    except Exception as e:
        logger.warning("Could not queue removal of %s/%s: %s", kind, doc_id, e)
