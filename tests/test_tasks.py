"""
Celery task bodies, run in-process without a broker.
"""

import smtplib

import pytest

from solace.queue import tasks


class Retry(Exception):
    pass


@pytest.fixture
def no_retry(monkeypatch):
    def _retry(task):
        def retry(exc=None, countdown=None):
            return Retry(str(exc))

        monkeypatch.setattr(task, "retry", retry)

    return _retry


def test_send_email_renders_and_delivers(monkeypatch):
    delivered = []
    monkeypatch.setattr(tasks, "_deliver", lambda to, subject, body: delivered.append((to, subject, body)))

    result = tasks.send_email_task.run("grace@example.com", "organizer_rejected", {"reason": "Incomplete"})

    assert result == {"template_id": "organizer_rejected", "to": "grace@example.com"}
    to, subject, body = delivered[0]
    assert to == "grace@example.com"
    assert subject == "Update on your organizer application"
    assert "Reason: Incomplete" in body


def test_send_email_retries_on_smtp_failure(monkeypatch, no_retry):
    def _down(to, subject, body):
        raise smtplib.SMTPServerDisconnected("relay went away")

    monkeypatch.setattr(tasks, "_deliver", _down)
    no_retry(tasks.send_email_task)
    with pytest.raises(Retry):
        tasks.send_email_task.run("grace@example.com", "welcome", {})


def test_index_task_writes_document(monkeypatch):
    indexed = []
    monkeypatch.setattr(tasks, "index_document_sync", lambda kind, doc: indexed.append((kind, doc)))
    tasks.index_document_task.run("memorials", {"id": 3, "name": "Rose Alvarez"})
    assert indexed == [("memorials", {"id": 3, "name": "Rose Alvarez"})]


def test_index_task_retries_when_cluster_down(monkeypatch, no_retry):
    def _down(kind, doc):
        raise ConnectionError("no cluster")

    monkeypatch.setattr(tasks, "index_document_sync", _down)
    no_retry(tasks.index_document_task)
    with pytest.raises(Retry):
        tasks.index_document_task.run("memorials", {"id": 3})


def test_remove_task(monkeypatch):
    removed = []
    monkeypatch.setattr(tasks, "delete_document_sync", lambda kind, doc_id: removed.append((kind, doc_id)))
    tasks.remove_document_task.run("meetups", 9)
    assert removed == [("meetups", 9)]
