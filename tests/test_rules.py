"""
Pure rules: slugs, verification tiers, sponsor maths, e-mail templates.
"""

import pytest

from solace.core import permissions, slugs
from solace.core.enums import VerificationStatus
from solace.notifications.templates import TEMPLATES, is_known_template, render_email
from solace.services.sponsor_service import click_through_rate, hash_client_address


@pytest.mark.parametrize(
    "slug, valid",
    [
        ("rose-alvarez", True),
        ("r", True),
        ("a" * 100, True),
        ("a" * 101, False),
        ("", False),
        ("-rose", False),
        ("rose-", False),
        ("Rose", False),
        ("rose_alvarez", False),
        ("admin", False),
        ("host-gatherings", False),
    ],
)
def test_memorial_slug_rules(slug, valid):
    assert slugs.is_valid_memorial_slug(slug) is valid


def test_slug_from_text():
    assert slugs.slug_from_text("Mary-Anne  O'Brien") == "mary-anne-obrien"
    assert slugs.slug_from_text("  José  ") == "jos"


def test_topic_slug_is_capped():
    assert slugs.topic_slug("Their first birthday without Mom!") == "their-first-birthday-without-mom"
    assert len(slugs.topic_slug("word " * 40)) <= 50


def test_topic_slug_never_ends_with_hyphen():
    assert slugs.topic_slug("a" * 49 + " bcd") == "a" * 49


def test_verification_ladder():
    assert permissions.can_post(VerificationStatus.EMAIL_VERIFIED.value)
    assert not permissions.can_message(VerificationStatus.EMAIL_VERIFIED.value)
    assert permissions.can_join_meetups(VerificationStatus.ID_VERIFIED.value)
    assert not permissions.can_create_meetups(VerificationStatus.ID_VERIFIED.value)
    assert permissions.can_create_meetups(VerificationStatus.MEETUP_ORGANIZER.value)
    assert permissions.has_level("meetup_organizer", VerificationStatus.EMAIL_VERIFIED)
    assert not permissions.has_level("unverified", VerificationStatus.EMAIL_VERIFIED)


def test_unknown_status_counts_as_unverified():
    assert permissions.level_for("something-else").status == VerificationStatus.UNVERIFIED
    assert permissions.level_for("meetup_organizer").next_step is None


def test_click_through_rate():
    assert click_through_rate(0, 5) == 0.0
    assert click_through_rate(3, 1) == 33.33


def test_client_address_is_hashed():
    digest = hash_client_address("203.0.113.7")
    assert digest != "203.0.113.7"
    assert len(digest) == 64
    assert hash_client_address(None) is None


def test_every_template_renders_with_sparse_data():
    for template_id in TEMPLATES:
        subject, body = render_email(template_id, {}, "https://solace.example/")
        assert subject
        assert "{" not in body


def test_render_fills_placeholders():
    subject, body = render_email(
        "new_message", {"senderName": "Sam", "senderId": 7}, "https://solace.example/"
    )
    assert subject == "New message from Sam"
    assert "https://solace.example/messages/7" in body
    assert is_known_template("forum_reply")
    assert not is_known_template("birthday")
