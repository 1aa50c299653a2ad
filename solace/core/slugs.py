"""URL slug rules for memorial pages and forum topics."""

import re

MEMORIAL_SLUG_MAX_LENGTH = 100
TOPIC_SLUG_MAX_LENGTH = 50

# Top-level site paths a memorial slug must never shadow
RESERVED_WORDS = frozenset(
    {
        "login",
        "admin",
        "resources",
        "meetups",
        "api",
        "auth",
        "dashboard",
        "pricing",
        "settings",
        "messages",
        "connections",
        "host-gatherings",
        "forums",
        "candles",
        "memorial",
        "memorials",
        "profile",
        "profiles",
        "share",
    }
)

_SLUG_RE = re.compile(r"^[a-z0-9-]+$")


def is_valid_memorial_slug(slug: str | None) -> bool:
    if not slug or len(slug) > MEMORIAL_SLUG_MAX_LENGTH:
        return False
    if not _SLUG_RE.match(slug):
        return False
    if slug.startswith("-") or slug.endswith("-"):
        return False
    return slug not in RESERVED_WORDS


def slug_from_text(text: str) -> str:
    """'Mary-Anne  O'Brien' -> 'mary-anne-obrien'."""
    slug = text.lower().strip()
    slug = re.sub(r"[^a-z0-9\s-]", "", slug)
    slug = re.sub(r"\s+", "-", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")[:MEMORIAL_SLUG_MAX_LENGTH].strip("-")


def topic_slug(title: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return slug[:TOPIC_SLUG_MAX_LENGTH].strip("-")
