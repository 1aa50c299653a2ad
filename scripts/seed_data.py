#!/usr/bin/env python3
"""
Seed script: forum categories, gift store products, members, memorials and forum topics via the API
(no direct DB). Ensures: PostgreSQL has data, Celery tasks are queued, Elasticsearch gets indexed
when the worker runs.

Run: API must be running and an admin account must exist (set profiles.is_admin in the database).
  python scripts/seed_data.py --admin-email admin@example.com --admin-password secret123
  python scripts/seed_data.py --admin-email admin@example.com --admin-password secret123 --members 50
"""

import argparse
import random
import sys

import httpx

API_BASE = "http://localhost:8000/api/v1"

CATEGORIES = [
    ("Loss of a spouse or partner", "spouse-partner", "💔"),
    ("Loss of a parent", "parent", "🕊️"),
    ("Loss of a child", "child", "🌱"),
    ("Loss of a sibling", "sibling", "🤝"),
    ("Loss of a friend", "friend", "🌻"),
    ("Pet loss", "pet", "🐾"),
    ("Pregnancy and infant loss", "pregnancy-infant", "🌙"),
    ("Suicide loss", "suicide-loss", "🎗️"),
    ("General grief", "general", "💬"),
]

PRODUCTS = [
    {"name": "Memorial candle", "product_type": "icon", "price_cents": 299},
    {"name": "White lily", "product_type": "icon", "price_cents": 399},
    {"name": "Forget-me-nots", "product_type": "icon", "price_cents": 399},
    {"name": "Sunset over the sea", "product_type": "image", "price_cents": 799},
    {"name": "With deepest sympathy", "product_type": "card", "price_cents": 499},
    {"name": "Remembrance keepsake", "product_type": "keepsake", "price_cents": 1999},
]

FIRST_NAMES = ["Rose", "Arthur", "June", "Walter", "Maya", "Henry", "Lucia", "Samuel", "Iris", "Omar"]
LAST_NAMES = ["Alvarez", "Lane", "Park", "Gray", "Okafor", "Brennan", "Rossi", "Cohen", "Nakamura", "Haddad"]
LOSS_TYPES = ["spouse_partner", "parent", "child", "sibling", "friend", "general"]

TOPICS = [
    ("The first holidays without them", "How are you planning to get through the season?"),
    ("Things people said that actually helped", "Share the words that comforted you."),
    ("Sleeping again", "Has anyone found routines that help with nights?"),
    ("Keeping their memory alive", "Rituals, recipes, places - what do you do?"),
    ("Going back to work", "How did you handle the first weeks back?"),
]


def login(client: httpx.Client, email: str, password: str) -> dict:
    r = client.post("/auth/login", json={"email": email, "password": password})
    if r.status_code != 200:
        raise RuntimeError(f"Login {email}: {r.status_code} {r.text[:120]}")
    return {"Authorization": f"Bearer {r.json()['access_token']}"}


def seed_catalogue(client: httpx.Client, admin: dict, errors: list[str]) -> None:
    print(f"Creating {len(CATEGORIES)} forum categories and {len(PRODUCTS)} products...")
    for order, (name, slug, icon) in enumerate(CATEGORIES):
        r = client.post(
            "/admin/forums/categories",
            headers=admin,
            json={"name": name, "slug": slug, "icon": icon, "display_order": order},
        )
        if r.status_code not in (201, 409):
            errors.append(f"Category {slug}: {r.status_code} {r.text[:80]}")
    for order, product in enumerate(PRODUCTS):
        r = client.post("/admin/products", headers=admin, json={**product, "status": "active", "display_order": order})
        if r.status_code != 201:
            errors.append(f"Product {product['name']}: {r.status_code} {r.text[:80]}")


def seed_members(client: httpx.Client, admin: dict, count: int, errors: list[str]) -> list[dict]:
    print(f"Creating {count} members...")
    members = []
    for i in range(count):
        email = f"member{i + 1}@example.com"
        password = "password123"
        r = client.post(
            "/auth/register",
            json={"email": email, "password": password, "display_name": f"{random.choice(FIRST_NAMES)} {i + 1}"},
        )
        if r.status_code == 201:
            member_id = r.json()["id"]
            # Skip the e-mail round trip: verify straight away
            v = client.patch(
                f"/admin/users/{member_id}/verification",
                headers=admin,
                json={"verification_status": "email_verified"},
            )
            if v.status_code != 200:
                errors.append(f"Verify {email}: {v.status_code}")
        elif r.status_code != 409:
            errors.append(f"Register {email}: {r.status_code} {r.text[:80]}")
            continue
        members.append({"email": email, "password": password})
        if (i + 1) % 10 == 0:
            print(f"  ... {i + 1} members")
    return members


def seed_content(client: httpx.Client, members: list[dict], memorials_per_member: int, errors: list[str]) -> tuple[int, int]:
    memorials = topics = 0
    for member in members:
        try:
            headers = login(client, member["email"], member["password"])
        except RuntimeError as e:
            errors.append(str(e))
            continue
        for _ in range(memorials_per_member):
            r = client.post(
                "/memorials",
                headers=headers,
                json={
                    "first_name": random.choice(FIRST_NAMES),
                    "last_name": random.choice(LAST_NAMES),
                    "date_of_birth": f"{random.randint(1930, 1990)}-0{random.randint(1, 9)}-1{random.randint(0, 9)}",
                    "date_of_passing": f"20{random.randint(10, 24)}-0{random.randint(1, 9)}-2{random.randint(0, 8)}",
                    "loss_type": random.choice(LOSS_TYPES),
                    "obituary": "Loved by family and friends, and dearly missed.",
                },
            )
            if r.status_code == 201:
                memorials += 1
            else:
                errors.append(f"Memorial {member['email']}: {r.status_code} {r.text[:80]}")
        title, content = random.choice(TOPICS)
        category = random.choice(CATEGORIES)[1]
        r = client.post(f"/forums/categories/{category}/topics", headers=headers, json={"title": title, "content": content})
        if r.status_code == 201:
            topics += 1
        else:
            errors.append(f"Topic {member['email']}: {r.status_code} {r.text[:80]}")
    return memorials, topics


def main():
    ap = argparse.ArgumentParser(description="Seed categories, products, members and content via API")
    ap.add_argument("--admin-email", required=True, help="Existing admin account")
    ap.add_argument("--admin-password", required=True)
    ap.add_argument("--members", type=int, default=20, help="Number of members to create")
    ap.add_argument("--memorials-per-member", type=int, default=2)
    ap.add_argument("--base-url", default=API_BASE, help="API base URL")
    args = ap.parse_args()

    errors: list[str] = []
    with httpx.Client(base_url=args.base_url, timeout=30.0) as client:
        try:
            admin = login(client, args.admin_email, args.admin_password)
        except RuntimeError as e:
            print(e)
            sys.exit(1)
        seed_catalogue(client, admin, errors)
        members = seed_members(client, admin, args.members, errors)
        memorials, topics = seed_content(client, members, args.memorials_per_member, errors)

    print(f"\nDone. Members: {len(members)}, memorials: {memorials}, forum topics: {topics}")
    if errors:
        print(f"Errors ({len(errors)}):")
        for e in errors[:15]:
            print("  ", e)
        if len(errors) > 15:
            print("  ... and", len(errors) - 15, "more")
    print("\nTip: Run the Celery worker to index content in Elasticsearch, then try /api/v1/search.")


if __name__ == "__main__":
    main()
