"""
API v1 router - aggregates all endpoint modules (RESTful structure).
"""

from fastapi import APIRouter

from solace.api.v1.endpoints import (
    admin,
    auth,
    background_checks,
    connections,
    emails,
    forums,
    health,
    meetups,
    memorials,
    messages,
    moderation,
    organizer,
    profiles,
    resources,
    search,
    sponsors,
    store,
    subscriptions,
    webhooks,
)

api_router = APIRouter(prefix="/v1")

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(profiles.router, prefix="/profiles", tags=["profiles"])
api_router.include_router(memorials.router, prefix="/memorials", tags=["memorials"])
api_router.include_router(meetups.router, prefix="/meetups", tags=["meetups"])
api_router.include_router(forums.router, prefix="/forums", tags=["forums"])
api_router.include_router(messages.router, prefix="/messages", tags=["messages"])
api_router.include_router(connections.router, prefix="/connections", tags=["connections"])
api_router.include_router(store.router, prefix="/store", tags=["store"])
api_router.include_router(store.checkout_router, prefix="/checkout", tags=["store"])
api_router.include_router(subscriptions.router, prefix="/subscriptions", tags=["billing"])
api_router.include_router(organizer.router, prefix="/organizer", tags=["organizer"])
api_router.include_router(background_checks.router, prefix="/background-check", tags=["background checks"])
api_router.include_router(webhooks.router, prefix="/webhooks", tags=["webhooks"])
api_router.include_router(sponsors.router, prefix="/sponsors", tags=["sponsors"])
api_router.include_router(sponsors.advertising_router, prefix="/advertising", tags=["sponsors"])
api_router.include_router(moderation.reports_router, prefix="/reports", tags=["moderation"])
api_router.include_router(moderation.suggestions_router, prefix="/suggestions", tags=["moderation"])
api_router.include_router(resources.router, prefix="/resources", tags=["resources"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(emails.router, prefix="/emails", tags=["emails"])

# Admin
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
api_router.include_router(forums.admin_router, prefix="/admin/forums", tags=["admin"])
api_router.include_router(meetups.admin_router, prefix="/admin/meetups", tags=["admin"])
api_router.include_router(store.admin_router, prefix="/admin/products", tags=["admin"])
api_router.include_router(organizer.admin_router, prefix="/admin/organizer-applications", tags=["admin"])
api_router.include_router(background_checks.admin_router, prefix="/admin/background-checks", tags=["admin"])
api_router.include_router(sponsors.admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(moderation.admin_router, prefix="/admin", tags=["admin"])
api_router.include_router(resources.admin_router, prefix="/admin/resource-submissions", tags=["admin"])
