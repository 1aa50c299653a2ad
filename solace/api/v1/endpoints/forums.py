"""
Forum endpoints - categories, topics, replies, likes and topic subscriptions.
"""

from fastapi import APIRouter, Query, status

from solace.config import get_settings
from solace.core.dependencies import AdminProfile, CurrentProfile, EmailVerifiedProfile, OptionalProfile
from solace.db.repositories.forum_repository import (
    ForumCategoryRepository,
    ForumPostLikeRepository,
    ForumPostRepository,
    ForumSubscriptionRepository,
    ForumTopicRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.session import DbSession
from solace.schemas.forum import (
    CategoryCreate,
    CategoryDetail,
    CategoryResponse,
    LikeResult,
    PostCreate,
    PostHide,
    PostResponse,
    PostUpdate,
    SubscriptionResponse,
    TopicCreate,
    TopicDetail,
    TopicModeration,
    TopicResponse,
)
from solace.services.forum_service import ForumService

router = APIRouter()
admin_router = APIRouter()
settings = get_settings()


def _get_forum_service(session: DbSession) -> ForumService:
    return ForumService(
        ForumCategoryRepository(session),
        ForumTopicRepository(session),
        ForumPostRepository(session),
        ForumSubscriptionRepository(session),
        ForumPostLikeRepository(session),
        ProfileRepository(session),
    )


@router.get("/categories", response_model=list[CategoryResponse])
async def list_categories(session: DbSession):
    return await _get_forum_service(session).list_categories()


@router.get("/categories/{slug}", response_model=CategoryDetail)
async def get_category(
    session: DbSession,
    slug: str,
    skip: int = Query(0, ge=0),
    limit: int = Query(20, ge=1, le=settings.max_page_size),
):
    """Category with its topics: pinned first, then most recent activity."""
    return await _get_forum_service(session).category_detail(slug, skip=skip, limit=limit)


@router.post("/categories/{slug}/topics", response_model=TopicResponse, status_code=status.HTTP_201_CREATED)
async def create_topic(session: DbSession, slug: str, profile: EmailVerifiedProfile, data: TopicCreate):
    return await _get_forum_service(session).create_topic(profile, slug, data)


@router.get("/topics/{topic_id}", response_model=TopicDetail)
async def get_topic(session: DbSession, topic_id: int, viewer: OptionalProfile):
    return await _get_forum_service(session).topic_detail(topic_id, viewer)


@router.post("/topics/{topic_id}/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def reply(session: DbSession, topic_id: int, profile: EmailVerifiedProfile, data: PostCreate):
    return await _get_forum_service(session).reply(profile, topic_id, data)


@router.patch("/posts/{post_id}", response_model=PostResponse)
async def edit_post(session: DbSession, post_id: int, profile: CurrentProfile, data: PostUpdate):
    return await _get_forum_service(session).edit_post(profile, post_id, data.content)


@router.post("/posts/{post_id}/like", response_model=LikeResult)
async def toggle_like(session: DbSession, post_id: int, profile: EmailVerifiedProfile):
    return await _get_forum_service(session).toggle_like(profile, post_id)


@router.put("/topics/{topic_id}/subscription", status_code=status.HTTP_204_NO_CONTENT)
async def subscribe(session: DbSession, topic_id: int, profile: CurrentProfile):
    await _get_forum_service(session).subscribe(profile, topic_id)


@router.delete("/topics/{topic_id}/subscription", status_code=status.HTTP_204_NO_CONTENT)
async def unsubscribe(session: DbSession, topic_id: int, profile: CurrentProfile):
    await _get_forum_service(session).unsubscribe(profile, topic_id)


@router.get("/subscriptions", response_model=list[SubscriptionResponse])
async def my_subscriptions(session: DbSession, profile: CurrentProfile):
    return await _get_forum_service(session).list_subscriptions(profile)


# --- Admin ---


@admin_router.post("/categories", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
async def create_category(session: DbSession, admin: AdminProfile, data: CategoryCreate):
    return await _get_forum_service(session).create_category(data)


@admin_router.patch("/topics/{topic_id}", response_model=TopicResponse)
async def moderate_topic(session: DbSession, topic_id: int, admin: AdminProfile, data: TopicModeration):
    """Pin, lock or mark a topic as an announcement."""
    return await _get_forum_service(session).moderate_topic(admin, topic_id, data)


@admin_router.post("/posts/{post_id}/hide", status_code=status.HTTP_204_NO_CONTENT)
async def hide_post(session: DbSession, post_id: int, admin: AdminProfile, data: PostHide):
    await _get_forum_service(session).hide_post(admin, post_id, data.reason)
