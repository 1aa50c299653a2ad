"""Forum schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class CategoryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=120)
    slug: str = Field(..., pattern=r"^[a-z0-9-]+$", max_length=120)
    description: str | None = None
    icon: str | None = Field(None, max_length=20)
    color: str | None = Field(None, max_length=20)
    display_order: int = 0


class CategoryResponse(BaseModel):
    id: int
    name: str
    slug: str
    description: str | None
    icon: str | None
    color: str | None
    display_order: int
    topic_count: int
    post_count: int

    model_config = {"from_attributes": True}


class TopicCreate(BaseModel):
    title: str = Field(..., min_length=3, max_length=255)
    content: str = Field(..., min_length=1)


class TopicResponse(BaseModel):
    id: int
    category_id: int
    author_id: int
    title: str
    slug: str
    is_pinned: bool
    is_locked: bool
    is_announcement: bool
    view_count: int
    reply_count: int
    last_post_at: datetime
    last_post_by: int | None
    created_at: datetime

    model_config = {"from_attributes": True}


class CategoryDetail(BaseModel):
    category: CategoryResponse
    topics: list[TopicResponse]


class PostCreate(BaseModel):
    content: str = Field(..., min_length=1)
    parent_post_id: int | None = None


class PostUpdate(BaseModel):
    content: str = Field(..., min_length=1)


class PostResponse(BaseModel):
    id: int
    topic_id: int
    author_id: int
    author_name: str | None = None
    content: str
    parent_post_id: int | None
    is_edited: bool
    edited_at: datetime | None
    like_count: int
    created_at: datetime

    model_config = {"from_attributes": True}


class TopicDetail(BaseModel):
    topic: TopicResponse
    posts: list[PostResponse]
    is_subscribed: bool = False


class LikeResult(BaseModel):
    liked: bool
    like_count: int


class SubscriptionResponse(BaseModel):
    topic_id: int
    subscribed_at: datetime
    topic: TopicResponse | None = None


class TopicModeration(BaseModel):
    is_pinned: bool | None = None
    is_locked: bool | None = None
    is_announcement: bool | None = None


class PostHide(BaseModel):
    reason: str = Field(..., min_length=1)
