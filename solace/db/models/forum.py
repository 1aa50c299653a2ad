"""
Forum models - categories, topics, posts, subscriptions and likes.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from solace.core.clock import utcnow
from solace.db.base import Base, TimestampMixin


class ForumCategory(TimestampMixin, Base):
    __tablename__ = "forum_categories"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    slug: Mapped[str] = mapped_column(String(120), unique=True, index=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    icon: Mapped[str | None] = mapped_column(String(20))
    color: Mapped[str | None] = mapped_column(String(20))
    display_order: Mapped[int] = mapped_column(default=0, nullable=False)
    is_active: Mapped[bool] = mapped_column(default=True, nullable=False)
    topic_count: Mapped[int] = mapped_column(default=0, nullable=False)
    post_count: Mapped[int] = mapped_column(default=0, nullable=False)


class ForumTopic(TimestampMixin, Base):
    __tablename__ = "forum_topics"
    __table_args__ = (UniqueConstraint("category_id", "slug", name="uq_forum_topics_category_slug"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category_id: Mapped[int] = mapped_column(ForeignKey("forum_categories.id", ondelete="CASCADE"), index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    slug: Mapped[str] = mapped_column(String(60), nullable=False)
    is_pinned: Mapped[bool] = mapped_column(default=False, nullable=False)
    is_locked: Mapped[bool] = mapped_column(default=False, nullable=False)
    is_announcement: Mapped[bool] = mapped_column(default=False, nullable=False)
    view_count: Mapped[int] = mapped_column(default=0, nullable=False)
    reply_count: Mapped[int] = mapped_column(default=0, nullable=False)
    last_post_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    last_post_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))


class ForumPost(TimestampMixin, Base):
    __tablename__ = "forum_posts"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    topic_id: Mapped[int] = mapped_column(ForeignKey("forum_topics.id", ondelete="CASCADE"), index=True)
    author_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    parent_post_id: Mapped[int | None] = mapped_column(ForeignKey("forum_posts.id"))
    is_edited: Mapped[bool] = mapped_column(default=False, nullable=False)
    edited_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    is_hidden: Mapped[bool] = mapped_column(default=False, nullable=False)
    hidden_reason: Mapped[str | None] = mapped_column(Text)
    hidden_by: Mapped[int | None] = mapped_column(ForeignKey("profiles.id"))
    like_count: Mapped[int] = mapped_column(default=0, nullable=False)


class ForumSubscription(TimestampMixin, Base):
    __tablename__ = "forum_subscriptions"
    __table_args__ = (UniqueConstraint("user_id", "topic_id", name="uq_forum_subscriptions_user_topic"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    topic_id: Mapped[int] = mapped_column(ForeignKey("forum_topics.id", ondelete="CASCADE"), index=True)


class ForumPostLike(TimestampMixin, Base):
    __tablename__ = "forum_post_likes"
    __table_args__ = (UniqueConstraint("user_id", "post_id", name="uq_forum_post_likes_user_post"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("profiles.id", ondelete="CASCADE"), index=True)
    post_id: Mapped[int] = mapped_column(ForeignKey("forum_posts.id", ondelete="CASCADE"), index=True)
