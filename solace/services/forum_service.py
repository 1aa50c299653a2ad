"""
Forum service - categories, topics, replies, likes and subscriptions.

Category and topic counters (topic_count, post_count, reply_count, last_post_*) are
updated in the same transaction as the post that changes them.
"""

import logging

from solace.core import slugs
from solace.core.clock import utcnow
from solace.core.errors import ConflictError, InvalidRequestError, NotFoundError, PermissionDeniedError
from solace.db.models.forum import ForumCategory, ForumPost, ForumPostLike, ForumSubscription, ForumTopic
from solace.db.models.profile import Profile
from solace.db.repositories.forum_repository import (
    ForumCategoryRepository,
    ForumPostLikeRepository,
    ForumPostRepository,
    ForumSubscriptionRepository,
    ForumTopicRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.queue.publish import queue_email, queue_index
from solace.schemas.forum import CategoryCreate, PostCreate, TopicCreate, TopicModeration
from solace.search.documents import topic_doc

logger = logging.getLogger(__name__)


class ForumService:
    """Categories, topics, posts, likes and subscriptions."""

    def __init__(
        self,
        category_repo: ForumCategoryRepository,
        topic_repo: ForumTopicRepository,
        post_repo: ForumPostRepository,
        subscription_repo: ForumSubscriptionRepository,
        like_repo: ForumPostLikeRepository,
        profile_repo: ProfileRepository,
    ):
        self.category_repo = category_repo
        self.topic_repo = topic_repo
        self.post_repo = post_repo
        self.subscription_repo = subscription_repo
        self.like_repo = like_repo
        self.profile_repo = profile_repo

    async def list_categories(self) -> list[ForumCategory]:
        """Active categories in display order."""
        return await self.category_repo.list_active()

    async def _get_category(self, slug: str) -> ForumCategory:
        category = await self.category_repo.get_by_slug(slug)
        if not category or not category.is_active:
            raise NotFoundError("Category not found")
        return category

    async def category_detail(self, slug: str, skip: int = 0, limit: int = 20) -> dict:
        """Category with a page of its topics, pinned first."""
        category = await self._get_category(slug)
        topics = await self.topic_repo.list_for_category(category.id, skip=skip, limit=limit)
        return {"category": category, "topics": topics}

    async def _unique_topic_slug(self, category_id: int, title: str) -> str:
        base = slugs.topic_slug(title) or "topic"
        candidate = base
        counter = 1
        while await self.topic_repo.slug_exists(category_id, candidate):
            candidate = f"{base}-{counter}"
            counter += 1
        return candidate

    async def create_topic(self, profile: Profile, category_slug: str, data: TopicCreate) -> ForumTopic:
        """Open a topic with its first post and bump the category counters."""
        category = await self._get_category(category_slug)
        now = utcnow()
        topic = await self.topic_repo.add(
            ForumTopic(
                category_id=category.id,
                author_id=profile.id,
                title=data.title.strip(),
                slug=await self._unique_topic_slug(category.id, data.title),
                last_post_at=now,
                last_post_by=profile.id,
            )
        )
        await self.post_repo.add(ForumPost(topic_id=topic.id, author_id=profile.id, content=data.content))
        category.topic_count += 1
        category.post_count += 1
        await self.category_repo.save(category)
        # Authors follow their own topics
        await self.subscription_repo.add(ForumSubscription(user_id=profile.id, topic_id=topic.id))
        logger.info("Profile %s opened topic %s in %s", profile.id, topic.id, category.slug)
        queue_index("forums", topic_doc(topic))
        return topic

    async def _get_topic(self, topic_id: int) -> ForumTopic:
        topic = await self.topic_repo.get_by_id(topic_id)
        if not topic:
            raise NotFoundError("Topic not found")
        return topic

    async def _post_views(self, posts: list[ForumPost]) -> list[dict]:
        authors = await self.profile_repo.get_by_ids([p.author_id for p in posts])
        views = []
        for post in posts:
            author = authors.get(post.author_id)
            views.append(
                {
                    "id": post.id,
                    "topic_id": post.topic_id,
                    "author_id": post.author_id,
                    "author_name": author.public_name if author else None,
                    "content": post.content,
                    "parent_post_id": post.parent_post_id,
                    "is_edited": post.is_edited,
                    "edited_at": post.edited_at,
                    "like_count": post.like_count,
                    "created_at": post.created_at,
                }
            )
        return views

    async def topic_detail(self, topic_id: int, viewer: Profile | None = None) -> dict:
        """Topic with its visible posts. Counts a view."""
        topic = await self._get_topic(topic_id)
        topic.view_count += 1
        topic = await self.topic_repo.save(topic)
        posts = await self.post_repo.list_for_topic(topic.id)
        subscribed = False
        if viewer is not None:
            subscribed = await self.subscription_repo.get_for_user(viewer.id, topic.id) is not None
        return {"topic": topic, "posts": await self._post_views(posts), "is_subscribed": subscribed}

    async def reply(self, profile: Profile, topic_id: int, data: PostCreate) -> dict:
        """Reply to an unlocked topic, bump counters and e-mail subscribers other than the author."""
        topic = await self._get_topic(topic_id)
        if topic.is_locked:
            raise ConflictError("Topic is locked")
        if data.parent_post_id is not None:
            parent = await self.post_repo.get_by_id(data.parent_post_id)
            if not parent or parent.topic_id != topic.id:
                raise InvalidRequestError("Parent post does not belong to this topic")

        post = await self.post_repo.add(
            ForumPost(
                topic_id=topic.id,
                author_id=profile.id,
                content=data.content,
                parent_post_id=data.parent_post_id,
            )
        )
        topic.reply_count += 1
        topic.last_post_at = utcnow()
        topic.last_post_by = profile.id
        await self.topic_repo.save(topic)
        category = await self.category_repo.get_by_id(topic.category_id)
        if category is not None:
            category.post_count += 1
            await self.category_repo.save(category)

        await self._notify_subscribers(topic, profile)
        queue_index("forums", topic_doc(topic))
        return (await self._post_views([post]))[0]

    async def _notify_subscribers(self, topic: ForumTopic, author: Profile) -> None:
        recipient_ids = [uid for uid in await self.subscription_repo.subscriber_ids(topic.id) if uid != author.id]
        if not recipient_ids:
            return
        recipients = await self.profile_repo.get_by_ids(recipient_ids)
        for recipient in recipients.values():
            if recipient.is_banned:
                continue
            queue_email(
                recipient.email,
                "forum_reply",
                {"topicTitle": topic.title, "topicId": topic.id, "authorName": author.public_name},
            )

    async def edit_post(self, profile: Profile, post_id: int, content: str) -> dict:
        """Edit one of the caller's own posts."""
        post = await self.post_repo.get_by_id(post_id)
        if not post or post.is_hidden:
            raise NotFoundError("Post not found")
        if post.author_id != profile.id:
            raise PermissionDeniedError("You can only edit your own posts")
        post.content = content
        post.is_edited = True
        post.edited_at = utcnow()
        post = await self.post_repo.save(post)
        return (await self._post_views([post]))[0]

    async def toggle_like(self, profile: Profile, post_id: int) -> dict:
        """Like or unlike a post."""
        post = await self.post_repo.get_by_id(post_id)
        if not post or post.is_hidden:
            raise NotFoundError("Post not found")
        existing = await self.like_repo.get_for_user(profile.id, post.id)
        if existing:
            await self.like_repo.delete(existing)
            post.like_count = max(0, post.like_count - 1)
            liked = False
        else:
            await self.like_repo.add(ForumPostLike(user_id=profile.id, post_id=post.id))
            post.like_count += 1
            liked = True
        post = await self.post_repo.save(post)
        return {"liked": liked, "like_count": post.like_count}

    async def subscribe(self, profile: Profile, topic_id: int) -> None:
        """Follow a topic for reply e-mails."""
        topic = await self._get_topic(topic_id)
        if await self.subscription_repo.get_for_user(profile.id, topic.id) is None:
            await self.subscription_repo.add(ForumSubscription(user_id=profile.id, topic_id=topic.id))

    async def unsubscribe(self, profile: Profile, topic_id: int) -> None:
        """Stop following a topic."""
        subscription = await self.subscription_repo.get_for_user(profile.id, topic_id)
        if subscription is not None:
            await self.subscription_repo.delete(subscription)

    async def list_subscriptions(self, profile: Profile) -> list[dict]:
        """Topics the caller follows."""
        subscriptions = await self.subscription_repo.list_for_user(profile.id)
        topics = await self.topic_repo.get_by_ids([s.topic_id for s in subscriptions])
        return [
            {"topic_id": s.topic_id, "subscribed_at": s.created_at, "topic": topics.get(s.topic_id)}
            for s in subscriptions
        ]

    # --- Moderation ---

    async def create_category(self, data: CategoryCreate) -> ForumCategory:
        """Add a category. Slugs are unique."""
        if await self.category_repo.get_by_slug(data.slug):
            raise ConflictError("Category slug already exists")
        return await self.category_repo.add(ForumCategory(**data.model_dump()))

    async def moderate_topic(self, moderator: Profile, topic_id: int, data: TopicModeration) -> ForumTopic:
        """Pin, lock or hide a topic."""
        topic = await self._get_topic(topic_id)
        for field, value in data.model_dump(exclude_none=True).items():
            setattr(topic, field, value)
        topic = await self.topic_repo.save(topic)
        logger.info(
            "Moderator %s set topic %s pinned=%s locked=%s", moderator.id, topic.id, topic.is_pinned, topic.is_locked
        )
        return topic

    async def hide_post(self, moderator: Profile, post_id: int, reason: str) -> ForumPost:
        """Hide a post with a moderation reason."""
        post = await self.post_repo.get_by_id(post_id)
        if not post:
            raise NotFoundError("Post not found")
        post.is_hidden = True
        post.hidden_reason = reason
        post.hidden_by = moderator.id
        post = await self.post_repo.save(post)
        logger.info("Moderator %s hid post %s", moderator.id, post.id)
        return post
