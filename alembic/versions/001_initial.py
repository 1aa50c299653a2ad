"""Initial community schema

Revision ID: 001
Revises:
Create Date: 2026-10-18

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

TZ = sa.DateTime(timezone=True)


def _id() -> sa.Column:
    return sa.Column("id", sa.Integer(), autoincrement=True, nullable=False, primary_key=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", TZ, server_default=sa.func.now(), nullable=True),
        sa.Column("updated_at", TZ, server_default=sa.func.now(), nullable=True),
    ]


def _profile_fk(name: str, nullable: bool = False, cascade: bool = True) -> sa.Column:
    return sa.Column(
        name,
        sa.Integer(),
        sa.ForeignKey("profiles.id", ondelete="CASCADE" if cascade else None),
        nullable=nullable,
    )


def _flag(name: str, default: bool = False) -> sa.Column:
    return sa.Column(name, sa.Boolean(), nullable=False, server_default=sa.true() if default else sa.false())


def _counter(name: str) -> sa.Column:
    return sa.Column(name, sa.Integer(), nullable=False, server_default="0")


def upgrade() -> None:
    op.create_table(
        "profiles",
        _id(),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("display_name", sa.String(120), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("profile_image_url", sa.String(500), nullable=True),
        sa.Column("emergency_contact_name", sa.String(255), nullable=True),
        sa.Column("emergency_contact_phone", sa.String(50), nullable=True),
        sa.Column("emergency_contact_relationship", sa.String(100), nullable=True),
        sa.Column("verification_status", sa.String(32), nullable=False, server_default="unverified"),
        sa.Column("email_verified_at", TZ, nullable=True),
        sa.Column("id_verified_at", TZ, nullable=True),
        sa.Column("meetup_organizer_verified_at", TZ, nullable=True),
        sa.Column("id_verification_requested_at", TZ, nullable=True),
        sa.Column("id_verification_method", sa.String(50), nullable=True),
        _flag("is_admin"),
        _flag("is_banned"),
        sa.Column("banned_at", TZ, nullable=True),
        sa.Column("ban_reason", sa.Text(), nullable=True),
        sa.Column("profile_visibility", sa.String(32), nullable=False, server_default="public"),
        _flag("allow_messages", True),
        _flag("show_in_directory", True),
        sa.Column("subscription_tier", sa.String(20), nullable=False, server_default="free"),
        sa.Column("subscription_status", sa.String(32), nullable=True),
        sa.Column("stripe_customer_id", sa.String(255), nullable=True),
        sa.Column("stripe_subscription_id", sa.String(255), nullable=True),
        sa.Column("subscription_started_at", TZ, nullable=True),
        sa.Column("subscription_ends_at", TZ, nullable=True),
        sa.Column("subscription_cancelled_at", TZ, nullable=True),
        _flag("auto_renew"),
        sa.Column("background_check_status", sa.String(32), nullable=False, server_default="not_started"),
        sa.Column("background_check_submitted_at", TZ, nullable=True),
        sa.Column("background_check_approved_at", TZ, nullable=True),
        sa.Column("background_check_expires_at", TZ, nullable=True),
        sa.Column("background_check_provider", sa.String(50), nullable=True),
        sa.Column("background_check_notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_profiles_email", "profiles", ["email"], unique=True)
    op.create_index("ix_profiles_display_name", "profiles", ["display_name"])
    op.create_index("ix_profiles_verification_status", "profiles", ["verification_status"])
    op.create_index("ix_profiles_stripe_customer_id", "profiles", ["stripe_customer_id"])

    op.create_table(
        "memorials",
        _id(),
        _profile_fk("created_by"),
        sa.Column("slug", sa.String(100), nullable=False),
        sa.Column("first_name", sa.String(120), nullable=False),
        sa.Column("middle_name", sa.String(120), nullable=True),
        sa.Column("last_name", sa.String(120), nullable=False),
        sa.Column("nickname", sa.String(120), nullable=True),
        sa.Column("date_of_birth", sa.Date(), nullable=True),
        sa.Column("date_of_passing", sa.Date(), nullable=False),
        sa.Column("loss_type", sa.String(50), nullable=True),
        sa.Column("obituary", sa.Text(), nullable=True),
        sa.Column("life_story", sa.Text(), nullable=True),
        sa.Column("favorite_memory", sa.Text(), nullable=True),
        sa.Column("favorite_quote", sa.Text(), nullable=True),
        sa.Column("relationship_to_creator", sa.String(120), nullable=True),
        sa.Column("occupation", sa.String(120), nullable=True),
        sa.Column("hobbies", sa.JSON(), nullable=True),
        sa.Column("service_links", sa.JSON(), nullable=True),
        _flag("is_public", True),
        _flag("allow_tributes", True),
        _flag("allow_photos", True),
        sa.Column("theme_id", sa.String(50), nullable=True),
        sa.Column("video_url", sa.String(500), nullable=True),
        sa.Column("profile_photo_url", sa.String(500), nullable=True),
        sa.Column("cover_photo_url", sa.String(500), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_memorials_created_by", "memorials", ["created_by"])
    op.create_index("ix_memorials_slug", "memorials", ["slug"], unique=True)

    op.create_table(
        "memorial_tributes",
        _id(),
        sa.Column("memorial_id", sa.Integer(), sa.ForeignKey("memorials.id", ondelete="CASCADE"), nullable=False),
        _profile_fk("author_id"),
        sa.Column("content", sa.Text(), nullable=False),
        _flag("is_hidden"),
        *_timestamps(),
    )
    op.create_index("ix_memorial_tributes_memorial_id", "memorial_tributes", ["memorial_id"])
    op.create_index("ix_memorial_tributes_author_id", "memorial_tributes", ["author_id"])

    op.create_table(
        "store_products",
        _id(),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False, server_default=""),
        sa.Column("product_type", sa.String(32), nullable=False),
        sa.Column("price_cents", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("preview_image_url", sa.String(500), nullable=True),
        sa.Column("digital_asset_path", sa.String(500), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        _counter("display_order"),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        _counter("purchase_count"),
        *_timestamps(),
    )
    op.create_index("ix_store_products_product_type", "store_products", ["product_type"])
    op.create_index("ix_store_products_status", "store_products", ["status"])

    op.create_table(
        "store_orders",
        _id(),
        _profile_fk("user_id", cascade=False),
        sa.Column("total_amount_cents", sa.Integer(), nullable=False),
        sa.Column("currency", sa.String(3), nullable=False, server_default="usd"),
        sa.Column("stripe_checkout_session_id", sa.String(255), nullable=True),
        sa.Column("stripe_payment_intent_id", sa.String(255), nullable=True),
        sa.Column("payment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("fulfillment_status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("customer_email", sa.String(255), nullable=False),
        sa.Column("customer_name", sa.String(255), nullable=True),
        sa.Column("paid_at", TZ, nullable=True),
        sa.Column("fulfilled_at", TZ, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_store_orders_user_id", "store_orders", ["user_id"])
    op.create_index("ix_store_orders_stripe_checkout_session_id", "store_orders", ["stripe_checkout_session_id"])

    op.create_table(
        "store_order_items",
        _id(),
        sa.Column("order_id", sa.Integer(), sa.ForeignKey("store_orders.id", ondelete="CASCADE"), nullable=False),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("store_products.id"), nullable=False),
        sa.Column("memorial_id", sa.Integer(), sa.ForeignKey("memorials.id"), nullable=False),
        sa.Column("price_cents", sa.Integer(), nullable=False),
        sa.Column("dedication_message", sa.Text(), nullable=True),
        sa.Column("product_snapshot", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_store_order_items_order_id", "store_order_items", ["order_id"])

    op.create_table(
        "memorial_store_items",
        _id(),
        sa.Column("memorial_id", sa.Integer(), sa.ForeignKey("memorials.id", ondelete="CASCADE"), nullable=False),
        sa.Column("order_item_id", sa.Integer(), sa.ForeignKey("store_order_items.id"), nullable=False, unique=True),
        sa.Column("product_id", sa.Integer(), sa.ForeignKey("store_products.id"), nullable=False),
        _profile_fk("purchased_by", cascade=False),
        sa.Column("purchaser_name", sa.String(255), nullable=False),
        sa.Column("dedication_message", sa.Text(), nullable=True),
        sa.Column("product_name", sa.String(255), nullable=False),
        sa.Column("product_type", sa.String(32), nullable=False),
        sa.Column("preview_image_url", sa.String(500), nullable=True),
        sa.Column("digital_asset_path", sa.String(500), nullable=True),
        _flag("is_visible", True),
        _counter("display_order"),
        *_timestamps(),
    )
    op.create_index("ix_memorial_store_items_memorial_id", "memorial_store_items", ["memorial_id"])

    op.create_table(
        "meetups",
        _id(),
        _profile_fk("organizer_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("loss_categories", sa.JSON(), nullable=False),
        sa.Column("format", sa.String(20), nullable=False),
        sa.Column("start_time", TZ, nullable=False),
        sa.Column("end_time", TZ, nullable=False),
        sa.Column("timezone", sa.String(64), nullable=False, server_default="UTC"),
        sa.Column("location_name", sa.String(255), nullable=True),
        sa.Column("location_address", sa.String(255), nullable=True),
        sa.Column("location_city", sa.String(120), nullable=True),
        sa.Column("location_state", sa.String(120), nullable=True),
        sa.Column("location_zip", sa.String(20), nullable=True),
        sa.Column("location_country", sa.String(2), nullable=False, server_default="US"),
        sa.Column("location_lat", sa.Float(), nullable=True),
        sa.Column("location_lng", sa.Float(), nullable=True),
        sa.Column("virtual_link", sa.String(500), nullable=True),
        sa.Column("virtual_platform", sa.String(50), nullable=True),
        sa.Column("max_attendees", sa.Integer(), nullable=True),
        _flag("requires_approval"),
        sa.Column("registration_deadline", TZ, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="draft"),
        _counter("attendee_count"),
        sa.Column("cover_image_url", sa.String(500), nullable=True),
        sa.Column("tags", sa.JSON(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_meetups_organizer_id", "meetups", ["organizer_id"])
    op.create_index("ix_meetups_title", "meetups", ["title"])
    op.create_index("ix_meetups_start_time", "meetups", ["start_time"])
    op.create_index("ix_meetups_location_city", "meetups", ["location_city"])
    op.create_index("ix_meetups_status", "meetups", ["status"])

    op.create_table(
        "meetup_rsvps",
        _id(),
        sa.Column("meetup_id", sa.Integer(), sa.ForeignKey("meetups.id", ondelete="CASCADE"), nullable=False),
        _profile_fk("user_id"),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column("checked_in_at", TZ, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("meetup_id", "user_id", name="uq_meetup_rsvps_meetup_user"),
    )
    op.create_index("ix_meetup_rsvps_meetup_id", "meetup_rsvps", ["meetup_id"])
    op.create_index("ix_meetup_rsvps_user_id", "meetup_rsvps", ["user_id"])

    op.create_table(
        "forum_categories",
        _id(),
        sa.Column("name", sa.String(120), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("icon", sa.String(20), nullable=True),
        sa.Column("color", sa.String(20), nullable=True),
        _counter("display_order"),
        _flag("is_active", True),
        _counter("topic_count"),
        _counter("post_count"),
        *_timestamps(),
    )
    op.create_index("ix_forum_categories_slug", "forum_categories", ["slug"], unique=True)

    op.create_table(
        "forum_topics",
        _id(),
        sa.Column(
            "category_id", sa.Integer(), sa.ForeignKey("forum_categories.id", ondelete="CASCADE"), nullable=False
        ),
        _profile_fk("author_id"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(60), nullable=False),
        _flag("is_pinned"),
        _flag("is_locked"),
        _flag("is_announcement"),
        _counter("view_count"),
        _counter("reply_count"),
        sa.Column("last_post_at", TZ, nullable=False, server_default=sa.func.now()),
        _profile_fk("last_post_by", nullable=True, cascade=False),
        *_timestamps(),
        sa.UniqueConstraint("category_id", "slug", name="uq_forum_topics_category_slug"),
    )
    op.create_index("ix_forum_topics_category_id", "forum_topics", ["category_id"])
    op.create_index("ix_forum_topics_author_id", "forum_topics", ["author_id"])
    op.create_index("ix_forum_topics_title", "forum_topics", ["title"])

    op.create_table(
        "forum_posts",
        _id(),
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("forum_topics.id", ondelete="CASCADE"), nullable=False),
        _profile_fk("author_id"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("parent_post_id", sa.Integer(), sa.ForeignKey("forum_posts.id"), nullable=True),
        _flag("is_edited"),
        sa.Column("edited_at", TZ, nullable=True),
        _flag("is_hidden"),
        sa.Column("hidden_reason", sa.Text(), nullable=True),
        _profile_fk("hidden_by", nullable=True, cascade=False),
        _counter("like_count"),
        *_timestamps(),
    )
    op.create_index("ix_forum_posts_topic_id", "forum_posts", ["topic_id"])
    op.create_index("ix_forum_posts_author_id", "forum_posts", ["author_id"])

    op.create_table(
        "forum_subscriptions",
        _id(),
        _profile_fk("user_id"),
        sa.Column("topic_id", sa.Integer(), sa.ForeignKey("forum_topics.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "topic_id", name="uq_forum_subscriptions_user_topic"),
    )
    op.create_index("ix_forum_subscriptions_user_id", "forum_subscriptions", ["user_id"])
    op.create_index("ix_forum_subscriptions_topic_id", "forum_subscriptions", ["topic_id"])

    op.create_table(
        "forum_post_likes",
        _id(),
        _profile_fk("user_id"),
        sa.Column("post_id", sa.Integer(), sa.ForeignKey("forum_posts.id", ondelete="CASCADE"), nullable=False),
        *_timestamps(),
        sa.UniqueConstraint("user_id", "post_id", name="uq_forum_post_likes_user_post"),
    )
    op.create_index("ix_forum_post_likes_user_id", "forum_post_likes", ["user_id"])
    op.create_index("ix_forum_post_likes_post_id", "forum_post_likes", ["post_id"])

    op.create_table(
        "conversations",
        _id(),
        _profile_fk("participant_one"),
        _profile_fk("participant_two"),
        sa.Column("last_message_at", TZ, nullable=False, server_default=sa.func.now()),
        sa.Column("last_message_preview", sa.String(120), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("participant_one", "participant_two", name="uq_conversations_participants"),
    )
    op.create_index("ix_conversations_participant_one", "conversations", ["participant_one"])
    op.create_index("ix_conversations_participant_two", "conversations", ["participant_two"])

    op.create_table(
        "conversation_participants",
        _id(),
        sa.Column(
            "conversation_id", sa.Integer(), sa.ForeignKey("conversations.id", ondelete="CASCADE"), nullable=False
        ),
        _profile_fk("user_id"),
        _flag("is_muted"),
        _flag("is_archived"),
        _counter("unread_count"),
        sa.Column("last_read_at", TZ, nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("conversation_id", "user_id", name="uq_conversation_participants_conv_user"),
    )
    op.create_index("ix_conversation_participants_conversation_id", "conversation_participants", ["conversation_id"])
    op.create_index("ix_conversation_participants_user_id", "conversation_participants", ["user_id"])

    op.create_table(
        "messages",
        _id(),
        sa.Column(
            "conversation_id", sa.Integer(), sa.ForeignKey("conversations.id", ondelete="CASCADE"), nullable=False
        ),
        _profile_fk("sender_id"),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("read_at", TZ, nullable=True),
        _flag("deleted_by_sender"),
        _flag("deleted_by_recipient"),
        *_timestamps(),
    )
    op.create_index("ix_messages_conversation_id", "messages", ["conversation_id"])
    op.create_index("ix_messages_sender_id", "messages", ["sender_id"])

    op.create_table(
        "verification_requests",
        _id(),
        _profile_fk("user_id"),
        sa.Column("request_type", sa.String(32), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("submitted_info", sa.JSON(), nullable=True),
        _profile_fk("reviewed_by", nullable=True, cascade=False),
        sa.Column("reviewed_at", TZ, nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_verification_requests_user_id", "verification_requests", ["user_id"])
    op.create_index("ix_verification_requests_status", "verification_requests", ["status"])

    op.create_table(
        "organizer_applications",
        _id(),
        _profile_fk("user_id"),
        sa.Column("experience", sa.Text(), nullable=False),
        sa.Column("motivation", sa.Text(), nullable=False),
        sa.Column("planned_meetups", sa.Text(), nullable=False),
        sa.Column("certifications", sa.Text(), nullable=True),
        _flag("background_check_consent"),
        sa.Column("payment_amount_cents", sa.Integer(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending_payment"),
        sa.Column("stripe_checkout_session_id", sa.String(255), nullable=True),
        sa.Column("stripe_payment_intent_id", sa.String(255), nullable=True),
        sa.Column("paid_at", TZ, nullable=True),
        _profile_fk("reviewed_by", nullable=True, cascade=False),
        sa.Column("reviewed_at", TZ, nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_organizer_applications_user_id", "organizer_applications", ["user_id"])
    op.create_index("ix_organizer_applications_status", "organizer_applications", ["status"])

    op.create_table(
        "background_check_applications",
        _id(),
        _profile_fk("user_id"),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("provider", sa.String(50), nullable=False, server_default="manual"),
        sa.Column("full_legal_name", sa.String(255), nullable=False),
        sa.Column("date_of_birth", sa.Date(), nullable=False),
        sa.Column("ssn_last_4", sa.String(4), nullable=False),
        sa.Column("address_line_1", sa.String(255), nullable=False),
        sa.Column("address_line_2", sa.String(255), nullable=True),
        sa.Column("city", sa.String(120), nullable=False),
        sa.Column("state", sa.String(64), nullable=False),
        sa.Column("zip_code", sa.String(20), nullable=False),
        sa.Column("approved_at", TZ, nullable=True),
        sa.Column("expires_at", TZ, nullable=True),
        sa.Column("reviewed_at", TZ, nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_background_check_applications_user_id", "background_check_applications", ["user_id"])
    op.create_index("ix_background_check_applications_status", "background_check_applications", ["status"])

    op.create_table(
        "sponsors",
        _id(),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("slug", sa.String(120), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.String(500), nullable=True),
        sa.Column("website_url", sa.String(500), nullable=False),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("contact_name", sa.String(255), nullable=True),
        sa.Column("tier", sa.String(20), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending"),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("monthly_rate_cents", sa.Integer(), nullable=True),
        _counter("display_order"),
        _flag("show_on_homepage"),
        sa.Column("tagline", sa.String(255), nullable=True),
        sa.Column("categories", sa.JSON(), nullable=False),
        _counter("total_impressions"),
        _counter("total_clicks"),
        sa.Column("notes", sa.Text(), nullable=True),
        _profile_fk("approved_by", nullable=True, cascade=False),
        sa.Column("approved_at", TZ, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_sponsors_slug", "sponsors", ["slug"], unique=True)
    op.create_index("ix_sponsors_status", "sponsors", ["status"])

    op.create_table(
        "ad_placements",
        _id(),
        sa.Column("sponsor_id", sa.Integer(), sa.ForeignKey("sponsors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("location", sa.String(32), nullable=False),
        _flag("is_active", True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_ad_placements_sponsor_id", "ad_placements", ["sponsor_id"])
    op.create_index("ix_ad_placements_location", "ad_placements", ["location"])

    op.create_table(
        "ad_impressions",
        _id(),
        sa.Column("sponsor_id", sa.Integer(), sa.ForeignKey("sponsors.id", ondelete="CASCADE"), nullable=False),
        sa.Column("location", sa.String(32), nullable=False),
        _profile_fk("user_id", nullable=True, cascade=False),
        sa.Column("ip_hash", sa.String(64), nullable=True),
        sa.Column("created_at", TZ, nullable=True),
    )
    op.create_index("ix_ad_impressions_sponsor_id", "ad_impressions", ["sponsor_id"])

    op.create_table(
        "advertising_inquiries",
        _id(),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("contact_name", sa.String(255), nullable=False),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(50), nullable=True),
        sa.Column("website_url", sa.String(500), nullable=True),
        sa.Column("company_description", sa.Text(), nullable=False),
        sa.Column("interested_tiers", sa.JSON(), nullable=False),
        sa.Column("interested_placements", sa.JSON(), nullable=False),
        sa.Column("budget_range", sa.String(64), nullable=True),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("status", sa.String(20), nullable=False, server_default="new"),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        _profile_fk("responded_by", nullable=True, cascade=False),
        sa.Column("responded_at", TZ, nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_advertising_inquiries_status", "advertising_inquiries", ["status"])

    op.create_table(
        "reports",
        _id(),
        _profile_fk("reporter_id"),
        sa.Column("reportable_type", sa.String(20), nullable=False),
        sa.Column("reportable_id", sa.Integer(), nullable=False),
        sa.Column("report_type", sa.String(32), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("evidence_urls", sa.JSON(), nullable=True),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        _profile_fk("reviewed_by", nullable=True, cascade=False),
        sa.Column("reviewed_at", TZ, nullable=True),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        sa.Column("action_taken", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_reports_reporter_id", "reports", ["reporter_id"])
    op.create_index("ix_reports_status", "reports", ["status"])

    op.create_table(
        "feature_suggestions",
        _id(),
        _profile_fk("submitted_by"),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(32), nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="submitted"),
        sa.Column("priority", sa.String(20), nullable=False, server_default="medium"),
        sa.Column("admin_notes", sa.Text(), nullable=True),
        _profile_fk("reviewed_by", nullable=True, cascade=False),
        sa.Column("reviewed_at", TZ, nullable=True),
        _counter("upvote_count"),
        *_timestamps(),
    )
    op.create_index("ix_feature_suggestions_submitted_by", "feature_suggestions", ["submitted_by"])
    op.create_index("ix_feature_suggestions_status", "feature_suggestions", ["status"])

    op.create_table(
        "suggestion_upvotes",
        _id(),
        sa.Column(
            "suggestion_id",
            sa.Integer(),
            sa.ForeignKey("feature_suggestions.id", ondelete="CASCADE"),
            nullable=False,
        ),
        _profile_fk("user_id"),
        *_timestamps(),
        sa.UniqueConstraint("suggestion_id", "user_id", name="uq_suggestion_upvotes_suggestion_user"),
    )
    op.create_index("ix_suggestion_upvotes_suggestion_id", "suggestion_upvotes", ["suggestion_id"])
    op.create_index("ix_suggestion_upvotes_user_id", "suggestion_upvotes", ["user_id"])

    op.create_table(
        "resources",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("resource_type", sa.String(32), nullable=False),
        sa.Column("categories", sa.JSON(), nullable=False),
        sa.Column("tags", sa.JSON(), nullable=True),
        sa.Column("external_url", sa.String(500), nullable=True),
        sa.Column("phone_number", sa.String(50), nullable=True),
        _flag("is_24_7"),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("source", sa.String(255), nullable=True),
        _flag("is_featured"),
        _flag("is_published", True),
        _counter("display_order"),
        _counter("view_count"),
        _counter("helpful_count"),
        *_timestamps(),
    )
    op.create_index("ix_resources_title", "resources", ["title"])
    op.create_index("ix_resources_resource_type", "resources", ["resource_type"])

    op.create_table(
        "resource_submissions",
        _id(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("resource_type", sa.String(32), nullable=False),
        sa.Column("categories", sa.JSON(), nullable=False),
        sa.Column("external_url", sa.String(500), nullable=True),
        sa.Column("phone_number", sa.String(50), nullable=True),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("source", sa.String(255), nullable=True),
        sa.Column("submitter_name", sa.String(255), nullable=False),
        sa.Column("submitter_email", sa.String(255), nullable=False),
        sa.Column("submitter_notes", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "stripe_events",
        _id(),
        sa.Column("stripe_event_id", sa.String(255), nullable=False),
        sa.Column("event_type", sa.String(100), nullable=False),
        sa.Column("event_data", sa.JSON(), nullable=True),
        _flag("processed"),
        sa.Column("processed_at", TZ, nullable=True),
        sa.Column("error_message", sa.Text(), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_stripe_events_stripe_event_id", "stripe_events", ["stripe_event_id"], unique=True)

    op.create_table(
        "stripe_subscriptions",
        _id(),
        _profile_fk("user_id"),
        sa.Column("stripe_customer_id", sa.String(255), nullable=False),
        sa.Column("stripe_subscription_id", sa.String(255), nullable=False),
        sa.Column("stripe_price_id", sa.String(255), nullable=True),
        sa.Column("status", sa.String(32), nullable=False),
        sa.Column("current_period_start", TZ, nullable=True),
        sa.Column("current_period_end", TZ, nullable=True),
        _flag("cancel_at_period_end"),
        sa.Column("cancelled_at", TZ, nullable=True),
        _counter("amount"),
        sa.Column("currency", sa.String(3), nullable=False, server_default="usd"),
        *_timestamps(),
    )
    op.create_index("ix_stripe_subscriptions_user_id", "stripe_subscriptions", ["user_id"])
    op.create_index(
        "ix_stripe_subscriptions_stripe_subscription_id", "stripe_subscriptions", ["stripe_subscription_id"], unique=True
    )


# Children before parents
TABLES = (
    "stripe_subscriptions",
    "stripe_events",
    "resource_submissions",
    "resources",
    "suggestion_upvotes",
    "feature_suggestions",
    "reports",
    "advertising_inquiries",
    "ad_impressions",
    "ad_placements",
    "sponsors",
    "background_check_applications",
    "organizer_applications",
    "verification_requests",
    "messages",
    "conversation_participants",
    "conversations",
    "forum_post_likes",
    "forum_subscriptions",
    "forum_posts",
    "forum_topics",
    "forum_categories",
    "meetup_rsvps",
    "meetups",
    "memorial_store_items",
    "store_order_items",
    "store_orders",
    "store_products",
    "memorial_tributes",
    "memorials",
    "profiles",
)


def downgrade() -> None:
    for table in TABLES:
        op.drop_table(table)
