"""Status and category enumerations stored as plain strings in the database."""

from enum import Enum


class VerificationStatus(str, Enum):
    UNVERIFIED = "unverified"
    EMAIL_VERIFIED = "email_verified"
    ID_VERIFIED = "id_verified"
    MEETUP_ORGANIZER = "meetup_organizer"


class ProfileVisibility(str, Enum):
    PUBLIC = "public"
    VERIFIED_MEMBERS = "verified_members"
    PRIVATE = "private"


class SubscriptionTier(str, Enum):
    FREE = "free"
    PREMIUM = "premium"


class BackgroundCheckStatus(str, Enum):
    NOT_STARTED = "not_started"
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class LossCategory(str, Enum):
    SPOUSE_PARTNER = "spouse_partner"
    PARENT = "parent"
    CHILD = "child"
    SIBLING = "sibling"
    FRIEND = "friend"
    PET = "pet"
    PREGNANCY_INFANT = "pregnancy_infant"
    SUICIDE = "suicide"
    OVERDOSE = "overdose"
    TERMINAL_ILLNESS = "terminal_illness"
    SUDDEN_LOSS = "sudden_loss"
    GENERAL = "general"


class MeetupFormat(str, Enum):
    IN_PERSON = "in_person"
    VIRTUAL = "virtual"
    HYBRID = "hybrid"


class MeetupStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    CANCELLED = "cancelled"
    COMPLETED = "completed"


class RsvpStatus(str, Enum):
    ATTENDING = "attending"
    MAYBE = "maybe"
    DECLINED = "declined"
    WAITLIST = "waitlist"


class ConnectionStatus(str, Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    DECLINED = "declined"


class ConnectionTab(str, Enum):
    CONNECTIONS = "connections"
    RECEIVED = "received"
    SENT = "sent"


class ServiceLinkType(str, Enum):
    GOFUNDME = "gofundme"
    MEMORIAL_FUND = "memorial_fund"
    FUNERAL_SERVICE = "funeral_service"
    CHARITY = "charity"


class ProductType(str, Enum):
    ICON = "icon"
    IMAGE = "image"
    CARD = "card"
    KEEPSAKE = "keepsake"


class ProductStatus(str, Enum):
    ACTIVE = "active"
    DRAFT = "draft"
    ARCHIVED = "archived"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    FAILED = "failed"
    REFUNDED = "refunded"


class FulfillmentStatus(str, Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    FAILED = "failed"


class OrganizerApplicationStatus(str, Enum):
    PENDING_PAYMENT = "pending_payment"
    PAYMENT_COMPLETE = "payment_complete"
    UNDER_REVIEW = "under_review"
    APPROVED = "approved"
    REJECTED = "rejected"


class ReviewStatus(str, Enum):
    """Background checks and verification requests share this lifecycle."""

    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VerificationRequestType(str, Enum):
    ID_VERIFICATION = "id_verification"
    MEETUP_ORGANIZER = "meetup_organizer"


class SponsorTier(str, Enum):
    PLATINUM = "platinum"
    GOLD = "gold"
    SILVER = "silver"
    BRONZE = "bronze"
    COMMUNITY = "community"


class SponsorStatus(str, Enum):
    PENDING = "pending"
    ACTIVE = "active"
    PAUSED = "paused"
    EXPIRED = "expired"


class PlacementLocation(str, Enum):
    HOMEPAGE_BANNER = "homepage_banner"
    RESOURCES_SIDEBAR = "resources_sidebar"
    FORUMS_BANNER = "forums_banner"
    MEETUPS_SIDEBAR = "meetups_sidebar"
    NEWSLETTER = "newsletter"
    SPONSORS_PAGE = "sponsors_page"


class InquiryStatus(str, Enum):
    NEW = "new"
    CONTACTED = "contacted"
    NEGOTIATING = "negotiating"
    CONVERTED = "converted"
    DECLINED = "declined"


class ReportType(str, Enum):
    SPAM = "spam"
    HARASSMENT = "harassment"
    HATE_SPEECH = "hate_speech"
    INAPPROPRIATE_CONTENT = "inappropriate_content"
    IMPERSONATION = "impersonation"
    SCAM = "scam"
    SELF_HARM = "self_harm"
    MISINFORMATION = "misinformation"
    OTHER = "other"


class ReportStatus(str, Enum):
    PENDING = "pending"
    UNDER_REVIEW = "under_review"
    RESOLVED_ACTION_TAKEN = "resolved_action_taken"
    RESOLVED_NO_ACTION = "resolved_no_action"
    DISMISSED = "dismissed"


class ReportableType(str, Enum):
    USER = "user"
    POST = "post"
    MESSAGE = "message"
    MEMORIAL = "memorial"
    TRIBUTE = "tribute"
    MEETUP = "meetup"
    COMMENT = "comment"


class SuggestionStatus(str, Enum):
    SUBMITTED = "submitted"
    UNDER_REVIEW = "under_review"
    PLANNED = "planned"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DECLINED = "declined"


class SuggestionPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class SuggestionCategory(str, Enum):
    MEMORIALS = "memorials"
    FORUMS = "forums"
    MEETUPS = "meetups"
    MESSAGING = "messaging"
    RESOURCES = "resources"
    STORE = "store"
    GENERAL = "general"
    OTHER = "other"


class ResourceType(str, Enum):
    ARTICLE = "article"
    HOTLINE = "hotline"
    ORGANIZATION = "organization"
    BOOK = "book"
    VIDEO = "video"
    PODCAST = "podcast"
    GUIDE = "guide"


class ResourceCategory(str, Enum):
    UNDERSTANDING_GRIEF = "understanding_grief"
    COPING_STRATEGIES = "coping_strategies"
    SELF_CARE = "self_care"
    SUPPORTING_OTHERS = "supporting_others"
    CHILDREN_GRIEF = "children_grief"
    COMPLICATED_GRIEF = "complicated_grief"
    SUICIDE_LOSS = "suicide_loss"
    SUBSTANCE_LOSS = "substance_loss"
    PET_LOSS = "pet_loss"
    PREGNANCY_LOSS = "pregnancy_loss"
    CRISIS_SUPPORT = "crisis_support"
    PROFESSIONAL_HELP = "professional_help"
    SPIRITUALITY = "spirituality"
    MEMORIAL_PLANNING = "memorial_planning"
