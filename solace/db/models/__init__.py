from solace.db.models.profile import Profile
from solace.db.models.memorial import Memorial, MemorialCandle, MemorialTribute, MemorialStoreItem
from solace.db.models.meetup import Meetup, MeetupRsvp
from solace.db.models.forum import ForumCategory, ForumTopic, ForumPost, ForumSubscription, ForumPostLike
from solace.db.models.messaging import Conversation, ConversationParticipant, Message
from solace.db.models.store import StoreProduct, StoreOrder, StoreOrderItem
from solace.db.models.verification import VerificationRequest, OrganizerApplication, BackgroundCheckApplication
from solace.db.models.sponsor import Sponsor, AdPlacement, AdImpression, AdvertisingInquiry
from solace.db.models.moderation import Report, FeatureSuggestion, SuggestionUpvote
from solace.db.models.resource import Resource, ResourceSubmission
from solace.db.models.billing import StripeEvent, StripeSubscription
from solace.db.models.connection import UserConnection

__all__ = [
    "Profile",
    "Memorial",
    "MemorialTribute",
    "MemorialCandle",
    "MemorialStoreItem",
    "Meetup",
    "MeetupRsvp",
    "ForumCategory",
    "ForumTopic",
    "ForumPost",
    "ForumSubscription",
    "ForumPostLike",
    "Conversation",
    "ConversationParticipant",
    "Message",
    "StoreProduct",
    "StoreOrder",
    "StoreOrderItem",
    "VerificationRequest",
    "OrganizerApplication",
    "BackgroundCheckApplication",
    "Sponsor",
    "AdPlacement",
    "AdImpression",
    "AdvertisingInquiry",
    "Report",
    "FeatureSuggestion",
    "SuggestionUpvote",
    "Resource",
    "ResourceSubmission",
    "StripeEvent",
    "StripeSubscription",
    "UserConnection",
]
