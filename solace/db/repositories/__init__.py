# Repository per aggregate; services receive them through their constructors

from solace.db.repositories.billing_repository import StripeEventRepository, StripeSubscriptionRepository
from solace.db.repositories.connection_repository import UserConnectionRepository
from solace.db.repositories.forum_repository import (
    ForumCategoryRepository,
    ForumPostLikeRepository,
    ForumPostRepository,
    ForumSubscriptionRepository,
    ForumTopicRepository,
)
from solace.db.repositories.meetup_repository import MeetupRepository, MeetupRsvpRepository
from solace.db.repositories.memorial_repository import (
    MemorialCandleRepository,
    MemorialRepository,
    MemorialStoreItemRepository,
    MemorialTributeRepository,
)
from solace.db.repositories.messaging_repository import (
    ConversationParticipantRepository,
    ConversationRepository,
    MessageRepository,
)
from solace.db.repositories.moderation_repository import (
    ReportRepository,
    SuggestionRepository,
    SuggestionUpvoteRepository,
)
from solace.db.repositories.profile_repository import ProfileRepository
from solace.db.repositories.resource_repository import ResourceRepository, ResourceSubmissionRepository
from solace.db.repositories.sponsor_repository import (
    AdImpressionRepository,
    AdPlacementRepository,
    AdvertisingInquiryRepository,
    SponsorRepository,
)
from solace.db.repositories.store_repository import (
    StoreOrderItemRepository,
    StoreOrderRepository,
    StoreProductRepository,
)
from solace.db.repositories.verification_repository import (
    BackgroundCheckRepository,
    OrganizerApplicationRepository,
    VerificationRequestRepository,
)

__all__ = [
    "AdImpressionRepository",
    "AdPlacementRepository",
    "AdvertisingInquiryRepository",
    "BackgroundCheckRepository",
    "ConversationParticipantRepository",
    "ConversationRepository",
    "ForumCategoryRepository",
    "ForumPostLikeRepository",
    "ForumPostRepository",
    "ForumSubscriptionRepository",
    "ForumTopicRepository",
    "MeetupRepository",
    "MeetupRsvpRepository",
    "MemorialCandleRepository",
    "MemorialRepository",
    "MemorialStoreItemRepository",
    "MemorialTributeRepository",
    "MessageRepository",
    "OrganizerApplicationRepository",
    "ProfileRepository",
    "ReportRepository",
    "ResourceRepository",
    "ResourceSubmissionRepository",
    "SponsorRepository",
    "StoreOrderItemRepository",
    "StoreOrderRepository",
    "StoreProductRepository",
    "StripeEventRepository",
    "StripeSubscriptionRepository",
    "SuggestionRepository",
    "SuggestionUpvoteRepository",
    "UserConnectionRepository",
    "VerificationRequestRepository",
]
