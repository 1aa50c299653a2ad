"""Auth and profile request/response schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from solace.core.enums import ProfileVisibility


class RegisterRequest(BaseModel):
    email: EmailStr
    # bcrypt only looks at the first 72 bytes
    password: str = Field(..., min_length=8, max_length=72)
    full_name: str | None = Field(None, max_length=255)
    display_name: str | None = Field(None, max_length=120)


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"


class VerifyEmailRequest(BaseModel):
    token: str = Field(..., min_length=1)


class ProfilePublic(BaseModel):
    id: int
    display_name: str | None
    bio: str | None
    profile_image_url: str | None
    verification_status: str
    created_at: datetime

    model_config = {"from_attributes": True}


class ProfilePrivate(ProfilePublic):
    email: str
    full_name: str | None
    emergency_contact_name: str | None
    emergency_contact_phone: str | None
    emergency_contact_relationship: str | None
    email_verified_at: datetime | None
    id_verified_at: datetime | None
    meetup_organizer_verified_at: datetime | None
    is_admin: bool
    profile_visibility: str
    allow_messages: bool
    show_in_directory: bool
    subscription_tier: str
    subscription_status: str | None
    subscription_ends_at: datetime | None
    background_check_status: str


class ProfileUpdate(BaseModel):
    full_name: str | None = Field(None, max_length=255)
    display_name: str | None = Field(None, max_length=120)
    bio: str | None = Field(None, max_length=2000)
    profile_image_url: str | None = Field(None, max_length=500)
    emergency_contact_name: str | None = Field(None, max_length=255)
    emergency_contact_phone: str | None = Field(None, max_length=50)
    emergency_contact_relationship: str | None = Field(None, max_length=100)
    profile_visibility: ProfileVisibility | None = None
    allow_messages: bool | None = None
    show_in_directory: bool | None = None


class VerificationLevelInfo(BaseModel):
    status: str
    label: str
    description: str
    badge: str
    can_browse: bool
    can_post: bool
    can_message: bool
    can_join_meetups: bool
    can_create_meetups: bool
    next_step: str | None


class BackgroundCheckState(BaseModel):
    status: str
    approved_at: datetime | None
    expires_at: datetime | None
    is_expired: bool
    notes: str | None


class AccountStatus(BaseModel):
    verification: VerificationLevelInfo
    is_premium: bool
    subscription_status: str | None
    subscription_ends_at: datetime | None
    background_check: BackgroundCheckState
    can_host_gatherings: bool


class VerificationRequestCreate(BaseModel):
    full_name: str = Field(..., min_length=1, max_length=255)
    reason: str = Field(..., min_length=1, max_length=2000)
    about_me: str | None = Field(None, max_length=2000)


class VerificationRequestResponse(BaseModel):
    id: int
    user_id: int
    request_type: str
    status: str
    submitted_info: dict | None
    reviewed_at: datetime | None
    rejection_reason: str | None
    created_at: datetime

    model_config = {"from_attributes": True}


class VerificationReject(BaseModel):
    reason: str = Field(..., min_length=1)
    admin_notes: str | None = None


class VerificationApprove(BaseModel):
    admin_notes: str | None = None
