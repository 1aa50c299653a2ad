"""Memorial, tribute and memorial-gift schemas."""

from datetime import date, datetime

from pydantic import BaseModel, Field, model_validator

from solace.core.enums import LossCategory, ServiceLinkType


class ServiceLink(BaseModel):
    type: ServiceLinkType
    url: str = Field(..., min_length=1, max_length=500)
    label: str | None = Field(None, max_length=120)


class MemorialBase(BaseModel):
    middle_name: str | None = Field(None, max_length=120)
    nickname: str | None = Field(None, max_length=120)
    date_of_birth: date | None = None
    loss_type: LossCategory | None = None
    obituary: str | None = None
    life_story: str | None = None
    favorite_memory: str | None = None
    favorite_quote: str | None = None
    relationship_to_creator: str | None = Field(None, max_length=120)
    occupation: str | None = Field(None, max_length=120)
    hobbies: list[str] | None = None
    service_links: list[ServiceLink] | None = None
    is_public: bool = True
    allow_tributes: bool = True
    allow_photos: bool = True
    theme_id: str | None = Field(None, max_length=50)
    video_url: str | None = Field(None, max_length=500)


class MemorialCreate(MemorialBase):
    first_name: str = Field(..., min_length=1, max_length=120)
    last_name: str = Field(..., min_length=1, max_length=120)
    date_of_passing: date

    @model_validator(mode="after")
    def check_dates(self):
        if self.date_of_birth and self.date_of_birth > self.date_of_passing:
            raise ValueError("date_of_birth must be before date_of_passing")
        return self


class MemorialUpdate(BaseModel):
    first_name: str | None = Field(None, min_length=1, max_length=120)
    middle_name: str | None = Field(None, max_length=120)
    last_name: str | None = Field(None, min_length=1, max_length=120)
    nickname: str | None = Field(None, max_length=120)
    date_of_birth: date | None = None
    date_of_passing: date | None = None
    loss_type: LossCategory | None = None
    obituary: str | None = None
    life_story: str | None = None
    favorite_memory: str | None = None
    favorite_quote: str | None = None
    relationship_to_creator: str | None = Field(None, max_length=120)
    occupation: str | None = Field(None, max_length=120)
    hobbies: list[str] | None = None
    service_links: list[ServiceLink] | None = None
    is_public: bool | None = None
    allow_tributes: bool | None = None
    allow_photos: bool | None = None
    theme_id: str | None = Field(None, max_length=50)
    video_url: str | None = Field(None, max_length=500)
    slug: str | None = None


class MemorialResponse(BaseModel):
    id: int
    created_by: int
    slug: str
    name: str
    first_name: str
    middle_name: str | None
    last_name: str
    nickname: str | None
    date_of_birth: date | None
    date_of_passing: date
    loss_type: str | None
    obituary: str | None
    life_story: str | None
    favorite_memory: str | None
    favorite_quote: str | None
    relationship_to_creator: str | None
    occupation: str | None
    hobbies: list[str] | None
    service_links: list[dict] | None
    is_public: bool
    allow_tributes: bool
    allow_photos: bool
    theme_id: str | None
    video_url: str | None
    profile_photo_url: str | None
    cover_photo_url: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class SlugAvailability(BaseModel):
    slug: str
    valid: bool
    available: bool


class TributeCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class CandleCreate(BaseModel):
    message: str | None = Field(None, max_length=500)


class CandleResponse(BaseModel):
    id: int
    memorial_id: int
    lit_by: int
    lighter_name: str | None = None
    message: str | None
    expires_at: datetime
    created_at: datetime


class CandleList(BaseModel):
    burning_count: int
    candles: list[CandleResponse]


class TributeResponse(BaseModel):
    id: int
    memorial_id: int
    author_id: int
    author_name: str | None = None
    content: str
    created_at: datetime

    model_config = {"from_attributes": True}


class MemorialGiftResponse(BaseModel):
    id: int
    memorial_id: int
    purchaser_name: str
    dedication_message: str | None
    product_name: str
    product_type: str
    preview_image_url: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
