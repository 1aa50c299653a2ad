"""Resource library schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, model_validator

from solace.core.enums import ResourceCategory, ResourceType


class ResourceResponse(BaseModel):
    id: int
    title: str
    description: str
    content: str | None
    resource_type: str
    categories: list[str]
    tags: list[str] | None
    external_url: str | None
    phone_number: str | None
    is_24_7: bool
    author: str | None
    source: str | None
    is_featured: bool
    created_at: datetime

    model_config = {"from_attributes": True}


class ResourceSubmit(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    resource_type: ResourceType
    categories: list[ResourceCategory] = Field(..., min_length=1)
    external_url: str | None = None
    phone_number: str | None = None
    author: str | None = None
    source: str | None = None
    submitter_name: str = Field(..., min_length=1, max_length=255)
    submitter_email: EmailStr
    submitter_notes: str | None = None

    @model_validator(mode="after")
    def contact_point(self):
        if self.resource_type == ResourceType.HOTLINE:
            if not (self.phone_number or "").strip():
                raise ValueError("Phone number is required for hotlines")
        elif not (self.external_url or "").strip():
            raise ValueError("URL is required for this resource type")
        return self


class SubmissionResponse(BaseModel):
    id: int
    title: str
    description: str
    resource_type: str
    categories: list[str]
    external_url: str | None
    phone_number: str | None
    author: str | None
    source: str | None
    submitter_name: str
    submitter_email: str
    submitter_notes: str | None
    created_at: datetime

    model_config = {"from_attributes": True}
