"""Meetup and RSVP schemas."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator

from solace.core.enums import LossCategory, MeetupFormat, MeetupStatus, RsvpStatus


class MeetupFields(BaseModel):
    description: str | None = None
    loss_categories: list[LossCategory] | None = None
    timezone: str | None = Field(None, max_length=64)
    location_name: str | None = Field(None, max_length=255)
    location_address: str | None = Field(None, max_length=255)
    location_city: str | None = Field(None, max_length=120)
    location_state: str | None = Field(None, max_length=120)
    location_zip: str | None = Field(None, max_length=20)
    location_country: str | None = Field(None, min_length=2, max_length=2)
    location_lat: float | None = None
    location_lng: float | None = None
    virtual_link: str | None = Field(None, max_length=500)
    virtual_platform: str | None = Field(None, max_length=50)
    max_attendees: int | None = Field(None, ge=1)
    requires_approval: bool | None = None
    registration_deadline: datetime | None = None
    cover_image_url: str | None = Field(None, max_length=500)
    tags: list[str] | None = None


class MeetupCreate(MeetupFields):
    title: str = Field(..., min_length=3, max_length=255)
    description: str = Field(..., min_length=1)
    loss_categories: list[LossCategory] = Field(..., min_length=1)
    format: MeetupFormat
    start_time: datetime
    end_time: datetime
    publish: bool = False

    @model_validator(mode="after")
    def check_schedule_and_venue(self):
        if self.end_time <= self.start_time:
            raise ValueError("end_time must be after start_time")
        if self.format in (MeetupFormat.IN_PERSON, MeetupFormat.HYBRID) and not self.location_city:
            raise ValueError("location_city is required for in-person meetups")
        if self.format in (MeetupFormat.VIRTUAL, MeetupFormat.HYBRID) and not self.virtual_link:
            raise ValueError("virtual_link is required for virtual meetups")
        return self


class MeetupUpdate(MeetupFields):
    title: str | None = Field(None, min_length=3, max_length=255)
    format: MeetupFormat | None = None
    start_time: datetime | None = None
    end_time: datetime | None = None


class MeetupStatusChange(BaseModel):
    status: MeetupStatus


class MeetupResponse(BaseModel):
    id: int
    organizer_id: int
    title: str
    description: str
    loss_categories: list[str]
    format: str
    start_time: datetime
    end_time: datetime
    timezone: str
    location_name: str | None
    location_address: str | None
    location_city: str | None
    location_state: str | None
    location_zip: str | None
    location_country: str
    virtual_link: str | None
    virtual_platform: str | None
    max_attendees: int | None
    requires_approval: bool
    registration_deadline: datetime | None
    status: str
    attendee_count: int
    is_full: bool
    cover_image_url: str | None
    tags: list[str] | None
    created_at: datetime

    model_config = {"from_attributes": True}


class RsvpRequest(BaseModel):
    meetup_id: int
    status: RsvpStatus
    message: str | None = Field(None, max_length=1000)


class RsvpResponse(BaseModel):
    id: int
    meetup_id: int
    user_id: int
    status: str
    message: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class AttendeeResponse(BaseModel):
    rsvp_id: int
    user_id: int
    display_name: str | None
    status: str
    message: str | None
    emergency_contact_name: str | None
    emergency_contact_phone: str | None
    emergency_contact_relationship: str | None
    responded_at: datetime
