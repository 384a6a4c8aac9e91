# mainstreet_admin/schemas/event.py

from pydantic import Field, field_validator
from typing import Optional, Literal
from datetime import datetime
from mainstreet_admin.schemas.base import CamelModel, reject_null

EventStatus = Literal["upcoming", "ongoing", "completed"]

class EventBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    date: datetime
    time: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    organizer_id: Optional[str] = None
    status: EventStatus = "upcoming"

class EventCreate(EventBase):
    pass

class EventUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    date: Optional[datetime] = None
    time: Optional[str] = Field(None, min_length=1)
    location: Optional[str] = Field(None, min_length=1)
    image_url: Optional[str] = None
    organizer_id: Optional[str] = None
    status: Optional[EventStatus] = None

    @field_validator("name", "date", "time", "location", "status", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class Event(EventBase):
    id: int
    rsvp_count: int = 0
    created_at: Optional[datetime] = None
