# mainstreet_admin/schemas/business.py

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from mainstreet_admin.schemas.base import CamelModel, reject_null

class BusinessBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_url: Optional[str] = None
    wait_time: Optional[int] = None
    hours: Optional[str] = None
    is_open: bool = True
    featured: bool = False
    active: bool = True

class BusinessCreate(BusinessBase):
    pass

class BusinessUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_url: Optional[str] = None
    wait_time: Optional[int] = None
    hours: Optional[str] = None
    is_open: Optional[bool] = None
    featured: Optional[bool] = None
    active: Optional[bool] = None

    @field_validator("name", "is_open", "featured", "active", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class Business(BusinessBase):
    id: int
    created_at: Optional[datetime] = None
