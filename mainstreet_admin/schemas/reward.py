# mainstreet_admin/schemas/reward.py

from pydantic import Field, field_validator
from typing import Optional
from datetime import datetime
from mainstreet_admin.schemas.base import CamelModel, reject_null

class RewardBase(CamelModel):
    name: str = Field(..., min_length=1)
    description: str
    point_threshold: int = Field(..., ge=1)
    expiration_date: Optional[datetime] = None
    active: bool = True
    business_id: Optional[int] = None

class RewardCreate(RewardBase):
    pass

class RewardUpdate(CamelModel):
    name: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    point_threshold: Optional[int] = Field(None, ge=1)
    expiration_date: Optional[datetime] = None
    active: Optional[bool] = None
    business_id: Optional[int] = None

    @field_validator("name", "description", "point_threshold", "active", mode="before")
    @classmethod
    def not_null(cls, value):
        return reject_null(value)

class Reward(RewardBase):
    id: int
    redeemed_count: int = 0
    created_at: Optional[datetime] = None
