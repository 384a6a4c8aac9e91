# mainstreet_admin/schemas/dashboard.py

from typing import Literal
from datetime import datetime
from mainstreet_admin.schemas.base import CamelModel

class DashboardStats(CamelModel):
    total_checkins: int
    active_events: int
    survey_responses: int
    rewards_redeemed: int

class ActivityItem(CamelModel):
    type: Literal["event", "reward", "survey"]
    description: str
    timestamp: datetime
    icon: str

class BusinessCheckins(CamelModel):
    business_name: str
    checkins: int

class EventCheckins(CamelModel):
    event_name: str
    checkins: int

class RsvpTrend(CamelModel):
    date: str
    rsvps: int

class RedemptionTrend(CamelModel):
    date: str
    redemptions: int

class SurveyResponseDistribution(CamelModel):
    survey_title: str
    responses: int
