# mainstreet_admin/services/dashboard.py

from datetime import date, datetime
from typing import List, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from mainstreet_admin.models.business import Business
from mainstreet_admin.models.checkin import Checkin
from mainstreet_admin.models.event import Event
from mainstreet_admin.models.reward import RewardItem, RewardRedemption
from mainstreet_admin.models.survey import Survey, SurveyResponse
from mainstreet_admin.schemas.dashboard import (
    ActivityItem,
    BusinessCheckins,
    DashboardStats,
    EventCheckins,
    RedemptionTrend,
    RsvpTrend,
    SurveyResponseDistribution,
)

RECENT_PER_KIND = 3
MAX_RECENT_ACTIVITY = 10


def _day(value: Union[str, date, datetime]) -> str:
    # SQLite returns DATE() as text, PostgreSQL as a date
    if isinstance(value, (date, datetime)):
        return value.isoformat()[:10]
    return str(value)


def get_dashboard_stats(db: Session) -> DashboardStats:
    return DashboardStats(
        total_checkins=db.query(func.count(Checkin.id)).scalar() or 0,
        active_events=db.query(func.count(Event.id)).filter(Event.status == "upcoming").scalar() or 0,
        survey_responses=db.query(func.count(SurveyResponse.id)).scalar() or 0,
        rewards_redeemed=db.query(func.count(RewardRedemption.id)).scalar() or 0,
    )


def get_recent_activity(db: Session) -> List[ActivityItem]:
    """
    Merge the newest events, reward items and surveys into one activity feed.
    Rows without a creation timestamp are skipped.
    """
    activities = []

    recent_events = db.query(Event).order_by(Event.created_at.desc(), Event.id.desc()).limit(RECENT_PER_KIND).all()
    for event in recent_events:
        if event.created_at:
            activities.append(ActivityItem(
                type="event",
                description=f"New event created: {event.name}",
                timestamp=event.created_at,
                icon="calendar",
            ))

    recent_rewards = db.query(RewardItem).order_by(RewardItem.created_at.desc(), RewardItem.id.desc()).limit(RECENT_PER_KIND).all()
    for reward in recent_rewards:
        if reward.created_at:
            activities.append(ActivityItem(
                type="reward",
                description=f"New reward added: {reward.name} - {reward.point_threshold} points",
                timestamp=reward.created_at,
                icon="gift",
            ))

    recent_surveys = db.query(Survey).order_by(Survey.created_at.desc(), Survey.id.desc()).limit(RECENT_PER_KIND).all()
    for survey in recent_surveys:
        if survey.created_at:
            activities.append(ActivityItem(
                type="survey",
                description=f"New survey created: {survey.title}",
                timestamp=survey.created_at,
                icon="vote",
            ))

    activities.sort(key=lambda item: item.timestamp, reverse=True)
    return activities[:MAX_RECENT_ACTIVITY]


def get_checkins_by_business(db: Session) -> List[BusinessCheckins]:
    checkin_count = func.count(Checkin.id)
    rows = db.query(Business.name, checkin_count).\
        join(Checkin, Checkin.business_id == Business.id).\
        group_by(Business.name).\
        order_by(checkin_count.desc()).\
        all()
    return [BusinessCheckins(business_name=name, checkins=count) for name, count in rows]


def get_checkins_by_event(db: Session) -> List[EventCheckins]:
    checkin_count = func.count(Checkin.id)
    rows = db.query(Event.name, checkin_count).\
        join(Checkin, Checkin.event_id == Event.id).\
        group_by(Event.name).\
        order_by(checkin_count.desc()).\
        all()
    return [EventCheckins(event_name=name, checkins=count) for name, count in rows]


def get_event_rsvp_trends(db: Session) -> List[RsvpTrend]:
    event_day = func.date(Event.date)
    rows = db.query(event_day, func.sum(Event.rsvp_count)).\
        group_by(event_day).\
        order_by(event_day).\
        all()
    return [RsvpTrend(date=_day(day), rsvps=int(total or 0)) for day, total in rows]


def get_reward_redemption_trends(db: Session) -> List[RedemptionTrend]:
    redemption_day = func.date(RewardRedemption.created_at)
    rows = db.query(redemption_day, func.count(RewardRedemption.id)).\
        group_by(redemption_day).\
        order_by(redemption_day).\
        all()
    return [RedemptionTrend(date=_day(day), redemptions=count) for day, count in rows]


def get_survey_response_distribution(db: Session) -> List[SurveyResponseDistribution]:
    response_count = func.count(SurveyResponse.id)
    rows = db.query(Survey.title, response_count).\
        join(SurveyResponse, SurveyResponse.survey_id == Survey.id).\
        group_by(Survey.title).\
        order_by(response_count.desc()).\
        all()
    return [SurveyResponseDistribution(survey_title=title, responses=count) for title, count in rows]
