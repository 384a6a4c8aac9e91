# mainstreet_admin/api/v1/endpoints/analytics.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from mainstreet_admin.db.session import get_db
from mainstreet_admin.schemas.dashboard import (
    BusinessCheckins,
    EventCheckins,
    RedemptionTrend,
    RsvpTrend,
    SurveyResponseDistribution,
)
from mainstreet_admin.services import dashboard

router = APIRouter()

@router.get("/checkins-by-business", response_model=List[BusinessCheckins])
def checkins_by_business(db: Session = Depends(get_db)):
    return dashboard.get_checkins_by_business(db)

@router.get("/checkins-by-event", response_model=List[EventCheckins])
def checkins_by_event(db: Session = Depends(get_db)):
    return dashboard.get_checkins_by_event(db)

@router.get("/event-rsvp-trends", response_model=List[RsvpTrend])
def event_rsvp_trends(db: Session = Depends(get_db)):
    return dashboard.get_event_rsvp_trends(db)

@router.get("/reward-redemption-trends", response_model=List[RedemptionTrend])
def reward_redemption_trends(db: Session = Depends(get_db)):
    return dashboard.get_reward_redemption_trends(db)

@router.get("/survey-response-distribution", response_model=List[SurveyResponseDistribution])
def survey_response_distribution(db: Session = Depends(get_db)):
    return dashboard.get_survey_response_distribution(db)
