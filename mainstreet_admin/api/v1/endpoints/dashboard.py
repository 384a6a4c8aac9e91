# mainstreet_admin/api/v1/endpoints/dashboard.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
from mainstreet_admin.db.session import get_db
from mainstreet_admin.schemas.dashboard import ActivityItem, DashboardStats
from mainstreet_admin.services import dashboard

router = APIRouter()

@router.get("/stats", response_model=DashboardStats)
def get_dashboard_stats(db: Session = Depends(get_db)):
    return dashboard.get_dashboard_stats(db)

@router.get("/recent-activity", response_model=List[ActivityItem])
def get_recent_activity(db: Session = Depends(get_db)):
    return dashboard.get_recent_activity(db)
