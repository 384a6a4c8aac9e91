from fastapi import APIRouter, Depends
from mainstreet_admin.api import deps
from mainstreet_admin.api.v1.endpoints import auth, businesses, events, rewards, surveys, dashboard, analytics

admin_only = [Depends(deps.get_current_admin)]

api_router = APIRouter()
api_router.include_router(auth.router, prefix="/auth", tags=["auth"])
api_router.include_router(businesses.router, prefix="/businesses", tags=["businesses"], dependencies=admin_only)
api_router.include_router(events.router, prefix="/events", tags=["events"], dependencies=admin_only)
api_router.include_router(rewards.router, prefix="/rewards", tags=["rewards"], dependencies=admin_only)
api_router.include_router(surveys.router, prefix="/surveys", tags=["surveys"], dependencies=admin_only)
api_router.include_router(dashboard.router, prefix="/dashboard", tags=["dashboard"], dependencies=admin_only)
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"], dependencies=admin_only)
