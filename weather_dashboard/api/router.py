from fastapi import APIRouter

from weather_dashboard.api.endpoints.dashboard import router as dashboard_router
from weather_dashboard.api.endpoints.weather import router as weather_router


api_router = APIRouter()
api_router.include_router(weather_router, tags=["weather"])
api_router.include_router(dashboard_router, prefix="/dashboard", tags=["dashboard"])
