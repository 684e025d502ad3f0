from fastapi import APIRouter, Depends, Query

from weather_dashboard.api.deps import get_client
from weather_dashboard.core.config import Settings, get_settings
from weather_dashboard.core.exceptions import ProxyError
from weather_dashboard.services.weather.proxy import fetch_provider_weather


router = APIRouter()


@router.get("/weather")
async def provider_weather(
    location: str | None = Query(None),
    settings: Settings = Depends(get_settings),
    client=Depends(get_client),
):
    if not location or not location.strip():
        raise ProxyError(400, "Location query parameter is required.")
    return await fetch_provider_weather(client, settings, location.strip())
