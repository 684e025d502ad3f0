from __future__ import annotations

import logging
from typing import Any

from weather_dashboard.core.config import get_settings
from weather_dashboard.core.exceptions import FetchError, NormalizationError
from weather_dashboard.core.http import fetch_json, get_http_client
from weather_dashboard.schemas.weather import Coordinate, WeatherSnapshot
from weather_dashboard.services.weather.alerts import build_alert_source
from weather_dashboard.services.weather.normalizer import normalize


logger = logging.getLogger(__name__)


def build_forecast_params(coordinate: Coordinate, *, forecast_days: int) -> dict[str, Any]:
    return {
        "latitude": coordinate.latitude,
        "longitude": coordinate.longitude,
        "daily": ",".join(
            [
                "weather_code",
                "temperature_2m_max",
                "temperature_2m_min",
                "sunrise",
                "sunset",
            ]
        ),
        "current": ",".join(
            [
                "temperature_2m",
                "relative_humidity_2m",
                "wind_speed_10m",
                "weather_code",
            ]
        ),
        "timezone": "auto",
        "forecast_days": forecast_days,
        "temperature_unit": "celsius",
        "wind_speed_unit": "kmh",
    }


async def fetch_snapshot(city: str, coordinate: Coordinate) -> WeatherSnapshot:
    client = get_http_client()
    settings = get_settings()
    params = build_forecast_params(coordinate, forecast_days=settings.forecast_days)

    try:
        raw = await fetch_json(
            client,
            settings.open_meteo_url,
            params=params,
            max_retries=settings.http_retries,
            backoff_seconds=settings.http_retry_backoff_seconds,
            max_backoff_seconds=settings.http_retry_max_backoff_seconds,
        )
    except FetchError as exc:
        logger.warning(
            "Weather transport failure for %s after %d attempts (last status %s): %s",
            city,
            exc.attempts,
            exc.last_status,
            exc.reason,
        )
        raise

    try:
        return normalize(
            city,
            raw,
            alert_source=build_alert_source(settings),
            horizon=settings.forecast_days,
        )
    except NormalizationError as exc:
        logger.warning("Weather provider returned no usable data for %s: %s", city, exc.reason)
        raise
