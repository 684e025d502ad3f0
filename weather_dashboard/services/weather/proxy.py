from __future__ import annotations

import logging
from typing import Any

import httpx

from weather_dashboard.core.config import Settings
from weather_dashboard.core.exceptions import ConfigurationError, ProxyError


logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "Weather service is unavailable due to missing API Key configuration."
DEFAULT_FAILURE_MESSAGE = "Failed to fetch weather data."


def _upstream_message(resp: httpx.Response) -> str:
    try:
        body = resp.json()
    except ValueError:
        return DEFAULT_FAILURE_MESSAGE
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return DEFAULT_FAILURE_MESSAGE


async def fetch_provider_weather(client: httpx.AsyncClient, settings: Settings, location: str) -> Any:
    """Forward a location query to the keyed provider and return its raw JSON.

    The API key never leaves the server. Upstream failures surface as
    ``ProxyError`` carrying the upstream status where there is one.
    """
    if not settings.provider_configured:
        logger.error("Provider API key is not configured; set WEATHERDASH_PROVIDER_API_KEY")
        raise ConfigurationError(MISSING_KEY_MESSAGE)

    logger.info("Fetching weather for: %s", location)
    params = {"q": location, "appid": settings.provider_api_key, "units": "metric"}
    try:
        resp = await client.get(f"{settings.provider_base_url}/weather", params=params)
    except httpx.HTTPError as exc:
        logger.error("External API Error (500): %s", type(exc).__name__)
        raise ProxyError(500, DEFAULT_FAILURE_MESSAGE) from exc

    if not resp.is_success:
        message = _upstream_message(resp)
        logger.error("External API Error (%d): %s", resp.status_code, message)
        raise ProxyError(resp.status_code, message)

    try:
        return resp.json()
    except ValueError as exc:
        logger.error("External API Error (500): upstream body is not JSON")
        raise ProxyError(500, DEFAULT_FAILURE_MESSAGE) from exc
