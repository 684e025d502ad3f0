from __future__ import annotations

import logging

from pydantic import ValidationError

from weather_dashboard.core.config import get_settings
from weather_dashboard.core.exceptions import FetchError, GeocodingError
from weather_dashboard.core.http import fetch_json, get_http_client
from weather_dashboard.schemas.weather import GeocodeResult


logger = logging.getLogger(__name__)


async def geocode(name: str) -> GeocodeResult | None:
    """Resolve a free-text place name to its best match, or None when nothing matches."""
    name = name.strip()
    if not name:
        raise ValueError("name must not be blank")

    client = get_http_client()
    settings = get_settings()
    params = {"name": name, "count": 1, "language": "en", "format": "json"}

    try:
        data = await fetch_json(
            client,
            settings.geocoding_url,
            params=params,
            max_retries=settings.http_retries,
            backoff_seconds=settings.http_retry_backoff_seconds,
            max_backoff_seconds=settings.http_retry_max_backoff_seconds,
        )
    except FetchError as exc:
        logger.warning("Geocoding failed for %r: %s", name, exc.reason)
        raise GeocodingError(exc.reason) from exc

    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        return None

    try:
        return GeocodeResult.model_validate(results[0])
    except ValidationError as exc:
        raise GeocodingError(f"malformed geocoding result: {exc.error_count()} errors") from exc
