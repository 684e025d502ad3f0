from __future__ import annotations

from typing import Any

from weather_dashboard.core.exceptions import NormalizationError
from weather_dashboard.schemas.weather import DailyForecast, WeatherSnapshot
from weather_dashboard.services.weather.alerts import AlertSource
from weather_dashboard.services.weather.codes import describe


CURRENT_FIELDS = ("temperature_2m", "relative_humidity_2m", "wind_speed_10m")
DAILY_FIELDS = ("weather_code", "temperature_2m_max", "temperature_2m_min", "sunrise", "sunset")


def _daily_series(daily: dict[str, Any], key: str, length: int) -> list[Any]:
    series = daily.get(key)
    if not isinstance(series, list) or len(series) < length:
        raise NormalizationError(f"daily.{key} is missing or shorter than daily.time")
    return series


def normalize(
    city: str,
    raw: Any,
    *,
    alert_source: AlertSource | None = None,
    horizon: int | None = None,
) -> WeatherSnapshot:
    """Map an Open-Meteo forecast payload onto a ``WeatherSnapshot``.

    Error payloads (a ``reason`` field) and payloads without both the
    ``current`` and ``daily`` sections raise ``NormalizationError``. Values
    are passed through unrounded.
    """
    if not isinstance(raw, dict):
        raise NormalizationError("response is not a JSON object")
    if raw.get("reason"):
        raise NormalizationError(str(raw["reason"]))

    current = raw.get("current")
    daily = raw.get("daily")
    if not isinstance(current, dict) or not isinstance(daily, dict):
        raise NormalizationError("No data available")

    missing = [name for name in CURRENT_FIELDS if current.get(name) is None]
    if missing:
        raise NormalizationError(f"current is missing {', '.join(missing)}")

    times = daily.get("time")
    if not isinstance(times, list) or not times:
        raise NormalizationError("daily.time is missing or empty")
    if horizon is not None and len(times) != horizon:
        raise NormalizationError(f"expected {horizon} forecast days, got {len(times)}")

    series = {key: _daily_series(daily, key, len(times)) for key in DAILY_FIELDS}

    try:
        forecast = [
            DailyForecast(
                date=str(day),
                max_temp_c=series["temperature_2m_max"][i],
                min_temp_c=series["temperature_2m_min"][i],
                condition_code=series["weather_code"][i],
            )
            for i, day in enumerate(times)
        ]
    except ValueError as exc:
        # pydantic.ValidationError subclasses ValueError
        raise NormalizationError(f"malformed daily series: {exc}") from exc

    code = current.get("weather_code")
    condition = describe(code)
    alert = alert_source.draw(city) if alert_source is not None else None

    try:
        return WeatherSnapshot(
            city=city,
            temperature_c=current["temperature_2m"],
            humidity_pct=current["relative_humidity_2m"],
            wind_speed_kmh=current["wind_speed_10m"],
            condition_code=code if isinstance(code, int) and not isinstance(code, bool) else None,
            condition_description=condition.description,
            condition_icon=condition.icon,
            sunrise=str(series["sunrise"][0]),
            sunset=str(series["sunset"][0]),
            daily_forecast=forecast,
            alert=alert,
        )
    except ValueError as exc:
        raise NormalizationError(f"malformed current conditions: {exc}") from exc
