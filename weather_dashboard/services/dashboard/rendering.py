from __future__ import annotations

import math
from datetime import date, datetime

from weather_dashboard.schemas.dashboard import (
    AlertBanner,
    CityCard,
    DashboardView,
    DetailsView,
    ForecastDayCard,
    NotificationView,
    Page,
)
from weather_dashboard.schemas.weather import DailyForecast, WeatherSnapshot
from weather_dashboard.services.dashboard.view_state import AppState, CityEntry
from weather_dashboard.services.weather.codes import describe


PLACEHOLDER_ICON = "🌎"
PLACEHOLDER_DESCRIPTION = "Check now"
NO_ALERT_MESSAGE = "No active weather alerts for this location."


def round_half_up(value: float) -> int:
    # Built-in round() uses banker's rounding; the dashboard rounds .5 up.
    return math.floor(value + 0.5)


def format_time(timestamp: str) -> str:
    """Render an ISO 8601 timestamp as e.g. ``6:30 AM``."""
    try:
        moment = datetime.fromisoformat(timestamp)
    except ValueError:
        return timestamp
    hour = moment.hour % 12 or 12
    suffix = "AM" if moment.hour < 12 else "PM"
    return f"{hour}:{moment.minute:02d} {suffix}"


def day_name(iso_date: str) -> str:
    try:
        return date.fromisoformat(iso_date[:10]).strftime("%a")
    except ValueError:
        return iso_date


def render_city_card(entry: CityEntry) -> CityCard:
    snapshot = entry.snapshot
    if snapshot is None:
        return CityCard(
            city=entry.city.name,
            flag=entry.city.flag,
            icon=PLACEHOLDER_ICON,
            description=PLACEHOLDER_DESCRIPTION,
            temperature="--",
            available=False,
        )
    return CityCard(
        city=entry.city.name,
        flag=entry.city.flag,
        icon=snapshot.condition_icon or PLACEHOLDER_ICON,
        description=snapshot.condition_description,
        temperature=f"{round_half_up(snapshot.temperature_c)}°C",
    )


def _optional_round(value: float | None) -> int | None:
    return None if value is None else round_half_up(value)


def render_forecast_days(days: list[DailyForecast]) -> list[ForecastDayCard]:
    cards = []
    for day in days:
        condition = describe(day.condition_code)
        max_temp = _optional_round(day.max_temp_c)
        min_temp = _optional_round(day.min_temp_c)
        high = "--" if max_temp is None else max_temp
        low = "--" if min_temp is None else min_temp
        cards.append(
            ForecastDayCard(
                day_name=day_name(day.date),
                date=day.date,
                icon=condition.icon,
                description=condition.description,
                max_temp=max_temp,
                min_temp=min_temp,
                temperature_range=f"{high}° / {low}°",
            )
        )
    return cards


def render_details(snapshot: WeatherSnapshot) -> DetailsView:
    if snapshot.alert:
        alert = AlertBanner(active=True, message=f"🚨 ALERT: {snapshot.alert}")
    else:
        alert = AlertBanner(active=False, message=NO_ALERT_MESSAGE)

    return DetailsView(
        city=snapshot.city,
        temperature=round_half_up(snapshot.temperature_c),
        icon=snapshot.condition_icon,
        description=snapshot.condition_description,
        humidity=f"{round_half_up(snapshot.humidity_pct)}%",
        wind_speed=f"{snapshot.wind_speed_kmh:.1f} km/h",
        sunrise=format_time(snapshot.sunrise),
        sunset=format_time(snapshot.sunset),
        alert=alert,
        forecast=render_forecast_days(snapshot.daily_forecast),
    )


def render_view(state: AppState, *, now: float) -> DashboardView:
    notification = None
    if state.notification is not None and not state.notification.expired(now):
        notification = NotificationView(
            message=state.notification.message,
            is_error=state.notification.is_error,
        )

    if state.page is Page.DETAILS and state.details is not None:
        return DashboardView(
            page=Page.DETAILS,
            details=render_details(state.details),
            notification=notification,
        )

    return DashboardView(
        page=Page.LANDING,
        cards=[render_city_card(entry) for entry in state.cities.values()],
        notification=notification,
    )
