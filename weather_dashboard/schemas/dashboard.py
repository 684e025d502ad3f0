from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class Page(str, Enum):
    LANDING = "landing"
    DETAILS = "details"


class CityCard(BaseModel):
    city: str
    flag: str
    icon: str
    description: str
    temperature: str = Field(..., description='Rounded temperature, e.g. "12°C", or "--".')
    available: bool = True


class ForecastDayCard(BaseModel):
    day_name: str
    date: str
    icon: str
    description: str
    max_temp: int | None = None
    min_temp: int | None = None
    temperature_range: str = Field(..., description='e.g. "10° / 3°"; a missing value shows as "--".')


class AlertBanner(BaseModel):
    active: bool
    message: str


class DetailsView(BaseModel):
    city: str
    temperature: int
    icon: str
    description: str
    humidity: str
    wind_speed: str
    sunrise: str
    sunset: str
    alert: AlertBanner
    forecast: list[ForecastDayCard] = Field(default_factory=list)


class NotificationView(BaseModel):
    message: str
    is_error: bool = True


class DashboardView(BaseModel):
    page: Page
    cards: list[CityCard] = Field(default_factory=list)
    details: DetailsView | None = None
    notification: NotificationView | None = None


class SearchRequest(BaseModel):
    query: str
