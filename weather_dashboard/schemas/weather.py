from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)


class ConditionInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    icon: str


class DailyForecast(BaseModel):
    date: str = Field(..., description="ISO date of the forecast day.")
    max_temp_c: float | None = Field(None, description="Null when the provider has no value.")
    min_temp_c: float | None = Field(None, description="Null when the provider has no value.")
    condition_code: int | None = Field(None, description="Open-Meteo weather code.")


class WeatherSnapshot(BaseModel):
    city: str
    temperature_c: float = Field(..., description="Air temperature (C), unrounded.")
    humidity_pct: float = Field(..., description="Relative humidity (%).")
    wind_speed_kmh: float = Field(..., description="Wind speed (km/h).")
    condition_code: int | None = None
    condition_description: str
    condition_icon: str
    sunrise: str = Field(..., description="Today's sunrise, ISO 8601.")
    sunset: str = Field(..., description="Today's sunset, ISO 8601.")
    daily_forecast: list[DailyForecast] = Field(default_factory=list)
    alert: str | None = None


class GeocodeResult(BaseModel):
    name: str
    country: str | None = None
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)

    @property
    def display_name(self) -> str:
        return f"{self.name}, {self.country}" if self.country else self.name

    @property
    def coordinate(self) -> Coordinate:
        return Coordinate(latitude=self.latitude, longitude=self.longitude)
