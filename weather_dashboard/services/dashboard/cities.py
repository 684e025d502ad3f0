from __future__ import annotations

from dataclasses import dataclass

from weather_dashboard.schemas.weather import Coordinate


@dataclass(frozen=True)
class FeaturedCity:
    name: str
    coordinate: Coordinate
    flag: str


FEATURED_CITIES: tuple[FeaturedCity, ...] = (
    FeaturedCity("London", Coordinate(latitude=51.5074, longitude=0.1278), "🇬🇧"),
    FeaturedCity("Paris", Coordinate(latitude=48.8566, longitude=2.3522), "🇫🇷"),
    FeaturedCity("Tokyo", Coordinate(latitude=35.6895, longitude=139.6917), "🇯🇵"),
    FeaturedCity("New York", Coordinate(latitude=40.7128, longitude=-74.0060), "🇺🇸"),
    FeaturedCity("Dubai", Coordinate(latitude=25.2048, longitude=55.2708), "🇦🇪"),
)
