from __future__ import annotations

from weather_dashboard.schemas.dashboard import CityCard, DashboardView, DetailsView, Page
from weather_dashboard.schemas.weather import Coordinate, GeocodeResult, WeatherSnapshot

__all__ = ["CityCard", "Coordinate", "DashboardView", "DetailsView", "GeocodeResult", "Page", "WeatherSnapshot"]
