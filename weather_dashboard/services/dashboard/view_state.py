"""Page state and the transitions between the landing and details pages.

``AppState`` is an immutable value. Every transition takes the current state
and returns a new one, so the controller can be exercised without any
rendering surface or HTTP layer.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass, field, replace
from typing import Awaitable, Callable, Iterable, Mapping, Optional

from weather_dashboard.core.exceptions import FetchError, GeocodingError, NormalizationError
from weather_dashboard.schemas.dashboard import Page
from weather_dashboard.schemas.weather import Coordinate, GeocodeResult, WeatherSnapshot
from weather_dashboard.services.dashboard.cities import FEATURED_CITIES, FeaturedCity


logger = logging.getLogger(__name__)

SnapshotFetcher = Callable[[str, Coordinate], Awaitable[WeatherSnapshot]]
Geocoder = Callable[[str], Awaitable[Optional[GeocodeResult]]]

# Transport and domain failures look the same to the user.
FETCH_FAILURES = (FetchError, NormalizationError)


@dataclass(frozen=True)
class CityEntry:
    city: FeaturedCity
    snapshot: WeatherSnapshot | None = None


@dataclass(frozen=True)
class Notification:
    message: str
    expires_at: float
    is_error: bool = True

    def expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass(frozen=True)
class AppState:
    page: Page = Page.LANDING
    cities: Mapping[str, CityEntry] = field(default_factory=dict)
    details: WeatherSnapshot | None = None
    notification: Notification | None = None


def could_not_fetch_message(city: str) -> str:
    return f"Could not fetch weather for {city}. Please check the location."


class ViewStateController:
    def __init__(
        self,
        *,
        fetch_snapshot: SnapshotFetcher,
        geocode: Geocoder,
        clock: Callable[[], float] = time.time,
        notification_ttl_seconds: float = 4.0,
    ) -> None:
        self._fetch_snapshot = fetch_snapshot
        self._geocode = geocode
        self._clock = clock
        self._notification_ttl = notification_ttl_seconds

    def now(self) -> float:
        return self._clock()

    def initial_state(self, cities: Iterable[FeaturedCity] = FEATURED_CITIES) -> AppState:
        return AppState(cities={c.name: CityEntry(city=c) for c in cities})

    def notify(self, state: AppState, message: str, *, is_error: bool = True) -> AppState:
        notification = Notification(
            message=message,
            expires_at=self.now() + self._notification_ttl,
            is_error=is_error,
        )
        return replace(state, notification=notification)

    def dismiss_expired(self, state: AppState, now: float | None = None) -> AppState:
        if state.notification is None:
            return state
        if state.notification.expired(self.now() if now is None else now):
            return replace(state, notification=None)
        return state

    async def _fetch_or_none(self, city: FeaturedCity) -> WeatherSnapshot | None:
        try:
            return await self._fetch_snapshot(city.name, city.coordinate)
        except FETCH_FAILURES as exc:
            logger.info("Rendering placeholder card for %s: %s", city.name, exc)
            return None

    async def load_landing(self, state: AppState) -> AppState:
        """Fetch every featured city concurrently and wait for all of them.

        A failing city does not abort its siblings; it just ends up without a
        snapshot and renders as a placeholder card.
        """
        entries = list(state.cities.values())
        snapshots = await asyncio.gather(*(self._fetch_or_none(entry.city) for entry in entries))
        cities = {
            entry.city.name: replace(entry, snapshot=snapshot)
            for entry, snapshot in zip(entries, snapshots)
        }
        return replace(state, page=Page.LANDING, cities=cities)

    async def select_city(self, state: AppState, name: str) -> AppState:
        entry = state.cities.get(name)
        if entry is None:
            return self.notify(state, f'City "{name}" is not on the dashboard.')

        if entry.snapshot is not None:
            return replace(state, page=Page.DETAILS, details=entry.snapshot)

        try:
            snapshot = await self._fetch_snapshot(entry.city.name, entry.city.coordinate)
        except FETCH_FAILURES:
            return self.notify(state, could_not_fetch_message(name))

        cities = {**state.cities, name: replace(entry, snapshot=snapshot)}
        return replace(state, page=Page.DETAILS, cities=cities, details=snapshot)

    async def search(self, state: AppState, query: str) -> AppState:
        location = query.strip()
        if not location:
            return state

        try:
            match = await self._geocode(location)
        except GeocodingError:
            return self.notify(state, f"Failed to process search for {location}.")
        if match is None:
            return self.notify(state, f'Location "{location}" not found.')

        city = match.display_name
        try:
            snapshot = await self._fetch_snapshot(city, match.coordinate)
        except FETCH_FAILURES:
            return self.notify(state, could_not_fetch_message(city))
        return replace(state, page=Page.DETAILS, details=snapshot)

    def back(self, state: AppState) -> AppState:
        return replace(state, page=Page.LANDING)
