from __future__ import annotations

import asyncio

from weather_dashboard.schemas.dashboard import DashboardView
from weather_dashboard.services.dashboard.rendering import render_view
from weather_dashboard.services.dashboard.view_state import AppState, ViewStateController


class DashboardSession:
    """Holds the process-wide dashboard state and applies transitions one at a time."""

    def __init__(self, controller: ViewStateController) -> None:
        self.controller = controller
        self._state = controller.initial_state()
        self._lock = asyncio.Lock()

    @property
    def state(self) -> AppState:
        return self._state

    def _render(self) -> DashboardView:
        now = self.controller.now()
        self._state = self.controller.dismiss_expired(self._state, now)
        return render_view(self._state, now=now)

    def view(self) -> DashboardView:
        return self._render()

    async def load_landing(self) -> DashboardView:
        async with self._lock:
            self._state = await self.controller.load_landing(self._state)
            return self._render()

    async def select_city(self, name: str) -> DashboardView:
        async with self._lock:
            self._state = await self.controller.select_city(self._state, name)
            return self._render()

    async def search(self, query: str) -> DashboardView:
        async with self._lock:
            self._state = await self.controller.search(self._state, query)
            return self._render()

    async def back(self) -> DashboardView:
        async with self._lock:
            self._state = self.controller.back(self._state)
            return self._render()
