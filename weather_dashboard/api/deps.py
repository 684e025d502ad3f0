from __future__ import annotations

import httpx
from fastapi import Request

from weather_dashboard.core.http import get_http_client
from weather_dashboard.services.dashboard.session import DashboardSession


async def get_client() -> httpx.AsyncClient:
    return get_http_client()


async def get_dashboard(request: Request) -> DashboardSession:
    return request.app.state.dashboard
