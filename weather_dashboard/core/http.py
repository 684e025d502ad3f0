from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Optional

import httpx

from weather_dashboard.core.config import Settings
from weather_dashboard.core.exceptions import FetchError


_client: Optional[httpx.AsyncClient] = None

Sleep = Callable[[float], Awaitable[Any]]


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    limits = httpx.Limits(max_keepalive_connections=20, max_connections=50)
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        timeout=timeout,
        limits=limits,
        headers={"User-Agent": "weather-dashboard/0.1"},
        follow_redirects=True,
    )


def set_http_client(client: Optional[httpx.AsyncClient]) -> None:
    global _client
    _client = client


def get_http_client() -> httpx.AsyncClient:
    if _client is None:
        raise RuntimeError("HTTP client not initialized. Did you start the FastAPI app?")
    return _client


def backoff_delay(attempt: int, *, backoff_seconds: float, max_backoff_seconds: float | None = None) -> float:
    delay = backoff_seconds * (2**attempt)
    if max_backoff_seconds is not None:
        delay = min(delay, max_backoff_seconds)
    return delay


async def fetch_json(
    client: httpx.AsyncClient,
    url: str,
    *,
    max_retries: int = 3,
    backoff_seconds: float = 1.0,
    max_backoff_seconds: float | None = None,
    sleep: Sleep = asyncio.sleep,
    **kwargs,
) -> Any:
    """GET ``url`` and return the decoded JSON body.

    At most ``max_retries`` attempts are made. A non-2xx status or a transport
    error counts as a failed attempt; between attempts the call sleeps
    ``backoff_seconds * 2**attempt`` (attempt counted from 0). Once the
    attempts are used up a ``FetchError`` is raised.
    """
    if max_retries < 1:
        raise ValueError("max_retries must be at least 1")

    last_status: int | None = None
    for attempt in range(max_retries):
        try:
            resp = await client.get(url, **kwargs)
        except httpx.HTTPError:
            resp = None
        else:
            last_status = resp.status_code
            if resp.is_success:
                try:
                    return resp.json()
                except ValueError:
                    raise FetchError("invalid JSON body", attempts=attempt + 1, last_status=last_status)

        if attempt < max_retries - 1:
            await sleep(
                backoff_delay(attempt, backoff_seconds=backoff_seconds, max_backoff_seconds=max_backoff_seconds)
            )

    raise FetchError("max retries exceeded", attempts=max_retries, last_status=last_status)
