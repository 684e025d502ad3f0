import httpx
import pytest
import pytest_asyncio

from weather_dashboard.core.config import get_settings
from weather_dashboard.core.http import set_http_client


@pytest.fixture(autouse=True)
def _settings_env(monkeypatch):
    # No real backoff sleeps and no random alerts in tests.
    monkeypatch.setenv("WEATHERDASH_HTTP_RETRY_BACKOFF_SECONDS", "0")
    monkeypatch.setenv("WEATHERDASH_ALERT_PROBABILITY", "0")
    monkeypatch.delenv("WEATHERDASH_PROVIDER_API_KEY", raising=False)
    monkeypatch.delenv("WEATHERDASH_STATIC_DIR", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def http_client():
    async with httpx.AsyncClient() as client:
        set_http_client(client)
        yield client
    set_http_client(None)


@pytest.fixture
def forecast_payload():
    def _make(days: int = 7, *, current_code: int | None = 2) -> dict:
        dates = [f"2024-01-{d:02d}" for d in range(1, days + 1)]
        current = {
            "temperature_2m": 12.3,
            "relative_humidity_2m": 81.0,
            "wind_speed_10m": 14.04,
        }
        if current_code is not None:
            current["weather_code"] = current_code
        return {
            "latitude": 51.5,
            "longitude": 0.12,
            "current": current,
            "daily": {
                "time": dates,
                "weather_code": [0, 1, 2, 3, 61, 95, 999][:days] + [0] * max(0, days - 7),
                "temperature_2m_max": [10.0 + i for i in range(days)],
                "temperature_2m_min": [2.5 + i for i in range(days)],
                "sunrise": [f"{d}T07:58" for d in dates],
                "sunset": [f"{d}T16:05" for d in dates],
            },
        }

    return _make
