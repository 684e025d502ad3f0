import httpx
import pytest
import respx
from httpx import ASGITransport, AsyncClient, Response

from weather_dashboard.main import create_app


PROVIDER_URL = "https://api.openweathermap.org/data/2.5/weather"


@pytest.fixture
def configured(monkeypatch):
    monkeypatch.setenv("WEATHERDASH_PROVIDER_API_KEY", "secret-key")


@pytest.mark.asyncio
async def test_weather_proxy_success(http_client, configured):
    app = create_app()

    with respx.mock:
        route = respx.get(PROVIDER_URL).mock(
            return_value=Response(200, json={"name": "London", "main": {"temp": 12.3}})
        )

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get("/api/weather", params={"location": "London"})

    assert r.status_code == 200
    assert r.json() == {"name": "London", "main": {"temp": 12.3}}
    params = route.calls.last.request.url.params
    assert params["q"] == "London"
    assert params["appid"] == "secret-key"
    assert params["units"] == "metric"


@pytest.mark.asyncio
@pytest.mark.parametrize("query", [{}, {"location": ""}, {"location": "   "}])
async def test_weather_proxy_requires_location(http_client, configured, query):
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.get("/api/weather", params=query)

    assert r.status_code == 400
    assert r.json() == {"error": "Location query parameter is required."}


@pytest.mark.asyncio
@pytest.mark.parametrize("key", [None, "YOUR_API_KEY_HERE"])
async def test_weather_proxy_without_key(http_client, monkeypatch, key):
    if key is not None:
        monkeypatch.setenv("WEATHERDASH_PROVIDER_API_KEY", key)
    app = create_app()

    with respx.mock(assert_all_called=False) as mock:
        route = mock.get(PROVIDER_URL).mock(return_value=Response(200, json={}))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            first = await client.get("/api/weather", params={"location": "London"})
            second = await client.get("/api/weather", params={"location": "Paris"})

    assert first.status_code == second.status_code == 503
    assert "missing API Key" in first.json()["error"]
    assert not route.called


@pytest.mark.asyncio
async def test_weather_proxy_forwards_upstream_status(http_client, configured):
    app = create_app()

    with respx.mock:
        respx.get(PROVIDER_URL).mock(return_value=Response(404, json={"cod": "404", "message": "city not found"}))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get("/api/weather", params={"location": "Atlantis"})

    assert r.status_code == 404
    assert r.json() == {"error": "city not found"}


@pytest.mark.asyncio
async def test_weather_proxy_upstream_without_message(http_client, configured):
    app = create_app()

    with respx.mock:
        respx.get(PROVIDER_URL).mock(return_value=Response(502, content=b"bad gateway"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get("/api/weather", params={"location": "London"})

    assert r.status_code == 502
    assert r.json() == {"error": "Failed to fetch weather data."}


@pytest.mark.asyncio
async def test_weather_proxy_transport_failure(http_client, configured):
    app = create_app()

    with respx.mock:
        respx.get(PROVIDER_URL).mock(side_effect=httpx.ConnectError("unreachable"))
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get("/api/weather", params={"location": "London"})

    assert r.status_code == 500
    assert r.json() == {"error": "Failed to fetch weather data."}


@pytest.mark.asyncio
async def test_health(http_client):
    app = create_app()
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        r = await client.get("/health")
    assert r.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_weather_proxy_long_location_is_forwarded(http_client, configured):
    app = create_app()
    location = "x" * 300

    with respx.mock:
        route = respx.get(PROVIDER_URL).mock(
            return_value=Response(404, json={"cod": "404", "message": "city not found"})
        )
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
            r = await client.get("/api/weather", params={"location": location})

    assert r.status_code == 404
    assert r.json() == {"error": "city not found"}
    assert route.calls.last.request.url.params["q"] == location
