from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from weather_dashboard.api.endpoints.health import router as health_router
from weather_dashboard.api.router import api_router
from weather_dashboard.core.config import get_settings
from weather_dashboard.core.exceptions import ConfigurationError, ProxyError
from weather_dashboard.core.http import create_http_client, set_http_client
from weather_dashboard.core.logging_utils import setup_logging
from weather_dashboard.services.dashboard.session import DashboardSession
from weather_dashboard.services.dashboard.view_state import ViewStateController
from weather_dashboard.services.weather.geocoding import geocode
from weather_dashboard.services.weather.open_meteo import fetch_snapshot


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()

    client = create_http_client(settings)
    set_http_client(client)

    app.state.settings = settings

    try:
        yield
    finally:
        await client.aclose()
        set_http_client(None)


async def _configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def _proxy_error_handler(request: Request, exc: ProxyError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()
    setup_logging(level=settings.log_level)

    app = FastAPI(
        title="weather dashboard",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.add_exception_handler(ConfigurationError, _configuration_error_handler)
    app.add_exception_handler(ProxyError, _proxy_error_handler)

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    controller = ViewStateController(
        fetch_snapshot=fetch_snapshot,
        geocode=geocode,
        notification_ttl_seconds=settings.notification_ttl_seconds,
    )
    app.state.dashboard = DashboardSession(controller)

    app.include_router(health_router)
    app.include_router(api_router, prefix="/api")

    # Mounted last so it never shadows the API routes.
    if settings.static_dir:
        static_path = Path(settings.static_dir)
        if static_path.is_dir():
            app.mount("/", StaticFiles(directory=static_path, html=True), name="static")
        else:
            logger.warning("Static directory %s does not exist; not serving a front end", static_path)

    return app


app = create_app()
