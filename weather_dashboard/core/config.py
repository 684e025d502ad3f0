from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://127.0.0.1:3000",
]

PLACEHOLDER_API_KEY = "YOUR_API_KEY_HERE"

DEFAULT_ALERT_MESSAGE = "Severe Weather Warning: Strong winds expected."


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WEATHERDASH_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
    )

    cors_origins: Annotated[list[str], NoDecode] = Field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    http_timeout_seconds: float = Field(default=10.0, ge=1.0, le=60.0)
    http_retries: int = Field(default=3, ge=1, le=10)
    http_retry_backoff_seconds: float = Field(default=1.0, ge=0.0, le=30.0)
    http_retry_max_backoff_seconds: float | None = Field(default=None, ge=0.0)

    # Keyless Open-Meteo endpoints used by the dashboard
    open_meteo_url: str = Field(default="https://api.open-meteo.com/v1/forecast")
    geocoding_url: str = Field(default="https://geocoding-api.open-meteo.com/v1/search")

    # Keyed provider behind /api/weather
    provider_base_url: str = Field(default="https://api.openweathermap.org/data/2.5")
    provider_api_key: str | None = Field(default=None)

    forecast_days: int = Field(default=7, ge=1, le=16)
    alert_probability: float = Field(default=0.2, ge=0.0, le=1.0)
    alert_message: str = Field(default=DEFAULT_ALERT_MESSAGE)
    notification_ttl_seconds: float = Field(default=4.0, gt=0.0, le=60.0)

    static_dir: str | None = Field(default=None)
    log_level: str = Field(default="INFO")

    @field_validator("provider_base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return str(v).rstrip("/")

    @property
    def provider_configured(self) -> bool:
        key = (self.provider_api_key or "").strip()
        return bool(key) and key != PLACEHOLDER_API_KEY

    @field_validator("cors_origins", mode="before")
    @classmethod
    def split_cors_origins(cls, v: Any) -> Any:
        # Allow WEATHERDASH_CORS_ORIGINS as JSON array or comma-separated string.
        if not isinstance(v, str):
            return v
        parsed = v.strip()
        if parsed.startswith("["):
            try:
                return [str(x).strip() for x in json.loads(parsed) if str(x).strip()]
            except ValueError:
                pass
        return [s.strip() for s in parsed.split(",") if s.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
