from __future__ import annotations


class WeatherDashboardError(Exception):
    """Base class for every error raised by the dashboard."""


class FetchError(WeatherDashboardError):
    """Transport-level failure: the request never produced a usable response."""

    def __init__(self, reason: str, *, attempts: int = 0, last_status: int | None = None) -> None:
        super().__init__(reason)
        self.reason = reason
        self.attempts = attempts
        self.last_status = last_status


class NormalizationError(WeatherDashboardError):
    """Domain-level failure: the provider answered, but not with usable weather."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class GeocodingError(WeatherDashboardError):
    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class ConfigurationError(WeatherDashboardError):
    """Server-side configuration is missing. Raised on every request until fixed."""

    status_code = 503

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ProxyError(WeatherDashboardError):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.message = message
