from __future__ import annotations

from typing import Any

from weather_dashboard.schemas.weather import ConditionInfo


UNKNOWN_CONDITION = ConditionInfo(description="Unknown", icon="")


# WMO weather interpretation codes as reported by Open-Meteo.
WEATHER_CODES: dict[int, ConditionInfo] = {
    0: ConditionInfo(description="Clear sky", icon="☀️"),
    1: ConditionInfo(description="Mostly clear", icon="🌤️"),
    2: ConditionInfo(description="Partly cloudy", icon="⛅"),
    3: ConditionInfo(description="Overcast", icon="☁️"),
    45: ConditionInfo(description="Fog", icon="🌫️"),
    48: ConditionInfo(description="Depositing rime fog", icon="🌫️"),
    51: ConditionInfo(description="Light drizzle", icon="🌧️"),
    53: ConditionInfo(description="Moderate drizzle", icon="🌧️"),
    55: ConditionInfo(description="Dense drizzle", icon="🌧️"),
    56: ConditionInfo(description="Light freezing drizzle", icon="🌧️"),
    57: ConditionInfo(description="Dense freezing drizzle", icon="🌧️"),
    61: ConditionInfo(description="Slight rain", icon="🌧️"),
    63: ConditionInfo(description="Moderate rain", icon="🌧️"),
    65: ConditionInfo(description="Heavy rain", icon="⛈️"),
    66: ConditionInfo(description="Light freezing rain", icon="🌧️"),
    67: ConditionInfo(description="Heavy freezing rain", icon="⛈️"),
    71: ConditionInfo(description="Slight snow fall", icon="🌨️"),
    73: ConditionInfo(description="Moderate snow fall", icon="🌨️"),
    75: ConditionInfo(description="Heavy snow fall", icon="❄️"),
    77: ConditionInfo(description="Snow grains", icon="🌨️"),
    80: ConditionInfo(description="Slight rain showers", icon="🌦️"),
    81: ConditionInfo(description="Moderate rain showers", icon="🌦️"),
    82: ConditionInfo(description="Violent rain showers", icon="⛈️"),
    85: ConditionInfo(description="Slight snow showers", icon="🌨️"),
    86: ConditionInfo(description="Heavy snow showers", icon="❄️"),
    95: ConditionInfo(description="Thunderstorm", icon="🌩️"),
    96: ConditionInfo(description="Thunderstorm with slight hail", icon="⛈️"),
    99: ConditionInfo(description="Thunderstorm with heavy hail", icon="🌪️"),
}


def describe(code: Any) -> ConditionInfo:
    """Look up a weather code. Anything unrecognised maps to ``UNKNOWN_CONDITION``."""
    # bool is an int subclass; True must not resolve to "Mostly clear"
    if isinstance(code, bool) or not isinstance(code, int):
        return UNKNOWN_CONDITION
    return WEATHER_CODES.get(code, UNKNOWN_CONDITION)
