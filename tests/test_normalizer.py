import random

import pytest

from weather_dashboard.core.exceptions import NormalizationError
from weather_dashboard.services.weather.alerts import FixedAlertSource, RandomAlertSource
from weather_dashboard.services.weather.normalizer import normalize


def test_reason_payload_is_a_domain_failure():
    with pytest.raises(NormalizationError) as excinfo:
        normalize("Atlantis", {"reason": "Unknown location", "error": True})
    assert excinfo.value.reason == "Unknown location"


@pytest.mark.parametrize(
    "raw",
    [
        {},
        {"current": {"temperature_2m": 1.0}},
        {"daily": {"time": ["2024-01-01"]}},
        [],
        "not json",
        None,
    ],
)
def test_missing_sections_are_domain_failures(raw):
    with pytest.raises(NormalizationError):
        normalize("Nowhere", raw)


def test_well_formed_payload(forecast_payload):
    raw = forecast_payload(7)
    snapshot = normalize("London", raw)

    assert snapshot.city == "London"
    assert snapshot.temperature_c == 12.3
    assert snapshot.humidity_pct == 81.0
    assert snapshot.wind_speed_kmh == 14.04
    assert snapshot.condition_code == 2
    assert snapshot.condition_description == "Partly cloudy"
    assert snapshot.condition_icon == "⛅"
    assert snapshot.sunrise == "2024-01-01T07:58"
    assert snapshot.sunset == "2024-01-01T16:05"
    assert snapshot.alert is None

    assert len(snapshot.daily_forecast) == 7
    assert [d.date for d in snapshot.daily_forecast] == raw["daily"]["time"]
    assert [d.max_temp_c for d in snapshot.daily_forecast] == raw["daily"]["temperature_2m_max"]
    assert snapshot.daily_forecast[-1].condition_code == 999


def test_unknown_current_code_does_not_fail(forecast_payload):
    snapshot = normalize("London", forecast_payload(7, current_code=None))
    assert snapshot.condition_code is None
    assert snapshot.condition_description == "Unknown"
    assert snapshot.condition_icon == ""


def test_horizon_mismatch(forecast_payload):
    with pytest.raises(NormalizationError):
        normalize("London", forecast_payload(3), horizon=7)
    assert len(normalize("London", forecast_payload(3), horizon=3).daily_forecast) == 3


def test_short_daily_series(forecast_payload):
    raw = forecast_payload(7)
    raw["daily"]["sunset"] = raw["daily"]["sunset"][:2]
    with pytest.raises(NormalizationError):
        normalize("London", raw)


def test_missing_current_field(forecast_payload):
    raw = forecast_payload(7)
    del raw["current"]["wind_speed_10m"]
    with pytest.raises(NormalizationError):
        normalize("London", raw)


def test_empty_daily_series(forecast_payload):
    raw = forecast_payload(7)
    raw["daily"]["time"] = []
    with pytest.raises(NormalizationError):
        normalize("London", raw)


def test_normalize_is_deterministic_with_fixed_alert(forecast_payload):
    raw = forecast_payload(7)
    source = FixedAlertSource("Strong winds")
    first = normalize("London", raw, alert_source=source)
    second = normalize("London", raw, alert_source=source)
    assert first == second
    assert first.alert == "Strong winds"


def test_random_alert_source_uses_probability():
    always = RandomAlertSource(probability=1.0, message="Storm", rng=random.Random(1))
    never = RandomAlertSource(probability=0.0, rng=random.Random(1))
    assert always.draw("London") == "Storm"
    assert never.draw("London") is None

    with pytest.raises(ValueError):
        RandomAlertSource(probability=1.5)


def test_null_daily_temperature_is_kept(forecast_payload):
    raw = forecast_payload(7)
    raw["daily"]["temperature_2m_max"][6] = None
    raw["daily"]["temperature_2m_min"][0] = None

    snapshot = normalize("London", raw, horizon=7)

    assert len(snapshot.daily_forecast) == 7
    assert snapshot.daily_forecast[6].max_temp_c is None
    assert snapshot.daily_forecast[0].min_temp_c is None
    assert snapshot.daily_forecast[0].max_temp_c == 10.0
