from __future__ import annotations

import random
from typing import Protocol

from weather_dashboard.core.config import DEFAULT_ALERT_MESSAGE, Settings


class AlertSource(Protocol):
    def draw(self, city: str) -> str | None:
        """Return an alert message for ``city``, or None when nothing is active."""
        ...


class RandomAlertSource:
    """Placeholder alert feed: raises the same warning with a fixed probability."""

    def __init__(
        self,
        probability: float = 0.2,
        message: str = DEFAULT_ALERT_MESSAGE,
        rng: random.Random | None = None,
    ) -> None:
        if not 0.0 <= probability <= 1.0:
            raise ValueError("probability must be within [0, 1]")
        self.probability = probability
        self.message = message
        self._rng = rng or random.Random()

    def draw(self, city: str) -> str | None:
        return self.message if self._rng.random() < self.probability else None


class FixedAlertSource:
    def __init__(self, message: str | None) -> None:
        self.message = message

    def draw(self, city: str) -> str | None:
        return self.message


def build_alert_source(settings: Settings) -> AlertSource | None:
    if settings.alert_probability <= 0:
        return None
    return RandomAlertSource(probability=settings.alert_probability, message=settings.alert_message)
