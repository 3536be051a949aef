"""
Pytest configuration for Air Quality Assistant tests.

Registers custom markers and provides shared fixtures.
"""

from datetime import datetime

import pytest

from airassistant.air_quality_data import AirQualitySnapshot, DataSource
from airassistant.forecast_point import ForecastPoint
from airassistant.session import SessionContext


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )


class ManualScheduler:
    """Scheduler fake that holds callbacks until the test runs them."""

    def __init__(self):
        self.pending = []

    def call_later(self, delay, callback):
        self.pending.append((delay, callback))

    def run_pending(self):
        pending, self.pending = self.pending, []
        for _, callback in pending:
            callback()


class StaticFeed:
    """Feed returning fixed data, with a snapshot the test can swap."""

    def __init__(self, snapshot, forecast, history=None):
        self.snapshot = snapshot
        self.forecast = forecast
        self.history = history or []

    def fetch_snapshot(self):
        return self.snapshot

    def fetch_forecast(self):
        return list(self.forecast)

    def fetch_history(self):
        return list(self.history)


def make_snapshot(aqi=72, **overrides):
    """Builds a snapshot with the reference reading, overriding given fields."""
    fields = dict(
        timestamp=datetime(2024, 5, 1, 12, 0),
        aqi=aqi,
        pm25=35.2,
        no2=42.8,
        o3=55.3,
        temperature=28.0,
        humidity=63,
        source=DataSource.SENSOR_FUSION,
    )
    fields.update(overrides)
    return AirQualitySnapshot(**fields)


@pytest.fixture
def scheduler():
    """Fixture providing a manually driven scheduler."""
    return ManualScheduler()


@pytest.fixture
def forecast():
    """Fixture providing a 24 hour forecast whose cleanest hours are 6, 7 and 20."""
    aqi_by_hour = {6: 70, 7: 72, 20: 74}
    return [ForecastPoint(hour=hour, aqi=aqi_by_hour.get(hour, 90)) for hour in range(24)]


@pytest.fixture
def feed(forecast):
    """Fixture providing a static feed with the reference snapshot (AQI 72)."""
    return StaticFeed(make_snapshot(), forecast)


@pytest.fixture
def session(feed):
    """Fixture providing a session loaded from the static feed."""
    return SessionContext(feed=feed, location="Monterrey, MX")


@pytest.fixture
def snapshot_factory():
    """Fixture providing make_snapshot for tests that need custom readings."""
    return make_snapshot


@pytest.fixture
def feed_factory():
    """Fixture providing the StaticFeed class."""
    return StaticFeed
