"""
Data feed interface for the Air Quality Assistant.

Any object providing the three fetch methods below can back a session: the
bundled synthetic feed, or a live adapter supplied by the host application.
A live adapter is expected to translate upstream failures itself, either by
returning its last good snapshot or by returning None. The core treats None
exactly like a session that was never initialized.
"""

from typing import Optional, Protocol, runtime_checkable

from .air_quality_data import AirQualitySnapshot
from .forecast_point import ForecastPoint


@runtime_checkable
class AirQualityFeed(Protocol):
    """Structural interface every data feed must satisfy."""

    def fetch_snapshot(self) -> Optional[AirQualitySnapshot]:
        """Returns the current reading, or None if no reading is available."""
        ...

    def fetch_forecast(self) -> list[ForecastPoint]:
        """Returns the hourly forecast, one point per hour of the day."""
        ...

    def fetch_history(self) -> list[AirQualitySnapshot]:
        """Returns daily readings ordered oldest first."""
        ...
