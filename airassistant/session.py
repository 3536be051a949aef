"""
Session context module for the Air Quality Assistant.

This module contains the SessionContext class, the single owner of the shared
read state: the current snapshot, the hourly forecast, the daily history and
the location name. The state is loaded from a data feed at construction and
replaced wholesale on every refresh. Consumers such as the assistant only
read it.
"""

import logging
from typing import Optional

import pandas as pd

from .air_quality_data import AirQualitySnapshot
from .data_feed import AirQualityFeed
from .data_generator import SyntheticAirQualityFeed
from .forecast_point import ForecastPoint
from .settings import DEFAULT_LOCATION

logger = logging.getLogger(__name__)


class SessionContext:
    """
    Holds the air quality data shared by every consumer of a session.

    A refresh replaces snapshot, forecast and history in one go. With the
    synthetic feed a refresh is deliberately not idempotent: forecast and
    history are resampled each time.
    """

    def __init__(
        self,
        feed: Optional[AirQualityFeed] = None,
        location: str = DEFAULT_LOCATION,
        load: bool = True,
    ) -> None:
        """
        Initializes the session and, by default, loads the first data set.

        Args:
            feed: Data feed to read from. Defaults to a SyntheticAirQualityFeed
            location: Location name rendered in responses
            load: Whether to fetch data immediately. When False the session
                  starts without a snapshot until refresh() is called
        """
        self.feed = feed if feed is not None else SyntheticAirQualityFeed()
        self.location = location

        self._snapshot: Optional[AirQualitySnapshot] = None
        self._forecast: list[ForecastPoint] = []
        self._history: list[AirQualitySnapshot] = []

        if load:
            self.refresh()

    def get_snapshot(self) -> Optional[AirQualitySnapshot]:
        """Returns the current reading, or None if none is available."""
        return self._snapshot

    def get_forecast(self) -> list[ForecastPoint]:
        """Returns a copy of the hourly forecast."""
        return list(self._forecast)

    def get_history(self) -> list[AirQualitySnapshot]:
        """Returns a copy of the daily history, oldest first."""
        return list(self._history)

    def set_snapshot(self, snapshot: Optional[AirQualitySnapshot]) -> None:
        """
        Replaces the current snapshot, e.g. when a live adapter pushes a reading.

        Invalid readings are logged and stored as absent.

        Args:
            snapshot: New reading, or None to mark data as unavailable
        """
        self._snapshot = self._accept_snapshot(snapshot)

    def refresh(self) -> None:
        """
        Reloads snapshot, forecast and history from the feed.

        Runs synchronously. Each collection is replaced, never edited in place,
        so readers holding an older list keep a consistent view.
        """
        snapshot = self._accept_snapshot(self.feed.fetch_snapshot())
        forecast = list(self.feed.fetch_forecast())
        history = list(self.feed.fetch_history())

        self._snapshot = snapshot
        self._forecast = forecast
        self._history = history

        logger.info(
            "Session refreshed: snapshot=%s forecast=%d history=%d",
            "present" if snapshot is not None else "absent",
            len(forecast),
            len(history),
        )

    def forecast_frame(self) -> pd.DataFrame:
        """
        Returns the forecast as a DataFrame for chart rendering.

        Columns: hour, aqi, icon, category.
        """
        return pd.DataFrame(
            [point.to_dict() for point in self._forecast],
            columns=["hour", "aqi", "icon", "category"],
        )

    def history_frame(self) -> pd.DataFrame:
        """
        Returns the history as a DataFrame indexed by timestamp.

        Columns: aqi, pm25, no2, o3, temperature, humidity, source, category.
        """
        columns = ["timestamp", "aqi", "pm25", "no2", "o3", "temperature", "humidity", "source", "category"]
        frame = pd.DataFrame([reading.to_dict() for reading in self._history], columns=columns)
        frame["timestamp"] = pd.to_datetime(frame["timestamp"])
        return frame.set_index("timestamp")

    def _accept_snapshot(self, snapshot: Optional[AirQualitySnapshot]) -> Optional[AirQualitySnapshot]:
        if snapshot is None:
            return None

        valid, reason = snapshot.validate()
        if not valid:
            logger.warning("Discarding invalid snapshot: %s", reason)
            return None

        return snapshot
