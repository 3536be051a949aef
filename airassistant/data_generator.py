"""
Synthetic data generator module for the Air Quality Assistant.

This module contains the SyntheticAirQualityFeed class which stands in for a
live upstream feed. It produces:
- a reference snapshot stamped with the generation time
- a 24-point hourly forecast around a fixed baseline
- a 7-day daily history, oldest first

This is the only place in the core where randomness is allowed. Every call
draws a new independent sample, so two refreshes in a row are expected to
differ. Passing a seed makes the sequence of samples reproducible, which is
what the tests rely on.
"""

from datetime import datetime, timedelta
from typing import Callable, Optional

import numpy as np

from .air_quality_data import AirQualitySnapshot, DataSource
from .forecast_point import DEFAULT_ICON, ForecastPoint

# Forecast configuration
FORECAST_HOURS = 24
FORECAST_BASELINE_AQI = 85
FORECAST_VARIATION = 15  # Uniform integer noise in [-15, 15]
FORECAST_MIN_AQI = 0
FORECAST_MAX_AQI = 200

# History configuration: inclusive sampling ranges per field
HISTORY_DAYS = 7
HISTORY_AQI_RANGE = (50, 120)
HISTORY_PM25_RANGE = (20.0, 60.0)
HISTORY_NO2_RANGE = (30.0, 70.0)
HISTORY_O3_RANGE = (40.0, 80.0)
HISTORY_TEMPERATURE_RANGE = (20.0, 30.0)
HISTORY_HUMIDITY_RANGE = (50, 80)

# Reference reading served as the current snapshot
REFERENCE_READING = {
    "aqi": 72,
    "pm25": 35.2,
    "no2": 42.8,
    "o3": 55.3,
    "temperature": 28.0,
    "humidity": 63,
}


class SyntheticAirQualityFeed:
    """
    Synthetic implementation of the AirQualityFeed interface.

    Uses a numpy random Generator for all sampling. Without a seed each
    instance draws from fresh OS entropy; with a seed two instances produce
    identical sequences of forecasts and histories.
    """

    def __init__(
        self,
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """
        Initializes the synthetic feed.

        Args:
            seed: Optional seed for the random generator
            clock: Callable returning the current time, used for timestamps
        """
        self._rng = np.random.default_rng(seed)
        self._clock = clock

    def fetch_snapshot(self) -> Optional[AirQualitySnapshot]:
        """
        Returns the reference reading stamped with the current time.

        Returns:
            An AirQualitySnapshot tagged as sensor-fusion data
        """
        return AirQualitySnapshot(
            timestamp=self._clock(),
            source=DataSource.SENSOR_FUSION,
            **REFERENCE_READING,
        )

    def fetch_forecast(self) -> list[ForecastPoint]:
        """
        Generates a synthetic hourly forecast.

        Each hour gets the baseline AQI plus uniform integer noise, clamped to
        the forecast range. The result always has exactly one point per hour,
        ordered from hour 0 to hour 23.

        Returns:
            List of 24 ForecastPoint objects with aqi in [0, 200]
        """
        # integers() excludes the upper bound, hence the + 1
        variations = self._rng.integers(
            -FORECAST_VARIATION, FORECAST_VARIATION + 1, size=FORECAST_HOURS
        )
        aqi_values = np.clip(
            FORECAST_BASELINE_AQI + variations, FORECAST_MIN_AQI, FORECAST_MAX_AQI
        )

        return [
            ForecastPoint(hour=hour, aqi=int(aqi), icon=DEFAULT_ICON)
            for hour, aqi in enumerate(aqi_values)
        ]

    def fetch_history(self) -> list[AirQualitySnapshot]:
        """
        Generates a synthetic daily history for the last seven days.

        Timestamps step back one day at a time from now, so the last entry
        falls on today's calendar day and timestamps are strictly increasing.
        Every field is sampled independently from its configured range.

        Returns:
            List of 7 AirQualitySnapshot objects, oldest first
        """
        now = self._clock()
        history = []

        for days_ago in range(HISTORY_DAYS - 1, -1, -1):
            history.append(
                AirQualitySnapshot(
                    timestamp=now - timedelta(days=days_ago),
                    aqi=self._random_int(HISTORY_AQI_RANGE),
                    pm25=self._random_float(HISTORY_PM25_RANGE),
                    no2=self._random_float(HISTORY_NO2_RANGE),
                    o3=self._random_float(HISTORY_O3_RANGE),
                    temperature=self._random_float(HISTORY_TEMPERATURE_RANGE),
                    humidity=self._random_int(HISTORY_HUMIDITY_RANGE),
                    source=DataSource.SENSOR_FUSION,
                )
            )

        return history

    def _random_int(self, bounds: tuple[int, int]) -> int:
        low, high = bounds
        return int(self._rng.integers(low, high + 1))

    def _random_float(self, bounds: tuple[float, float]) -> float:
        low, high = bounds
        return float(self._rng.uniform(low, high))
