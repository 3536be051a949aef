"""
Air quality data module for the Air Quality Assistant.

This module defines the AirQualitySnapshot dataclass which represents one
point-in-time, multi-pollutant reading (AQI, PM2.5, NO2, O3) together with
the weather context (temperature, humidity) and the source the reading came
from. The AQI category is derived on read and never stored.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from .aqi_category import AQICategory, classify


class DataSource(Enum):
    """Origin of a reading."""

    SENSOR_FUSION = "sensor-fusion"
    GROUND_STATION = "ground-station"
    SATELLITE = "satellite"


@dataclass(frozen=True)
class AirQualitySnapshot:
    """
    Represents one air quality reading.

    Snapshots are immutable once created; a refresh replaces the snapshot
    instead of editing it.

    Attributes:
        timestamp: When the reading was taken
        aqi: Air Quality Index (must be >= 0, unbounded above)
        pm25: Fine particulate matter in µg/m³ (must be >= 0)
        no2: Nitrogen dioxide in ppb (must be >= 0)
        o3: Tropospheric ozone in ppb (must be >= 0)
        temperature: Temperature in Celsius
        humidity: Relative humidity in percent (must be between 0 and 100)
        source: Where the reading came from
    """

    timestamp: datetime
    aqi: int
    pm25: float
    no2: float
    o3: float
    temperature: float
    humidity: int
    source: DataSource = DataSource.SENSOR_FUSION

    @property
    def category(self) -> AQICategory:
        """
        AQI category of this reading, computed from aqi on every access.

        Raises:
            InvalidReading: If the snapshot holds a negative aqi
        """
        return classify(self.aqi)

    def validate(self) -> tuple[bool, Optional[str]]:
        """
        Validates the reading against the data model invariants.

        Checks:
        - pm25, no2, o3 and temperature must be finite numbers
        - aqi, pm25, no2 and o3 must be non-negative
        - humidity must be between 0 and 100

        Returns:
            A tuple containing:
            - bool: True if all validations pass, False otherwise
            - Optional[str]: None if valid, or a descriptive error message if invalid
        """
        # NaN slips through every comparison below, so reject it first
        for field_name in ("pm25", "no2", "o3", "temperature"):
            if not math.isfinite(getattr(self, field_name)):
                return (False, f"{field_name} must be a finite number")

        for field_name in ("aqi", "pm25", "no2", "o3"):
            if getattr(self, field_name) < 0:
                return (False, f"{field_name} must be >= 0")

        if self.humidity < 0 or self.humidity > 100:
            return (False, "humidity must be between 0 and 100")

        return (True, None)

    def to_dict(self) -> dict[str, object]:
        """
        Converts the snapshot to a serializable dictionary.

        The derived category is included so presentation code does not need
        to classify again.

        Returns:
            A dictionary with all fields converted to serializable types
        """
        return {
            "timestamp": self.timestamp.isoformat(),
            "aqi": self.aqi,
            "pm25": self.pm25,
            "no2": self.no2,
            "o3": self.o3,
            "temperature": self.temperature,
            "humidity": self.humidity,
            "source": self.source.value,
            "category": self.category.value,
        }
