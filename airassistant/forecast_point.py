"""
Forecast point module for the Air Quality Assistant.

A ForecastPoint is one hourly entry of a forecast series. Series are
regenerated wholesale on refresh; individual points are never edited.
"""

from dataclasses import dataclass

from .aqi_category import AQICategory, classify

# Placeholder icon token; presentation code maps it to an actual glyph
DEFAULT_ICON = "wind"


@dataclass(frozen=True)
class ForecastPoint:
    """
    Represents the forecast AQI for one hour of the day.

    Attributes:
        hour: Hour of day (0-23)
        aqi: Forecast Air Quality Index
        icon: Icon token for the presentation layer
    """

    hour: int
    aqi: int
    icon: str = DEFAULT_ICON

    @property
    def category(self) -> AQICategory:
        return classify(self.aqi)

    def to_dict(self) -> dict[str, object]:
        return {
            "hour": self.hour,
            "aqi": self.aqi,
            "icon": self.icon,
            "category": self.category.value,
        }
