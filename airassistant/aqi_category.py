"""
AQI category module for the Air Quality Assistant.

This module contains the AQICategory enumeration and the classify function,
a pure classifier that maps an Air Quality Index (AQI) value onto one of six
fixed severity bands. Every band carries a label, a short description and a
symbolic color token. The token is resolved to a concrete color only by the
presentation layer (see palette module), never here.
"""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidReading


@dataclass(frozen=True)
class CategoryInfo:
    """
    Fixed metadata attached to an AQI category.

    Attributes:
        label: Human readable name of the band
        description: One-line health description of the band
        color_token: Symbolic severity color, mapped to a hex value by the palette
        severity: Position of the band in severity order (0 = best)
    """

    label: str
    description: str
    color_token: str
    severity: int


class AQICategory(Enum):
    """
    The six AQI severity bands, from best to worst.

    Bands are contiguous and disjoint, and together cover all non-negative
    integers:
    - GOOD: 0-50
    - MODERATE: 51-100
    - UNHEALTHY_FOR_SENSITIVE: 101-150
    - UNHEALTHY: 151-200
    - VERY_UNHEALTHY: 201-300
    - HAZARDOUS: 301 and above

    Members compare by severity, so ``AQICategory.GOOD < AQICategory.HAZARDOUS``.
    """

    GOOD = "good"
    MODERATE = "moderate"
    UNHEALTHY_FOR_SENSITIVE = "unhealthy-for-sensitive"
    UNHEALTHY = "unhealthy"
    VERY_UNHEALTHY = "very-unhealthy"
    HAZARDOUS = "hazardous"

    @property
    def info(self) -> CategoryInfo:
        return _CATEGORY_INFO[self]

    @property
    def label(self) -> str:
        return self.info.label

    @property
    def description(self) -> str:
        return self.info.description

    @property
    def color_token(self) -> str:
        return self.info.color_token

    @property
    def severity(self) -> int:
        return self.info.severity

    def __lt__(self, other: "AQICategory") -> bool:
        if not isinstance(other, AQICategory):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: "AQICategory") -> bool:
        if not isinstance(other, AQICategory):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: "AQICategory") -> bool:
        if not isinstance(other, AQICategory):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: "AQICategory") -> bool:
        if not isinstance(other, AQICategory):
            return NotImplemented
        return self.severity >= other.severity

    @classmethod
    def from_aqi(cls, aqi: int) -> "AQICategory":
        """Alias for classify(), kept on the enum for convenience."""
        return classify(aqi)


_CATEGORY_INFO = {
    AQICategory.GOOD: CategoryInfo(
        "Good", "Air quality is satisfactory", "green", 0
    ),
    AQICategory.MODERATE: CategoryInfo(
        "Moderate", "Acceptable for most people", "yellow", 1
    ),
    AQICategory.UNHEALTHY_FOR_SENSITIVE: CategoryInfo(
        "Unhealthy for Sensitive Groups", "Sensitive groups may be affected", "orange", 2
    ),
    AQICategory.UNHEALTHY: CategoryInfo(
        "Unhealthy", "Everyone may experience effects", "red", 3
    ),
    AQICategory.VERY_UNHEALTHY: CategoryInfo(
        "Very Unhealthy", "Health alert conditions", "purple", 4
    ),
    AQICategory.HAZARDOUS: CategoryInfo(
        "Hazardous", "Health warnings of emergency", "maroon", 5
    ),
}

# Inclusive upper bound of each band; anything above the last bound is hazardous
_UPPER_BOUNDS = (
    (50, AQICategory.GOOD),
    (100, AQICategory.MODERATE),
    (150, AQICategory.UNHEALTHY_FOR_SENSITIVE),
    (200, AQICategory.UNHEALTHY),
    (300, AQICategory.VERY_UNHEALTHY),
)


def classify(aqi: int) -> AQICategory:
    """
    Classifies an AQI value into its severity band.

    The function is pure and total over non-negative integers. Negative values
    are a caller contract violation and are rejected rather than clamped.

    Args:
        aqi: Air Quality Index value (must be >= 0)

    Returns:
        The AQICategory whose range contains aqi

    Raises:
        InvalidReading: If aqi is negative
    """
    if aqi < 0:
        raise InvalidReading(f"aqi must be >= 0, got {aqi}")

    for upper_bound, category in _UPPER_BOUNDS:
        if aqi <= upper_bound:
            return category

    # Unbounded above: every value past 300 is hazardous
    return AQICategory.HAZARDOUS
