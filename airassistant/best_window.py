"""
Best window module for the Air Quality Assistant.

This module contains the BestWindowRecommender class which ranks a forecast
by severity and picks the hours with the cleanest air. It is deterministic
for a fixed input: ties on AQI keep the original hour order.
"""

from typing import Sequence

from .forecast_point import ForecastPoint


class BestWindowRecommender:
    """
    Recommends the best hours of the day for outdoor activity.

    Works on any forecast sequence, including partial or empty ones. An empty
    forecast simply yields no recommendation.
    """

    DEFAULT_COUNT = 3

    def best_hours(
        self, forecast: Sequence[ForecastPoint], count: int = DEFAULT_COUNT
    ) -> list[tuple[int, int]]:
        """
        Selects the forecast hours with the lowest AQI.

        Sorting is stable, so hours with equal AQI stay in their original
        order. The result is ordered lowest AQI first.

        Args:
            forecast: Forecast points to rank
            count: Maximum number of hours to return

        Returns:
            List of (hour, aqi) tuples, at most count long. Returns every point
            if the forecast is shorter than count, and an empty list for an
            empty forecast or a non-positive count.
        """
        if count <= 0:
            return []

        ranked = sorted(forecast, key=lambda point: point.aqi)
        return [(point.hour, point.aqi) for point in ranked[:count]]

    def format_hours(self, windows: Sequence[tuple[int, int]]) -> list[str]:
        """
        Formats (hour, aqi) windows as response labels, e.g. "6:00h (AQI: 70)".
        """
        return [f"{hour}:00h (AQI: {aqi})" for hour, aqi in windows]
