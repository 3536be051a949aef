"""
Tests for the AQI classifier and color palette.

Tests cover:
- Equivalence classes: one representative value per category
- Boundary value analysis: every band edge (50/51 ... 300/301)
- Error scenarios: negative AQI
- Category metadata and palette lookups
"""

import pytest

from airassistant.aqi_category import AQICategory, classify
from airassistant.errors import InvalidReading
from airassistant.palette import NEUTRAL_COLOR, color_for, hex_for_token


class TestClassify:
    """Test suite for classify()."""

    # ==================== Equivalence Classes ====================

    @pytest.mark.parametrize("aqi, expected", [
        (25, AQICategory.GOOD),
        (75, AQICategory.MODERATE),
        (125, AQICategory.UNHEALTHY_FOR_SENSITIVE),
        (175, AQICategory.UNHEALTHY),
        (250, AQICategory.VERY_UNHEALTHY),
        (400, AQICategory.HAZARDOUS),
    ])
    def test_representative_values(self, aqi, expected):
        """Equivalence class: value inside each band."""
        assert classify(aqi) is expected

    def test_very_large_aqi_is_hazardous(self):
        """Equivalence class: unbounded above."""
        assert classify(10_000) is AQICategory.HAZARDOUS

    # ==================== Boundary Value Analysis ====================

    @pytest.mark.parametrize("aqi, expected", [
        (0, AQICategory.GOOD),
        (50, AQICategory.GOOD),
        (51, AQICategory.MODERATE),
        (100, AQICategory.MODERATE),
        (101, AQICategory.UNHEALTHY_FOR_SENSITIVE),
        (150, AQICategory.UNHEALTHY_FOR_SENSITIVE),
        (151, AQICategory.UNHEALTHY),
        (200, AQICategory.UNHEALTHY),
        (201, AQICategory.VERY_UNHEALTHY),
        (300, AQICategory.VERY_UNHEALTHY),
        (301, AQICategory.HAZARDOUS),
    ])
    def test_band_edges(self, aqi, expected):
        """Boundary: each edge maps to the band it belongs to."""
        assert classify(aqi) is expected

    def test_every_value_maps_to_one_category(self):
        """Totality: consecutive values only ever move up one band."""
        previous = classify(0)
        for aqi in range(1, 600):
            current = classify(aqi)
            assert current.severity - previous.severity in (0, 1)
            previous = current

    # ==================== Error Scenarios ====================

    def test_negative_aqi_rejected(self):
        """Error scenario: negative AQI raises InvalidReading."""
        with pytest.raises(InvalidReading):
            classify(-1)

    def test_invalid_reading_is_value_error(self):
        """Error scenario: InvalidReading can be caught as ValueError."""
        with pytest.raises(ValueError):
            classify(-50)

    # ==================== Purity ====================

    def test_classify_is_pure(self):
        """Same input always yields the same category."""
        assert classify(72) is classify(72)
        assert AQICategory.from_aqi(72) is classify(72)


class TestCategoryMetadata:
    """Test suite for AQICategory metadata and ordering."""

    def test_labels(self):
        assert AQICategory.GOOD.label == "Good"
        assert AQICategory.MODERATE.label == "Moderate"
        assert AQICategory.UNHEALTHY_FOR_SENSITIVE.label == "Unhealthy for Sensitive Groups"
        assert AQICategory.HAZARDOUS.label == "Hazardous"

    def test_descriptions(self):
        assert AQICategory.GOOD.description == "Air quality is satisfactory"
        assert AQICategory.VERY_UNHEALTHY.description == "Health alert conditions"

    def test_categories_ordered_by_severity(self):
        ordered = list(AQICategory)
        assert ordered == sorted(ordered)
        assert AQICategory.GOOD < AQICategory.MODERATE < AQICategory.HAZARDOUS
        assert AQICategory.HAZARDOUS >= AQICategory.UNHEALTHY

    def test_color_tokens_are_unique(self):
        tokens = [category.color_token for category in AQICategory]
        assert len(set(tokens)) == len(tokens)


class TestPalette:
    """Test suite for the presentation color lookup."""

    def test_color_for_category(self):
        assert color_for(AQICategory.GOOD) == "#A8D5BA"
        assert color_for(AQICategory.HAZARDOUS) == "#B03A2E"

    def test_every_category_has_a_color(self):
        for category in AQICategory:
            assert color_for(category) != NEUTRAL_COLOR

    def test_unknown_token_uses_neutral_color(self):
        assert hex_for_token("not-a-token") == NEUTRAL_COLOR
