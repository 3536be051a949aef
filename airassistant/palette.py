"""
Color palette for presenting AQI categories.

The classifier only knows symbolic color tokens. Presentation collaborators
resolve them here, keyed by category or token.
"""

from .aqi_category import AQICategory

TOKEN_COLORS = {
    "green": "#A8D5BA",
    "yellow": "#F9E79F",
    "orange": "#F8B88B",
    "red": "#F1948A",
    "purple": "#C39BD3",
    "maroon": "#B03A2E",
}

# Used for unknown tokens so a renderer never fails on a lookup
NEUTRAL_COLOR = "#95A5A6"


def hex_for_token(token: str) -> str:
    """Returns the hex color for a color token, or the neutral color if unknown."""
    return TOKEN_COLORS.get(token, NEUTRAL_COLOR)


def color_for(category: AQICategory) -> str:
    """Returns the hex color used to paint a category."""
    return hex_for_token(category.color_token)
