"""
Intent router module for the Air Quality Assistant.

This module contains the IntentRouter class, a pure classifier for free-text
user messages. It only performs keyword matching: the text is lower-cased,
accents are stripped, and keyword sets are tested in a fixed priority order.
The first set with a matching keyword wins; text matching nothing falls
through to the GENERAL intent, so classification never fails.
"""

import unicodedata
from enum import Enum


class Intent(Enum):
    """Purpose of a user message, in routing priority order."""

    ACTIVITY = "activity"
    VENTILATION = "ventilation"
    OUTDOORS = "outdoors"
    FORECAST = "forecast"
    SENSITIVE_GROUPS = "sensitive-groups"
    GENERAL = "general"


# Keyword sets in priority order. Earlier entries win when a message matches
# more than one set.
INTENT_KEYWORDS = (
    (Intent.ACTIVITY, ("correr", "ejercicio", "deporte", "run", "exercise", "workout", "sports")),
    (Intent.VENTILATION, ("ventana", "abrir", "window", "open")),
    (Intent.OUTDOORS, ("salir", "aire libre", "go outside", "outdoors")),
    (Intent.FORECAST, ("mañana", "pronóstico", "tomorrow", "forecast")),
    (Intent.SENSITIVE_GROUPS, ("niños", "bebé", "children", "baby")),
)


def normalize_text(text: str) -> str:
    """
    Lower-cases text and strips diacritics so "Pronóstico" matches "pronostico".
    """
    text = unicodedata.normalize("NFKD", text.lower())
    return "".join(ch for ch in text if not unicodedata.combining(ch))


class IntentRouter:
    """
    Keyword based intent classifier.

    Keywords are normalized once at construction, with the same rules applied
    to incoming text, so matching is both case and accent insensitive.
    """

    def __init__(self, keywords=INTENT_KEYWORDS):
        """
        Args:
            keywords: Ordered (Intent, keywords) pairs; order defines priority
        """
        self._keywords = [
            (intent, tuple(normalize_text(word) for word in words))
            for intent, words in keywords
        ]

    def classify(self, text: str) -> Intent:
        """
        Determines the intent of a user message.

        Args:
            text: Raw message text as typed by the user

        Returns:
            The first Intent whose keyword set has a substring match, or
            Intent.GENERAL when nothing matches
        """
        normalized = normalize_text(text)

        for intent, words in self._keywords:
            if any(word in normalized for word in words):
                return intent

        return Intent.GENERAL
