"""
Error types for the Air Quality Assistant.

Only caller contract violations are raised. A missing snapshot is not an
error: the assistant answers it with an apology message.
"""


class AirAssistantError(Exception):
    """Base class for all errors raised by the assistant core."""


class InvalidReading(AirAssistantError, ValueError):
    """Raised when an AQI value outside the classifier domain (< 0) is given."""


class EmptyInput(AirAssistantError, ValueError):
    """Raised when a submitted message is empty after trimming whitespace."""


class ConcurrentSubmission(AirAssistantError, RuntimeError):
    """Raised when a message is submitted while a response is still composing."""
