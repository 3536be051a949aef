"""
Air Quality Assistant core.

Air quality data model and classification, synthetic data feeds, best time
window recommendations and a rule-based conversational assistant.
"""

from .aqi_category import AQICategory, classify
from .air_quality_data import AirQualitySnapshot, DataSource
from .assistant import ConversationalAssistant, TimerScheduler
from .best_window import BestWindowRecommender
from .chat_message import Author, ChatMessage
from .data_feed import AirQualityFeed
from .data_generator import SyntheticAirQualityFeed
from .errors import AirAssistantError, ConcurrentSubmission, EmptyInput, InvalidReading
from .forecast_point import ForecastPoint
from .intent_router import Intent, IntentRouter
from .response_composer import ResponseComposer
from .session import SessionContext
from .settings import Settings, configure_logging

__all__ = [
    'AQICategory', 'classify',
    'AirQualitySnapshot', 'DataSource',
    'ConversationalAssistant', 'TimerScheduler',
    'BestWindowRecommender',
    'Author', 'ChatMessage',
    'AirQualityFeed', 'SyntheticAirQualityFeed',
    'AirAssistantError', 'ConcurrentSubmission', 'EmptyInput', 'InvalidReading',
    'ForecastPoint',
    'Intent', 'IntentRouter',
    'ResponseComposer',
    'SessionContext',
    'Settings', 'configure_logging',
]
