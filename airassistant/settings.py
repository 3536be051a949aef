"""
Settings module for the Air Quality Assistant.

Configuration is read from environment variables, optionally populated from
a .env file. Supported variables:
- AIRASSISTANT_RESPONSE_DELAY: simulated typing delay in seconds (default 1.5)
- AIRASSISTANT_LOCATION: location name shown in responses (default "Monterrey, MX")
- AIRASSISTANT_SEED: optional integer seed for the synthetic feed
- AIRASSISTANT_LOG_LEVEL: logging level name (default "WARNING")
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_RESPONSE_DELAY = 1.5
DEFAULT_LOCATION = "Monterrey, MX"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass
class Settings:
    """
    Runtime configuration of the assistant core.

    Attributes:
        response_delay: Seconds between a submission and its response
        location: Location name rendered in responses
        seed: Seed for the synthetic feed, or None for fresh randomness
        log_level: Name of the logging level to configure
    """

    response_delay: float = DEFAULT_RESPONSE_DELAY
    location: str = DEFAULT_LOCATION
    seed: Optional[int] = None
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, load_env_file: bool = True, **overrides) -> "Settings":
        """
        Builds settings from the environment.

        Priority is: explicit keyword override > environment variable > default.
        Malformed values are logged and replaced by the default.

        Args:
            load_env_file: Whether to load a .env file before reading variables
            **overrides: Field values that take precedence over the environment

        Returns:
            A populated Settings instance
        """
        if load_env_file:
            load_dotenv()

        settings = cls(
            response_delay=_read_delay(),
            location=os.getenv("AIRASSISTANT_LOCATION") or DEFAULT_LOCATION,
            seed=_read_seed(),
            log_level=(os.getenv("AIRASSISTANT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
        )

        for name, value in overrides.items():
            if not hasattr(settings, name):
                raise TypeError(f"Unknown setting: {name}")
            setattr(settings, name, value)

        return settings


def _read_delay() -> float:
    raw = os.getenv("AIRASSISTANT_RESPONSE_DELAY")
    if not raw:
        return DEFAULT_RESPONSE_DELAY

    try:
        delay = float(raw)
    except ValueError:
        logger.warning("Invalid AIRASSISTANT_RESPONSE_DELAY %r, using %s", raw, DEFAULT_RESPONSE_DELAY)
        return DEFAULT_RESPONSE_DELAY

    if delay < 0:
        logger.warning("Negative AIRASSISTANT_RESPONSE_DELAY %r, using %s", raw, DEFAULT_RESPONSE_DELAY)
        return DEFAULT_RESPONSE_DELAY

    return delay


def _read_seed() -> Optional[int]:
    raw = os.getenv("AIRASSISTANT_SEED")
    if not raw:
        return None

    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid AIRASSISTANT_SEED %r, ignoring", raw)
        return None


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """
    Installs a basic logging handler for the application.

    Args:
        level: Logging level name such as "INFO" or "DEBUG"
    """
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)
