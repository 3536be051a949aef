"""
Tests for Settings.

Tests cover:
- Defaults when no variables are set
- Environment variables and explicit overrides
- Error scenarios: malformed values fall back to defaults
"""

import logging
import os
from unittest.mock import patch

import pytest

from airassistant.settings import DEFAULT_LOCATION, DEFAULT_RESPONSE_DELAY, Settings, configure_logging

ENV_NAMES = (
    "AIRASSISTANT_RESPONSE_DELAY",
    "AIRASSISTANT_LOCATION",
    "AIRASSISTANT_SEED",
    "AIRASSISTANT_LOG_LEVEL",
)


@pytest.fixture
def clean_env():
    """Fixture removing assistant variables from the environment."""
    with patch.dict(os.environ, {}, clear=False):
        for name in ENV_NAMES:
            os.environ.pop(name, None)
        yield


class TestSettingsFromEnv:
    """Test suite for Settings.from_env()."""

    def test_defaults(self, clean_env):
        settings = Settings.from_env(load_env_file=False)
        assert settings.response_delay == DEFAULT_RESPONSE_DELAY == 1.5
        assert settings.location == DEFAULT_LOCATION
        assert settings.seed is None
        assert settings.log_level == "WARNING"

    def test_reads_environment(self, clean_env):
        os.environ.update({
            "AIRASSISTANT_RESPONSE_DELAY": "0.2",
            "AIRASSISTANT_LOCATION": "Saltillo, MX",
            "AIRASSISTANT_SEED": "42",
            "AIRASSISTANT_LOG_LEVEL": "debug",
        })
        settings = Settings.from_env(load_env_file=False)
        assert settings.response_delay == 0.2
        assert settings.location == "Saltillo, MX"
        assert settings.seed == 42
        assert settings.log_level == "DEBUG"

    def test_override_beats_environment(self, clean_env):
        os.environ["AIRASSISTANT_RESPONSE_DELAY"] = "3"
        settings = Settings.from_env(load_env_file=False, response_delay=0.0)
        assert settings.response_delay == 0.0

    def test_unknown_override_rejected(self, clean_env):
        with pytest.raises(TypeError):
            Settings.from_env(load_env_file=False, colour="blue")

    # ==================== Error Scenarios ====================

    @pytest.mark.parametrize("raw", ["soon", "-1"])
    def test_bad_delay_uses_default(self, clean_env, raw):
        os.environ["AIRASSISTANT_RESPONSE_DELAY"] = raw
        assert Settings.from_env(load_env_file=False).response_delay == DEFAULT_RESPONSE_DELAY

    def test_bad_seed_ignored(self, clean_env):
        os.environ["AIRASSISTANT_SEED"] = "abc"
        assert Settings.from_env(load_env_file=False).seed is None


class TestConfigureLogging:
    """Test suite for configure_logging()."""

    def test_sets_level(self):
        with patch("airassistant.settings.logging.basicConfig") as basic_config:
            configure_logging("info")
        assert basic_config.call_args.kwargs["level"] == logging.INFO
