"""
Tests for application settings.
"""

import logging

import pytest
from pydantic import ValidationError

from entity_cache.config import Settings


@pytest.mark.parametrize("raw", ["info", "Info", " INFO "])
def test_log_level_is_normalized(raw):
    """Test a lower or mixed case log level is accepted by logging."""
    settings = Settings(log_level=raw)
    assert settings.log_level == "INFO"
    assert logging.getLevelName(settings.log_level) == logging.INFO


def test_log_level_from_environment(monkeypatch):
    """Test LOG_LEVEL from the environment is upper-cased."""
    monkeypatch.setenv("LOG_LEVEL", "debug")
    assert Settings().log_level == "DEBUG"


def test_unknown_log_level_rejected():
    """Test an unknown level fails at settings load, not in logging."""
    with pytest.raises(ValidationError):
        Settings(log_level="verbose")
