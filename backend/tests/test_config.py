"""Tests for settings and logging configuration."""

import logging

import pytest
from pydantic import ValidationError

from app.config import DEFAULT_COMMON_PASSWORDS_FILE, Settings
from app.logging_config import setup_logging


def test_defaults():
    config = Settings(_env_file=None, log_dir="")

    assert config.port == 3000
    assert config.rate_limit_general == "100/15minutes"
    assert config.common_passwords_file == DEFAULT_COMMON_PASSWORDS_FILE


def test_log_level_is_normalized():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_is_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "8080")
    monkeypatch.setenv("RATE_LIMIT_ENABLED", "false")

    config = Settings(_env_file=None)

    assert config.port == 8080
    assert config.rate_limit_enabled is False


def test_setup_logging_writes_to_log_dir(tmp_path):
    setup_logging(log_dir=str(tmp_path / "logs"), log_level="INFO")

    assert (tmp_path / "logs" / "app.log").exists()


def test_setup_logging_console_only():
    setup_logging(log_dir="", log_level="WARNING")

    handlers = logging.getLogger("app").handlers
    assert handlers
    assert not any(isinstance(h, logging.FileHandler) for h in handlers)
