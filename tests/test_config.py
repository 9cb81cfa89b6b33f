"""
Test suite for configuration and settings validation
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from app import config
from core.schemas import TerminalSettings
from infra.env import env_overrides


def test_defaults():
    """Test default settings match module constants."""

    print("Testing default settings...")

    with patch("app.config.env_overrides", return_value={}):
        settings = config.load_settings()

    assert settings.typing_delay == config.TYPING_DELAY == 0.02
    assert settings.cursor_interval == config.CURSOR_INTERVAL == 0.0
    assert settings.line_prefix == "> "
    assert settings.log_level == "INFO"
    assert settings.log_file is None

    print("✓ default settings tests passed")


def test_env_overrides(monkeypatch):
    """Test TERMINAL_* environment variables override defaults."""

    print("Testing env overrides...")

    monkeypatch.setenv("TERMINAL_TYPING_DELAY", "0.1")
    monkeypatch.setenv("TERMINAL_LINE_PREFIX", "$ ")
    monkeypatch.setenv("TERMINAL_LOG_LEVEL", "debug")
    monkeypatch.setenv("TERMINAL_CURSOR_INTERVAL", "")

    assert env_overrides()["typing_delay"] == "0.1"
    assert "cursor_interval" not in env_overrides()

    settings = config.load_settings()
    assert settings.typing_delay == 0.1
    assert settings.line_prefix == "$ "
    assert settings.log_level == "DEBUG"
    assert settings.cursor_interval == 0.0

    print("✓ env override tests passed")


def test_explicit_overrides_win(monkeypatch):
    """Test call-site overrides beat env, and None means 'not given'."""

    monkeypatch.setenv("TERMINAL_TYPING_DELAY", "0.1")

    settings = config.load_settings(typing_delay=0.5, line_prefix=None)
    assert settings.typing_delay == 0.5
    assert settings.line_prefix == config.DEFAULT_LINE_PREFIX


def test_invalid_settings():
    """Test validation errors for bad values."""

    with pytest.raises(ValidationError):
        TerminalSettings(typing_delay=-0.01)
    with pytest.raises(ValidationError):
        TerminalSettings(cursor_interval=-1)
    with pytest.raises(ValidationError):
        TerminalSettings(log_level="LOUD")


def test_validate_config():
    """Test startup validation passes for shipped constants."""

    config.validate_config()

    with patch("app.config.TYPING_DELAY", -1):
        with pytest.raises(AssertionError):
            config.validate_config()


if __name__ == "__main__":
    test_defaults()
    test_invalid_settings()
    test_validate_config()
    print("✅ ALL TESTS PASSED!")
