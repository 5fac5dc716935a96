"""
Tests for configuration module.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from fixseed.config import Settings, get_settings, reset_settings


class TestSettings:
    """Test the Settings configuration class."""

    def test_default_settings(self):
        """Test default settings initialization."""
        settings = Settings()

        assert settings.log_level == "INFO"
        assert settings.dev_mode is False
        assert settings.log_file_path is None
        assert settings.fixtures_dir == Path(".")
        assert settings.encoding == "utf-8"

    def test_settings_from_env(self, monkeypatch):
        """Test loading settings from environment variables."""
        monkeypatch.setenv("FIXSEED_LOG_LEVEL", "debug")
        monkeypatch.setenv("FIXSEED_FIXTURES_DIR", "seeds")
        monkeypatch.setenv("FIXSEED_DEV_MODE", "true")

        settings = Settings()

        assert settings.log_level == "DEBUG"
        assert settings.fixtures_dir == Path("seeds")
        assert settings.dev_mode is True

    def test_log_level_validation(self):
        """Unknown level names are rejected."""
        with pytest.raises(ValidationError, match="log_level must be one of"):
            Settings(log_level="CHATTY")

    def test_log_file_path_creation(self, tmp_path):
        """Test log file path directory creation."""
        log_path = tmp_path / "logs" / "test.log"
        settings = Settings(log_file_path=log_path)

        assert not log_path.parent.exists()

        result = settings.get_log_file_path()

        assert result == log_path
        assert log_path.parent.exists()

    def test_no_log_file_path(self):
        assert Settings().get_log_file_path() is None

    def test_get_settings_singleton(self):
        """Test that get_settings returns the same instance."""
        settings1 = get_settings()
        settings2 = get_settings()

        assert settings1 is settings2

    def test_reset_settings(self, monkeypatch):
        first = get_settings()
        monkeypatch.setenv("FIXSEED_ENCODING", "latin-1")

        reset_settings()

        second = get_settings()
        assert second is not first
        assert second.encoding == "latin-1"
