"""
Configuration for fixseed.

Settings are read from ``FIXSEED_*`` environment variables and an optional
``.env`` file.
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Package-wide settings."""

    model_config = SettingsConfigDict(
        env_prefix="FIXSEED_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Root logging level")
    dev_mode: bool = Field(default=False, description="Show locals in rich tracebacks")
    log_file_path: Optional[Path] = Field(default=None, description="Optional log file")

    # Fixtures
    fixtures_dir: Path = Field(
        default=Path("."),
        description="Default base directory for fixture files",
    )
    encoding: str = Field(default="utf-8", description="Encoding of fixture files")

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalise and validate the log level name."""
        level = str(value).upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be one of the standard level names, got '{value}'")
        return level

    def get_log_file_path(self) -> Optional[Path]:
        """Return the log file path, creating its directory if needed."""
        if self.log_file_path is None:
            return None
        self.log_file_path.parent.mkdir(parents=True, exist_ok=True)
        return self.log_file_path


# Singleton instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None
