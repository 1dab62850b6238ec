"""
Configuration management for the feed export service.
"""

import os
from pathlib import Path
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings, read from the environment or .env."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Application root that feed directories are resolved against
    feed_root_path: str = Field(default_factory=os.getcwd)
    # Prefix for product and image URLs in the Heureka feed
    feed_base_url: str = "https://threed.store"
    log_level: str = "INFO"

    @property
    def root_path(self) -> Path:
        return Path(self.feed_root_path)


_settings = None


def get_settings() -> Settings:
    """Get application settings."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment."""
    global _settings
    _settings = None
