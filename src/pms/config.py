"""Configuration management for pms."""

from __future__ import annotations

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from pms.errors import ConfigurationError

DEFAULT_API_BASE = "https://api.spotify.com/v1"


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_prefix="PMS_",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote service
    spotify_token: str | None = Field(default=None, description="Spotify Web API bearer token")
    spotify_api_base: str = Field(default=DEFAULT_API_BASE, description="Spotify Web API base URL")
    http_timeout_seconds: float = Field(default=10.0, gt=0, description="Timeout for remote requests")

    # List defaults
    sort: str = Field(default="artist,year,album,title", description="Default sort columns for track lists")
    columns: str = Field(default="artist,title,album,year,time", description="Default visible columns")
    page_height: int = Field(default=20, ge=1, description="Rows moved by pgup/pgdn")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")


def load_settings() -> Settings:
    """Load settings from the environment and an optional .env file."""

    try:
        return Settings()
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid settings: {exc}") from exc
