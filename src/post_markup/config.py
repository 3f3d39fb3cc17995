"""Configuration management for post-markup."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Underline token shared by the renderer and the toolbar:
    # "double" writes and reads __x__, "single" reads _x_
    convention: str = Field(
        default="double",
        alias="POST_MARKUP_CONVENTION",
    )

    # Visible characters allowed in one post
    max_post_length: int = Field(
        default=280,
        alias="POST_MARKUP_MAX_LENGTH",
        ge=1,
    )

    log_level: str = Field(
        default="WARNING",
        alias="POST_MARKUP_LOG_LEVEL",
    )

    @field_validator("convention")
    @classmethod
    def _lower_convention(cls, value: str) -> str:
        return value.strip().lower()

    @field_validator("log_level")
    @classmethod
    def _upper_log_level(cls, value: str) -> str:
        return value.strip().upper()


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next lookup re-reads the environment."""
    global _settings
    _settings = None
