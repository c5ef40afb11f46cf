"""Application configuration model using pydantic-settings."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CONFIG_PATH = "~/.input-validators/config.json"


class Config(BaseSettings):
    """Application configuration loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_path: str = DEFAULT_CONFIG_PATH
    log_level: str = "INFO"
    api_key_min_length: int = 10

    @field_validator("config_path")
    @classmethod
    def validate_config_path(cls, value: str) -> str:
        """Config path must be non-empty."""
        if not value.strip():
            msg = "config_path must not be empty"
            raise ValueError(msg)
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Log level must be a valid Python logging level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            msg = f"log_level must be one of {', '.join(sorted(valid_levels))}"
            raise ValueError(msg)
        return upper_value

    @field_validator("api_key_min_length")
    @classmethod
    def validate_api_key_min_length(cls, value: int) -> int:
        """Minimum API key length must be at least 1."""
        if value < 1:
            msg = "api_key_min_length must be at least 1"
            raise ValueError(msg)
        return value
