"""
Configuration Settings
======================

Centralized configuration using Pydantic V2 Settings.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_env: str = Field(default="development")
    app_debug: bool = Field(default=False)
    database_url: str = Field(default="sqlite:///./data/premise.db")
    audit_username: str = Field(default="", max_length=255)
    log_level: str = Field(default="INFO")
    log_to_stdout: bool = Field(default=False)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure the log level is one the logging module knows."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def print_settings() -> None:
    """Print the active settings (useful when debugging a deployment)."""
    for name, value in settings.model_dump().items():
        print(f"{name:16} = {value!r}")
