#!/usr/bin/env python3
"""
Centralized configuration management for promptis.

Only the logging layer is configurable; prompts themselves take all of their
settings from the ``Prompter`` they are asked through.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PromptisConfig(BaseSettings):
    """Settings read from the environment (or a local ``.env`` file)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Logging Configuration
    log_level: str = Field(default="WARNING", validation_alias="PROMPTIS_LOG_LEVEL")
    log_format: str = Field(default="console", validation_alias="PROMPTIS_LOG_FORMAT")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        valid_formats = {"console", "json"}
        if v.lower() not in valid_formats:
            raise ValueError(f"Log format must be one of: {valid_formats}")
        return v.lower()


# Global config instance
_config: Optional[PromptisConfig] = None


def get_config() -> PromptisConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = PromptisConfig()
    return _config


def reset_config() -> None:
    """Reset the global configuration (useful for testing)."""
    global _config
    _config = None
