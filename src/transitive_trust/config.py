"""Configuration management for transitive trust scoring."""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from .models import ChannelMode

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Configuration loaded from environment variables.

    All settings can be overridden via environment variables with
    the TRANSITIVE_TRUST_ prefix. For example:
        TRANSITIVE_TRUST_DEFAULT_MODE=signed
        TRANSITIVE_TRUST_LOG_FORMAT=text
    """

    # Environment
    env: Literal["development", "production", "test"] = Field(
        default="development",
        description="Environment: development, production, or test",
    )

    # Graphs
    default_mode: ChannelMode = Field(
        default=ChannelMode.DUAL,
        description="Channel mode for graphs created without an explicit mode",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="json",
        description="Log output format",
    )

    model_config = {
        "env_prefix": "TRANSITIVE_TRUST_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize the level name and reject names stdlib logging doesn't know."""
        level = value.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}, got {value!r}")
        return level


# Global settings instance
settings = Settings()
