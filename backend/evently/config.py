"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: str = Field(
        default="development",
        description="Environment: development, staging, production",
    )

    # Database
    mongodb_uri: str = Field(default="", description="MongoDB connection string")
    mongodb_database: str = Field(default="evently", description="MongoDB database name")
    mongodb_server_selection_timeout_ms: int = Field(
        default=5000,
        description="How long the driver waits for a reachable server",
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    logfire_token: str = ""

    @field_validator("mongodb_uri")
    @classmethod
    def strip_uri(cls, v: str) -> str:
        """Treat a whitespace-only connection string as missing."""
        return v.strip()

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    return Settings()
