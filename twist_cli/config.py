"""Application configuration using Pydantic Settings."""

from functools import lru_cache
from pathlib import Path

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://api.twist.com/api/v3"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra env vars that don't match field names
    )

    # Twist API
    twist_api_token: SecretStr = Field(default=SecretStr(""))
    twist_api_base_url: str = DEFAULT_BASE_URL
    request_timeout: float = 30.0

    # Persisted token file
    config_path: Path = Field(
        default=Path.home() / ".config" / "twist-cli" / "config.json",
        validation_alias=AliasChoices("twist_config_path", "config_path"),
    )

    # Observability
    log_level: str = "WARNING"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
