"""Client configuration using Pydantic Settings."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Inbox client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Notifications service (hosts the inbox API)
    notifications_base_url: str = Field(default="http://localhost:8080")
    request_timeout_seconds: float = Field(default=10.0)

    # Conversation listing. Only a single page is read per resolution.
    conversation_list_limit: int = Field(default=100, ge=1)
    conversation_list_offset: int = Field(default=0, ge=0)

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="json")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
