"""Configuration for collection operators, read from MULTISET_* environment variables."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings."""

    model_config = SettingsConfigDict(
        env_prefix="MULTISET_",
        case_sensitive=False,
    )

    max_iterations: Optional[int] = Field(
        default=None,
        ge=1,
        description="Round limit for iterate(); None lets it run until a fixed point",
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Log level used by the example driver"
    )


@lru_cache
def get_settings() -> Settings:
    """Get the global settings instance."""
    return Settings()
