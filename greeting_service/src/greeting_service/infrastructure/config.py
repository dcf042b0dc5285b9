"""Configuration management for the greeting service."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DirectoryConfig(BaseModel):
    """User directory configuration."""

    log_lookups: bool = Field(default=True, description="Wrap the directory in the logging decorator")
    users: dict[int, str] = Field(default_factory=dict, description="Seed users keyed by user ID")


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")


class Config(BaseSettings):
    """Main configuration for the greeting service."""

    model_config = SettingsConfigDict(
        env_prefix="GREETING_SERVICE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    directory: DirectoryConfig = Field(default_factory=DirectoryConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
