"""Configuration management for the order service."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


NotificationChannel = Literal["sms", "email"]


class NotificationConfig(BaseModel):
    """Order placed notification configuration."""

    channels: list[NotificationChannel] = Field(
        default_factory=lambda: ["sms", "email"],
        description="Channels notified, in order, when an order is placed",
    )

    @field_validator("channels")
    @classmethod
    def _no_duplicate_channels(cls, channels: list[str]) -> list[str]:
        if len(set(channels)) != len(channels):
            raise ValueError("Notification channels must be unique")
        return channels


class ObservabilityConfig(BaseModel):
    """Observability configuration."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")
    log_format: Literal["json", "console"] = Field(default="json")
    otel_endpoint: str | None = Field(default=None)
    otel_service_name: str = Field(default="order_service")


class Config(BaseSettings):
    """Main configuration for the order service."""

    model_config = SettingsConfigDict(
        env_prefix="ORDER_SERVICE_",
        env_nested_delimiter="__",
        case_sensitive=False,
    )

    notification: NotificationConfig = Field(default_factory=NotificationConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache
def get_config() -> Config:
    """Get the global configuration instance."""
    return Config()
