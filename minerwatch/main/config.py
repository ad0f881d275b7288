"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from minerwatch.shared import EnumEnvironment, EnumLogLevel, EnumStorageBackend
from minerwatch.shared.consts import (
    DEFAULT_POLL_INTERVAL_SECONDS,
    DEFAULT_RETENTION_WINDOW_SECONDS,
)


class ServiceSettings(BaseSettings):
    """HTTP service metadata and server options."""

    title: str = Field(default="minerwatch", description="Service title")
    description: str = Field(
        default="Rolling hashrate telemetry synchronized from a mining device",
        description="Service description",
    )
    version: str = Field(default="0.1.0", description="Service version")
    debug: bool = Field(default=False, description="Enable debug mode")
    port: int = Field(default=8000, description="Port to bind the server")

    model_config = SettingsConfigDict(
        env_prefix="APP_", case_sensitive=False, extra="ignore"
    )


class DeviceSettings(BaseSettings):
    """Connection settings for the mining device API."""

    base_url: str = Field(
        default="http://localhost",
        description="Device base URL",
        validation_alias=AliasChoices("DEVICE_BASE_URL", "DEVICE_URL"),
    )
    timeout: float = Field(
        default=10.0, gt=0, description="HTTP request timeout in seconds"
    )
    fetch_system_info: bool = Field(
        default=True,
        description=(
            "Poll /api/system/info (telemetry and history); "
            "when false only /api/history/data is polled"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="DEVICE_", case_sensitive=False, extra="ignore"
    )


class SyncSettings(BaseSettings):
    """Polling and retention settings."""

    poll_interval_seconds: float = Field(
        default=DEFAULT_POLL_INTERVAL_SECONDS,
        gt=0,
        description="Seconds between two polls",
    )
    retention_window_seconds: int = Field(
        default=DEFAULT_RETENTION_WINDOW_SECONDS,
        gt=0,
        description="Age after which points are evicted",
    )

    model_config = SettingsConfigDict(
        env_prefix="SYNC_", case_sensitive=False, extra="ignore"
    )


class StorageSettings(BaseSettings):
    """Durable storage for the series and cursor."""

    backend: EnumStorageBackend = Field(
        default=EnumStorageBackend.FILE, description="Key/value store backend"
    )
    file_path: str = Field(
        default=".minerwatch/storage.json",
        description="JSON file used by the file backend",
    )
    redis_url: str = Field(
        default="redis://localhost:6379/0", description="Redis URL for the redis backend"
    )
    key_prefix: str = Field(default="", description="Prefix for Redis keys")

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_", case_sensitive=False, extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Logging format",
    )
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    service: ServiceSettings = Field(default_factory=ServiceSettings)
    device: DeviceSettings = Field(default_factory=DeviceSettings)
    sync: SyncSettings = Field(default_factory=SyncSettings)
    storage: StorageSettings = Field(default_factory=StorageSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on environment.
    """
    return AppSettings()
