"""
Shared module - Cross-cutting concerns / Shared Layer

Constants, enums, the clock helper and logging setup used by every other
layer. Nothing in here may depend on Domain, Application, Infrastructure
or any framework wiring.
"""

from .clock import Clock, now_ms
from .consts import (
    CHART_DATA_KEY,
    LAST_TIMESTAMP_KEY,
    EnumEnvironment,
    EnumLogLevel,
    EnumStorageBackend,
)
from .logging import configure_logging, get_logger, update_logging_from_settings

__all__ = [
    "CHART_DATA_KEY",
    "LAST_TIMESTAMP_KEY",
    "Clock",
    "EnumEnvironment",
    "EnumLogLevel",
    "EnumStorageBackend",
    "configure_logging",
    "get_logger",
    "now_ms",
    "update_logging_from_settings",
]
