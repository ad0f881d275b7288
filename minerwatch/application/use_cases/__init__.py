"""
Use Cases Package - Application Layer

Use cases orchestrate the series buffer, the device gateway and the
series state repository.
"""

from .chart_use_cases import (
    GetChartSeriesUseCase,
    GetLatestPointUseCase,
    GetLatestSystemInfoUseCase,
)
from .import_history_use_case import ImportHistoryUseCase, ImportResult
from .poll_telemetry_use_case import PollResult, PollStatus, PollTelemetryUseCase

__all__ = [
    "GetChartSeriesUseCase",
    "GetLatestPointUseCase",
    "GetLatestSystemInfoUseCase",
    "ImportHistoryUseCase",
    "ImportResult",
    "PollResult",
    "PollStatus",
    "PollTelemetryUseCase",
]
