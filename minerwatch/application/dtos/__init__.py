"""
DTOs Package - Application Layer

Data Transfer Objects exchanged with the device API, durable storage and
the presentation layer.
"""

from .chart_dto import ChartSeriesDTO, LatestPointDTO
from .history_dto import HistoryFragmentDTO, PersistedChartDataDTO
from .system_info_dto import SystemInfoDTO

__all__ = [
    "ChartSeriesDTO",
    "HistoryFragmentDTO",
    "LatestPointDTO",
    "PersistedChartDataDTO",
    "SystemInfoDTO",
]
