from .device import DeviceInfo
from .errors import (
    DeviceGatewayError,
    DomainError,
    InvalidFragmentError,
    SeriesPersistenceError,
    StorageError,
)
from .history import HistoryFragment, SeriesPoint
from .series_buffer import SeriesSnapshot, WindowedSeriesBuffer

__all__ = [
    "DeviceGatewayError",
    "DeviceInfo",
    "DomainError",
    "HistoryFragment",
    "InvalidFragmentError",
    "SeriesPersistenceError",
    "SeriesPoint",
    "SeriesSnapshot",
    "StorageError",
    "WindowedSeriesBuffer",
]
