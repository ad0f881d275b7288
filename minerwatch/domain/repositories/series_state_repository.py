"""
Series State Repository Interface

Abstracts durable storage of the windowed series buffer and its cursor.
"""

from abc import ABC, abstractmethod
from typing import Optional

from minerwatch.domain.entities.series_buffer import (
    SeriesSnapshot,
    WindowedSeriesBuffer,
)


class ISeriesStateRepository(ABC):
    """Interface for series state persistence."""

    @abstractmethod
    def load(self) -> WindowedSeriesBuffer:
        """
        Restore the buffer and cursor saved by a previous session.

        Missing or unreadable state yields an empty buffer and/or no
        cursor; this method never raises.
        """
        pass

    @abstractmethod
    def save(self, snapshot: SeriesSnapshot, cursor: Optional[int]) -> None:
        """
        Persist the series and cursor.

        Raises:
            SeriesPersistenceError: When the underlying store fails
        """
        pass
