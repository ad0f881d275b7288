"""
Import History Use Case - Application Layer

Merges a history fragment from the device into the windowed series buffer,
trims the buffer to the retention window and persists the result.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import structlog

from minerwatch.domain.entities.errors import SeriesPersistenceError
from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.entities.series_buffer import WindowedSeriesBuffer
from minerwatch.domain.repositories.series_state_repository import (
    ISeriesStateRepository,
)
from minerwatch.domain.services.fetch_window import RETENTION_WINDOW_MS, eviction_cutoff
from minerwatch.shared.clock import Clock, now_ms

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a single fragment import."""

    received: int
    accepted: int = 0
    evicted: int = 0
    cursor: Optional[int] = None
    persisted: bool = False
    skipped: bool = False

    @property
    def dropped(self) -> int:
        return self.received - self.accepted


class ImportHistoryUseCase:
    """Merge engine for history fragments."""

    def __init__(
        self,
        series_buffer: WindowedSeriesBuffer,
        series_state_repository: ISeriesStateRepository,
        retention_window_ms: int = RETENTION_WINDOW_MS,
        clock: Clock = now_ms,
    ) -> None:
        self._buffer = series_buffer
        self._repository = series_state_repository
        self._retention_window_ms = retention_window_ms
        self._clock = clock

    def execute(self, fragment: HistoryFragment) -> ImportResult:
        """
        Import one fragment.

        Steps, in order: append the converted points, advance the cursor to
        the newest received timestamp, evict points older than the
        retention window, persist. Empty fragments are ignored.

        Args:
            fragment: Validated history fragment from the device

        Returns:
            ImportResult describing what changed
        """
        if fragment.is_empty:
            logger.debug("history.import.empty_fragment")
            return ImportResult(received=0, cursor=self._buffer.cursor, skipped=True)

        received = len(fragment)
        accepted = self._buffer.append(fragment.to_points())
        if accepted < received:
            logger.warning(
                "history.import.dropped_stale_points",
                received=received,
                accepted=accepted,
                newest_label=self._buffer.newest_timestamp,
            )

        latest = fragment.latest_timestamp
        if latest is not None:
            self._buffer.advance_cursor(latest)

        cutoff = eviction_cutoff(self._clock(), self._retention_window_ms)
        evicted = self._buffer.evict_before(cutoff)

        persisted = self._persist()

        logger.info(
            "history.import.completed",
            received=received,
            accepted=accepted,
            evicted=evicted,
            size=len(self._buffer),
            cursor=self._buffer.cursor,
        )
        return ImportResult(
            received=received,
            accepted=accepted,
            evicted=evicted,
            cursor=self._buffer.cursor,
            persisted=persisted,
        )

    def _persist(self) -> bool:
        try:
            self._repository.save(self._buffer.snapshot(), self._buffer.cursor)
            return True
        except SeriesPersistenceError as e:
            logger.error(
                "history.import.persist_failed",
                error=e.message,
                details=e.details,
            )
            return False
