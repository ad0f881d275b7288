"""
Series State Repository Implementation

Stores the windowed series under two fixed keys of a key/value store:
``chartData`` (JSON bundle of the four series) and ``lastTimestamp``
(the cursor as a decimal string).
"""

from __future__ import annotations

from typing import Optional

import structlog
from pydantic import ValidationError

from minerwatch.application.dtos.history_dto import PersistedChartDataDTO
from minerwatch.domain.entities.errors import SeriesPersistenceError, StorageError
from minerwatch.domain.entities.series_buffer import (
    SeriesSnapshot,
    WindowedSeriesBuffer,
)
from minerwatch.domain.ports.key_value_store import IKeyValueStore
from minerwatch.domain.repositories.series_state_repository import (
    ISeriesStateRepository,
)
from minerwatch.shared.consts import CHART_DATA_KEY, LAST_TIMESTAMP_KEY

logger = structlog.get_logger(__name__)


class SeriesStateRepository(ISeriesStateRepository):
    """Series persistence on top of an ``IKeyValueStore``."""

    def __init__(
        self,
        store: IKeyValueStore,
        chart_data_key: str = CHART_DATA_KEY,
        cursor_key: str = LAST_TIMESTAMP_KEY,
    ) -> None:
        self._store = store
        self._chart_data_key = chart_data_key
        self._cursor_key = cursor_key

    def load(self) -> WindowedSeriesBuffer:
        snapshot = self._load_snapshot()
        cursor = self._load_cursor()
        logger.info(
            "series.state.loaded",
            size=snapshot.length,
            cursor=cursor,
        )
        return WindowedSeriesBuffer.from_snapshot(snapshot, cursor)

    def save(self, snapshot: SeriesSnapshot, cursor: Optional[int]) -> None:
        document = PersistedChartDataDTO.from_snapshot(snapshot).model_dump_json(
            by_alias=True
        )
        try:
            self._store.set(self._chart_data_key, document)
            if cursor is None:
                self._store.delete(self._cursor_key)
            else:
                self._store.set(self._cursor_key, str(cursor))
        except StorageError as e:
            raise SeriesPersistenceError(
                f"Failed to persist series state: {e.message}", e.details
            ) from e

        logger.debug("series.state.saved", size=snapshot.length, cursor=cursor)

    def _read(self, key: str) -> Optional[str]:
        try:
            return self._store.get(key)
        except StorageError as e:
            logger.warning("series.state.read_failed", key=key, error=e.message)
            return None

    def _load_snapshot(self) -> SeriesSnapshot:
        raw = self._read(self._chart_data_key)
        if raw is None:
            return SeriesSnapshot()

        try:
            return PersistedChartDataDTO.model_validate_json(raw).to_snapshot()
        except ValidationError as e:
            logger.warning(
                "series.state.chart_data_invalid",
                key=self._chart_data_key,
                error_count=e.error_count(),
            )
            return SeriesSnapshot()

    def _load_cursor(self) -> Optional[int]:
        raw = self._read(self._cursor_key)
        if raw is None:
            return None

        try:
            return int(raw.strip())
        except ValueError:
            logger.warning(
                "series.state.cursor_invalid", key=self._cursor_key, value=raw
            )
            return None
