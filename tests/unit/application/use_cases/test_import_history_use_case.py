from __future__ import annotations

from typing import List, Optional, Tuple

import pytest

from minerwatch.application.use_cases.import_history_use_case import (
    ImportHistoryUseCase,
)
from minerwatch.domain.entities.errors import SeriesPersistenceError
from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.entities.series_buffer import (
    SeriesSnapshot,
    WindowedSeriesBuffer,
)
from tests.conftest import HOUR_MS, FakeClock, make_fragment


class _RecordingRepository:
    def __init__(self, fail: bool = False) -> None:
        self.saved: List[Tuple[SeriesSnapshot, Optional[int]]] = []
        self.fail = fail

    def load(self) -> WindowedSeriesBuffer:
        return WindowedSeriesBuffer()

    def save(self, snapshot: SeriesSnapshot, cursor: Optional[int]) -> None:
        if self.fail:
            raise SeriesPersistenceError("disk full")
        self.saved.append((snapshot, cursor))


def _use_case(
    buffer: WindowedSeriesBuffer,
    repository: _RecordingRepository,
    now: int,
) -> ImportHistoryUseCase:
    return ImportHistoryUseCase(
        series_buffer=buffer,
        series_state_repository=repository,
        retention_window_ms=HOUR_MS,
        clock=FakeClock(now),
    )


def test_first_fragment_into_empty_buffer(first_fragment: HistoryFragment) -> None:
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()

    result = _use_case(buffer, repository, now=2000).execute(first_fragment)

    assert buffer.labels == [1000, 1005, 1010]
    assert buffer.hashrate_10m == pytest.approx([1e9 / 100, 2e9 / 100, 3e9 / 100])
    assert buffer.cursor == 1010
    assert result.accepted == 3
    assert result.evicted == 0
    assert result.persisted is True
    snapshot, cursor = repository.saved[-1]
    assert snapshot.labels == (1000, 1005, 1010)
    assert cursor == 1010


def test_empty_fragment_is_a_noop() -> None:
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()

    result = _use_case(buffer, repository, now=2000).execute(
        HistoryFragment(timestamp_base=1000)
    )

    assert result.skipped is True
    assert len(buffer) == 0
    assert buffer.cursor is None
    assert repository.saved == []


def test_old_points_are_evicted_after_merge() -> None:
    now = 10 * HOUR_MS
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()
    fragment = make_fragment(now - 2 * HOUR_MS, [0, HOUR_MS // 2, 3 * HOUR_MS // 2, 2 * HOUR_MS])

    result = _use_case(buffer, repository, now=now).execute(fragment)

    assert result.accepted == 4
    assert result.evicted == 2
    assert buffer.labels == [now - HOUR_MS // 2, now]
    assert buffer.cursor == now
    assert repository.saved[-1][0].labels == (now - HOUR_MS // 2, now)


def test_cursor_keeps_latest_received_when_everything_is_evicted() -> None:
    now = 10 * HOUR_MS
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()
    fragment = make_fragment(now - 3 * HOUR_MS, [0, 1000, 2000])

    result = _use_case(buffer, repository, now=now).execute(fragment)

    assert len(buffer) == 0
    assert result.evicted == 3
    assert buffer.cursor == now - 3 * HOUR_MS + 2000
    assert repository.saved[-1][1] == buffer.cursor


def test_overlapping_fragment_keeps_labels_monotonic(first_fragment) -> None:
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()
    use_case = _use_case(buffer, repository, now=5000)
    use_case.execute(first_fragment)

    result = use_case.execute(make_fragment(1000, [5, 10, 15, 20]))

    assert result.received == 4
    assert result.accepted == 2
    assert result.dropped == 2
    assert buffer.labels == [1000, 1005, 1010, 1015, 1020]
    assert buffer.snapshot().is_monotonic()
    assert buffer.cursor == 1020


def test_stale_fragment_does_not_rewind_cursor(first_fragment) -> None:
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository()
    use_case = _use_case(buffer, repository, now=5000)
    use_case.execute(first_fragment)

    result = use_case.execute(make_fragment(1000, [0, 5]))

    assert result.accepted == 0
    assert buffer.labels == [1000, 1005, 1010]
    assert buffer.cursor == 1010


def test_persistence_failure_is_swallowed(first_fragment) -> None:
    buffer = WindowedSeriesBuffer()
    repository = _RecordingRepository(fail=True)

    result = _use_case(buffer, repository, now=2000).execute(first_fragment)

    assert result.persisted is False
    assert buffer.labels == [1000, 1005, 1010]
    assert buffer.cursor == 1010
