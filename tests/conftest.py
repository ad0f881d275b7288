from __future__ import annotations

import sys
from pathlib import Path
from typing import Dict, List, Optional

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from minerwatch.domain.entities.errors import StorageError  # noqa: E402
from minerwatch.domain.entities.history import HistoryFragment  # noqa: E402
from minerwatch.domain.entities.series_buffer import WindowedSeriesBuffer  # noqa: E402

HOUR_MS = 3_600_000


class FakeClock:
    """Settable epoch-millisecond clock."""

    def __init__(self, now: int) -> None:
        self.now = now

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class FakeKeyValueStore:
    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})
        self.writes: List[str] = []
        self.fail_reads = False
        self.fail_writes = False
        self.closed = False

    def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageError("read failed")
        return self.data.get(key)

    def set(self, key: str, value: str) -> None:
        if self.fail_writes:
            raise StorageError("write failed", {"key": key})
        self.writes.append(key)
        self.data[key] = value

    def delete(self, key: str) -> None:
        if self.fail_writes:
            raise StorageError("delete failed", {"key": key})
        self.data.pop(key, None)

    def close(self) -> None:
        self.closed = True


@pytest.fixture()
def fake_store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock(now=1_700_000_000_000)


@pytest.fixture()
def series_buffer() -> WindowedSeriesBuffer:
    return WindowedSeriesBuffer()


@pytest.fixture()
def first_fragment() -> HistoryFragment:
    return HistoryFragment(
        timestamp_base=1000,
        timestamps=[0, 5, 10],
        hashrate_10m=[1, 2, 3],
        hashrate_1h=[1, 1, 1],
        hashrate_1d=[1, 1, 1],
    )


def make_fragment(base: int, offsets: List[int], raw: float = 100.0) -> HistoryFragment:
    return HistoryFragment(
        timestamp_base=base,
        timestamps=list(offsets),
        hashrate_10m=[raw] * len(offsets),
        hashrate_1h=[raw] * len(offsets),
        hashrate_1d=[raw] * len(offsets),
    )
