"""
Windowed Series Buffer

The rolling hashrate series is kept as four index-aligned lists (labels and
three hashrate averages). The buffer is the single owner of the sync cursor.
"""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from minerwatch.domain.entities.history import SeriesPoint


@dataclass(frozen=True)
class SeriesSnapshot:
    """Read-only copy of the buffer used for projection and persistence."""

    labels: Tuple[int, ...] = ()
    hashrate_10m: Tuple[float, ...] = ()
    hashrate_1h: Tuple[float, ...] = ()
    hashrate_1d: Tuple[float, ...] = ()

    @property
    def length(self) -> int:
        return len(self.labels)

    def latest(self) -> Optional[SeriesPoint]:
        """Most recent point, for instantaneous-value displays."""
        if not self.labels:
            return None
        return SeriesPoint(
            timestamp=self.labels[-1],
            hashrate_10m=self.hashrate_10m[-1],
            hashrate_1h=self.hashrate_1h[-1],
            hashrate_1d=self.hashrate_1d[-1],
        )

    def is_aligned(self) -> bool:
        return (
            len(self.hashrate_10m) == len(self.labels)
            and len(self.hashrate_1h) == len(self.labels)
            and len(self.hashrate_1d) == len(self.labels)
        )

    def is_monotonic(self) -> bool:
        return all(a <= b for a, b in zip(self.labels, self.labels[1:]))


@dataclass
class WindowedSeriesBuffer:
    """
    Time-aligned, time-bounded hashrate series.

    Points are appended in arrival order and only ever removed from the
    front, so labels stay sorted and eviction is a prefix trim. Points that
    do not advance past the newest label are refused, which keeps the
    series strictly increasing when fragments overlap or arrive late.
    """

    labels: List[int] = field(default_factory=list)
    hashrate_10m: List[float] = field(default_factory=list)
    hashrate_1h: List[float] = field(default_factory=list)
    hashrate_1d: List[float] = field(default_factory=list)
    cursor: Optional[int] = None

    @classmethod
    def from_snapshot(
        cls, snapshot: SeriesSnapshot, cursor: Optional[int] = None
    ) -> "WindowedSeriesBuffer":
        return cls(
            labels=list(snapshot.labels),
            hashrate_10m=list(snapshot.hashrate_10m),
            hashrate_1h=list(snapshot.hashrate_1h),
            hashrate_1d=list(snapshot.hashrate_1d),
            cursor=cursor,
        )

    def __len__(self) -> int:
        return len(self.labels)

    @property
    def oldest_timestamp(self) -> Optional[int]:
        return self.labels[0] if self.labels else None

    @property
    def newest_timestamp(self) -> Optional[int]:
        return self.labels[-1] if self.labels else None

    def append(self, points: Iterable[SeriesPoint]) -> int:
        """
        Append points in the order received.

        Returns:
            Number of points accepted. Points whose timestamp is not newer
            than the last accepted one are skipped.
        """
        accepted = 0
        for point in points:
            newest = self.newest_timestamp
            if newest is not None and point.timestamp <= newest:
                continue
            self.labels.append(point.timestamp)
            self.hashrate_10m.append(point.hashrate_10m)
            self.hashrate_1h.append(point.hashrate_1h)
            self.hashrate_1d.append(point.hashrate_1d)
            accepted += 1

        if accepted:
            self.cursor = self.labels[-1]
        return accepted

    def evict_before(self, cutoff: int) -> int:
        """
        Drop every leading point with ``timestamp < cutoff``.

        The cursor moves to the newest remaining label when any point is
        left; an emptied buffer keeps the cursor it had.

        Returns:
            Number of points removed.
        """
        count = bisect_left(self.labels, cutoff)
        if count:
            del self.labels[:count]
            del self.hashrate_10m[:count]
            del self.hashrate_1h[:count]
            del self.hashrate_1d[:count]

        if self.labels:
            self.cursor = self.labels[-1]
        return count

    def advance_cursor(self, timestamp: int) -> None:
        """Move the cursor forward; it never moves back in time."""
        if self.cursor is None or timestamp > self.cursor:
            self.cursor = timestamp

    def snapshot(self) -> SeriesSnapshot:
        return SeriesSnapshot(
            labels=tuple(self.labels),
            hashrate_10m=tuple(self.hashrate_10m),
            hashrate_1h=tuple(self.hashrate_1h),
            hashrate_1d=tuple(self.hashrate_1d),
        )
