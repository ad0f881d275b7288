"""Domain entities for hashrate history received from the device."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from minerwatch.domain.entities.errors import InvalidFragmentError
from minerwatch.domain.services.units import convert_hashrate


@dataclass(frozen=True, slots=True)
class SeriesPoint:
    """One point of the hashrate series, in absolute time and display units."""

    timestamp: int
    hashrate_10m: float
    hashrate_1h: float
    hashrate_1d: float


@dataclass(frozen=True, slots=True)
class HistoryFragment:
    """
    A batch of history samples from a single fetch.

    ``timestamps`` are offsets relative to ``timestamp_base`` and the
    hashrate arrays hold raw device units. All four arrays must have the
    same length; a fragment that violates this is rejected as a whole.
    """

    timestamp_base: int
    timestamps: List[int] = field(default_factory=list)
    hashrate_10m: List[float] = field(default_factory=list)
    hashrate_1h: List[float] = field(default_factory=list)
    hashrate_1d: List[float] = field(default_factory=list)

    def __post_init__(self) -> None:
        lengths = {
            "timestamps": len(self.timestamps),
            "hashrate_10m": len(self.hashrate_10m),
            "hashrate_1h": len(self.hashrate_1h),
            "hashrate_1d": len(self.hashrate_1d),
        }
        if len(set(lengths.values())) > 1:
            raise InvalidFragmentError(lengths)

    def __len__(self) -> int:
        return len(self.timestamps)

    @property
    def is_empty(self) -> bool:
        return not self.timestamps

    @property
    def latest_timestamp(self) -> Optional[int]:
        """Newest absolute timestamp in the fragment, or None if empty."""
        if not self.timestamps:
            return None
        return max(self.timestamps) + self.timestamp_base

    def to_points(self) -> List[SeriesPoint]:
        """Absolute-time points in fragment order, hashrates in H/s."""
        return [
            SeriesPoint(
                timestamp=offset + self.timestamp_base,
                hashrate_10m=convert_hashrate(h10m),
                hashrate_1h=convert_hashrate(h1h),
                hashrate_1d=convert_hashrate(h1d),
            )
            for offset, h10m, h1h, h1d in zip(
                self.timestamps, self.hashrate_10m, self.hashrate_1h, self.hashrate_1d
            )
        ]
