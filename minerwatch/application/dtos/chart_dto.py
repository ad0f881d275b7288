"""DTOs for the read-only chart projection."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from minerwatch.domain.entities.history import SeriesPoint
from minerwatch.domain.entities.series_buffer import SeriesSnapshot


class ChartSeriesDTO(BaseModel):
    """The rolling series, index-aligned, hashrates in H/s."""

    labels: List[int] = Field(
        default_factory=list, description="Sample timestamps in epoch ms"
    )
    hashrate_10m: List[float] = Field(default_factory=list)
    hashrate_1h: List[float] = Field(default_factory=list)
    hashrate_1d: List[float] = Field(default_factory=list)
    length: int = Field(default=0, description="Shared length of all series")
    cursor: Optional[int] = Field(
        default=None, description="Timestamp of the newest merged point"
    )

    @classmethod
    def from_snapshot(
        cls, snapshot: SeriesSnapshot, cursor: Optional[int] = None
    ) -> "ChartSeriesDTO":
        return cls(
            labels=list(snapshot.labels),
            hashrate_10m=list(snapshot.hashrate_10m),
            hashrate_1h=list(snapshot.hashrate_1h),
            hashrate_1d=list(snapshot.hashrate_1d),
            length=snapshot.length,
            cursor=cursor,
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "labels": [1727000000000, 1727000005000],
                "hashrate_10m": [512340000000.0, 518700000000.0],
                "hashrate_1h": [508110000000.0, 508120000000.0],
                "hashrate_1d": [499900000000.0, 499900000000.0],
                "length": 2,
                "cursor": 1727000005000,
            }
        }
    }


class LatestPointDTO(BaseModel):
    """Most recent point of the series."""

    timestamp: int
    hashrate_10m: float
    hashrate_1h: float
    hashrate_1d: float

    @classmethod
    def from_domain(cls, point: SeriesPoint) -> "LatestPointDTO":
        return cls(
            timestamp=point.timestamp,
            hashrate_10m=point.hashrate_10m,
            hashrate_1h=point.hashrate_1h,
            hashrate_1d=point.hashrate_1d,
        )
