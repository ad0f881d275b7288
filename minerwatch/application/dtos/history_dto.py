"""
History DTOs - Application Layer

Strongly typed schemas for hashrate history as it crosses the two
external boundaries: the device API (relative timestamps, raw units) and
durable storage (absolute timestamps, display units).
"""

from typing import List

from pydantic import BaseModel, ConfigDict, Field, model_validator

from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.entities.series_buffer import SeriesSnapshot


class HistoryFragmentDTO(BaseModel):
    """The ``history`` object returned by the device."""

    timestamp_base: int = Field(
        ..., alias="timestampBase", description="Base of the relative timestamps"
    )
    timestamps: List[int] = Field(
        default_factory=list, description="Offsets from timestampBase in ms"
    )
    hashrate_10m: List[float] = Field(
        default_factory=list, description="10 minute average, GH/s * 100"
    )
    hashrate_1h: List[float] = Field(
        default_factory=list, description="1 hour average, GH/s * 100"
    )
    hashrate_1d: List[float] = Field(
        default_factory=list, description="1 day average, GH/s * 100"
    )

    @model_validator(mode="after")
    def check_equal_lengths(self) -> "HistoryFragmentDTO":
        """Refuse fragments whose arrays cannot be index-aligned."""
        lengths = {
            len(self.timestamps),
            len(self.hashrate_10m),
            len(self.hashrate_1h),
            len(self.hashrate_1d),
        }
        if len(lengths) > 1:
            raise ValueError(
                "timestamps, hashrate_10m, hashrate_1h and hashrate_1d "
                "must have the same length"
            )
        return self

    def to_domain(self) -> HistoryFragment:
        return HistoryFragment(
            timestamp_base=self.timestamp_base,
            timestamps=list(self.timestamps),
            hashrate_10m=list(self.hashrate_10m),
            hashrate_1h=list(self.hashrate_1h),
            hashrate_1d=list(self.hashrate_1d),
        )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "timestampBase": 1000,
                "timestamps": [0, 5, 10],
                "hashrate_10m": [51234, 51870, 50990],
                "hashrate_1h": [50811, 50812, 50815],
                "hashrate_1d": [49990, 49990, 49991],
            }
        },
    )


class PersistedChartDataDTO(BaseModel):
    """Value stored under the ``chartData`` key."""

    labels: List[int] = Field(default_factory=list)
    data_10m: List[float] = Field(default_factory=list, alias="dataData10m")
    data_1h: List[float] = Field(default_factory=list, alias="dataData1h")
    data_1d: List[float] = Field(default_factory=list, alias="dataData1d")

    @model_validator(mode="after")
    def check_series_shape(self) -> "PersistedChartDataDTO":
        """Stored series must be index-aligned and sorted by label."""
        size = len(self.labels)
        if not (len(self.data_10m) == len(self.data_1h) == len(self.data_1d) == size):
            raise ValueError("stored series have mismatched lengths")
        if any(a > b for a, b in zip(self.labels, self.labels[1:])):
            raise ValueError("stored labels are not sorted")
        return self

    @classmethod
    def from_snapshot(cls, snapshot: SeriesSnapshot) -> "PersistedChartDataDTO":
        return cls(
            labels=list(snapshot.labels),
            data_10m=list(snapshot.hashrate_10m),
            data_1h=list(snapshot.hashrate_1h),
            data_1d=list(snapshot.hashrate_1d),
        )

    def to_snapshot(self) -> SeriesSnapshot:
        return SeriesSnapshot(
            labels=tuple(self.labels),
            hashrate_10m=tuple(self.data_10m),
            hashrate_1h=tuple(self.data_1h),
            hashrate_1d=tuple(self.data_1d),
        )

    model_config = ConfigDict(populate_by_name=True)
