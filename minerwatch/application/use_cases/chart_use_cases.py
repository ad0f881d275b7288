"""Use cases for the read-only chart projection."""

from typing import Optional

from minerwatch.application.dtos.chart_dto import ChartSeriesDTO, LatestPointDTO
from minerwatch.application.dtos.system_info_dto import SystemInfoDTO
from minerwatch.application.use_cases.poll_telemetry_use_case import (
    PollTelemetryUseCase,
)
from minerwatch.domain.entities.series_buffer import WindowedSeriesBuffer


class GetChartSeriesUseCase:
    """Return the whole rolling series."""

    def __init__(self, series_buffer: WindowedSeriesBuffer) -> None:
        self._buffer = series_buffer

    async def execute(self) -> ChartSeriesDTO:
        return ChartSeriesDTO.from_snapshot(
            self._buffer.snapshot(), cursor=self._buffer.cursor
        )


class GetLatestPointUseCase:
    """Return the newest point of the series, if any."""

    def __init__(self, series_buffer: WindowedSeriesBuffer) -> None:
        self._buffer = series_buffer

    async def execute(self) -> Optional[LatestPointDTO]:
        point = self._buffer.snapshot().latest()
        if point is None:
            return None
        return LatestPointDTO.from_domain(point)


class GetLatestSystemInfoUseCase:
    """Return the telemetry carried by the last applied poll."""

    def __init__(self, poll_telemetry_use_case: PollTelemetryUseCase) -> None:
        self._poll = poll_telemetry_use_case

    async def execute(self) -> Optional[SystemInfoDTO]:
        return self._poll.latest_info
