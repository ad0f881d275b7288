"""
Poll Telemetry Use Case - Application Layer

One scheduler tick: work out the start of the history range still
missing, fetch it from the device and hand the fragment to the merge
engine. Only the most recently issued request may apply its response.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from itertools import count
from typing import Any, Dict, Optional

import structlog
from pydantic import ValidationError

from minerwatch.application.dtos.system_info_dto import SystemInfoDTO
from minerwatch.application.use_cases.import_history_use_case import (
    ImportHistoryUseCase,
    ImportResult,
)
from minerwatch.domain.entities.errors import DeviceGatewayError
from minerwatch.domain.entities.history import HistoryFragment
from minerwatch.domain.entities.series_buffer import WindowedSeriesBuffer
from minerwatch.domain.gateways.device_gateway import IDeviceGateway
from minerwatch.domain.services.fetch_window import (
    RETENTION_WINDOW_MS,
    compute_fetch_start,
)
from minerwatch.shared.clock import Clock, now_ms

logger = structlog.get_logger(__name__)


class PollStatus(str, Enum):
    """Outcome of a poll tick."""

    APPLIED = "applied"
    NO_DATA = "no_data"
    SUPERSEDED = "superseded"
    FAILED = "failed"


@dataclass(frozen=True)
class PollResult:
    request_id: int
    status: PollStatus
    start_timestamp: int
    import_result: Optional[ImportResult] = None
    error: Optional[str] = None


class PollTelemetryUseCase:
    """
    Fetch and merge whatever history the buffer is missing.

    Ticks may overlap when the device is slow. Each call takes a new
    request id; a response whose id is no longer the latest is discarded
    instead of merged, so only the newest request ever mutates state.
    """

    def __init__(
        self,
        device_gateway: IDeviceGateway,
        import_history_use_case: ImportHistoryUseCase,
        series_buffer: WindowedSeriesBuffer,
        retention_window_ms: int = RETENTION_WINDOW_MS,
        fetch_system_info: bool = True,
        clock: Clock = now_ms,
    ) -> None:
        self._gateway = device_gateway
        self._import = import_history_use_case
        self._buffer = series_buffer
        self._retention_window_ms = retention_window_ms
        self._fetch_system_info = fetch_system_info
        self._clock = clock
        self._request_ids = count(1)
        self._latest_request_id = 0
        self._latest_info: Optional[SystemInfoDTO] = None

    @property
    def latest_request_id(self) -> int:
        return self._latest_request_id

    @property
    def latest_info(self) -> Optional[SystemInfoDTO]:
        """Normalized telemetry from the last applied response."""
        return self._latest_info

    async def execute(self) -> PollResult:
        request_id = next(self._request_ids)
        self._latest_request_id = request_id

        now = self._clock()
        start = compute_fetch_start(self._buffer.cursor, now, self._retention_window_ms)
        log = logger.bind(request_id=request_id, start_timestamp=start)
        log.debug("sync.poll.started", cursor=self._buffer.cursor)

        info: Optional[SystemInfoDTO] = None
        try:
            if self._fetch_system_info:
                device_info = await self._gateway.get_system_info(start)
                fragment = device_info.history
                info = self._parse_info(device_info.payload, log)
            else:
                fragment = await self._gateway.get_history_since(start, now)
        except DeviceGatewayError as e:
            log.warning("sync.poll.fetch_failed", error=e.message)
            return PollResult(
                request_id=request_id,
                status=PollStatus.FAILED,
                start_timestamp=start,
                error=e.message,
            )

        if request_id != self._latest_request_id:
            log.info(
                "sync.poll.superseded",
                latest_request_id=self._latest_request_id,
            )
            return PollResult(
                request_id=request_id,
                status=PollStatus.SUPERSEDED,
                start_timestamp=start,
            )

        if info is not None:
            self._latest_info = info

        return self._merge(request_id, start, fragment)

    def _merge(
        self, request_id: int, start: int, fragment: Optional[HistoryFragment]
    ) -> PollResult:
        if fragment is None or fragment.is_empty:
            return PollResult(
                request_id=request_id,
                status=PollStatus.NO_DATA,
                start_timestamp=start,
            )

        result = self._import.execute(fragment)
        return PollResult(
            request_id=request_id,
            status=PollStatus.APPLIED,
            start_timestamp=start,
            import_result=result,
        )

    @staticmethod
    def _parse_info(
        payload: Dict[str, Any], log: structlog.stdlib.BoundLogger
    ) -> Optional[SystemInfoDTO]:
        try:
            return SystemInfoDTO.from_payload(payload).normalized()
        except ValidationError as e:
            log.warning("sync.poll.invalid_system_info", error=str(e))
            return None
