"""asyncio timer that drives the poll use case."""

from __future__ import annotations

import asyncio
from typing import Optional, Set

import structlog

from minerwatch.application.use_cases.poll_telemetry_use_case import (
    PollResult,
    PollTelemetryUseCase,
)
from minerwatch.shared.consts import DEFAULT_POLL_INTERVAL_SECONDS

logger = structlog.get_logger(__name__)


class PollScheduler:
    """
    Fire one poll immediately, then one every ``interval_seconds``.

    Every tick runs in its own task so a slow device never delays the
    timer; overlapping ticks are resolved by the use case's latest-wins
    rule. All state mutation happens on the event loop thread.
    """

    def __init__(
        self,
        poll_telemetry_use_case: PollTelemetryUseCase,
        interval_seconds: float = DEFAULT_POLL_INTERVAL_SECONDS,
    ) -> None:
        if interval_seconds <= 0:
            raise ValueError("interval_seconds must be positive")
        self._poll = poll_telemetry_use_case
        self._interval = interval_seconds
        self._loop_task: Optional[asyncio.Task[None]] = None
        self._ticks: Set[asyncio.Task[Optional[PollResult]]] = set()

    @property
    def is_running(self) -> bool:
        return self._loop_task is not None and not self._loop_task.done()

    @property
    def pending_ticks(self) -> int:
        return len(self._ticks)

    def start(self) -> None:
        if self.is_running:
            return
        logger.info("sync.scheduler.started", interval_seconds=self._interval)
        self._loop_task = asyncio.create_task(self._run(), name="minerwatch-poll")

    async def stop(self) -> None:
        tasks = list(self._ticks)
        if self._loop_task is not None:
            tasks.append(self._loop_task)
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

        self._loop_task = None
        self._ticks.clear()
        logger.info("sync.scheduler.stopped")

    async def _run(self) -> None:
        while True:
            task = asyncio.create_task(self._tick())
            self._ticks.add(task)
            task.add_done_callback(self._ticks.discard)
            await asyncio.sleep(self._interval)

    async def _tick(self) -> Optional[PollResult]:
        try:
            result = await self._poll.execute()
        except Exception as exc:
            logger.error("sync.scheduler.tick_failed", error=str(exc), exc_info=exc)
            return None

        logger.debug(
            "sync.scheduler.tick",
            request_id=result.request_id,
            status=result.status.value,
        )
        return result
