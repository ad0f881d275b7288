from __future__ import annotations

import asyncio

import pytest

from minerwatch.application.use_cases.poll_telemetry_use_case import (
    PollResult,
    PollStatus,
)
from minerwatch.infrastructure.services.poll_scheduler import PollScheduler


class _CountingPoll:
    def __init__(self, fail: bool = False, block: bool = False) -> None:
        self.calls = 0
        self.fail = fail
        self.block = block
        self.called = asyncio.Event()

    async def execute(self) -> PollResult:
        self.calls += 1
        self.called.set()
        if self.fail:
            raise RuntimeError("boom")
        if self.block:
            await asyncio.Event().wait()
        return PollResult(
            request_id=self.calls, status=PollStatus.NO_DATA, start_timestamp=0
        )


@pytest.mark.parametrize("interval", [0, -1])
def test_interval_must_be_positive(interval: float) -> None:
    with pytest.raises(ValueError):
        PollScheduler(_CountingPoll(), interval_seconds=interval)


@pytest.mark.asyncio
async def test_first_tick_fires_immediately() -> None:
    poll = _CountingPoll()
    scheduler = PollScheduler(poll, interval_seconds=60)

    scheduler.start()
    await asyncio.wait_for(poll.called.wait(), timeout=1)

    assert scheduler.is_running
    assert poll.calls == 1
    await scheduler.stop()
    assert not scheduler.is_running


@pytest.mark.asyncio
async def test_ticks_repeat_on_interval() -> None:
    poll = _CountingPoll()
    scheduler = PollScheduler(poll, interval_seconds=0.01)

    scheduler.start()
    await asyncio.sleep(0.1)
    await scheduler.stop()

    assert poll.calls >= 3


@pytest.mark.asyncio
async def test_start_twice_keeps_single_loop() -> None:
    poll = _CountingPoll()
    scheduler = PollScheduler(poll, interval_seconds=60)

    scheduler.start()
    scheduler.start()
    await asyncio.wait_for(poll.called.wait(), timeout=1)
    await asyncio.sleep(0)

    assert poll.calls == 1
    await scheduler.stop()


@pytest.mark.asyncio
async def test_failing_tick_does_not_stop_the_loop() -> None:
    poll = _CountingPoll(fail=True)
    scheduler = PollScheduler(poll, interval_seconds=0.01)

    scheduler.start()
    await asyncio.sleep(0.05)

    assert scheduler.is_running
    assert poll.calls >= 2
    await scheduler.stop()


@pytest.mark.asyncio
async def test_stop_cancels_in_flight_ticks() -> None:
    poll = _CountingPoll(block=True)
    scheduler = PollScheduler(poll, interval_seconds=60)

    scheduler.start()
    await asyncio.wait_for(poll.called.wait(), timeout=1)
    assert scheduler.pending_ticks == 1

    await scheduler.stop()

    assert scheduler.pending_ticks == 0
    assert not scheduler.is_running


@pytest.mark.asyncio
async def test_stop_without_start() -> None:
    scheduler = PollScheduler(_CountingPoll(), interval_seconds=1)
    await scheduler.stop()
    assert not scheduler.is_running
