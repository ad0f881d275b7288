#!/usr/bin/env python3
"""
Poller Entry Point - Main Layer

Runs the sync loop without the HTTP API, for hosts that only need the
persisted series (for example a chart page reading the same storage).
Both the API and the poller are application entry points that belong to
the Main layer.
"""

import asyncio
import signal

from minerwatch.main.config import get_settings
from minerwatch.main.container import app_lifespan, init_container
from minerwatch.shared import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)

configure_logging()

logger = get_logger(__name__)


async def run_poller(stop_event: asyncio.Event) -> None:
    """Run the scheduler until ``stop_event`` is set."""
    settings = get_settings()
    init_container(settings)

    logger.info(
        "poller.starting",
        device_url=settings.device.base_url,
        interval_seconds=settings.sync.poll_interval_seconds,
        storage_backend=getattr(
            settings.storage.backend, "value", settings.storage.backend
        ),
    )

    async with app_lifespan():
        await stop_event.wait()

    logger.info("poller.stopped")


async def _main() -> None:
    stop_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:  # pragma: no cover - Windows event loop
            pass
    await run_poller(stop_event)


def main() -> None:
    """Main entry point for the headless poller."""
    update_logging_from_settings(get_settings())
    try:
        asyncio.run(_main())
    except KeyboardInterrupt:
        logger.info("poller.interrupted")


if __name__ == "__main__":
    main()
