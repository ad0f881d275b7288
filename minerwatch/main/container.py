"""
Dependency container injection module - Main Layer

This module implements the dependency injection container
to simplify the management and lifecycle of dependencies
in the application.
"""

from contextlib import asynccontextmanager
from typing import Any

from dependency_injector import containers, providers

from minerwatch.application.use_cases.chart_use_cases import (
    GetChartSeriesUseCase,
    GetLatestPointUseCase,
    GetLatestSystemInfoUseCase,
)
from minerwatch.application.use_cases.import_history_use_case import (
    ImportHistoryUseCase,
)
from minerwatch.application.use_cases.poll_telemetry_use_case import (
    PollTelemetryUseCase,
)
from minerwatch.domain.entities.series_buffer import WindowedSeriesBuffer
from minerwatch.domain.ports.key_value_store import IKeyValueStore
from minerwatch.domain.repositories.series_state_repository import (
    ISeriesStateRepository,
)
from minerwatch.domain.services.fetch_window import (
    RETENTION_WINDOW_MS,
    eviction_cutoff,
)
from minerwatch.infrastructure.gateways.device_gateway import DeviceGateway
from minerwatch.infrastructure.repositories.series_state_repository import (
    SeriesStateRepository,
)
from minerwatch.infrastructure.services.poll_scheduler import PollScheduler
from minerwatch.infrastructure.storage.file_store import FileKeyValueStore
from minerwatch.infrastructure.storage.redis_store import RedisKeyValueStore
from minerwatch.shared import Clock, EnumStorageBackend, get_logger, now_ms
from minerwatch.shared.consts import MILLISECONDS_PER_SECOND

from .config import AppSettings

logger = get_logger(__name__)


def create_key_value_store(
    backend: Any, file_path: str, redis_url: str, key_prefix: str = ""
) -> IKeyValueStore:
    """Build the key/value store selected by ``STORAGE_BACKEND``."""
    backend_value = getattr(backend, "value", backend)
    if backend_value == EnumStorageBackend.REDIS.value:
        logger.info("container.storage.redis", redis_url=redis_url)
        return RedisKeyValueStore(redis_url, key_prefix=key_prefix)
    if backend_value == EnumStorageBackend.FILE.value:
        logger.info("container.storage.file", file_path=file_path)
        return FileKeyValueStore(file_path)
    raise ValueError(f"Unsupported storage backend: {backend_value}")


def load_series_buffer(
    repository: ISeriesStateRepository,
    retention_window_ms: int = RETENTION_WINDOW_MS,
    clock: Clock = now_ms,
) -> WindowedSeriesBuffer:
    """
    Hydrate the process-wide series buffer from durable storage.

    Points that aged out while the process was down are evicted before
    anything reads the buffer.
    """
    buffer = repository.load()
    evicted = buffer.evict_before(eviction_cutoff(clock(), retention_window_ms))
    if evicted:
        logger.info(
            "container.series.expired_evicted", evicted=evicted, size=len(buffer)
        )
    return buffer


class AppContainer(containers.DeclarativeContainer):
    """Composition Root using dependency-injector."""

    wiring_config = containers.WiringConfiguration(packages=["..presentation"])

    # Settings
    config = providers.Configuration()

    retention_window_ms = providers.Callable(
        lambda seconds: int(seconds) * MILLISECONDS_PER_SECOND,
        config.sync.retention_window_seconds,
    )

    # Infrastructure
    key_value_store = providers.Singleton(
        create_key_value_store,
        backend=config.storage.backend,
        file_path=config.storage.file_path,
        redis_url=config.storage.redis_url,
        key_prefix=config.storage.key_prefix,
    )

    series_state_repository = providers.Singleton(
        SeriesStateRepository,
        store=key_value_store,
    )

    device_gateway = providers.Singleton(
        DeviceGateway,
        base_url=config.device.base_url,
        timeout=config.device.timeout,
    )

    # Single-writer state, hydrated once per process
    series_buffer = providers.Singleton(
        load_series_buffer,
        repository=series_state_repository,
        retention_window_ms=retention_window_ms,
    )

    # Application (use cases)
    import_history_use_case = providers.Singleton(
        ImportHistoryUseCase,
        series_buffer=series_buffer,
        series_state_repository=series_state_repository,
        retention_window_ms=retention_window_ms,
    )

    poll_telemetry_use_case = providers.Singleton(
        PollTelemetryUseCase,
        device_gateway=device_gateway,
        import_history_use_case=import_history_use_case,
        series_buffer=series_buffer,
        retention_window_ms=retention_window_ms,
        fetch_system_info=config.device.fetch_system_info,
    )

    poll_scheduler = providers.Singleton(
        PollScheduler,
        poll_telemetry_use_case=poll_telemetry_use_case,
        interval_seconds=config.sync.poll_interval_seconds,
    )

    get_chart_series_use_case = providers.Factory(
        GetChartSeriesUseCase,
        series_buffer=series_buffer,
    )

    get_latest_point_use_case = providers.Factory(
        GetLatestPointUseCase,
        series_buffer=series_buffer,
    )

    get_latest_system_info_use_case = providers.Factory(
        GetLatestSystemInfoUseCase,
        poll_telemetry_use_case=poll_telemetry_use_case,
    )


# -------------------------
# Global Container Instance
# -------------------------
_app_container: AppContainer | None = None


def init_container(settings: AppSettings) -> AppContainer:
    """Initialize global container with application settings."""

    global _app_container

    container = AppContainer()
    container.config.from_pydantic(settings)
    _app_container = container
    return container


def get_container() -> AppContainer:
    """Get the initialized global container."""

    if _app_container is None:
        raise RuntimeError("Container has not been initialized yet")

    return _app_container


@asynccontextmanager
async def app_lifespan():
    """
    Hydrate the series buffer, run the poll scheduler, and release the
    key/value store on exit.
    """
    container = get_container()

    series_buffer = container.series_buffer()
    scheduler = container.poll_scheduler()

    try:
        logger.info(
            "container.series.hydrated",
            size=len(series_buffer),
            cursor=series_buffer.cursor,
        )
        scheduler.start()
        logger.info("container.resources.initialized")
        yield container

    finally:
        await scheduler.stop()
        container.key_value_store().close()
        logger.info("container.resources.shutdown")
