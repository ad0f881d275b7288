from __future__ import annotations

import logging
from dataclasses import dataclass

import structlog

from minerwatch.shared.logging import (
    configure_logging,
    get_logger,
    update_logging_from_settings,
)


def test_configure_logging_sets_root_handlers(tmp_path) -> None:
    log_file = tmp_path / "minerwatch.log"
    configure_logging(level="DEBUG", file_path=str(log_file), environment="development")

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert any(isinstance(handler, logging.FileHandler) for handler in root.handlers)

    logger = get_logger(__name__)
    logger.info("logging.test", cursor=1010)


def test_production_renders_json() -> None:
    configure_logging(level="INFO", environment="production")

    formatter = logging.getLogger().handlers[0].formatter
    assert isinstance(formatter, structlog.stdlib.ProcessorFormatter)
    assert isinstance(formatter.processors[-1], structlog.processors.JSONRenderer)


def test_http_client_loggers_are_quieted() -> None:
    configure_logging(level="INFO")
    assert logging.getLogger("httpx").level == logging.WARNING


@dataclass
class _LoggingSettings:
    level: str = "WARNING"
    format: str = "%(message)s"
    file_path: str | None = None


@dataclass
class _Settings:
    logging: _LoggingSettings
    environment: str = "production"


def test_update_logging_from_settings_applies_configuration() -> None:
    settings = _Settings(logging=_LoggingSettings(level="ERROR"))

    update_logging_from_settings(settings)

    root_logger = logging.getLogger()
    assert root_logger.level == logging.ERROR
