"""
Logging Configuration - Shared Layer

Routes both stdlib logging and structlog through a single
ProcessorFormatter so the poller, the HTTP app and third-party
libraries (httpx, uvicorn) emit the same structured records.
"""

import logging
import os
import sys
from typing import Any, Dict, List, Optional

import structlog
from structlog.types import Processor

from minerwatch.shared.consts import EnumEnvironment

DEFAULT_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log every request at INFO; one line per poll is too chatty.
_NOISY_LOGGERS = ("httpx", "httpcore")


def _get_log_config_from_env() -> Dict[str, Optional[str]]:
    """Read bootstrap logging options before the settings system is loaded."""
    return {
        "level": os.environ.get("LOG_LEVEL", "INFO"),
        "format": os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        "file_path": os.environ.get("LOG_FILE_PATH"),
    }


def _build_handlers(log_file: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    return handlers


def _build_renderer(environment: str) -> Processor:
    if environment.lower() == EnumEnvironment.PRODUCTION:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def configure_logging(
    level: Optional[str] = None,
    format_string: Optional[str] = None,
    file_path: Optional[str] = None,
    environment: str = "development",
) -> None:
    """
    Configure stdlib logging and structlog.

    Call once at startup with no arguments for early logging, then again
    through update_logging_from_settings once AppSettings is available.

    Args:
        level: Optional override for the log level.
        format_string: Optional override for the plain-text log format.
        file_path: Optional log file; console output is always enabled.
        environment: Application environment; production renders JSON.
    """
    env_config = _get_log_config_from_env()

    log_level = level or env_config["level"] or "INFO"
    log_file = file_path or env_config["file_path"]
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handlers = _build_handlers(log_file)
    timestamper = structlog.processors.TimeStamper(fmt="iso", utc=True)

    formatter = structlog.stdlib.ProcessorFormatter(
        processor=_build_renderer(environment),
        foreign_pre_chain=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
        ],
    )
    for handler in handlers:
        handler.setFormatter(formatter)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            timestamper,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root_logger.handlers = handlers
    root_logger.setLevel(numeric_level)

    if numeric_level > logging.DEBUG:
        for name in _NOISY_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        "logging.configured level=%s file=%s", log_level, log_file
    )


def update_logging_from_settings(settings: Any) -> None:
    """
    Re-apply logging configuration from loaded application settings.

    Args:
        settings: AppSettings (or any object exposing ``logging`` and
            ``environment`` attributes).
    """
    try:
        log_level = getattr(settings.logging.level, "value", settings.logging.level)
        environment = getattr(settings.environment, "value", settings.environment)

        configure_logging(
            level=log_level,
            format_string=settings.logging.format,
            file_path=settings.logging.file_path,
            environment=environment,
        )
    except Exception as e:
        logging.error(f"Failed to update logging from settings: {e}")


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger configured for the project."""
    return structlog.get_logger(name)
