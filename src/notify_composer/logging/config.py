# -*- coding: utf-8 -*-
"""Logging configuration for structlog + Logfire."""

from __future__ import annotations

import logging
import logfire
import structlog
from typing import Any
from structlog.types import EventDict, Processor
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from notify_composer.config import AppSettings, LoggingSettings, Settings, get_settings

# Map standard logging levels to Logfire levels
LOG_LEVEL_TO_LOGFIRE: dict[str, str] = {
    "DEBUG": "debug",
    "INFO": "info",
    "WARNING": "warn",
    "ERROR": "error",
    "CRITICAL": "fatal",
}


def _service_context(app_settings: AppSettings) -> Processor:
    """Build a processor attaching logger name, app_name, service metadata and environment."""

    def _add_service_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        stdlib_logger = getattr(logger, "_logger", None)
        event_dict["logger"] = (
            getattr(stdlib_logger, "name", None) or getattr(logger, "name", "") or ""
        )
        event_dict["app_name"] = app_settings.app_name
        if app_settings.service_name:
            event_dict["service_name"] = app_settings.service_name
        if app_settings.service_version:
            event_dict["service_version"] = app_settings.service_version
        event_dict["environment"] = app_settings.environment
        return event_dict

    return _add_service_context


def _build_handlers(logging_settings: LoggingSettings) -> list[logging.Handler]:
    """Create the stdlib handlers enabled in settings (console and/or rotating file)."""
    handlers: list[logging.Handler] = []

    if logging_settings.log_to_console:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, logging_settings.console_level, logging.INFO))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(console_handler)

    if logging_settings.log_to_file:
        log_file_path = Path(logging_settings.log_file_path)
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = TimedRotatingFileHandler(
            log_file_path,
            when=logging_settings.log_file_when,
            interval=logging_settings.log_file_interval,
            backupCount=logging_settings.log_file_backup_count,
            encoding="utf-8",
            utc=logging_settings.log_file_utc,
        )
        file_handler.setLevel(getattr(logging, logging_settings.file_level, logging.INFO))
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        handlers.append(file_handler)

    return handlers


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog (and Logfire when enabled) from settings."""
    settings = settings or get_settings()
    app_settings = settings.app
    logging_settings = settings.logging

    handlers = _build_handlers(logging_settings)
    if handlers:
        logging.basicConfig(
            level=min(handler.level for handler in handlers),
            handlers=handlers,
            force=True,
        )

    if logging_settings.logfire_enabled:
        logfire.configure(
            token=logging_settings.logfire_token,
            service_name=app_settings.service_name or app_settings.app_name,
            service_version=app_settings.service_version,
            min_level=LOG_LEVEL_TO_LOGFIRE.get(logging_settings.logfire_level, "info"),  # type: ignore[arg-type]
            environment=app_settings.environment,
        )

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _service_context(app_settings),
    ]

    if logging_settings.logfire_enabled:
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    # File output is always JSON; console follows json_format unless a file is also enabled.
    if handlers:
        use_json = logging_settings.log_to_file or logging_settings.json_format
        renderer: Any = (
            structlog.processors.JSONRenderer()
            if use_json
            else structlog.dev.ConsoleRenderer()
        )
        processors.append(renderer)  # type: ignore[arg-type]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
