"""Logging configuration using structlog."""

from __future__ import annotations

import logging
import sys

import structlog

from tui_booking_e2e.config.settings import Settings, settings as default_settings


def configure_logging(settings: Settings | None = None) -> None:
    """
    What it does:
    - Configures structlog (and stdlib logging for Playwright/asyncio) once per process.

    Behavior:
    - Level comes from LOG_LEVEL; unknown names fall back to INFO.
    - JSON lines when LOG_JSON is set or on CI, colored console output otherwise.
    """
    settings = settings or default_settings
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer()
            if settings.log_json or settings.is_ci()
            else structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a configured logger instance."""
    logger: structlog.typing.FilteringBoundLogger = structlog.get_logger(name)
    return logger
