"""Structured logging for the tribute simulator.

Diagnostics go through structlog. The narrative of a simulated day is
written to the message center instead, so nothing here is user facing.

Example:
    >>> from tribute_sim.core.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("Day simulated", day=3, alive=7)
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

APP_NAME = "tribute_sim"
STDLIB_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def add_app_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Stamp every entry with the application name."""
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def _level_number(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def build_processors(*, json_format: bool) -> list[Processor]:
    """Return the structlog processor chain for the chosen renderer."""
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]
    if json_format:
        processors += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=sys.stdout.isatty(),
                exception_formatter=structlog.dev.plain_traceback,
            )
        )
    return processors


def configure_logging(
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Configure structlog and the standard library root logger.

    Arguments left as ``None`` fall back to the application settings:
    ``log_level`` (or DEBUG when ``debug`` is set) and ``json_logs``.

    Args:
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL.
        json_format: Render JSON lines instead of console output.
        log_file: Also append standard library records to this file.

    Example:
        >>> configure_logging(level="DEBUG")
    """
    if level is None or json_format is None:
        from tribute_sim.core.config import get_settings

        settings = get_settings()
        level = level or ("DEBUG" if settings.debug else settings.log_level)
        json_format = settings.json_logs if json_format is None else json_format

    numeric_level = _level_number(level)
    structlog.configure(
        processors=build_processors(json_format=json_format),
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format=STDLIB_FORMAT,
        level=numeric_level,
        stream=sys.stdout,
        force=True,
    )
    if log_file:
        handler = logging.FileHandler(log_file)
        handler.setLevel(numeric_level)
        handler.setFormatter(logging.Formatter(STDLIB_FORMAT))
        logging.getLogger().addHandler(handler)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind values (e.g. ``day=4``) onto every following log entry."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "add_app_context",
    "build_processors",
    "configure_logging",
    "get_logger",
    "bind_context",
    "clear_context",
]
