"""
Observability — structlog setup and outcome logging for Results.

    configure_structlog("DEBUG", "json")
    result = log_outcome(admit(person), "admission.check")

log_outcome is a tee: it logs and hands back the same Result, so it can sit
anywhere in a chain without changing what flows through it.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

import structlog

from twotrack.config import TwoTrackSettings
from twotrack.messages import truncate
from twotrack.result import Bad, Ok, Result

T = TypeVar("T")
E = TypeVar("E")

DEFAULT_MAX_MESSAGES = 10

_max_logged_messages = DEFAULT_MAX_MESSAGES


def configure_structlog(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog for structured logging.

    "json" emits one JSON object per line (machine-readable);
    "console" emits colored, human-readable lines.
    Unknown level names fall back to INFO.
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: TwoTrackSettings | None = None) -> TwoTrackSettings:
    """Load settings from the environment (unless given) and apply them to structlog and log_outcome."""
    global _max_logged_messages
    settings = settings or TwoTrackSettings()
    _max_logged_messages = settings.max_logged_messages
    configure_structlog(settings.log_level, settings.log_format)
    return settings


def log_outcome(
    result: Result[T, E],
    event: str,
    logger: Any = None,
    max_messages: int | None = None,
) -> Result[T, E]:
    """
    Log which track `result` is on and return it unchanged.

    Ok  → info    "<event>.succeeded" with its warnings (if any)
    Bad → warning "<event>.failed"    with its errors
    `max_messages` defaults to the configured TWOTRACK_MAX_LOGGED_MESSAGES.
    """
    log = logger if logger is not None else structlog.get_logger("twotrack")
    limit = max_messages if max_messages is not None else _max_logged_messages
    match result:
        case Ok(_, warnings):
            log.info(
                f"{event}.succeeded",
                warning_count=len(warnings),
                warnings=[str(w) for w in truncate(warnings, limit)],
            )
        case Bad(errors):
            log.warning(
                f"{event}.failed",
                error_count=len(errors),
                errors=[str(e) for e in truncate(errors, limit)],
            )
    return result
