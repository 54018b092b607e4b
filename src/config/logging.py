"""Structured logging configuration using structlog."""
import logging
import sys
from typing import Any

import structlog
from pythonjsonlogger import jsonlogger

from src.config.settings import settings

# Bound keys naming the item a pricing event is about, first match wins
SUBJECT_KEYS = ("hotel", "tour")


def add_subject_prefix(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Prefix the event with the hotel or tour it concerns.

    Args:
        logger: The logger instance
        method_name: The name of the method being called
        event_dict: The event dictionary containing log data

    Returns:
        Event dictionary with a ``[name]`` prefix when a subject is bound
    """
    for key in SUBJECT_KEYS:
        subject = event_dict.get(key)
        if subject:
            event_dict["event"] = f"[{subject}] {event_dict.get('event', '')}"
            break
    return event_dict


def _build_handler(log_format: str, log_level: int) -> logging.Handler:
    # stdout carries CLI results, logs go to stderr
    handler = logging.StreamHandler(sys.stderr)
    if log_format == "json":
        handler.setFormatter(jsonlogger.JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    handler.setLevel(log_level)
    return handler


def configure_logging() -> None:
    """Configure structlog and the root logger from ``settings.logging``."""
    log_level = getattr(logging, settings.logging.level)
    log_format = settings.logging.format

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()
    root_logger.addHandler(_build_handler(log_format, log_level))

    renderer = (
        structlog.processors.JSONRenderer()
        if log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            add_subject_prefix,
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """Get a logger bound to ``name``."""
    return structlog.get_logger(name)
