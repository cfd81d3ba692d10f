"""Structured logging configuration."""

import logging
import sys
from typing import Final, TextIO

import structlog


# Agent log level names as written in the Global section
LOG_LEVELS: Final[dict[str, int]] = {
    "OFF": logging.CRITICAL + 10,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def level_from_name(name: str) -> int:
    """Map a configured log level name to a logging level.

    Args:
        name: Level name, case-insensitive. Blank means INFO.

    Returns:
        Standard library logging level.

    Raises:
        ValueError: If the name is not a known level.
    """
    key = name.strip().upper()
    if not key:
        return logging.INFO
    if key not in LOG_LEVELS:
        msg = f"Unknown log level {name!r}"
        raise ValueError(msg)
    return LOG_LEVELS[key]


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for the agent.

    Sets up structlog with JSON output format and standard processors
    for timestamps, log levels, and context binding.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Whether to use JSON format (default: True).
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_load_context(load_id: str) -> None:
    """Bind the load identifier to all subsequent log messages.

    Args:
        load_id: Unique load identifier.
    """
    structlog.contextvars.bind_contextvars(load_id=load_id)


def clear_load_context() -> None:
    """Clear load context from log messages."""
    structlog.contextvars.unbind_contextvars("load_id")
