"""Observability module for structured logging."""

from filefollow.observability.logging import (
    bind_load_context,
    clear_load_context,
    configure_logging,
    get_logger,
    level_from_name,
)


__all__ = [
    "bind_load_context",
    "clear_load_context",
    "configure_logging",
    "get_logger",
    "level_from_name",
]
