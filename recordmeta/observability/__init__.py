"""
Observability Module.

Structured logging for recordmeta, built on structlog.
"""

from recordmeta.observability.logging import (
    configure_logging,
    configure_logging_from_settings,
    current_log_context,
    get_logger,
    LogContext,
)

__all__ = [
    "configure_logging",
    "configure_logging_from_settings",
    "current_log_context",
    "get_logger",
    "LogContext",
]
