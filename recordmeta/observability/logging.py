"""
Structured Logging Configuration.

Configures structlog for:
- JSON output in production
- Colored console output in development
- Context variable injection
"""

import logging
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Any, Literal

import structlog
from structlog.types import EventDict, WrappedLogger

# Context variable for additional log context
_log_context: ContextVar[dict[str, Any]] = ContextVar("log_context", default={})

_service_name: str = "recordmeta"


class LogContext:
    """
    Context manager for adding temporary context to logs.

    Usage:
        with LogContext(collection="users", operation="insert"):
            logger.info("Applying metadata")
    """

    def __init__(self, **kwargs: Any):
        self._context = kwargs
        self._token = None

    def __enter__(self):
        current = _log_context.get().copy()
        current.update(self._context)
        self._token = _log_context.set(current)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._token:
            _log_context.reset(self._token)
        return False


def current_log_context() -> dict[str, Any]:
    """Return a copy of the context bound by enclosing LogContext blocks."""
    return dict(_log_context.get())


def add_log_context(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add context variables to log events."""
    context = _log_context.get()
    if context:
        event_dict.update(context)
    return event_dict


def add_timestamp(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_service_info(
    logger: WrappedLogger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add service information to log events."""
    event_dict["service"] = _service_name
    return event_dict


def configure_logging(
    level: str = "INFO",
    format: Literal["json", "console"] = "json",
    service_name: str = "recordmeta",
) -> None:
    """
    Configure structlog for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format: Output format ("json" for production, "console" for development)
        service_name: Service name for log identification
    """
    global _service_name
    _service_name = service_name

    shared_processors: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        add_timestamp,
        add_service_info,
        add_log_context,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    processors = shared_processors + [
        structlog.processors.format_exc_info,
        renderer,
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure standard library logging
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )

    logging.getLogger("pymongo").setLevel(logging.WARNING)


def configure_logging_from_settings() -> None:
    """Configure logging from the cached application settings."""
    from recordmeta.config.settings import get_settings

    settings = get_settings()
    configure_logging(
        level=settings.log_level,
        format=settings.observability.log_format,
        service_name=settings.observability.service_name,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a configured logger instance.

    Args:
        name: Logger name (usually __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
