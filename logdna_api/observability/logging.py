"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog

from logdna_api.request.redact import REDACTED_VALUE


# Event keys whose values are replaced before rendering
_SECRET_EVENT_KEYS = frozenset({"service_key", "servicekey"})


def redact_secrets(
    _logger: object, _method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask service keys passed directly as log fields."""
    for key in event_dict.keys() & _SECRET_EVENT_KEYS:
        event_dict[key] = REDACTED_VALUE
    return event_dict


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for API clients.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: Render JSON lines instead of console output.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        redact_secrets,
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


def bind_client_context(host: str) -> None:
    """Attach the API host to all subsequent log messages.

    Args:
        host: Provider host the client talks to.
    """
    structlog.contextvars.bind_contextvars(api_host=host)


def clear_client_context() -> None:
    """Remove the API host from log messages."""
    structlog.contextvars.unbind_contextvars("api_host")
