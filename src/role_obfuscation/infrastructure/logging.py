"""Structured logging configuration using structlog.

This module provides:
- JSON output for production (machine-parseable)
- Console output for development (human-readable)
- Context variable binding for request tracing
- Caller information (file, line, function)

Logs go to stderr so command output on stdout stays clean. Until setup_logging
is called, events are handed to stdlib logging instead of printed.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from role_obfuscation.config import LoggingSettings


def setup_logging(settings: LoggingSettings | None = None) -> None:
    """Configure structured logging for the application.

    Args:
        settings: Logging settings. If None, uses defaults from config.
    """
    if settings is None:
        from role_obfuscation.config import get_settings  # noqa: PLC0415

        settings = get_settings().logging

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
    ]

    if settings.include_timestamp:
        shared_processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))

    shared_processors.extend(
        [
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
        ]
    )

    if settings.include_caller:
        shared_processors.append(
            structlog.processors.CallsiteParameterAdder(
                [
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.LINENO,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                ]
            )
        )

    if settings.format == "json":
        final_processors: list[structlog.types.Processor] = [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            structlog.dev.ConsoleRenderer(
                colors=False,
                exception_formatter=structlog.dev.plain_traceback,
            )
        ]

    structlog.configure(
        processors=shared_processors + final_processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, settings.level),
        force=True,  # Override any existing config
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (usually __name__).

    Returns:
        Configured structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger


def bind_context(**kwargs: str | int | float | bool) -> None:
    """Bind context variables for the current execution context.

    Never bind raw role values here; bind their obfuscated form instead.
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    """Unbind context variables."""
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    """Clear all context variables."""
    structlog.contextvars.clear_contextvars()


def configure_library_defaults() -> None:
    """Route structlog through stdlib logging until setup_logging is called.

    structlog's own default prints every event to stdout, which an embedding
    application never asked for. Existing configuration is left untouched.
    """
    if structlog.is_configured():
        return

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


configure_library_defaults()
