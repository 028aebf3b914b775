"""Structured logging configuration for valuesort.

Two renderers are available:
- Rich-aware console renderer for the interactive CLI (human-readable)
- JSON renderer for piping logs elsewhere (machine-readable)
"""

import logging
import os

import structlog
from structlog.processors import (
    JSONRenderer,
    StackInfoRenderer,
    TimeStamper,
    add_log_level,
    format_exc_info,
)

# Quiet by default so log lines don't interleave with the prompt
DEFAULT_LOG_LEVEL = os.getenv("VALUESORT_LOG_LEVEL", "WARNING")


def configure_logging(cli_mode: bool = True, log_level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure structlog with the appropriate renderer.

    Args:
        cli_mode: If True, render with structlog's console renderer (uses
                  Rich when available). If False, render JSON lines.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    processors = [
        add_log_level,
        TimeStamper(fmt="iso"),
        StackInfoRenderer(),
        format_exc_info,
    ]

    if cli_mode:
        from structlog.dev import ConsoleRenderer
        renderer = ConsoleRenderer(colors=True)
    else:
        renderer = JSONRenderer()

    processors.append(renderer)

    level = getattr(logging, log_level.upper(), logging.WARNING)

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        # Module-level loggers must follow any later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a configured logger instance.

    Args:
        name: Optional logger name (typically __name__ of the calling module)

    Returns:
        Configured structlog logger
    """
    if name:
        return structlog.get_logger(name)
    return structlog.get_logger()
