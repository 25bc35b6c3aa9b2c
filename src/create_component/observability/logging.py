"""Structured logging configuration for create-component.

This module configures structlog for structured logging with support for
both development (console) and machine-readable (JSON) output formats.

Log records go to stderr; stdout is reserved for the progress lines the
CLI prints for the user.

Environment Variables:
    CREATE_COMPONENT_LOG_FORMAT: Set to "json" for JSON output, "console" for colored output
    CREATE_COMPONENT_LOG_LEVEL: Set log level (DEBUG, INFO, WARNING, ERROR)
    CREATE_COMPONENT_DEBUG: Set to "true" or "1" to log stack traces for write failures

Example:
    >>> from create_component.observability.logging import get_logger, configure_logging
    >>>
    >>> configure_logging(log_format="console", log_level="DEBUG")
    >>> logger = get_logger("create_component.paths")
    >>> logger.debug("scaffold.locator.probe", candidate="src/components")
"""

import logging
import os
import sys
from typing import Any

import structlog
from structlog.typing import Processor

# Default configuration
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "console"

# Environment variable names
ENV_LOG_FORMAT = "CREATE_COMPONENT_LOG_FORMAT"
ENV_LOG_LEVEL = "CREATE_COMPONENT_LOG_LEVEL"
ENV_DEBUG = "CREATE_COMPONENT_DEBUG"

# Module-level flag to track if logging has been configured
_logging_configured = False


def is_debug_mode() -> bool:
    """Return True if CREATE_COMPONENT_DEBUG is set to a truthy value (e.g. true, 1)."""
    value = os.environ.get(ENV_DEBUG, "").strip().lower()
    return value in ("true", "1", "yes", "on")


def _get_log_level() -> str:
    """Get log level from environment or use default."""
    return os.environ.get(ENV_LOG_LEVEL, DEFAULT_LOG_LEVEL).upper()


def _get_log_format() -> str:
    """Get log format from environment or use default."""
    return os.environ.get(ENV_LOG_FORMAT, DEFAULT_LOG_FORMAT).lower()


def _get_shared_processors() -> list[Processor]:
    """Get shared processors for all log formats."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _get_console_renderer() -> Processor:
    """Get console renderer for interactive terminals."""
    # Colors only when stderr is a terminal; CI logs stay plain
    return structlog.dev.ConsoleRenderer(
        colors=sys.stderr.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def _get_json_renderer() -> Processor:
    """Get JSON renderer."""
    return structlog.processors.JSONRenderer()


def _configure_structlog(shared_processors: list[Processor]) -> None:
    """Route structlog events through stdlib logging.

    Touches no handlers, so importing the library never changes how the host
    program's root logger is set up.
    """
    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


def configure_logging(
    log_format: str | None = None,
    log_level: str | None = None,
    force: bool = False,
) -> None:
    """Install the create-component handler on the root logger.

    Called by the CLI at the start of every run. Library callers that
    manage their own logging never need it.

    Args:
        log_format: Output format - "json" or "console". Defaults to env var or "console"
        log_level: Minimum log level. Defaults to env var or "WARNING"
        force: If True, reconfigure even if already configured

    Example:
        >>> configure_logging(log_format="json", log_level="INFO")
        >>> configure_logging(log_format="console", log_level="DEBUG", force=True)
    """
    global _logging_configured

    if _logging_configured and not force:
        return

    log_format = log_format or _get_log_format()
    log_level = log_level or _get_log_level()

    shared_processors = _get_shared_processors()

    # JSON lines for CI logs, key=value pairs for a terminal
    if log_format == "json":
        renderer: Processor = _get_json_renderer()
    else:
        renderer = _get_console_renderer()

    _configure_structlog(shared_processors)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )

    # stdout carries the progress lines; log records never mix into it.
    # Bound to whatever sys.stderr is at configure time, so the CLI
    # reconfigures with force=True on every invocation.
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    # A misspelt CREATE_COMPONENT_LOG_LEVEL must not abort the scaffold
    root_logger.setLevel(getattr(logging, log_level, logging.WARNING))

    _logging_configured = True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for the given name.

    Safe to call at import time: it wires structlog into stdlib logging if
    nothing configured structlog yet, but leaves root handlers and levels
    alone. Records reach a terminal only once configure_logging() (or the
    host program) installs a handler.

    Args:
        name: Logger name (typically __name__ of the module)

    Returns:
        Bound structlog logger
    """
    if not structlog.is_configured():
        _configure_structlog(_get_shared_processors())

    return structlog.stdlib.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Bind context variables that will be included in all subsequent logs.

    The CLI binds the component name so every event of a run carries it.

    Args:
        **kwargs: Key-value pairs to bind to the log context
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    """Clear all bound context variables."""
    structlog.contextvars.clear_contextvars()
