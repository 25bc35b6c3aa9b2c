"""Observability module for create-component.

Structured logging via structlog, with console output for terminals and
JSON output for CI logs.

Example:
    >>> from create_component.observability import get_logger
    >>>
    >>> logger = get_logger(__name__)
    >>> logger.info("scaffold.write.completed", component="ExampleButton")
"""

from create_component.observability.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    is_debug_mode,
)

__all__ = [
    "bind_context",
    "clear_context",
    "configure_logging",
    "get_logger",
    "is_debug_mode",
]
