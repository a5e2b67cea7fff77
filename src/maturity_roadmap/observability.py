"""Structured logging setup.

All modules obtain their logger through ``get_logger(__name__)`` and log
key/value events. ``configure_logging`` is called once by the entry point.
"""

import logging
from typing import Any

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog for the process.

    Args:
        level: Minimum log level name (e.g., 'DEBUG', 'INFO').
        json_output: Render events as JSON lines instead of console output.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    renderer: structlog.typing.Processor = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """Return a structlog logger bound to the given module name.

    Args:
        name: Logger name, usually ``__name__``.

    Returns:
        Structlog bound logger.
    """
    return structlog.get_logger(name)
