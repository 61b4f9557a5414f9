"""Logging configuration for the annuity calculator.

Structured logging is done with ``structlog`` on top of the standard library
``logging`` module. Library code only asks for a logger; the command-line
interface calls :func:`configure_logging` once at start-up.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    extra_processors: Optional[list] = None,
) -> None:
    """Configure structlog and the stdlib root logger.

    Parameters
    ----------
    level: str
        Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    format_json: bool
        Render JSON lines instead of the human-readable console format.
    extra_processors: list, optional
        Additional structlog processors inserted before the renderer.
    """
    log_level = getattr(logging, level.upper(), None)
    if not isinstance(log_level, int):
        raise ValueError(f"Unknown log level: {level}")

    # Log to stderr so command output on stdout stays machine-readable
    logging.basicConfig(level=log_level, stream=sys.stderr, format="%(message)s", force=True)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if extra_processors:
        processors.extend(extra_processors)
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """Return a structlog logger for ``name`` (typically ``__name__``)."""
    return structlog.get_logger(name)
