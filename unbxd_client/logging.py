"""Structured logging helpers.

The package only emits events through ``logger``; applications that want
the JSON output call :func:`configure_logging` once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog


def configure_logging(
    level: int = logging.INFO,
    *,
    json_output: bool = True,
    stream: TextIO | None = None,
) -> None:
    """Route structlog events to ``stream`` (stdout by default).

    ``json_output=False`` switches to the human-readable console renderer.
    """

    processors = [
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if json_output:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(stream or sys.stdout),
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger("unbxd_client")

__all__ = ["configure_logging", "logger"]
