"""
Structured logging for stdont.

The helpers in this package are silent on their happy paths. The only
events emitted come from deliberate aborts (``unwrap_failed``), so that an
unwrap that takes a process down leaves a structured record naming the
line that requested it.

Architecture:
    ::

        configure_logging(level, json_format)
              │
              ▼
        structlog processor chain:
          1. TimeStamper(iso)
          2. add_log_level
          3. add_logger_name
          4. StackInfoRenderer / set_exc_info
          5. JSONRenderer (or ConsoleRenderer for a tty)

Examples:
    >>> from stdont.logging import configure_logging, get_logger
    >>> configure_logging(level="INFO", json_format=True)  # doctest: +SKIP
    >>> get_logger(__name__).info("ready")  # doctest: +SKIP

Tags:
    logging, structlog, observability, stdont
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog
from structlog.types import Processor

from stdont.settings import get_settings


def configure_logging(
    level: str | None = None,
    json_format: bool | None = None,
    add_timestamp: bool = True,
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Defaults to
            ``STDONT_LOG_LEVEL``.
        json_format: True for JSON, False for console, None for
            ``STDONT_JSON_LOGS`` and then auto-detect (JSON if not a tty)
        add_timestamp: Include ISO timestamp in logs
    """
    settings = get_settings()
    level = (level or settings.log_level).upper()
    if json_format is None:
        json_format = settings.json_logs
    if json_format is None:
        json_format = not sys.stdout.isatty()

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
    ]
    if add_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level)),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level),
    )


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger (usually ``get_logger(__name__)``)."""
    return structlog.get_logger(name)


__all__ = ["configure_logging", "get_logger"]
