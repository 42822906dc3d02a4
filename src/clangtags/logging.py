"""Structured logging for clangtags.

Engine modules log through structlog loggers wrapped around stdlib
loggers. Until a host calls ``configure_logging``, stdlib's defaults apply:
debug and info records are dropped and warnings go to stderr. Nothing is
ever written to stdout unless a host asks for it.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import structlog

_LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
}


def _create_handler(destination: str) -> logging.Handler:
    """Create handler for stderr, stdout, or file path."""
    handler: logging.Handler
    if destination == "stderr":
        handler = logging.StreamHandler(sys.stderr)
    elif destination == "stdout":
        handler = logging.StreamHandler(sys.stdout)
    else:
        path = Path(destination)
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, mode="a")
    return handler


def configure_logging(
    *,
    level: str = "INFO",
    json_format: bool = False,
    destination: str = "stderr",
) -> None:
    """Configure structlog on top of stdlib logging.

    Args:
        level: Log level name.
        json_format: Render JSON lines instead of console output.
        destination: "stderr", "stdout", or a file path.
    """
    default_level = _LEVEL_MAP.get(level.upper(), logging.INFO)

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S", key="timestamp"),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(default_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Don't cache - allows reconfiguration and respects level changes
        cache_logger_on_first_use=False,
    )

    if json_format:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(
            colors=destination == "stderr" and sys.stderr.isatty(),
        )
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=shared_processors,
    )

    handler = _create_handler(destination)
    handler.setLevel(default_level)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.setLevel(default_level)
    root_logger.addHandler(handler)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that emits through ``logging.getLogger(name)``.

    Processors are resolved on every call, so a later ``configure_logging``
    applies to loggers created at import time.
    """
    return structlog.wrap_logger(logging.getLogger(name or "clangtags"))  # type: ignore[no-any-return]
