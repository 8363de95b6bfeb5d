"""structlog setup shared by the command line and data loaders."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import structlog
from structlog.types import Processor

LOG_LEVELS: dict[str, int] = {
    "critical": logging.CRITICAL,
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}
LOG_FORMATS = ("console", "json")


def resolve_level(level: str) -> int:
    """Map a level name onto its :mod:`logging` constant."""
    normalized = level.lower()
    if normalized not in LOG_LEVELS:
        valid = ", ".join(sorted(LOG_LEVELS))
        raise ValueError(f"Unsupported log level {level!r}. Choose one of: {valid}.")
    return LOG_LEVELS[normalized]


def configure_logging(
    level: str = "warning",
    *,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Route structlog events through stdlib logging.

    Events go to ``stream`` (stderr by default) so they never interleave with
    the JSON statistics the command line prints on stdout. Loader events such
    as ``sample.loaded`` only show at ``debug``; ``sample.empty`` is a warning.
    """

    level_value = resolve_level(level)
    logging.basicConfig(level=level_value, format="%(message)s", stream=stream or sys.stderr)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_output:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_value),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


__all__ = ["configure_logging", "resolve_level", "LOG_LEVELS", "LOG_FORMATS"]
