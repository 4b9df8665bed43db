"""Structured logging setup for the demo data engine.

The engine logs lifecycle events through structlog with event-style
names (``demo_initialized``, ``demo_reset``, ``demo_exited``). Hosts call
configure_logging() once at startup; library modules only call
structlog.get_logger(__name__).

Every entry carries ``engine="dealease-demo"`` so engine events can be
told apart from the host's own log lines. Output goes to stderr, which
keeps machine-readable command output on stdout clean.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

ENGINE_NAME = "dealease-demo"
ENGINE_LOGGER = "dealease_demo"

# Third-party loggers that are chatty at DEBUG
QUIET_LOGGERS = ("faker",)


def add_engine_name(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    """Tag an entry with the engine name unless the caller bound one."""
    event_dict.setdefault("engine", ENGINE_NAME)
    return event_dict


def build_processors(*, json_format: bool = True, add_timestamp: bool = True) -> list[Any]:
    """Processor chain used by configure_logging.

    Context variables bound by a host (request ids, user ids) are merged
    first; entries below the stdlib level are dropped before any
    rendering work is done.
    """
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_engine_name,
    ]
    if add_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    processors += [
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging(
    *,
    log_level: str = "INFO",
    json_format: bool = True,
    add_timestamp: bool = True,
    logger_name: str = ENGINE_LOGGER,
) -> None:
    """Configure structured logging for the engine.

    Args:
        log_level: Minimum level for the engine logger (DEBUG ... CRITICAL).
        json_format: Render JSON lines instead of the console format.
        add_timestamp: Add a UTC ISO timestamp to each entry.
        logger_name: Stdlib logger the level applies to; defaults to the
            engine package so a host's own loggers are left alone.

    Raises:
        ValueError: If log_level is not a stdlib level name.

    Example:
        >>> configure_logging(log_level="DEBUG", json_format=False)
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level!r}")

    structlog.configure(
        processors=build_processors(json_format=json_format, add_timestamp=add_timestamp),
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(format="%(message)s", stream=sys.stderr, force=True)
    logging.getLogger(logger_name).setLevel(level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
