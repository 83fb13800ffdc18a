"""
Structured logging for the error normalizer.

structlog is configured once on first import. Diagnostic events (recognizer
faults, normalize_debug traces, intercepted wrapper errors) are emitted as
snake_case event names with keyword fields.

- LOG_LEVEL: minimum level (default INFO)
- LOG_FORMAT: "json" for one JSON object per line with the event under
  event_type; anything else renders human-readable console lines.

Output goes to stderr so the CLI can print normalized errors on stdout.
Uses only Python stdlib logging and structlog; no cardano_errors imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import IO, Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FORMAT = os.getenv("LOG_FORMAT", "console").strip().lower()


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Ensure timestamp is always present (ISO 8601, UTC)."""
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


LOGGER_NAME_KEY = "logger_name"


def _add_logger_name(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    # "logger" is a reserved keyword of structlog.get_logger; the name is bound as logger_name
    name = event_dict.pop(LOGGER_NAME_KEY, None)
    if name is not None and "logger" not in event_dict:
        event_dict["logger"] = name
    return event_dict


def _event_to_event_type(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    # JSON only; the console renderer needs the "event" key
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    return event_dict


def _level_value(level: str | int | None) -> int:
    if isinstance(level, int):
        return level
    name = (level or LOG_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def configure_logging(
    level: str | int | None = None,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """
    (Re)configure structlog for the package.

    level: logging level name or number; None uses LOG_LEVEL.
    fmt: "json" or "console"; None uses LOG_FORMAT.
    stream: text stream to write to; None uses sys.stderr.
    """
    fmt = (fmt or LOG_FORMAT).strip().lower()
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        _add_timestamp,
        _add_logger_name,
    ]
    if fmt == "json":
        processors.append(_event_to_event_type)
        processors.append(structlog.processors.JSONRenderer(default=repr))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(_level_value(level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        cache_logger_on_first_use=False,
    )


if not structlog.is_configured():
    configure_logging()


def get_logger(name: str) -> Any:
    """
    Structured logger for a module; use get_logger(__name__).

    The returned proxy resolves on every call, so configure_logging() also
    applies to loggers created at import time.

        logger = get_logger(__name__)
        logger.debug("recognizer_failed", recognizer="recognize_wallet_error", error="...")
    """
    return structlog.get_logger(name, logger_name=name)
