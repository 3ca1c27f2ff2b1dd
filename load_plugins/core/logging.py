"""Structured logging for the load-plugins CLI — structlog over stdlib logging."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any

import structlog

LOGGER_NAME = "load_plugins"


def setup_logging(level: str | None = None) -> None:
    """Route structlog events from ``load_plugins`` to stderr.

    Reads from environment variables:
        LOAD_PLUGINS_LOG_LEVEL  — log level (default: INFO)
        LOAD_PLUGINS_LOG_FORMAT — console | json (default: console)

    An explicit *level* wins over the environment.
    """
    log_level = (level or os.environ.get("LOAD_PLUGINS_LOG_LEVEL", "INFO")).upper()
    log_format = os.environ.get("LOAD_PLUGINS_LOG_FORMAT", "console").lower()

    pre_chain: list[structlog.types.Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]
    if log_format == "json":
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=pre_chain + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=pre_chain,
            processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
        )
    )
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers[:] = [handler]
    logger.setLevel(log_level)
    logger.propagate = False


def _drop_event(logger: Any, method_name: str, event_dict: Any) -> Any:
    raise structlog.DropEvent


def get_debug_logger(enabled: bool) -> Any:
    """Logger for per-module load events; drops everything unless *enabled*."""
    if enabled:
        return structlog.get_logger(LOGGER_NAME)
    return structlog.wrap_logger(
        structlog.ReturnLogger(),
        processors=[_drop_event],
        wrapper_class=structlog.BoundLogger,
    )
