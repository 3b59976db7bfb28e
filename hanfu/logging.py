"""Structured logging configuration with structlog.

Settings (see hanfu.config):
- LOG_FORMAT: "json" for log aggregation, "console" for human-readable output.
- LOG_LEVEL: "DEBUG", "INFO" (default), "WARNING", "ERROR", or "CRITICAL".
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING

import structlog

from hanfu.config import settings

if TYPE_CHECKING:
    from collections.abc import MutableMapping
    from typing import Any


def _serialize_enums(
    _logger: object,
    _method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Replace Enum instances (yaku, fu, limit hands) with their names."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.name
        elif isinstance(value, (list, tuple)):
            event_dict[key] = [v.name if isinstance(v, Enum) else v for v in value]
    return event_dict


def _build_stdlib_formatter(*, json_mode: bool, colors: bool = False) -> logging.Formatter:
    if json_mode:
        return structlog.stdlib.ProcessorFormatter(
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                structlog.processors.JSONRenderer(ensure_ascii=False),
            ],
        )
    return structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
    )


def setup_logging(level: str | None = None, json_mode: bool | None = None) -> None:
    """Configure structlog to render through a single stdout handler."""
    if level is None:
        level = settings.log_level
    if json_mode is None:
        json_mode = settings.log_format == "json"

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            _serialize_enums,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.UnicodeDecoder(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper()))
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_stdlib_formatter(json_mode=json_mode, colors=sys.stdout.isatty()))
    root_logger.addHandler(handler)
