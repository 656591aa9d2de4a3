"""Structlog-based logging configuration with a stdlib bridge.

Provides:
- configure_logging(): one-shot structlog + stdlib setup
- get_logger(): returns bound structlog logger
- bind_correlation_id(): tags every record of the current run
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Any
from uuid import uuid4

import structlog
from structlog.contextvars import bind_contextvars

from flow_risk_analyzer.infrastructure.observability.schema_processor import (
    analyzer_schema_processor,
)

_CONFIGURED = False


def configure_logging(level: str = "INFO", log_format: str = "console") -> None:
    """One-shot structlog + stdlib bridge configuration.

    Safe to call multiple times; only the first invocation takes effect.
    Output goes to stderr because stdout carries workflow commands.
    """
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED:
        return
    _CONFIGURED = True

    json_output = log_format.lower() == "json"
    renderer = _select_renderer(json_output)
    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
    ]

    structlog.configure(
        processors=[
            *shared_processors,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            *([analyzer_schema_processor] if json_output else []),
            renderer,
        ],
    )
    root = logging.getLogger()
    root.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level.upper())


def get_logger(component: str) -> Any:
    """Return a lazy structlog logger pre-bound with context_component.

    Resolution is deferred to first use so module-level loggers pick up
    configure_logging().
    """
    return structlog.get_logger(context_component=component)


def bind_correlation_id(correlation_id: str | None = None) -> str:
    """Bind the run's correlation id; defaults to GITHUB_RUN_ID, then a UUID."""
    value = correlation_id or os.environ.get("GITHUB_RUN_ID") or str(uuid4())
    bind_contextvars(correlation_id=value)
    return value


def _select_renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)
