"""Structlog processor that nests component and error fields.

Keeps the flat event_dict readable in console mode while producing a stable
nested document in JSON mode. All extraction uses dict.pop(key, default).
"""

from __future__ import annotations

import os
from typing import Any


def _build_root_fields(event_dict: dict[str, Any]) -> dict[str, Any]:
    return {
        "timestamp": event_dict.pop("timestamp", None),
        "level": event_dict.pop("level", "info"),
        "service": os.environ.get("SERVICE_NAME", "flow-risk-analyzer"),
        "correlation_id": event_dict.pop("correlation_id", None),
        "event": event_dict.pop("event", ""),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    component = event_dict.pop("context_component", None)
    if component is None:
        return None
    return {
        "component": component,
        "file": event_dict.pop("context_file", None),
        "model": event_dict.pop("context_model", None),
    }


def analyzer_schema_processor(
    logger: Any,  # noqa: ARG001
    method_name: str,  # noqa: ARG001
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Reshape a flat event_dict into root, context, error and extra blocks."""
    result = _build_root_fields(event_dict)

    context = _build_context(event_dict)
    if context is not None:
        result["context"] = context

    error = _build_error(event_dict)
    if error is not None:
        result["error"] = error

    if event_dict:
        result["extra"] = dict(event_dict)

    return result
