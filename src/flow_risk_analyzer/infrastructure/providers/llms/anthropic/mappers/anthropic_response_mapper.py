from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnthropicResponseMapper:
    def to_text(self, response: Any) -> str:
        parts = [getattr(b, "text", "") or "" for b in getattr(response, "content", []) or []]
        return "".join(parts)

    def to_payload(self, response: Any) -> Mapping[str, Any]:
        usage = getattr(response, "usage", None)
        return {
            "id": getattr(response, "id", None),
            "model": getattr(response, "model", None),
            "stop_reason": getattr(response, "stop_reason", None),
            "input_tokens": getattr(usage, "input_tokens", None),
            "output_tokens": getattr(usage, "output_tokens", None),
        }
