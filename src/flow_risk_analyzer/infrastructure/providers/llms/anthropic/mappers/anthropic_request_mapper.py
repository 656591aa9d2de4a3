from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class AnthropicRequestMapper:
    model: str
    max_tokens: int = 1024

    def to_kwargs(self, prompt: str) -> Mapping[str, Any]:
        return {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [self._msg(prompt)],
        }

    def _msg(self, prompt: str) -> dict[str, str]:
        return {"role": "user", "content": prompt}
