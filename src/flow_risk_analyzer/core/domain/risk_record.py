from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

RISK_FIELDS = ("Risk", "Description", "Recommendation")


class RiskRecord(BaseModel):
    """One finding reported by the model.

    Field names are the exact keys the prompt asks the model to emit, so they
    stay capitalized.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    Risk: str = ""
    Description: str = ""
    Recommendation: str = ""

    @field_validator("Risk", "Description", "Recommendation", mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (dict, list)):
            text = json.dumps(value, ensure_ascii=False)
        else:
            text = value if isinstance(value, str) else str(value)
        # Lone surrogates are valid JSON escapes but cannot be written as UTF-8.
        return text.encode("utf-8", "replace").decode("utf-8")

    def as_row(self) -> tuple[str, str, str]:
        return (self.Risk, self.Description, self.Recommendation)
