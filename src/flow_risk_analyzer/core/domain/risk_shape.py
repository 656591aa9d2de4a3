from __future__ import annotations

from enum import Enum


class RiskShape(str, Enum):
    """Shapes a model reply may take once its JSON has been parsed."""

    RISKS_ENVELOPE = "risks_envelope"
    BARE_ARRAY = "bare_array"
    BARE_OBJECT = "bare_object"
    UNRECOGNIZED = "unrecognized"
