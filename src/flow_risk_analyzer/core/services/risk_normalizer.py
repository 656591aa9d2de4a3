from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from flow_risk_analyzer.core.domain import RiskRecord, RiskShape
from flow_risk_analyzer.core.domain.risk_record import RISK_FIELDS
from flow_risk_analyzer.infrastructure.actions import ActionsToolkit
from flow_risk_analyzer.infrastructure.observability import get_logger

logger = get_logger("risk_normalizer")


class RiskNormalizer:
    """Collapses the accepted reply shapes into one ordered tuple of RiskRecord.

    Accepted shapes:
        {"risks": [record, ...]}
        [record, ...]
        record
    Anything else normalizes to an empty tuple with a warning.
    """

    def __init__(self, toolkit: ActionsToolkit):
        self.toolkit = toolkit

    @staticmethod
    def classify(value: Any) -> RiskShape:
        if isinstance(value, Mapping):
            if isinstance(value.get("risks"), list):
                return RiskShape.RISKS_ENVELOPE
            if any(field in value for field in RISK_FIELDS):
                return RiskShape.BARE_OBJECT
            return RiskShape.UNRECOGNIZED
        if isinstance(value, list):
            return RiskShape.BARE_ARRAY
        return RiskShape.UNRECOGNIZED

    def normalize(self, value: Any, source_name: str = "") -> tuple[RiskRecord, ...]:
        if value is None:
            return ()

        shape = self.classify(value)
        logger.debug("Reply shape resolved", shape=shape.value, context_file=source_name)

        if shape is RiskShape.RISKS_ENVELOPE:
            return self._records(value["risks"])
        if shape is RiskShape.BARE_ARRAY:
            return self._records(value)
        if shape is RiskShape.BARE_OBJECT:
            return (RiskRecord.model_validate(dict(value)),)

        suffix = f" for {source_name}" if source_name else ""
        self.toolkit.warning(f"No valid risk data found{suffix}")
        return ()

    def _records(self, items: list[Any]) -> tuple[RiskRecord, ...]:
        records = []
        for index, item in enumerate(items):
            if not isinstance(item, Mapping):
                self.toolkit.warning(f"Skipping risk entry {index}: expected an object, got {type(item).__name__}")
                continue
            records.append(RiskRecord.model_validate(dict(item)))
        return tuple(records)
