import json
import re
from typing import Any

from flow_risk_analyzer.infrastructure.actions import ActionsToolkit

# Greedy on purpose: first "{" through last "}" of the reply.
JSON_OBJECT_PATTERN = re.compile(r"\{.*\}", re.DOTALL)


class JsonSanitizerService:
    def __init__(self, toolkit: ActionsToolkit):
        self.toolkit = toolkit

    @staticmethod
    def find_json_span(text: str) -> str | None:
        match = JSON_OBJECT_PATTERN.search(text or "")
        return match.group(0) if match else None

    def extract(self, text: str) -> Any | None:
        """
        Extracts the JSON object embedded in a (potentially dirty) model reply.

        Args:
            text: The raw reply text.

        Returns:
            The parsed JSON value, or None when no object span exists or the
            span is not valid JSON. Both cases emit a warning and are not
            treated as failures.
        """
        span = self.find_json_span(text)
        if span is None:
            self.toolkit.warning("Could not find JSON in Claude's response")
            return None

        try:
            return json.loads(span)
        except (ValueError, RecursionError) as exc:
            # JSONDecodeError, oversized integer literals and runaway nesting alike
            self.toolkit.warning(f"Failed to parse JSON from Claude's response: {exc}")
            return None
