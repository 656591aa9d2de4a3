from __future__ import annotations

JSON_PLACEHOLDER = "{JSON}"


class PromptBuilder:
    @staticmethod
    def build(template: str, json_text: str) -> str:
        """Substitute the first {JSON} placeholder; templates without one pass through unchanged."""
        return template.replace(JSON_PLACEHOLDER, json_text, 1)
