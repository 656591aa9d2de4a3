from __future__ import annotations

import json
from typing import Any

import xmltodict


class XmlConverter:
    """Reshapes flow XML into the pretty-printed JSON text placed in the prompt."""

    @staticmethod
    def to_structure(content: str) -> dict[str, Any]:
        # Attributes land under "@name" keys, mixed text under "#text" and
        # repeated siblings become lists. Malformed XML raises ExpatError.
        return xmltodict.parse(content)

    def to_json_text(self, content: str) -> str:
        return json.dumps(self.to_structure(content), indent=2, ensure_ascii=False)
