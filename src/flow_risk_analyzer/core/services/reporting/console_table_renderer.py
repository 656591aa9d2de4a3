from __future__ import annotations

import unicodedata
from collections.abc import Sequence

from flow_risk_analyzer.core.domain import RiskRecord

HEADERS = ("⚠️ Risk", "📝 Description", "💡 Recommendation")
COLUMN_WIDTHS = (20, 50, 50)

EMOJI_PRESENTATION = "\ufe0f"


def char_width(char: str, next_char: str = "") -> int:
    """Terminal columns taken by *char*; a following U+FE0F widens it to two."""
    if char == EMOJI_PRESENTATION or unicodedata.combining(char):
        return 0
    if unicodedata.category(char) in ("Mn", "Me", "Cf"):
        return 0
    if next_char == EMOJI_PRESENTATION:
        return 2
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def display_width(text: str) -> int:
    return sum(char_width(char, text[i + 1:i + 2]) for i, char in enumerate(text))


class ConsoleTableRenderer:
    """Bordered, word-wrapped grid for the job log.

    Widths are terminal columns and include one space of padding on each side
    of the cell text.
    """

    def __init__(self, column_widths: Sequence[int] = COLUMN_WIDTHS):
        self.column_widths = tuple(column_widths)

    def render(self, risks: Sequence[RiskRecord]) -> str:
        rule = "+" + "+".join("-" * width for width in self.column_widths) + "+"
        lines = [rule, *self._row(HEADERS), rule]
        for risk in risks:
            lines.extend(self._row(risk.as_row()))
            lines.append(rule)
        return "\n".join(lines)

    def _row(self, cells: Sequence[str]) -> list[str]:
        wrapped = [self._wrap(cell, width - 2) for cell, width in zip(cells, self.column_widths)]
        height = max(len(column) for column in wrapped)
        out = []
        for line_no in range(height):
            parts = []
            for column, width in zip(wrapped, self.column_widths):
                text = column[line_no] if line_no < len(column) else ""
                parts.append(" " + text + " " * (width - 2 - display_width(text)) + " ")
            out.append("|" + "|".join(parts) + "|")
        return out

    def _wrap(self, text: str, width: int) -> list[str]:
        lines: list[str] = []
        for paragraph in text.splitlines() or [""]:
            lines.extend(self._wrap_paragraph(paragraph, width) or [""])
        return lines

    def _wrap_paragraph(self, paragraph: str, width: int) -> list[str]:
        lines: list[str] = []
        current = ""
        for word in paragraph.split():
            candidate = f"{current} {word}" if current else word
            if display_width(candidate) <= width:
                current = candidate
                continue
            if current:
                lines.append(current)
            chunks = self._split_word(word, width)
            lines.extend(chunks[:-1])
            current = chunks[-1]
        if current:
            lines.append(current)
        return lines

    @staticmethod
    def _split_word(word: str, width: int) -> list[str]:
        chunks = [""]
        for i, char in enumerate(word):
            needed = char_width(char, word[i + 1:i + 2])
            if chunks[-1] and display_width(chunks[-1]) + needed > width:
                chunks.append("")
            chunks[-1] += char
        return chunks
