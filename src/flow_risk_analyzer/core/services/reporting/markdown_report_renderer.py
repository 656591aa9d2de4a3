from __future__ import annotations

from collections.abc import Sequence

from flow_risk_analyzer.core.domain import RiskRecord

TABLE_HEADER = (
    "| ⚠️ Risk | 📝 Description | 💡 Recommendation |\n"
    "|---------|----------------|--------------------|\n"
)


def escape_cell(value: str) -> str:
    """Keep a value inside its table cell: escape pipes, turn line breaks into <br>."""
    text = value.replace("\r\n", "\n").replace("\r", "\n")
    return text.replace("|", "\\|").replace("\n", "<br>")


def no_risks_message(file_name: str) -> str:
    return f"No risks found in {file_name}"


class MarkdownReportRenderer:
    @staticmethod
    def render(file_name: str, risks: Sequence[RiskRecord]) -> str:
        lines = [f"# Flow XML Risk Analysis for {file_name}\n\n", TABLE_HEADER]
        for risk in risks:
            risk_cell, description, recommendation = (escape_cell(v) for v in risk.as_row())
            lines.append(f"| {risk_cell} | {description} | {recommendation} |\n")
        return "".join(lines)
