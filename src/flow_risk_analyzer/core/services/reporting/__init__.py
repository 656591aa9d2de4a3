from flow_risk_analyzer.core.services.reporting.console_table_renderer import ConsoleTableRenderer, display_width
from flow_risk_analyzer.core.services.reporting.markdown_report_renderer import (
    MarkdownReportRenderer,
    escape_cell,
    no_risks_message,
)

__all__ = ["ConsoleTableRenderer", "MarkdownReportRenderer", "display_width", "escape_cell", "no_risks_message"]
