from __future__ import annotations

from flow_risk_analyzer.core.exceptions.flow_analyzer_error import FlowAnalyzerError


class ConfigurationError(FlowAnalyzerError):
    """Raised when configuration is invalid or incomplete."""
