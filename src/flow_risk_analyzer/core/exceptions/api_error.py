from __future__ import annotations

from flow_risk_analyzer.core.exceptions.flow_analyzer_error import FlowAnalyzerError


class ApiError(FlowAnalyzerError):
    """Raised on any transport failure or non-2xx reply from the model API."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        code = f" (status={self.status_code})" if self.status_code is not None else ""
        return f"{self.message}{code}"
