from __future__ import annotations

from pathlib import Path

from flow_risk_analyzer.core.exceptions.flow_analyzer_error import FlowAnalyzerError


class SourceFileError(FlowAnalyzerError):
    def __init__(self, message: str, path: Path):
        super().__init__(message)
        self.message = message
        self.path = path


class SourceFileNotFoundError(SourceFileError):
    """Raised when the resolved flow path does not exist."""

    def __init__(self, path: Path):
        super().__init__(f"File not found: {path}", path)


class InvalidSourceTypeError(SourceFileError):
    """Raised when the resolved flow path does not end in ``.xml``."""

    def __init__(self, path: Path):
        super().__init__(f"File is not an XML file: {path}", path)
