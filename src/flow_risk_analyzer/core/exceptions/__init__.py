from flow_risk_analyzer.core.exceptions.api_error import ApiError
from flow_risk_analyzer.core.exceptions.configuration_error import ConfigurationError
from flow_risk_analyzer.core.exceptions.flow_analyzer_error import FlowAnalyzerError
from flow_risk_analyzer.core.exceptions.source_file_error import (
    InvalidSourceTypeError,
    SourceFileError,
    SourceFileNotFoundError,
)

__all__ = [
    "ApiError",
    "ConfigurationError",
    "FlowAnalyzerError",
    "InvalidSourceTypeError",
    "SourceFileError",
    "SourceFileNotFoundError",
]
