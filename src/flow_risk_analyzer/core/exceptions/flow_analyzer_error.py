from __future__ import annotations


class FlowAnalyzerError(Exception):
    """Base class for every fatal error raised by the analyzer."""
