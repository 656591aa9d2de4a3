from flow_risk_analyzer.configuration.main_settings import DEFAULT_ANALYSIS_PROMPT, AnalyzerSettings

__all__ = ["AnalyzerSettings", "DEFAULT_ANALYSIS_PROMPT"]
