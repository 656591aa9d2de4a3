from flow_risk_analyzer.core.ports.llm_provider import LlmProvider

__all__ = ["LlmProvider"]
