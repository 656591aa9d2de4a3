from flow_risk_analyzer.infrastructure.providers.llms.anthropic.anthropic_provider_impl import (
    AnthropicProviderImpl,
)

__all__ = ["AnthropicProviderImpl"]
