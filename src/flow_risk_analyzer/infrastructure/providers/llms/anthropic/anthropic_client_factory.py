from __future__ import annotations

from dataclasses import dataclass

import httpx
from anthropic import Anthropic

from flow_risk_analyzer.configuration import AnalyzerSettings


@dataclass(frozen=True)
class AnthropicClientFactory:
    settings: AnalyzerSettings
    http_client: httpx.Client | None = None

    def create(self) -> Anthropic:
        # anthropic-version is overridable through the action input; retries stay off.
        return Anthropic(
            api_key=self.settings.api_key,
            base_url=self.settings.claude_api_url,
            max_retries=0,
            default_headers={"anthropic-version": self.settings.anthropic_version},
            http_client=self.http_client,
        )
