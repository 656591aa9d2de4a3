from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import anthropic

from flow_risk_analyzer.configuration import AnalyzerSettings
from flow_risk_analyzer.core.exceptions import ApiError
from flow_risk_analyzer.core.ports import LlmProvider
from flow_risk_analyzer.infrastructure.observability import get_logger
from flow_risk_analyzer.infrastructure.providers.llms.anthropic.anthropic_client_factory import (
    AnthropicClientFactory,
)
from flow_risk_analyzer.infrastructure.providers.llms.anthropic.mappers.anthropic_request_mapper import (
    AnthropicRequestMapper,
)
from flow_risk_analyzer.infrastructure.providers.llms.anthropic.mappers.anthropic_response_mapper import (
    AnthropicResponseMapper,
)

logger = get_logger("anthropic_provider")


@dataclass(frozen=True)
class AnthropicProviderImpl(LlmProvider):
    client: Any
    request_mapper: AnthropicRequestMapper
    response_mapper: AnthropicResponseMapper

    @classmethod
    def from_settings(cls, settings: AnalyzerSettings, http_client: Any = None) -> "AnthropicProviderImpl":
        return cls(
            client=AnthropicClientFactory(settings, http_client).create(),
            request_mapper=AnthropicRequestMapper(model=settings.claude_model, max_tokens=settings.max_tokens),
            response_mapper=AnthropicResponseMapper(),
        )

    def generate(self, prompt: str) -> str:
        kwargs = self.request_mapper.to_kwargs(prompt)
        logger.debug("Anthropic request", context_model=kwargs["model"], max_tokens=kwargs["max_tokens"])
        try:
            resp = self.client.messages.create(**kwargs)
        except anthropic.APIError as exc:
            raise self._map_error(exc) from exc
        logger.debug("Anthropic response", **self.response_mapper.to_payload(resp))
        return self.response_mapper.to_text(resp)

    def _map_error(self, exc: anthropic.APIError) -> ApiError:
        if isinstance(exc, anthropic.APIStatusError):
            return ApiError(message=self._body_message(exc) or str(exc), status_code=exc.status_code)
        return ApiError(message=str(exc))

    @staticmethod
    def _body_message(exc: anthropic.APIStatusError) -> str | None:
        body = exc.body
        if isinstance(body, dict):
            error = body.get("error")
            if isinstance(error, dict) and error.get("message"):
                return str(error["message"])
        return None
