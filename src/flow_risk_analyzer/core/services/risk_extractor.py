from __future__ import annotations

from dataclasses import dataclass, field

from flow_risk_analyzer.core.domain import RiskRecord, SourceFile
from flow_risk_analyzer.core.ports import LlmProvider
from flow_risk_analyzer.core.services.json_sanitizer_service import JsonSanitizerService
from flow_risk_analyzer.core.services.prompt_builder import PromptBuilder
from flow_risk_analyzer.core.services.risk_normalizer import RiskNormalizer
from flow_risk_analyzer.core.services.xml_converter import XmlConverter
from flow_risk_analyzer.infrastructure.actions import ActionsToolkit
from flow_risk_analyzer.infrastructure.observability import get_logger

logger = get_logger("risk_extractor")


@dataclass(frozen=True)
class RiskExtractor:
    """Turns flow XML into an ordered tuple of RiskRecord via one model call."""

    provider: LlmProvider
    prompt_template: str
    model_name: str
    toolkit: ActionsToolkit
    converter: XmlConverter = field(default_factory=XmlConverter)
    prompt_builder: PromptBuilder = field(default_factory=PromptBuilder)

    def extract(self, source: SourceFile) -> tuple[RiskRecord, ...]:
        json_text = self.converter.to_json_text(source.content)
        prompt = self.prompt_builder.build(self.prompt_template, json_text)

        self.toolkit.info(f"Using Claude model: {self.model_name}")
        logger.info("Requesting risk analysis", context_file=source.name, context_model=self.model_name)
        reply = self.provider.generate(prompt)

        parsed = JsonSanitizerService(self.toolkit).extract(reply)
        risks = RiskNormalizer(self.toolkit).normalize(parsed, source.name)
        logger.info("Risk analysis parsed", context_file=source.name, risk_count=len(risks))
        return risks
