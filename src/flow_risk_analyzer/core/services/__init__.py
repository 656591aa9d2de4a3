from flow_risk_analyzer.core.services.input_loader import InputLoader
from flow_risk_analyzer.core.services.json_sanitizer_service import JsonSanitizerService
from flow_risk_analyzer.core.services.prompt_builder import PromptBuilder
from flow_risk_analyzer.core.services.risk_extractor import RiskExtractor
from flow_risk_analyzer.core.services.risk_normalizer import RiskNormalizer
from flow_risk_analyzer.core.services.xml_converter import XmlConverter

__all__ = [
    "InputLoader",
    "JsonSanitizerService",
    "PromptBuilder",
    "RiskExtractor",
    "RiskNormalizer",
    "XmlConverter",
]
