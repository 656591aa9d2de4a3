from __future__ import annotations

import sys
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from xml.parsers.expat import ExpatError

from pydantic import ValidationError

from flow_risk_analyzer.configuration import AnalyzerSettings
from flow_risk_analyzer.core.domain import RiskRecord, SourceFile
from flow_risk_analyzer.core.exceptions import ApiError, ConfigurationError
from flow_risk_analyzer.core.ports import LlmProvider
from flow_risk_analyzer.core.services import InputLoader, RiskExtractor
from flow_risk_analyzer.core.services.reporting import (
    ConsoleTableRenderer,
    MarkdownReportRenderer,
    no_risks_message,
)
from flow_risk_analyzer.infrastructure.actions import ActionsToolkit
from flow_risk_analyzer.infrastructure.observability import (
    bind_correlation_id,
    configure_logging,
    get_logger,
)
from flow_risk_analyzer.infrastructure.providers.llms.anthropic import AnthropicProviderImpl

logger = get_logger("main")

ProviderFactory = Callable[[AnalyzerSettings], LlmProvider]


@dataclass(frozen=True)
class RunOutcome:
    failed: bool
    has_risks: bool = False
    report_path: str | None = None
    report_content: str | None = None
    risks: tuple[RiskRecord, ...] = ()


def run(
    settings: AnalyzerSettings,
    toolkit: ActionsToolkit,
    provider_factory: ProviderFactory | None = None,
) -> RunOutcome:
    """Analyze one flow file and publish the action outputs.

    Fatal problems are reported through ``toolkit.set_failed`` and leave the
    outputs unset; the function itself does not raise.
    """
    provider_factory = provider_factory or AnthropicProviderImpl.from_settings
    try:
        settings.validate_required_inputs()
        toolkit.info(f"🔍 Analyzing XML file: {settings.file_path}")

        source = InputLoader(toolkit).load(settings.file_path)
        if source is None:
            return RunOutcome(failed=True)

        toolkit.info(f"📂 Analyzing: {source.name}...")
        extractor = RiskExtractor(
            provider=provider_factory(settings),
            prompt_template=settings.analysis_prompt,
            model_name=settings.claude_model,
            toolkit=toolkit,
        )
        try:
            risks = extractor.extract(source)
        except (ApiError, ExpatError) as exc:
            detail = exc.message if isinstance(exc, ApiError) else str(exc)
            logger.error(
                "Risk analysis failed",
                context_file=source.name,
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            toolkit.set_failed(f"Error analyzing XML with Claude: {detail}")
            return RunOutcome(failed=True)

        return publish(settings, toolkit, source, risks)
    except Exception as exc:  # noqa: BLE001
        logger.exception("Action failed", error_type=type(exc).__name__)
        toolkit.set_failed(f"Action failed: {exc}")
        return RunOutcome(failed=True)


def publish(
    settings: AnalyzerSettings,
    toolkit: ActionsToolkit,
    source: SourceFile,
    risks: tuple[RiskRecord, ...],
) -> RunOutcome:
    if not risks:
        message = no_risks_message(source.name)
        toolkit.set_output("has_risks", "false")
        toolkit.set_output("report_content", message)
        logger.info("No risks found", context_file=source.name)
        return RunOutcome(failed=False, report_content=message)

    toolkit.info("\n" + ConsoleTableRenderer().render(risks))

    report = MarkdownReportRenderer.render(source.name, risks)
    Path(settings.report_path).write_text(report, encoding="utf-8")
    logger.info(
        "Report written",
        context_file=source.name,
        report_path=settings.report_path,
        risk_count=len(risks),
    )

    toolkit.set_output("report_path", settings.report_path)
    toolkit.set_output("has_risks", "true")
    toolkit.set_output("report_content", report)
    return RunOutcome(
        failed=False,
        has_risks=True,
        report_path=settings.report_path,
        report_content=report,
        risks=risks,
    )


def main(provider_factory: ProviderFactory | None = None) -> int:
    toolkit = ActionsToolkit()
    try:
        settings = AnalyzerSettings()
    except ValidationError as exc:
        toolkit.set_failed(f"Action failed: {ConfigurationError(str(exc))}")
        return toolkit.exit_code

    configure_logging(settings.log_level, settings.log_format)
    bind_correlation_id()
    run(settings, toolkit, provider_factory)
    return toolkit.exit_code


if __name__ == "__main__":
    sys.exit(main())
