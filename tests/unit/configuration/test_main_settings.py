import pytest
from pydantic import ValidationError

from flow_risk_analyzer.configuration import DEFAULT_ANALYSIS_PROMPT, AnalyzerSettings
from flow_risk_analyzer.core.exceptions import ConfigurationError


def test_reads_action_inputs_from_environment(monkeypatch):
    monkeypatch.setenv("INPUT_CLAUDE_API_KEY", "sk-ant-env")
    monkeypatch.setenv("INPUT_FILE_PATH", "force-app/flows/Lead.flow-meta.xml")
    monkeypatch.setenv("INPUT_CLAUDE_MODEL", "claude-3-sonnet-20240229")

    settings = AnalyzerSettings()

    assert settings.api_key == "sk-ant-env"
    assert settings.file_path == "force-app/flows/Lead.flow-meta.xml"
    assert settings.claude_model == "claude-3-sonnet-20240229"


def test_empty_inputs_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("INPUT_CLAUDE_MODEL", "")
    monkeypatch.setenv("INPUT_ANALYSIS_PROMPT", "")
    monkeypatch.setenv("INPUT_ANTHROPIC_VERSION", "")

    settings = AnalyzerSettings()

    assert settings.claude_model == "claude-3-opus-20240229"
    assert settings.analysis_prompt == DEFAULT_ANALYSIS_PROMPT
    assert settings.anthropic_version == "2023-06-01"
    assert settings.max_tokens == 1024
    assert settings.report_path == "analysis-report.md"


def test_default_prompt_carries_placeholder():
    assert "{JSON}" in DEFAULT_ANALYSIS_PROMPT
    assert DEFAULT_ANALYSIS_PROMPT.startswith(
        "Analyze the following Salesforce Flow XML for potential risks in deployment:\n\n{JSON}"
    )


def test_validate_reports_every_missing_input():
    with pytest.raises(ConfigurationError) as exc:
        AnalyzerSettings().validate_required_inputs()

    assert "claude_api_key" in str(exc.value)
    assert "file_path" in str(exc.value)


def test_validate_accepts_complete_inputs():
    AnalyzerSettings(claude_api_key="sk-ant-x", file_path="flow.xml").validate_required_inputs()


def test_api_key_is_not_leaked_in_repr():
    settings = AnalyzerSettings(claude_api_key="sk-ant-secret", file_path="flow.xml")
    assert "sk-ant-secret" not in repr(settings)


def test_non_positive_max_tokens_is_rejected(monkeypatch):
    monkeypatch.setenv("INPUT_MAX_TOKENS", "0")
    with pytest.raises(ValidationError):
        AnalyzerSettings()


def test_inputs_are_trimmed(monkeypatch):
    monkeypatch.setenv("INPUT_CLAUDE_API_KEY", "  sk-ant-env\n")
    monkeypatch.setenv("INPUT_FILE_PATH", " flow.xml ")

    settings = AnalyzerSettings()

    assert settings.file_path == "flow.xml"
    assert settings.api_key == "sk-ant-env"


def test_blank_inputs_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("INPUT_CLAUDE_MODEL", "   ")
    monkeypatch.setenv("INPUT_ANTHROPIC_VERSION", "\t")
    monkeypatch.setenv("INPUT_FILE_PATH", "  ")

    settings = AnalyzerSettings()

    assert settings.claude_model == "claude-3-opus-20240229"
    assert settings.anthropic_version == "2023-06-01"
    assert settings.file_path is None
    with pytest.raises(ConfigurationError):
        settings.validate_required_inputs()
