from typing import Any

from pydantic import Field, SecretStr, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from flow_risk_analyzer.core.exceptions import ConfigurationError

DEFAULT_ANALYSIS_PROMPT = (
    "Analyze the following Salesforce Flow XML for potential risks in deployment:\n\n"
    "{JSON} Output should be JSON with columns Risk, Description, and Recommendation. "
    "Do not include text outside of the JSON object."
)


class AnalyzerSettings(BaseSettings):
    """
    Action inputs. GitHub exposes each input as an INPUT_<NAME> environment
    variable; empty inputs fall back to the defaults below.
    Usage:
        settings = AnalyzerSettings()
        settings.validate_required_inputs()
    """

    # Model API
    claude_api_key: SecretStr | None = None
    claude_model: str = "claude-3-opus-20240229"
    claude_api_url: str = "https://api.anthropic.com"
    anthropic_version: str = "2023-06-01"
    max_tokens: int = Field(default=1024, gt=0)
    analysis_prompt: str = DEFAULT_ANALYSIS_PROMPT

    # Input / output
    file_path: str | None = None
    report_path: str = "analysis-report.md"

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    model_config = SettingsConfigDict(
        env_prefix="INPUT_",
        env_file=None,
        env_ignore_empty=True,
        extra="ignore",
    )

    @field_validator("*", mode="before")
    @classmethod
    def _trim_input(cls, value: Any, info: ValidationInfo) -> Any:
        # Inputs are trimmed like core.getInput; blank ones fall back to the default.
        if isinstance(value, str):
            value = value.strip()
            if not value:
                return cls.model_fields[info.field_name].get_default(call_default_factory=True)
        return value

    def validate_required_inputs(self) -> None:
        missing = []
        if self.claude_api_key is None or not self.claude_api_key.get_secret_value().strip():
            missing.append("claude_api_key")
        if not self.file_path or not self.file_path.strip():
            missing.append("file_path")
        if missing:
            raise ConfigurationError(f"Input required and not supplied: {', '.join(missing)}")

    @property
    def api_key(self) -> str:
        return self.claude_api_key.get_secret_value() if self.claude_api_key else ""
