from pathlib import Path

import httpx
import pytest

from flow_risk_analyzer.configuration import AnalyzerSettings
from flow_risk_analyzer.infrastructure.actions import ActionsToolkit
from flow_risk_analyzer.infrastructure.providers.llms.anthropic import AnthropicProviderImpl

FLOW_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Flow xmlns="http://soap.sforce.com/2006/04/metadata">
    <apiVersion>58.0</apiVersion>
    <label>Update Account Owner</label>
    <recordUpdates>
        <name>Update_Owner</name>
        <inputReference>$Record</inputReference>
    </recordUpdates>
    <status>Active</status>
</Flow>
"""

API_URL = "https://api.anthropic.com/v1/messages"


def anthropic_provider(settings: AnalyzerSettings) -> AnthropicProviderImpl:
    """Provider whose SDK client sends through an explicit httpx.Client, which respx intercepts."""
    return AnthropicProviderImpl.from_settings(settings, http_client=httpx.Client())


def claude_reply(text: str) -> dict:
    """Body of a successful Messages API response carrying *text*."""
    return {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-opus-20240229",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 120, "output_tokens": 48},
    }


@pytest.fixture(autouse=True)
def clean_action_env(monkeypatch):
    for key in ("GITHUB_OUTPUT", "INPUT_CLAUDE_API_KEY", "INPUT_FILE_PATH", "INPUT_CLAUDE_MODEL",
                "INPUT_ANALYSIS_PROMPT", "INPUT_ANTHROPIC_VERSION", "INPUT_MAX_TOKENS"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def workspace(tmp_path, monkeypatch) -> Path:
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def flow_file(workspace) -> Path:
    path = workspace / "flow.xml"
    path.write_text(FLOW_XML, encoding="utf-8")
    return path


@pytest.fixture
def output_file(workspace) -> Path:
    path = workspace / "github_output.txt"
    path.touch()
    return path


@pytest.fixture
def toolkit(output_file) -> ActionsToolkit:
    return ActionsToolkit(output_file=output_file)


@pytest.fixture
def settings(flow_file) -> AnalyzerSettings:
    return AnalyzerSettings(
        claude_api_key="sk-ant-test",
        file_path=str(flow_file),
    )


def read_outputs(path: Path) -> dict[str, str]:
    """Parse a GITHUB_OUTPUT file written with the name<<delimiter form."""
    outputs: dict[str, str] = {}
    lines = path.read_text(encoding="utf-8").split("\n")
    i = 0
    while i < len(lines):
        line = lines[i]
        if "<<" not in line:
            i += 1
            continue
        name, delimiter = line.split("<<", 1)
        end = lines.index(delimiter, i + 1)
        outputs[name] = "\n".join(lines[i + 1:end])
        i = end + 1
    return outputs
