"""Workflow-command helpers mirroring the @actions/core surface used by the action.

Outputs are appended to the file named by GITHUB_OUTPUT; messages are written
as workflow commands on stdout so the runner turns them into annotations.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import TextIO
from uuid import uuid4

from flow_risk_analyzer.infrastructure.observability.logger_factory_service import get_logger

logger = get_logger("actions_toolkit")


def _escape_data(value: str) -> str:
    return value.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def _escape_property(value: str) -> str:
    return _escape_data(value).replace(":", "%3A").replace(",", "%2C")


class ActionsToolkit:
    def __init__(self, stream: TextIO | None = None, output_file: str | Path | None = None):
        self._stream = stream
        self._output_file = output_file
        self.failed = False
        self.outputs: dict[str, str] = {}

    @property
    def stream(self) -> TextIO:
        # Resolved lazily so pytest's capsys sees the writes.
        return self._stream or sys.stdout

    @property
    def output_file(self) -> str | None:
        if self._output_file is not None:
            return str(self._output_file)
        return os.environ.get("GITHUB_OUTPUT") or None

    @property
    def exit_code(self) -> int:
        return 1 if self.failed else 0

    def info(self, message: str) -> None:
        self.stream.write(f"{message}\n")

    def warning(self, message: str) -> None:
        logger.warning(message)
        self._issue_command("warning", message)

    def error(self, message: str) -> None:
        logger.error(message)
        self._issue_command("error", message)

    def set_failed(self, message: str) -> None:
        """Report a job-terminating failure. Never raises; see exit_code."""
        self.failed = True
        self.error(message)

    def set_output(self, name: str, value: str) -> None:
        self.outputs[name] = value
        output_file = self.output_file
        if output_file:
            delimiter = f"ghadelimiter_{uuid4()}"
            if delimiter in name or delimiter in value:
                raise ValueError(f"Unexpected input: delimiter collision for output {name}")
            with open(output_file, "a", encoding="utf-8") as handle:
                handle.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
            return
        self.stream.write("\n")
        self._issue_command("set-output", value, name=name)

    def _issue_command(self, command: str, message: str, **properties: str) -> None:
        props = ",".join(f"{key}={_escape_property(val)}" for key, val in properties.items())
        head = f"::{command} {props}" if props else f"::{command}"
        self.stream.write(f"{head}::{_escape_data(message)}\n")
