from __future__ import annotations

from pathlib import Path

from flow_risk_analyzer.core.domain import SourceFile
from flow_risk_analyzer.core.exceptions import (
    InvalidSourceTypeError,
    SourceFileError,
    SourceFileNotFoundError,
)
from flow_risk_analyzer.infrastructure.actions import ActionsToolkit
from flow_risk_analyzer.infrastructure.observability import get_logger

logger = get_logger("input_loader")

XML_SUFFIX = ".xml"


class InputLoader:
    def __init__(self, toolkit: ActionsToolkit):
        self.toolkit = toolkit

    def load(self, file_path: str | Path) -> SourceFile | None:
        """
        Reads the flow file at *file_path*.

        Failures are reported through the toolkit as job failures and the
        method returns None, so the caller can stop without an exception.
        """
        try:
            return self.read(file_path)
        except SourceFileError as exc:
            self.toolkit.set_failed(exc.message)
        except (OSError, UnicodeDecodeError) as exc:
            self.toolkit.set_failed(f"Error reading XML file: {exc}")
        return None

    @staticmethod
    def read(file_path: str | Path) -> SourceFile:
        full_path = Path(file_path).resolve()
        if not full_path.exists():
            raise SourceFileNotFoundError(full_path)
        if full_path.suffix != XML_SUFFIX:
            raise InvalidSourceTypeError(full_path)

        content = full_path.read_text(encoding="utf-8")
        logger.debug("Flow file loaded", context_file=full_path.name, size=len(content))
        return SourceFile(name=full_path.name, content=content)
