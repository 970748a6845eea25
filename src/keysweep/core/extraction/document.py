"""
Rich-document extractor backed by external converter processes.

Each document extension maps to a command template such as
``["pdftotext", "-layout", "{path}", "-"]``; the converter must print the
plain text on stdout. Every invocation is bounded by a timeout.
"""

import logging
import shutil
import subprocess
from collections.abc import Mapping, Sequence
from pathlib import Path

from keysweep.core.errors import ExtractionError

from .interfaces import ExtractorInterface
from .models import ExtractionResult

logger = logging.getLogger(__name__)

PATH_PLACEHOLDER = "{path}"


class DocumentExtractor(ExtractorInterface):
    """
    Extracts text from documents by running a converter per extension.

    Args:
        commands: Mapping of extension (".pdf") to command template
        timeout: Seconds before a converter is killed and the file abandoned
    """

    def __init__(self, commands: Mapping[str, Sequence[str]], timeout: float = 60.0):
        self._commands: dict[str, list[str]] = {
            ext.lower(): [str(part) for part in template]
            for ext, template in commands.items()
            if template
        }
        self._timeout = timeout

    @property
    def commands(self) -> dict[str, list[str]]:
        return {ext: list(cmd) for ext, cmd in self._commands.items()}

    def converter_status(self) -> dict[str, bool]:
        """Map each configured extension to whether its converter is on PATH."""
        return {ext: shutil.which(cmd[0]) is not None for ext, cmd in self._commands.items()}

    def build_command(self, path: Path) -> list[str]:
        """
        Substitute the file path into the command template for its extension.

        Raises:
            ExtractionError: If no converter is configured for the extension
        """
        template = self._commands.get(path.suffix.lower())
        if template is None:
            raise ExtractionError(f"No document converter configured for '{path.suffix}'", str(path))
        command = [part.replace(PATH_PLACEHOLDER, str(path)) for part in template]
        if PATH_PLACEHOLDER not in " ".join(template):
            command.append(str(path))
        return command

    def extract(self, path: Path) -> ExtractionResult:
        path = Path(path)
        try:
            return ExtractionResult.success(self._run(path))
        except ExtractionError as e:
            return ExtractionResult.failure(str(e))

    def _run(self, path: Path) -> str:
        command = self.build_command(path)
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                timeout=self._timeout,
                check=False,
            )
        except FileNotFoundError as e:
            raise ExtractionError(f"Document converter not found: {command[0]}", str(path)) from e
        except subprocess.TimeoutExpired as e:
            raise ExtractionError(
                f"Document converter timed out after {self._timeout}s", str(path)
            ) from e
        except OSError as e:
            raise ExtractionError(f"Failed to start document converter: {e}", str(path)) from e

        if completed.returncode != 0:
            stderr = completed.stderr.decode("utf-8", errors="replace").strip()
            raise ExtractionError(
                f"Document converter exited with {completed.returncode}: {stderr[:500]}", str(path)
            )

        return completed.stdout.decode("utf-8", errors="replace")
