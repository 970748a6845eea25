"""
Finding sinks.

A sink receives every Finding produced during a run. The file sink appends
one line per finding to a local report.
"""

import logging
from pathlib import Path

from keysweep.core.detectors import Finding
from keysweep.core.findings import FindingSinkInterface

logger = logging.getLogger(__name__)


class FileFindingSink(FindingSinkInterface):
    """
    Appends findings to a text report, one line per finding.

    Line format:
        [YYYY-MM-DD HH:MM:SS] <path> | <kind> | <matched text>

    The report is opened in append mode for every write so that lines
    written before a crash are never lost or truncated.
    """

    def __init__(self, path: Path | str):
        self._path = Path(path).expanduser().resolve()
        self.written = 0
        self.failed = 0

    @property
    def path(self) -> Path:
        """Resolved path of the findings report."""
        return self._path

    def report(self, finding: Finding) -> None:
        line = finding.to_line().replace("\r", " ").replace("\n", " ")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            with open(self._path, "a", encoding="utf-8") as f:
                f.write(line + "\n")
            self.written += 1
        except OSError as e:
            self.failed += 1
            logger.error(
                f"Failed to append finding to {self._path}: {e} "
                f"(source={finding.source_path}, kind={finding.kind})"
            )
