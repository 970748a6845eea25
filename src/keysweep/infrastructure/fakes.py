"""
Fake implementations for testing.

Provides in-memory implementations of the sink and extractor interfaces
for use in unit and integration tests without external processes.
"""

from __future__ import annotations

from pathlib import Path

from keysweep.core.detectors import Finding
from keysweep.core.extraction import ExtractionResult, ExtractorInterface
from keysweep.core.findings import FindingSinkInterface


class InMemoryFindingSink(FindingSinkInterface):
    """Collects findings in a list."""

    def __init__(self):
        self.findings: list[Finding] = []

    def report(self, finding: Finding) -> None:
        self.findings.append(finding)

    def kinds(self) -> list[str]:
        return [f.kind for f in self.findings]

    def clear(self) -> None:
        self.findings.clear()


class StaticExtractor(ExtractorInterface):
    """
    Returns fixed text for every file, or per-path text when given a mapping.

    Args:
        text: Text returned for paths not in ``by_name``
        by_name: Optional file-name -> text mapping
        available: Value of the ``available`` property
    """

    def __init__(
        self,
        text: str = "",
        by_name: dict[str, str] | None = None,
        available: bool = True,
    ):
        self._text = text
        self._by_name = by_name or {}
        self._available = available
        self.calls: list[Path] = []

    @property
    def available(self) -> bool:
        return self._available

    def extract(self, path: Path) -> ExtractionResult:
        self.calls.append(Path(path))
        return ExtractionResult.success(self._by_name.get(Path(path).name, self._text))


class FailingExtractor(ExtractorInterface):
    """Fails every extraction, either with a failure result or by raising."""

    def __init__(self, message: str = "simulated failure", raise_error: bool = False):
        self._message = message
        self._raise = raise_error
        self.calls: list[Path] = []

    def extract(self, path: Path) -> ExtractionResult:
        self.calls.append(Path(path))
        if self._raise:
            raise RuntimeError(self._message)
        return ExtractionResult.failure(self._message)


class RecordingExtractor(ExtractorInterface):
    """
    Wraps another extractor and records every path it is asked to extract.

    Used to assert the at-most-once processing guarantee.
    """

    def __init__(self, inner: ExtractorInterface):
        self._inner = inner
        self.calls: list[Path] = []

    @property
    def available(self) -> bool:
        return self._inner.available

    def extract(self, path: Path) -> ExtractionResult:
        self.calls.append(Path(path))
        return self._inner.extract(path)
