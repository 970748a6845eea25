"""
Content scanner.

Runs the mnemonic pass and the private-key pass over the text of a single
document and reports every match to a finding sink.
"""

import logging
from dataclasses import dataclass, field

from keysweep.core.detectors import (
    Finding,
    classify_key,
    iter_mnemonic_windows,
    mnemonic_kind,
)
from keysweep.core.dictionary import MnemonicDictionary
from keysweep.core.findings import FindingSinkInterface
from keysweep.core.tokenizer import TokenizerInterface, get_default_tokenizer

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    """Findings produced by scanning one document."""

    path: str
    mnemonic_findings: list[Finding] = field(default_factory=list)
    key_findings: list[Finding] = field(default_factory=list)

    @property
    def findings(self) -> list[Finding]:
        return self.mnemonic_findings + self.key_findings

    @property
    def found(self) -> bool:
        return bool(self.mnemonic_findings or self.key_findings)


class ContentScanner:
    """
    Orchestrates tokenization and both matchers over one document.

    Both passes always run to completion; neither short-circuits the other.
    Findings are not deduplicated.
    """

    def __init__(
        self,
        dictionary: MnemonicDictionary,
        sink: FindingSinkInterface,
        tokenizer: TokenizerInterface | None = None,
    ):
        self._dictionary = dictionary
        self._sink = sink
        self._tokenizer = tokenizer or get_default_tokenizer()

    def scan(self, text: str, path: str) -> bool:
        """
        Scan text and report findings.

        Args:
            text: Extracted document text
            path: Source path recorded in each finding

        Returns:
            True if at least one finding was emitted
        """
        return self.scan_text(text, path).found

    def scan_text(self, text: str, path: str) -> ScanReport:
        """Scan text, report every finding to the sink and return them."""
        report = ScanReport(path=path)

        for finding in self._mnemonic_pass(text, path):
            self._emit(finding)
            report.mnemonic_findings.append(finding)

        for finding in self._key_pass(text, path):
            self._emit(finding)
            report.key_findings.append(finding)

        if report.found:
            logger.info(
                f"Findings in {path}: {len(report.mnemonic_findings)} mnemonic, "
                f"{len(report.key_findings)} key"
            )
        return report

    def _mnemonic_pass(self, text: str, path: str) -> list[Finding]:
        tokens = self._tokenizer.word_tokens(text)
        return [
            Finding(source_path=path, kind=mnemonic_kind(len(words)), matched_text=" ".join(words))
            for _, words in iter_mnemonic_windows(tokens, self._dictionary.words)
        ]

    def _key_pass(self, text: str, path: str) -> list[Finding]:
        findings = []
        for token in self._tokenizer.key_tokens(text):
            label = classify_key(token)
            if label is not None:
                findings.append(Finding(source_path=path, kind=label, matched_text=token))
        return findings

    def _emit(self, finding: Finding) -> None:
        logger.warning(f"{finding.kind} found in {finding.source_path}")
        self._sink.report(finding)
