"""
Traversal engine: walks roots and feeds every eligible file through
extraction and content scanning exactly once per run.
"""

import logging
import time
from collections.abc import Iterable, Sequence
from pathlib import Path

from keysweep.core.content_scanner import ContentScanner
from keysweep.core.exclusion import ExclusionEngine
from keysweep.core.extraction import DispatchStatus, ExtractionDispatcher

from .interfaces import FileWalkerInterface
from .models import FileCandidate, ProcessedPathSet, ScanSummary
from .walker import FileWalker

logger = logging.getLogger(__name__)


class TraversalEngine:
    """
    Walks each root, priority folders first, then the whole root.

    For every regular file:
    - files already in the processed set are skipped
    - the file is marked processed before anything else happens, so it is
      attempted at most once even when a later pass finds it again
    - excluded paths and disallowed extensions are skipped
    - the rest go to the dispatcher, and extracted text to the scanner

    Per-file errors are contained at the file boundary; a root that fails
    mid-walk is abandoned and the next root is processed.
    """

    def __init__(
        self,
        exclusion: ExclusionEngine,
        dispatcher: ExtractionDispatcher,
        content_scanner: ContentScanner,
        priority_folders: Sequence[Path] = (),
        walker: FileWalkerInterface | None = None,
        processed: ProcessedPathSet | None = None,
    ):
        self._exclusion = exclusion
        self._dispatcher = dispatcher
        self._content_scanner = content_scanner
        self._priority_folders = [Path(p) for p in priority_folders]
        self._walker = walker or FileWalker(exclusion)
        self._processed = processed if processed is not None else ProcessedPathSet()

    @property
    def processed(self) -> ProcessedPathSet:
        return self._processed

    def scan_roots(self, roots: Iterable[Path | str]) -> ScanSummary:
        """
        Scan every root in the given order.

        Returns:
            ScanSummary for the whole run
        """
        summary = ScanSummary()
        start = time.monotonic()

        for root in roots:
            self.scan_root(Path(root), summary)

        summary.duration_seconds = time.monotonic() - start
        logger.info(
            f"Scan complete: {summary.files_scanned} files scanned, "
            f"{summary.findings} findings, {len(summary.failed_files)} failures "
            f"in {summary.duration_seconds:.2f}s"
        )
        return summary

    def scan_root(self, root: Path, summary: ScanSummary) -> None:
        """Scan a single root: priority folders under it first, then all of it."""
        root = root.expanduser().absolute()
        summary.roots.append(str(root))
        logger.info(f"Scanning root: {root}")

        try:
            for folder in self.priority_folders_for(root):
                logger.info(f"Scanning priority folder: {folder}")
                self._scan_tree(folder, summary)

            self._scan_tree(root, summary)
        except OSError as e:
            logger.error(f"Root became unreachable, abandoning it: {root} - {e}")
            summary.failed_roots.append(str(root))

    def priority_folders_for(self, root: Path) -> list[Path]:
        """Priority folders that exist and lie under ``root``."""
        folders = []
        resolved_root = root.resolve()
        for folder in self._priority_folders:
            try:
                resolved = folder.expanduser().resolve()
                resolved.relative_to(resolved_root)
            except (ValueError, OSError, RuntimeError):
                continue
            if resolved.is_dir() and resolved != resolved_root:
                folders.append(resolved)
        return folders

    def _scan_tree(self, directory: Path, summary: ScanSummary) -> None:
        for path in self._walker.walk(directory):
            self.process_file(path, summary)

    def process_file(self, path: Path, summary: ScanSummary) -> None:
        """
        Run one file through exclusion, extension filter, extraction and scan.

        Never raises: any error is logged with the path and the file is
        recorded as failed.
        """
        try:
            resolved = Path(path).resolve()
        except (OSError, RuntimeError) as e:
            logger.warning(f"Cannot resolve path {path}: {e}")
            summary.failed_files.append(str(path))
            return

        if not self._processed.add(resolved):
            summary.duplicates += 1
            return

        summary.files_seen += 1

        try:
            self._process_candidate(resolved, summary)
        except Exception as e:
            logger.warning(f"Failed to process {resolved}: {e}")
            summary.failed_files.append(str(resolved))

    def _process_candidate(self, path: Path, summary: ScanSummary) -> None:
        if self._exclusion.is_excluded(path):
            logger.debug(f"Excluded: {path}")
            summary.files_excluded += 1
            return

        extension = path.suffix.lower()
        if not self._dispatcher.registry.is_allowed(extension):
            summary.files_skipped += 1
            return

        candidate = FileCandidate(path=path, extension=extension, size_bytes=path.stat().st_size)
        outcome = self._dispatcher.dispatch(
            candidate.path, candidate.extension, candidate.size_bytes
        )

        if outcome.status == DispatchStatus.FAILED:
            summary.failed_files.append(str(candidate.path))
            return
        if outcome.status == DispatchStatus.SKIPPED or outcome.text is None:
            summary.files_skipped += 1
            return

        summary.files_scanned += 1
        report = self._content_scanner.scan_text(outcome.text, str(candidate.path))
        if report.found:
            summary.findings += len(report.findings)
            summary.files_with_findings.append(str(candidate.path))
