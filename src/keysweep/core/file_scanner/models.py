"""
Data models for the file scanner module.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class FileCandidate:
    """
    A discovered file about to be extracted and scanned.

    Attributes:
        path: Absolute resolved path to the file
        extension: Lowercased extension including the dot ('' if none)
        size_bytes: File size in bytes
    """

    path: Path
    extension: str
    size_bytes: int


class ProcessedPathSet:
    """
    Paths already handled during a run.

    Grows monotonically. Keys are normalized absolute paths so the same file
    reached via the priority pass and the full sweep is recognised.
    """

    def __init__(self):
        self._paths: set[str] = set()

    @staticmethod
    def key_for(path: Path | str) -> str:
        return os.path.normcase(os.path.abspath(os.fspath(path)))

    def add(self, path: Path | str) -> bool:
        """
        Mark a path as processed.

        Returns:
            True if the path was new, False if it had already been processed
        """
        key = self.key_for(path)
        if key in self._paths:
            return False
        self._paths.add(key)
        return True

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, os.PathLike)):
            return False
        return self.key_for(path) in self._paths

    def __len__(self) -> int:
        return len(self._paths)


@dataclass
class ScanSummary:
    """Result of a scan run."""

    roots: list[str] = field(default_factory=list)
    files_seen: int = 0
    files_scanned: int = 0
    files_skipped: int = 0
    files_excluded: int = 0
    duplicates: int = 0
    failed_files: list[str] = field(default_factory=list)
    failed_roots: list[str] = field(default_factory=list)
    findings: int = 0
    files_with_findings: list[str] = field(default_factory=list)
    duration_seconds: float = 0.0
