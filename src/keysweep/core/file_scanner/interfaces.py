"""
Abstract interfaces for file discovery.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from pathlib import Path


class FileWalkerInterface(ABC):
    """
    Abstract interface for recursive file discovery.

    Implementations yield regular files lazily so that very large volumes
    are never materialized in memory.
    """

    @abstractmethod
    def walk(self, root_path: Path) -> Iterator[Path]:
        """
        Recursively walk a directory and yield regular files.

        Args:
            root_path: Directory to walk

        Yields:
            Absolute paths of regular files

        Notes:
            - A directory that cannot be listed is logged and skipped;
              its siblings are still walked
            - Never raises for per-directory errors
        """
        pass
