"""
FileWalker implementation for lazy recursive directory walking.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from keysweep.core.exclusion import ExclusionEngine

from .interfaces import FileWalkerInterface

logger = logging.getLogger(__name__)


class FileWalker(FileWalkerInterface):
    """
    Concrete implementation of FileWalkerInterface.

    Provides depth-first walking with:
    - Pruning of directories whose whole subtree is excluded
    - Per-directory error isolation (a denied directory does not abort the walk)
    - Symlink cycle detection when symlinks are followed
    """

    def __init__(self, exclusion: ExclusionEngine | None = None, follow_symlinks: bool = False):
        """
        Initialize the FileWalker.

        Args:
            exclusion: Engine used to prune excluded directories
            follow_symlinks: Whether to follow symlinked files and directories
        """
        self._exclusion = exclusion
        self._follow_symlinks = follow_symlinks

    def walk(self, root_path: Path) -> Iterator[Path]:
        root_path = Path(root_path).absolute()

        if not root_path.exists():
            logger.error(f"Root path does not exist: {root_path}")
            return

        if not root_path.is_dir():
            logger.error(f"Root path is not a directory: {root_path}")
            return

        # Track visited real paths to prevent cycles
        visited: set[Path] = set()
        yield from self._walk_directory(root_path, visited)

    def _walk_directory(self, current_path: Path, visited: set[Path]) -> Iterator[Path]:
        """
        Recursively walk a directory.

        Args:
            current_path: Current directory being walked
            visited: Set of resolved paths on the current recursion stack

        Yields:
            Paths of regular files
        """
        try:
            # Resolve symlinks to check for cycles
            real_path = current_path.resolve()
            if real_path in visited:
                logger.debug(f"Skipping recursive cycle: {current_path} -> {real_path}")
                return
            visited.add(real_path)

            entries = sorted(current_path.iterdir(), key=lambda p: (not p.is_dir(), p.name))
        except PermissionError as e:
            logger.warning(f"Permission denied accessing directory: {current_path} - {e}")
            return
        except (OSError, RuntimeError) as e:
            logger.warning(f"Error accessing directory: {current_path} - {e}")
            return

        for entry in entries:
            if entry.is_symlink() and not self._follow_symlinks:
                logger.debug(f"Skipping symlink (follow_symlinks=False): {entry}")
                continue

            if entry.is_dir():
                if self._is_pruned(entry):
                    logger.debug(f"Pruning excluded directory: {entry}")
                    continue
                yield from self._walk_directory(entry, visited)
            elif entry.is_file():
                yield entry

        # Remove from visited when backtracking to allow other paths to visit this real dir
        visited.discard(real_path)

    def _is_pruned(self, directory: Path) -> bool:
        """
        Check a directory against the exclusion engine by its resolved path.

        Files are excluded by resolved path as well, so a root or directory
        reached through a symlink is pruned exactly when its files would be
        excluded one by one.
        """
        if self._exclusion is None:
            return False
        try:
            resolved = directory.resolve()
        except (OSError, RuntimeError):
            return False
        return self._exclusion.is_excluded_dir(resolved)
