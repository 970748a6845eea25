"""
Root enumeration.

The traversal engine does not decide what counts as a scannable root; it
receives an ordered list from a RootProvider.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class RootProviderInterface(ABC):
    """Abstract interface supplying the ordered list of roots to scan."""

    @abstractmethod
    def roots(self) -> list[Path]:
        """Return usable root directories in scan order."""
        pass


class StaticRootProvider(RootProviderInterface):
    """
    Roots from configuration or the command line.

    Duplicates are dropped (first occurrence wins) and paths that are not
    existing directories are logged and skipped.
    """

    def __init__(self, paths: Iterable[Path | str]):
        self._paths = [Path(p).expanduser() for p in paths]

    def roots(self) -> list[Path]:
        usable: list[Path] = []
        seen: set[Path] = set()
        for path in self._paths:
            absolute = path.absolute()
            if absolute in seen:
                continue
            seen.add(absolute)
            if not absolute.is_dir():
                logger.warning(f"Skipping root that is not an accessible directory: {absolute}")
                continue
            usable.append(absolute)
        return usable
