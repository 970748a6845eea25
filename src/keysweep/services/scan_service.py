"""
Scan service: runs the traversal engine over the roots of a scan request.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from keysweep.core.file_scanner import ScanSummary
from keysweep.services.container import ScanContext
from keysweep.services.roots import RootProviderInterface, StaticRootProvider

logger = logging.getLogger(__name__)


class ScanService:
    """
    Service for running a scan with a prepared ScanContext.

    Roots come from the caller, or from ``scan.roots`` in the configuration,
    or default to the user's home directory.
    """

    def __init__(self, context: ScanContext, root_provider: RootProviderInterface | None = None):
        self._context = context
        self._root_provider = root_provider

    @property
    def context(self) -> ScanContext:
        return self._context

    def resolve_roots(self, roots: Iterable[Path | str] | None = None) -> list[Path]:
        """Ordered list of usable roots for this run."""
        provider = self._root_provider
        if provider is None:
            if roots is not None:
                requested = list(roots)
            else:
                requested = list(self._context.config.scan.roots) or [Path.home()]
            provider = StaticRootProvider(requested)
        return provider.roots()

    def run(self, roots: Iterable[Path | str] | None = None) -> ScanSummary:
        """
        Scan the given roots.

        Returns:
            ScanSummary describing the run
        """
        resolved = self.resolve_roots(roots)
        if not resolved:
            logger.warning("No usable roots to scan")

        dictionary = self._context.dictionary
        logger.info(
            f"Starting scan of {len(resolved)} root(s) with {len(dictionary)} dictionary words "
            f"and {len(self._context.exclusion)} exclusion patterns"
        )
        return self._context.engine.scan_roots(resolved)
