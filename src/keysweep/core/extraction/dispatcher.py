"""
Extraction dispatcher.

Selects an extractor from the extension category, enforces the per-category
size ceilings and contains every extraction failure.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from .interfaces import ExtractorInterface
from .models import (
    DEFAULT_MAX_IMAGE_BYTES,
    DEFAULT_MAX_TEXT_BYTES,
    ExtensionCategory,
    ExtractionResult,
)
from .registry import ExtensionRegistry

logger = logging.getLogger(__name__)


class DispatchStatus(str, Enum):
    EXTRACTED = "extracted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass(frozen=True)
class DispatchOutcome:
    """What happened to one file in the dispatcher."""

    status: DispatchStatus
    text: str | None = None
    reason: str | None = None
    category: ExtensionCategory | None = None


class ExtractionDispatcher:
    """
    Routes a file to the extractor for its extension category.

    Policy, in order:
        1. Unknown and explicitly unsupported extensions are skipped.
        2. Non-image files above ``max_text_bytes`` and images above
           ``max_image_bytes`` are skipped; the ceilings are inclusive.
        3. Image files are skipped with a warning when OCR is unavailable.
        4. Extraction failures are logged and yield no text.
    """

    def __init__(
        self,
        registry: ExtensionRegistry,
        extractors: Mapping[ExtensionCategory, ExtractorInterface],
        max_text_bytes: int = DEFAULT_MAX_TEXT_BYTES,
        max_image_bytes: int = DEFAULT_MAX_IMAGE_BYTES,
    ):
        self._registry = registry
        self._extractors = dict(extractors)
        self._max_text_bytes = max_text_bytes
        self._max_image_bytes = max_image_bytes
        self._warned_unavailable: set[ExtensionCategory] = set()

    @property
    def registry(self) -> ExtensionRegistry:
        return self._registry

    def size_limit(self, category: ExtensionCategory) -> int:
        if category == ExtensionCategory.IMAGE:
            return self._max_image_bytes
        return self._max_text_bytes

    def extract(self, path: Path, extension: str, size: int) -> str | None:
        """
        Extract text from a file.

        Returns:
            The extracted text, or None if the file was skipped or failed
        """
        return self.dispatch(path, extension, size).text

    def dispatch(self, path: Path, extension: str, size: int) -> DispatchOutcome:
        """Extract text from a file and report how the attempt ended."""
        category = self._registry.detect(extension)

        if category is None:
            return self._skip(path, f"extension '{extension}' is not scanned")
        if category == ExtensionCategory.UNSUPPORTED:
            logger.info(f"Skipping unsupported document format: {path}")
            return self._skip(path, f"extension '{extension}' is unsupported", category)

        limit = self.size_limit(category)
        if size > limit:
            logger.info(f"Skipping large file ({size} bytes > {limit}): {path}")
            return self._skip(path, f"size {size} exceeds {limit} bytes", category)

        extractor = self._extractors.get(category)
        if extractor is None:
            return self._skip(path, f"no extractor registered for {category.value}", category)

        if not extractor.available:
            if category not in self._warned_unavailable:
                self._warned_unavailable.add(category)
                logger.warning(
                    f"{category.value} extractor is unavailable; skipping all {category.value} files"
                )
            return self._skip(path, f"{category.value} extractor unavailable", category)

        try:
            result = extractor.extract(path)
        except Exception as e:
            # Injected extractors are expected to return failures, not raise
            result = ExtractionResult.failure(f"{type(e).__name__}: {e}")

        if not result.ok:
            logger.warning(f"Extraction failed for {path}: {result.error}")
            return DispatchOutcome(DispatchStatus.FAILED, reason=result.error, category=category)

        return DispatchOutcome(DispatchStatus.EXTRACTED, text=result.text, category=category)

    @staticmethod
    def _skip(
        path: Path, reason: str, category: ExtensionCategory | None = None
    ) -> DispatchOutcome:
        logger.debug(f"Skipping {path}: {reason}")
        return DispatchOutcome(DispatchStatus.SKIPPED, reason=reason, category=category)
