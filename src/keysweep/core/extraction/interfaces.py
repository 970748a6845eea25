"""
Abstract interfaces for text extraction.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from .models import ExtractionResult


class ExtractorInterface(ABC):
    """
    Abstract interface for extracting text from one file.

    Implementations must not raise for per-file problems (decode errors,
    converter failures, timeouts); they return ``ExtractionResult.failure``
    with a message instead.
    """

    @abstractmethod
    def extract(self, path: Path) -> ExtractionResult:
        """
        Extract text from a file.

        Args:
            path: Absolute path of the file

        Returns:
            ExtractionResult holding either the text or an error message
        """
        pass

    @property
    def available(self) -> bool:
        """Whether the extractor can be used in this environment."""
        return True
