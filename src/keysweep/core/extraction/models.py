"""
Data models and constants for the extraction module.
"""

from dataclasses import dataclass
from enum import Enum

MIB = 1024 * 1024

# Size ceilings, inclusive: a file of exactly this size is still processed
DEFAULT_MAX_TEXT_BYTES = 1 * MIB
DEFAULT_MAX_IMAGE_BYTES = 50 * MIB


class ExtensionCategory(str, Enum):
    """Extraction category selected purely from a file extension."""

    PLAIN_TEXT = "plain_text"
    DOCUMENT = "document"
    IMAGE = "image"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True)
class ExtractionResult:
    """
    Structured outcome of a single extraction attempt.

    Exactly one of ``text`` and ``error`` is set.
    """

    text: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, text: str) -> "ExtractionResult":
        return cls(text=text)

    @classmethod
    def failure(cls, error: str) -> "ExtractionResult":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None and self.text is not None
