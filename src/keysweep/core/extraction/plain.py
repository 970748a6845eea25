"""
Plain-text extractor: reads the file and decodes it as UTF-8.
"""

from pathlib import Path

from .interfaces import ExtractorInterface
from .models import ExtractionResult


class PlainTextExtractor(ExtractorInterface):
    """Decodes files strictly as UTF-8; undecodable files are reported as failures."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    def extract(self, path: Path) -> ExtractionResult:
        try:
            return ExtractionResult.success(Path(path).read_text(encoding=self._encoding))
        except UnicodeDecodeError as e:
            return ExtractionResult.failure(f"Failed to decode file as {self._encoding}: {e}")
        except PermissionError as e:
            return ExtractionResult.failure(f"Permission denied reading file: {e}")
        except OSError as e:
            return ExtractionResult.failure(f"Error reading file: {e}")
