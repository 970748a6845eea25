"""
Extraction module for keysweep.

Turns a file into text: plain files are decoded directly, rich documents go
through an external converter and images through Tesseract OCR. The
dispatcher picks the extractor from the extension category.
"""

from .dispatcher import DispatchOutcome, DispatchStatus, ExtractionDispatcher
from .document import DocumentExtractor
from .interfaces import ExtractorInterface
from .models import (
    DEFAULT_MAX_IMAGE_BYTES,
    DEFAULT_MAX_TEXT_BYTES,
    MIB,
    ExtensionCategory,
    ExtractionResult,
)
from .ocr import OcrAvailability, OcrExtractor, check_ocr_availability
from .plain import PlainTextExtractor
from .registry import ExtensionRegistry

__all__ = [
    # Dispatcher
    "ExtractionDispatcher",
    "DispatchOutcome",
    "DispatchStatus",
    # Extractors
    "ExtractorInterface",
    "PlainTextExtractor",
    "DocumentExtractor",
    "OcrExtractor",
    "OcrAvailability",
    "check_ocr_availability",
    # Models
    "ExtensionCategory",
    "ExtractionResult",
    "ExtensionRegistry",
    # Constants
    "MIB",
    "DEFAULT_MAX_TEXT_BYTES",
    "DEFAULT_MAX_IMAGE_BYTES",
]
