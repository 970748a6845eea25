"""
Image-text extractor using the Tesseract OCR engine via pytesseract.

Availability (engine binary present, language data installed) is checked
once before traversal; when it fails every image is skipped.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytesseract
from PIL import Image

from .interfaces import ExtractorInterface
from .models import ExtractionResult

logger = logging.getLogger(__name__)


@dataclass
class OcrAvailability:
    """Result of the one-time OCR engine check."""

    available: bool
    version: str | None = None
    languages: list[str] = field(default_factory=list)
    reason: str | None = None


def check_ocr_availability(language: str = "eng", tesseract_cmd: str = "") -> OcrAvailability:
    """
    Check that Tesseract runs and has data for ``language``.

    Args:
        language: Tesseract language code required for OCR
        tesseract_cmd: Explicit path to the tesseract binary (empty = PATH lookup)
    """
    if tesseract_cmd:
        pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    try:
        version = str(pytesseract.get_tesseract_version())
    except pytesseract.TesseractNotFoundError as e:
        return OcrAvailability(available=False, reason=f"Tesseract binary not found: {e}")
    except (OSError, pytesseract.TesseractError) as e:
        return OcrAvailability(available=False, reason=f"Tesseract version check failed: {e}")

    try:
        languages = sorted(pytesseract.get_languages(config=""))
    except (OSError, pytesseract.TesseractError) as e:
        return OcrAvailability(
            available=False, version=version, reason=f"Could not list Tesseract languages: {e}"
        )

    if language not in languages:
        return OcrAvailability(
            available=False,
            version=version,
            languages=languages,
            reason=f"Tesseract language data '{language}' is not installed",
        )

    return OcrAvailability(available=True, version=version, languages=languages)


class OcrExtractor(ExtractorInterface):
    """
    Runs Tesseract on an image file.

    Args:
        availability: Result of check_ocr_availability()
        language: Default OCR language
        timeout: Seconds before the Tesseract process is killed
    """

    def __init__(self, availability: OcrAvailability, language: str = "eng", timeout: float = 120.0):
        self._availability = availability
        self._language = language
        self._timeout = timeout

    @property
    def available(self) -> bool:
        return self._availability.available

    @property
    def unavailable_reason(self) -> str | None:
        return self._availability.reason

    def extract(self, path: Path, language: str | None = None) -> ExtractionResult:
        if not self.available:
            return ExtractionResult.failure(
                f"OCR engine unavailable: {self._availability.reason or 'not configured'}"
            )

        try:
            with Image.open(path) as image:
                text = pytesseract.image_to_string(
                    image, lang=language or self._language, timeout=self._timeout
                )
        except pytesseract.TesseractError as e:
            return ExtractionResult.failure(f"Tesseract error: {e}")
        except RuntimeError as e:
            # pytesseract signals a killed process with a bare RuntimeError
            return ExtractionResult.failure(f"OCR timed out after {self._timeout}s: {e}")
        except Image.DecompressionBombError as e:
            return ExtractionResult.failure(f"Image too large to decode safely: {e}")
        except OSError as e:
            return ExtractionResult.failure(f"Failed to open image: {e}")

        return ExtractionResult.success(str(text or ""))
