"""
Centralized services container module for keysweep.

Builds every collaborator of a scan run once, from configuration, and holds
them in a single ScanContext that is passed explicitly to the services.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from keysweep.core.config import KeysweepConfig, load_config
from keysweep.core.content_scanner import ContentScanner
from keysweep.core.dictionary import MnemonicDictionary, load_dictionary
from keysweep.core.errors import DictionaryError
from keysweep.core.exclusion import ExclusionEngine, build_exclusion_engine
from keysweep.core.extraction import (
    DocumentExtractor,
    ExtensionCategory,
    ExtensionRegistry,
    ExtractionDispatcher,
    OcrAvailability,
    OcrExtractor,
    PlainTextExtractor,
    check_ocr_availability,
)
from keysweep.core.file_scanner import FileWalker, TraversalEngine
from keysweep.core.findings import FindingSinkInterface
from keysweep.infrastructure.finding_sink import FileFindingSink

logger = logging.getLogger(__name__)


@dataclass
class ScanContext:
    """
    Container holding all per-run collaborators.

    Attributes:
        config: Effective configuration
        dictionary: Mnemonic dictionary
        exclusion: Exclusion engine (read-only once built)
        registry: Extension-to-category registry
        dispatcher: Extraction dispatcher
        sink: Finding sink
        content_scanner: Content scanner bound to the dictionary and sink
        engine: Traversal engine owning the processed-path set
        ocr: Result of the one-time OCR availability check
    """

    config: KeysweepConfig
    dictionary: MnemonicDictionary
    exclusion: ExclusionEngine
    registry: ExtensionRegistry
    dispatcher: ExtractionDispatcher
    sink: FindingSinkInterface
    content_scanner: ContentScanner
    engine: TraversalEngine
    ocr: OcrAvailability


def _load_dictionary_or_empty(config: KeysweepConfig) -> MnemonicDictionary:
    try:
        return load_dictionary(config.dictionary.wordlist_path, config.dictionary.language)
    except DictionaryError as e:
        logger.error(f"{e}; mnemonic detection disabled for this run")
        return MnemonicDictionary([], source="<unavailable>")


def _check_ocr(config: KeysweepConfig) -> OcrAvailability:
    if not config.extraction.ocr_enabled:
        return OcrAvailability(available=False, reason="OCR disabled by configuration")

    ocr = check_ocr_availability(config.extraction.ocr_language, config.extraction.tesseract_cmd)
    if ocr.available:
        logger.info(f"OCR ready (tesseract {ocr.version}, language {config.extraction.ocr_language})")
    else:
        logger.warning(f"OCR unavailable, image files will be skipped: {ocr.reason}")
    return ocr


def create_services(
    config: KeysweepConfig | None = None,
    sink: FindingSinkInterface | None = None,
    log_file: Path | None = None,
    ocr: OcrAvailability | None = None,
) -> ScanContext:
    """
    Create and wire all collaborators for a scan run.

    Args:
        config: Configuration; loaded from defaults and environment if None.
        sink: Finding sink; a FileFindingSink on ``output.findings_path`` if None.
        log_file: Log file of this process, always excluded from scanning.
        ocr: Pre-computed OCR availability; checked once here if None.

    Returns:
        ScanContext with every collaborator initialized.
    """
    config = config or load_config()

    dictionary = _load_dictionary_or_empty(config)

    if sink is None:
        sink = FileFindingSink(config.output.findings_path)

    # The tool's own output must never be scanned
    if isinstance(sink, FileFindingSink):
        always_excluded: list[Path] = [sink.path]
    else:
        always_excluded = [Path(config.output.findings_path).expanduser().resolve()]
    if log_file is not None:
        always_excluded.append(Path(log_file))
    elif config.logging.file:
        always_excluded.append(Path(config.logging.file).expanduser().resolve())

    exclusion = build_exclusion_engine(
        config.exclusion.patterns,
        config.exclusion.env_patterns,
        always_excluded=always_excluded,
    )

    registry = ExtensionRegistry.from_lists(
        text_extensions=config.scan.text_extensions,
        document_extensions=config.scan.document_extensions,
        image_extensions=config.scan.image_extensions,
        unsupported_extensions=config.scan.unsupported_extensions,
    )

    if ocr is None:
        ocr = _check_ocr(config)

    dispatcher = ExtractionDispatcher(
        registry,
        {
            ExtensionCategory.PLAIN_TEXT: PlainTextExtractor(),
            ExtensionCategory.DOCUMENT: DocumentExtractor(
                config.extraction.document_commands, timeout=config.extraction.document_timeout
            ),
            ExtensionCategory.IMAGE: OcrExtractor(
                ocr, language=config.extraction.ocr_language, timeout=config.extraction.ocr_timeout
            ),
        },
        max_text_bytes=config.scan.max_text_bytes,
        max_image_bytes=config.scan.max_image_bytes,
    )

    content_scanner = ContentScanner(dictionary, sink)

    home = Path.home()
    engine = TraversalEngine(
        exclusion=exclusion,
        dispatcher=dispatcher,
        content_scanner=content_scanner,
        priority_folders=[home / name for name in config.scan.priority_folders],
        walker=FileWalker(exclusion, follow_symlinks=config.scan.follow_symlinks),
    )

    return ScanContext(
        config=config,
        dictionary=dictionary,
        exclusion=exclusion,
        registry=registry,
        dispatcher=dispatcher,
        sink=sink,
        content_scanner=content_scanner,
        engine=engine,
        ocr=ocr,
    )
