"""
Tests for the ExtractionDispatcher and the ExtensionRegistry.
"""

import logging
from pathlib import Path

import pytest

from keysweep.core.extraction import (
    DEFAULT_MAX_IMAGE_BYTES,
    DEFAULT_MAX_TEXT_BYTES,
    MIB,
    DispatchStatus,
    ExtensionCategory,
    ExtensionRegistry,
    ExtractionDispatcher,
)
from keysweep.infrastructure.fakes import FailingExtractor, StaticExtractor


@pytest.fixture
def registry():
    return ExtensionRegistry.from_lists(
        text_extensions=[".txt", ".json", "md"],
        document_extensions=[".pdf", ".docx"],
        image_extensions=[".png", ".jpg"],
        unsupported_extensions=[".doc", ".xls"],
    )


def make_dispatcher(registry, text=None, document=None, image=None):
    return ExtractionDispatcher(
        registry,
        {
            ExtensionCategory.PLAIN_TEXT: text or StaticExtractor("text"),
            ExtensionCategory.DOCUMENT: document or StaticExtractor("document"),
            ExtensionCategory.IMAGE: image or StaticExtractor("image"),
        },
    )


class TestExtensionRegistry:
    """Extension to category mapping."""

    def test_detect_is_case_insensitive(self, registry):
        assert registry.detect(".TXT") == ExtensionCategory.PLAIN_TEXT
        assert registry.detect("Pdf") == ExtensionCategory.DOCUMENT

    def test_extension_without_dot_is_normalized(self, registry):
        assert registry.detect(".md") == ExtensionCategory.PLAIN_TEXT

    def test_unknown_extension(self, registry):
        assert registry.detect(".exe") is None
        assert registry.is_allowed(".exe") is False

    def test_unsupported_is_not_allowed(self, registry):
        assert registry.detect(".doc") == ExtensionCategory.UNSUPPORTED
        assert registry.is_allowed(".doc") is False

    def test_allowed_extensions(self, registry):
        assert registry.allowed_extensions() == {
            ".txt", ".json", ".md", ".pdf", ".docx", ".png", ".jpg"
        }

    def test_unsupported_wins_over_overlap(self):
        registry = ExtensionRegistry.from_lists(
            text_extensions=[".rtf"], unsupported_extensions=[".rtf"]
        )
        assert registry.detect(".rtf") == ExtensionCategory.UNSUPPORTED

    def test_detect_from_path(self, registry):
        assert registry.detect_from_path(Path("/x/photo.JPG")) == ExtensionCategory.IMAGE

    def test_get_extensions(self, registry):
        assert registry.get_extensions(ExtensionCategory.IMAGE) == {".png", ".jpg"}


class TestRouting:
    """Extractor selection by category."""

    @pytest.mark.parametrize(
        "name, expected",
        [("a.txt", "text"), ("a.pdf", "document"), ("a.png", "image")],
    )
    def test_routes_by_category(self, registry, name, expected):
        dispatcher = make_dispatcher(registry)
        path = Path("/data") / name

        outcome = dispatcher.dispatch(path, path.suffix, 10)

        assert outcome.status == DispatchStatus.EXTRACTED
        assert outcome.text == expected

    def test_extract_returns_text(self, registry):
        dispatcher = make_dispatcher(registry)
        assert dispatcher.extract(Path("/data/a.json"), ".json", 10) == "text"

    def test_unknown_extension_is_skipped(self, registry):
        text = StaticExtractor("text")
        dispatcher = make_dispatcher(registry, text=text)

        outcome = dispatcher.dispatch(Path("/data/a.exe"), ".exe", 10)

        assert outcome.status == DispatchStatus.SKIPPED
        assert text.calls == []

    def test_unsupported_extension_is_skipped_with_info(self, registry, caplog):
        document = StaticExtractor("document")
        dispatcher = make_dispatcher(registry, document=document)

        with caplog.at_level(logging.INFO, logger="keysweep.core.extraction.dispatcher"):
            outcome = dispatcher.dispatch(Path("/data/old.doc"), ".doc", 10)

        assert outcome.status == DispatchStatus.SKIPPED
        assert outcome.category == ExtensionCategory.UNSUPPORTED
        assert document.calls == []
        assert "unsupported" in caplog.text

    def test_missing_extractor_is_skipped(self, registry):
        dispatcher = ExtractionDispatcher(registry, {})
        outcome = dispatcher.dispatch(Path("/data/a.txt"), ".txt", 10)
        assert outcome.status == DispatchStatus.SKIPPED


class TestSizeCeilings:
    """Inclusive per-category size limits."""

    def test_default_limits(self):
        assert DEFAULT_MAX_TEXT_BYTES == MIB
        assert DEFAULT_MAX_IMAGE_BYTES == 50 * MIB

    @pytest.mark.parametrize("name", ["a.txt", "a.pdf"])
    def test_text_at_limit_is_processed(self, registry, name):
        dispatcher = make_dispatcher(registry)
        path = Path("/data") / name
        assert dispatcher.dispatch(path, path.suffix, MIB).status == DispatchStatus.EXTRACTED

    @pytest.mark.parametrize("name", ["a.txt", "a.pdf"])
    def test_text_over_limit_is_skipped(self, registry, name):
        text = StaticExtractor("text")
        document = StaticExtractor("document")
        dispatcher = make_dispatcher(registry, text=text, document=document)
        path = Path("/data") / name

        assert dispatcher.dispatch(path, path.suffix, MIB + 1).status == DispatchStatus.SKIPPED
        assert text.calls == [] and document.calls == []

    def test_image_at_limit_is_processed(self, registry):
        dispatcher = make_dispatcher(registry)
        outcome = dispatcher.dispatch(Path("/data/a.png"), ".png", 50 * MIB)
        assert outcome.status == DispatchStatus.EXTRACTED

    def test_image_over_limit_is_skipped(self, registry):
        image = StaticExtractor("image")
        dispatcher = make_dispatcher(registry, image=image)

        outcome = dispatcher.dispatch(Path("/data/a.png"), ".png", 50 * MIB + 1)

        assert outcome.status == DispatchStatus.SKIPPED
        assert image.calls == []

    def test_image_between_limits_is_processed(self, registry):
        """Images use their own ceiling, not the text one."""
        dispatcher = make_dispatcher(registry)
        outcome = dispatcher.dispatch(Path("/data/a.jpg"), ".jpg", 10 * MIB)
        assert outcome.status == DispatchStatus.EXTRACTED

    def test_custom_limits(self, registry):
        dispatcher = ExtractionDispatcher(
            registry,
            {ExtensionCategory.PLAIN_TEXT: StaticExtractor("text")},
            max_text_bytes=100,
        )
        assert dispatcher.size_limit(ExtensionCategory.PLAIN_TEXT) == 100
        assert dispatcher.dispatch(Path("/d/a.txt"), ".txt", 101).status == DispatchStatus.SKIPPED


class TestUnavailableAndFailures:
    """Unavailable extractors and failure containment."""

    def test_unavailable_image_extractor_skips_and_warns_once(self, registry, caplog):
        image = StaticExtractor("image", available=False)
        dispatcher = make_dispatcher(registry, image=image)

        with caplog.at_level(logging.WARNING):
            first = dispatcher.dispatch(Path("/data/a.png"), ".png", 10)
            second = dispatcher.dispatch(Path("/data/b.png"), ".png", 10)

        assert first.status == DispatchStatus.SKIPPED
        assert second.status == DispatchStatus.SKIPPED
        assert image.calls == []
        assert caplog.text.count("unavailable") == 1

    def test_failure_result(self, registry, caplog):
        dispatcher = make_dispatcher(registry, text=FailingExtractor("bad bytes"))

        with caplog.at_level(logging.WARNING):
            outcome = dispatcher.dispatch(Path("/data/a.txt"), ".txt", 10)

        assert outcome.status == DispatchStatus.FAILED
        assert outcome.text is None
        assert outcome.reason == "bad bytes"
        assert "/data/a.txt" in caplog.text

    def test_raising_extractor_is_contained(self, registry):
        dispatcher = make_dispatcher(registry, document=FailingExtractor("boom", raise_error=True))

        outcome = dispatcher.dispatch(Path("/data/a.pdf"), ".pdf", 10)

        assert outcome.status == DispatchStatus.FAILED
        assert "boom" in outcome.reason

    def test_extract_returns_none_on_failure(self, registry):
        dispatcher = make_dispatcher(registry, text=FailingExtractor())
        assert dispatcher.extract(Path("/data/a.txt"), ".txt", 10) is None
