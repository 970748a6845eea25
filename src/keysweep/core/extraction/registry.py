"""
Extension registry mapping file extensions to extraction categories.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from .models import ExtensionCategory

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """
    Registry for mapping file extensions to extraction categories.

    Extensions are stored lowercased with a leading dot. An extension lives
    in at most one category; registering it again moves it.

    Example:
        >>> registry = ExtensionRegistry()
        >>> registry.register(ExtensionCategory.PLAIN_TEXT, [".txt", "LOG"])
        >>> registry.detect(".TXT")
        <ExtensionCategory.PLAIN_TEXT: 'plain_text'>
    """

    def __init__(self):
        self._extension_to_category: dict[str, ExtensionCategory] = {}

    @classmethod
    def from_lists(
        cls,
        text_extensions: Iterable[str] = (),
        document_extensions: Iterable[str] = (),
        image_extensions: Iterable[str] = (),
        unsupported_extensions: Iterable[str] = (),
    ) -> "ExtensionRegistry":
        """
        Build a registry from per-category extension lists.

        Unsupported extensions are registered last so they win over any
        overlap in the other lists.
        """
        registry = cls()
        registry.register(ExtensionCategory.PLAIN_TEXT, text_extensions)
        registry.register(ExtensionCategory.DOCUMENT, document_extensions)
        registry.register(ExtensionCategory.IMAGE, image_extensions)
        registry.register(ExtensionCategory.UNSUPPORTED, unsupported_extensions)
        return registry

    @staticmethod
    def normalize(extension: str) -> str:
        """Lowercase an extension and make sure it has a leading dot."""
        ext = extension.strip().lower()
        if ext and not ext.startswith("."):
            ext = "." + ext
        return ext

    def register(self, category: ExtensionCategory, extensions: Iterable[str]) -> None:
        """Register extensions under a category."""
        for extension in extensions:
            ext = self.normalize(str(extension))
            if not ext:
                continue
            previous = self._extension_to_category.get(ext)
            if previous is not None and previous != category:
                logger.debug(f"Extension {ext} moved from {previous.value} to {category.value}")
            self._extension_to_category[ext] = category

    def detect(self, extension: str) -> ExtensionCategory | None:
        """
        Category for an extension.

        Returns:
            The registered category, or None if the extension is unknown
        """
        return self._extension_to_category.get(self.normalize(extension))

    def detect_from_path(self, file_path: Path) -> ExtensionCategory | None:
        return self.detect(file_path.suffix)

    def get_extensions(self, category: ExtensionCategory) -> set[str]:
        """All extensions registered under a category."""
        return {ext for ext, cat in self._extension_to_category.items() if cat == category}

    def allowed_extensions(self) -> set[str]:
        """Union of text, document and image extensions."""
        return {
            ext
            for ext, cat in self._extension_to_category.items()
            if cat != ExtensionCategory.UNSUPPORTED
        }

    def is_allowed(self, extension: str) -> bool:
        category = self.detect(extension)
        return category is not None and category != ExtensionCategory.UNSUPPORTED
