"""
Mnemonic dictionary for keysweep.

Holds the canonical BIP39 word set used by the mnemonic detector. Words are
loaded once at startup, either from a wordlist file (one word per line) or
from the wordlists shipped with the ``mnemonic`` library.
"""

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from mnemonic import Mnemonic

from keysweep.core.errors import DictionaryError

logger = logging.getLogger(__name__)

# Cardinality of every BIP39 wordlist
EXPECTED_WORD_COUNT = 2048


class MnemonicDictionary:
    """
    Immutable, ordered set of valid mnemonic words.

    Membership is tested against the lowercase form of a word. A dictionary
    with fewer or more than 2048 words still works but is flagged via
    ``is_complete`` and a warning at load time.

    Example:
        >>> d = MnemonicDictionary(["abandon", "ability", "able"])
        >>> "Able" in d
        True
    """

    def __init__(self, words: Iterable[str], source: str = "<memory>"):
        ordered: list[str] = []
        seen: set[str] = set()
        for word in words:
            normalized = word.strip().lower()
            if normalized and normalized not in seen:
                seen.add(normalized)
                ordered.append(normalized)

        self._words: tuple[str, ...] = tuple(ordered)
        self._lookup: frozenset[str] = frozenset(seen)
        self.source = source

        if len(self._words) != EXPECTED_WORD_COUNT:
            logger.warning(
                f"Mnemonic dictionary from {source} has {len(self._words)} words, "
                f"expected {EXPECTED_WORD_COUNT}; detection accuracy will be degraded"
            )

    @classmethod
    def from_file(cls, path: Path | str) -> "MnemonicDictionary":
        """
        Load a dictionary from a wordlist file.

        Raises:
            DictionaryError: If the file cannot be read
        """
        path = Path(path)
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryError(f"Failed to read wordlist {path}: {e}") from e
        return cls(content.splitlines(), source=str(path))

    @classmethod
    def from_language(cls, language: str = "english") -> "MnemonicDictionary":
        """
        Load one of the BIP39 wordlists bundled with the ``mnemonic`` library.

        Raises:
            DictionaryError: If the language is not bundled
        """
        available = Mnemonic.list_languages()
        if language not in available:
            raise DictionaryError(
                f"Unknown wordlist language '{language}'; available: {', '.join(sorted(available))}"
            )
        return cls(Mnemonic(language).wordlist, source=f"bip39:{language}")

    def __contains__(self, word: object) -> bool:
        return isinstance(word, str) and word.lower() in self._lookup

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    @property
    def words(self) -> frozenset[str]:
        """The lowercase word set."""
        return self._lookup

    @property
    def is_complete(self) -> bool:
        """True when the dictionary has exactly the BIP39 cardinality."""
        return len(self._words) == EXPECTED_WORD_COUNT


def load_dictionary(wordlist_path: str = "", language: str = "english") -> MnemonicDictionary:
    """
    Load the mnemonic dictionary from a wordlist file or a bundled language.

    A configured wordlist file takes precedence over the bundled language.
    """
    if wordlist_path:
        return MnemonicDictionary.from_file(Path(wordlist_path).expanduser())
    return MnemonicDictionary.from_language(language)
