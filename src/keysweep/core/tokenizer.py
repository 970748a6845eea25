"""
Tokenizer module for content scanning.

Produces two independent token streams from extracted text: lowercase word
tokens for mnemonic detection, and raw tokens for private-key detection.
"""

import re
from abc import ABC, abstractmethod

# Anything that is not an ASCII letter or whitespace separates words
_NON_WORD_CHARS = re.compile(r"[^A-Za-z\s]")

# Whitespace plus , ; ( ) { } [ ] " ' ` separate key candidates
_KEY_SEPARATORS = re.compile(r"[\s,;(){}\[\]\"'`]+")


class TokenizerInterface(ABC):
    """Abstract interface for content tokenization."""

    @abstractmethod
    def word_tokens(self, text: str) -> list[str]:
        """
        Split text into lowercase alphabetic word tokens.

        Args:
            text: Raw extracted text.

        Returns:
            Word tokens in document order, never empty strings.
        """
        pass

    @abstractmethod
    def key_tokens(self, text: str) -> list[str]:
        """
        Split raw text into private-key candidate tokens.

        Args:
            text: Raw extracted text, not normalized.

        Returns:
            Maximal runs of non-separator characters in document order.
        """
        pass


class RegexTokenizer(TokenizerInterface):
    """
    Tokenizer implementation based on two precompiled character-class regexes.

    Word tokens: newlines and tabs become spaces, every character that is
    not an ASCII letter or whitespace becomes a space, the result is
    lowercased and split on whitespace runs.

    Key tokens: the raw text is split on whitespace and the characters
    ``, ; ( ) { } [ ] " ' ` `` with empty tokens dropped.
    """

    def word_tokens(self, text: str) -> list[str]:
        if not text:
            return []
        flattened = text.replace("\r", " ").replace("\n", " ").replace("\t", " ")
        return _NON_WORD_CHARS.sub(" ", flattened).lower().split()

    def key_tokens(self, text: str) -> list[str]:
        if not text:
            return []
        return [token for token in _KEY_SEPARATORS.split(text) if token]


_default_tokenizer: TokenizerInterface | None = None


def get_default_tokenizer() -> TokenizerInterface:
    """Get the shared default tokenizer instance."""
    global _default_tokenizer
    if _default_tokenizer is None:
        _default_tokenizer = RegexTokenizer()
    return _default_tokenizer
