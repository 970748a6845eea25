"""
Tests for the private-key classifier.
"""

import pytest

from keysweep.core.detectors import (
    BASE58_ALPHABET,
    BASE58_PRIVATE_KEY,
    BITCOIN_WIF_KEY,
    HEX_PRIVATE_KEY,
    RIPPLE_PRIVATE_KEY,
    SOLANA_32_BYTE_KEY,
    SOLANA_64_BYTE_SEED,
    classify_key,
)


class TestHexKeys:
    """Rule 1: optional 0x followed by 64 hex characters."""

    def test_prefixed_hex(self):
        assert classify_key("0x" + "a" * 64) == HEX_PRIVATE_KEY

    def test_unprefixed_hex(self):
        assert classify_key("0123456789abcdef" * 4) == HEX_PRIVATE_KEY

    def test_uppercase_hex(self):
        assert classify_key("0x" + "ABCDEF12" * 8) == HEX_PRIVATE_KEY

    def test_all_letter_hex_prefers_hex_label(self):
        """64 hex letters are also Base58, but the hex rule comes first."""
        assert classify_key("a" * 64) == HEX_PRIVATE_KEY

    def test_wrong_length_hex_is_not_hex_key(self):
        assert classify_key("0x" + "0" * 63) is None
        assert classify_key("0x" + "0" * 65) is None


class TestWifKeys:
    """Rule 2: 5, K or L followed by 50-51 Base58 characters."""

    @pytest.mark.parametrize("prefix", ["5", "K", "L"])
    @pytest.mark.parametrize("body_length", [50, 51])
    def test_wif(self, prefix, body_length):
        assert classify_key(prefix + "H" * body_length) == BITCOIN_WIF_KEY

    def test_wif_example(self):
        assert classify_key("5" + "HueCGU8rMjxEXxiPuD5BDku4MkFqeZyd4dZ1jvhTVqvbTLvyTJ"[:50]) == BITCOIN_WIF_KEY

    def test_short_wif_body_falls_through_to_base58(self):
        """Too short for WIF but still a 43-88 character Base58 run."""
        assert classify_key("5" + "H" * 49) == BASE58_PRIVATE_KEY

    def test_other_prefix_is_not_wif(self):
        assert classify_key("7" + "H" * 50) == BASE58_PRIVATE_KEY


class TestBase58Keys:
    """Rule 3: 43-88 Base58 characters, labelled by length."""

    def test_44_characters_is_solana_32_byte(self):
        assert classify_key("A" * 44) == SOLANA_32_BYTE_KEY

    @pytest.mark.parametrize("length", [86, 87, 88])
    def test_86_to_88_characters_is_solana_seed(self, length):
        assert classify_key("2" * length) == SOLANA_64_BYTE_SEED

    @pytest.mark.parametrize("length", [43, 45, 60, 85])
    def test_other_lengths_are_generic(self, length):
        assert classify_key("z" * length) == BASE58_PRIVATE_KEY

    def test_too_long_is_rejected(self):
        assert classify_key("z" * 89) is None

    @pytest.mark.parametrize("bad_char", ["0", "O", "I", "l"])
    def test_non_base58_character_rejects(self, bad_char):
        token = "z" * 20 + bad_char + "z" * 23
        assert len(token) == 44
        assert classify_key(token) is None


class TestRippleKeys:
    """Rule 4: s followed by 28-34 Base58 characters."""

    def test_ripple_example(self):
        assert classify_key("s" + "r" * 30) == RIPPLE_PRIVATE_KEY

    @pytest.mark.parametrize("body_length", [28, 34])
    def test_ripple_bounds(self, body_length):
        assert classify_key("s" + "p" * body_length) == RIPPLE_PRIVATE_KEY

    @pytest.mark.parametrize("body_length", [27, 35])
    def test_ripple_out_of_bounds(self, body_length):
        assert classify_key("s" + "p" * body_length) is None

    def test_ripple_requires_lowercase_s(self):
        assert classify_key("S" + "r" * 30) is None


class TestNonKeys:
    """Tokens that match none of the rules."""

    @pytest.mark.parametrize(
        "token",
        ["", "hello", "abandon", "0x", "0x1234", "https://example.com", "s" * 5],
    )
    def test_returns_none(self, token):
        assert classify_key(token) is None

    def test_alphabet_excludes_ambiguous_characters(self):
        assert len(BASE58_ALPHABET) == 58
        for ch in "0OIl":
            assert ch not in BASE58_ALPHABET

    def test_classification_is_repeatable(self):
        token = "K" + "x" * 51
        assert classify_key(token) == classify_key(token) == BITCOIN_WIF_KEY
