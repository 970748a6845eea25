"""
Private-key pattern matcher.

Classifies a single token into a key-kind label using full-token regular
expressions, evaluated in a fixed order with first match winning.
"""

import re

from .models import (
    BASE58_PRIVATE_KEY,
    BITCOIN_WIF_KEY,
    HEX_PRIVATE_KEY,
    RIPPLE_PRIVATE_KEY,
    SOLANA_32_BYTE_KEY,
    SOLANA_64_BYTE_SEED,
)

# Digits and letters without 0, O, I and l
BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58 = f"[{BASE58_ALPHABET}]"

# ETH, TRON, BNB, ERC20 and similar raw secp256k1 keys
HEX_KEY_REGEX = re.compile(r"(?:0x)?[0-9a-fA-F]{64}")
WIF_KEY_REGEX = re.compile(rf"[5KL]{_B58}{{50,51}}")
BASE58_KEY_REGEX = re.compile(rf"{_B58}{{43,88}}")
RIPPLE_KEY_REGEX = re.compile(rf"s{_B58}{{28,34}}")


def _base58_label(token: str) -> str:
    """Sub-classify a generic Base58 key by its exact length."""
    length = len(token)
    if length == 44:
        return SOLANA_32_BYTE_KEY
    if 86 <= length <= 88:
        return SOLANA_64_BYTE_SEED
    return BASE58_PRIVATE_KEY


def classify_key(token: str) -> str | None:
    """
    Classify a token as a private-key kind.

    Rules, first match wins:
        1. optional 0x + 64 hex characters
        2. 5, K or L + 50-51 Base58 characters (WIF)
        3. 43-88 Base58 characters, labelled by length
        4. s + 28-34 Base58 characters (Ripple)

    Returns:
        The key label, or None if no rule matches
    """
    if not token:
        return None
    if HEX_KEY_REGEX.fullmatch(token):
        return HEX_PRIVATE_KEY
    if WIF_KEY_REGEX.fullmatch(token):
        return BITCOIN_WIF_KEY
    if BASE58_KEY_REGEX.fullmatch(token):
        return _base58_label(token)
    if RIPPLE_KEY_REGEX.fullmatch(token):
        return RIPPLE_PRIVATE_KEY
    return None
