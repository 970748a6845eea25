"""
Detectors module for keysweep.

Provides the mnemonic-window matcher and the private-key classifier, plus
the Finding record both of them produce.
"""

from .keys import BASE58_ALPHABET, classify_key
from .mnemonic import is_mnemonic_window, iter_mnemonic_windows
from .models import (
    BASE58_PRIVATE_KEY,
    BITCOIN_WIF_KEY,
    HEX_PRIVATE_KEY,
    KEY_LABELS,
    MNEMONIC_WINDOW_SIZES,
    RIPPLE_PRIVATE_KEY,
    SOLANA_32_BYTE_KEY,
    SOLANA_64_BYTE_SEED,
    Finding,
    mnemonic_kind,
)

__all__ = [
    # Matchers
    "classify_key",
    "is_mnemonic_window",
    "iter_mnemonic_windows",
    # Models
    "Finding",
    "mnemonic_kind",
    # Constants
    "BASE58_ALPHABET",
    "MNEMONIC_WINDOW_SIZES",
    "KEY_LABELS",
    "HEX_PRIVATE_KEY",
    "BITCOIN_WIF_KEY",
    "SOLANA_32_BYTE_KEY",
    "SOLANA_64_BYTE_SEED",
    "BASE58_PRIVATE_KEY",
    "RIPPLE_PRIVATE_KEY",
]
