"""
Data models and constants for the detectors module.
"""

from dataclasses import dataclass, field
from datetime import datetime

# Window lengths a mnemonic phrase can have
MNEMONIC_WINDOW_SIZES: tuple[int, ...] = (12, 24)

# Private-key labels, in classification order
HEX_PRIVATE_KEY = "64-character hex private key"
BITCOIN_WIF_KEY = "Bitcoin WIF private key"
SOLANA_32_BYTE_KEY = "Solana-like (32-byte)"
SOLANA_64_BYTE_SEED = "Solana-like (64-byte seed)"
BASE58_PRIVATE_KEY = "Base58-encoded private key"
RIPPLE_PRIVATE_KEY = "Ripple private key"

KEY_LABELS: tuple[str, ...] = (
    HEX_PRIVATE_KEY,
    BITCOIN_WIF_KEY,
    SOLANA_32_BYTE_KEY,
    SOLANA_64_BYTE_SEED,
    BASE58_PRIVATE_KEY,
    RIPPLE_PRIVATE_KEY,
)


def mnemonic_kind(word_count: int) -> str:
    """Finding kind for a mnemonic window of the given length."""
    return f"{word_count}-word mnemonic"


@dataclass(frozen=True)
class Finding:
    """
    A single detection of a mnemonic phrase or private key.

    Attributes:
        source_path: Absolute path of the file the text came from
        kind: "12-word mnemonic", "24-word mnemonic" or a key label
        matched_text: Exact matched text (space-joined words for mnemonics)
        timestamp: When the finding was produced
    """

    source_path: str
    kind: str
    matched_text: str
    timestamp: datetime = field(default_factory=datetime.now)

    def to_line(self) -> str:
        """Render the finding as a single report line."""
        stamp = self.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        return f"[{stamp}] {self.source_path} | {self.kind} | {self.matched_text}"
