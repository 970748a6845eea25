"""
Core Layer - Dictionary, detectors, tokenization, exclusion, extraction and traversal.
"""

from keysweep.core.config import (
    DictionaryConfig,
    ExclusionConfig,
    ExtractionConfig,
    KeysweepConfig,
    LoggingConfig,
    OutputConfig,
    ScanConfig,
    load_config,
)
from keysweep.core.content_scanner import ContentScanner, ScanReport
from keysweep.core.dictionary import MnemonicDictionary, load_dictionary
from keysweep.core.exclusion import (
    ExclusionEngine,
    build_exclusion_engine,
    resolve_env_pattern,
)
from keysweep.core.file_scanner import (
    FileCandidate,
    FileWalker,
    ProcessedPathSet,
    ScanSummary,
    TraversalEngine,
)
from keysweep.core.tokenizer import (
    RegexTokenizer,
    TokenizerInterface,
    get_default_tokenizer,
)

__all__ = [
    # Config
    "KeysweepConfig",
    "ScanConfig",
    "ExclusionConfig",
    "ExtractionConfig",
    "DictionaryConfig",
    "OutputConfig",
    "LoggingConfig",
    "load_config",
    # Dictionary
    "MnemonicDictionary",
    "load_dictionary",
    # Tokenizer
    "TokenizerInterface",
    "RegexTokenizer",
    "get_default_tokenizer",
    # Scanning
    "ContentScanner",
    "ScanReport",
    # Exclusion
    "ExclusionEngine",
    "build_exclusion_engine",
    "resolve_env_pattern",
    # Traversal
    "TraversalEngine",
    "FileWalker",
    "FileCandidate",
    "ProcessedPathSet",
    "ScanSummary",
]
