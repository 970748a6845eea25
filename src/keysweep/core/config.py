"""
Configuration module for keysweep.

Supports loading from YAML/JSON files with environment variable overrides.
Default values are loaded from defaults.yaml for maintainability.
"""

import json
import logging
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

# Path to the default configuration file
_DEFAULTS_CONFIG_PATH = Path(__file__).parent / "defaults.yaml"

# Cache for default values
_defaults_cache: dict[str, Any] | None = None


def _load_defaults() -> dict[str, Any]:
    """Load default configuration values from defaults.yaml."""
    global _defaults_cache

    if _defaults_cache is not None:
        return _defaults_cache

    if not _DEFAULTS_CONFIG_PATH.exists():
        logger.warning(f"Defaults config not found: {_DEFAULTS_CONFIG_PATH}")
        _defaults_cache = {}
        return _defaults_cache

    try:
        content = _DEFAULTS_CONFIG_PATH.read_text(encoding="utf-8")
        _defaults_cache = yaml.safe_load(content) or {}
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse defaults config: {e}")
        _defaults_cache = {}

    return _defaults_cache


def _get_default(section: str, key: str, fallback: Any = None) -> Any:
    """Get a copy of a default value from the defaults config."""
    defaults = _load_defaults()
    section_defaults = defaults.get(section, {})
    value = section_defaults.get(key, fallback)
    # Lists and dicts are copied so instances never share mutable defaults
    if isinstance(value, list):
        return [list(v) if isinstance(v, list) else v for v in value]
    if isinstance(value, dict):
        return {k: list(v) if isinstance(v, list) else v for k, v in value.items()}
    return value


@dataclass
class ScanConfig:
    """Configuration for traversal and extension filtering."""

    roots: list[str] = field(default_factory=lambda: _get_default("scan", "roots", []))
    priority_folders: list[str] = field(
        default_factory=lambda: _get_default(
            "scan", "priority_folders", ["Desktop", "Documents", "Downloads", "Pictures"]
        )
    )
    text_extensions: list[str] = field(
        default_factory=lambda: _get_default("scan", "text_extensions", [".txt"])
    )
    document_extensions: list[str] = field(
        default_factory=lambda: _get_default("scan", "document_extensions", [".pdf"])
    )
    image_extensions: list[str] = field(
        default_factory=lambda: _get_default("scan", "image_extensions", [".png", ".jpg"])
    )
    unsupported_extensions: list[str] = field(
        default_factory=lambda: _get_default("scan", "unsupported_extensions", [])
    )
    max_text_bytes: int = field(
        default_factory=lambda: _get_default("scan", "max_text_bytes", 1024 * 1024)
    )
    max_image_bytes: int = field(
        default_factory=lambda: _get_default("scan", "max_image_bytes", 50 * 1024 * 1024)
    )
    follow_symlinks: bool = field(
        default_factory=lambda: _get_default("scan", "follow_symlinks", False)
    )


@dataclass
class ExclusionConfig:
    """Configuration for the exclusion engine."""

    patterns: list[str] = field(default_factory=lambda: _get_default("exclusion", "patterns", []))
    # Each entry is [ENV_VARIABLE, relative sub-path template]
    env_patterns: list[list[str]] = field(
        default_factory=lambda: _get_default("exclusion", "env_patterns", [])
    )


@dataclass
class ExtractionConfig:
    """Configuration for document and image text extraction."""

    document_commands: dict[str, list[str]] = field(
        default_factory=lambda: _get_default("extraction", "document_commands", {})
    )
    document_timeout: float = field(
        default_factory=lambda: _get_default("extraction", "document_timeout", 60.0)
    )
    ocr_enabled: bool = field(
        default_factory=lambda: _get_default("extraction", "ocr_enabled", True)
    )
    tesseract_cmd: str = field(
        default_factory=lambda: _get_default("extraction", "tesseract_cmd", "")
    )
    ocr_language: str = field(
        default_factory=lambda: _get_default("extraction", "ocr_language", "eng")
    )
    ocr_timeout: float = field(
        default_factory=lambda: _get_default("extraction", "ocr_timeout", 120.0)
    )


@dataclass
class DictionaryConfig:
    """Configuration for the mnemonic dictionary source."""

    wordlist_path: str = field(
        default_factory=lambda: _get_default("dictionary", "wordlist_path", "")
    )
    language: str = field(default_factory=lambda: _get_default("dictionary", "language", "english"))


@dataclass
class OutputConfig:
    """Configuration for the findings report."""

    findings_path: str = field(
        default_factory=lambda: _get_default("output", "findings_path", "keysweep-findings.log")
    )


@dataclass
class LoggingConfig:
    """Configuration for logging."""

    level: str = field(default_factory=lambda: _get_default("logging", "level", "INFO"))
    format: str = field(
        default_factory=lambda: _get_default(
            "logging", "format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    )
    file: str = field(default_factory=lambda: _get_default("logging", "file", ""))


@dataclass
class KeysweepConfig:
    """Main configuration class for keysweep."""

    scan: ScanConfig = field(default_factory=ScanConfig)
    exclusion: ExclusionConfig = field(default_factory=ExclusionConfig)
    extraction: ExtractionConfig = field(default_factory=ExtractionConfig)
    dictionary: DictionaryConfig = field(default_factory=DictionaryConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_file(cls, path: Path | str) -> "KeysweepConfig":
        """
        Load configuration from a YAML or JSON file.

        Args:
            path: Path to the configuration file (.yaml, .yml, or .json)

        Returns:
            KeysweepConfig instance with loaded values

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ValueError: If the file format is unsupported or a section is malformed
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Configuration file not found: {path}")

        content = path.read_text(encoding="utf-8")

        if path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content) or {}
        elif path.suffix == ".json":
            data = json.loads(content) if content.strip() else {}
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        if not isinstance(data, dict):
            raise ValueError(f"Invalid config format: expected mapping, got {type(data).__name__}")

        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: dict) -> "KeysweepConfig":
        """Create KeysweepConfig from a dictionary."""
        config = cls()
        sections = {
            "scan": ScanConfig,
            "exclusion": ExclusionConfig,
            "extraction": ExtractionConfig,
            "dictionary": DictionaryConfig,
            "output": OutputConfig,
            "logging": LoggingConfig,
        }

        for name, section_cls in sections.items():
            if name not in data:
                continue
            try:
                setattr(config, name, section_cls(**(data[name] or {})))
            except TypeError as e:
                raise ValueError(f"Invalid '{name}' section in config: {e}") from e

        return config

    def apply_env_overrides(self) -> "KeysweepConfig":
        """
        Apply environment variable overrides to the configuration.

        Environment variables follow the pattern: KEYSWEEP_<SECTION>_<KEY>
        Examples:
            - KEYSWEEP_SCAN_ROOTS (os.pathsep separated)
            - KEYSWEEP_SCAN_MAX_TEXT_BYTES
            - KEYSWEEP_EXTRACTION_OCR_ENABLED
            - KEYSWEEP_OUTPUT_FINDINGS_PATH
            - KEYSWEEP_LOGGING_LEVEL

        Returns:
            Self with environment overrides applied
        """
        env_mappings = {
            # Scan config
            "KEYSWEEP_SCAN_ROOTS": ("scan", "roots", _parse_path_list),
            "KEYSWEEP_SCAN_MAX_TEXT_BYTES": ("scan", "max_text_bytes", int),
            "KEYSWEEP_SCAN_MAX_IMAGE_BYTES": ("scan", "max_image_bytes", int),
            "KEYSWEEP_SCAN_FOLLOW_SYMLINKS": ("scan", "follow_symlinks", _parse_bool),
            # Extraction config
            "KEYSWEEP_EXTRACTION_DOCUMENT_TIMEOUT": ("extraction", "document_timeout", float),
            "KEYSWEEP_EXTRACTION_OCR_ENABLED": ("extraction", "ocr_enabled", _parse_bool),
            "KEYSWEEP_EXTRACTION_TESSERACT_CMD": ("extraction", "tesseract_cmd", str),
            "KEYSWEEP_EXTRACTION_OCR_LANGUAGE": ("extraction", "ocr_language", str),
            "KEYSWEEP_EXTRACTION_OCR_TIMEOUT": ("extraction", "ocr_timeout", float),
            # Dictionary config
            "KEYSWEEP_DICTIONARY_WORDLIST_PATH": ("dictionary", "wordlist_path", str),
            "KEYSWEEP_DICTIONARY_LANGUAGE": ("dictionary", "language", str),
            # Output config
            "KEYSWEEP_OUTPUT_FINDINGS_PATH": ("output", "findings_path", str),
            # Logging config
            "KEYSWEEP_LOGGING_LEVEL": ("logging", "level", str),
            "KEYSWEEP_LOGGING_FILE": ("logging", "file", str),
        }

        for env_var, (section, key, converter) in env_mappings.items():
            value = os.environ.get(env_var)
            if value is not None:
                section_obj = getattr(self, section)
                setattr(section_obj, key, converter(value))

        return self

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary."""
        return asdict(self)

    def to_yaml(self) -> str:
        """Serialize configuration to YAML string."""
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)

    def to_json(self) -> str:
        """Serialize configuration to JSON string."""
        return json.dumps(self.to_dict(), indent=2)

    def save(self, path: Path | str) -> None:
        """
        Save configuration to a file.

        Args:
            path: Path to save the configuration (.yaml, .yml, or .json)

        Raises:
            ValueError: If the file format is unsupported
        """
        path = Path(path)

        if path.suffix in (".yaml", ".yml"):
            content = self.to_yaml()
        elif path.suffix == ".json":
            content = self.to_json()
        else:
            raise ValueError(f"Unsupported config file format: {path.suffix}")

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


def _parse_bool(value: str) -> bool:
    """Parse a string to boolean."""
    return value.lower() in ("true", "1", "yes", "on")


def _parse_path_list(value: str) -> list[str]:
    """Parse an os.pathsep separated list of paths, dropping empty entries."""
    return [part for part in value.split(os.pathsep) if part.strip()]


def load_config(config_path: Path | str | None = None, apply_env: bool = True) -> KeysweepConfig:
    """
    Load configuration with optional environment variable overrides.

    Args:
        config_path: Optional path to config file. If None, uses defaults.
        apply_env: Whether to apply environment variable overrides.

    Returns:
        KeysweepConfig instance
    """
    if config_path:
        config = KeysweepConfig.from_file(config_path)
    else:
        config = KeysweepConfig()

    if apply_env:
        config.apply_env_overrides()

    return config
