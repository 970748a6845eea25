"""Exception types for keysweep."""


class KeysweepError(Exception):
    """Base exception for keysweep errors."""

    pass


class ConfigurationError(KeysweepError):
    """Error in configuration values that cannot be degraded around."""

    pass


class DictionaryError(KeysweepError):
    """Error loading the mnemonic dictionary (missing or unreadable wordlist)."""

    pass


class ExtractionError(KeysweepError):
    """Error extracting text from a file.

    Extractors raise this internally and convert it into a failed
    ExtractionResult before returning, so it never crosses the dispatcher
    boundary.
    """

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
