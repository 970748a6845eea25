"""
Exclusion engine for keysweep.

Patterns are glob strings matched against the whole lowercased path, so
``*`` also matches across path separators (``*\\windows\\*`` excludes every
file below any ``windows`` directory). Matching stops at the first hit.
"""

import fnmatch
import logging
import os
import re
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExclusionPattern:
    """
    A stored exclusion glob with its compiled matcher.

    Attributes:
        raw: Pattern as added (trimmed, original case)
        regex: Compiled whole-string matcher for the lowercased pattern
    """

    raw: str
    regex: re.Pattern

    @classmethod
    def compile(cls, raw: str) -> "ExclusionPattern":
        return cls(raw=raw, regex=re.compile(fnmatch.translate(raw.lower())))

    def matches(self, lowered_path: str) -> bool:
        return self.regex.match(lowered_path) is not None


def _normalize_path(path: Path | str) -> str:
    """Absolute, normalized, lowercased form of a path used for identity checks."""
    return os.path.normcase(os.path.abspath(os.fspath(path))).lower()


class ExclusionEngine:
    """
    Ordered, deduplicated set of exclusion globs plus always-excluded paths.

    Dedup at insertion is case-sensitive on the trimmed pattern; matching is
    case-insensitive. The engine is built once before traversal and only
    read afterwards.

    Example:
        >>> engine = ExclusionEngine()
        >>> engine.add("*/Cache/*")
        True
        >>> engine.is_excluded("/home/alice/.mozilla/cache/profile/data.txt")
        True
    """

    def __init__(self, patterns: Iterable[str] | None = None):
        self._patterns: list[ExclusionPattern] = []
        self._raw: set[str] = set()
        self._always_excluded: set[str] = set()
        for pattern in patterns or []:
            self.add(pattern)

    def add(self, pattern: str) -> bool:
        """
        Add a glob pattern.

        Blank input and exact duplicates are ignored.

        Returns:
            True if the pattern was stored
        """
        if pattern is None:
            return False
        trimmed = pattern.strip()
        if not trimmed:
            return False
        if trimmed in self._raw:
            logger.debug(f"Duplicate exclusion pattern ignored: {trimmed}")
            return False

        self._raw.add(trimmed)
        self._patterns.append(ExclusionPattern.compile(trimmed))
        return True

    def always_exclude(self, path: Path | str) -> None:
        """Exclude a specific file regardless of patterns (e.g. our own report)."""
        self._always_excluded.add(_normalize_path(path))

    @property
    def patterns(self) -> list[str]:
        """Stored patterns in insertion order."""
        return [p.raw for p in self._patterns]

    def __len__(self) -> int:
        return len(self._patterns)

    def is_excluded(self, path: Path | str) -> bool:
        """
        Check whether a path is excluded.

        Args:
            path: File path to test (matched as a single string)

        Returns:
            True if the path is always-excluded or matches any pattern
        """
        path_str = os.fspath(path)
        if self._always_excluded and _normalize_path(path_str) in self._always_excluded:
            return True

        lowered = path_str.lower()
        for pattern in self._patterns:
            if pattern.matches(lowered):
                return True
        return False

    def is_excluded_dir(self, path: Path | str) -> bool:
        """
        Check whether everything below a directory is excluded.

        Only patterns ending in ``*`` can exclude a whole subtree: if such a
        pattern matches ``dir + separator`` it matches every descendant path
        too, so the directory can be pruned without changing results.
        """
        lowered = os.fspath(path).lower().rstrip("\\/") + os.sep
        for pattern in self._patterns:
            if pattern.raw.endswith("*") and pattern.matches(lowered):
                return True
        return False


def resolve_env_pattern(
    variable: str, template: str, environ: Mapping[str, str] | None = None
) -> str | None:
    """
    Resolve an environment-relative exclusion pattern.

    Args:
        variable: Environment variable holding a base directory (e.g. LOCALAPPDATA)
        template: Sub-path template appended to it (e.g. "Temp\\*")
        environ: Environment mapping (defaults to os.environ)

    Returns:
        The joined pattern, or None if the variable is unset or empty
    """
    env = os.environ if environ is None else environ
    base = (env.get(variable) or "").strip()
    if not base:
        return None
    return os.path.join(base, template)


def build_exclusion_engine(
    base_patterns: Iterable[str],
    env_patterns: Iterable[Sequence[str]] = (),
    environ: Mapping[str, str] | None = None,
    always_excluded: Iterable[Path | str] = (),
) -> ExclusionEngine:
    """
    Build the exclusion engine from a fixed base list plus env-derived paths.

    Env entries whose variable is missing are skipped silently; malformed
    entries are logged and skipped.
    """
    engine = ExclusionEngine(base_patterns)

    for entry in env_patterns:
        if len(entry) != 2:
            logger.warning(f"Ignoring malformed env exclusion entry: {entry!r}")
            continue
        variable, template = entry
        pattern = resolve_env_pattern(str(variable), str(template), environ)
        if pattern is None:
            logger.debug(f"Environment variable {variable} not set, skipping exclusion")
            continue
        engine.add(pattern)

    for path in always_excluded:
        engine.always_exclude(path)

    logger.debug(f"Exclusion engine ready with {len(engine)} patterns")
    return engine
