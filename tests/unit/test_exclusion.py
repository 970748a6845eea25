"""
Tests for the exclusion engine.
"""

import os

import pytest

from keysweep.core.config import KeysweepConfig
from keysweep.core.exclusion import (
    ExclusionEngine,
    build_exclusion_engine,
    resolve_env_pattern,
)


class TestAdd:
    """Pattern insertion and dedup."""

    def test_add_returns_true_for_new_pattern(self):
        engine = ExclusionEngine()
        assert engine.add("*/cache/*") is True
        assert engine.patterns == ["*/cache/*"]

    def test_blank_patterns_are_ignored(self):
        engine = ExclusionEngine()
        assert engine.add("") is False
        assert engine.add("   ") is False
        assert len(engine) == 0

    def test_patterns_are_trimmed_before_dedup(self):
        engine = ExclusionEngine()
        engine.add("*/tmp/*")
        assert engine.add("  */tmp/*  ") is False
        assert len(engine) == 1

    def test_dedup_is_case_sensitive(self):
        engine = ExclusionEngine(["*/tmp/*"])
        assert engine.add("*/TMP/*") is True
        assert len(engine) == 2

    def test_insertion_order_is_kept(self):
        engine = ExclusionEngine(["*/b/*", "*/a/*", "*/c/*"])
        assert engine.patterns == ["*/b/*", "*/a/*", "*/c/*"]


class TestIsExcluded:
    """Whole-string glob matching."""

    def test_star_crosses_separators(self):
        engine = ExclusionEngine(["*/node_modules/*"])
        assert engine.is_excluded("/home/u/project/node_modules/pkg/lib/index.js") is True

    def test_matching_is_case_insensitive(self):
        engine = ExclusionEngine(["*/Cache/*"])
        assert engine.is_excluded("/home/u/.mozilla/CACHE/profile/data.txt") is True

    def test_windows_style_pattern(self):
        engine = ExclusionEngine(["*\\windows\\*"])
        assert engine.is_excluded("C:\\Windows\\System32\\drivers\\etc\\hosts") is True
        assert engine.is_excluded("C:\\Users\\u\\Documents\\notes.txt") is False

    def test_non_matching_path(self):
        engine = ExclusionEngine(["*/proc/*"])
        assert engine.is_excluded("/home/u/notes.txt") is False

    def test_extension_pattern(self):
        engine = ExclusionEngine(["*.log"])
        assert engine.is_excluded("/var/tmp/app.LOG") is True
        assert engine.is_excluded("/var/tmp/app.log.txt") is False

    def test_question_mark_and_character_class(self):
        engine = ExclusionEngine(["*/backup-?/*", "*/[ab]ccount.txt"])
        assert engine.is_excluded("/data/backup-1/x.txt") is True
        assert engine.is_excluded("/data/backup-12/x.txt") is False
        assert engine.is_excluded("/data/account.txt") is True

    def test_empty_engine_excludes_nothing(self):
        assert ExclusionEngine().is_excluded("/anything") is False

    def test_path_objects_are_accepted(self, tmp_path):
        engine = ExclusionEngine(["*/skipme/*"])
        assert engine.is_excluded(tmp_path / "skipme" / "a.txt") is True


class TestAlwaysExclude:
    """Specific files excluded regardless of patterns."""

    def test_always_excluded_file(self, tmp_path):
        report = tmp_path / "keysweep-findings.log"
        engine = ExclusionEngine()
        engine.always_exclude(report)

        assert engine.is_excluded(report) is True
        assert engine.is_excluded(str(report)) is True
        assert engine.is_excluded(tmp_path / "other.log") is False

    def test_always_excluded_ignores_relative_spelling(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        engine = ExclusionEngine()
        engine.always_exclude(tmp_path / "report.log")

        assert engine.is_excluded("report.log") is True


class TestIsExcludedDir:
    """Directory pruning."""

    def test_directory_covered_by_trailing_star(self):
        engine = ExclusionEngine(["*/node_modules/*"])
        assert engine.is_excluded_dir("/home/u/app/node_modules") is True
        assert engine.is_excluded_dir("/home/u/app/node_modules/") is True

    def test_parent_directory_is_not_pruned(self):
        engine = ExclusionEngine(["*/node_modules/*"])
        assert engine.is_excluded_dir("/home/u/app") is False

    def test_pattern_without_trailing_star_never_prunes(self):
        engine = ExclusionEngine(["*/build"])
        assert engine.is_excluded_dir("/home/u/app/build") is False

    def test_extension_pattern_never_prunes(self):
        engine = ExclusionEngine(["*.log"])
        assert engine.is_excluded_dir("/var/dir.log") is False


class TestEnvPatterns:
    """Environment-relative exclusions."""

    def test_resolve_env_pattern(self):
        pattern = resolve_env_pattern("HOME", ".cache/*", {"HOME": "/home/u"})
        assert pattern == os.path.join("/home/u", ".cache/*")

    @pytest.mark.parametrize("environ", [{}, {"HOME": ""}, {"HOME": "   "}])
    def test_missing_or_empty_variable(self, environ):
        assert resolve_env_pattern("HOME", ".cache/*", environ) is None

    def test_build_engine_combines_sources(self, tmp_path):
        engine = build_exclusion_engine(
            ["*/proc/*"],
            [("HOME", ".cache/*"), ("MISSING_VAR", "x/*")],
            environ={"HOME": "/home/u"},
            always_excluded=[tmp_path / "report.log"],
        )

        assert engine.patterns == ["*/proc/*", os.path.join("/home/u", ".cache/*")]
        assert engine.is_excluded("/home/u/.cache/thumbs/a.png") is True
        assert engine.is_excluded(tmp_path / "report.log") is True

    def test_malformed_env_entry_is_skipped(self, caplog):
        engine = build_exclusion_engine([], [("ONLY_ONE",)], environ={"ONLY_ONE": "/x"})
        assert len(engine) == 0
        assert "malformed" in caplog.text


class TestDefaultPatterns:
    """The packaged default patterns skip system locations, not user folders."""

    @pytest.fixture
    def engine(self):
        return build_exclusion_engine(KeysweepConfig().exclusion.patterns)

    @pytest.mark.parametrize(
        "path",
        [
            "/proc/1/environ",
            "/sys/class/net/eth0/address",
            "/dev/shm/x.txt",
            "/usr/share/doc/readme.txt",
            "C:\\Windows\\System32\\drivers\\etc\\hosts",
            "D:\\$Recycle.Bin\\S-1-5-21\\old.txt",
            "/home/alice/project/node_modules/pkg/readme.md",
        ],
    )
    def test_system_locations_are_excluded(self, engine, path):
        assert engine.is_excluded(path) is True

    @pytest.mark.parametrize(
        "path",
        [
            "/home/alice/dev/wallet/seed.txt",
            "/home/alice/proc/notes.txt",
            "/home/alice/sys/backup.json",
            "/home/alice/usr/keys.txt",
            "C:\\Users\\alice\\Documents\\windows\\seed.txt",
            "C:\\Users\\alice\\program files\\wallet.json",
        ],
    )
    def test_user_folders_with_system_names_are_kept(self, engine, path):
        assert engine.is_excluded(path) is False

    def test_system_mount_is_pruned_but_user_folder_is_not(self, engine):
        assert engine.is_excluded_dir("/proc") is True
        assert engine.is_excluded_dir("/home/alice/dev") is False
