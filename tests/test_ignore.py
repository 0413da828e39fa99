"""Tests for ignore-file loading and gitignore-style matching."""

import pytest
from unittest.mock import patch

from tacos.utils.ignore import IgnoreMatcher, BUILTIN_IGNORES


class TestIgnoreMatcherLoad:
    def test_builtins_without_ignore_files(self, temp_workspace):
        matcher = IgnoreMatcher.load(str(temp_workspace))

        assert matcher.patterns == BUILTIN_IGNORES
        assert matcher.is_ignored(".git", is_directory=True) is True
        assert matcher.is_ignored("node_modules", is_directory=True) is True
        assert matcher.is_ignored("pkg/node_modules", is_directory=True) is True
        assert matcher.is_ignored("src", is_directory=True) is False

    def test_reads_both_files_in_order(self, temp_workspace):
        (temp_workspace / ".gitignore").write_text("*.log\n\n\ndist/\n")
        (temp_workspace / ".tacosignore").write_text("fixtures/\n")

        matcher = IgnoreMatcher.load(str(temp_workspace))

        assert matcher.patterns == ["*.log", "dist/", "fixtures/", ".git", "node_modules"]

    def test_tool_file_can_negate_gitignore(self, temp_workspace):
        (temp_workspace / ".gitignore").write_text("*.log\n")
        (temp_workspace / ".tacosignore").write_text("!keep.log\n")

        matcher = IgnoreMatcher.load(str(temp_workspace))

        assert matcher.is_ignored("debug.log") is True
        assert matcher.is_ignored("keep.log") is False

    def test_builtins_cannot_be_negated(self, temp_workspace):
        (temp_workspace / ".gitignore").write_text("!node_modules\n!node_modules/\n")

        matcher = IgnoreMatcher.load(str(temp_workspace))

        assert matcher.is_ignored("node_modules", is_directory=True) is True

    def test_unreadable_ignore_file_is_skipped(self, temp_workspace):
        (temp_workspace / ".gitignore").write_text("*.log\n")

        with patch('pathlib.Path.read_text', side_effect=PermissionError("denied")):
            matcher = IgnoreMatcher.load(str(temp_workspace))

        assert matcher.patterns == BUILTIN_IGNORES

    def test_custom_file_names_and_builtins(self, temp_workspace):
        (temp_workspace / ".customignore").write_text("secret.txt\n")

        matcher = IgnoreMatcher.load(str(temp_workspace), [".customignore"], ["vendor"])

        assert matcher.patterns == ["secret.txt", "vendor"]
        assert matcher.is_ignored("node_modules", is_directory=True) is False


class TestIgnoreMatching:
    @pytest.fixture
    def matcher(self):
        return IgnoreMatcher([
            "/root-only.txt",
            "build/",
            "*.tmp",
            "!important.tmp",
            "docs/**/draft.md",
            "# a comment",
        ])

    def test_leading_slash_anchors_to_root(self, matcher):
        assert matcher.is_ignored("root-only.txt") is True
        assert matcher.is_ignored("sub/root-only.txt") is False

    def test_trailing_slash_matches_directories_only(self, matcher):
        assert matcher.is_ignored("build", is_directory=True) is True
        assert matcher.is_ignored("nested/build", is_directory=True) is True
        assert matcher.is_ignored("build", is_directory=False) is False

    def test_negation_overrides_earlier_match(self, matcher):
        assert matcher.is_ignored("scratch.tmp") is True
        assert matcher.is_ignored("important.tmp") is False

    def test_double_star_spans_segments(self, matcher):
        assert matcher.is_ignored("docs/draft.md") is True
        assert matcher.is_ignored("docs/a/b/draft.md") is True
        assert matcher.is_ignored("other/draft.md") is False

    def test_comments_are_not_patterns(self, matcher):
        assert matcher.is_ignored("# a comment") is False

    def test_windows_separators_normalized(self, matcher):
        assert matcher.is_ignored("docs\\a\\draft.md") is True

    def test_root_itself_never_ignored(self, matcher):
        assert matcher.is_ignored("") is False
