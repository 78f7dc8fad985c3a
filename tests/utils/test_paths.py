"""
Tests for lexical path resolution.
"""

import pytest

from src.utils.paths import (
    POSIX,
    WINDOWS,
    base_name,
    host_style,
    is_root,
    is_within,
    join,
    normalize,
    parent,
    resolve,
    style_from_name,
)


class TestResolveWindows:
    """Resolution of Windows-style paths."""

    def test_drive_designator_becomes_root(self):
        assert resolve("C:", None, WINDOWS) == "C:\\"
        assert resolve("d:", "C:\\Users", WINDOWS) == "d:\\"

    def test_absolute_path_ignores_current_directory(self):
        assert resolve("C:\\Windows", "D:\\data", WINDOWS) == "C:\\Windows"

    @pytest.mark.parametrize("current", [None, "D:\\data", "C:\\a\\b\\c"])
    def test_absolute_path_resolves_to_its_normal_form(self, current):
        raw = "C:\\a\\.\\b\\..\\c\\"

        assert resolve(raw, current, WINDOWS) == normalize(raw, WINDOWS) == "C:\\a\\c"

    def test_parent_segment_is_collapsed(self):
        assert resolve("C:\\Users\\..", None, WINDOWS) == "C:\\"

    def test_relative_path_joins_current_directory(self):
        assert resolve("docs", "C:\\Users", WINDOWS) == "C:\\Users\\docs"
        assert resolve("docs\\..\\music", "C:\\Users", WINDOWS) == "C:\\Users\\music"

    def test_leading_separator_uses_current_drive(self):
        assert resolve("\\Windows", "D:\\data", WINDOWS) == "D:\\Windows"

    def test_relative_path_without_current_directory(self):
        assert resolve("docs", None, WINDOWS) is None
        assert resolve("\\Windows", None, WINDOWS) is None

    def test_forward_slashes_are_unified(self):
        assert resolve("C:/Users/docs", None, WINDOWS) == "C:\\Users\\docs"

    def test_parent_of_root_stays_at_root(self):
        assert resolve("..", "C:\\", WINDOWS) == "C:\\"
        assert resolve("..\\..\\..", "C:\\Users", WINDOWS) == "C:\\"

    def test_dot_and_repeated_separators_are_dropped(self):
        assert resolve("C:\\a\\.\\\\b", None, WINDOWS) == "C:\\a\\b"

    def test_empty_path_is_current_directory(self):
        assert resolve("", "C:\\Users", WINDOWS) == "C:\\Users"

    def test_result_never_contains_parent_segments(self):
        result = resolve("a\\..\\..\\b\\..\\c", "C:\\x\\y", WINDOWS)

        assert result == "C:\\x\\c"
        assert ".." not in result.split("\\")

    def test_resolution_is_idempotent(self):
        first = resolve("docs\\..\\music\\.", "C:\\Users", WINDOWS)

        assert resolve(first, "D:\\other", WINDOWS) == first


class TestResolvePosix:
    """Resolution of POSIX-style paths."""

    def test_leading_slash_is_absolute(self):
        assert resolve("/etc", "/home/user", POSIX) == "/etc"
        assert resolve("/etc", None, POSIX) == "/etc"

    def test_parent_segment_is_collapsed(self):
        assert resolve("/home/user/..", None, POSIX) == "/home"

    def test_relative_path_joins_current_directory(self):
        assert resolve("docs", "/home/user", POSIX) == "/home/user/docs"

    def test_relative_path_without_current_directory(self):
        assert resolve("docs", None, POSIX) is None

    def test_parent_of_root_stays_at_root(self):
        assert resolve("..", "/", POSIX) == "/"
        assert resolve("/..", None, POSIX) == "/"

    def test_drive_designator_is_a_plain_name(self):
        assert resolve("C:", "/home", POSIX) == "/home/C:"

    def test_backslash_is_not_a_separator(self):
        assert resolve("a\\b", "/x", POSIX) == "/x/a\\b"


class TestPathHelpers:
    """Tests for the helpers working on canonical paths."""

    def test_normalize_unanchored_parents_collapse_to_empty(self):
        assert normalize("..\\..", WINDOWS) == ""
        assert normalize("../..", POSIX) == ""

    def test_normalize_keeps_drive(self):
        assert normalize("C:\\a\\b\\..\\..\\c", WINDOWS) == "C:\\c"

    def test_is_root(self):
        assert is_root("C:\\", WINDOWS)
        assert not is_root("C:\\Users", WINDOWS)
        assert is_root("/", POSIX)
        assert not is_root("/home", POSIX)

    def test_parent(self):
        assert parent("C:\\Users\\docs", WINDOWS) == "C:\\Users"
        assert parent("C:\\", WINDOWS) == "C:\\"
        assert parent("/home", POSIX) == "/"

    def test_base_name(self):
        assert base_name("C:\\Users\\docs", WINDOWS) == "docs"
        assert base_name("/a/b.txt", POSIX) == "b.txt"

    def test_join(self):
        assert join("C:\\Users\\", "docs", WINDOWS) == "C:\\Users\\docs"
        assert join("/", "etc", POSIX) == "/etc"

    def test_is_within_windows_ignores_case(self):
        assert is_within("C:\\Users\\Docs", "c:\\users", WINDOWS)
        assert is_within("C:\\Users", "C:\\", WINDOWS)
        assert not is_within("C:\\UsersX", "C:\\Users", WINDOWS)

    def test_is_within_posix_is_case_sensitive(self):
        assert is_within("/home/a", "/home", POSIX)
        assert is_within("/home/a", "/", POSIX)
        assert not is_within("/Home", "/home", POSIX)
        assert not is_within("/homework", "/home", POSIX)


class TestStyleFromName:
    """Tests for picking the path style from configuration."""

    def test_named_styles(self):
        assert style_from_name("WINDOWS") is WINDOWS
        assert style_from_name(" posix ") is POSIX

    def test_auto_uses_host(self):
        assert style_from_name("auto") is host_style()
        assert style_from_name(None) is host_style()

    def test_unknown_style(self):
        with pytest.raises(ValueError, match="Unknown path style"):
            style_from_name("amiga")
