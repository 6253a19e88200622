"""Tests for root parsing and absoluteness."""

import pytest

from pathwalk import PathStyle, get_root_length, is_absolute, is_relative
from pathwalk.core.root import is_separator


WINDOWS_ROOTS = [
    ("", 0),
    ("test.txt", 0),
    ("C", 0),
    ("C:", 2),
    ("C:test.txt", 2),
    ("C:\\test.txt", 3),
    ("C:/test.txt", 3),
    ("\\test.txt", 1),
    ("/test.txt", 1),
    ("\\\\server\\folder\\data", 16),
    ("\\\\server\\folder", 15),
    ("\\\\server", 8),
    ("//server/folder/data", 16),
    ("\\\\?\\mydevice\\test", 4),
    ("\\\\.\\mydevice\\test", 4),
    ("\\\\.\\UNC\\LOCALHOST\\c$\\temp\\test-file.txt", 4),
]

UNIX_ROOTS = [
    ("", 0),
    ("test.txt", 0),
    ("/test.txt", 1),
    ("//double", 1),
    ("C:\\test.txt", 0),
    ("\\folder\\", 0),
]


class TestGetRootLength:
    @pytest.mark.parametrize("path,expected", WINDOWS_ROOTS)
    def test_windows_roots(self, path, expected):
        assert get_root_length(path, PathStyle.WINDOWS) == expected

    @pytest.mark.parametrize("path,expected", UNIX_ROOTS)
    def test_unix_roots(self, path, expected):
        assert get_root_length(path, PathStyle.UNIX) == expected

    def test_bytes_path(self):
        assert get_root_length(b"C:\\x", PathStyle.WINDOWS) == 3
        assert get_root_length(bytearray(b"/x"), PathStyle.UNIX) == 1

    def test_style_given_as_string(self):
        assert get_root_length("C:\\x", "windows") == 3

    def test_invalid_style(self):
        with pytest.raises(ValueError):
            get_root_length("/x", "vms")


class TestAbsoluteness:
    def test_drive_relative_windows_path(self):
        """A drive without separator is relative to that drive's directory."""
        assert get_root_length("C:test.txt", PathStyle.WINDOWS) == 2
        assert is_relative("C:test.txt", PathStyle.WINDOWS) is True
        assert is_absolute("C:test.txt", PathStyle.WINDOWS) is False

    def test_drive_absolute_windows_path(self):
        assert is_absolute("C:\\test.txt", PathStyle.WINDOWS) is True

    def test_unc_and_device_paths(self):
        assert is_absolute("\\\\server\\folder\\data", PathStyle.WINDOWS) is True
        assert is_absolute("\\\\?\\mydevice\\test", PathStyle.WINDOWS) is True
        assert is_absolute("\\\\.\\mydevice\\test", PathStyle.WINDOWS) is True
        assert is_absolute("\\\\.\\UNC\\LOCALHOST\\c$\\temp\\test-file.txt", PathStyle.WINDOWS) is True

    def test_share_without_trailing_separator_is_relative(self):
        assert is_absolute("\\\\server\\folder", PathStyle.WINDOWS) is False

    def test_windows_relative_paths(self):
        assert is_absolute("..\\hello\\world.txt", PathStyle.WINDOWS) is False
        assert is_relative("..\\hello\\world.txt", PathStyle.WINDOWS) is True

    def test_windows_leading_separator(self):
        assert is_absolute("/test.txt", PathStyle.WINDOWS) is True
        assert is_absolute("\\test.txt", PathStyle.WINDOWS) is True

    def test_unix_paths(self):
        assert is_absolute("/test.txt", PathStyle.UNIX) is True
        assert is_absolute("test.txt", PathStyle.UNIX) is False
        assert is_absolute("C:\\test.txt", PathStyle.UNIX) is False
        assert is_absolute("\\folder\\", PathStyle.UNIX) is False

    @pytest.mark.parametrize("path", [p for p, _ in WINDOWS_ROOTS + UNIX_ROOTS] + ["a/b", "/", "\\\\"])
    def test_absolute_iff_root_ends_with_separator(self, style, path):
        length = get_root_length(path, style)
        expected = length > 0 and path[length - 1] in style.separators
        assert is_absolute(path, style) is expected
        assert is_relative(path, style) is not expected


class TestIsSeparator:
    def test_windows_accepts_both(self):
        assert is_separator("\\", PathStyle.WINDOWS)
        assert is_separator("/", PathStyle.WINDOWS)

    def test_unix_accepts_slash_only(self):
        assert is_separator("/", PathStyle.UNIX)
        assert not is_separator("\\", PathStyle.UNIX)

    def test_single_characters_only(self):
        assert not is_separator("//", PathStyle.UNIX)
        assert not is_separator("", PathStyle.UNIX)
