"""Tests for text coercion helpers."""

import pytest

from pathwalk.utils.encodings import (
    as_buffer_text,
    as_text,
    coerce_paths,
    fold_case,
    is_bytes_like,
    restore,
)


class TestAsText:
    def test_str_passes_through(self):
        assert as_text("/a/b") == "/a/b"

    @pytest.mark.parametrize("value", [b"/a\xff", bytearray(b"/a\xff"), memoryview(b"/a\xff")])
    def test_bytes_like_maps_one_char_per_byte(self, value):
        text = as_text(value)
        assert len(text) == 3
        assert text.encode("latin-1") == b"/a\xff"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            as_text(42)
        with pytest.raises(TypeError):
            as_text(None)


class TestCoercePaths:
    def test_strings(self):
        assert coerce_paths(["a", "b"]) == (["a", "b"], False)

    def test_bytes(self):
        assert coerce_paths([b"a", bytearray(b"b")]) == (["a", "b"], True)

    def test_empty(self):
        assert coerce_paths([]) == ([], False)

    def test_mixing_raises(self):
        with pytest.raises(TypeError, match="mix"):
            coerce_paths(["a", b"b"])


class TestRestore:
    def test_restores_bytes(self):
        assert restore("a\xff", True) == b"a\xff"

    def test_keeps_str(self):
        assert restore("a", False) == "a"


class TestBufferText:
    def test_non_ascii_str_becomes_utf8_units(self):
        assert as_buffer_text("é") == "\xc3\xa9"

    def test_bytes_are_not_reencoded(self):
        assert as_buffer_text(b"\xc3\xa9") == "\xc3\xa9"


class TestFoldCase:
    def test_ascii_only(self):
        assert fold_case("ABC-xyz") == "abc-xyz"
        assert fold_case("ÄÖ") == "ÄÖ"

    def test_is_bytes_like(self):
        assert is_bytes_like(memoryview(b""))
        assert not is_bytes_like("")
