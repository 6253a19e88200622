"""Tests for the output writers."""

import pytest

from pathwalk import BufferWriter, PathStyle, TextWriter


class TestTextWriter:
    def test_positional_writes_out_of_order(self):
        writer = TextWriter()
        assert writer.write(3, "def") == 3
        assert writer.write(0, "abc") == 3
        writer.terminate(6)
        assert writer.getvalue() == "abcdef"

    def test_terminate_truncates(self):
        writer = TextWriter()
        writer.write(0, "abc/")
        writer.terminate(3)
        assert writer.getvalue() == "abc"

    def test_unbounded(self):
        assert TextWriter().capacity is None

    def test_helpers(self):
        writer = TextWriter()
        pos = writer.write_back(0)
        pos += writer.write_separator(pos, PathStyle.WINDOWS)
        pos += writer.write_current(pos)
        pos += writer.write_separator(pos, PathStyle.UNIX)
        pos += writer.write_dot(pos)
        writer.terminate(pos)
        assert writer.getvalue() == "..\\./."


class TestBufferWriter:
    def test_truncates_and_reports_full_length(self):
        buffer = bytearray(4)
        writer = BufferWriter(buffer)
        assert writer.capacity == 4
        assert writer.write(2, "abcdef") == 6
        assert buffer == bytearray(b"\x00\x00ab")

    def test_write_past_capacity_is_dropped(self):
        buffer = bytearray(b"xx")
        assert BufferWriter(buffer).write(5, "abc") == 3
        assert buffer == bytearray(b"xx")

    def test_terminates_at_position(self):
        buffer = bytearray(b"abcdef")
        BufferWriter(buffer).terminate(2)
        assert buffer == bytearray(b"ab\x00def")

    def test_terminates_at_last_byte_when_full(self):
        buffer = bytearray(b"abc")
        BufferWriter(buffer).terminate(10)
        assert buffer == bytearray(b"ab\x00")

    def test_zero_capacity_writes_nothing(self):
        buffer = bytearray()
        writer = BufferWriter(buffer)
        assert writer.write(0, "abc") == 3
        writer.terminate(3)
        assert buffer == bytearray()

    def test_writable_memoryview(self):
        backing = bytearray(b"......")
        writer = BufferWriter(memoryview(backing)[1:4])
        writer.write(0, "xyz")
        writer.terminate(3)
        assert backing == bytearray(b".xy\x00..")

    @pytest.mark.parametrize("buffer", [b"abc", memoryview(b"abc"), "abc", [0, 0]])
    def test_rejects_unwritable_buffers(self, buffer):
        with pytest.raises(TypeError):
            BufferWriter(buffer)

    def test_rejects_non_byte_memoryview(self):
        with pytest.raises(TypeError):
            BufferWriter(memoryview(bytearray(8)).cast("I"))
