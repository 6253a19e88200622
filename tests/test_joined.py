"""Tests for the joined segment stream."""

from pathwalk import PathStyle, get_first_segment_joined, iter_joined


def texts(fragments, style):
    return [cursor.segment.text for cursor in iter_joined(fragments, style)]


class TestJoinedForward:
    def test_spans_fragments(self):
        fragments = ["/a", "b/c", "", "/d"]
        cursors = list(iter_joined(fragments, PathStyle.UNIX))
        assert [c.segment.text for c in cursors] == ["a", "b", "c", "d"]
        assert [c.index for c in cursors] == [0, 1, 1, 3]

    def test_root_only_stripped_from_first_fragment(self):
        assert texts(["C:\\a", "D:\\b"], PathStyle.WINDOWS) == ["a", "D:", "b"]

    def test_unix_later_leading_separator_is_skipped(self):
        assert texts(["a", "/b"], PathStyle.UNIX) == ["a", "b"]

    def test_skips_fragments_without_segments(self):
        cursor = get_first_segment_joined(["/", "//", "x"], PathStyle.UNIX)
        assert cursor.index == 2
        assert cursor.segment.text == "x"

    def test_nothing_to_iterate(self, style):
        assert get_first_segment_joined([], style) is None
        assert get_first_segment_joined(["", "/"], style) is None
        assert list(iter_joined(["/"], style)) == []

    def test_style_as_string(self):
        cursor = get_first_segment_joined(["C:\\x"], "windows")
        assert cursor.style is PathStyle.WINDOWS
        assert cursor.segment.text == "x"


class TestJoinedBackward:
    def test_walks_back_across_fragments(self):
        cursors = list(iter_joined(["/a", "b/c", "", "/d"], PathStyle.UNIX))
        cursor = cursors[-1]
        seen = []
        while cursor is not None:
            seen.append(cursor.segment.text)
            cursor = cursor.previous()
        assert seen == ["d", "c", "b", "a"]

    def test_never_enters_first_root(self):
        cursor = get_first_segment_joined(["C:\\", "x"], PathStyle.WINDOWS)
        assert cursor.segment.text == "x"
        assert cursor.previous() is None

    def test_previous_mirrors_next(self, style):
        fragments = ["a/b", "..", "./c"]
        forward = list(iter_joined(fragments, style))
        for earlier, later in zip(forward, forward[1:]):
            assert later.previous() == earlier
