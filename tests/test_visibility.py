"""Tests for segment visibility during normalization."""

import pytest

from pathwalk import PathStyle, SegmentType, iter_joined
from pathwalk.core.visibility import elision_flags, segment_will_be_removed, skip_invisible


def flags_by_counter(path, absolute):
    return [segment_will_be_removed(cursor, absolute)
            for cursor in iter_joined([path], PathStyle.UNIX)]


def flags_by_stack(path, absolute):
    types = [cursor.type for cursor in iter_joined([path], PathStyle.UNIX)]
    return elision_flags(types, absolute)


STREAMS = [
    "a",
    ".",
    "..",
    "a/b/../c",
    "a/../..",
    "../a/..",
    "../a/../..",
    "a/../../b/..",
    "a/b/c/../../d",
    "a/./b/./../..",
    "../../a/b/../../..",
    "a/b/../../../c/d/..",
    "x/../y/../z",
]


class TestSegmentWillBeRemoved:
    def test_current_always_removed(self):
        assert flags_by_counter("./.", False) == [True, True]

    def test_back_cancels_preceding_normal(self):
        assert flags_by_counter("a/b/../c", False) == [False, True, True, False]

    def test_leading_back_survives_when_relative(self):
        assert flags_by_counter("../a", False) == [False, False]

    def test_back_removed_when_absolute(self):
        assert flags_by_counter("../a", True) == [True, False]

    def test_back_after_cancelled_pair_survives(self):
        assert flags_by_counter("a/../..", False) == [True, True, False]

    @pytest.mark.parametrize("absolute", [False, True])
    @pytest.mark.parametrize("path", STREAMS)
    def test_counter_and_stack_agree(self, path, absolute):
        assert flags_by_counter(path, absolute) == flags_by_stack(path, absolute)


class TestElisionFlags:
    def test_empty(self):
        assert elision_flags([], False) == []

    def test_nested_cancellation(self):
        types = [SegmentType.NORMAL, SegmentType.NORMAL, SegmentType.BACK, SegmentType.BACK]
        assert elision_flags(types, False) == [True, True, True, True]


class TestSkipInvisible:
    def test_none_stays_none(self):
        assert skip_invisible(None, False) is None

    def test_lands_on_first_visible(self):
        cursor = next(iter_joined(["./a/../b"], PathStyle.UNIX))
        cursor = skip_invisible(cursor, False)
        assert cursor.segment.text == "b"

    def test_runs_off_the_end(self):
        cursor = next(iter_joined(["a/.."], PathStyle.UNIX))
        assert skip_invisible(cursor, False) is None
