"""
Joined segment stream.

A joined path is an ordered list of path fragments which behaves like
their concatenation with a separator between each pair, without ever
building the concatenated string. Only the first fragment contributes a
root; the whole text of every later fragment is segment-bearing.
"""

from dataclasses import dataclass, replace
from typing import Iterator, Optional, Sequence, Tuple

from .models import PathStyle, Segment, SegmentType, StyleLike, resolve_style
from .root import get_root_length
from .segments import first_segment_from, get_next_segment, get_previous_segment, last_segment_from


def _segment_start(fragments: Sequence[str], index: int, style: PathStyle) -> int:
    if index == 0:
        return get_root_length(fragments[0], style)
    return 0


@dataclass(frozen=True)
class JoinedCursor:
    """Position of one segment within a joined path."""

    fragments: Tuple[str, ...]
    index: int
    segment: Segment
    style: PathStyle

    @property
    def type(self) -> SegmentType:
        return self.segment.type

    def next(self) -> Optional["JoinedCursor"]:
        """
        Advance to the following segment of the joined path.

        Moves on to the next fragment that has a segment once the current
        fragment is exhausted.
        """
        segment = get_next_segment(self.segment, self.style)
        if segment is not None:
            return replace(self, segment=segment)

        for index in range(self.index + 1, len(self.fragments)):
            segment = first_segment_from(self.fragments[index], 0, self.style)
            if segment is not None:
                return replace(self, index=index, segment=segment)
        return None

    def previous(self) -> Optional["JoinedCursor"]:
        """Move back to the preceding segment, across fragment boundaries."""
        segment = get_previous_segment(self.segment, self.style)
        if segment is not None:
            return replace(self, segment=segment)

        for index in range(self.index - 1, -1, -1):
            start = _segment_start(self.fragments, index, self.style)
            segment = last_segment_from(self.fragments[index], start, self.style)
            if segment is not None:
                return replace(self, index=index, segment=segment)
        return None


def get_first_segment_joined(fragments: Sequence[str], style: StyleLike) -> Optional[JoinedCursor]:
    """
    Position a cursor on the first segment of a joined path.

    Fragments without segments are skipped. The root is stripped from
    fragment 0 only.

    Args:
        fragments: Path strings forming the joined path.
        style: Grammar used for roots and separators.

    Returns:
        A cursor on the first segment, or None if no fragment has one.
    """
    style = resolve_style(style)
    fragments = tuple(fragments)
    for index, fragment in enumerate(fragments):
        start = _segment_start(fragments, index, style)
        segment = first_segment_from(fragment, start, style)
        if segment is not None:
            return JoinedCursor(fragments=fragments, index=index, segment=segment, style=style)
    return None


def iter_joined(fragments: Sequence[str], style: StyleLike) -> Iterator[JoinedCursor]:
    """Yield a cursor for every segment of the joined path, in order."""
    cursor = get_first_segment_joined(fragments, style)
    while cursor is not None:
        yield cursor
        cursor = cursor.next()
