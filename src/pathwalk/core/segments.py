"""
Segment iteration over a single path string.

Segments are the components between separators, after the root. Forward
iteration skips runs of separators and captures up to the next one;
backward iteration mirrors it and never crosses the root. Each step
returns a new immutable Segment, or None when there is nothing further.
"""

from dataclasses import replace
from typing import Iterator, Optional

from ..utils.encodings import PathLike, as_text, fold_case, is_bytes_like
from .models import PathStyle, Segment, SegmentType, StyleLike, resolve_style
from .root import find_next_stop, find_previous_stop, get_root_length


def first_segment_from(path: str, start: int, style: PathStyle,
                       from_bytes: bool = False) -> Optional[Segment]:
    """
    Find the first segment of path at or after offset start.

    The offset is remembered as the segment area start, so that later
    backward steps stop there. Used directly for joined fragments whose
    root must not be stripped.
    """
    length = len(path)
    position = start
    while position < length and path[position] in style.separators:
        position += 1
    if position >= length:
        return None

    end = find_next_stop(path, position, style)
    return Segment(path=path, segments=start, begin=position, end=end, from_bytes=from_bytes)


def last_segment_from(path: str, start: int, style: PathStyle,
                      from_bytes: bool = False) -> Optional[Segment]:
    """Find the last segment of path at or after offset start."""
    segment = first_segment_from(path, start, style, from_bytes)
    if segment is None:
        return None

    following = _next(segment, style)
    while following is not None:
        segment = following
        following = _next(segment, style)
    return segment


def _next(segment: Segment, style: PathStyle) -> Optional[Segment]:
    path = segment.path
    length = len(path)
    position = segment.end
    if position >= length:
        return None

    while position < length and path[position] in style.separators:
        position += 1
    if position >= length:
        return None

    end = find_next_stop(path, position, style)
    return replace(segment, begin=position, end=end)


def _previous(segment: Segment, style: PathStyle) -> Optional[Segment]:
    path = segment.path
    position = segment.begin
    if position <= segment.segments:
        return None

    position -= 1
    while path[position] in style.separators:
        position -= 1
        if position < segment.segments:
            return None

    begin = find_previous_stop(path, segment.segments, position, style)
    return replace(segment, begin=begin, end=position + 1)


def get_first_segment(path: PathLike, style: StyleLike) -> Optional[Segment]:
    """
    Get the first segment of a path.

    Args:
        path: The path to inspect.
        style: Grammar used to find the root and separators.

    Returns:
        The first segment after the root, or None if there is none.
    """
    from_bytes = is_bytes_like(path)
    path = as_text(path)
    style = resolve_style(style)
    return first_segment_from(path, get_root_length(path, style), style, from_bytes)


def get_last_segment(path: PathLike, style: StyleLike) -> Optional[Segment]:
    """
    Get the last segment of a path.

    Trailing separators are not part of the segment. Returns None if the
    path consists of a root only.
    """
    from_bytes = is_bytes_like(path)
    path = as_text(path)
    style = resolve_style(style)
    return last_segment_from(path, get_root_length(path, style), style, from_bytes)


def get_next_segment(segment: Segment, style: StyleLike) -> Optional[Segment]:
    """Advance to the segment after this one, or None at the end."""
    return _next(segment, resolve_style(style))


def get_previous_segment(segment: Segment, style: StyleLike) -> Optional[Segment]:
    """Move to the segment before this one, or None at the first segment."""
    return _previous(segment, resolve_style(style))


def get_segment_type(segment: Segment) -> SegmentType:
    """Classify a segment as normal, current (".") or back ("..")."""
    return segment.type


def iter_segments(path: PathLike, style: StyleLike) -> Iterator[Segment]:
    """Yield every segment of a path, first to last."""
    style = resolve_style(style)
    segment = get_first_segment(path, style)
    while segment is not None:
        yield segment
        segment = _next(segment, style)


def texts_equal(first: str, second: str, style: PathStyle) -> bool:
    """Compare two strings under the case rule of the style."""
    if len(first) != len(second):
        return False
    if style.case_sensitive:
        return first == second
    return fold_case(first) == fold_case(second)


def segments_equal(first: Segment, second: Segment, style: StyleLike) -> bool:
    """Check whether two segments have the same content."""
    return texts_equal(first.text, second.text, resolve_style(style))
