"""
Visibility of segments during normalization.

A current segment is always dropped. A back segment is dropped when the
path is absolute (there is nothing above the root) or when it cancels an
earlier normal segment. A normal segment is dropped when a later back
segment cancels it.

``segment_will_be_removed`` answers the question for one cursor by
counting in one direction. ``elision_flags`` answers it for a whole
stream in a single stack pass; both agree on every input.
"""

from typing import List, Optional, Sequence

from .joined import JoinedCursor
from .models import SegmentType


def _back_will_be_removed(cursor: JoinedCursor) -> bool:
    # Goes positive once a normal segment is left over to cancel us.
    counter = 0
    cursor = cursor.previous()
    while cursor is not None:
        segment_type = cursor.type
        if segment_type is SegmentType.NORMAL:
            counter += 1
            if counter > 0:
                return True
        elif segment_type is SegmentType.BACK:
            counter -= 1
        cursor = cursor.previous()
    return False


def _normal_will_be_removed(cursor: JoinedCursor) -> bool:
    # Goes negative once a back segment is left over to cancel us.
    counter = 0
    cursor = cursor.next()
    while cursor is not None:
        segment_type = cursor.type
        if segment_type is SegmentType.NORMAL:
            counter += 1
        elif segment_type is SegmentType.BACK:
            counter -= 1
            if counter < 0:
                return True
        cursor = cursor.next()
    return False


def segment_will_be_removed(cursor: JoinedCursor, absolute: bool) -> bool:
    """
    Decide whether normalization drops the segment under the cursor.

    Args:
        cursor: Position in a joined path.
        absolute: Whether the joined path has an absolute root.

    Returns:
        True if the segment is elided.
    """
    segment_type = cursor.type
    if segment_type is SegmentType.CURRENT:
        return True
    if segment_type is SegmentType.BACK:
        return absolute or _back_will_be_removed(cursor)
    return _normal_will_be_removed(cursor)


def skip_invisible(cursor: Optional[JoinedCursor], absolute: bool) -> Optional[JoinedCursor]:
    """Advance past elided segments; None if the stream ends first."""
    while cursor is not None and segment_will_be_removed(cursor, absolute):
        cursor = cursor.next()
    return cursor


def elision_flags(types: Sequence[SegmentType], absolute: bool) -> List[bool]:
    """
    Compute the elision flag of every segment of a stream in one pass.

    Normal segments are pushed; a back segment pops and removes the most
    recent pending normal segment together with itself. A back segment
    with nothing to pop survives unless the path is absolute.

    Args:
        types: Segment types of the stream, in order.
        absolute: Whether the stream has an absolute root.

    Returns:
        One flag per segment, True where the segment is elided.
    """
    removed = [False] * len(types)
    pending: List[int] = []
    for index, segment_type in enumerate(types):
        if segment_type is SegmentType.CURRENT:
            removed[index] = True
        elif segment_type is SegmentType.BACK:
            if pending:
                removed[pending.pop()] = True
                removed[index] = True
            elif absolute:
                removed[index] = True
        else:
            pending.append(index)
    return removed
