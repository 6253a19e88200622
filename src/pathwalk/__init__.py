"""
pathwalk: style-aware path string algebra.

Parses, classifies and rewrites filesystem path strings under Windows or
Unix grammar without touching any filesystem.
"""

from .core.models import Config, PathSpan, PathStyle, Segment, SegmentType, resolve_style
from .core.joined import JoinedCursor, get_first_segment_joined, iter_joined
from .core.output import BufferWriter, OutputWriter, TextWriter
from .core.operations import (
    change_basename,
    change_basename_into,
    change_extension,
    change_extension_into,
    change_root,
    change_root_into,
    change_segment,
    change_segment_into,
    get_absolute,
    get_absolute_into,
    get_basename,
    get_dirname,
    get_extension,
    get_intersection,
    get_relative,
    get_relative_into,
    has_extension,
    join,
    join_into,
    join_multiple,
    join_multiple_into,
    normalize,
    normalize_into,
)
from .core.root import get_root_length, is_absolute, is_relative
from .core.segments import (
    get_first_segment,
    get_last_segment,
    get_next_segment,
    get_previous_segment,
    get_segment_type,
    iter_segments,
)
from .core.style_guess import guess_style
from .core.walker import PathWalker, unix, windows

__version__ = "1.0.0"

__all__ = [
    "Config",
    "PathSpan",
    "PathStyle",
    "Segment",
    "SegmentType",
    "resolve_style",
    "JoinedCursor",
    "get_first_segment_joined",
    "iter_joined",
    "BufferWriter",
    "OutputWriter",
    "TextWriter",
    "change_basename",
    "change_basename_into",
    "change_extension",
    "change_extension_into",
    "change_root",
    "change_root_into",
    "change_segment",
    "change_segment_into",
    "get_absolute",
    "get_absolute_into",
    "get_basename",
    "get_dirname",
    "get_extension",
    "get_intersection",
    "get_relative",
    "get_relative_into",
    "has_extension",
    "join",
    "join_into",
    "join_multiple",
    "join_multiple_into",
    "normalize",
    "normalize_into",
    "get_root_length",
    "is_absolute",
    "is_relative",
    "get_first_segment",
    "get_last_segment",
    "get_next_segment",
    "get_previous_segment",
    "get_segment_type",
    "iter_segments",
    "guess_style",
    "PathWalker",
    "unix",
    "windows",
]
