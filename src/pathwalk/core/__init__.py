"""Core components for pathwalk."""

from .models import Config, PathSpan, PathStyle, Segment, SegmentType, resolve_style
from .joined import JoinedCursor, get_first_segment_joined, iter_joined
from .output import BufferWriter, OutputWriter, TextWriter
from .style_guess import guess_style
from .walker import PathWalker, unix, windows

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
    "guess_style",
    "PathWalker",
    "unix",
    "windows",
]
