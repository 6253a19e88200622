"""
Style-bound facade over the path operations.

A PathWalker carries one immutable style, so callers never depend on a
shared mutable setting. ``windows`` and ``unix`` are ready-made walkers.
"""

from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

from ..utils.encodings import BytesLike, PathLike
from . import operations
from .joined import JoinedCursor, get_first_segment_joined
from .models import Config, PathSpan, PathStyle, Segment, SegmentType, StyleLike, resolve_style
from .root import get_root_length, is_absolute, is_relative
from .segments import (
    get_first_segment,
    get_last_segment,
    get_next_segment,
    get_previous_segment,
    get_segment_type,
    iter_segments,
)


@dataclass(frozen=True)
class PathWalker:
    """Path operations bound to a single style."""

    style: PathStyle

    def __post_init__(self):
        object.__setattr__(self, "style", resolve_style(self.style))

    @classmethod
    def from_config(cls, config: Optional[Config] = None) -> "PathWalker":
        """Create a walker for the configured style (environment when None)."""
        if config is None:
            config = Config.from_env()
        return cls(config.style)

    @classmethod
    def for_style(cls, style: StyleLike) -> "PathWalker":
        return cls(resolve_style(style))

    # Roots

    def get_root(self, path: PathLike) -> int:
        return get_root_length(path, self.style)

    def is_absolute(self, path: PathLike) -> bool:
        return is_absolute(path, self.style)

    def is_relative(self, path: PathLike) -> bool:
        return is_relative(path, self.style)

    # Segments

    def first_segment(self, path: PathLike) -> Optional[Segment]:
        return get_first_segment(path, self.style)

    def last_segment(self, path: PathLike) -> Optional[Segment]:
        return get_last_segment(path, self.style)

    def next_segment(self, segment: Segment) -> Optional[Segment]:
        return get_next_segment(segment, self.style)

    def previous_segment(self, segment: Segment) -> Optional[Segment]:
        return get_previous_segment(segment, self.style)

    def segment_type(self, segment: Segment) -> SegmentType:
        return get_segment_type(segment)

    def segments(self, path: PathLike) -> Iterator[Segment]:
        return iter_segments(path, self.style)

    def first_segment_joined(self, paths: Sequence[str]) -> Optional[JoinedCursor]:
        return get_first_segment_joined(paths, self.style)

    # Producing operations

    def join(self, path_a: PathLike, path_b: PathLike) -> PathLike:
        return operations.join(path_a, path_b, self.style)

    def join_into(self, path_a: PathLike, path_b: PathLike, buffer: BytesLike) -> int:
        return operations.join_into(path_a, path_b, buffer, self.style)

    def join_multiple(self, paths: Sequence[PathLike]) -> PathLike:
        return operations.join_multiple(paths, self.style)

    def join_multiple_into(self, paths: Sequence[PathLike], buffer: BytesLike) -> int:
        return operations.join_multiple_into(paths, buffer, self.style)

    def normalize(self, path: PathLike) -> PathLike:
        return operations.normalize(path, self.style)

    def normalize_into(self, path: PathLike, buffer: BytesLike) -> int:
        return operations.normalize_into(path, buffer, self.style)

    def get_absolute(self, base: PathLike, path: PathLike) -> PathLike:
        return operations.get_absolute(base, path, self.style)

    def get_absolute_into(self, base: PathLike, path: PathLike, buffer: BytesLike) -> int:
        return operations.get_absolute_into(base, path, buffer, self.style)

    def get_relative(self, base: PathLike, path: PathLike) -> PathLike:
        return operations.get_relative(base, path, self.style)

    def get_relative_into(self, base: PathLike, path: PathLike, buffer: BytesLike) -> int:
        return operations.get_relative_into(base, path, buffer, self.style)

    def get_intersection(self, base: PathLike, other: PathLike) -> int:
        return operations.get_intersection(base, other, self.style)

    def change_root(self, path: PathLike, new_root: PathLike) -> PathLike:
        return operations.change_root(path, new_root, self.style)

    def change_root_into(self, path: PathLike, new_root: PathLike, buffer: BytesLike) -> int:
        return operations.change_root_into(path, new_root, buffer, self.style)

    def change_basename(self, path: PathLike, new_basename: PathLike) -> PathLike:
        return operations.change_basename(path, new_basename, self.style)

    def change_basename_into(self, path: PathLike, new_basename: PathLike, buffer: BytesLike) -> int:
        return operations.change_basename_into(path, new_basename, buffer, self.style)

    def change_extension(self, path: PathLike, new_extension: PathLike) -> PathLike:
        return operations.change_extension(path, new_extension, self.style)

    def change_extension_into(self, path: PathLike, new_extension: PathLike, buffer: BytesLike) -> int:
        return operations.change_extension_into(path, new_extension, buffer, self.style)

    def change_segment(self, segment: Segment, value: PathLike) -> PathLike:
        return operations.change_segment(segment, value, self.style)

    # Accessors

    def get_basename(self, path: PathLike) -> Optional[PathSpan]:
        return operations.get_basename(path, self.style)

    def get_dirname(self, path: PathLike) -> int:
        return operations.get_dirname(path, self.style)

    def get_extension(self, path: PathLike) -> Optional[PathSpan]:
        return operations.get_extension(path, self.style)

    def has_extension(self, path: PathLike) -> bool:
        return operations.has_extension(path, self.style)

    def basename(self, path: PathLike) -> PathLike:
        """Basename as a string; empty when the path has no segment."""
        span = self.get_basename(path)
        if span is None:
            return path[:0]
        return span.text

    def dirname(self, path: PathLike) -> PathLike:
        """Dirname as a string, including its trailing separator."""
        return path[:self.get_dirname(path)]

    def extension(self, path: PathLike) -> PathLike:
        """Extension including its dot; empty when there is none."""
        span = self.get_extension(path)
        if span is None:
            return path[:0]
        return span.text


windows = PathWalker(PathStyle.WINDOWS)
unix = PathWalker(PathStyle.UNIX)
