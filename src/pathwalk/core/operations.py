"""
High-level path operations.

Each producing operation is written once against the OutputWriter
protocol and exposed twice:

- ``normalize(path, style)`` returns a new str (or bytes for bytes input).
- ``normalize_into(path, buffer, style)`` writes into a fixed byte buffer
  and returns the length the untruncated result has.

A buffer of capacity zero is legal and only measures the result, which
allows the "measure, allocate, write" pattern.
"""

import logging
from typing import Callable, List, Optional, Sequence

from ..utils.encodings import (
    BUFFER_ENCODING,
    BytesLike,
    PathLike,
    as_buffer_text,
    coerce_paths,
    restore,
)
from .joined import JoinedCursor, get_first_segment_joined, iter_joined
from .models import PathSpan, PathStyle, Segment, StyleLike, resolve_style
from .output import BufferWriter, OutputWriter, TextWriter
from .root import get_root_length, is_absolute, is_root_absolute
from .segments import get_last_segment, segments_equal, texts_equal
from .visibility import elision_flags, skip_invisible


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Writer-based implementations
# ---------------------------------------------------------------------------

def _trim_separators(value: str, style: PathStyle) -> str:
    return value.strip(style.separators)


def _join_and_normalize(fragments: Sequence[str], style: PathStyle, writer: OutputWriter) -> int:
    if not fragments:
        fragments = [""]

    pos = get_root_length(fragments[0], style)
    absolute = is_root_absolute(fragments[0], pos, style)

    # The root is copied verbatim.
    writer.write(0, fragments[0][:pos])

    cursors = list(iter_joined(fragments, style))
    if not cursors:
        writer.terminate(pos)
        return pos

    flags = elision_flags([cursor.type for cursor in cursors], absolute)

    has_segment_output = False
    for cursor, removed in zip(cursors, flags):
        if removed:
            continue

        # Separator goes in front of the segment so no trailing one is left.
        if has_segment_output:
            pos += writer.write_separator(pos, style)
        has_segment_output = True

        pos += writer.write(pos, cursor.segment.text)

    if not has_segment_output and pos == 0:
        # Everything cancelled out in a relative path.
        pos += writer.write_current(pos)

    writer.terminate(pos)
    return pos


def _get_absolute(base: str, path: str, style: PathStyle, writer: OutputWriter) -> int:
    if is_absolute(path, style):
        fragments = [path]
    elif is_absolute(base, style):
        fragments = [base, path]
    else:
        logger.debug(f"Base {base!r} is not absolute, prefixing {style.separator!r}")
        fragments = [style.separator, base, path]
    return _join_and_normalize(fragments, style, writer)


def _roots_equal(first: str, second: str, style: PathStyle) -> bool:
    first_length = get_root_length(first, style)
    second_length = get_root_length(second, style)
    return texts_equal(first[:first_length], second[:second_length], style)


def _skip_until_diverge(base: Optional[JoinedCursor], other: Optional[JoinedCursor],
                        absolute: bool, style: PathStyle):
    while base is not None and other is not None:
        base = skip_invisible(base, absolute)
        other = skip_invisible(other, absolute)
        if base is None or other is None:
            break

        if not segments_equal(base.segment, other.segment, style):
            break

        base = base.next()
        other = other.next()

    return base, other


def _get_relative(base: str, path: str, style: PathStyle, writer: OutputWriter) -> int:
    pos = 0

    if not _roots_equal(base, path, style):
        logger.debug(f"Roots of {base!r} and {path!r} differ, no relative path")
        writer.terminate(pos)
        return pos

    absolute = is_absolute(base, style)

    base_cursor, other_cursor = _skip_until_diverge(
        get_first_segment_joined([base], style),
        get_first_segment_joined([path], style),
        absolute,
        style,
    )

    has_output = False

    # Every remaining base segment needs one step back.
    cursor = skip_invisible(base_cursor, absolute)
    while cursor is not None:
        has_output = True
        pos += writer.write_back(pos)
        pos += writer.write_separator(pos, style)
        cursor = skip_invisible(cursor.next(), absolute)

    # Every remaining target segment is navigated into.
    cursor = skip_invisible(other_cursor, absolute)
    while cursor is not None:
        has_output = True
        pos += writer.write(pos, cursor.segment.text)
        pos += writer.write_separator(pos, style)
        cursor = skip_invisible(cursor.next(), absolute)

    if has_output:
        # Drop the trailing separator.
        pos -= 1
    else:
        pos += writer.write_current(pos)

    writer.terminate(pos)
    return pos


def _change_root(path: str, new_root: str, style: PathStyle, writer: OutputWriter) -> int:
    root_length = get_root_length(path, style)
    tail = path[root_length:]

    # Tail first: the source may share memory with the output.
    writer.write(len(new_root), tail)
    writer.write(0, new_root)

    size = len(new_root) + len(tail)
    writer.terminate(size)
    return size


def _change_segment(segment: Segment, value: str, style: PathStyle, writer: OutputWriter) -> int:
    value = _trim_separators(value, style)
    head = segment.path[:segment.begin]
    tail = segment.path[segment.end:]

    writer.write(len(head) + len(value), tail)
    pos = writer.write(0, head)
    pos += writer.write(pos, value)

    pos += len(tail)
    writer.terminate(pos)
    return pos


def _change_basename(path: str, new_basename: str, style: PathStyle, writer: OutputWriter) -> int:
    segment = get_last_segment(path, style)
    if segment is not None:
        return _change_segment(segment, new_basename, style, writer)

    # Only a root: the new basename becomes the first segment.
    root_length = get_root_length(path, style)
    pos = writer.write(0, path[:root_length])
    pos += writer.write(pos, _trim_separators(new_basename, style))
    writer.terminate(pos)
    return pos


def _change_extension(path: str, new_extension: str, style: PathStyle, writer: OutputWriter) -> int:
    segment = get_last_segment(path, style)
    if segment is None:
        root_length = get_root_length(path, style)
        pos = writer.write(0, path[:root_length])
        if not new_extension.startswith("."):
            pos += writer.write_dot(pos)
        pos += writer.write(pos, new_extension)
        writer.terminate(pos)
        return pos

    # The old extension starts at the last dot of the segment, if any.
    old_extension = path.rfind(".", segment.begin, segment.end)
    if old_extension < 0:
        old_extension = segment.end

    # Exactly one dot is written in front of the extension.
    if new_extension.startswith("."):
        new_extension = new_extension[1:]

    head = path[:old_extension]
    trail = path[segment.end:]

    trail_size = writer.write(len(head) + len(new_extension) + 1, trail)
    pos = writer.write(0, head)
    pos += writer.write_dot(pos)
    pos += writer.write(pos, new_extension)

    pos += trail_size
    writer.terminate(pos)
    return pos


# ---------------------------------------------------------------------------
# Public wrappers
# ---------------------------------------------------------------------------

Producer = Callable[[List[str], PathStyle, OutputWriter], int]


def _produce_text(producer: Producer, values: Sequence[PathLike], style: StyleLike) -> PathLike:
    style = resolve_style(style)
    texts, as_bytes = coerce_paths(values)
    writer = TextWriter()
    producer(texts, style, writer)
    return restore(writer.getvalue(), as_bytes)


def _produce_buffer(producer: Producer, values: Sequence[PathLike], buffer: BytesLike,
                    style: StyleLike) -> int:
    style = resolve_style(style)
    writer = BufferWriter(buffer)
    return producer([as_buffer_text(value) for value in values], style, writer)


def _join_producer(texts, style, writer):
    return _join_and_normalize(texts, style, writer)


def _absolute_producer(texts, style, writer):
    return _get_absolute(texts[0], texts[1], style, writer)


def _relative_producer(texts, style, writer):
    return _get_relative(texts[0], texts[1], style, writer)


def _root_producer(texts, style, writer):
    return _change_root(texts[0], texts[1], style, writer)


def _basename_producer(texts, style, writer):
    return _change_basename(texts[0], texts[1], style, writer)


def _extension_producer(texts, style, writer):
    return _change_extension(texts[0], texts[1], style, writer)


def join(path_a: PathLike, path_b: PathLike, style: StyleLike) -> PathLike:
    """
    Join two paths and normalize the result.

    Both paths may be relative. The root of ``path_a`` becomes the root of
    the result; a root in ``path_b`` is treated as ordinary segments.

    Args:
        path_a: The path that comes first.
        path_b: The path appended to it.
        style: Grammar for roots, separators and output.

    Returns:
        The joined, normalized path.
    """
    return _produce_text(_join_producer, [path_a, path_b], style)


def join_into(path_a: PathLike, path_b: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of join(); returns the untruncated length."""
    return _produce_buffer(_join_producer, [path_a, path_b], buffer, style)


def join_multiple(paths: Sequence[PathLike], style: StyleLike) -> PathLike:
    """Join any number of paths and normalize the result."""
    return _produce_text(_join_producer, paths, style)


def join_multiple_into(paths: Sequence[PathLike], buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of join_multiple()."""
    return _produce_buffer(_join_producer, paths, buffer, style)


def normalize(path: PathLike, style: StyleLike) -> PathLike:
    """
    Create the normalized form of a path.

    "." segments are removed, ".." segments cancel the normal segment
    before them (or vanish after an absolute root), repeated separators
    collapse into one canonical separator and trailing separators go away.
    The root is kept verbatim.
    """
    return _produce_text(_join_producer, [path], style)


def normalize_into(path: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of normalize()."""
    return _produce_buffer(_join_producer, [path], buffer, style)


def get_absolute(base: PathLike, path: PathLike, style: StyleLike) -> PathLike:
    """
    Resolve a path against an absolute base.

    An absolute ``path`` ignores the base and is only normalized. A
    relative base is treated as if it started at a root separator.

    Args:
        base: The absolute base directory.
        path: The path to resolve.
        style: Grammar for roots, separators and output.

    Returns:
        A normalized absolute path.
    """
    return _produce_text(_absolute_producer, [base, path], style)


def get_absolute_into(base: PathLike, path: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of get_absolute()."""
    return _produce_buffer(_absolute_producer, [base, path], buffer, style)


def get_relative(base: PathLike, path: PathLike, style: StyleLike) -> PathLike:
    """
    Compute how to reach ``path`` starting from ``base``.

    Both roots must be equal (under the style's case rule), otherwise the
    result is empty. Equal paths yield ".".

    Args:
        base: The directory the relative path starts from.
        path: The target path.
        style: Grammar for roots, separators and output.

    Returns:
        The relative path, or an empty value if the roots differ.
    """
    return _produce_text(_relative_producer, [base, path], style)


def get_relative_into(base: PathLike, path: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of get_relative()."""
    return _produce_buffer(_relative_producer, [base, path], buffer, style)


def get_intersection(base: PathLike, other: PathLike, style: StyleLike) -> int:
    """
    Find the common leading portion of two paths.

    Segments elided by normalization are skipped on both sides before
    comparing.

    Args:
        base: The path whose prefix is measured.
        other: The path compared with it.
        style: Grammar for roots, separators and comparison.

    Returns:
        Length of the prefix of ``base`` up to the end of the last common
        segment; the root length if the first segments differ; 0 if the
        roots differ.
    """
    style = resolve_style(style)
    (base, other), _ = coerce_paths([base, other])

    if not _roots_equal(base, other, style):
        logger.debug(f"Roots of {base!r} and {other!r} differ, no intersection")
        return 0

    root_length = get_root_length(base, style)
    base_cursor = get_first_segment_joined([base], style)
    other_cursor = get_first_segment_joined([other], style)
    if base_cursor is None or other_cursor is None:
        return root_length

    absolute = is_root_absolute(base, root_length, style)
    end = root_length

    while True:
        base_cursor = skip_invisible(base_cursor, absolute)
        other_cursor = skip_invisible(other_cursor, absolute)
        if base_cursor is None or other_cursor is None:
            break

        if not segments_equal(base_cursor.segment, other_cursor.segment, style):
            return end

        end = base_cursor.segment.end

        base_cursor = base_cursor.next()
        if base_cursor is None:
            break
        other_cursor = other_cursor.next()
        if other_cursor is None:
            break

    return end


def change_root(path: PathLike, new_root: PathLike, style: StyleLike) -> PathLike:
    """Replace the root of a path verbatim. The result is not normalized."""
    return _produce_text(_root_producer, [path, new_root], style)


def change_root_into(path: PathLike, new_root: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of change_root()."""
    return _produce_buffer(_root_producer, [path, new_root], buffer, style)


def change_basename(path: PathLike, new_basename: PathLike, style: StyleLike) -> PathLike:
    """
    Replace the last segment of a path.

    Separators around the new basename are trimmed. A path without any
    segment gets the basename appended after its root.
    """
    return _produce_text(_basename_producer, [path, new_basename], style)


def change_basename_into(path: PathLike, new_basename: PathLike, buffer: BytesLike,
                         style: StyleLike) -> int:
    """Buffer-writing variant of change_basename()."""
    return _produce_buffer(_basename_producer, [path, new_basename], buffer, style)


def change_extension(path: PathLike, new_extension: PathLike, style: StyleLike) -> PathLike:
    """
    Replace or add the extension of the last segment.

    The extension starts at the last dot of the last segment. Exactly one
    dot is written in front of the new extension whether or not it
    carries one. A path without any segment gets the extension as its
    basename.
    """
    return _produce_text(_extension_producer, [path, new_extension], style)


def change_extension_into(path: PathLike, new_extension: PathLike, buffer: BytesLike,
                          style: StyleLike) -> int:
    """Buffer-writing variant of change_extension()."""
    return _produce_buffer(_extension_producer, [path, new_extension], buffer, style)


def _buffer_segment(segment: Segment) -> Segment:
    # Offsets of a str path are moved onto its UTF-8 encoding.
    if segment.from_bytes:
        return segment

    def offset(index: int) -> int:
        return len(segment.path[:index].encode(BUFFER_ENCODING))

    return Segment(
        path=as_buffer_text(segment.path),
        segments=offset(segment.segments),
        begin=offset(segment.begin),
        end=offset(segment.end),
        from_bytes=True,
    )


def change_segment(segment: Segment, value: PathLike, style: StyleLike) -> PathLike:
    """
    Replace the content of one segment and return the whole new path.

    Separators around the value are trimmed. The value must have the
    same type (str or bytes) as the path the segment was taken from.

    Raises:
        TypeError: If the value and the segment's path mix str and bytes.
    """
    style = resolve_style(style)
    texts, as_bytes = coerce_paths([value])
    if as_bytes != segment.from_bytes:
        raise TypeError("Can't mix strings and bytes in path components")
    writer = TextWriter()
    _change_segment(segment, texts[0], style, writer)
    return restore(writer.getvalue(), as_bytes)


def change_segment_into(segment: Segment, value: PathLike, buffer: BytesLike, style: StyleLike) -> int:
    """Buffer-writing variant of change_segment()."""
    return _change_segment(_buffer_segment(segment), as_buffer_text(value), resolve_style(style),
                           BufferWriter(buffer))


# ---------------------------------------------------------------------------
# Accessors
# ---------------------------------------------------------------------------

def get_basename(path: PathLike, style: StyleLike) -> Optional[PathSpan]:
    """
    Locate the basename (last segment) of a path.

    Returns:
        PathSpan of the basename without trailing separators, or None if
        the path has no segment.
    """
    (text,), as_bytes = coerce_paths([path])
    segment = get_last_segment(text, style)
    if segment is None:
        return None
    return PathSpan(segment.begin, segment.size, restore(segment.text, as_bytes))


def get_dirname(path: PathLike, style: StyleLike) -> int:
    """
    Measure the dirname of a path.

    Returns:
        Length of the prefix up to the start of the last segment, or 0
        if the path has no segment.
    """
    segment = get_last_segment(path, style)
    if segment is None:
        return 0
    return segment.begin


def get_extension(path: PathLike, style: StyleLike) -> Optional[PathSpan]:
    """
    Locate the extension of the last segment, starting at its last dot.

    Returns:
        PathSpan including the dot, or None if there is no extension.
    """
    (text,), as_bytes = coerce_paths([path])
    segment = get_last_segment(text, style)
    if segment is None:
        return None

    dot = text.rfind(".", segment.begin, segment.end)
    if dot < 0:
        return None
    return PathSpan(dot, segment.end - dot, restore(text[dot:segment.end], as_bytes))


def has_extension(path: PathLike, style: StyleLike) -> bool:
    """Check whether the last segment of a path contains a dot."""
    return get_extension(path, style) is not None
