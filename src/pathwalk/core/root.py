"""
Root parsing for pathwalk.

The root is the prefix of a path which decides whether it is absolute:
a single leading separator on Unix; a drive (``C:``, ``C:\\``), a leading
separator, a UNC share (``\\\\server\\share\\``) or a device prefix
(``\\\\.\\``, ``\\\\?\\``) on Windows. A path is absolute iff its root
ends with a separator.
"""

from ..utils.encodings import PathLike, as_text
from .models import PathStyle, StyleLike, resolve_style


def is_separator(char: str, style: PathStyle) -> bool:
    """Check whether a single character is a separator for the style."""
    return len(char) == 1 and char in style.separators


def find_next_stop(path: str, position: int, style: PathStyle) -> int:
    """Offset of the next separator at or after position, or len(path)."""
    length = len(path)
    while position < length and path[position] not in style.separators:
        position += 1
    return position


def find_previous_stop(path: str, begin: int, position: int, style: PathStyle) -> int:
    """Offset of the first character after the separator preceding position."""
    while position > begin and path[position] not in style.separators:
        position -= 1
    if path[position] in style.separators:
        return position + 1
    return position


def _windows_root_length(path: str) -> int:
    separators = PathStyle.WINDOWS.separators
    length = len(path)
    if length == 0:
        return 0

    if path[0] in separators:
        if length < 2 or path[1] not in separators:
            # A single leading separator, not a network path.
            return 1

        # Network or device path. Device roots are "\\.\" and "\\?\".
        position = 2
        if (position + 1 < length and path[position] in "?."
                and path[position + 1] in separators):
            return 4

        # Server name, then any separators, then the share name.
        position = find_next_stop(path, position, PathStyle.WINDOWS)
        while position < length and path[position] in separators:
            position += 1
        position = find_next_stop(path, position, PathStyle.WINDOWS)

        # A trailing separator makes the share root absolute.
        if position < length and path[position] in separators:
            position += 1
        return position

    if length > 1 and path[1] == ":":
        if length > 2 and path[2] in separators:
            return 3
        return 2

    return 0


def _unix_root_length(path: str) -> int:
    if path and path[0] == "/":
        return 1
    return 0


def get_root_length(path: PathLike, style: StyleLike) -> int:
    """
    Determine the length of the root of a path.

    A missing root is not an error; the length is simply zero.

    Args:
        path: The path to inspect.
        style: Grammar used to parse the root.

    Returns:
        Number of leading characters (bytes for bytes input) that form
        the root.
    """
    path = as_text(path)
    if resolve_style(style) is PathStyle.WINDOWS:
        return _windows_root_length(path)
    return _unix_root_length(path)


def is_root_absolute(path: str, root_length: int, style: StyleLike) -> bool:
    """Check whether the root ``path[:root_length]`` ends with a separator."""
    if root_length == 0:
        return False
    return path[root_length - 1] in resolve_style(style).separators


def is_absolute(path: PathLike, style: StyleLike) -> bool:
    """Check whether the path is absolute under the given style."""
    path = as_text(path)
    style = resolve_style(style)
    return is_root_absolute(path, get_root_length(path, style), style)


def is_relative(path: PathLike, style: StyleLike) -> bool:
    """Check whether the path is relative under the given style."""
    return not is_absolute(path, style)
