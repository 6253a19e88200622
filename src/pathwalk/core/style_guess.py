"""Heuristic guess of the style a path is written in."""

import logging

from ..utils.encodings import PathLike, as_text
from .models import PathStyle
from .root import get_root_length
from .segments import get_last_segment


logger = logging.getLogger(__name__)


def guess_style(path: PathLike) -> PathStyle:
    """
    Guess which style a path most likely uses.

    The checks run in a fixed order:
    1. A Windows root longer than one character (drive, UNC, device).
    2. The first slash or backslash in the path.
    3. A last segment starting with a dot (hidden file) means Unix.
    4. A dot elsewhere in the last segment (an extension) means Windows.
    Anything else, including the empty path, is guessed as Unix.

    Args:
        path: The path to inspect.

    Returns:
        The most likely PathStyle.
    """
    path = as_text(path)

    if get_root_length(path, PathStyle.WINDOWS) > 1:
        logger.debug(f"Guessed windows for {path!r}: windows root")
        return PathStyle.WINDOWS

    for char in path:
        if char == "/":
            return PathStyle.UNIX
        if char == "\\":
            return PathStyle.WINDOWS

    # No separators at all, so the whole path is (at most) one segment.
    segment = get_last_segment(path, PathStyle.UNIX)
    if segment is None:
        return PathStyle.UNIX

    if path[segment.begin] == ".":
        return PathStyle.UNIX

    if "." in path[segment.begin:]:
        logger.debug(f"Guessed windows for {path!r}: extension without separators")
        return PathStyle.WINDOWS

    return PathStyle.UNIX
