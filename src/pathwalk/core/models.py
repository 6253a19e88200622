"""
Core data models for pathwalk.

This module contains the fundamental data structures used throughout
the engine: the path styles and their grammar facts, segment types,
segments and spans, and the configuration object.
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple, Optional, Union

from dotenv import load_dotenv


logger = logging.getLogger(__name__)


class PathStyle(str, Enum):
    """Path grammar governing separators, roots and case sensitivity."""

    WINDOWS = "windows"
    UNIX = "unix"

    @property
    def separators(self) -> str:
        """All characters accepted as separators. The first one is canonical."""
        if self is PathStyle.WINDOWS:
            return "\\/"
        return "/"

    @property
    def separator(self) -> str:
        """Separator used when writing output."""
        return self.separators[0]

    @property
    def case_sensitive(self) -> bool:
        """Whether segment and root comparison honours case."""
        return self is PathStyle.UNIX


class SegmentType(Enum):
    """Classification of a single path segment."""

    NORMAL = "normal"
    CURRENT = "current"  # "."
    BACK = "back"  # ".."


StyleLike = Union[PathStyle, str]


def resolve_style(style: StyleLike) -> PathStyle:
    """
    Turn a style value into a PathStyle.

    Args:
        style: A PathStyle member or its string value (any case).

    Returns:
        The matching PathStyle.

    Raises:
        ValueError: If the value does not name a supported style.
    """
    if isinstance(style, PathStyle):
        return style
    if isinstance(style, str):
        try:
            return PathStyle(style.lower())
        except ValueError:
            pass
    raise ValueError(f"Unsupported path style: {style!r}")


def default_style() -> PathStyle:
    """Style matching the running platform."""
    if sys.platform == "win32":
        return PathStyle.WINDOWS
    return PathStyle.UNIX


@dataclass(frozen=True)
class Segment:
    """
    A single component of a path string.

    Offsets index into ``path``. ``segments`` is the offset where segment
    parsing starts (just after the root for the first fragment of a
    path), which backward iteration never crosses.
    """

    path: str
    segments: int
    begin: int
    end: int

    # Whether path holds bytes decoded one character per byte
    from_bytes: bool = False

    @property
    def size(self) -> int:
        return self.end - self.begin

    @property
    def text(self) -> str:
        return self.path[self.begin:self.end]

    @property
    def type(self) -> SegmentType:
        text = self.text
        if text == ".":
            return SegmentType.CURRENT
        if text == "..":
            return SegmentType.BACK
        return SegmentType.NORMAL


class PathSpan(NamedTuple):
    """Location of a sub-string (basename, extension) inside a path."""

    offset: int
    length: int
    text: Union[str, bytes]


def _style_from_env() -> PathStyle:
    value = os.getenv("PATHWALK_STYLE")
    if not value:
        return default_style()
    return resolve_style(value)


def _debug_from_env() -> bool:
    return os.getenv("PATHWALK_DEBUG", "").lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Config:
    """Configuration settings for pathwalk."""

    # Style used when the caller does not name one
    style: PathStyle = field(default_factory=_style_from_env)

    debug: bool = field(default_factory=_debug_from_env)

    def __post_init__(self):
        object.__setattr__(self, "style", resolve_style(self.style))

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> "Config":
        """
        Build a configuration from the environment.

        Values from a ``.env`` file are loaded first without overriding
        variables that are already set.

        Args:
            dotenv_path: Explicit ``.env`` location. Searched for when None.

        Returns:
            A new Config.
        """
        load_dotenv(dotenv_path)
        config = cls()
        logger.debug(f"Loaded configuration: style={config.style.value}, debug={config.debug}")
        return config
