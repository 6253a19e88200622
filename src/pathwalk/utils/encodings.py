"""
Text coercion utilities.

The engine works on ``str``. Byte strings are mapped onto it with latin-1,
which turns every byte into exactly one character, so offsets computed on
the text are byte offsets and the mapping is lossless in both directions.
"""

from typing import Iterable, List, Tuple, Union


BytesLike = Union[bytes, bytearray, memoryview]
PathLike = Union[str, BytesLike]

# One character per byte
BYTE_ENCODING = "latin-1"

# Encoding applied to str input of the buffer-writing operations
BUFFER_ENCODING = "utf-8"

_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)


def is_bytes_like(value) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


def as_text(value: PathLike) -> str:
    """
    Convert a path value to engine text.

    Args:
        value: A str or a bytes-like object.

    Returns:
        The str itself, or the bytes decoded one character per byte.

    Raises:
        TypeError: If the value is neither str nor bytes-like.
    """
    if isinstance(value, str):
        return value
    if is_bytes_like(value):
        return bytes(value).decode(BYTE_ENCODING)
    raise TypeError(f"Expected str or bytes-like path, got {type(value).__name__}")


def coerce_paths(values: Iterable[PathLike]) -> Tuple[List[str], bool]:
    """
    Convert several path values that must share one type.

    Returns:
        Tuple of (texts, is_bytes). is_bytes tells the caller to encode
        its result back to bytes.

    Raises:
        TypeError: If str and bytes-like values are mixed.
    """
    values = list(values)
    kinds = {is_bytes_like(value) for value in values}
    if len(kinds) > 1:
        raise TypeError("Can't mix strings and bytes in path components")
    return [as_text(value) for value in values], kinds == {True}


def restore(text: str, as_bytes: bool) -> PathLike:
    """Turn engine text back into the caller's type."""
    if as_bytes:
        return text.encode(BYTE_ENCODING)
    return text


def as_buffer_text(value: PathLike) -> str:
    """
    Convert a value headed for a byte buffer into engine text.

    str values are encoded UTF-8 first so that every character of the
    resulting text stands for exactly one byte of the output buffer.
    """
    if isinstance(value, str):
        return value.encode(BUFFER_ENCODING).decode(BYTE_ENCODING)
    return as_text(value)


def fold_case(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)
