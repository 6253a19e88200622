"""
Output protocol for producing operations.

Every producing operation writes its result through an OutputWriter and
returns the length the result has when nothing is truncated. Writes are
positional, so an operation can place a tail before the text in front of
it; in-place edits rely on that order.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..utils.encodings import BYTE_ENCODING, BytesLike
from .models import PathStyle


class OutputWriter(ABC):
    """
    Abstract sink for operation output.

    ``write`` always reports the full length of the text it was given,
    even when the sink could only keep part of it.
    """

    @property
    @abstractmethod
    def capacity(self) -> Optional[int]:
        """Maximum number of units kept, or None when unbounded."""
        pass

    @abstractmethod
    def write(self, position: int, text: str) -> int:
        """
        Write text starting at position.

        Returns:
            len(text), regardless of truncation.
        """
        pass

    @abstractmethod
    def terminate(self, position: int) -> None:
        """Mark the end of the output at position."""
        pass

    def write_separator(self, position: int, style: PathStyle) -> int:
        return self.write(position, style.separator)

    def write_current(self, position: int) -> int:
        return self.write(position, ".")

    def write_back(self, position: int) -> int:
        return self.write(position, "..")

    def write_dot(self, position: int) -> int:
        return self.write(position, ".")


class BufferWriter(OutputWriter):
    """
    Writer for a caller-supplied fixed-capacity byte buffer.

    Output beyond the capacity is dropped. If the capacity is not zero
    the output is always terminated by a zero byte, at the end position
    or at the last byte of the buffer, whichever comes first.
    """

    def __init__(self, buffer: BytesLike):
        if isinstance(buffer, memoryview):
            if buffer.readonly or buffer.format != "B":
                raise TypeError("Output buffer must be a writable byte memoryview")
        elif not isinstance(buffer, bytearray):
            raise TypeError(f"Output buffer must be a bytearray or memoryview, got {type(buffer).__name__}")
        self._buffer = buffer
        self._capacity = len(buffer)

    @property
    def capacity(self) -> int:
        return self._capacity

    def write(self, position: int, text: str) -> int:
        length = len(text)
        if self._capacity > position + length:
            amount = length
        elif self._capacity > position:
            amount = self._capacity - position
        else:
            amount = 0

        if amount > 0:
            self._buffer[position:position + amount] = text[:amount].encode(BYTE_ENCODING)

        return length

    def terminate(self, position: int) -> None:
        if self._capacity == 0:
            return
        if position >= self._capacity:
            self._buffer[self._capacity - 1] = 0
        else:
            self._buffer[position] = 0


class TextWriter(OutputWriter):
    """Unbounded writer collecting the output as a string."""

    def __init__(self):
        self._chars: List[str] = []

    @property
    def capacity(self) -> None:
        return None

    def write(self, position: int, text: str) -> int:
        end = position + len(text)
        if len(self._chars) < end:
            self._chars.extend("\0" * (end - len(self._chars)))
        self._chars[position:end] = text
        return len(text)

    def terminate(self, position: int) -> None:
        if len(self._chars) < position:
            self._chars.extend("\0" * (position - len(self._chars)))
        del self._chars[position:]

    def getvalue(self) -> str:
        return "".join(self._chars)
