"""Fixed-size ring buffer of characters, as used for the UART queues."""

from __future__ import annotations

from typing import Iterator

BUFFER_SIZE = 32


class BufferFullError(Exception):
    """Raised when writing to a buffer that has no free slot."""


class BufferEmptyError(Exception):
    """Raised when reading from a buffer that holds no unread data."""


class CircularBuffer:
    """Ring buffer of single characters.

    One slot is always kept free to tell a full buffer from an empty one,
    so a buffer of ``size`` slots holds at most ``size - 1`` characters.
    """

    def __init__(self, size: int = BUFFER_SIZE) -> None:
        if size < 2:
            raise ValueError("buffer size must be at least 2")
        self._slots: list[str] = [""] * size
        self._head = 0
        self._tail = 0
        self.size = size

    def is_full(self) -> bool:
        """True when the next write would catch up with the read position."""
        return (self._head + 1) % self.size == self._tail

    def is_empty(self) -> bool:
        """True when there is no unread data."""
        return self._head == self._tail

    def write(self, data: str) -> None:
        """Append one character; raise BufferFullError if there is no room."""
        if not isinstance(data, str) or len(data) != 1:
            raise ValueError("data must be a single character")
        if self.is_full():
            raise BufferFullError("circular buffer is full")
        self._slots[self._head] = data
        self._head = (self._head + 1) % self.size

    def write_all(self, text: str) -> int:
        """Write as many characters of ``text`` as fit; return how many were written.

        Characters that do not fit are dropped.
        """
        written = 0
        for char in text:
            try:
                self.write(char)
            except BufferFullError:
                break
            written += 1
        return written

    def read(self) -> str:
        """Remove and return the oldest character; raise BufferEmptyError if none."""
        if self.is_empty():
            raise BufferEmptyError("circular buffer is empty")
        data = self._slots[self._tail]
        self._tail = (self._tail + 1) % self.size
        return data

    def drain(self) -> Iterator[str]:
        """Yield characters until the buffer is empty."""
        while not self.is_empty():
            yield self.read()

    def __len__(self) -> int:
        return (self._head - self._tail) % self.size