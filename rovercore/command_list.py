"""FIFO queue of motion commands awaiting execution."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, Optional

CMD_LIST_SIZE = 10


class MsgType(IntEnum):
    """Motion command types carried by PCCMD messages."""

    FORWARD = 1
    COUNTER_CLOCKWISE = 2
    CLOCKWISE = 3
    BACKWARD = 4


@dataclass
class Command:
    """A command type and how many control ticks it should run for."""

    type: int = 0
    time: int = 0


class CommandListFullError(Exception):
    """Raised when enqueuing onto a full command list."""


class CommandList:
    """Bounded FIFO of commands."""

    def __init__(self, capacity: int = CMD_LIST_SIZE) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: deque[Command] = deque()

    def is_full(self) -> bool:
        return len(self._items) == self.capacity

    def is_empty(self) -> bool:
        return not self._items

    def enqueue(self, cmd_type: int, cmd_time: int) -> None:
        """Add a command at the back; raise CommandListFullError if full."""
        if self.is_full():
            raise CommandListFullError("command list is full")
        self._items.append(Command(cmd_type, cmd_time))

    def dequeue(self) -> Optional[Command]:
        """Remove and return the front command, or None when the list is empty."""
        if self.is_empty():
            return None
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Command]:
        return iter(list(self._items))