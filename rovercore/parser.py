"""Byte-at-a-time parser for ``$TYPE,payload*`` messages."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

MAX_TYPE_LENGTH = 6
MAX_PAYLOAD_LENGTH = 100


class ParserState(IntEnum):
    """Where the parser is within a message."""

    DOLLAR = 1  # discarding input until a '$'
    TYPE = 2  # reading the type until a ','
    PAYLOAD = 3  # reading the payload until a '*'


@dataclass(frozen=True)
class Message:
    """A completely received message."""

    msg_type: str
    payload: str


def _as_char(byte: Union[str, int]) -> str:
    if isinstance(byte, int):
        if not 0 <= byte <= 255:
            raise ValueError("byte value out of range")
        return chr(byte)
    if len(byte) != 1:
        raise ValueError("byte must be a single character")
    return byte


class MessageParser:
    """State machine that turns a stream of bytes into messages."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Return to waiting for a '$'."""
        self.state = ParserState.DOLLAR
        self._type: list[str] = []
        self._payload: list[str] = []

    def feed(self, byte: Union[str, int]) -> Optional[Message]:
        """Process one byte; return a Message when one has just completed."""
        char = _as_char(byte)
        if self.state is ParserState.DOLLAR:
            if char == "$":
                self.state = ParserState.TYPE
                self._type = []
        elif self.state is ParserState.TYPE:
            if char == ",":
                self.state = ParserState.PAYLOAD
                self._payload = []
            elif len(self._type) == MAX_TYPE_LENGTH:
                self.state = ParserState.DOLLAR
                self._type = []
            elif char == "*":
                self.state = ParserState.DOLLAR
                return Message("".join(self._type), "")
            else:
                self._type.append(char)
        elif self.state is ParserState.PAYLOAD:
            if char == "*":
                self.state = ParserState.DOLLAR
                return Message("".join(self._type), "".join(self._payload))
            if len(self._payload) == MAX_PAYLOAD_LENGTH:
                self.state = ParserState.DOLLAR
                self._payload = []
            else:
                self._payload.append(char)
        return None

    def feed_all(self, data: Union[str, bytes, Iterable[Union[str, int]]]) -> list[Message]:
        """Feed every byte of ``data`` and return the messages completed."""
        return [msg for msg in map(self.feed, data) if msg is not None]


def extract_integer(text: str) -> int:
    """Read a signed decimal integer, stopping at a ',' or the end of the text."""
    sign = 1
    digits = text
    if digits[:1] == "-":
        sign = -1
        digits = digits[1:]
    elif digits[:1] == "+":
        digits = digits[1:]
    number = 0
    for char in digits.split(",", 1)[0]:
        number = number * 10 + (ord(char) - ord("0"))
    return sign * number


def next_value(msg: str, i: int) -> int:
    """Return the index where the value after position ``i`` starts."""
    comma = msg.find(",", i)
    if comma == -1:
        return max(i, len(msg))
    return comma + 1