"""Timer period and prescaler selection, and UART baud rate setting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

FCY = 72_000_000
BAUDRATE = 9600
PR_MAX = 0xFFFF
MAX_WAIT_CHUNK_MS = 200

_PRESCALERS = ((1, 0), (8, 1), (64, 2), (256, 3))


@dataclass(frozen=True)
class TimerConfig:
    """Prescaler, its TCKPS register code, and the PRx period value."""

    prescaler: int
    tckps: int
    period: int


def timer_config(ms: int) -> TimerConfig:
    """Choose a prescaler and period register value for a period of ``ms`` milliseconds.

    Raises ValueError for a negative period or one the 16-bit period register cannot hold.
    """
    if ms < 0:
        raise ValueError("period must not be negative")
    prescaler, tckps = _PRESCALERS[-1]
    for candidate, code in _PRESCALERS:
        if ms * (FCY // candidate) <= PR_MAX:
            prescaler, tckps = candidate, code
            break
    period = (FCY // prescaler) * ms // 1000
    if period > PR_MAX:
        raise ValueError(f"{ms} ms does not fit in a 16-bit period register")
    return TimerConfig(prescaler, tckps, period)


def wait_chunks(ms: int) -> Iterator[int]:
    """Yield the timer periods used to wait ``ms`` milliseconds, remainder first."""
    if ms < 0:
        raise ValueError("wait time must not be negative")
    remaining = ms
    while remaining:
        chunk = remaining % MAX_WAIT_CHUNK_MS or MAX_WAIT_CHUNK_MS
        yield chunk
        remaining -= chunk


def uart_brg_value(fcy: int = FCY, baudrate: int = BAUDRATE) -> int:
    """UART baud rate generator value for standard-speed mode."""
    if fcy <= 0 or baudrate <= 0:
        raise ValueError("clock and baud rate must be positive")
    value = fcy // baudrate // 16 - 1
    if value < 0:
        raise ValueError("baud rate too high for this clock")
    return value